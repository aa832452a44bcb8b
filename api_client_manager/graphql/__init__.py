"""
GraphQL support for api_client_manager.

This module provides the GraphQL client handed out by the client manager,
its local response store and the factory protocol used to build clients.
"""

from .cache import ResponseCache
from .client import GraphQLClient, GraphQLClientConfig
from .factory import ClientFactory, create_graphql_client
from .models import (
    GraphQLError,
    GraphQLMutation,
    GraphQLNetworkError,
    GraphQLOperationType,
    GraphQLQuery,
    GraphQLResult,
    GraphQLTimeoutError,
)

__all__ = [
    # Client
    "GraphQLClient",
    "GraphQLClientConfig",
    "ResponseCache",
    # Factory
    "ClientFactory",
    "create_graphql_client",
    # Models
    "GraphQLQuery",
    "GraphQLMutation",
    "GraphQLOperationType",
    "GraphQLResult",
    "GraphQLError",
    "GraphQLNetworkError",
    "GraphQLTimeoutError",
]
