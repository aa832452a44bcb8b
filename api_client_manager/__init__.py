"""
Shared GraphQL client management for service SDKs.

This package resolves endpoint configuration per configuration namespace and
hands out GraphQL clients that are built lazily, shared between namespaces
pointing at the same endpoint and dropped when the auth source changes.

Features:
- Explicit default endpoint configuration with fallback to a configuration document
- Configuration documents from JSON/YAML files, JSON text or environment variables
- One cached client per distinct endpoint, rebuilt on auth source changes
- Token providers that never fail client construction
- aiohttp-based GraphQL client with a resettable local response store
"""

from .auth import (
    EMPTY_TOKEN,
    AuthSource,
    CallableTokenSource,
    StaticTokenSource,
    TokenResult,
    build_token_provider,
)
from .config import (
    DEFAULT_CONFIG_NAMESPACE,
    ApiClientConfig,
    ClientOptions,
    ConfigLoader,
    ConfigurationResolver,
    ConfigurationStore,
    LoggingConfig,
    derive_cache_key,
)
from .exceptions import (
    ApiClientManagerError,
    AuthSourceNotSetError,
    ConfigurationError,
    ConfigurationNotSetError,
    ConfigurationSetNotFoundError,
    InvalidConfigurationError,
)
from .graphql import (
    ClientFactory,
    GraphQLClient,
    GraphQLClientConfig,
    GraphQLError,
    GraphQLMutation,
    GraphQLQuery,
    GraphQLResult,
    ResponseCache,
    create_graphql_client,
)
from .logging import setup_logging
from .manager import ApiClientManager, get_api_client_manager

__version__ = "0.1.0"

__all__ = [
    # Manager
    "ApiClientManager",
    "get_api_client_manager",
    # Configuration
    "DEFAULT_CONFIG_NAMESPACE",
    "ApiClientConfig",
    "ClientOptions",
    "ConfigLoader",
    "ConfigurationResolver",
    "ConfigurationStore",
    "LoggingConfig",
    "derive_cache_key",
    # Auth
    "EMPTY_TOKEN",
    "AuthSource",
    "CallableTokenSource",
    "StaticTokenSource",
    "TokenResult",
    "build_token_provider",
    # GraphQL
    "ClientFactory",
    "GraphQLClient",
    "GraphQLClientConfig",
    "GraphQLError",
    "GraphQLMutation",
    "GraphQLQuery",
    "GraphQLResult",
    "ResponseCache",
    "create_graphql_client",
    # Exceptions
    "ApiClientManagerError",
    "AuthSourceNotSetError",
    "ConfigurationError",
    "ConfigurationNotSetError",
    "ConfigurationSetNotFoundError",
    "InvalidConfigurationError",
    # Logging
    "setup_logging",
]
