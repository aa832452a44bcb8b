"""
Authentication support for api_client_manager.

This module provides the auth source interface consumed by the client
manager and the token provider handed to GraphQL clients.
"""

from .base import (
    EMPTY_TOKEN,
    AuthSource,
    TokenProvider,
    TokenResult,
    build_token_provider,
    fetch_token,
)
from .sources import AuthenticationError, CallableTokenSource, StaticTokenSource

__all__ = [
    "EMPTY_TOKEN",
    "AuthSource",
    "TokenProvider",
    "TokenResult",
    "build_token_provider",
    "fetch_token",
    "AuthenticationError",
    "CallableTokenSource",
    "StaticTokenSource",
]
