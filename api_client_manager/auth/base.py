"""
Auth source interface and token provider construction.

An auth source is anything that can hand out the latest bearer token,
synchronously or asynchronously. Clients never call it directly; they receive
a token provider that turns a failed lookup into an empty token so the
request fails at the transport layer with a processable error.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol, Union, runtime_checkable

logger = logging.getLogger(__name__)

# Sent when the auth source fails to produce a token.
EMPTY_TOKEN = ""

TokenProvider = Callable[[], Awaitable[str]]


@runtime_checkable
class AuthSource(Protocol):
    """Produces bearer tokens for GraphQL requests."""

    def get_latest_auth_token(self) -> Union[str, Awaitable[str]]:
        """Return the latest token, or an awaitable resolving to it."""
        ...


@dataclass
class TokenResult:
    """Result of a token lookup."""

    success: bool
    token: str = EMPTY_TOKEN
    error: Optional[str] = None


async def fetch_token(source: AuthSource) -> TokenResult:
    """
    Ask an auth source for its latest token.

    Args:
        source: Auth source to query

    Returns:
        TokenResult carrying either the token or the failure message
    """
    try:
        token = source.get_latest_auth_token()
        if inspect.isawaitable(token):
            token = await token
    except Exception as e:
        return TokenResult(success=False, error=f"{type(e).__name__}: {e}")

    if not isinstance(token, str):
        return TokenResult(
            success=False, error=f"Auth source returned {type(token).__name__}, not str"
        )
    return TokenResult(success=True, token=token)


def build_token_provider(source: AuthSource) -> TokenProvider:
    """
    Wrap an auth source in a token provider for client construction.

    The provider never raises: a failed lookup yields :data:`EMPTY_TOKEN`.
    """

    async def token_provider() -> str:
        result = await fetch_token(source)
        if not result.success:
            logger.warning(f"Auth token retrieval failed, sending empty token: {result.error}")
            return EMPTY_TOKEN
        return result.token

    return token_provider
