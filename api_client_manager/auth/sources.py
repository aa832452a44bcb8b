"""
Ready-made auth sources.

Applications usually plug in their own user client; these cover the simple
cases of a fixed token and a token function.
"""

from __future__ import annotations

from typing import Awaitable, Callable, Union

from ..exceptions import ApiClientManagerError


class AuthenticationError(ApiClientManagerError):
    """Authentication-specific error."""
    pass


class StaticTokenSource:
    """
    Auth source that always returns the same token.

    Example:
        ```python
        manager.set_auth_source(StaticTokenSource("eyJraWQiOi..."))
        ```
    """

    def __init__(self, token: str):
        """
        Initialize static token source.

        Args:
            token: Token value returned on every call
        """
        self.token = token

    def get_latest_auth_token(self) -> str:
        if not self.token:
            raise AuthenticationError("Token is required but not provided")
        return self.token


class CallableTokenSource:
    """
    Auth source backed by a function.

    The function may be synchronous or a coroutine function; it is called on
    every token lookup, so it should do its own caching and refreshing.

    Example:
        ```python
        async def latest_token():
            return await user_client.get_latest_auth_token()

        manager.set_auth_source(CallableTokenSource(latest_token))
        ```
    """

    def __init__(self, func: Callable[[], Union[str, Awaitable[str]]]):
        """
        Initialize callable token source.

        Args:
            func: Function returning a token or an awaitable token
        """
        self._func = func

    def get_latest_auth_token(self) -> Union[str, Awaitable[str]]:
        return self._func()
