"""
GraphQL client implementation.

This module provides the GraphQL client constructed by the client manager for
each endpoint configuration. It posts operations over aiohttp, attaches the
token supplied by its token provider and keeps query results in a local
response store.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from typing import Any, Dict, Optional

import aiohttp
from pydantic import BaseModel, Field

from ..auth import EMPTY_TOKEN, TokenProvider
from .cache import ResponseCache
from .models import (
    GraphQLError,
    GraphQLMutation,
    GraphQLNetworkError,
    GraphQLOperationType,
    GraphQLQuery,
    GraphQLResult,
    GraphQLTimeoutError,
)

logger = logging.getLogger(__name__)


class GraphQLClientConfig(BaseModel):
    """Configuration for GraphQL client."""

    # Endpoint settings
    endpoint: str = Field(description="GraphQL endpoint URL")
    region: Optional[str] = Field(default=None, description="Region of the endpoint")

    # Request settings
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(default_factory=dict, description="Default headers for requests")
    auth_header_name: str = Field(default="Authorization", description="Header carrying the token")

    # Local store
    disable_offline: bool = Field(default=False, description="Do not keep query results locally")

    include_extensions: bool = Field(default=True, description="Include extensions in response")


class GraphQLClient:
    """
    GraphQL client bound to one endpoint and one token provider.

    Examples:
        ```python
        config = GraphQLClientConfig(endpoint="https://api.example.com/graphql")

        async with GraphQLClient(config, token_provider) as client:
            result = await client.execute(
                GraphQLQuery(
                    query="query GetUser($id: ID!) { user(id: $id) { name } }",
                    variables={"id": "123"},
                )
            )
            if result.success:
                print(result.get_data("user.name"))
        ```
    """

    def __init__(
        self,
        config: GraphQLClientConfig,
        token_provider: Optional[TokenProvider] = None,
        cache: Optional[ResponseCache] = None,
    ):
        """
        Initialize GraphQL client.

        Args:
            config: GraphQL client configuration
            token_provider: Async callable returning the token for each request
            cache: Local response store, a new one if omitted
        """
        self.config = config
        self.token_provider = token_provider
        self.cache = cache if cache is not None else ResponseCache()
        self._session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "GraphQLClient":
        await self._create_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    @property
    def closed(self) -> bool:
        return self._session is None or self._session.closed

    async def _create_session(self) -> None:
        """Create HTTP session."""
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self.config.timeout)
            self._session = aiohttp.ClientSession(timeout=timeout)

    async def close(self) -> None:
        """Close HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def execute(self, query: GraphQLQuery, use_cache: bool = True) -> GraphQLResult:
        """
        Execute a GraphQL operation.

        Args:
            query: GraphQL query or mutation
            use_cache: Whether to use the local response store for queries

        Returns:
            GraphQLResult with operation result

        Raises:
            GraphQLNetworkError: If the endpoint cannot be reached
            GraphQLTimeoutError: If the request times out
            GraphQLError: If the response is not valid JSON
        """
        cacheable = use_cache and self._is_cacheable(query)
        cache_key = ResponseCache.key_for(query) if cacheable else None
        if cache_key is not None:
            cached = self.cache.get(cache_key)
            if cached is not None:
                return cached

        await self._create_session()
        # Guard for type checker/runtime
        if self._session is None:
            raise GraphQLError("HTTP session is not initialized")

        headers = self.config.headers.copy()
        headers["Content-Type"] = "application/json"
        token = await self._get_token()
        if token:
            headers[self.config.auth_header_name] = token

        start_time = time.time()
        try:
            async with self._session.post(
                self.config.endpoint, json=query.to_dict(), headers=headers
            ) as response:
                response_text = await response.text()
                status = response.status
        except asyncio.TimeoutError as e:
            raise GraphQLTimeoutError(
                f"GraphQL request timeout: {str(e)}",
                timeout_value=self.config.timeout,
                endpoint=self.config.endpoint,
                query=query.query,
            ) from e
        except aiohttp.ClientError as e:
            raise GraphQLNetworkError(
                f"GraphQL network error: {str(e)}",
                endpoint=self.config.endpoint,
                query=query.query,
            ) from e
        response_time = time.time() - start_time

        try:
            response_data = json.loads(response_text) if response_text else {}
        except json.JSONDecodeError:
            raise GraphQLError(
                f"Invalid JSON response: {response_text}",
                endpoint=self.config.endpoint,
                status_code=status,
            )
        if not isinstance(response_data, dict):
            raise GraphQLError(
                f"Unexpected GraphQL response: {response_text}",
                endpoint=self.config.endpoint,
                status_code=status,
            )

        errors = response_data.get("errors") or []
        result = GraphQLResult(
            success=status == 200 and not errors,
            data=response_data.get("data"),
            errors=errors,
            extensions=(
                response_data.get("extensions")
                if self.config.include_extensions
                else None
            ),
            response_time=response_time,
            status_code=status,
        )

        if result.has_errors:
            logger.debug(
                f"GraphQL errors from {self.config.endpoint}: {'; '.join(result.error_messages)}"
            )

        if cache_key is not None and result.success:
            self.cache.set(cache_key, result)

        return result

    async def reset_store(self) -> None:
        """Clear every locally stored result."""
        self.cache.clear()

    def _is_cacheable(self, query: GraphQLQuery) -> bool:
        return (
            not self.config.disable_offline
            and query.operation_type == GraphQLOperationType.QUERY
            and not isinstance(query, GraphQLMutation)
        )

    async def _get_token(self) -> str:
        if self.token_provider is None:
            return EMPTY_TOKEN
        return await self.token_provider()
