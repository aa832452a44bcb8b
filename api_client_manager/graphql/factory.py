"""
Client factory used by the client manager.

A factory turns a resolved endpoint configuration, a token provider and the
caller's client options into a client object. Any factory works as long as
the clients it builds expose an async ``reset_store()``.
"""

from __future__ import annotations

from typing import Any, Protocol

from ..auth import TokenProvider
from ..config.models import ApiClientConfig, ClientOptions
from .cache import ResponseCache
from .client import GraphQLClient, GraphQLClientConfig


class ClientFactory(Protocol):
    """Builds a client for one endpoint."""

    def __call__(
        self,
        endpoint: ApiClientConfig,
        token_provider: TokenProvider,
        options: ClientOptions,
    ) -> Any:
        ...


def create_graphql_client(
    endpoint: ApiClientConfig,
    token_provider: TokenProvider,
    options: ClientOptions,
) -> GraphQLClient:
    """
    Default client factory building a :class:`GraphQLClient`.

    Transport options not understood by :class:`GraphQLClientConfig` are
    ignored.
    """
    transport = options.transport_options()

    cache = transport.pop("cache", None)
    storage = transport.pop("storage", None)
    if cache is None:
        cache = ResponseCache(storage=storage)

    known = {
        name: value
        for name, value in transport.items()
        if name in GraphQLClientConfig.model_fields
    }
    config = GraphQLClientConfig(
        endpoint=endpoint.api_url,
        region=endpoint.region,
        **known,
    )
    return GraphQLClient(config, token_provider=token_provider, cache=cache)
