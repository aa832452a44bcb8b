"""
GraphQL client manager.

This module provides the manager that hands out GraphQL clients shared by
the service SDKs of one process. Clients are built lazily per configuration
namespace, reused while the auth source stays the same and dropped all at
once when it changes.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import threading
from typing import Any, Dict, List, Mapping, Optional, Set, Union

from .auth import AuthSource, build_token_provider
from .config.loader import DEFAULT_CONFIG_NAMESPACE
from .config.models import ApiClientConfig, ClientOptions
from .config.resolver import ConfigurationResolver
from .config.store import ConfigurationStore
from .exceptions import (
    AuthSourceNotSetError,
    ConfigurationNotSetError,
    ConfigurationSetNotFoundError,
)
from .graphql.factory import ClientFactory, create_graphql_client

logger = logging.getLogger(__name__)


class ApiClientManager:
    """
    Manages GraphQL client instances shared by multiple service clients.

    The manager owns the auth source and a cache of clients keyed by
    configuration namespace. A namespace whose configuration equals the
    default namespace's configuration shares the default namespace's client.

    Examples:
        Default endpoint from an explicit configuration:
        ```python
        manager = ApiClientManager()
        client = (
            manager.set_config({"region": "us-east-1", "apiUrl": "https://api.example.com/graphql"})
            .set_auth_source(user_client)
            .get_client()
        )
        ```

        Service-specific endpoint from the configuration document:
        ```python
        store = ConfigurationStore()
        store.load_config("api_client_config.json")

        manager = ApiClientManager(store=store).set_auth_source(user_client)
        client = manager.get_client(config_namespace="identityService")
        ```
    """

    def __init__(
        self,
        store: Optional[ConfigurationStore] = None,
        client_factory: Optional[ClientFactory] = None,
        default_namespace: str = DEFAULT_CONFIG_NAMESPACE,
    ) -> None:
        """
        Initialize client manager.

        Args:
            store: Configuration store, the process-wide one if omitted
            client_factory: Factory building clients, GraphQLClient if omitted
            default_namespace: Namespace used when a request names none
        """
        self._resolver = ConfigurationResolver(store, default_namespace)
        self._client_factory: ClientFactory = client_factory or create_graphql_client
        self._auth_source: Optional[AuthSource] = None
        self._clients: Dict[str, Any] = {}
        # Dropped clients awaiting close, used when no event loop is running
        self._retired_clients: List[Any] = []
        self._closing_tasks: Set["asyncio.Task[None]"] = set()
        self._lock = threading.RLock()

    @property
    def default_namespace(self) -> str:
        return self._resolver.default_namespace

    @property
    def auth_source(self) -> Optional[AuthSource]:
        return self._auth_source

    @property
    def clients(self) -> Dict[str, Any]:
        """Snapshot of the cached clients by cache key."""
        with self._lock:
            return dict(self._clients)

    def set_auth_source(self, auth_source: AuthSource) -> "ApiClientManager":
        """
        Set the auth source used by every client.

        A different auth source invalidates all cached clients, since each
        of them fetches tokens from the previous one. Setting the same
        object again keeps the cache.

        Args:
            auth_source: Object exposing ``get_latest_auth_token()``

        Returns:
            This manager
        """
        with self._lock:
            if auth_source is not self._auth_source:
                self._auth_source = auth_source
                dropped = list(self._clients.values())
                self._clients = {}
                if dropped:
                    logger.info(
                        f"Auth source changed, invalidating {len(dropped)} cached client(s)",
                        extra={"client_count": len(dropped)},
                    )
                self._retire_clients(dropped)
        return self

    def set_config(
        self, config: Union[ApiClientConfig, Mapping[str, Any]]
    ) -> "ApiClientManager":
        """
        Set the configuration of the default namespace.

        Overrides whatever the configuration store holds for the default
        namespace. Clients already cached are kept.

        Args:
            config: ApiClientConfig or mapping with ``region`` and ``apiUrl``

        Returns:
            This manager
        """
        if not isinstance(config, ApiClientConfig):
            config = ApiClientConfig.model_validate(config)
        self._resolver.set_explicit_default(config)
        return self

    def unset_config(self) -> None:
        """
        Remove the explicit default configuration.

        The default namespace falls back to the configuration store again.
        Clients already cached are kept.
        """
        self._resolver.clear_explicit_default()

    def get_client(
        self, options: Optional[ClientOptions] = None, **kwargs: Any
    ) -> Any:
        """
        Get the client for a configuration namespace, building it if needed.

        Args:
            options: Client options; keyword arguments build one when omitted
            **kwargs: ClientOptions fields, e.g. ``config_namespace``

        Returns:
            Client built by the client factory

        Raises:
            ConfigurationNotSetError: If no configuration exists for the namespace
            AuthSourceNotSetError: If no auth source has been set
        """
        if options is None:
            options = ClientOptions(**kwargs)
        elif kwargs:
            values = {name: getattr(options, name) for name in ClientOptions.model_fields}
            values.update(options.model_extra or {})
            values.update(kwargs)
            options = ClientOptions(**values)

        namespace = options.config_namespace or self.default_namespace

        try:
            config = self._resolver.resolve(namespace)
        except ConfigurationSetNotFoundError as e:
            raise ConfigurationNotSetError(namespace=namespace) from e
        if config is None:
            raise ConfigurationNotSetError(namespace=namespace)

        cache_key = self._resolver.cache_key(namespace, config)

        with self._lock:
            auth_source = self._auth_source
            if auth_source is None:
                raise AuthSourceNotSetError()

            client = self._clients.get(cache_key)
            if client is None:
                client = self._client_factory(
                    endpoint=config,
                    token_provider=build_token_provider(auth_source),
                    options=options,
                )
                self._clients[cache_key] = client
                logger.debug(
                    f"Created client for namespace '{cache_key}' at {config.api_url}",
                    extra={
                        "namespace": namespace,
                        "cache_key": cache_key,
                        "api_url": config.api_url,
                    },
                )

        return client

    def get_api_client_config(self, namespace: Optional[str] = None) -> ApiClientConfig:
        """
        Get the endpoint configuration of a namespace.

        Does not build a client and does not need an auth source.

        Args:
            namespace: Configuration namespace, the default one if omitted

        Returns:
            Resolved endpoint configuration

        Raises:
            ConfigurationNotSetError: If no configuration is available
            ConfigurationSetNotFoundError: If the loaded document lacks the namespace
            ValueError: If the namespace is empty
        """
        if namespace is None:
            namespace = self.default_namespace
        elif not namespace:
            raise ValueError("Configuration namespace must not be empty")

        config = self._resolver.resolve(namespace)
        if config is None:
            raise ConfigurationNotSetError(namespace=namespace)
        return config

    async def reset(self) -> None:
        """
        Clear the local store of every cached client.

        Clients still waiting to be closed after an auth source change are
        closed first.
        """
        await self._close_retired_clients()

        clients = list(self.clients.values())
        if not clients:
            return

        await asyncio.gather(*(self._reset_client(client) for client in clients))
        logger.debug(
            f"Reset {len(clients)} client store(s)",
            extra={"client_count": len(clients)},
        )

    async def close(self) -> None:
        """Close every cached and retired client and empty the cache."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients = {}

        await self._close_retired_clients()
        for client in clients:
            await self._close_client(client)

    def _retire_clients(self, clients: List[Any]) -> None:
        """
        Release clients dropped from the cache. Caller holds the lock.

        Inside a running event loop every retired client is closed in the
        background. Without one, only clients still holding an open session
        are kept for the next reset() or close(); the rest are released.
        """
        candidates = self._retired_clients + clients
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._retired_clients = [
                client for client in candidates if getattr(client, "closed", True) is False
            ]
            return

        self._retired_clients = []
        for client in candidates:
            task = loop.create_task(self._close_retired_client(client))
            self._closing_tasks.add(task)
            task.add_done_callback(self._closing_tasks.discard)

    async def _close_retired_clients(self) -> None:
        with self._lock:
            retired = self._retired_clients
            self._retired_clients = []
            pending = list(self._closing_tasks)

        await asyncio.gather(
            *pending, *(self._close_retired_client(client) for client in retired)
        )

    async def _close_retired_client(self, client: Any) -> None:
        try:
            await self._close_client(client)
        except Exception as e:
            logger.warning(f"Failed to close retired client: {e}")

    @staticmethod
    async def _close_client(client: Any) -> None:
        close = getattr(client, "close", None)
        if close is None:
            return
        result = close()
        if inspect.isawaitable(result):
            await result

    @staticmethod
    async def _reset_client(client: Any) -> None:
        result = client.reset_store()
        if inspect.isawaitable(result):
            await result


_default_manager: Optional[ApiClientManager] = None
_default_manager_lock = threading.Lock()


def get_api_client_manager() -> ApiClientManager:
    """Get the process-wide client manager, creating it on first use."""
    global _default_manager
    if _default_manager is None:
        with _default_manager_lock:
            if _default_manager is None:
                _default_manager = ApiClientManager()
    return _default_manager
