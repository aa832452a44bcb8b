"""
Namespace configuration resolution.

Turns a configuration namespace into an :class:`ApiClientConfig`. The default
namespace may carry an explicit override; every other namespace is always read
from the configuration store.
"""

import logging
from typing import Optional

from ..exceptions import ConfigurationNotSetError, ConfigurationSetNotFoundError
from .loader import DEFAULT_CONFIG_NAMESPACE
from .models import ApiClientConfig
from .store import ConfigurationStore

logger = logging.getLogger(__name__)


class ConfigurationResolver:
    """Resolves endpoint configuration per namespace."""

    def __init__(
        self,
        store: Optional[ConfigurationStore] = None,
        default_namespace: str = DEFAULT_CONFIG_NAMESPACE,
    ) -> None:
        """
        Initialize configuration resolver.

        Args:
            store: Configuration store, the process-wide one if omitted
            default_namespace: Name of the default namespace
        """
        self._store = store
        self.default_namespace = default_namespace
        self._explicit_default: Optional[ApiClientConfig] = None

    @property
    def store(self) -> ConfigurationStore:
        """Configuration store consulted for namespace lookups."""
        if self._store is None:
            return ConfigurationStore.get_instance()
        return self._store

    @property
    def explicit_default(self) -> Optional[ApiClientConfig]:
        """Configuration currently installed for the default namespace."""
        return self._explicit_default

    def set_explicit_default(self, config: ApiClientConfig) -> None:
        """Install a configuration that overrides the store for the default namespace."""
        self._explicit_default = config

    def clear_explicit_default(self) -> None:
        """Remove the default namespace override."""
        self._explicit_default = None

    def is_default_namespace(self, namespace: str) -> bool:
        return namespace == self.default_namespace

    def resolve(self, namespace: str) -> Optional[ApiClientConfig]:
        """
        Resolve the configuration for a namespace.

        The default namespace resolves to the explicit default, falling back to
        the store; the store result is remembered as the explicit default. A
        missing default configuration yields None.

        Raises:
            ConfigurationNotSetError: No document loaded (non-default namespaces)
            ConfigurationSetNotFoundError: Namespace missing (non-default namespaces)
            InvalidConfigurationError: The namespace's subset is malformed
        """
        if self.is_default_namespace(namespace):
            return self._resolve_default()
        return self.store.bind_config_set(ApiClientConfig, namespace)

    def is_equivalent_to_default(self, config: ApiClientConfig) -> bool:
        """True if an explicit default is set and equals ``config``."""
        return self._explicit_default is not None and config == self._explicit_default

    def cache_key(self, namespace: str, config: ApiClientConfig) -> str:
        """
        Compute the client cache key for a resolved namespace.

        A namespace whose configuration equals the default configuration
        shares the default namespace's cache slot.

        Args:
            namespace: Requested configuration namespace
            config: Configuration resolved for ``namespace``

        Returns:
            Cache key for the client
        """
        if self.is_equivalent_to_default(config):
            return self.default_namespace
        return namespace

    def _resolve_default(self) -> Optional[ApiClientConfig]:
        if self._explicit_default is None:
            try:
                self._explicit_default = self.store.bind_config_set(
                    ApiClientConfig, self.default_namespace
                )
            except (ConfigurationNotSetError, ConfigurationSetNotFoundError) as e:
                logger.debug(f"No store configuration for default namespace: {e}")
                return None
        return self._explicit_default


def derive_cache_key(
    namespace: str,
    config: ApiClientConfig,
    default_config: Optional[ApiClientConfig],
    default_namespace: str = DEFAULT_CONFIG_NAMESPACE,
) -> str:
    """
    Compute the client cache key against a given default configuration.

    Applies :meth:`ConfigurationResolver.cache_key` without consulting any
    configuration store.

    Args:
        namespace: Requested configuration namespace
        config: Configuration resolved for ``namespace``
        default_config: Current default configuration, if any
        default_namespace: Name of the default namespace

    Returns:
        Cache key for the client
    """
    resolver = ConfigurationResolver(default_namespace=default_namespace)
    if default_config is not None:
        resolver.set_explicit_default(default_config)
    return resolver.cache_key(namespace, config)
