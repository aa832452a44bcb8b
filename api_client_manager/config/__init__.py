"""
Configuration management for api_client_manager.

This module provides endpoint configuration models, the configuration
document store and per-namespace configuration resolution.
"""

from .loader import DEFAULT_CONFIG_NAMESPACE, ConfigLoader
from .models import ApiClientConfig, ClientOptions, LoggingConfig, LogLevel
from .resolver import ConfigurationResolver, derive_cache_key
from .store import ConfigurationStore

__all__ = [
    "DEFAULT_CONFIG_NAMESPACE",
    "ApiClientConfig",
    "ClientOptions",
    "LoggingConfig",
    "LogLevel",
    "ConfigLoader",
    "ConfigurationStore",
    "ConfigurationResolver",
    "derive_cache_key",
]
