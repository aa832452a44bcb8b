"""
Exception hierarchy for the API client manager.

This module defines the errors raised while resolving endpoint configuration
and while handing out GraphQL clients. Every error derives from
:class:`ApiClientManagerError` so callers can catch the whole family at once.
"""

from __future__ import annotations

from typing import Any, List, Optional


class ApiClientManagerError(Exception):
    """
    Base exception for all API client manager operations.

    Attributes:
        message: Human-readable error message
        details: Additional error details as keyword arguments
    """

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.details = kwargs


class ConfigurationError(ApiClientManagerError):
    """Base class for configuration problems."""

    pass


class ConfigurationNotSetError(ConfigurationError):
    """
    Raised when no configuration is available for a namespace.

    Occurs when neither an explicit default configuration nor a loaded
    configuration document can supply the endpoint for the requested
    namespace. Usually a startup-ordering bug in the caller.
    """

    def __init__(self, message: str = "Configuration not set.", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class ConfigurationSetNotFoundError(ConfigurationError):
    """
    Raised when the loaded configuration document lacks a namespace.

    Attributes:
        namespace: The configuration namespace that was looked up
    """

    def __init__(self, namespace: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"Configuration set not found: {namespace}", namespace=namespace
        )
        self.namespace = namespace


class InvalidConfigurationError(ConfigurationError):
    """
    Raised when a configuration subset exists but does not fit its shape.

    Attributes:
        namespace: The configuration namespace that failed validation
        errors: Validation error messages
    """

    def __init__(
        self, namespace: str, errors: Optional[List[str]] = None
    ) -> None:
        self.namespace = namespace
        self.errors = errors or []
        message = f"Invalid configuration set: {namespace}"
        if self.errors:
            message += " (" + "; ".join(self.errors) + ")"
        super().__init__(message, namespace=namespace, errors=self.errors)


class AuthSourceNotSetError(ApiClientManagerError):
    """Raised when a client is requested before an auth source was registered."""

    def __init__(self, message: str = "Auth source has not been set.") -> None:
        super().__init__(message)


__all__ = [
    "ApiClientManagerError",
    "ConfigurationError",
    "ConfigurationNotSetError",
    "ConfigurationSetNotFoundError",
    "InvalidConfigurationError",
    "AuthSourceNotSetError",
]
