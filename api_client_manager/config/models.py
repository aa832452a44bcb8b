"""
Configuration models for the API client manager.

This module defines Pydantic models for endpoint configuration, per-request
client options and logging configuration.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class ApiClientConfig(BaseModel):
    """
    Endpoint configuration for one backend API namespace.

    Instances are immutable. Two configurations are equivalent when both
    ``region`` and ``api_url`` compare equal.
    """

    region: str = Field(description="Region the API is deployed in")
    api_url: str = Field(alias="apiUrl", description="GraphQL endpoint URL")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    def to_dict(self) -> Dict[str, str]:
        """Convert to the document representation (``region``, ``apiUrl``)."""
        return self.model_dump(by_alias=True)


class ClientOptions(BaseModel):
    """
    Options controlling where and how a GraphQL client connects.

    Any option not declared here is kept and forwarded verbatim to the
    client factory.
    """

    config_namespace: Optional[str] = Field(
        default=None,
        alias="configNamespace",
        min_length=1,
        description="Configuration namespace of the service endpoint to use",
    )
    disable_offline: bool = Field(
        default=False, description="Disable the client's local response store"
    )
    storage: Optional[Any] = Field(
        default=None, description="Mutable mapping backing the local response store"
    )
    cache: Optional[Any] = Field(
        default=None, description="Response cache instance to use instead of a new one"
    )
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Extra headers sent with every request"
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")

    model_config = ConfigDict(
        populate_by_name=True, extra="allow", arbitrary_types_allowed=True
    )

    def transport_options(self) -> Dict[str, Any]:
        """Options meant for the client factory, without the namespace selector."""
        options = {
            name: getattr(self, name)
            for name in type(self).model_fields
            if name != "config_namespace"
        }
        options.update(self.model_extra or {})
        return options


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default=LogLevel.INFO, description="Default logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format",
    )
    file_path: Optional[Path] = Field(default=None, description="Log file path")
    max_file_size: int = Field(
        default=10 * 1024 * 1024, description="Max log file size in bytes"
    )
    backup_count: int = Field(default=5, description="Number of backup log files")
    enable_console: bool = Field(default=True, description="Enable console logging")
    enable_file: bool = Field(default=False, description="Enable file logging")
    enable_structured: bool = Field(
        default=False, description="Enable structured JSON logging"
    )

    # Component-specific log levels
    component_levels: Dict[str, LogLevel] = Field(
        default_factory=dict, description="Per-component log levels"
    )
