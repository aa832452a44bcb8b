"""
Logging setup for api_client_manager.

This module provides handler configuration for the package logger with
structured or plain-text output and token masking.
"""

from .filters import SensitiveDataFilter
from .formatters import ContextFormatter, StructuredFormatter, record_context
from .manager import LoggingManager, cleanup_logging, setup_logging

__all__ = [
    "LoggingManager",
    "setup_logging",
    "cleanup_logging",
    "StructuredFormatter",
    "ContextFormatter",
    "record_context",
    "SensitiveDataFilter",
]
