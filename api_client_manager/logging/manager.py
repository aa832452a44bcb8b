"""
Logging manager for api_client_manager.

This module configures the handlers of the package logger.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Optional

from ..config.models import LoggingConfig, LogLevel
from .filters import SensitiveDataFilter
from .formatters import ContextFormatter, StructuredFormatter

PACKAGE_LOGGER = "api_client_manager"


class LoggingManager:
    """Centralized logging manager."""

    def __init__(self, logger_name: str = PACKAGE_LOGGER) -> None:
        """
        Initialize logging manager.

        Args:
            logger_name: Logger whose handlers are managed
        """
        self.logger_name = logger_name
        self._configured = False
        self._handlers: Dict[str, logging.Handler] = {}

    @property
    def logger(self) -> logging.Logger:
        return logging.getLogger(self.logger_name)

    def setup_logging(self, config: LoggingConfig) -> None:
        """
        Setup logging based on configuration.

        Args:
            config: Logging configuration
        """
        if self._configured:
            self.cleanup()

        self.logger.setLevel(getattr(logging, config.level.value))

        if config.enable_console:
            self._setup_console_handler(config)

        if config.enable_file and config.file_path:
            self._setup_file_handler(config)

        for component, level in config.component_levels.items():
            logging.getLogger(component).setLevel(getattr(logging, level.value))

        self._configured = True
        self.logger.info("Logging system configured successfully")

    def _setup_console_handler(self, config: LoggingConfig) -> None:
        """Setup console logging handler."""
        handler = logging.StreamHandler(sys.stdout)

        formatter: logging.Formatter
        if config.enable_structured:
            formatter = StructuredFormatter()
        else:
            formatter = ContextFormatter(config.format)

        self.add_handler("console", handler, formatter, config.level)

    def _setup_file_handler(self, config: LoggingConfig) -> None:
        """Setup file logging handler."""
        log_path = Path(str(config.file_path))
        log_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            filename=str(log_path),
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )

        formatter: logging.Formatter
        if config.enable_structured:
            formatter = StructuredFormatter()
        else:
            formatter = ContextFormatter(config.format)

        self.add_handler("file", handler, formatter, config.level)

    def add_handler(
        self,
        name: str,
        handler: logging.Handler,
        formatter: Optional[logging.Formatter] = None,
        level: Optional[LogLevel] = None,
    ) -> None:
        """
        Add a logging handler with token masking.

        Args:
            name: Handler name
            handler: Logging handler
            formatter: Formatter for the handler
            level: Handler level
        """
        if formatter is not None:
            handler.setFormatter(formatter)
        if level is not None:
            handler.setLevel(getattr(logging, level.value))
        handler.addFilter(SensitiveDataFilter())

        self.logger.addHandler(handler)
        self._handlers[name] = handler

    def set_level(self, level: LogLevel, component: Optional[str] = None) -> None:
        """
        Set logging level.

        Args:
            level: New logging level
            component: Specific component (None for the package logger)
        """
        log_level = getattr(logging, level.value)

        if component:
            logging.getLogger(component).setLevel(log_level)
        else:
            self.logger.setLevel(log_level)
            for handler in self._handlers.values():
                handler.setLevel(log_level)

    def cleanup(self) -> None:
        """Remove and close the managed handlers."""
        for handler in list(self._handlers.values()):
            self.logger.removeHandler(handler)
            handler.close()

        self._handlers.clear()
        self._configured = False

    def is_configured(self) -> bool:
        """Check if logging is configured."""
        return self._configured


# Global logging manager instance
_logging_manager = LoggingManager()


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Setup logging with configuration.

    Args:
        config: Logging configuration, defaults if omitted
    """
    _logging_manager.setup_logging(config or LoggingConfig())


def cleanup_logging() -> None:
    """Cleanup logging system."""
    _logging_manager.cleanup()
