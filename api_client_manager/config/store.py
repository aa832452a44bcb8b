"""
Configuration store for the API client manager.

The store holds the process-wide configuration document and binds named
configuration subsets to Pydantic models.
"""

import copy
import logging
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..exceptions import (
    ConfigurationNotSetError,
    ConfigurationSetNotFoundError,
    InvalidConfigurationError,
)
from .loader import ConfigLoader

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConfigurationStore:
    """Holds one configuration document and exposes its namespaces."""

    _instance: Optional["ConfigurationStore"] = None
    _lock = threading.Lock()

    def __init__(self, loader: Optional[ConfigLoader] = None) -> None:
        """
        Initialize configuration store.

        Args:
            loader: Loader used for files and JSON text
        """
        self._document: Optional[Dict[str, Any]] = None
        self._loader = loader or ConfigLoader()
        self._config_file: Optional[Path] = None
        self._instance_lock: threading.RLock = threading.RLock()

    @classmethod
    def get_instance(cls) -> "ConfigurationStore":
        """Get the process-wide configuration store."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide store so the next access creates a fresh one."""
        with cls._lock:
            cls._instance = None

    @property
    def is_loaded(self) -> bool:
        """Whether a configuration document is loaded."""
        return self._document is not None

    def set_config(self, text: str) -> None:
        """
        Load the configuration document from JSON text.

        Blank text unloads the current document.

        Raises:
            ValueError: If the text is not a JSON object
        """
        document = self._loader.parse_text(text)
        with self._instance_lock:
            self._document = document
            self._config_file = None

        if document is None:
            logger.info("Configuration document cleared")
        else:
            logger.info(f"Configuration loaded with namespaces: {sorted(document)}")

    def load_from_dict(self, document: Dict[str, Any]) -> None:
        """
        Load the configuration document from a dictionary.

        Args:
            document: Mapping of namespace to configuration subset
        """
        with self._instance_lock:
            self._document = copy.deepcopy(dict(document))
            self._config_file = None

        logger.info("Configuration loaded from dictionary")

    def load_config(self, config_file: Optional[Union[str, Path]] = None) -> bool:
        """
        Load the configuration document from files and environment.

        Args:
            config_file: Specific config file to load

        Returns:
            True if a document was found and loaded
        """
        with self._instance_lock:
            try:
                document = self._loader.load_document(config_file)
            except Exception as e:
                logger.error(f"Failed to load configuration: {e}")
                raise

            if document is None:
                logger.debug("No configuration document found")
                return False

            self._document = document
            self._config_file = Path(config_file) if config_file else None
            logger.info("Configuration loaded successfully")
            return True

    def reload_config(self) -> bool:
        """Reload configuration from the file it was last loaded from."""
        return self.load_config(self._config_file)

    def get_config(self) -> Dict[str, Any]:
        """
        Get a copy of the loaded configuration document.

        Raises:
            ConfigurationNotSetError: If no document is loaded
        """
        with self._instance_lock:
            if self._document is None:
                raise ConfigurationNotSetError()
            return copy.deepcopy(self._document)

    def bind_config_set(self, model: Type[ModelT], namespace: str) -> ModelT:
        """
        Bind the configuration subset for a namespace to a model.

        Args:
            model: Pydantic model declaring the required fields
            namespace: Configuration namespace to bind

        Returns:
            Validated model instance

        Raises:
            ConfigurationNotSetError: If no document is loaded
            ConfigurationSetNotFoundError: If the document lacks the namespace
            InvalidConfigurationError: If the subset does not fit the model
        """
        with self._instance_lock:
            if self._document is None:
                raise ConfigurationNotSetError()
            subset = self._document.get(namespace)

        if not isinstance(subset, dict):
            raise ConfigurationSetNotFoundError(namespace)

        try:
            return model.model_validate(subset)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]
            raise InvalidConfigurationError(namespace, errors) from e
