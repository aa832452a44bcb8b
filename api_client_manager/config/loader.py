"""
Configuration document loader for the API client manager.

This module handles loading the process-wide configuration document from
configuration files, JSON text and environment variables. A document maps
configuration namespaces (``apiService``, ``identityService``, ...) to
their configuration subsets.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG_NAMESPACE = "apiService"


class ConfigLoader:
    """Configuration document loader with support for multiple sources."""

    def __init__(self) -> None:
        """Initialize configuration loader."""
        self.config_paths = [
            Path("api_client_config.json"),
            Path("api_client_config.yaml"),
            Path("api_client_config.yml"),
            Path("config/api_client_config.json"),
            Path("config/api_client_config.yaml"),
            Path("config/api_client_config.yml"),
            Path.home() / ".api_client_manager" / "config.json",
            Path.home() / ".api_client_manager" / "config.yaml",
            Path.home() / ".api_client_manager" / "config.yml",
        ]

        # Environment variable prefix
        self.env_prefix = "API_CLIENT_MANAGER_"

    def load_document(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """
        Load the configuration document from all available sources.

        Args:
            config_file: Specific config file to load

        Returns:
            Merged configuration document, or None if no source supplied one
        """
        document = self._load_from_file(config_file)

        env_overrides = self._load_from_environment()
        if env_overrides:
            document = self._deep_merge(document or {}, env_overrides)

        return document

    def parse_text(self, text: str) -> Optional[Dict[str, Any]]:
        """
        Parse a JSON configuration document.

        Blank text yields None, meaning no document.
        """
        if not text or not text.strip():
            return None

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Failed to parse configuration document: {e}")

        if not isinstance(document, dict):
            raise ValueError("Configuration document must be a JSON object")
        return document

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        if config_file is None:
            config_file = os.getenv(f"{self.env_prefix}CONFIG_FILE")

        if config_file:
            # Use specific file
            config_path = Path(config_file)
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
            return self._parse_config_file(config_path)

        # Search for config files
        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                suffix = config_path.suffix.lower()
                if suffix in (".yaml", ".yml"):
                    document = yaml.safe_load(f)
                elif suffix == ".json":
                    document = json.load(f)
                else:
                    raise ValueError(
                        f"Unsupported config file format: {config_path.suffix}"
                    )
        except Exception as e:
            raise ValueError(f"Failed to parse config file {config_path}: {e}")

        if document is None:
            return {}
        if not isinstance(document, dict):
            raise ValueError(
                f"Config file {config_path} must contain a mapping of namespaces, "
                f"got {type(document).__name__}"
            )
        return document

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load default namespace overrides from environment variables."""
        config: Dict[str, Any] = {}

        env_mappings = {
            f"{self.env_prefix}API_URL": (DEFAULT_CONFIG_NAMESPACE, "apiUrl"),
            f"{self.env_prefix}REGION": (DEFAULT_CONFIG_NAMESPACE, "region"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                current = config
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = value

        return config

    def _deep_merge(
        self, base: Dict[str, Any], override: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
