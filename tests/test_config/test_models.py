"""
Tests for configuration models.
"""

import pytest
from pydantic import ValidationError

from api_client_manager.config.models import (
    ApiClientConfig,
    ClientOptions,
    LoggingConfig,
    LogLevel,
)


class TestApiClientConfig:
    """Test endpoint configuration model."""

    def test_creation_from_document_keys(self):
        """Test creation using the document field names."""
        config = ApiClientConfig.model_validate(
            {"region": "us-east-1", "apiUrl": "https://aws"}
        )

        assert config.region == "us-east-1"
        assert config.api_url == "https://aws"

    def test_creation_from_python_names(self):
        """Test creation using Python field names."""
        config = ApiClientConfig(region="us-west-2", api_url="https://api.example.com/graphql")

        assert config.api_url == "https://api.example.com/graphql"

    def test_extra_fields_ignored(self):
        """Test that extra keys of a configuration subset are dropped."""
        config = ApiClientConfig.model_validate(
            {"region": "us-east-1", "apiUrl": "https://aws", "poolId": "pool", "pbkdfRounds": 100000}
        )

        assert config.to_dict() == {"region": "us-east-1", "apiUrl": "https://aws"}

    @pytest.mark.parametrize(
        "data",
        [
            {"region": "us-east-1"},
            {"apiUrl": "https://aws"},
            {"region": 1, "apiUrl": "https://aws"},
        ],
    )
    def test_required_string_fields(self, data):
        """Test that region and apiUrl are required strings."""
        with pytest.raises(ValidationError):
            ApiClientConfig.model_validate(data)

    def test_value_equality(self):
        """Test that configurations compare by value."""
        first = ApiClientConfig(region="us-east-1", api_url="https://aws")
        second = ApiClientConfig.model_validate({"region": "us-east-1", "apiUrl": "https://aws"})
        other = ApiClientConfig(region="us-east-2", api_url="https://aws")

        assert first == second
        assert first is not second
        assert first != other

    def test_immutable(self):
        """Test that configurations cannot be modified."""
        config = ApiClientConfig(region="us-east-1", api_url="https://aws")

        with pytest.raises(ValidationError):
            config.region = "eu-west-1"


class TestClientOptions:
    """Test client options model."""

    def test_defaults(self):
        """Test default option values."""
        options = ClientOptions()

        assert options.config_namespace is None
        assert options.disable_offline is False
        assert options.storage is None
        assert options.cache is None
        assert options.timeout == 30.0

    def test_namespace_alias(self):
        """Test the configNamespace alias."""
        options = ClientOptions.model_validate({"configNamespace": "identityService"})

        assert options.config_namespace == "identityService"

    def test_empty_namespace_rejected(self):
        """Test that an empty namespace is invalid."""
        with pytest.raises(ValidationError):
            ClientOptions(config_namespace="")

    def test_transport_options(self):
        """Test that transport options exclude the namespace and keep extras."""
        storage = {}
        options = ClientOptions(
            config_namespace="identityService",
            disable_offline=True,
            storage=storage,
            link="custom-link",
        )

        transport = options.transport_options()

        assert "config_namespace" not in transport
        assert transport["disable_offline"] is True
        assert transport["storage"] is storage
        assert transport["link"] == "custom-link"


class TestLoggingConfig:
    """Test logging configuration model."""

    def test_defaults(self):
        config = LoggingConfig()

        assert config.level == LogLevel.INFO
        assert config.enable_console is True
        assert config.enable_file is False

    def test_component_levels(self):
        config = LoggingConfig(component_levels={"api_client_manager.manager": "DEBUG"})

        assert config.component_levels["api_client_manager.manager"] == LogLevel.DEBUG
