"""
Tests for the configuration store.
"""

import json

import pytest

from api_client_manager.config.models import ApiClientConfig
from api_client_manager.config.store import ConfigurationStore
from api_client_manager.exceptions import (
    ConfigurationNotSetError,
    ConfigurationSetNotFoundError,
    InvalidConfigurationError,
)


class TestConfigurationStore:
    """Test configuration document handling."""

    def test_initially_empty(self, empty_store):
        assert empty_store.is_loaded is False
        with pytest.raises(ConfigurationNotSetError):
            empty_store.get_config()

    def test_set_config_from_json(self, empty_store, sample_document):
        empty_store.set_config(json.dumps(sample_document))

        assert empty_store.is_loaded is True
        assert empty_store.get_config() == sample_document

    def test_set_config_blank_unloads(self, loaded_store):
        loaded_store.set_config("")

        assert loaded_store.is_loaded is False

    def test_load_from_dict_copies_document(self, empty_store, sample_document):
        empty_store.load_from_dict(sample_document)
        sample_document["apiService"]["region"] = "eu-west-1"

        assert empty_store.get_config()["apiService"]["region"] == "us-east-1"

    def test_load_config_from_file(self, empty_store, tmp_path, sample_document):
        path = tmp_path / "services.json"
        path.write_text(json.dumps(sample_document), encoding="utf-8")

        assert empty_store.load_config(path) is True
        assert empty_store.get_config() == sample_document

    def test_load_config_rejects_non_mapping_file(self, empty_store, tmp_path):
        path = tmp_path / "services.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="must contain a mapping of namespaces"):
            empty_store.load_config(path)

        assert empty_store.is_loaded is False
        with pytest.raises(ConfigurationNotSetError):
            empty_store.bind_config_set(ApiClientConfig, "identityService")

    def test_reload_config(self, empty_store, tmp_path, sample_document):
        path = tmp_path / "services.json"
        path.write_text(json.dumps(sample_document), encoding="utf-8")
        empty_store.load_config(path)

        sample_document["apiService"]["region"] = "eu-west-1"
        path.write_text(json.dumps(sample_document), encoding="utf-8")
        empty_store.reload_config()

        assert empty_store.get_config()["apiService"]["region"] == "eu-west-1"

    def test_process_wide_instance(self):
        first = ConfigurationStore.get_instance()

        assert ConfigurationStore.get_instance() is first

        ConfigurationStore.reset_instance()
        assert ConfigurationStore.get_instance() is not first


class TestBindConfigSet:
    """Test binding namespaces to models."""

    def test_bind_namespace(self, loaded_store, sample_document):
        config = loaded_store.bind_config_set(ApiClientConfig, "alternativeService")

        assert config == ApiClientConfig(region="us-east-1", api_url=sample_document["alternativeService"]["apiUrl"])

    def test_nothing_loaded(self, empty_store):
        with pytest.raises(ConfigurationNotSetError):
            empty_store.bind_config_set(ApiClientConfig, "apiService")

    def test_unknown_namespace(self, loaded_store):
        with pytest.raises(ConfigurationSetNotFoundError) as exc_info:
            loaded_store.bind_config_set(ApiClientConfig, "nonExistentService")

        assert exc_info.value.namespace == "nonExistentService"
        assert str(exc_info.value) == "Configuration set not found: nonExistentService"

    def test_namespace_not_an_object(self, empty_store):
        empty_store.load_from_dict({"apiService": "https://aws"})

        with pytest.raises(ConfigurationSetNotFoundError):
            empty_store.bind_config_set(ApiClientConfig, "apiService")

    def test_invalid_subset(self, loaded_store):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            loaded_store.bind_config_set(ApiClientConfig, "federatedSignIn")

        assert exc_info.value.namespace == "federatedSignIn"
        assert any("apiUrl" in error for error in exc_info.value.errors)
        assert any("region" in error for error in exc_info.value.errors)
