"""
Tests for the configuration models and loader.
"""

import json

import pytest
import yaml
from pydantic import ValidationError

from graphql_fetch.config import ClientConfig, ConfigLoader, LoggingConfig, LogLevel, load_config
from graphql_fetch.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("ENDPOINT", "LOG_LEVEL", "LOG_FILE", "LOG_FORMAT", "HEADERS"):
        monkeypatch.delenv(f"GRAPHQL_FETCH_{name}", raising=False)
    return monkeypatch


class TestClientConfig:
    """Test configuration models."""

    def test_defaults(self):
        config = ClientConfig(endpoint="https://api.example.com/graphql")

        assert config.headers == {}
        assert config.options == {}
        assert config.logging.level == LogLevel.INFO

    def test_rejects_non_http_endpoint(self):
        with pytest.raises(ValidationError):
            ClientConfig(endpoint="ftp://example.com")

    def test_rejects_reserved_options(self):
        with pytest.raises(ValidationError):
            ClientConfig(endpoint="https://api.example.com/graphql", options={"body": "x"})

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            ClientConfig(endpoint="https://api.example.com/graphql", retries=3)

    def test_logging_config(self):
        config = LoggingConfig(level="DEBUG", component_levels={"graphql_fetch": "WARNING"})

        assert config.level == LogLevel.DEBUG
        assert config.component_levels["graphql_fetch"] == LogLevel.WARNING


class TestConfigLoader:
    """Test loading configuration from files and environment."""

    def test_load_json_file(self, tmp_path, clean_env):
        path = tmp_path / "client.json"
        path.write_text(json.dumps({
            "endpoint": "https://api.example.com/graphql",
            "headers": {"X-A": "1"},
        }))

        config = ConfigLoader().load_config(path)

        assert config.endpoint == "https://api.example.com/graphql"
        assert config.headers == {"X-A": "1"}

    def test_load_yaml_file(self, tmp_path, clean_env):
        path = tmp_path / "client.yaml"
        path.write_text(yaml.safe_dump({
            "endpoint": "https://api.example.com/graphql",
            "options": {"timeout": 10},
            "logging": {"level": "DEBUG"},
        }))

        config = load_config(path)

        assert config.options == {"timeout": 10}
        assert config.logging.level == LogLevel.DEBUG

    def test_environment_overrides_file(self, tmp_path, clean_env):
        path = tmp_path / "client.json"
        path.write_text(json.dumps({
            "endpoint": "https://file.example.com/graphql",
            "headers": {"X-A": "file", "X-B": "file"},
        }))
        clean_env.setenv("GRAPHQL_FETCH_ENDPOINT", "https://env.example.com/graphql")
        clean_env.setenv("GRAPHQL_FETCH_HEADERS", json.dumps({"X-A": "env"}))
        clean_env.setenv("GRAPHQL_FETCH_LOG_LEVEL", "warning")

        config = ConfigLoader().load_config(path)

        assert config.endpoint == "https://env.example.com/graphql"
        assert config.headers == {"X-A": "env", "X-B": "file"}
        assert config.logging.level == LogLevel.WARNING

    def test_environment_only(self, tmp_path, clean_env):
        clean_env.chdir(tmp_path)
        clean_env.setenv("HOME", str(tmp_path))
        clean_env.setenv("GRAPHQL_FETCH_ENDPOINT", "https://env.example.com/graphql")
        clean_env.setenv("GRAPHQL_FETCH_LOG_FILE", str(tmp_path / "client.log"))

        loader = ConfigLoader()
        loader.config_paths = []
        config = loader.load_config()

        assert config.endpoint == "https://env.example.com/graphql"
        assert config.logging.enable_file is True

    def test_missing_file(self, tmp_path, clean_env):
        with pytest.raises(ConfigurationError):
            ConfigLoader().load_config(tmp_path / "missing.json")

    def test_unsupported_format(self, tmp_path, clean_env):
        path = tmp_path / "client.toml"
        path.write_text("endpoint = 'x'")

        with pytest.raises(ConfigurationError):
            ConfigLoader().load_config(path)

    def test_malformed_file(self, tmp_path, clean_env):
        path = tmp_path / "client.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader().load_config(path)

        assert exc_info.value.path == str(path)

    def test_invalid_headers_env(self, tmp_path, clean_env):
        path = tmp_path / "client.json"
        path.write_text(json.dumps({"endpoint": "https://api.example.com/graphql"}))
        clean_env.setenv("GRAPHQL_FETCH_HEADERS", "[1, 2]")

        with pytest.raises(ConfigurationError):
            ConfigLoader().load_config(path)

    def test_invalid_merged_config(self, tmp_path, clean_env):
        path = tmp_path / "client.json"
        path.write_text(json.dumps({"headers": {}}))

        with pytest.raises(ConfigurationError):
            ConfigLoader().load_config(path)
