"""Tests for configuration loading and bridge connection setup."""

import pytest
from pydantic import ValidationError

from huelights.bridge.connection import BridgeConnection
from huelights.client import LightClient
from huelights.config import (
    BridgeConfig,
    HueLightsConfig,
    SecretsConfig,
    load_config,
    load_secrets,
    load_yaml,
)
from huelights.utils.errors import InputValidationError, NotInitializedError


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_load_config(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "bridge:\n"
            "  ip: 192.168.1.20\n"
            "parallel_requests: 3\n"
            "timeout: 4.5\n"
        )

        config = load_config(tmp_path)

        assert config.bridge.ip == "192.168.1.20"
        assert config.bridge.use_https is False
        assert config.parallel_requests == 3
        assert config.timeout == 4.5

    def test_defaults(self, tmp_path):
        (tmp_path / "config.yaml").write_text("bridge:\n  ip: 10.0.0.2\n")
        config = load_config(tmp_path)
        assert config.parallel_requests == 5
        assert config.timeout == 10.0

    def test_missing_config_requires_bridge(self, tmp_path):
        with pytest.raises(ValidationError):
            load_config(tmp_path)

    def test_invalid_parallel_requests(self):
        with pytest.raises(ValidationError):
            HueLightsConfig(bridge=BridgeConfig(ip="10.0.0.2"), parallel_requests=0)

    def test_load_secrets(self, tmp_path):
        (tmp_path / "secrets.yaml").write_text("username: abcdef123\n")
        assert load_secrets(tmp_path).username == "abcdef123"

    def test_missing_secrets(self, tmp_path):
        assert load_secrets(tmp_path).username is None

    def test_load_yaml_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestBridgeConnection:
    """Tests for building the API base address."""

    def test_for_bridge(self):
        connection = BridgeConnection.for_bridge("192.168.1.20", "abc")
        assert connection.base_url == "http://192.168.1.20/api/abc/"
        assert connection.url("lights/1") == "http://192.168.1.20/api/abc/lights/1"
        assert connection.url() == "http://192.168.1.20/api/abc/"

    def test_port_and_https(self):
        connection = BridgeConnection.for_bridge("bridge.local", "abc", port=8443, use_https=True)
        assert connection.base_url == "https://bridge.local:8443/api/abc/"

    def test_trailing_slash_added(self):
        assert BridgeConnection("http://x/api/u").base_url == "http://x/api/u/"

    def test_blank_username(self):
        with pytest.raises(InputValidationError):
            BridgeConnection.for_bridge("10.0.0.2", " ")

    def test_from_config(self):
        config = HueLightsConfig(bridge=BridgeConfig(ip="10.0.0.2"))
        connection = BridgeConnection.from_config(config, SecretsConfig(username="abc"))
        assert connection.base_url == "http://10.0.0.2/api/abc/"

    def test_from_config_without_username(self):
        config = HueLightsConfig(bridge=BridgeConfig(ip="10.0.0.2"))
        with pytest.raises(NotInitializedError):
            BridgeConnection.from_config(config, SecretsConfig())

    def test_client_from_config(self):
        config = HueLightsConfig(bridge=BridgeConfig(ip="10.0.0.2"), parallel_requests=3, timeout=2.0)
        client = LightClient.from_config(config, SecretsConfig(username="abc"))

        assert client.is_initialized
        assert client.parallel_requests == 3
        assert client._transport.timeout == 2.0

    def test_client_from_config_dir(self, tmp_path):
        """Test building a client straight from the YAML files."""
        (tmp_path / "config.yaml").write_text("bridge:\n  ip: 10.0.0.9\nparallel_requests: 4\n")
        (tmp_path / "secrets.yaml").write_text("username: abc\n")

        client = LightClient.from_config_dir(tmp_path)

        assert client.is_initialized
        assert client.parallel_requests == 4
        assert client._require_connection().base_url == "http://10.0.0.9/api/abc/"

    def test_client_from_config_dir_without_secrets(self, tmp_path):
        (tmp_path / "config.yaml").write_text("bridge:\n  ip: 10.0.0.9\n")
        with pytest.raises(NotInitializedError):
            LightClient.from_config_dir(tmp_path)
