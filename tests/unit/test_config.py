"""Tests for client configuration."""

import dataclasses

import httpx
import pytest

from faceit_client.auth import CredentialResolver
from faceit_client.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig


class TestClientConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = ClientConfig()

        assert config.base_url == "https://open.faceit.com"
        assert config.api_key is None
        assert config.timeout == DEFAULT_TIMEOUT
        assert config.verify is True
        assert config.transport is None
        assert not config.authenticated

    @pytest.mark.unit
    def test_trailing_slash_is_stripped(self):
        assert ClientConfig(base_url="https://proxy.local/faceit/").base_url == "https://proxy.local/faceit"

    @pytest.mark.unit
    def test_blank_api_key_means_unauthenticated(self):
        assert ClientConfig(api_key="   ").api_key is None

    @pytest.mark.unit
    def test_api_key_not_in_repr(self):
        config = ClientConfig(api_key="super-secret")

        assert config.authenticated
        assert "super-secret" not in repr(config)

    @pytest.mark.unit
    def test_is_read_only(self):
        config = ClientConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.api_key = "changed"

    @pytest.mark.unit
    @pytest.mark.parametrize("kwargs", [{"base_url": ""}, {"timeout": 0}, {"timeout": -1.0}])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            ClientConfig(**kwargs)


class TestClientConfigFromEnv:
    @pytest.fixture
    def resolver(self):
        return CredentialResolver(load_dotenv=False)

    @pytest.mark.unit
    def test_nothing_set(self, resolver):
        config = ClientConfig.from_env(resolver=resolver)

        assert config.base_url == DEFAULT_BASE_URL
        assert config.api_key is None
        assert config.timeout == DEFAULT_TIMEOUT

    @pytest.mark.unit
    def test_reads_environment(self, resolver, monkeypatch):
        monkeypatch.setenv("FACEIT_API_KEY", "env-key")
        monkeypatch.setenv("FACEIT_BASE_URL", "https://staging.faceit.local")
        monkeypatch.setenv("FACEIT_TIMEOUT", "12.5")

        config = ClientConfig.from_env(resolver=resolver)

        assert config.api_key == "env-key"
        assert config.base_url == "https://staging.faceit.local"
        assert config.timeout == 12.5

    @pytest.mark.unit
    def test_explicit_values_win(self, resolver, monkeypatch):
        monkeypatch.setenv("FACEIT_API_KEY", "env-key")
        monkeypatch.setenv("FACEIT_TIMEOUT", "12.5")
        transport = httpx.MockTransport(lambda request: httpx.Response(200))

        config = ClientConfig.from_env(api_key="explicit", timeout=3, verify=False, transport=transport, resolver=resolver)

        assert config.api_key == "explicit"
        assert config.timeout == 3
        assert config.verify is False
        assert config.transport is transport

    @pytest.mark.unit
    def test_api_key_file(self, resolver, monkeypatch, tmp_path):
        key_file = tmp_path / "faceit.key"
        key_file.write_text("file-key\n")
        monkeypatch.setenv("FACEIT_API_KEY_FILE", str(key_file))

        assert ClientConfig.from_env(resolver=resolver).api_key == "file-key"

    @pytest.mark.unit
    def test_invalid_timeout(self, resolver, monkeypatch):
        monkeypatch.setenv("FACEIT_TIMEOUT", "soon")

        with pytest.raises(ValueError, match="FACEIT_TIMEOUT"):
            ClientConfig.from_env(resolver=resolver)
