"""Tests for environment-based configuration."""

import pytest

from places_geocoder.config import ClientConfig, components_from_pairs
from places_geocoder.exceptions import ConfigurationError


class TestClientConfig:

    def test_is_premier_needs_both_credentials(self):
        assert ClientConfig(client_id="gme-test", key="k").is_premier is True
        assert ClientConfig(client_id="gme-test").is_premier is False
        assert ClientConfig(key="k").is_premier is False
        assert ClientConfig(client_id="", key="k").is_premier is False

    def test_is_frozen(self):
        config = ClientConfig()
        with pytest.raises(AttributeError):
            config.host = "elsewhere"


class TestFromEnv:

    def test_minimal_environment(self, gmap_env):
        config = ClientConfig.from_env()

        assert config.key == "test-api-key"
        assert config.host == "maps.googleapis.com"
        assert config.client_id is None
        assert config.language is None
        assert config.timeout == 10

    def test_full_environment(self, gmap_env, monkeypatch):
        monkeypatch.setenv("GMAP_CLIENT", "gme-test")
        monkeypatch.setenv("GMAP_HOST", "maps.example.test")
        monkeypatch.setenv("GMAP_LANGUAGE", "fr")
        monkeypatch.setenv("GMAP_REGION", "ca")
        monkeypatch.setenv("GMAP_TIMEOUT", "30")

        config = ClientConfig.from_env()

        assert config.client_id == "gme-test"
        assert config.host == "maps.example.test"
        assert config.language == "fr"
        assert config.region == "ca"
        assert config.timeout == 30
        assert config.is_premier is True

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("GMAP_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="GMAP_KEY"):
            ClientConfig.from_env()

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_timeout(self, gmap_env, monkeypatch, value):
        monkeypatch.setenv("GMAP_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match="GMAP_TIMEOUT"):
            ClientConfig.from_env()


class TestComponentsFromPairs:

    def test_pairs(self):
        assert components_from_pairs(["country=uk", "locality = Rochester"]) == {
            "country": "uk",
            "locality": "Rochester",
        }

    @pytest.mark.parametrize("pair", ["country", "=uk"])
    def test_invalid_pair(self, pair):
        with pytest.raises(ConfigurationError):
            components_from_pairs([pair])
