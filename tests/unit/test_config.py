"""Unit tests for configuration loading."""

import pytest

from semantic_pen.config import (
    Configuration,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    load_config,
)


class TestConfiguration:
    """Tests for Configuration validation."""

    def test_defaults(self):
        config = Configuration(api_key="key")
        assert config.base_url == DEFAULT_BASE_URL == "https://www.semanticpen.com"
        assert config.timeout == DEFAULT_TIMEOUT == 60.0

    def test_empty_api_key(self):
        with pytest.raises(ValueError, match="API key"):
            Configuration(api_key="")

    def test_relative_base_url(self):
        with pytest.raises(ValueError, match="absolute"):
            Configuration(api_key="key", base_url="/api")

    @pytest.mark.parametrize("timeout", [0, -5])
    def test_non_positive_timeout(self, timeout):
        with pytest.raises(ValueError, match="Timeout"):
            Configuration(api_key="key", timeout=timeout)

    def test_non_ascii_api_key(self):
        """Test that keys which cannot be sent in an HTTP header are rejected."""
        with pytest.raises(ValueError, match="ASCII"):
            Configuration(api_key="clé")

    def test_immutable(self):
        config = Configuration(api_key="key")
        with pytest.raises(AttributeError):
            config.api_key = "other"


class TestLoadConfig:
    """Tests for loading configuration from the environment."""

    def test_load_from_environment(self, monkeypatch):
        monkeypatch.setenv("SEMANTIC_PEN_API_KEY", "env-key")
        monkeypatch.setenv("SEMANTIC_PEN_BASE_URL", "https://staging.semanticpen.com")
        monkeypatch.setenv("SEMANTIC_PEN_TIMEOUT", "15")

        config = load_config()

        assert config.api_key == "env-key"
        assert config.base_url == "https://staging.semanticpen.com"
        assert config.timeout == 15.0

    def test_defaults_when_only_key_set(self, monkeypatch):
        monkeypatch.setenv("SEMANTIC_PEN_API_KEY", "env-key")
        monkeypatch.delenv("SEMANTIC_PEN_BASE_URL", raising=False)
        monkeypatch.delenv("SEMANTIC_PEN_TIMEOUT", raising=False)

        config = load_config()

        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_explicit_key_wins(self, monkeypatch):
        monkeypatch.setenv("SEMANTIC_PEN_API_KEY", "env-key")
        assert load_config(api_key="explicit").api_key == "explicit"

    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("SEMANTIC_PEN_API_KEY", raising=False)
        with pytest.raises(ValueError, match="SEMANTIC_PEN_API_KEY"):
            load_config()

    def test_malformed_timeout(self, monkeypatch):
        monkeypatch.setenv("SEMANTIC_PEN_API_KEY", "env-key")
        monkeypatch.setenv("SEMANTIC_PEN_TIMEOUT", "soon")
        with pytest.raises(ValueError, match="SEMANTIC_PEN_TIMEOUT"):
            load_config()
