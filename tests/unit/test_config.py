"""Unit tests for client configuration and settings."""

import pytest
from pydantic import ValidationError

from contentful_management.config import ClientConfig
from contentful_management.constants import URI_MANAGEMENT, URI_UPLOAD
from contentful_management.settings import ClientSettings


class TestClientConfig:
    """Tests for ClientConfig."""

    def test_defaults(self) -> None:
        """Test default hosts and rate-limit policy."""
        config = ClientConfig()

        assert config.host == URI_MANAGEMENT
        assert config.upload_host == URI_UPLOAD
        assert config.max_rate_limit_retries == 0
        assert config.max_rate_limit_wait == 60

    def test_trailing_slash_stripped(self) -> None:
        """Test host normalization."""
        config = ClientConfig(host="https://api.example.com/")

        assert config.host == "https://api.example.com"
        assert config.host_for(upload=False) == "https://api.example.com"
        assert config.host_for(upload=True) == URI_UPLOAD

    def test_rejects_host_without_scheme(self) -> None:
        """Test that hosts must be absolute URLs."""
        with pytest.raises(ValidationError):
            ClientConfig(host="api.contentful.com")

    def test_rejects_negative_retries(self) -> None:
        """Test that the retry budget cannot be negative."""
        with pytest.raises(ValidationError):
            ClientConfig(max_rate_limit_retries=-1)

    def test_frozen(self) -> None:
        """Test that configs are immutable."""
        config = ClientConfig()

        with pytest.raises(ValidationError):
            config.max_rate_limit_retries = 3  # type: ignore[misc]

    def test_unknown_fields_rejected(self) -> None:
        """Test that typos in options fail loudly."""
        with pytest.raises(ValidationError):
            ClientConfig(max_retries=3)  # type: ignore[call-arg]


class TestClientSettings:
    """Tests for environment-driven settings."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that CONTENTFUL_* variables are picked up."""
        monkeypatch.setenv("CONTENTFUL_MANAGEMENT_ACCESS_TOKEN", "CFPAT-test")
        monkeypatch.setenv("CONTENTFUL_MAX_RATE_LIMIT_RETRIES", "4")
        monkeypatch.setenv("CONTENTFUL_MAX_RATE_LIMIT_WAIT", "30")
        monkeypatch.setenv("CONTENTFUL_HOST", "https://api.eu.contentful.com")

        settings = ClientSettings(_env_file=None)  # type: ignore[call-arg]
        config = settings.to_client_config()

        assert settings.access_token == "CFPAT-test"
        assert config.max_rate_limit_retries == 4
        assert config.max_rate_limit_wait == 30
        assert config.host == "https://api.eu.contentful.com"

    def test_defaults_without_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test defaults when nothing is set."""
        monkeypatch.delenv("CONTENTFUL_MANAGEMENT_ACCESS_TOKEN", raising=False)
        monkeypatch.delenv("CONTENTFUL_MAX_RATE_LIMIT_RETRIES", raising=False)

        settings = ClientSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.access_token is None
        assert settings.max_rate_limit_retries == 0
