"""Client settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from contentful_management.config import ClientConfig
from contentful_management.constants import (
    DEFAULT_MAX_RATE_LIMIT_RETRIES,
    DEFAULT_MAX_RATE_LIMIT_WAIT_SECONDS,
    URI_MANAGEMENT,
    URI_UPLOAD,
)


class ClientSettings(BaseSettings):
    """Environment configuration for building a Client."""

    model_config = SettingsConfigDict(
        env_prefix="", case_sensitive=False, env_file=".env", env_file_encoding="utf-8"
    )

    access_token: str | None = Field(
        default=None, validation_alias="CONTENTFUL_MANAGEMENT_ACCESS_TOKEN"
    )
    host: str = Field(default=URI_MANAGEMENT, validation_alias="CONTENTFUL_HOST")
    upload_host: str = Field(
        default=URI_UPLOAD, validation_alias="CONTENTFUL_UPLOAD_HOST"
    )
    max_rate_limit_retries: int = Field(
        default=DEFAULT_MAX_RATE_LIMIT_RETRIES,
        validation_alias="CONTENTFUL_MAX_RATE_LIMIT_RETRIES",
    )
    max_rate_limit_wait: int = Field(
        default=DEFAULT_MAX_RATE_LIMIT_WAIT_SECONDS,
        validation_alias="CONTENTFUL_MAX_RATE_LIMIT_WAIT",
    )

    def to_client_config(self) -> ClientConfig:
        """Return the ClientConfig described by these settings."""
        return ClientConfig(
            host=self.host,
            upload_host=self.upload_host,
            max_rate_limit_retries=self.max_rate_limit_retries,
            max_rate_limit_wait=self.max_rate_limit_wait,
        )


def get_settings() -> ClientSettings:
    """Get a settings instance."""
    return ClientSettings()
