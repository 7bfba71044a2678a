"""Configuration models for the Content Management API client."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from contentful_management.constants import (
    DEFAULT_MAX_RATE_LIMIT_RETRIES,
    DEFAULT_MAX_RATE_LIMIT_WAIT_SECONDS,
    DEFAULT_TIMEOUT_SECONDS,
    URI_MANAGEMENT,
    URI_UPLOAD,
)


class ClientConfig(BaseModel):
    """Configuration for a Client instance.

    Central configuration for hosts, timeouts and the rate-limit
    retry policy.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    host: Annotated[str, Field(min_length=1)] = URI_MANAGEMENT
    upload_host: Annotated[str, Field(min_length=1)] = URI_UPLOAD
    timeout_seconds: Annotated[float, Field(ge=1.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )
    max_rate_limit_retries: Annotated[
        int, Field(ge=0, description="Number of 429 responses to retry")
    ] = DEFAULT_MAX_RATE_LIMIT_RETRIES
    max_rate_limit_wait: Annotated[
        int, Field(ge=0, description="Longest advertised wait to honor, seconds")
    ] = DEFAULT_MAX_RATE_LIMIT_WAIT_SECONDS
    application: str | None = Field(
        default=None,
        description="Application name/version reported in X-Contentful-User-Agent",
    )

    @field_validator("host", "upload_host")
    @classmethod
    def validate_host(cls, v: str) -> str:
        """Require an absolute http(s) host and drop any trailing slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"Host must start with http:// or https://, got {v!r}"
            raise ValueError(msg)
        return v.rstrip("/")

    def host_for(self, upload: bool) -> str:
        """Get the host to use for an endpoint.

        Args:
            upload: Whether the endpoint lives on the upload host.

        Returns:
            Base URL without trailing slash.
        """
        return self.upload_host if upload else self.host
