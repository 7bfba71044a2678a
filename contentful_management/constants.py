"""Constants for the Content Management API client.

Centralizes hosts, header names and defaults shared across modules.
"""

from typing import Final


SDK_NAME: Final[str] = "contentful-management.py"
SDK_VERSION: Final[str] = "1.0.0"

# API hosts
URI_MANAGEMENT: Final[str] = "https://api.contentful.com"
URI_UPLOAD: Final[str] = "https://upload.contentful.com"

# Content types
API_CONTENT_TYPE: Final[str] = "application/vnd.contentful.management.v1+json"
UPLOAD_CONTENT_TYPE: Final[str] = "application/octet-stream"

# Request headers
HEADER_AUTHORIZATION: Final[str] = "Authorization"
HEADER_CONTENT_TYPE: Final[str] = "Content-Type"
HEADER_USER_AGENT: Final[str] = "X-Contentful-User-Agent"
HEADER_VERSION: Final[str] = "X-Contentful-Version"
HEADER_CONTENT_TYPE_ID: Final[str] = "X-Contentful-Content-Type"
HEADER_ORGANIZATION: Final[str] = "X-Contentful-Organization"
HEADER_SOURCE_ENVIRONMENT: Final[str] = "X-Contentful-Source-Environment"

# Response headers
HEADER_RATE_LIMIT_SECOND_REMAINING: Final[str] = (
    "X-Contentful-RateLimit-Second-Remaining"
)
HEADER_RATE_LIMIT_RESET: Final[str] = "X-Contentful-RateLimit-Reset"
HEADER_REQUEST_ID: Final[str] = "X-Contentful-Request-Id"

# Rate limiting defaults
DEFAULT_MAX_RATE_LIMIT_RETRIES: Final[int] = 0
DEFAULT_MAX_RATE_LIMIT_WAIT_SECONDS: Final[int] = 60

DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0

# Resource envelope types
SYS_TYPE_ARRAY: Final[str] = "Array"
SYS_TYPE_LINK: Final[str] = "Link"
SYS_TYPE_ERROR: Final[str] = "Error"

# Query limits
QUERY_MAX_LIMIT: Final[int] = 1000
