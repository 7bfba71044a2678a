"""HTTP transport layer.

Wraps httpx with bearer authentication, error classification,
header redaction and request metrics.
"""

from contentful_management.transport.client import HttpTransport
from contentful_management.transport.redact import redact_headers, redact_token


__all__ = [
    "HttpTransport",
    "redact_headers",
    "redact_token",
]
