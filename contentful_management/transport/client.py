"""HTTP transport for the Content Management API."""

import json
import platform
import time
from typing import Any

import httpx
import structlog

from contentful_management.config import ClientConfig
from contentful_management.constants import (
    API_CONTENT_TYPE,
    HEADER_AUTHORIZATION,
    HEADER_CONTENT_TYPE,
    HEADER_REQUEST_ID,
    HEADER_USER_AGENT,
    SDK_NAME,
    SDK_VERSION,
)
from contentful_management.errors import ApiError, ApiErrorClass, error_class_for
from contentful_management.observability.metrics import RequestMetrics
from contentful_management.transport.redact import redact_headers


logger = structlog.get_logger()


class HttpTransport:
    """Thin httpx wrapper that authenticates requests and classifies failures.

    Provides:
    - Bearer authentication and API content-type headers
    - Conversion of error responses into ApiError subclasses
    - Header redaction for logging
    - Metrics collection
    """

    def __init__(
        self,
        access_token: str,
        config: ClientConfig,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            access_token: OAuth or personal access token.
            config: Client configuration.
            http_client: Optional preconfigured httpx client. When omitted,
                the transport creates and owns one.
        """
        self._access_token = access_token
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=config.timeout_seconds)
        self._metrics = RequestMetrics.get_instance()
        self._log = logger.bind(component="transport")

    def close(self) -> None:
        """Close the underlying httpx client if this transport created it."""
        if self._owns_client:
            self._http.close()

    def send(
        self,
        method: str,
        url: str,
        body: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request and decode its JSON body.

        Args:
            method: HTTP method.
            url: Absolute request URL.
            body: Encoded request body.
            headers: Extra headers, overriding the defaults.

        Returns:
            Decoded JSON body, or None when the response has no body.

        Raises:
            ApiError: For non-2xx responses.
            httpx.HTTPError: For connection-level failures.
        """
        request_headers = self._build_headers(headers)
        log = self._log.bind(method=method, url=url)
        log.debug("api_request_start", headers=redact_headers(request_headers))

        start_time_ns = time.perf_counter_ns()
        try:
            response = self._http.request(
                method,
                url,
                content=body,
                headers=request_headers,
            )
        except httpx.TimeoutException as e:
            self._metrics.record_failure(ApiErrorClass.NETWORK_TIMEOUT)
            log.warning("api_request_timeout", error=str(e))
            raise
        except httpx.TransportError as e:
            self._metrics.record_failure(ApiErrorClass.CONNECTION_ERROR)
            log.warning("api_request_connection_error", error=str(e))
            raise

        duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
        self._metrics.record_request(response.status_code, duration_ms)
        log.info(
            "api_request_complete",
            status_code=response.status_code,
            bytes=len(response.content),
            duration_ms=round(duration_ms, 2),
        )

        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            error = self._error_from_response(response)
            self._metrics.record_failure(error.error_class)
            raise error from e

        if not response.content:
            return None
        return response.json()

    def _build_headers(self, extra_headers: dict[str, str] | None) -> dict[str, str]:
        """Build request headers.

        Args:
            extra_headers: Additional headers from caller.

        Returns:
            Complete headers dictionary.
        """
        headers: dict[str, str] = {
            HEADER_AUTHORIZATION: f"Bearer {self._access_token}",
            HEADER_CONTENT_TYPE: API_CONTENT_TYPE,
            HEADER_USER_AGENT: self.user_agent,
        }
        if extra_headers:
            headers.update(extra_headers)
        return headers

    @property
    def user_agent(self) -> str:
        """Value of the X-Contentful-User-Agent header."""
        parts = [
            f"sdk {SDK_NAME}/{SDK_VERSION}",
            f"platform python/{platform.python_version()}",
            f"os {platform.system() or 'Unknown'}",
        ]
        if self._config.application:
            parts.insert(0, f"app {self._config.application}")
        return "; ".join(parts) + ";"

    def _error_from_response(self, response: httpx.Response) -> ApiError:
        """Convert an error response into the matching ApiError.

        Args:
            response: Non-2xx HTTP response.

        Returns:
            ApiError subclass instance.
        """
        payload = self._decode_error_body(response)
        sys_block = payload.get("sys")
        error_id = sys_block.get("id") if isinstance(sys_block, dict) else None
        error_cls = error_class_for(response.status_code, error_id)

        message = payload.get("message") or (
            f"{response.reason_phrase or 'HTTP error'} ({response.status_code})"
        )
        return error_cls(
            message=message,
            status_code=response.status_code,
            error_id=error_id,
            request_id=payload.get("requestId")
            or response.headers.get(HEADER_REQUEST_ID),
            details=payload.get("details") or {},
            response=response,
        )

    @staticmethod
    def _decode_error_body(response: httpx.Response) -> dict[str, Any]:
        """Decode a Contentful error envelope, tolerating non-JSON bodies."""
        if not response.content:
            return {}
        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return {}
        return payload if isinstance(payload, dict) else {}
