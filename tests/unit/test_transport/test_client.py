"""Unit tests for the HTTP transport."""

import json

import httpx
import pytest
import respx

from contentful_management.config import ClientConfig
from contentful_management.constants import (
    API_CONTENT_TYPE,
    HEADER_REQUEST_ID,
    HEADER_USER_AGENT,
)
from contentful_management.errors import (
    AccessTokenInvalidError,
    ApiErrorClass,
    BadRequestError,
    InternalServerError,
    NotFoundError,
    ValidationFailedError,
    VersionMismatchError,
)
from contentful_management.observability import RequestMetrics
from contentful_management.transport import HttpTransport
from tests.helpers.payloads import error_payload


URL = "https://api.contentful.com/spaces/s1"


def _make_transport(application: str | None = None) -> HttpTransport:
    return HttpTransport(
        "test-token",  # noqa: S106
        ClientConfig(application=application),
    )


class TestSend:
    """Tests for successful requests."""

    @respx.mock
    def test_sends_auth_and_content_type(self) -> None:
        """Test default request headers."""
        route = respx.put(URL).mock(return_value=httpx.Response(200, json={"ok": 1}))
        transport = _make_transport()

        result = transport.send("PUT", URL, body='{"name": "x"}')

        assert result == {"ok": 1}
        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == API_CONTENT_TYPE
        assert request.headers[HEADER_USER_AGENT].startswith(
            "sdk contentful-management.py/"
        )
        assert json.loads(request.content) == {"name": "x"}

    @respx.mock
    def test_extra_headers_override_defaults(self) -> None:
        """Test that caller headers win."""
        route = respx.post(URL).mock(return_value=httpx.Response(201, json={}))
        transport = _make_transport()

        transport.send(
            "POST",
            URL,
            body=b"raw",
            headers={"Content-Type": "application/octet-stream"},
        )

        assert route.calls.last.request.headers["Content-Type"] == (
            "application/octet-stream"
        )

    @respx.mock
    def test_empty_body_returns_none(self) -> None:
        """Test that 204 responses decode to None."""
        respx.delete(URL).mock(return_value=httpx.Response(204))

        assert _make_transport().send("DELETE", URL) is None

    def test_user_agent_includes_application(self) -> None:
        """Test that the application name leads the user agent."""
        user_agent = _make_transport(application="blog-sync/2.1").user_agent

        assert user_agent.startswith("app blog-sync/2.1; sdk ")
        assert user_agent.endswith(";")

    @respx.mock
    def test_records_metrics(self) -> None:
        """Test that completed requests are counted per status."""
        respx.get(URL).mock(return_value=httpx.Response(200, json={}))

        _make_transport().send("GET", URL)

        assert RequestMetrics.get_instance().api_requests_total == {200: 1}


class TestErrorMapping:
    """Tests for error response classification."""

    @pytest.mark.parametrize(
        ("status", "error_id", "expected"),
        [
            (401, "AccessTokenInvalid", AccessTokenInvalidError),
            (404, "NotFound", NotFoundError),
            (409, "VersionMismatch", VersionMismatchError),
            (422, "ValidationFailed", ValidationFailedError),
            (500, "ServerError", InternalServerError),
            (404, None, NotFoundError),
            (418, None, BadRequestError),
            (503, None, InternalServerError),
        ],
    )
    @respx.mock
    def test_error_classes(
        self, status: int, error_id: str | None, expected: type
    ) -> None:
        """Test that the error id wins and the status is the fallback."""
        body = error_payload(error_id) if error_id else {}
        respx.get(URL).mock(return_value=httpx.Response(status, json=body))

        with pytest.raises(expected) as exc_info:
            _make_transport().send("GET", URL)

        assert exc_info.value.status_code == status
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)

    @respx.mock
    def test_error_details_parsed(self) -> None:
        """Test message, request id and details extraction."""
        body = error_payload("ValidationFailed", "Validation error")
        body["details"] = {"errors": [{"name": "required", "path": ["fields"]}]}
        respx.put(URL).mock(return_value=httpx.Response(422, json=body))

        with pytest.raises(ValidationFailedError) as exc_info:
            _make_transport().send("PUT", URL)

        error = exc_info.value
        assert error.message == "Validation error"
        assert error.request_id == "req-123"
        assert error.details["errors"][0]["name"] == "required"
        assert error.to_dict()["error_class"] == ApiErrorClass.HTTP_4XX.value

    @respx.mock
    def test_non_json_error_body(self) -> None:
        """Test that HTML error pages are tolerated."""
        respx.get(URL).mock(
            return_value=httpx.Response(
                502, text="<html>Bad gateway</html>", headers={HEADER_REQUEST_ID: "r9"}
            )
        )

        with pytest.raises(InternalServerError) as exc_info:
            _make_transport().send("GET", URL)

        assert exc_info.value.request_id == "r9"
        assert "502" in exc_info.value.message

    @respx.mock
    def test_timeout_recorded_and_reraised(self) -> None:
        """Test that timeouts propagate as httpx exceptions."""
        respx.get(URL).mock(side_effect=httpx.ReadTimeout)

        with pytest.raises(httpx.ReadTimeout):
            _make_transport().send("GET", URL)

        failures = RequestMetrics.get_instance().api_failures_total
        assert failures == {ApiErrorClass.NETWORK_TIMEOUT.value: 1}


class TestClose:
    """Tests for client ownership."""

    def test_injected_client_not_closed(self) -> None:
        """Test that a caller-provided httpx client stays open."""
        http_client = httpx.Client()
        transport = HttpTransport("t", ClientConfig(), http_client)  # noqa: S106

        transport.close()

        assert not http_client.is_closed
        http_client.close()
