"""Unit tests for request dispatch and rate-limit retries."""

from unittest.mock import MagicMock, patch

import httpx
import pytest
import respx

from contentful_management.config import ClientConfig
from contentful_management.constants import HEADER_RATE_LIMIT_SECOND_REMAINING
from contentful_management.core import RequestDispatcher, ResourceBuilder
from contentful_management.errors import (
    InternalServerError,
    RateLimitExceededError,
    RateWaitTooLongError,
)
from contentful_management.observability import RequestMetrics
from contentful_management.resource import Entry, ResourceArray
from contentful_management.transport import HttpTransport
from tests.helpers.payloads import (
    ENVIRONMENT_URL,
    array_payload,
    entry_payload,
    error_payload,
)


ENTRY_URI = "/spaces/cfexampleapi/environments/master/entries/nyancat"
ENTRY_URL = f"{ENVIRONMENT_URL}/entries/nyancat"
SLEEP_TARGET = "contentful_management.core.dispatcher.time.sleep"


def _make_dispatcher(
    max_rate_limit_retries: int = 0,
    max_rate_limit_wait: int = 60,
    owner: MagicMock | None = None,
) -> RequestDispatcher:
    config = ClientConfig(
        max_rate_limit_retries=max_rate_limit_retries,
        max_rate_limit_wait=max_rate_limit_wait,
    )
    transport = HttpTransport("test-token", config)  # noqa: S106
    return RequestDispatcher(transport, ResourceBuilder(), config, owner=owner)


def _rate_limited(seconds: str | None) -> httpx.Response:
    headers = {} if seconds is None else {HEADER_RATE_LIMIT_SECOND_REMAINING: seconds}
    return httpx.Response(
        429, headers=headers, json=error_payload("RateLimitExceeded")
    )


class TestRequest:
    """Tests for the success path."""

    @respx.mock
    def test_builds_resource_and_attaches_owner(self) -> None:
        """Test that built resources are attached to the owning client."""
        respx.get(ENTRY_URL).mock(
            return_value=httpx.Response(200, json=entry_payload())
        )
        owner = MagicMock()
        dispatcher = _make_dispatcher(owner=owner)

        result = dispatcher.request("GET", ENTRY_URI)

        assert isinstance(result, Entry)
        assert result.client is owner

    @respx.mock
    def test_attaches_owner_to_array_items(self) -> None:
        """Test that every resource of a collection is attached."""
        respx.get(f"{ENVIRONMENT_URL}/entries").mock(
            return_value=httpx.Response(
                200, json=array_payload([entry_payload("a"), entry_payload("b")])
            )
        )
        owner = MagicMock()
        dispatcher = _make_dispatcher(owner=owner)

        result = dispatcher.request(
            "GET", "/spaces/cfexampleapi/environments/master/entries/"
        )

        assert isinstance(result, ResourceArray)
        assert all(item.client is owner for item in result)

    @respx.mock
    def test_empty_body_returns_hint_resource(self) -> None:
        """Test that a 204 response returns the given resource unchanged."""
        respx.delete(ENTRY_URL).mock(return_value=httpx.Response(204))
        dispatcher = _make_dispatcher()
        entry = Entry("cat")

        assert dispatcher.request("DELETE", ENTRY_URI, resource=entry) is entry
        assert dispatcher.request("DELETE", ENTRY_URI) is None

    @respx.mock
    def test_trailing_slash_stripped(self) -> None:
        """Test that a trailing slash is removed before sending."""
        route = respx.get(ENTRY_URL).mock(
            return_value=httpx.Response(200, json=entry_payload())
        )
        dispatcher = _make_dispatcher()

        dispatcher.request("GET", f"{ENTRY_URI}/")

        assert route.called

    @respx.mock
    def test_custom_host(self) -> None:
        """Test that requests can target another host."""
        route = respx.get("https://upload.example.com/spaces/s/uploads/u").mock(
            return_value=httpx.Response(204)
        )
        dispatcher = _make_dispatcher()

        dispatcher.request(
            "GET", "/spaces/s/uploads/u", host="https://upload.example.com"
        )

        assert route.called


class TestRateLimitRetries:
    """Tests for 429 handling."""

    @respx.mock
    def test_retries_after_advertised_wait(self) -> None:
        """Test one retry with a single 5 second wait."""
        route = respx.get(ENTRY_URL).mock(
            side_effect=[
                _rate_limited("5"),
                httpx.Response(200, json=entry_payload()),
            ]
        )
        dispatcher = _make_dispatcher(max_rate_limit_retries=1)

        with patch(SLEEP_TARGET) as mock_sleep:
            result = dispatcher.request("GET", ENTRY_URI)

        assert isinstance(result, Entry)
        assert route.call_count == 2
        mock_sleep.assert_called_once_with(5)
        assert dispatcher.remaining_rate_limit_retries == 0
        metrics = RequestMetrics.get_instance()
        assert metrics.api_rate_limit_retries_total == 1

    @respx.mock
    def test_wait_too_long_raises_without_sleeping(self) -> None:
        """Test that a 120 second wait exceeds the 60 second maximum."""
        route = respx.get(ENTRY_URL).mock(return_value=_rate_limited("120"))
        dispatcher = _make_dispatcher(max_rate_limit_retries=3)

        with patch(SLEEP_TARGET) as mock_sleep:
            with pytest.raises(RateWaitTooLongError) as exc_info:
                dispatcher.request("GET", ENTRY_URI)

        mock_sleep.assert_not_called()
        assert route.call_count == 1
        assert isinstance(exc_info.value.__cause__, httpx.HTTPStatusError)
        assert exc_info.value.status_code == 429
        assert dispatcher.remaining_rate_limit_retries == 3

    @respx.mock
    def test_wait_limit_is_configurable(self) -> None:
        """Test that a raised maximum wait allows longer waits."""
        respx.get(ENTRY_URL).mock(
            side_effect=[
                _rate_limited("120"),
                httpx.Response(200, json=entry_payload()),
            ]
        )
        dispatcher = _make_dispatcher(max_rate_limit_retries=1, max_rate_limit_wait=300)

        with patch(SLEEP_TARGET) as mock_sleep:
            dispatcher.request("GET", ENTRY_URI)

        mock_sleep.assert_called_once_with(120)

    @respx.mock
    def test_no_budget_reraises(self) -> None:
        """Test that the default budget of zero never retries."""
        route = respx.get(ENTRY_URL).mock(return_value=_rate_limited("1"))
        dispatcher = _make_dispatcher()

        with patch(SLEEP_TARGET) as mock_sleep:
            with pytest.raises(RateLimitExceededError):
                dispatcher.request("GET", ENTRY_URI)

        mock_sleep.assert_not_called()
        assert route.call_count == 1

    @respx.mock
    def test_budget_is_consumed_across_requests(self) -> None:
        """Test that retries are never replenished."""
        route = respx.get(ENTRY_URL).mock(
            side_effect=[
                _rate_limited("1"),
                httpx.Response(200, json=entry_payload()),
                _rate_limited("1"),
            ]
        )
        dispatcher = _make_dispatcher(max_rate_limit_retries=1)

        with patch(SLEEP_TARGET) as mock_sleep:
            dispatcher.request("GET", ENTRY_URI)
            with pytest.raises(RateLimitExceededError):
                dispatcher.request("GET", ENTRY_URI)

        assert mock_sleep.call_count == 1
        assert route.call_count == 3

    @respx.mock
    def test_missing_header_waits_zero_seconds(self) -> None:
        """Test that an absent header is treated as a zero wait."""
        respx.get(ENTRY_URL).mock(
            side_effect=[
                _rate_limited(None),
                httpx.Response(200, json=entry_payload()),
            ]
        )
        dispatcher = _make_dispatcher(max_rate_limit_retries=2)

        with patch(SLEEP_TARGET) as mock_sleep:
            dispatcher.request("GET", ENTRY_URI)

        mock_sleep.assert_called_once_with(0)
        assert dispatcher.remaining_rate_limit_retries == 1

    @respx.mock
    def test_server_errors_are_not_retried(self) -> None:
        """Test that only 429 responses are retried."""
        route = respx.get(ENTRY_URL).mock(
            return_value=httpx.Response(500, json=error_payload("ServerError"))
        )
        dispatcher = _make_dispatcher(max_rate_limit_retries=5)

        with patch(SLEEP_TARGET) as mock_sleep:
            with pytest.raises(InternalServerError):
                dispatcher.request("GET", ENTRY_URI)

        mock_sleep.assert_not_called()
        assert route.call_count == 1
        assert dispatcher.remaining_rate_limit_retries == 5

    @respx.mock
    def test_connection_errors_propagate(self) -> None:
        """Test that transport failures are raised unchanged."""
        respx.get(ENTRY_URL).mock(side_effect=httpx.ConnectError)
        dispatcher = _make_dispatcher(max_rate_limit_retries=5)

        with pytest.raises(httpx.ConnectError):
            dispatcher.request("GET", ENTRY_URI)
