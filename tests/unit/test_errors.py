"""Unit tests for error types."""

import httpx
import pytest

from contentful_management.constants import HEADER_RATE_LIMIT_SECOND_REMAINING
from contentful_management.errors import (
    ApiError,
    BadRequestError,
    InvalidQueryError,
    NotFoundError,
    RateLimitExceededError,
    ResourceValidationError,
    UnsupportedTypeError,
    error_class_for,
)


class TestErrorClassFor:
    """Tests for error class selection."""

    def test_error_id_wins_over_status(self) -> None:
        """Test that the Contentful error id is preferred."""
        assert error_class_for(400, "InvalidQuery") is InvalidQueryError
        assert error_class_for(400, "NotFound") is NotFoundError

    def test_status_fallback(self) -> None:
        """Test status-based fallbacks."""
        assert error_class_for(404, "SomethingNew") is NotFoundError
        assert error_class_for(429, None) is RateLimitExceededError
        assert error_class_for(499, None) is BadRequestError
        assert error_class_for(302, None) is ApiError

    def test_hierarchy(self) -> None:
        """Test that specific errors stay catchable by their parents."""
        assert issubclass(InvalidQueryError, BadRequestError)
        assert issubclass(ResourceValidationError, ValueError)


class TestRateLimitExceededError:
    """Tests for the advertised wait."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [("7", 7), ("", 0), ("soon", 0), ("-3", 0), (None, 0)],
    )
    def test_second_remaining(self, header: str | None, expected: int) -> None:
        """Test header parsing with fallbacks to zero."""
        headers = {} if header is None else {HEADER_RATE_LIMIT_SECOND_REMAINING: header}
        response = httpx.Response(429, headers=headers)

        error = RateLimitExceededError("slow down", 429, response=response)

        assert error.second_remaining == expected

    def test_without_response(self) -> None:
        """Test that a missing response means no wait."""
        assert RateLimitExceededError("slow down").second_remaining == 0


class TestUnsupportedTypeError:
    """Tests for UnsupportedTypeError."""

    def test_message_names_type(self) -> None:
        """Test that the message carries the type and context."""
        error = UnsupportedTypeError("Bogus", context="field")

        assert error.type_name == "Bogus"
        assert str(error) == "Unsupported field type: 'Bogus'"
