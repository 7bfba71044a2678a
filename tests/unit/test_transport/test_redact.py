"""Unit tests for log redaction helpers."""

from contentful_management.transport import redact_headers, redact_token
from contentful_management.transport.redact import REDACTED_VALUE


class TestRedactHeaders:
    """Tests for header redaction."""

    def test_redacts_authorization(self) -> None:
        """Test that the bearer token never reaches logs."""
        headers = {
            "Authorization": "Bearer secret-token-12345",
            "Content-Type": "application/json",
        }

        result = redact_headers(headers)

        assert result["Authorization"] == REDACTED_VALUE
        assert result["Content-Type"] == "application/json"

    def test_case_insensitive(self) -> None:
        """Test that header names match regardless of case."""
        for name in ("authorization", "AUTHORIZATION", "Cookie"):
            assert redact_headers({name: "x"})[name] == REDACTED_VALUE

    def test_original_unchanged(self) -> None:
        """Test that a new dict is returned."""
        headers = {"Authorization": "Bearer x"}

        redact_headers(headers)

        assert headers["Authorization"] == "Bearer x"


class TestRedactToken:
    """Tests for token masking."""

    def test_keeps_last_four(self) -> None:
        """Test that only the tail of the token is visible."""
        masked = redact_token("CFPAT-abcdefgh1234")

        assert masked.endswith("1234")
        assert "abcdefgh" not in masked

    def test_short_token_fully_masked(self) -> None:
        """Test that short tokens are not revealed."""
        assert "abc" not in redact_token("abc")
