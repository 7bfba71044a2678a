"""Header redaction utilities for logging."""

# Headers that must never appear in logs
SENSITIVE_HEADERS = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "set-cookie",
    }
)

REDACTED_VALUE = "[REDACTED]"


def redact_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers for logging.

    Replaces the bearer token and cookie values with [REDACTED].

    Args:
        headers: Original headers dictionary.

    Returns:
        New dictionary with sensitive values redacted.
    """
    return {
        key: REDACTED_VALUE if key.lower() in SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def redact_token(token: str) -> str:
    """Mask an access token, keeping only its last four characters.

    Args:
        token: The access token.

    Returns:
        Masked token suitable for logs.
    """
    if len(token) <= 4:  # noqa: PLR2004
        return REDACTED_VALUE
    return f"{REDACTED_VALUE}{token[-4:]}"
