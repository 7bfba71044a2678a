"""Error types for the Content Management API client."""

from enum import Enum
from typing import Any

import httpx

from contentful_management.constants import HEADER_RATE_LIMIT_SECOND_REMAINING


class ApiErrorClass(str, Enum):
    """Classification of API failures for metrics and logging.

    - NETWORK_TIMEOUT: Request timed out
    - CONNECTION_ERROR: Could not establish connection
    - HTTP_4XX: Client error other than 429
    - HTTP_5XX: Server error
    - RATE_LIMITED: 429 Too Many Requests
    - UNKNOWN: Unclassified error
    """

    NETWORK_TIMEOUT = "NETWORK_TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    HTTP_4XX = "HTTP_4XX"
    HTTP_5XX = "HTTP_5XX"
    RATE_LIMITED = "RATE_LIMITED"
    UNKNOWN = "UNKNOWN"


class ContentfulError(Exception):
    """Base exception for every error raised by this package."""


class ApiError(ContentfulError):
    """Error response returned by the Content Management API.

    Provides structured error information taken from the Contentful error
    envelope (``{"sys": {"type": "Error", "id": ...}, "message": ...}``).
    """

    error_class: ApiErrorClass = ApiErrorClass.UNKNOWN

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        error_id: str | None = None,
        request_id: str | None = None,
        details: dict[str, Any] | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize the API error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code of the response.
            error_id: Contentful error identifier (``sys.id`` of the body).
            request_id: Request identifier reported by the API.
            details: Structured error details from the response body.
            response: The raw HTTP response, if available.
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_id = error_id
        self.request_id = request_id
        self.details = details or {}
        self.response = response

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error_class": self.error_class.value,
            "message": self.message,
            "status_code": self.status_code,
            "error_id": self.error_id,
            "request_id": self.request_id,
            "details": self.details,
        }


class BadRequestError(ApiError):
    """The request was malformed."""

    error_class = ApiErrorClass.HTTP_4XX


class InvalidQueryError(BadRequestError):
    """The query parameters were rejected."""


class AccessTokenInvalidError(ApiError):
    """The access token is missing, expired or revoked."""

    error_class = ApiErrorClass.HTTP_4XX


class AccessDeniedError(ApiError):
    """The token is not allowed to perform the operation."""

    error_class = ApiErrorClass.HTTP_4XX


class NotFoundError(ApiError):
    """The requested resource does not exist."""

    error_class = ApiErrorClass.HTTP_4XX


class VersionMismatchError(ApiError):
    """The ``X-Contentful-Version`` header does not match the server version."""

    error_class = ApiErrorClass.HTTP_4XX


class ValidationFailedError(ApiError):
    """The resource payload failed server-side validation."""

    error_class = ApiErrorClass.HTTP_4XX


class UnknownKeyError(ApiError):
    """The payload contains keys unknown to the API."""

    error_class = ApiErrorClass.HTTP_4XX


class MissingKeyError(ApiError):
    """The payload is missing a required key."""

    error_class = ApiErrorClass.HTTP_4XX


class DefaultLocaleNotDeletableError(ApiError):
    """The default locale of an environment cannot be deleted."""

    error_class = ApiErrorClass.HTTP_4XX


class FallbackLocaleNotDeletableError(ApiError):
    """A locale used as fallback by another locale cannot be deleted."""

    error_class = ApiErrorClass.HTTP_4XX


class FallbackLocaleNotRenameableError(ApiError):
    """A locale used as fallback by another locale cannot change its code."""

    error_class = ApiErrorClass.HTTP_4XX


class InternalServerError(ApiError):
    """The API failed to process the request."""

    error_class = ApiErrorClass.HTTP_5XX


class RateLimitExceededError(ApiError):
    """The API rejected the request with HTTP 429."""

    error_class = ApiErrorClass.RATE_LIMITED

    @property
    def second_remaining(self) -> int:
        """Seconds until the per-second quota resets, 0 if not advertised."""
        if self.response is None:
            return 0
        value = self.response.headers.get(HEADER_RATE_LIMIT_SECOND_REMAINING)
        if not value:
            return 0
        try:
            return max(0, int(value))
        except ValueError:
            return 0


class RateWaitTooLongError(ApiError):
    """The advertised rate-limit wait exceeds the configured maximum."""

    error_class = ApiErrorClass.RATE_LIMITED


class UnsupportedTypeError(ContentfulError):
    """A payload carries a ``sys.type`` (or field/validation type) this client
    does not know.

    If raised for a server response, the API and this client are out of sync.
    """

    def __init__(self, type_name: str, context: str = "resource") -> None:
        """Initialize the error.

        Args:
            type_name: The unknown type identifier.
            context: What kind of type was being resolved.
        """
        self.type_name = type_name
        self.context = context
        super().__init__(f"Unsupported {context} type: {type_name!r}")


class MalformedResourceError(ContentfulError):
    """A payload is structurally invalid (e.g. missing ``sys.id``)."""


class MissingUriParameterError(ContentfulError):
    """A URI template placeholder has no matching parameter."""

    def __init__(self, parameter: str, template: str) -> None:
        """Initialize the error.

        Args:
            parameter: Name of the missing placeholder.
            template: The URI template being expanded.
        """
        self.parameter = parameter
        self.template = template
        super().__init__(
            f"Missing required parameter {parameter!r} for URI {template!r}"
        )


class UnsupportedActionError(ContentfulError):
    """A resource was asked to perform an action it does not support."""


class ResourceValidationError(ContentfulError, ValueError):
    """A value assigned through a setter or query builder is invalid."""


# Contentful error identifiers (``sys.id`` of an Error body)
ERRORS_BY_ID: dict[str, type[ApiError]] = {
    "BadRequest": BadRequestError,
    "InvalidQuery": InvalidQueryError,
    "AccessTokenInvalid": AccessTokenInvalidError,
    "AccessDenied": AccessDeniedError,
    "NotFound": NotFoundError,
    "VersionMismatch": VersionMismatchError,
    "ValidationFailed": ValidationFailedError,
    "UnknownKey": UnknownKeyError,
    "MissingKey": MissingKeyError,
    "DefaultLocaleNotDeletable": DefaultLocaleNotDeletableError,
    "FallbackLocaleNotDeletable": FallbackLocaleNotDeletableError,
    "FallbackLocaleNotRenameable": FallbackLocaleNotRenameableError,
    "RateLimitExceeded": RateLimitExceededError,
    "ServerError": InternalServerError,
}

ERRORS_BY_STATUS: dict[int, type[ApiError]] = {
    400: BadRequestError,
    401: AccessTokenInvalidError,
    403: AccessDeniedError,
    404: NotFoundError,
    409: VersionMismatchError,
    422: ValidationFailedError,
    429: RateLimitExceededError,
}


def error_class_for(status_code: int, error_id: str | None) -> type[ApiError]:
    """Pick the exception class for an error response.

    The Contentful ``sys.id`` wins over the status code.

    Args:
        status_code: HTTP status code.
        error_id: ``sys.id`` from the error body, if any.

    Returns:
        The ApiError subclass to raise.
    """
    if error_id and error_id in ERRORS_BY_ID:
        return ERRORS_BY_ID[error_id]
    if status_code in ERRORS_BY_STATUS:
        return ERRORS_BY_STATUS[status_code]
    if status_code >= 500:  # noqa: PLR2004
        return InternalServerError
    if status_code >= 400:  # noqa: PLR2004
        return BadRequestError
    return ApiError
