"""Python client for the Contentful Content Management API."""

from contentful_management.client import Client
from contentful_management.config import ClientConfig
from contentful_management.constants import SDK_VERSION
from contentful_management.core import LinkErrorPolicy, Query
from contentful_management.errors import (
    ApiError,
    ContentfulError,
    MalformedResourceError,
    MissingUriParameterError,
    NotFoundError,
    RateLimitExceededError,
    RateWaitTooLongError,
    ResourceValidationError,
    UnsupportedActionError,
    UnsupportedTypeError,
)
from contentful_management.proxy import EnvironmentProxy, SpaceProxy
from contentful_management.settings import ClientSettings


__version__ = SDK_VERSION

__all__ = [
    "ApiError",
    "Client",
    "ClientConfig",
    "ClientSettings",
    "ContentfulError",
    "EnvironmentProxy",
    "LinkErrorPolicy",
    "MalformedResourceError",
    "MissingUriParameterError",
    "NotFoundError",
    "Query",
    "RateLimitExceededError",
    "RateWaitTooLongError",
    "ResourceValidationError",
    "SpaceProxy",
    "UnsupportedActionError",
    "UnsupportedTypeError",
    "__version__",
]
