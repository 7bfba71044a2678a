"""Mappers for Webhook and User resources."""

from typing import Any

from contentful_management.errors import (
    MalformedResourceError,
    ResourceValidationError,
    UnsupportedTypeError,
)
from contentful_management.mapper.base import hydrate
from contentful_management.resource.user import User
from contentful_management.resource.webhook import Webhook
from contentful_management.resource.webhook_filter import (
    FILTER_TYPES,
    BaseFilter,
    EqualityFilter,
    InclusionFilter,
    NotFilter,
    RegexpFilter,
)


def map_filter(data: dict[str, Any]) -> BaseFilter:
    """Build a webhook filter from its single-key object.

    Raises:
        UnsupportedTypeError: For unknown filter keys.
        MalformedResourceError: When the filter operands are invalid.
    """
    if not isinstance(data, dict) or len(data) != 1:
        msg = f"Invalid webhook filter {data!r}"
        raise MalformedResourceError(msg)
    key, value = next(iter(data.items()))
    if key not in FILTER_TYPES:
        raise UnsupportedTypeError(key, context="webhook filter")

    try:
        if key == NotFilter.key:
            return NotFilter(map_filter(value))
        doc, operand = value[0]["doc"], value[1]
        if key == EqualityFilter.key:
            return EqualityFilter(doc, operand)
        if key == InclusionFilter.key:
            return InclusionFilter(doc, operand)
        return RegexpFilter(doc, operand["pattern"])
    except (KeyError, IndexError, TypeError, ResourceValidationError) as e:
        msg = f"Invalid webhook filter {data!r}: {e}"
        raise MalformedResourceError(msg) from e


def map_webhook(data: dict[str, Any]) -> Webhook:
    webhook = Webhook(
        name=data.get("name", ""),
        url=data.get("url", ""),
        headers={
            header["key"]: header.get("value", "")
            for header in data.get("headers") or []
            if "key" in header
        },
        http_basic_username=data.get("httpBasicUsername"),
        filters=[map_filter(item) for item in data.get("filters") or []],
    )
    # Topics coming from the API are taken as-is
    webhook._topics = list(data.get("topics") or [])  # noqa: SLF001
    return hydrate(webhook, data)


def map_user(data: dict[str, Any]) -> User:
    user = User(
        first_name=data.get("firstName"),
        last_name=data.get("lastName"),
        email=data.get("email"),
        avatar_url=data.get("avatarUrl"),
        activated=bool(data.get("activated", False)),
        confirmed=bool(data.get("confirmed", False)),
        sign_in_count=int(data.get("signInCount", 0)),
    )
    return hydrate(user, data)
