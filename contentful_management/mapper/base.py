"""Helpers shared by the per-kind mappers.

A mapper is a pure function turning one raw JSON fragment into a new
resource. Optional keys default; a fragment without ``sys.id`` is
rejected with MalformedResourceError.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from contentful_management.errors import MalformedResourceError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.link import Link, is_link_payload
from contentful_management.resource.system_properties import SystemProperties


ResourceT = TypeVar("ResourceT", bound=BaseResource)

Mapper = Callable[[dict[str, Any]], BaseResource]


def system_properties(data: Any) -> SystemProperties:
    """Validate and parse the ``sys`` block of a fragment.

    Args:
        data: Raw JSON fragment.

    Returns:
        Parsed system properties.

    Raises:
        MalformedResourceError: If ``sys``, ``sys.type`` or ``sys.id`` is
            missing or invalid.
    """
    if not isinstance(data, dict) or not isinstance(data.get("sys"), dict):
        msg = "Resource payload has no sys object"
        raise MalformedResourceError(msg)

    sys = data["sys"]
    if not sys.get("id"):
        msg = f"Resource payload of type {sys.get('type')!r} has no sys.id"
        raise MalformedResourceError(msg)

    try:
        return SystemProperties.model_validate(sys)
    except ValidationError as e:
        msg = f"Invalid sys object for {sys.get('type')!r}: {e}"
        raise MalformedResourceError(msg) from e


def hydrate(resource: ResourceT, data: dict[str, Any]) -> ResourceT:
    """Install the parsed ``sys`` block on a freshly constructed resource.

    Args:
        resource: Resource built from the fragment's non-sys data.
        data: Raw JSON fragment.

    Returns:
        The same resource.
    """
    resource._sys = system_properties(data)  # noqa: SLF001
    return resource


def parse_links(value: Any) -> Any:
    """Recursively replace link envelopes with Link objects."""
    if is_link_payload(value):
        return Link.from_dict(value)
    if isinstance(value, dict):
        return {key: parse_links(item) for key, item in value.items()}
    if isinstance(value, list):
        return [parse_links(item) for item in value]
    return value


def optional_link(value: Any) -> Link | None:
    """Parse an optional link envelope."""
    if is_link_payload(value):
        return Link.from_dict(value)
    return None
