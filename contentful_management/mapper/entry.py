"""Mapper for Entry resources."""

from typing import Any

from contentful_management.errors import MalformedResourceError
from contentful_management.mapper.base import hydrate, parse_links, system_properties
from contentful_management.resource.entry import Entry


def map_entry(data: dict[str, Any]) -> Entry:
    """Build an Entry; link envelopes inside fields become Link objects."""
    sys = system_properties(data)
    if sys.content_type is None:
        msg = f"Entry {sys.id!r} has no sys.contentType"
        raise MalformedResourceError(msg)

    fields = {
        name: {locale: parse_links(value) for locale, value in values.items()}
        for name, values in (data.get("fields") or {}).items()
    }
    entry = Entry(
        sys.content_type.id,
        fields=fields,
        metadata=data.get("metadata") or {},
    )
    return hydrate(entry, data)
