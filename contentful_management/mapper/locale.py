"""Mappers for Locale and Tag resources."""

from typing import Any

from contentful_management.mapper.base import hydrate
from contentful_management.resource.locale import Locale
from contentful_management.resource.tag import Tag


def map_locale(data: dict[str, Any]) -> Locale:
    locale = Locale(
        name=data.get("name", ""),
        code=data.get("code", ""),
        fallback_code=data.get("fallbackCode"),
        optional=bool(data.get("optional", False)),
        content_delivery_api=bool(data.get("contentDeliveryApi", True)),
        content_management_api=bool(data.get("contentManagementApi", True)),
        default=bool(data.get("default", False)),
    )
    return hydrate(locale, data)


def map_tag(data: dict[str, Any]) -> Tag:
    # Visibility is read back from sys once hydrated
    return hydrate(Tag(data.get("name", "")), data)
