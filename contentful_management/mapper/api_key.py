"""Mappers for delivery and preview API keys."""

from typing import Any

from contentful_management.mapper.base import hydrate, optional_link
from contentful_management.resource.api_key import DeliveryApiKey, PreviewApiKey
from contentful_management.resource.link import Link


def _environments(data: dict[str, Any]) -> list[Link]:
    links = (optional_link(env) for env in data.get("environments") or [])
    return [link for link in links if link is not None]


def map_delivery_api_key(data: dict[str, Any]) -> DeliveryApiKey:
    api_key = DeliveryApiKey(
        name=data.get("name", ""),
        description=data.get("description"),
        access_token=data.get("accessToken"),
        environments=_environments(data),
        preview_api_key=optional_link(
            data.get("preview_api_key") or data.get("previewApiKey")
        ),
    )
    return hydrate(api_key, data)


def map_preview_api_key(data: dict[str, Any]) -> PreviewApiKey:
    api_key = PreviewApiKey(
        name=data.get("name", ""),
        description=data.get("description"),
        access_token=data.get("accessToken"),
        environments=_environments(data),
    )
    return hydrate(api_key, data)
