"""Mapper for Upload resources."""

from typing import Any

from contentful_management.mapper.base import hydrate
from contentful_management.resource.upload import Upload


def map_upload(data: dict[str, Any]) -> Upload:
    """Build an Upload; the API never echoes the uploaded bytes."""
    return hydrate(Upload(), data)
