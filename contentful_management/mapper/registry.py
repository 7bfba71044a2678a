"""Registry of mappers keyed by ``sys.type``."""

from collections.abc import Iterator

from contentful_management.errors import UnsupportedTypeError
from contentful_management.mapper.api_key import (
    map_delivery_api_key,
    map_preview_api_key,
)
from contentful_management.mapper.asset import map_asset
from contentful_management.mapper.base import Mapper
from contentful_management.mapper.content_type import map_content_type
from contentful_management.mapper.entry import map_entry
from contentful_management.mapper.environment import map_environment, map_space
from contentful_management.mapper.locale import map_locale, map_tag
from contentful_management.mapper.role import map_role
from contentful_management.mapper.upload import map_upload
from contentful_management.mapper.webhook import map_user, map_webhook


class MapperRegistry:
    """Maps a ``sys.type`` discriminator to the function building it."""

    def __init__(self, mappers: dict[str, Mapper] | None = None) -> None:
        self._mappers: dict[str, Mapper] = dict(mappers or {})

    def register(self, resource_type: str, mapper: Mapper) -> None:
        self._mappers[resource_type] = mapper

    def get(self, resource_type: str) -> Mapper:
        """Look up the mapper for a ``sys.type``.

        Raises:
            UnsupportedTypeError: If no mapper is registered.
        """
        try:
            return self._mappers[resource_type]
        except KeyError:
            raise UnsupportedTypeError(resource_type) from None

    def __contains__(self, resource_type: object) -> bool:
        return resource_type in self._mappers

    def __iter__(self) -> Iterator[str]:
        return iter(self._mappers)

    @property
    def supported_types(self) -> list[str]:
        return sorted(self._mappers)


def default_registry() -> MapperRegistry:
    """Registry covering every resource type of the API."""
    return MapperRegistry(
        {
            "Space": map_space,
            "Environment": map_environment,
            "Entry": map_entry,
            "Asset": map_asset,
            "ContentType": map_content_type,
            "Locale": map_locale,
            "Tag": map_tag,
            "Upload": map_upload,
            "ApiKey": map_delivery_api_key,
            "PreviewApiKey": map_preview_api_key,
            "WebhookDefinition": map_webhook,
            "Role": map_role,
            "User": map_user,
        }
    )
