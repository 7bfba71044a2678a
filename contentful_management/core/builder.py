"""Builds typed resources from decoded response bodies."""

from typing import Any

import structlog

from contentful_management.constants import SYS_TYPE_ARRAY, SYS_TYPE_LINK
from contentful_management.errors import MalformedResourceError
from contentful_management.mapper import MapperRegistry, default_registry
from contentful_management.resource import BaseResource, Link, ResourceArray


logger = structlog.get_logger()


class ResourceBuilder:
    """Dispatches JSON fragments to the mapper registered for their ``sys.type``.

    Arrays are built item by item. When a hint resource is passed, the
    freshly mapped state is copied into it so callers holding it see the
    server's state.
    """

    def __init__(self, registry: MapperRegistry | None = None) -> None:
        self._registry = registry or default_registry()
        self._log = logger.bind(component="builder")

    @property
    def registry(self) -> MapperRegistry:
        return self._registry

    def build(
        self, data: dict[str, Any], resource: BaseResource | None = None
    ) -> BaseResource | ResourceArray:
        """Build a resource or a collection.

        Args:
            data: Decoded JSON body.
            resource: Optional resource to refresh in place.

        Returns:
            The hint resource when given, otherwise a new resource or array.

        Raises:
            UnsupportedTypeError: For an unknown ``sys.type``.
            MalformedResourceError: For a payload without ``sys.type``.
        """
        resource_type = _sys_type(data)
        if resource_type == SYS_TYPE_ARRAY:
            return self._build_array(data)

        built = self._registry.get(resource_type)(data)
        if resource is None:
            return built

        resource.refresh_from(built)
        return resource

    def _build_array(self, data: dict[str, Any]) -> ResourceArray:
        raw_items = data.get("items") or []
        limit = int(data.get("limit", len(raw_items)))
        items: list[BaseResource | Link] = [
            self._build_item(item) for item in raw_items[:limit]
        ]
        self._log.debug(
            "array_built",
            item_count=len(items),
            total=data.get("total", len(items)),
        )
        return ResourceArray(
            items,
            total=int(data.get("total", len(items))),
            skip=int(data.get("skip", 0)),
            limit=limit,
        )

    def _build_item(self, item: dict[str, Any]) -> BaseResource | Link:
        resource_type = _sys_type(item)
        if resource_type == SYS_TYPE_LINK:
            return Link.from_dict(item)
        built = self.build(item)
        if isinstance(built, ResourceArray):
            msg = "Nested arrays are not supported"
            raise MalformedResourceError(msg)
        return built


def _sys_type(data: Any) -> str:
    if not isinstance(data, dict) or not isinstance(data.get("sys"), dict):
        msg = "Payload has no sys object"
        raise MalformedResourceError(msg)
    resource_type = data["sys"].get("type")
    if not resource_type:
        msg = "Payload has no sys.type"
        raise MalformedResourceError(msg)
    return str(resource_type)
