"""Environment resource."""

from typing import Any

from contentful_management.constants import HEADER_SOURCE_ENVIRONMENT
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE


class Environment(BaseResource):
    """A resource with type "Environment".

    New environments are cloned from ``master`` unless a source
    environment id is given.
    """

    resource_type = "Environment"
    resource_kind = "Environment"
    id_parameter = "environment"
    capabilities = EDITABLE
    local_attributes = frozenset({"_source_environment_id"})

    def __init__(self, name: str, source_environment_id: str | None = None) -> None:
        super().__init__()
        self.name = name
        self._source_environment_id = source_environment_id

    def headers_for_creation(self) -> dict[str, str]:
        if self._source_environment_id is None:
            return {}
        return {HEADER_SOURCE_ENVIRONMENT: self._source_environment_id}

    def serialize_fields(self) -> dict[str, Any]:
        return {"name": self.name}
