"""Space resource."""

from typing import Any

from contentful_management.constants import HEADER_ORGANIZATION
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE


class Space(BaseResource):
    """A resource with type "Space".

    The organization and default locale are only used on creation.
    """

    resource_type = "Space"
    resource_kind = "Space"
    id_parameter = "space"
    capabilities = EDITABLE
    local_attributes = frozenset({"_organization_id", "_default_locale"})

    def __init__(
        self,
        name: str,
        organization_id: str | None = None,
        default_locale: str = "en-US",
    ) -> None:
        super().__init__()
        self.name = name
        self._organization_id = organization_id
        self._default_locale = default_locale

    @property
    def organization_id(self) -> str | None:
        if self.sys.organization is not None:
            return self.sys.organization.id
        return self._organization_id

    def headers_for_creation(self) -> dict[str, str]:
        if self._organization_id is None:
            return {}
        return {HEADER_ORGANIZATION: self._organization_id}

    def serialize_fields(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name}
        if self.id is None:
            data["defaultLocale"] = self._default_locale
        return data
