"""ContentType resource."""

from typing import Any

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE, Capability
from contentful_management.resource.field import BaseField


class ContentType(BaseResource):
    """A resource with type "ContentType".

    Publishing a content type activates it; entries can only be created
    for published content types.

    API documentation:
    https://www.contentful.com/developers/docs/references/content-management-api/#/reference/content-types
    """

    resource_type = "ContentType"
    resource_kind = "ContentType"
    id_parameter = "contentType"
    capabilities = EDITABLE | {Capability.PUBLISHABLE}

    def __init__(
        self,
        name: str,
        description: str | None = None,
        display_field: str | None = None,
        fields: list[BaseField] | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.description = description
        self._display_field = display_field
        self._fields: list[BaseField] = list(fields or [])

    @property
    def display_field(self) -> str | None:
        return self._display_field

    @display_field.setter
    def display_field(self, field_id: str | None) -> None:
        if field_id is not None and self.get_field(field_id) is None:
            msg = f"Display field {field_id!r} is not a field of this content type"
            raise ResourceValidationError(msg)
        self._display_field = field_id

    @property
    def fields(self) -> list[BaseField]:
        return list(self._fields)

    def get_field(self, field_id: str) -> BaseField | None:
        for field in self._fields:
            if field.id == field_id:
                return field
        return None

    def add_field(self, field: BaseField) -> "ContentType":
        """Append a field.

        Raises:
            ResourceValidationError: If a field with the same id exists.
        """
        if self.get_field(field.id) is not None:
            msg = f"Field {field.id!r} already exists"
            raise ResourceValidationError(msg)
        self._fields.append(field)
        return self

    def remove_field(self, field_id: str) -> "ContentType":
        self._fields = [field for field in self._fields if field.id != field_id]
        if self._display_field == field_id:
            self._display_field = None
        return self

    def serialize_fields(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "displayField": self._display_field,
            "fields": [field.to_dict() for field in self._fields],
        }
