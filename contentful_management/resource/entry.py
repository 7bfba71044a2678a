"""Entry resource."""

from typing import Any

from contentful_management.constants import HEADER_CONTENT_TYPE_ID
from contentful_management.resource.base import BaseResource, format_value
from contentful_management.resource.capability import VERSIONABLE
from contentful_management.resource.link import Link, Reference, Resolved, Unresolved


class Entry(BaseResource):
    """A resource with type "Entry".

    Field values are localized: ``fields[name][locale]``. Access goes
    through the explicit ``get_field``/``set_field`` pair.

    API documentation:
    https://www.contentful.com/developers/docs/references/content-management-api/#/reference/entries
    """

    resource_type = "Entry"
    resource_kind = "Entry"
    id_parameter = "entry"
    capabilities = VERSIONABLE

    def __init__(
        self,
        content_type_id: str,
        fields: dict[str, dict[str, Any]] | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the entry.

        Args:
            content_type_id: Id of the entry's content type.
            fields: Initial localized field values.
            metadata: Initial metadata (tags, concepts).
        """
        super().__init__()
        self._content_type_id = content_type_id
        self._fields: dict[str, dict[str, Any]] = {
            name: dict(values) for name, values in (fields or {}).items()
        }
        self._metadata: dict[str, Any] = dict(metadata or {})

    @property
    def content_type_id(self) -> str:
        return self._content_type_id

    def get_field(self, name: str, locale: str) -> Any:
        """Get a field value for one locale, None when unset."""
        return self._fields.get(name, {}).get(locale)

    def get_fields(self, locale: str | None = None) -> dict[str, Any]:
        """Get all fields.

        Args:
            locale: When given, return ``{name: value}`` for that locale
                instead of the full localized mapping.

        Returns:
            Copy of the field values.
        """
        if locale is None:
            return {name: dict(values) for name, values in self._fields.items()}
        return {name: values.get(locale) for name, values in self._fields.items()}

    def set_field(self, name: str, locale: str, value: Any) -> "Entry":
        """Set a field value for one locale.

        Returns:
            The entry itself.
        """
        self._fields.setdefault(name, {})[locale] = value
        return self

    def get_reference(self, name: str, locale: str) -> Reference | None:
        """Get a link-valued field as a Reference.

        Returns:
            Unresolved for Link values, Resolved for resource values,
            None when the field is unset or holds another kind of value.
        """
        value = self.get_field(name, locale)
        if isinstance(value, Link):
            return Unresolved(value)
        if isinstance(value, BaseResource):
            return Resolved(value)
        return None

    def get_metadata(self) -> dict[str, Any]:
        return dict(self._metadata)

    def get_metadata_value(self, name: str) -> Any:
        return self._metadata.get(name)

    def set_metadata_value(self, name: str, value: Any) -> "Entry":
        self._metadata[name] = value
        return self

    @property
    def tag_ids(self) -> list[str]:
        """Ids of the tags attached to the entry."""
        return [tag["sys"]["id"] for tag in self._metadata.get("tags", [])]

    def add_tag(self, tag_id: str) -> "Entry":
        """Attach a tag; attaching an already present tag is a no-op."""
        if tag_id in self.tag_ids:
            return self
        tags = list(self._metadata.get("tags", []))
        tags.append(Link(id=tag_id, link_type="Tag").to_dict())
        return self.set_metadata_value("tags", tags)

    def remove_tag(self, tag_id: str) -> "Entry":
        tags = [
            tag for tag in self._metadata.get("tags", []) if tag["sys"]["id"] != tag_id
        ]
        return self.set_metadata_value("tags", tags)

    def headers_for_creation(self) -> dict[str, str]:
        return {HEADER_CONTENT_TYPE_ID: self._content_type_id}

    def serialize_fields(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "fields": {
                name: {locale: format_value(value) for locale, value in values.items()}
                for name, values in self._fields.items()
            }
        }
        if self._metadata:
            data["metadata"] = format_value(self._metadata)
        return data
