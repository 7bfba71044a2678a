"""Mapper for ContentType resources, their fields and validations."""

from typing import Any

from contentful_management.errors import MalformedResourceError, UnsupportedTypeError
from contentful_management.mapper.base import hydrate
from contentful_management.resource.content_type import ContentType
from contentful_management.resource.field import (
    FIELD_TYPES,
    ArrayField,
    BaseField,
    LinkField,
)
from contentful_management.resource.validation import (
    VALIDATION_TYPES,
    BaseValidation,
    InValidation,
    LinkContentTypeValidation,
    LinkMimetypeGroupValidation,
    NodesValidation,
    RangeValidation,
    RegexpValidation,
    SizeValidation,
    UniqueValidation,
)


def map_validation(data: dict[str, Any]) -> BaseValidation:
    """Build a validation from its single-key object.

    Raises:
        UnsupportedTypeError: If no known validation key is present.
    """
    message = data.get("message")
    keys = [key for key in data if key != "message"]
    key = next((k for k in keys if k in VALIDATION_TYPES), None)
    if key is None:
        raise UnsupportedTypeError(", ".join(keys) or "<empty>", context="validation")

    value = data[key]
    validation_cls = VALIDATION_TYPES[key]
    if validation_cls is UniqueValidation:
        return UniqueValidation(message=message)
    if validation_cls in (SizeValidation, RangeValidation):
        return validation_cls(
            min=value.get("min"), max=value.get("max"), message=message
        )
    if validation_cls is InValidation:
        return InValidation(value, message=message)
    if validation_cls is RegexpValidation:
        return RegexpValidation(
            value.get("pattern", ""), flags=value.get("flags"), message=message
        )
    if validation_cls is LinkContentTypeValidation:
        return LinkContentTypeValidation(value, message=message)
    if validation_cls is LinkMimetypeGroupValidation:
        return LinkMimetypeGroupValidation(value, message=message)
    return NodesValidation(value, message=message)


def map_field(data: dict[str, Any]) -> BaseField:
    """Build a field definition.

    Raises:
        UnsupportedTypeError: For unknown field types.
        MalformedResourceError: When ``id`` or ``type`` is missing.
    """
    field_type = data.get("type")
    if not field_type or not data.get("id"):
        msg = f"Content type field without id or type: {data!r}"
        raise MalformedResourceError(msg)
    if field_type not in FIELD_TYPES:
        raise UnsupportedTypeError(field_type, context="field")

    options: dict[str, Any] = {
        "required": bool(data.get("required", False)),
        "localized": bool(data.get("localized", False)),
        "disabled": bool(data.get("disabled", False)),
        "omitted": bool(data.get("omitted", False)),
        "validations": [map_validation(v) for v in data.get("validations") or []],
    }
    field_id = data["id"]
    name = data.get("name", field_id)

    if field_type == "Link":
        return LinkField(field_id, name, data.get("linkType", ""), **options)
    if field_type == "Array":
        items = data.get("items") or {}
        return ArrayField(
            field_id,
            name,
            items.get("type", ""),
            items_link_type=items.get("linkType"),
            items_validations=[
                map_validation(v) for v in items.get("validations") or []
            ],
            **options,
        )
    return FIELD_TYPES[field_type](field_id, name, **options)


def map_content_type(data: dict[str, Any]) -> ContentType:
    content_type = ContentType(
        name=data.get("name", ""),
        description=data.get("description"),
        fields=[map_field(field) for field in data.get("fields") or []],
    )
    # Bypasses the setter check: the API may report a display field that
    # was removed since.
    content_type._display_field = data.get("displayField")  # noqa: SLF001
    return hydrate(content_type, data)
