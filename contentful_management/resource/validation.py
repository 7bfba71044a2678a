"""Content type field validations.

Each validation serializes to a single-key object (``{"size": {...}}``)
plus an optional ``message``, and declares which field types accept it.
"""

from typing import Any, ClassVar

from contentful_management.errors import ResourceValidationError


MIME_TYPE_GROUPS = frozenset(
    {
        "attachment",
        "plaintext",
        "image",
        "audio",
        "video",
        "richtext",
        "presentation",
        "spreadsheet",
        "pdfdocument",
        "archive",
        "code",
        "markup",
    }
)


class BaseValidation:
    """Base class for field validations."""

    key: ClassVar[str]
    valid_field_types: ClassVar[tuple[str, ...]]

    def __init__(self, message: str | None = None) -> None:
        self.message = message

    def applies_to(self, field_type: str) -> bool:
        return field_type in self.valid_field_types

    def value(self) -> Any:
        """Payload stored under ``key``."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {self.key: self.value()}
        if self.message is not None:
            data["message"] = self.message
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseValidation):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class UniqueValidation(BaseValidation):
    key = "unique"
    valid_field_types = ("Symbol", "Integer", "Number")

    def value(self) -> bool:
        return True


class _MinMaxValidation(BaseValidation):
    """Validation bounded by an optional min and max."""

    def __init__(
        self,
        min: float | None = None,  # noqa: A002
        max: float | None = None,  # noqa: A002
        message: str | None = None,
    ) -> None:
        if min is None and max is None:
            msg = f"{type(self).__name__} needs at least one of min or max"
            raise ResourceValidationError(msg)
        if min is not None and max is not None and min > max:
            msg = f"{type(self).__name__} min {min} is greater than max {max}"
            raise ResourceValidationError(msg)
        super().__init__(message)
        self.min = min
        self.max = max

    def value(self) -> dict[str, float]:
        bounds: dict[str, float] = {}
        if self.min is not None:
            bounds["min"] = self.min
        if self.max is not None:
            bounds["max"] = self.max
        return bounds


class SizeValidation(_MinMaxValidation):
    """Length of text, number of array items or rich-text size."""

    key = "size"
    valid_field_types = ("Symbol", "Text", "RichText", "Object", "Array")


class RangeValidation(_MinMaxValidation):
    """Numeric range of the value."""

    key = "range"
    valid_field_types = ("Number", "Integer")


class InValidation(BaseValidation):
    key = "in"
    valid_field_types = ("Symbol", "Text", "Integer", "Number")

    def __init__(self, values: list[Any], message: str | None = None) -> None:
        if not values:
            msg = "InValidation needs at least one allowed value"
            raise ResourceValidationError(msg)
        super().__init__(message)
        self.values = list(values)

    def value(self) -> list[Any]:
        return list(self.values)


class RegexpValidation(BaseValidation):
    key = "regexp"
    valid_field_types = ("Symbol", "Text")

    def __init__(
        self, pattern: str, flags: str | None = None, message: str | None = None
    ) -> None:
        super().__init__(message)
        self.pattern = pattern
        self.flags = flags

    def value(self) -> dict[str, str]:
        data = {"pattern": self.pattern}
        if self.flags is not None:
            data["flags"] = self.flags
        return data


class LinkContentTypeValidation(BaseValidation):
    """Restrict entry links to some content types."""

    key = "linkContentType"
    valid_field_types = ("Link",)

    def __init__(self, content_types: list[str], message: str | None = None) -> None:
        super().__init__(message)
        self.content_types = list(content_types)

    def value(self) -> list[str]:
        return list(self.content_types)


class LinkMimetypeGroupValidation(BaseValidation):
    """Restrict asset links to some MIME type groups."""

    key = "linkMimetypeGroup"
    valid_field_types = ("Link",)

    def __init__(self, groups: list[str], message: str | None = None) -> None:
        invalid = sorted(set(groups) - MIME_TYPE_GROUPS)
        if invalid:
            msg = (
                f"Invalid MIME type groups {invalid}. "
                f"Valid values are {', '.join(sorted(MIME_TYPE_GROUPS))}."
            )
            raise ResourceValidationError(msg)
        super().__init__(message)
        self.groups = list(groups)

    def value(self) -> list[str]:
        return list(self.groups)


class NodesValidation(BaseValidation):
    """Per-node validations of a rich-text field, kept as sent by the API."""

    key = "nodes"
    valid_field_types = ("RichText",)

    def __init__(
        self, nodes: dict[str, Any] | None = None, message: str | None = None
    ) -> None:
        super().__init__(message)
        self.nodes = dict(nodes or {})

    def value(self) -> dict[str, Any]:
        return dict(self.nodes)


VALIDATION_TYPES: dict[str, type[BaseValidation]] = {
    cls.key: cls
    for cls in (
        UniqueValidation,
        SizeValidation,
        RangeValidation,
        InValidation,
        RegexpValidation,
        LinkContentTypeValidation,
        LinkMimetypeGroupValidation,
        NodesValidation,
    )
}
