"""Webhook filters.

A filter narrows the events a webhook fires for. Each serializes to a
single-key object, e.g. ``{"equals": [{"doc": "sys.id"}, "nyancat"]}``.
"""

from typing import Any, ClassVar

from contentful_management.errors import ResourceValidationError


class BaseFilter:
    """Base class for webhook filters."""

    key: ClassVar[str]

    def value(self) -> Any:
        """Payload stored under ``key``."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        return {self.key: self.value()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseFilter):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


class _DocumentFilter(BaseFilter):
    """Filter comparing one property of the event payload.

    ``doc`` is a dotted path such as ``sys.contentType.sys.id``.
    """

    def __init__(self, doc: str) -> None:
        if not doc:
            msg = "Webhook filter needs a document path"
            raise ResourceValidationError(msg)
        self.doc = doc


class EqualityFilter(_DocumentFilter):
    key = "equals"

    def __init__(self, doc: str, value: str) -> None:
        super().__init__(doc)
        self.expected = value

    def value(self) -> list[Any]:
        return [{"doc": self.doc}, self.expected]


class InclusionFilter(_DocumentFilter):
    key = "in"

    def __init__(self, doc: str, values: list[str]) -> None:
        super().__init__(doc)
        self.values = list(values)

    def value(self) -> list[Any]:
        return [{"doc": self.doc}, list(self.values)]


class RegexpFilter(_DocumentFilter):
    key = "regexp"

    def __init__(self, doc: str, pattern: str) -> None:
        super().__init__(doc)
        if not pattern:
            msg = "Webhook regexp filter needs a pattern"
            raise ResourceValidationError(msg)
        self.pattern = pattern

    def value(self) -> list[Any]:
        return [{"doc": self.doc}, {"pattern": self.pattern}]


class NotFilter(BaseFilter):
    """Negates another filter."""

    key = "not"

    def __init__(self, child: BaseFilter) -> None:
        self.child = child

    def value(self) -> dict[str, Any]:
        return self.child.to_dict()


FILTER_TYPES: dict[str, type[BaseFilter]] = {
    cls.key: cls for cls in (EqualityFilter, InclusionFilter, RegexpFilter, NotFilter)
}
