"""Constraints restricting which resources a role policy applies to."""

from typing import Any, ClassVar

from contentful_management.errors import ResourceValidationError


class BaseConstraint:
    """Base class for policy constraints.

    Serializes to a single-key object such as
    ``{"equals": [{"doc": "sys.type"}, "Entry"]}``.
    """

    key: ClassVar[str]

    def value(self) -> Any:
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        return {self.key: self.value()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseConstraint):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"


def _require_doc(doc: str) -> str:
    if not doc:
        msg = "Constraint needs a document path"
        raise ResourceValidationError(msg)
    return doc


class EqualityConstraint(BaseConstraint):
    key = "equals"

    def __init__(self, doc: str, value: Any) -> None:
        self.doc = _require_doc(doc)
        self.expected = value

    def value(self) -> list[Any]:
        return [{"doc": self.doc}, self.expected]


class PathsConstraint(BaseConstraint):
    """Limits a policy to some fields, e.g. ``fields.title.%``."""

    key = "paths"

    def __init__(self, doc: str) -> None:
        self.doc = _require_doc(doc)

    def value(self) -> list[dict[str, str]]:
        return [{"doc": self.doc}]


class _CompositeConstraint(BaseConstraint):
    def __init__(self, children: list[BaseConstraint]) -> None:
        self.children = list(children)

    def add(self, child: BaseConstraint) -> "_CompositeConstraint":
        self.children.append(child)
        return self

    def value(self) -> list[dict[str, Any]]:
        return [child.to_dict() for child in self.children]


class AndConstraint(_CompositeConstraint):
    key = "and"


class OrConstraint(_CompositeConstraint):
    key = "or"


class NotConstraint(BaseConstraint):
    key = "not"

    def __init__(self, child: BaseConstraint) -> None:
        self.child = child

    def value(self) -> dict[str, Any]:
        return self.child.to_dict()


CONSTRAINT_TYPES: dict[str, type[BaseConstraint]] = {
    cls.key: cls
    for cls in (
        AndConstraint,
        OrConstraint,
        NotConstraint,
        EqualityConstraint,
        PathsConstraint,
    )
}
