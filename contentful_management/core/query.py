"""Immutable query builder for collection endpoints."""

from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Any
from urllib.parse import urlencode

from contentful_management.constants import QUERY_MAX_LIMIT
from contentful_management.errors import ResourceValidationError
from contentful_management.resource.validation import MIME_TYPE_GROUPS


VALID_OPERATORS = frozenset(
    {
        "ne",
        "all",
        "in",
        "nin",
        "exists",
        "lt",
        "lte",
        "gt",
        "gte",
        "match",
        "near",
        "within",
    }
)


@dataclass(frozen=True)
class Query:
    """Search parameters for a collection request.

    Every builder method returns a new Query; an instance never changes
    once built.

    Example:
        query = Query().set_content_type("blogPost").order_by("sys.createdAt")
    """

    params: tuple[tuple[str, str], ...] = ()
    order: tuple[str, ...] = ()

    def set_skip(self, skip: int) -> "Query":
        if skip < 0:
            msg = f"Skip must be zero or positive, got {skip}"
            raise ResourceValidationError(msg)
        return self._with("skip", str(skip))

    def set_limit(self, limit: int) -> "Query":
        if not 1 <= limit <= QUERY_MAX_LIMIT:
            msg = f"Limit must be between 1 and {QUERY_MAX_LIMIT}, got {limit}"
            raise ResourceValidationError(msg)
        return self._with("limit", str(limit))

    def order_by(self, field: str, reverse: bool = False) -> "Query":
        """Add a sort key; keys added first take precedence."""
        key = f"-{field}" if reverse else field
        return replace(self, order=(*self.order, key))

    def set_content_type(self, content_type_id: str) -> "Query":
        return self._with("content_type", content_type_id)

    def set_mime_type_group(self, group: str) -> "Query":
        if group not in MIME_TYPE_GROUPS:
            msg = (
                f'Unknown MIME type group "{group}". '
                f"Valid values are {', '.join(sorted(MIME_TYPE_GROUPS))}."
            )
            raise ResourceValidationError(msg)
        return self._with("mimetype_group", group)

    def where(self, field: str, value: Any, operator: str | None = None) -> "Query":
        """Filter on a field, e.g. ``where("fields.price", 10, "gte")``.

        Raises:
            ResourceValidationError: If the operator is unknown.
        """
        if operator is not None:
            if operator not in VALID_OPERATORS:
                msg = (
                    f'Unknown operator "{operator}". '
                    f"Valid values are {', '.join(sorted(VALID_OPERATORS))}."
                )
                raise ResourceValidationError(msg)
            field = f"{field}[{operator}]"
        return self._with(field, _format_value(value))

    def select(self, fields: list[str]) -> "Query":
        return self._with("select", ",".join(fields))

    def links_to_entry(self, entry_id: str) -> "Query":
        return self._with("links_to_entry", entry_id)

    def links_to_asset(self, asset_id: str) -> "Query":
        return self._with("links_to_asset", asset_id)

    def get_query_data(self) -> dict[str, str]:
        """Parameters as a dict; later values of a key win."""
        data = dict(self.params)
        if self.order:
            data["order"] = ",".join(self.order)
        return data

    def get_query_string(self) -> str:
        return urlencode(self.get_query_data())

    def _with(self, key: str, value: str) -> "Query":
        params = tuple((k, v) for k, v in self.params if k != key)
        return replace(self, params=(*params, (key, value)))


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime | date):
        return value.isoformat()
    if isinstance(value, list | tuple):
        return ",".join(_format_value(item) for item in value)
    return str(value)
