"""Links and references between resources."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_serializer,
    model_validator,
)

from contentful_management.constants import SYS_TYPE_LINK
from contentful_management.errors import MalformedResourceError


if TYPE_CHECKING:
    from contentful_management.resource.base import BaseResource


class Link(BaseModel):
    """Unresolved reference to a resource.

    Serializes as ``{"sys": {"type": "Link", "linkType": ..., "id": ...}}``.
    The optional space/environment scope is used when resolving the link
    and never appears in the serialized form.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    id: str = Field(min_length=1)
    link_type: str = Field(min_length=1, alias="linkType")
    space_id: str | None = Field(default=None, alias="spaceId")
    environment_id: str | None = Field(default=None, alias="environmentId")

    @model_validator(mode="before")
    @classmethod
    def unwrap_envelope(cls, data: Any) -> Any:
        """Accept the API's ``{"sys": {...}}`` envelope."""
        if isinstance(data, dict) and isinstance(data.get("sys"), dict):
            sys = data["sys"]
            return {"id": sys.get("id"), "linkType": sys.get("linkType")}
        return data

    @model_serializer
    def serialize(self) -> dict[str, Any]:
        """Serialize to the API's link envelope."""
        return {
            "sys": {
                "type": SYS_TYPE_LINK,
                "linkType": self.link_type,
                "id": self.id,
            }
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Link":
        """Create a Link from an API link envelope.

        Raises:
            MalformedResourceError: If the envelope lacks an id or link type.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            msg = f"Invalid link {data!r}: {e}"
            raise MalformedResourceError(msg) from e

    def to_dict(self) -> dict[str, Any]:
        """Return the API link envelope."""
        return self.serialize()

    def scoped(
        self, space_id: str | None = None, environment_id: str | None = None
    ) -> "Link":
        """Return a copy of this link scoped to a space and/or environment."""
        update: dict[str, str] = {}
        if space_id is not None:
            update["space_id"] = space_id
        if environment_id is not None:
            update["environment_id"] = environment_id
        return self.model_copy(update=update)

    def scope_parameters(self) -> dict[str, str]:
        """URI parameters implied by this link's scope."""
        parameters: dict[str, str] = {}
        if self.space_id is not None:
            parameters["space"] = self.space_id
        if self.environment_id is not None:
            parameters["environment"] = self.environment_id
        return parameters


def is_link_payload(value: Any) -> bool:
    """Check whether a raw JSON value is a link envelope."""
    return (
        isinstance(value, dict)
        and isinstance(value.get("sys"), dict)
        and value["sys"].get("type") == SYS_TYPE_LINK
    )


@dataclass(frozen=True)
class Unresolved:
    """A reference that has not been fetched yet."""

    link: Link


@dataclass(frozen=True)
class Resolved:
    """A reference whose target resource has been fetched."""

    resource: "BaseResource"

    @property
    def link(self) -> Link:
        return self.resource.as_link()


Reference = Unresolved | Resolved
