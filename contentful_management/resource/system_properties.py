"""System properties (``sys`` block) shared by every resource."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from contentful_management.resource.link import Link


class SystemProperties(BaseModel):
    """The ``sys`` block of a resource.

    Only ``type`` is always present. Resources built from API responses
    also carry an ``id``; locally constructed resources do not until they
    are created. Unknown keys sent by the API are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    id: str | None = Field(default=None, min_length=1)
    type: str = Field(min_length=1)
    version: int | None = None

    space: Link | None = None
    environment: Link | None = None
    organization: Link | None = None
    content_type: Link | None = None

    created_at: datetime | None = None
    updated_at: datetime | None = None
    created_by: Link | None = None
    updated_by: Link | None = None

    published_version: int | None = None
    published_counter: int | None = None
    published_at: datetime | None = None
    first_published_at: datetime | None = None
    published_by: Link | None = None

    archived_version: int | None = None
    archived_at: datetime | None = None
    archived_by: Link | None = None

    expires_at: datetime | None = None
    visibility: str | None = None

    @property
    def is_draft(self) -> bool:
        """Whether the resource has never been published."""
        return self.published_version is None

    @property
    def is_published(self) -> bool:
        """Whether the published version is the current version."""
        return (
            self.published_version is not None
            and self.version == self.published_version + 1
        )

    @property
    def is_updated(self) -> bool:
        """Whether the resource changed after its last publication."""
        return (
            self.published_version is not None
            and self.version is not None
            and self.version >= self.published_version + 2
        )

    @property
    def is_archived(self) -> bool:
        return self.archived_version is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the API's camelCase ``sys`` object."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
