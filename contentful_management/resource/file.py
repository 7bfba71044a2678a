"""File values attached to assets.

An asset file goes through three shapes:
- RemoteUploadFile or LocalUploadFile before processing
- File (or ImageFile for images) once the API has processed it
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from contentful_management.resource.link import Link


class BaseFile(BaseModel):
    """Common attributes of every asset file."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    file_name: str = Field(min_length=1)
    content_type: str = Field(min_length=1)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the API's camelCase file object."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class RemoteUploadFile(BaseFile):
    """Unprocessed file the API will download from a public URL."""

    upload: str = Field(min_length=1)


class LocalUploadFile(BaseFile):
    """Unprocessed file referring to an Upload resource."""

    upload_from: Link


class File(BaseFile):
    """Processed file hosted on the assets CDN."""

    url: str
    details: dict[str, Any] = Field(default_factory=dict)

    @property
    def size(self) -> int | None:
        """File size in bytes, if reported."""
        return self.details.get("size")


class ImageFile(File):
    """Processed image file."""

    @property
    def width(self) -> int | None:
        return self.details.get("image", {}).get("width")

    @property
    def height(self) -> int | None:
        return self.details.get("image", {}).get("height")
