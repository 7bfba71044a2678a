"""Mapper for Asset resources and their files."""

from typing import Any

from pydantic import ValidationError

from contentful_management.errors import MalformedResourceError
from contentful_management.mapper.base import hydrate
from contentful_management.resource.asset import Asset
from contentful_management.resource.file import (
    BaseFile,
    File,
    ImageFile,
    LocalUploadFile,
    RemoteUploadFile,
)


def map_file(data: dict[str, Any]) -> BaseFile:
    """Pick the file variant from the keys present.

    - ``url``: processed File, ImageFile when ``details.image`` is set
    - ``upload``: RemoteUploadFile
    - ``uploadFrom``: LocalUploadFile

    Raises:
        MalformedResourceError: If no variant matches.
    """
    try:
        if "url" in data:
            if "image" in (data.get("details") or {}):
                return ImageFile.model_validate(data)
            return File.model_validate(data)
        if "upload" in data:
            return RemoteUploadFile.model_validate(data)
        if "uploadFrom" in data:
            return LocalUploadFile.model_validate(data)
    except ValidationError as e:
        msg = f"Invalid asset file: {e}"
        raise MalformedResourceError(msg) from e

    msg = f"Unrecognized asset file with keys {sorted(data)}"
    raise MalformedResourceError(msg)


def map_asset(data: dict[str, Any]) -> Asset:
    fields = data.get("fields") or {}
    asset = Asset(
        title=fields.get("title") or {},
        description=fields.get("description") or {},
        file={
            locale: map_file(file) if file is not None else None
            for locale, file in (fields.get("file") or {}).items()
        },
    )
    return hydrate(asset, data)
