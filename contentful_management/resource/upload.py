"""Upload resource."""

from datetime import datetime

from contentful_management.constants import HEADER_CONTENT_TYPE, UPLOAD_CONTENT_TYPE
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import Capability
from contentful_management.resource.file import LocalUploadFile


class Upload(BaseResource):
    """A resource with type "Upload".

    Holds raw file content sent to the upload host. Uploads expire after
    a while (``sys.expires_at``); link them to an asset file with
    ``as_file`` before then.
    """

    resource_type = "Upload"
    resource_kind = "Upload"
    id_parameter = "upload"
    capabilities = frozenset({Capability.CREATABLE, Capability.DELETABLE})
    local_attributes = frozenset({"_content"})

    def __init__(self, content: bytes | str | None = None) -> None:
        super().__init__()
        if isinstance(content, str):
            content = content.encode("utf-8")
        self._content = content

    @property
    def content(self) -> bytes | None:
        return self._content

    @property
    def expires_at(self) -> datetime | None:
        return self.sys.expires_at

    def headers_for_creation(self) -> dict[str, str]:
        return {HEADER_CONTENT_TYPE: UPLOAD_CONTENT_TYPE}

    def as_request_body(self) -> bytes:
        return self._content or b""

    def as_file(self, file_name: str, content_type: str) -> LocalUploadFile:
        """Describe this upload as an asset file."""
        return LocalUploadFile(
            file_name=file_name,
            content_type=content_type,
            upload_from=self.as_link(),
        )
