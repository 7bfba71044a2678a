"""Tag resource."""

import json
from typing import Any

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE


VALID_VISIBILITIES = ("private", "public")


class Tag(BaseResource):
    """A resource with type "Tag".

    Tags are created with an explicit id. Their visibility is fixed at
    creation and travels in the request body's ``sys``.
    """

    resource_type = "Tag"
    resource_kind = "Tag"
    id_parameter = "tag"
    capabilities = EDITABLE

    def __init__(self, name: str, visibility: str = "private") -> None:
        super().__init__()
        self.name = name
        self.visibility = visibility

    @property
    def visibility(self) -> str:
        if self.sys.visibility is not None:
            return self.sys.visibility
        return self._visibility

    @visibility.setter
    def visibility(self, visibility: str) -> None:
        if visibility not in VALID_VISIBILITIES:
            msg = (
                f'Invalid tag visibility "{visibility}". '
                f"Valid values are {', '.join(VALID_VISIBILITIES)}."
            )
            raise ResourceValidationError(msg)
        self._visibility = visibility

    def serialize_fields(self) -> dict[str, Any]:
        return {"name": self.name}

    def as_request_body(self) -> str:
        body: dict[str, Any] = {
            "name": self.name,
            "sys": {"visibility": self.visibility},
        }
        if self.id is not None:
            body["sys"]["id"] = self.id
        return json.dumps(body, ensure_ascii=False)
