"""Locale resource."""

from typing import Any

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE


class Locale(BaseResource):
    """A resource with type "Locale".

    ``default`` is decided by the API and never sent back.
    """

    resource_type = "Locale"
    resource_kind = "Locale"
    id_parameter = "locale"
    capabilities = EDITABLE

    def __init__(
        self,
        name: str,
        code: str,
        fallback_code: str | None = None,
        optional: bool = False,
        content_delivery_api: bool = True,
        content_management_api: bool = True,
        default: bool = False,
    ) -> None:
        super().__init__()
        self.name = name
        self.code = code
        self.fallback_code = fallback_code
        self.optional = optional
        self.content_delivery_api = content_delivery_api
        self.content_management_api = content_management_api
        self._default = default

    @property
    def code(self) -> str:
        return self._code

    @code.setter
    def code(self, code: str) -> None:
        if not code:
            msg = "Locale code must not be empty"
            raise ResourceValidationError(msg)
        self._code = code

    @property
    def default(self) -> bool:
        return self._default

    def serialize_fields(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "code": self._code,
            "fallbackCode": self.fallback_code,
            "optional": self.optional,
            "contentDeliveryApi": self.content_delivery_api,
            "contentManagementApi": self.content_management_api,
        }
