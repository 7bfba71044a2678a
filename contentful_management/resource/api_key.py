"""Delivery and preview API key resources."""

import json
from typing import Any

from contentful_management.resource.base import BaseResource, format_value
from contentful_management.resource.capability import EDITABLE
from contentful_management.resource.link import Link


class ApiKey(BaseResource):
    """Attributes shared by delivery and preview API keys."""

    def __init__(
        self,
        name: str = "",
        description: str | None = None,
        access_token: str | None = None,
        environments: list[Link] | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.description = description
        self._access_token = access_token
        self._environments: list[Link] = list(environments or [])

    @property
    def access_token(self) -> str | None:
        """Token generated by the API. Read-only."""
        return self._access_token

    @property
    def environments(self) -> list[Link]:
        return list(self._environments)

    def add_environment(self, environment: BaseResource | Link | str) -> "ApiKey":
        """Grant the key access to an environment.

        Args:
            environment: Environment resource, link or id.

        Returns:
            The key itself.
        """
        if isinstance(environment, BaseResource):
            link = environment.as_link()
        elif isinstance(environment, Link):
            link = environment
        else:
            link = Link(id=environment, link_type="Environment")
        if all(existing.id != link.id for existing in self._environments):
            self._environments.append(link)
        return self

    def set_environments(self, environments: list[Link]) -> "ApiKey":
        self._environments = list(environments)
        return self

    def serialize_fields(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "accessToken": self._access_token,
            "environments": format_value(self._environments),
        }


class DeliveryApiKey(ApiKey):
    """A resource with type "ApiKey", granting Content Delivery API access.

    API documentation:
    https://www.contentful.com/developers/docs/references/content-management-api/#/reference/api-keys
    """

    resource_type = "ApiKey"
    resource_kind = "DeliveryApiKey"
    id_parameter = "deliveryApiKey"
    capabilities = EDITABLE

    def __init__(
        self,
        name: str = "",
        description: str | None = None,
        access_token: str | None = None,
        environments: list[Link] | None = None,
        preview_api_key: Link | None = None,
    ) -> None:
        super().__init__(name, description, access_token, environments)
        self._preview_api_key = preview_api_key

    @property
    def preview_api_key(self) -> Link | None:
        """Link to the paired preview key. Read-only."""
        return self._preview_api_key

    def serialize_fields(self) -> dict[str, Any]:
        data = super().serialize_fields()
        data["previewApiKey"] = format_value(self._preview_api_key)
        return data

    def as_request_body(self) -> str:
        body = self.serialize_fields()
        del body["accessToken"]
        del body["previewApiKey"]
        if not body["environments"]:
            del body["environments"]
        return json.dumps(body, ensure_ascii=False)


class PreviewApiKey(ApiKey):
    """A resource with type "PreviewApiKey". Read-only; created with its
    delivery key.
    """

    resource_type = "PreviewApiKey"
    resource_kind = "PreviewApiKey"
    id_parameter = "previewApiKey"
