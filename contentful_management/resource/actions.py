"""Capability-checked API actions shared by resource kinds."""

from typing import TYPE_CHECKING

from contentful_management.constants import HEADER_VERSION
from contentful_management.errors import UnsupportedActionError
from contentful_management.resource.capability import Capability


if TYPE_CHECKING:
    from contentful_management.client import Client
    from contentful_management.resource.base import BaseResource


class ResourceActions:
    """Issues update/delete/publish/archive requests for one resource.

    Each action checks that the resource kind declares the matching
    Capability before any network call is made. Actions returning a
    body refresh the resource in place.
    """

    def __init__(self, resource: "BaseResource") -> None:
        self._resource = resource

    def update(self) -> "BaseResource":
        """Save local changes (PUT with the current version)."""
        self._require(Capability.UPDATABLE)
        return self._client().request_with_resource(
            self._resource,
            "PUT",
            body=self._resource.as_request_body(),
            headers=self._version_header(),
        )

    def delete(self) -> None:
        """Delete the resource on the server."""
        self._require(Capability.DELETABLE)
        self._client().request_with_resource(
            self._resource, "DELETE", headers=self._version_header()
        )

    def publish(self) -> "BaseResource":
        self._require(Capability.PUBLISHABLE)
        return self._client().request_with_resource(
            self._resource, "PUT", "/published", headers=self._version_header()
        )

    def unpublish(self) -> "BaseResource":
        self._require(Capability.PUBLISHABLE)
        return self._client().request_with_resource(
            self._resource, "DELETE", "/published"
        )

    def archive(self) -> "BaseResource":
        self._require(Capability.ARCHIVABLE)
        return self._client().request_with_resource(
            self._resource, "PUT", "/archived", headers=self._version_header()
        )

    def unarchive(self) -> "BaseResource":
        self._require(Capability.ARCHIVABLE)
        return self._client().request_with_resource(
            self._resource, "DELETE", "/archived"
        )

    def _require(self, capability: Capability) -> None:
        """Fail unless the resource kind declares the capability.

        Raises:
            UnsupportedActionError: If the capability is missing.
        """
        if not self._resource.supports(capability):
            msg = (
                f"{type(self._resource).__name__} does not support "
                f"{capability.value.lower()} actions"
            )
            raise UnsupportedActionError(msg)

    def _client(self) -> "Client":
        client = self._resource.client
        if client is None:
            msg = (
                f"{type(self._resource).__name__} is not attached to a client; "
                "fetch it or create it through Client.create() first"
            )
            raise UnsupportedActionError(msg)
        return client

    def _version_header(self) -> dict[str, str]:
        version = self._resource.sys.version
        if version is None:
            return {}
        return {HEADER_VERSION: str(version)}
