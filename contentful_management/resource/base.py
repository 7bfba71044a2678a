"""Base class for API resources."""

import json
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, ClassVar

from contentful_management.errors import ResourceValidationError, UnsupportedTypeError
from contentful_management.resource.actions import ResourceActions
from contentful_management.resource.capability import Capability
from contentful_management.resource.link import Link
from contentful_management.resource.system_properties import SystemProperties


if TYPE_CHECKING:
    from contentful_management.client import Client


class BaseResource:
    """A typed object mirroring one JSON entity of the API.

    Subclasses declare:
    - ``resource_type``: the ``sys.type`` they represent
    - ``resource_kind``: their key in the endpoint configuration table
    - ``id_parameter``: the URI placeholder holding their id
    - ``capabilities``: the actions available through ``actions``
    """

    resource_type: ClassVar[str]
    resource_kind: ClassVar[str]
    id_parameter: ClassVar[str]
    capabilities: ClassVar[frozenset[Capability]] = frozenset()

    # Attributes that only exist client-side and survive a refresh
    local_attributes: ClassVar[frozenset[str]] = frozenset()

    def __init__(self) -> None:
        self._sys = SystemProperties(type=self.resource_type)
        self._client: Client | None = None

    @property
    def sys(self) -> SystemProperties:
        """System properties of the resource."""
        return self._sys

    @property
    def id(self) -> str | None:
        return self._sys.id

    @property
    def type(self) -> str:
        return self._sys.type

    @property
    def client(self) -> "Client | None":
        """Client the resource is attached to, if any."""
        return self._client

    def set_client(self, client: "Client") -> "BaseResource":
        """Attach the client used for further API calls.

        Done automatically by the client for every resource it builds.

        Args:
            client: Owning client.

        Returns:
            The resource itself.
        """
        self._client = client
        return self

    @property
    def actions(self) -> ResourceActions:
        """Capability-checked API actions for this resource."""
        return ResourceActions(self)

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def as_link(self) -> Link:
        """Return a Link pointing to this resource.

        Raises:
            ResourceValidationError: If the resource has no id yet.
        """
        if self.id is None:
            msg = f"Cannot link to a {self.resource_type} that has no id yet"
            raise ResourceValidationError(msg)
        return Link(id=self.id, link_type=self.resource_type)

    def as_uri_parameters(self) -> dict[str, str]:
        """URI parameters identifying this resource.

        Raises:
            ResourceValidationError: If the resource has no id yet.
        """
        if self.id is None:
            msg = f"{self.resource_type} has no id; create it first"
            raise ResourceValidationError(msg)

        parameters: dict[str, str] = {}
        if self._sys.space is not None:
            parameters["space"] = self._sys.space.id
        if self._sys.environment is not None:
            parameters["environment"] = self._sys.environment.id
        parameters[self.id_parameter] = self.id
        return parameters

    def headers_for_creation(self) -> dict[str, str]:
        """Extra headers sent when creating the resource."""
        return {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the API's JSON structure, ``sys`` included."""
        return {"sys": self._sys.to_dict(), **self.serialize_fields()}

    def serialize_fields(self) -> dict[str, Any]:
        """Serialize everything but ``sys``. Overridden by subclasses."""
        return {}

    def as_request_body(self) -> str | bytes:
        """Encode the resource as the body of a create/update request."""
        body = self.to_dict()
        body.pop("sys", None)
        return json.dumps(body, ensure_ascii=False)

    def refresh_from(self, other: "BaseResource") -> None:
        """Replace this resource's state with a freshly built one.

        Lets objects the caller already holds reflect server state after
        an API call. The attached client and local-only attributes are kept.

        Args:
            other: Resource built from the latest server payload.

        Raises:
            UnsupportedTypeError: If ``other`` is of a different kind.
        """
        if type(other) is not type(self):
            raise UnsupportedTypeError(other.resource_type, context="refresh")
        keep = {"_client", *self.local_attributes}
        for name, value in vars(other).items():
            if name not in keep:
                setattr(self, name, value)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"


def format_value(value: Any) -> Any:
    """Prepare a field value for JSON encoding.

    Dates become ISO strings, resources and links become link envelopes,
    rich-text nodes get an object ``data`` member.
    """
    if isinstance(value, BaseResource):
        return value.as_link().to_dict()
    if isinstance(value, Link):
        return value.to_dict()
    if isinstance(value, datetime | date):
        return value.isoformat()
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if isinstance(value, dict):
        if "nodeType" in value:
            return _format_rich_text_node(value)
        return {key: format_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [format_value(item) for item in value]
    return value


def _format_rich_text_node(node: dict[str, Any]) -> dict[str, Any]:
    """Rich-text nodes must always carry ``data`` as an object."""
    formatted = {key: format_value(item) for key, item in node.items()}
    if "data" in formatted and not formatted["data"]:
        formatted["data"] = {}
    return formatted
