"""Endpoint configuration table.

Maps every resource kind to its URI template, the placeholder carrying
its id and the host it lives on, and maps link types to resource kinds.
"""

from dataclasses import dataclass

from contentful_management.errors import UnsupportedTypeError
from contentful_management.resource import (
    Asset,
    BaseResource,
    ContentType,
    DeliveryApiKey,
    Entry,
    Environment,
    Locale,
    PreviewApiKey,
    Role,
    Space,
    Tag,
    Upload,
    User,
    Webhook,
)


@dataclass(frozen=True)
class EndpointConfig:
    """Where a resource kind lives.

    Attributes:
        kind: Resource kind, e.g. ``"Entry"``.
        resource_class: Class instantiated for this kind.
        uri: Collection URI template, without the id segment.
        id_parameter: Name of the parameter holding the resource id.
        upload: Whether the endpoint lives on the upload host.
    """

    kind: str
    resource_class: type[BaseResource]
    uri: str
    id_parameter: str
    upload: bool = False


_ENVIRONMENT_URI = "/spaces/{space}/environments/{environment}"


def _endpoint(
    resource_class: type[BaseResource], uri: str, upload: bool = False
) -> EndpointConfig:
    return EndpointConfig(
        kind=resource_class.resource_kind,
        resource_class=resource_class,
        uri=uri,
        id_parameter=resource_class.id_parameter,
        upload=upload,
    )


DEFAULT_ENDPOINTS: tuple[EndpointConfig, ...] = (
    _endpoint(Space, "/spaces"),
    _endpoint(Environment, "/spaces/{space}/environments"),
    _endpoint(Entry, f"{_ENVIRONMENT_URI}/entries"),
    _endpoint(Asset, f"{_ENVIRONMENT_URI}/assets"),
    _endpoint(ContentType, f"{_ENVIRONMENT_URI}/content_types"),
    _endpoint(Locale, f"{_ENVIRONMENT_URI}/locales"),
    _endpoint(Tag, f"{_ENVIRONMENT_URI}/tags"),
    _endpoint(Upload, "/spaces/{space}/uploads", upload=True),
    _endpoint(DeliveryApiKey, "/spaces/{space}/api_keys"),
    _endpoint(PreviewApiKey, "/spaces/{space}/preview_api_keys"),
    _endpoint(Webhook, "/spaces/{space}/webhook_definitions"),
    _endpoint(Role, "/spaces/{space}/roles"),
    _endpoint(User, "/users"),
)

# Link types whose resource kind differs from the link type itself
DEFAULT_LINK_TYPES: dict[str, str] = {
    "ApiKey": "DeliveryApiKey",
    "WebhookDefinition": "Webhook",
}


class ApiConfiguration:
    """Lookup of endpoint configurations by kind, class, resource or link type.

    Built once per client and shared by the URI builder, the dispatcher
    and the link resolver.
    """

    def __init__(
        self,
        endpoints: tuple[EndpointConfig, ...] | list[EndpointConfig] | None = None,
        link_types: dict[str, str] | None = None,
    ) -> None:
        endpoints = DEFAULT_ENDPOINTS if endpoints is None else endpoints
        self._endpoints: dict[str, EndpointConfig] = {e.kind: e for e in endpoints}
        if link_types is None:
            link_types = DEFAULT_LINK_TYPES
        self._link_types = dict(link_types)

    def get_config_for(
        self, target: BaseResource | type[BaseResource] | str
    ) -> EndpointConfig:
        """Return the endpoint configuration of a resource kind.

        Args:
            target: A resource, a resource class or a kind name.

        Returns:
            The matching configuration.

        Raises:
            UnsupportedTypeError: If the kind is not configured.
        """
        kind = target if isinstance(target, str) else target.resource_kind

        try:
            return self._endpoints[kind]
        except KeyError:
            raise UnsupportedTypeError(kind, context="endpoint") from None

    def get_link_config_for(self, link_type: str) -> EndpointConfig:
        """Return the endpoint configuration a link type resolves against.

        Raises:
            UnsupportedTypeError: If the link type is not resolvable.
        """
        kind = self._link_types.get(link_type, link_type)
        if kind not in self._endpoints:
            raise UnsupportedTypeError(link_type, context="link")
        return self._endpoints[kind]

    @property
    def kinds(self) -> list[str]:
        return sorted(self._endpoints)
