"""Space- and environment-scoped views of the client.

Proxies only carry scoping identifiers; every call goes through the
client, so they are cheap to create and hold no state of their own.
Log events emitted during a proxy call carry ``space_id`` (and
``environment_id``) through structlog context variables.
"""

from typing import TYPE_CHECKING, cast

from contentful_management.core.link_resolver import LinkErrorPolicy
from contentful_management.core.query import Query
from contentful_management.observability import space_context
from contentful_management.resource import (
    Asset,
    BaseResource,
    ContentType,
    DeliveryApiKey,
    Entry,
    Environment,
    Link,
    Locale,
    PreviewApiKey,
    ResourceArray,
    Role,
    Space,
    Tag,
    Upload,
    Webhook,
)


if TYPE_CHECKING:
    from contentful_management.client import Client


class SpaceProxy:
    """Operations scoped to one space."""

    def __init__(self, client: "Client", space_id: str) -> None:
        self._client = client
        self.space_id = space_id

    @property
    def parameters(self) -> dict[str, str]:
        return {"space": self.space_id}

    def get_space(self) -> Space:
        with space_context(self.space_id):
            return self._client.get_space(self.space_id)

    def create(self, resource: BaseResource, resource_id: str = "") -> BaseResource:
        """Create a space-level resource such as an environment or webhook."""
        with space_context(self.space_id):
            return self._client.create(resource, resource_id, self.parameters)

    def environment_proxy(self, environment_id: str) -> "EnvironmentProxy":
        return EnvironmentProxy(self._client, self.space_id, environment_id)

    def get_environment(self, environment_id: str) -> Environment:
        return cast(
            Environment, self._one("Environment", "environment", environment_id)
        )

    def get_environments(self, query: Query | None = None) -> ResourceArray:
        return self._many("Environment", query)

    def get_delivery_api_key(self, api_key_id: str) -> DeliveryApiKey:
        return cast(
            DeliveryApiKey, self._one("DeliveryApiKey", "deliveryApiKey", api_key_id)
        )

    def get_delivery_api_keys(self, query: Query | None = None) -> ResourceArray:
        return self._many("DeliveryApiKey", query)

    def get_preview_api_key(self, api_key_id: str) -> PreviewApiKey:
        return cast(
            PreviewApiKey, self._one("PreviewApiKey", "previewApiKey", api_key_id)
        )

    def get_preview_api_keys(self, query: Query | None = None) -> ResourceArray:
        return self._many("PreviewApiKey", query)

    def get_webhook(self, webhook_id: str) -> Webhook:
        return cast(Webhook, self._one("Webhook", "webhook", webhook_id))

    def get_webhooks(self, query: Query | None = None) -> ResourceArray:
        return self._many("Webhook", query)

    def get_role(self, role_id: str) -> Role:
        return cast(Role, self._one("Role", "role", role_id))

    def get_roles(self, query: Query | None = None) -> ResourceArray:
        return self._many("Role", query)

    def get_upload(self, upload_id: str) -> Upload:
        return cast(Upload, self._one("Upload", "upload", upload_id))

    def _one(self, kind: str, id_parameter: str, resource_id: str) -> BaseResource:
        with space_context(self.space_id):
            return self._client.fetch_one(
                kind, {**self.parameters, id_parameter: resource_id}
            )

    def _many(self, kind: str, query: Query | None) -> ResourceArray:
        with space_context(self.space_id):
            return self._client.fetch_many(kind, self.parameters, query)

    def __repr__(self) -> str:
        return f"<SpaceProxy space_id={self.space_id!r}>"


class EnvironmentProxy:
    """Operations scoped to one environment of a space."""

    def __init__(self, client: "Client", space_id: str, environment_id: str) -> None:
        self._client = client
        self.space_id = space_id
        self.environment_id = environment_id

    @property
    def parameters(self) -> dict[str, str]:
        return {"space": self.space_id, "environment": self.environment_id}

    def get_environment(self) -> Environment:
        with space_context(self.space_id, self.environment_id):
            return cast(
                Environment,
                self._client.fetch_one("Environment", self.parameters),
            )

    def create(self, resource: BaseResource, resource_id: str = "") -> BaseResource:
        """Create an environment-level resource such as an entry or tag."""
        with space_context(self.space_id, self.environment_id):
            return self._client.create(resource, resource_id, self.parameters)

    def get_entry(self, entry_id: str) -> Entry:
        return cast(Entry, self._one("Entry", "entry", entry_id))

    def get_entries(self, query: Query | None = None) -> ResourceArray:
        return self._many("Entry", query)

    def get_asset(self, asset_id: str) -> Asset:
        return cast(Asset, self._one("Asset", "asset", asset_id))

    def get_assets(self, query: Query | None = None) -> ResourceArray:
        return self._many("Asset", query)

    def get_content_type(self, content_type_id: str) -> ContentType:
        return cast(
            ContentType, self._one("ContentType", "contentType", content_type_id)
        )

    def get_content_types(self, query: Query | None = None) -> ResourceArray:
        return self._many("ContentType", query)

    def get_locale(self, locale_id: str) -> Locale:
        return cast(Locale, self._one("Locale", "locale", locale_id))

    def get_locales(self, query: Query | None = None) -> ResourceArray:
        return self._many("Locale", query)

    def get_tag(self, tag_id: str) -> Tag:
        return cast(Tag, self._one("Tag", "tag", tag_id))

    def get_tags(self, query: Query | None = None) -> ResourceArray:
        return self._many("Tag", query)

    def resolve_link(self, link: Link) -> BaseResource:
        """Resolve a link within this environment."""
        with space_context(self.space_id, self.environment_id):
            return self._client.resolve_link(link, self.parameters)

    def resolve_link_collection(
        self,
        links: list[Link],
        on_error: LinkErrorPolicy = LinkErrorPolicy.RAISE,
    ) -> list[BaseResource]:
        with space_context(self.space_id, self.environment_id):
            return self._client.resolve_link_collection(
                links, self.parameters, on_error
            )

    def _one(self, kind: str, id_parameter: str, resource_id: str) -> BaseResource:
        with space_context(self.space_id, self.environment_id):
            return self._client.fetch_one(
                kind, {**self.parameters, id_parameter: resource_id}
            )

    def _many(self, kind: str, query: Query | None) -> ResourceArray:
        with space_context(self.space_id, self.environment_id):
            return self._client.fetch_many(kind, self.parameters, query)

    def __repr__(self) -> str:
        return (
            f"<EnvironmentProxy space_id={self.space_id!r} "
            f"environment_id={self.environment_id!r}>"
        )
