"""Client facade for the Content Management API."""

from types import TracebackType
from typing import Any, cast

import httpx
import structlog

from contentful_management.config import ClientConfig
from contentful_management.core import (
    ApiConfiguration,
    LinkErrorPolicy,
    LinkResolver,
    Query,
    RequestDispatcher,
    RequestUriBuilder,
    ResourceBuilder,
)
from contentful_management.core.dispatcher import BuildResult
from contentful_management.errors import ContentfulError, MalformedResourceError
from contentful_management.proxy import EnvironmentProxy, SpaceProxy
from contentful_management.resource import (
    BaseResource,
    Link,
    ResourceArray,
    Space,
    User,
)
from contentful_management.settings import ClientSettings, get_settings
from contentful_management.transport import HttpTransport, redact_token


class Client:
    """Entry point for every API call.

    Holds the transport, the endpoint configuration and the rate-limit
    state. Resources built by the client are attached to it, so their
    ``actions`` can issue further requests.

    Example:
        with Client(token) as client:
            env = client.environment_proxy("cfexampleapi", "master")
            entry = env.get_entry("nyancat")
    """

    def __init__(
        self,
        access_token: str,
        config: ClientConfig | None = None,
        http_client: httpx.Client | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            access_token: Personal access token or OAuth token.
            config: Client configuration; defaults apply when omitted.
            http_client: Optional httpx client. One is created and owned
                by the client when omitted.
            logger: Optional structlog logger.
        """
        self._config = config or ClientConfig()
        self._configuration = ApiConfiguration()
        self._uri_builder = RequestUriBuilder()
        self._transport = HttpTransport(access_token, self._config, http_client)
        self._dispatcher = RequestDispatcher(
            self._transport,
            ResourceBuilder(),
            self._config,
            owner=self,
            log=logger,
        )
        self._link_resolver = LinkResolver(
            self._configuration, self._dispatcher, self._uri_builder
        )
        self._log = (logger or structlog.get_logger()).bind(component="client")
        self._log.debug(
            "client_initialized",
            host=self._config.host,
            access_token=redact_token(access_token),
            max_rate_limit_retries=self._config.max_rate_limit_retries,
        )

    @classmethod
    def from_settings(
        cls, settings: ClientSettings | None = None, **kwargs: Any
    ) -> "Client":
        """Build a client from environment settings.

        Raises:
            ContentfulError: If no access token is configured.
        """
        settings = settings or get_settings()
        if not settings.access_token:
            msg = "CONTENTFUL_MANAGEMENT_ACCESS_TOKEN is not set"
            raise ContentfulError(msg)
        return cls(settings.access_token, settings.to_client_config(), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def configuration(self) -> ApiConfiguration:
        """Endpoint configuration table."""
        return self._configuration

    @property
    def remaining_rate_limit_retries(self) -> int:
        return self._dispatcher.remaining_rate_limit_retries

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def request(
        self,
        method: str,
        uri: str,
        *,
        resource: BaseResource | None = None,
        body: str | bytes | None = None,
        headers: dict[str, str] | None = None,
        host: str | None = None,
    ) -> BuildResult:
        """Send a raw request and build the response.

        See ``RequestDispatcher.request``.
        """
        return self._dispatcher.request(
            method, uri, resource=resource, body=body, headers=headers, host=host
        )

    def create(
        self,
        resource: BaseResource,
        resource_id: str = "",
        parameters: dict[str, str] | None = None,
    ) -> BaseResource:
        """Persist a new resource.

        Uses PUT when an id is chosen by the caller, POST otherwise. The
        given resource is refreshed in place with the server state.

        Args:
            resource: Resource to create.
            resource_id: Optional id for the new resource.
            parameters: Scoping parameters such as ``space``.

        Returns:
            The same resource, now with ``sys`` populated.
        """
        config = self._configuration.get_config_for(resource)
        scope = {
            key: value
            for key, value in (parameters or {}).items()
            if key != config.id_parameter
        }
        uri = self._uri_builder.build(config, scope, resource_id=resource_id or None)
        method = "PUT" if resource_id else "POST"

        self._log.info(
            "resource_create",
            kind=config.kind,
            resource_id=resource_id or None,
            method=method,
        )
        result = self._dispatcher.request(
            method,
            uri,
            resource=resource,
            body=resource.as_request_body(),
            headers=resource.headers_for_creation(),
            host=self._config.host_for(config.upload),
        )
        resource.set_client(self)
        return result if isinstance(result, BaseResource) else resource

    def request_with_resource(
        self,
        resource: BaseResource,
        method: str,
        path: str = "",
        body: str | bytes | None = None,
        headers: dict[str, str] | None = None,
    ) -> BaseResource:
        """Send a request addressed to an existing resource.

        Args:
            resource: Resource the request targets; refreshed from the
                response body when there is one.
            method: HTTP method.
            path: Sub-path appended to the resource URI, e.g. ``/published``.
            body: Encoded request body.
            headers: Extra request headers.

        Returns:
            The resource.
        """
        config = self._configuration.get_config_for(resource)
        uri = self._uri_builder.build(config, resource.as_uri_parameters()) + path
        self._dispatcher.request(
            method,
            uri,
            resource=resource,
            body=body,
            headers=headers,
            host=self._config.host_for(config.upload),
        )
        return resource

    def fetch_resource(
        self,
        kind: str,
        parameters: dict[str, str],
        query: Query | None = None,
        resource: BaseResource | None = None,
    ) -> BuildResult:
        """GET a resource or a collection.

        Args:
            kind: Resource kind, e.g. ``"Entry"``.
            parameters: URI parameters; includes the id parameter to fetch
                a single resource.
            query: Optional collection query.
            resource: Optional resource refreshed in place.

        Returns:
            The built resource or array.
        """
        config = self._configuration.get_config_for(kind)
        uri = self._uri_builder.build(config, parameters, query=query)
        return self._dispatcher.request(
            "GET",
            uri,
            resource=resource,
            host=self._config.host_for(config.upload),
        )

    def fetch_one(self, kind: str, parameters: dict[str, str]) -> BaseResource:
        """Fetch a single resource.

        Raises:
            MalformedResourceError: If the response is not a single resource.
        """
        result = self.fetch_resource(kind, parameters)
        if not isinstance(result, BaseResource):
            msg = f"Expected a single {kind}, got {type(result).__name__}"
            raise MalformedResourceError(msg)
        return result

    def fetch_many(
        self, kind: str, parameters: dict[str, str], query: Query | None = None
    ) -> ResourceArray:
        """Fetch one page of a collection.

        Raises:
            MalformedResourceError: If the response is not a collection.
        """
        result = self.fetch_resource(kind, parameters, query)
        if not isinstance(result, ResourceArray):
            msg = f"Expected a collection of {kind}, got {type(result).__name__}"
            raise MalformedResourceError(msg)
        return result

    def resolve_link(
        self, link: Link, parameters: dict[str, str] | None = None
    ) -> BaseResource:
        return self._link_resolver.resolve_link(link, parameters)

    def resolve_link_collection(
        self,
        links: list[Link],
        parameters: dict[str, str] | None = None,
        on_error: LinkErrorPolicy = LinkErrorPolicy.RAISE,
    ) -> list[BaseResource]:
        return self._link_resolver.resolve_link_collection(links, parameters, on_error)

    def get_space(self, space_id: str) -> Space:
        return cast(Space, self.fetch_one("Space", {"space": space_id}))

    def get_spaces(self, query: Query | None = None) -> ResourceArray:
        return self.fetch_many("Space", {}, query)

    def get_user(self, user_id: str) -> User:
        return cast(User, self.fetch_one("User", {"user": user_id}))

    def get_current_user(self) -> User:
        """The user owning the access token."""
        return self.get_user("me")

    def space_proxy(self, space_id: str) -> SpaceProxy:
        return SpaceProxy(self, space_id)

    def environment_proxy(
        self, space_id: str, environment_id: str
    ) -> EnvironmentProxy:
        return EnvironmentProxy(self, space_id, environment_id)
