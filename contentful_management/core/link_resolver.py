"""Resolution of links into full resources."""

from enum import Enum
from typing import Any

import httpx
import structlog

from contentful_management.core.configuration import ApiConfiguration
from contentful_management.core.dispatcher import RequestDispatcher
from contentful_management.core.uri_builder import RequestUriBuilder
from contentful_management.errors import ContentfulError, MalformedResourceError
from contentful_management.resource import (
    BaseResource,
    Link,
    Reference,
    Resolved,
    Unresolved,
)


logger = structlog.get_logger()


class LinkErrorPolicy(str, Enum):
    """What to do when one link of a collection cannot be resolved."""

    RAISE = "raise"
    SKIP = "skip"


class LinkResolver:
    """Fetches the resources links point to.

    Resolution is one level deep and never mutates the link. Every call
    issues a request and returns a new object.
    """

    def __init__(
        self,
        configuration: ApiConfiguration,
        dispatcher: RequestDispatcher,
        uri_builder: RequestUriBuilder | None = None,
    ) -> None:
        self._configuration = configuration
        self._dispatcher = dispatcher
        self._uri_builder = uri_builder or RequestUriBuilder()
        self._log = logger.bind(component="link_resolver")

    def resolve_link(
        self, link: Link, parameters: dict[str, str] | None = None
    ) -> BaseResource:
        """Fetch the resource a link points to.

        Args:
            link: Link to resolve.
            parameters: Scoping parameters such as ``space`` and
                ``environment``. The link's own scope wins.

        Returns:
            The linked resource.

        Raises:
            UnsupportedTypeError: If the link type is not resolvable.
            MissingUriParameterError: If scoping parameters are missing.
        """
        config = self._configuration.get_link_config_for(link.link_type)
        merged: dict[str, Any] = {**(parameters or {}), **link.scope_parameters()}
        uri = self._uri_builder.build(config, merged, resource_id=link.id)

        resource = self._dispatcher.request(
            "GET", uri, host=self._dispatcher.host_for(config.upload)
        )
        if not isinstance(resource, BaseResource):
            msg = f"Link {link.link_type}:{link.id} did not resolve to a resource"
            raise MalformedResourceError(msg)
        return resource

    def resolve_link_collection(
        self,
        links: list[Link],
        parameters: dict[str, str] | None = None,
        on_error: LinkErrorPolicy = LinkErrorPolicy.RAISE,
    ) -> list[BaseResource]:
        """Resolve links in order.

        Args:
            links: Links to resolve.
            parameters: Scoping parameters shared by every link.
            on_error: RAISE propagates the first failure; SKIP logs it and
                leaves the link out of the result.

        Returns:
            Resolved resources in link order.
        """
        resources: list[BaseResource] = []
        for link in links:
            try:
                resources.append(self.resolve_link(link, parameters))
            except (ContentfulError, httpx.HTTPError) as e:
                if on_error is LinkErrorPolicy.RAISE:
                    raise
                self._log.warning(
                    "link_resolution_failed",
                    link_type=link.link_type,
                    link_id=link.id,
                    error=str(e),
                )
        return resources

    def resolve_reference(
        self, reference: Reference, parameters: dict[str, str] | None = None
    ) -> Resolved:
        """Turn a reference into a resolved one, fetching it if needed."""
        if isinstance(reference, Resolved):
            return reference
        if not isinstance(reference, Unresolved):
            msg = f"Not a reference: {reference!r}"
            raise TypeError(msg)
        return Resolved(self.resolve_link(reference.link, parameters))
