"""Expansion of endpoint URI templates."""

import re
from typing import Any
from urllib.parse import quote

from contentful_management.core.configuration import EndpointConfig
from contentful_management.core.query import Query
from contentful_management.errors import MissingUriParameterError


PLACEHOLDER_PATTERN = re.compile(r"\{(\w+)\}")


class RequestUriBuilder:
    """Builds request URIs from an endpoint configuration and parameters."""

    @staticmethod
    def expand(template: str, parameters: dict[str, Any]) -> str:
        """Substitute every ``{placeholder}`` of a template.

        Args:
            template: URI template such as ``/spaces/{space}/tags``.
            parameters: Values keyed by placeholder name.

        Returns:
            The expanded path, values percent-encoded.

        Raises:
            MissingUriParameterError: If a placeholder has no value.
        """

        def substitute(match: re.Match[str]) -> str:
            name = match.group(1)
            value = parameters.get(name)
            if value is None or value == "":
                raise MissingUriParameterError(name, template)
            return quote(str(value), safe="")

        return PLACEHOLDER_PATTERN.sub(substitute, template)

    def build(
        self,
        config: EndpointConfig,
        parameters: dict[str, Any],
        resource_id: str | None = None,
        query: Query | None = None,
    ) -> str:
        """Build the URI of a resource or a collection.

        Args:
            config: Endpoint configuration of the resource kind.
            parameters: Placeholder values. May carry the resource id under
                ``config.id_parameter``.
            resource_id: Explicit resource id, wins over ``parameters``.
            query: Optional query appended as a query string.

        Returns:
            Path relative to the API host.

        Raises:
            MissingUriParameterError: If a placeholder has no value.
        """
        uri = self.expand(config.uri, parameters)

        if resource_id is None:
            resource_id = parameters.get(config.id_parameter)
        if resource_id:
            uri = f"{uri}/{quote(str(resource_id), safe='')}"

        if query is not None:
            query_string = query.get_query_string()
            if query_string:
                uri = f"{uri}?{query_string}"
        return uri
