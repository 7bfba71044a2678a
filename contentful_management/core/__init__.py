"""Request pipeline: endpoint configuration, URIs, dispatch and link resolution."""

from contentful_management.core.builder import ResourceBuilder
from contentful_management.core.configuration import (
    DEFAULT_ENDPOINTS,
    DEFAULT_LINK_TYPES,
    ApiConfiguration,
    EndpointConfig,
)
from contentful_management.core.dispatcher import RequestDispatcher
from contentful_management.core.link_resolver import LinkErrorPolicy, LinkResolver
from contentful_management.core.query import Query
from contentful_management.core.uri_builder import RequestUriBuilder


__all__ = [
    "DEFAULT_ENDPOINTS",
    "DEFAULT_LINK_TYPES",
    "ApiConfiguration",
    "EndpointConfig",
    "LinkErrorPolicy",
    "LinkResolver",
    "Query",
    "RequestDispatcher",
    "RequestUriBuilder",
    "ResourceBuilder",
]
