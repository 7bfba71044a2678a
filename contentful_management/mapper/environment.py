"""Mappers for Space and Environment resources."""

from typing import Any

from contentful_management.mapper.base import hydrate
from contentful_management.resource.environment import Environment
from contentful_management.resource.space import Space


def map_space(data: dict[str, Any]) -> Space:
    space = hydrate(Space(data.get("name", "")), data)
    if space.sys.organization is not None:
        space._organization_id = space.sys.organization.id  # noqa: SLF001
    return space


def map_environment(data: dict[str, Any]) -> Environment:
    return hydrate(Environment(data.get("name", "")), data)
