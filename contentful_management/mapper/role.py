"""Mapper for Role resources."""

from typing import Any

from contentful_management.errors import (
    MalformedResourceError,
    ResourceValidationError,
    UnsupportedTypeError,
)
from contentful_management.mapper.base import hydrate
from contentful_management.resource.role import Policy, Role
from contentful_management.resource.role_constraint import (
    CONSTRAINT_TYPES,
    AndConstraint,
    BaseConstraint,
    EqualityConstraint,
    NotConstraint,
    OrConstraint,
    PathsConstraint,
)


def map_constraint(data: dict[str, Any]) -> BaseConstraint:
    """Build a policy constraint, recursing into and/or/not.

    Raises:
        UnsupportedTypeError: For unknown constraint keys.
        MalformedResourceError: When the operands are invalid.
    """
    if not isinstance(data, dict) or len(data) != 1:
        msg = f"Invalid role constraint {data!r}"
        raise MalformedResourceError(msg)
    key, value = next(iter(data.items()))
    constraint_cls = CONSTRAINT_TYPES.get(key)
    if constraint_cls is None:
        raise UnsupportedTypeError(key, context="role constraint")

    try:
        if constraint_cls in (AndConstraint, OrConstraint):
            return constraint_cls([map_constraint(item) for item in value])
        if constraint_cls is NotConstraint:
            return NotConstraint(map_constraint(value))
        if constraint_cls is PathsConstraint:
            return PathsConstraint(value[0]["doc"])
        return EqualityConstraint(value[0]["doc"], value[1])
    except (KeyError, IndexError, TypeError, ResourceValidationError) as e:
        msg = f"Invalid role constraint {data!r}: {e}"
        raise MalformedResourceError(msg) from e


def map_policy(data: dict[str, Any]) -> Policy:
    constraint = data.get("constraint")
    try:
        return Policy(
            effect=data.get("effect", ""),
            actions=data.get("actions", "all"),
            constraint=map_constraint(constraint) if constraint else None,
        )
    except ResourceValidationError as e:
        msg = f"Invalid role policy {data!r}: {e}"
        raise MalformedResourceError(msg) from e


def map_role(data: dict[str, Any]) -> Role:
    role = Role(
        name=data.get("name", ""),
        description=data.get("description"),
        policies=[map_policy(item) for item in data.get("policies") or []],
    )
    # Permissions coming from the API are taken as-is
    role._permissions = dict(data.get("permissions") or {})  # noqa: SLF001
    return hydrate(role, data)
