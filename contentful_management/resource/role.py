"""Role resource."""

from typing import Any

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE
from contentful_management.resource.role_constraint import BaseConstraint


POLICY_EFFECTS = frozenset({"allow", "deny"})
POLICY_ACTIONS = frozenset(
    {
        "read",
        "create",
        "update",
        "delete",
        "publish",
        "unpublish",
        "archive",
        "unarchive",
    }
)
PERMISSION_NAMES = frozenset(
    {
        "ContentModel",
        "Settings",
        "ContentDelivery",
        "Environments",
        "EnvironmentAliases",
        "Tags",
    }
)
ALL = "all"


def _check_actions(actions: str | list[str], valid: frozenset[str]) -> None:
    if actions == ALL:
        return
    if isinstance(actions, str):
        msg = f'Actions must be "{ALL}" or a list, got "{actions}"'
        raise ResourceValidationError(msg)
    unknown = sorted(set(actions) - valid)
    if unknown:
        msg = f"Unknown actions: {', '.join(unknown)}"
        raise ResourceValidationError(msg)


class Policy:
    """Allows or denies actions, optionally narrowed by a constraint."""

    def __init__(
        self,
        effect: str,
        actions: str | list[str] = ALL,
        constraint: BaseConstraint | None = None,
    ) -> None:
        if effect not in POLICY_EFFECTS:
            msg = f'Invalid policy effect "{effect}"'
            raise ResourceValidationError(msg)
        _check_actions(actions, POLICY_ACTIONS)
        self.effect = effect
        self.actions = actions if actions == ALL else list(actions)
        self.constraint = constraint

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"effect": self.effect, "actions": self.actions}
        if self.constraint is not None:
            data["constraint"] = self.constraint.to_dict()
        return data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Policy):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(repr(self.to_dict()))

    def __repr__(self) -> str:
        return f"Policy({self.to_dict()!r})"


class Role(BaseResource):
    """A resource with type "Role".

    Permissions grant space-wide abilities such as editing the content
    model; policies grant or deny actions on entries and assets.

    API documentation:
    https://www.contentful.com/developers/docs/references/content-management-api/#/reference/roles
    """

    resource_type = "Role"
    resource_kind = "Role"
    id_parameter = "role"
    capabilities = EDITABLE

    def __init__(
        self,
        name: str,
        description: str | None = None,
        permissions: dict[str, str | list[str]] | None = None,
        policies: list[Policy] | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.description = description
        self._permissions: dict[str, str | list[str]] = {}
        for permission, actions in (permissions or {}).items():
            self.set_permission(permission, actions)
        self._policies: list[Policy] = list(policies or [])

    @property
    def permissions(self) -> dict[str, str | list[str]]:
        return dict(self._permissions)

    def set_permission(self, name: str, actions: str | list[str]) -> "Role":
        """Grant a space-wide permission.

        Args:
            name: Permission name, e.g. ``ContentModel``.
            actions: ``"all"`` or a list such as ``["read"]``.

        Returns:
            The role itself.

        Raises:
            ResourceValidationError: For unknown permissions or actions.
        """
        if name not in PERMISSION_NAMES:
            msg = f'Unknown permission "{name}"'
            raise ResourceValidationError(msg)
        _check_actions(actions, POLICY_ACTIONS | {"manage"})
        self._permissions[name] = actions if actions == ALL else list(actions)
        return self

    @property
    def policies(self) -> list[Policy]:
        return list(self._policies)

    def add_policy(self, policy: Policy) -> "Role":
        self._policies.append(policy)
        return self

    def set_policies(self, policies: list[Policy]) -> "Role":
        self._policies = list(policies)
        return self

    def serialize_fields(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "permissions": dict(self._permissions),
            "policies": [policy.to_dict() for policy in self._policies],
        }
