"""User resource."""

from typing import Any

from contentful_management.resource.base import BaseResource


class User(BaseResource):
    """A resource with type "User". Read-only."""

    resource_type = "User"
    resource_kind = "User"
    id_parameter = "user"

    def __init__(
        self,
        first_name: str | None = None,
        last_name: str | None = None,
        email: str | None = None,
        avatar_url: str | None = None,
        activated: bool = False,
        confirmed: bool = False,
        sign_in_count: int = 0,
    ) -> None:
        super().__init__()
        self.first_name = first_name
        self.last_name = last_name
        self.email = email
        self.avatar_url = avatar_url
        self.activated = activated
        self.confirmed = confirmed
        self.sign_in_count = sign_in_count

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def serialize_fields(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "avatarUrl": self.avatar_url,
            "activated": self.activated,
            "confirmed": self.confirmed,
            "signInCount": self.sign_in_count,
        }
