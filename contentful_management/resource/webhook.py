"""Webhook resource."""

import re
from typing import Any

from contentful_management.errors import ResourceValidationError
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import EDITABLE
from contentful_management.resource.webhook_filter import BaseFilter


# "Entry.publish", "*.delete", "*.*"
TOPIC_PATTERN = re.compile(r"^(\*|[A-Z][A-Za-z]*)\.(\*|[a-z_]+)$")


class Webhook(BaseResource):
    """A resource with type "WebhookDefinition".

    The basic auth password is write-only: the API never returns it.
    """

    resource_type = "WebhookDefinition"
    resource_kind = "Webhook"
    id_parameter = "webhook"
    capabilities = EDITABLE
    local_attributes = frozenset({"_http_basic_password"})

    def __init__(
        self,
        name: str,
        url: str,
        topics: list[str] | None = None,
        headers: dict[str, str] | None = None,
        http_basic_username: str | None = None,
        http_basic_password: str | None = None,
        filters: list[BaseFilter] | None = None,
    ) -> None:
        super().__init__()
        self.name = name
        self.url = url
        self._topics: list[str] = []
        for topic in topics or []:
            self.add_topic(topic)
        self.headers: dict[str, str] = dict(headers or {})
        self.http_basic_username = http_basic_username
        self._http_basic_password = http_basic_password
        self._filters: list[BaseFilter] = list(filters or [])

    @property
    def topics(self) -> list[str]:
        return list(self._topics)

    def add_topic(self, topic: str) -> "Webhook":
        """Subscribe to a topic such as ``Entry.publish`` or ``*.*``.

        Raises:
            ResourceValidationError: If the topic is malformed.
        """
        if not TOPIC_PATTERN.match(topic):
            msg = f'Invalid webhook topic "{topic}"'
            raise ResourceValidationError(msg)
        if topic not in self._topics:
            self._topics.append(topic)
        return self

    def remove_topic(self, topic: str) -> "Webhook":
        self._topics = [t for t in self._topics if t != topic]
        return self

    @property
    def filters(self) -> list[BaseFilter]:
        return list(self._filters)

    def add_filter(self, webhook_filter: BaseFilter) -> "Webhook":
        """Only fire for events matching the filter as well.

        All filters of a webhook must match.
        """
        if webhook_filter not in self._filters:
            self._filters.append(webhook_filter)
        return self

    def set_filters(self, filters: list[BaseFilter]) -> "Webhook":
        self._filters = list(filters)
        return self

    def set_http_basic_password(self, password: str | None) -> "Webhook":
        self._http_basic_password = password
        return self

    def serialize_fields(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "url": self.url,
            "topics": list(self._topics),
            "headers": [
                {"key": key, "value": value} for key, value in self.headers.items()
            ],
        }
        if self.http_basic_username is not None:
            data["httpBasicUsername"] = self.http_basic_username
        if self._http_basic_password is not None:
            data["httpBasicPassword"] = self._http_basic_password
        if self._filters:
            data["filters"] = [f.to_dict() for f in self._filters]
        return data
