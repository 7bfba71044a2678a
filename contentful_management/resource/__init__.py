"""Typed resources mirroring the Content Management API entities."""

from contentful_management.resource.actions import ResourceActions
from contentful_management.resource.api_key import (
    ApiKey,
    DeliveryApiKey,
    PreviewApiKey,
)
from contentful_management.resource.array import ResourceArray
from contentful_management.resource.asset import Asset
from contentful_management.resource.base import BaseResource
from contentful_management.resource.capability import Capability
from contentful_management.resource.content_type import ContentType
from contentful_management.resource.entry import Entry
from contentful_management.resource.environment import Environment
from contentful_management.resource.file import (
    BaseFile,
    File,
    ImageFile,
    LocalUploadFile,
    RemoteUploadFile,
)
from contentful_management.resource.link import (
    Link,
    Reference,
    Resolved,
    Unresolved,
)
from contentful_management.resource.locale import Locale
from contentful_management.resource.role import Policy, Role
from contentful_management.resource.role_constraint import (
    AndConstraint,
    BaseConstraint,
    EqualityConstraint,
    NotConstraint,
    OrConstraint,
    PathsConstraint,
)
from contentful_management.resource.space import Space
from contentful_management.resource.system_properties import SystemProperties
from contentful_management.resource.tag import Tag
from contentful_management.resource.upload import Upload
from contentful_management.resource.user import User
from contentful_management.resource.webhook import Webhook
from contentful_management.resource.webhook_filter import (
    BaseFilter,
    EqualityFilter,
    InclusionFilter,
    NotFilter,
    RegexpFilter,
)


__all__ = [
    # Base
    "BaseResource",
    "Capability",
    "ResourceActions",
    "ResourceArray",
    "SystemProperties",
    # Links
    "Link",
    "Reference",
    "Resolved",
    "Unresolved",
    # Resources
    "ApiKey",
    "Asset",
    "ContentType",
    "DeliveryApiKey",
    "Entry",
    "Environment",
    "Locale",
    "PreviewApiKey",
    "Role",
    "Space",
    "Tag",
    "Upload",
    "User",
    "Webhook",
    # Files
    "BaseFile",
    "File",
    "ImageFile",
    "LocalUploadFile",
    "RemoteUploadFile",
    # Webhook filters
    "BaseFilter",
    "EqualityFilter",
    "InclusionFilter",
    "NotFilter",
    "RegexpFilter",
    # Role policies
    "AndConstraint",
    "BaseConstraint",
    "EqualityConstraint",
    "NotConstraint",
    "OrConstraint",
    "PathsConstraint",
    "Policy",
]
