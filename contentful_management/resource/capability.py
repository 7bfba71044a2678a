"""Capabilities a resource kind supports against the API."""

from enum import Enum


class Capability(str, Enum):
    """Actions a resource kind supports.

    - CREATABLE: POST/PUT on the collection endpoint
    - UPDATABLE: PUT with the current version
    - DELETABLE: DELETE with the current version
    - PUBLISHABLE: PUT/DELETE on ``/published``
    - ARCHIVABLE: PUT/DELETE on ``/archived``
    """

    CREATABLE = "CREATABLE"
    UPDATABLE = "UPDATABLE"
    DELETABLE = "DELETABLE"
    PUBLISHABLE = "PUBLISHABLE"
    ARCHIVABLE = "ARCHIVABLE"


EDITABLE = frozenset(
    {Capability.CREATABLE, Capability.UPDATABLE, Capability.DELETABLE}
)
VERSIONABLE = EDITABLE | {Capability.PUBLISHABLE, Capability.ARCHIVABLE}
