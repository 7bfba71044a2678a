"""Unit tests for Link."""

import pytest
from pydantic import ValidationError

from contentful_management.errors import (
    MalformedResourceError,
    ResourceValidationError,
)
from contentful_management.resource import Entry, Link
from contentful_management.resource.link import is_link_payload


ENVELOPE = {"sys": {"type": "Link", "linkType": "Entry", "id": "nyancat"}}


class TestLink:
    """Tests for link parsing and serialization."""

    def test_envelope_round_trip(self) -> None:
        """Test that the API envelope parses and serializes unchanged."""
        link = Link.from_dict(ENVELOPE)

        assert link.id == "nyancat"
        assert link.link_type == "Entry"
        assert link.to_dict() == ENVELOPE

    def test_scope_not_serialized(self) -> None:
        """Test that scope only affects resolution."""
        link = Link.from_dict(ENVELOPE).scoped("s1", "master")

        assert link.to_dict() == ENVELOPE
        assert link.scope_parameters() == {"space": "s1", "environment": "master"}

    def test_scoped_returns_copy(self) -> None:
        """Test that scoping never mutates the original link."""
        link = Link.from_dict(ENVELOPE)
        link.scoped(space_id="s1")

        assert link.space_id is None

    def test_empty_id_rejected(self) -> None:
        """Test that a link needs an id."""
        with pytest.raises(ValidationError):
            Link(id="", link_type="Entry")

    def test_from_dict_without_id_is_malformed(self) -> None:
        """Test that an id-less envelope raises MalformedResourceError."""
        with pytest.raises(MalformedResourceError) as exc_info:
            Link.from_dict({"sys": {"type": "Link", "linkType": "Entry"}})

        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_is_link_payload(self) -> None:
        """Test link envelope detection."""
        assert is_link_payload(ENVELOPE)
        assert not is_link_payload({"sys": {"type": "Entry", "id": "x"}})
        assert not is_link_payload("nyancat")


class TestAsLink:
    """Tests for BaseResource.as_link."""

    def test_resource_without_id_cannot_be_linked(self) -> None:
        """Test that unsaved resources have no link."""
        with pytest.raises(ResourceValidationError):
            Entry("cat").as_link()
