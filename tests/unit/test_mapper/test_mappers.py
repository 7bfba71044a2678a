"""Unit tests for per-kind mappers."""

import json

import pytest

from contentful_management.errors import MalformedResourceError, UnsupportedTypeError
from contentful_management.mapper import (
    default_registry,
    map_field,
    map_file,
    map_validation,
)
from contentful_management.mapper.content_type import map_content_type
from contentful_management.mapper.entry import map_entry
from contentful_management.mapper.role import map_constraint, map_role
from contentful_management.mapper.webhook import map_filter, map_webhook
from contentful_management.resource import (
    AndConstraint,
    EqualityConstraint,
    EqualityFilter,
    File,
    ImageFile,
    InclusionFilter,
    Link,
    LocalUploadFile,
    NotConstraint,
    NotFilter,
    PathsConstraint,
    Policy,
    RegexpFilter,
    RemoteUploadFile,
)
from contentful_management.resource.field import ArrayField, LinkField, TextField
from contentful_management.resource.validation import (
    InValidation,
    RangeValidation,
    SizeValidation,
    UniqueValidation,
)
from tests.helpers.payloads import (
    PAYLOADS_BY_TYPE,
    content_type_payload,
    entry_payload,
    link,
)


class TestRegistry:
    """Tests for the mapper registry."""

    def test_default_registry_covers_all_types(self) -> None:
        """Test that every API sys.type has a mapper."""
        registry = default_registry()

        assert registry.supported_types == sorted(PAYLOADS_BY_TYPE)

    def test_unknown_type_raises(self) -> None:
        """Test that lookups of unknown types fail."""
        with pytest.raises(UnsupportedTypeError):
            default_registry().get("Bogus")

    def test_register_custom_mapper(self) -> None:
        """Test that new types can be registered."""
        registry = default_registry()
        registry.register("Bogus", map_entry)

        assert "Bogus" in registry
        assert registry.get("Bogus") is map_entry


class TestEntryMapper:
    """Tests for map_entry."""

    def test_maps_fields_and_links(self) -> None:
        """Test that link envelopes in fields become Link objects."""
        entry = map_entry(entry_payload())

        assert entry.content_type_id == "cat"
        assert entry.get_field("name", "en-US") == "Nyan Cat"
        assert entry.get_field("likes", "en-US") == ["rainbows", "fish"]
        friend = entry.get_field("bestFriend", "en-US")
        assert isinstance(friend, Link)
        assert friend.id == "happycat"
        assert entry.tag_ids == ["funny"]

    def test_links_nested_in_lists(self) -> None:
        """Test that links inside arrays are converted too."""
        payload = entry_payload()
        payload["fields"]["friends"] = {
            "en-US": [link("Entry", "a"), link("Entry", "b")]
        }

        entry = map_entry(payload)

        assert [f.id for f in entry.get_field("friends", "en-US")] == ["a", "b"]

    def test_missing_content_type_raises(self) -> None:
        """Test that entries need sys.contentType."""
        payload = entry_payload()
        del payload["sys"]["contentType"]

        with pytest.raises(MalformedResourceError):
            map_entry(payload)

    def test_missing_fields_default(self) -> None:
        """Test that absent fields and metadata default to empty."""
        payload = entry_payload()
        del payload["fields"]
        del payload["metadata"]

        entry = map_entry(payload)

        assert entry.get_fields() == {}
        assert entry.get_metadata() == {}


class TestFileMapper:
    """Tests for asset file variant selection."""

    def test_processed_image(self) -> None:
        """Test that image details produce an ImageFile."""
        file = map_file(
            {
                "fileName": "cat.png",
                "contentType": "image/png",
                "url": "//images.ctfassets.net/cat.png",
                "details": {"size": 10, "image": {"width": 2, "height": 3}},
            }
        )

        assert isinstance(file, ImageFile)
        assert (file.width, file.height, file.size) == (2, 3, 10)

    def test_processed_file(self) -> None:
        """Test that non-image processed files produce a File."""
        file = map_file(
            {
                "fileName": "cat.pdf",
                "contentType": "application/pdf",
                "url": "//assets.ctfassets.net/cat.pdf",
                "details": {"size": 10},
            }
        )

        assert type(file) is File

    def test_remote_upload(self) -> None:
        """Test that an upload URL produces a RemoteUploadFile."""
        file = map_file(
            {
                "fileName": "cat.png",
                "contentType": "image/png",
                "upload": "https://example.com/cat.png",
            }
        )

        assert isinstance(file, RemoteUploadFile)

    def test_local_upload(self) -> None:
        """Test that uploadFrom produces a LocalUploadFile."""
        file = map_file(
            {
                "fileName": "cat.png",
                "contentType": "image/png",
                "uploadFrom": link("Upload", "u1"),
            }
        )

        assert isinstance(file, LocalUploadFile)
        assert file.upload_from.id == "u1"

    def test_unknown_shape_raises(self) -> None:
        """Test that a file without url/upload/uploadFrom is malformed."""
        with pytest.raises(MalformedResourceError):
            map_file({"fileName": "cat.png", "contentType": "image/png"})


class TestContentTypeMapper:
    """Tests for content type, field and validation mapping."""

    def test_maps_fields_in_order(self) -> None:
        """Test field types, order and display field."""
        content_type = map_content_type(content_type_payload())

        assert [f.id for f in content_type.fields] == ["name", "bestFriend", "likes"]
        assert content_type.display_field == "name"
        name, best_friend, likes = content_type.fields
        assert isinstance(name, TextField)
        assert name.required is True
        assert name.validations == [SizeValidation(min=1, max=100)]
        assert isinstance(best_friend, LinkField)
        assert best_friend.link_type == "Entry"
        assert isinstance(likes, ArrayField)
        assert likes.items_validations == [
            InValidation(["rainbows", "fish", "lasagna"])
        ]

    def test_unknown_field_type_raises(self) -> None:
        """Test that unknown field types are rejected."""
        with pytest.raises(UnsupportedTypeError):
            map_field({"id": "x", "name": "X", "type": "Hologram"})

    def test_field_without_type_is_malformed(self) -> None:
        """Test that fields need an id and a type."""
        with pytest.raises(MalformedResourceError):
            map_field({"id": "x", "name": "X"})

    def test_validation_keys(self) -> None:
        """Test that validations are picked by their key."""
        assert map_validation({"unique": True}) == UniqueValidation()
        assert map_validation(
            {"range": {"min": 1}, "message": "Too small"}
        ) == RangeValidation(min=1, message="Too small")

    def test_unknown_validation_raises(self) -> None:
        """Test that unknown validation keys are rejected."""
        with pytest.raises(UnsupportedTypeError):
            map_validation({"prohibitRegexp": {"pattern": "x"}})


class TestWebhookMapper:
    """Tests for map_webhook."""

    def test_maps_headers_and_topics(self) -> None:
        """Test that header lists become dicts and topics are kept."""
        webhook = map_webhook(PAYLOADS_BY_TYPE["WebhookDefinition"])

        assert webhook.headers == {"X-Source": "contentful"}
        assert webhook.topics == ["Entry.publish", "Asset.*"]
        assert webhook.http_basic_username == "user"

    def test_maps_filters(self) -> None:
        """Test that filters are parsed, nested negation included."""
        webhook = map_webhook(PAYLOADS_BY_TYPE["WebhookDefinition"])

        assert webhook.filters == [
            EqualityFilter("sys.environment.sys.id", "master"),
            NotFilter(InclusionFilter("sys.contentType.sys.id", ["cat", "dog"])),
        ]

    def test_filters_survive_reserialization(self) -> None:
        """Test that a fetched webhook sends its filters back on update."""
        payload = PAYLOADS_BY_TYPE["WebhookDefinition"]
        webhook = map_webhook(payload)

        body = json.loads(webhook.as_request_body())

        assert body["filters"] == payload["filters"]

    def test_regexp_filter(self) -> None:
        """Test that regexp filters read their pattern object."""
        data = {"regexp": [{"doc": "sys.id"}, {"pattern": "^cat-.*$"}]}

        assert map_filter(data) == RegexpFilter("sys.id", "^cat-.*$")

    def test_unknown_filter_raises(self) -> None:
        """Test that unknown filter keys are rejected."""
        with pytest.raises(UnsupportedTypeError):
            map_filter({"startsWith": [{"doc": "sys.id"}, "cat"]})

    def test_malformed_filter_raises(self) -> None:
        """Test that filters with missing operands are malformed."""
        with pytest.raises(MalformedResourceError):
            map_filter({"equals": [{"doc": "sys.id"}]})


class TestRoleMapper:
    """Tests for map_role."""

    def test_maps_permissions_and_policies(self) -> None:
        """Test that permissions are kept and constraints are nested."""
        role = map_role(PAYLOADS_BY_TYPE["Role"])

        assert role.name == "Editor"
        assert role.permissions["Tags"] == "all"
        assert role.permissions["ContentModel"] == ["read"]
        assert role.policies == [
            Policy(
                "allow",
                ["read", "update"],
                AndConstraint(
                    [
                        EqualityConstraint("sys.type", "Entry"),
                        EqualityConstraint("sys.contentType.sys.id", "cat"),
                    ]
                ),
            ),
            Policy("deny", "all"),
        ]

    def test_role_request_body_matches_payload(self) -> None:
        """Test that a fetched role serializes back to the same body."""
        payload = PAYLOADS_BY_TYPE["Role"]

        body = json.loads(map_role(payload).as_request_body())

        assert body == {key: value for key, value in payload.items() if key != "sys"}

    def test_not_and_paths_constraints(self) -> None:
        """Test negated path constraints."""
        data = {"not": {"paths": [{"doc": "fields.secret.%"}]}}

        assert map_constraint(data) == NotConstraint(PathsConstraint("fields.secret.%"))

    def test_unknown_constraint_raises(self) -> None:
        """Test that unknown constraint keys are rejected."""
        with pytest.raises(UnsupportedTypeError):
            map_constraint({"xor": []})

    def test_invalid_policy_effect_is_malformed(self) -> None:
        """Test that an invalid policy coming from the API is malformed."""
        payload = dict(PAYLOADS_BY_TYPE["Role"])
        payload["policies"] = [{"effect": "maybe", "actions": "all"}]

        with pytest.raises(MalformedResourceError):
            map_role(payload)
