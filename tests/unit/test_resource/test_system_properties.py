"""Unit tests for SystemProperties."""

from contentful_management.resource import Link, SystemProperties


def _sys(**values: object) -> SystemProperties:
    return SystemProperties.model_validate({"type": "Entry", "id": "e1", **values})


class TestPublicationState:
    """Tests for derived publication state."""

    def test_draft(self) -> None:
        """Test that a never-published resource is a draft."""
        sys = _sys(version=1)

        assert sys.is_draft
        assert not sys.is_published
        assert not sys.is_updated

    def test_published(self) -> None:
        """Test version == publishedVersion + 1."""
        sys = _sys(version=3, publishedVersion=2)

        assert sys.is_published
        assert not sys.is_updated
        assert not sys.is_draft

    def test_updated(self) -> None:
        """Test version >= publishedVersion + 2."""
        sys = _sys(version=5, publishedVersion=2)

        assert sys.is_updated
        assert not sys.is_published

    def test_archived(self) -> None:
        """Test that archivedVersion marks the resource archived."""
        assert _sys(version=4, archivedVersion=3).is_archived
        assert not _sys(version=4).is_archived


class TestParsing:
    """Tests for parsing API sys blocks."""

    def test_links_and_dates(self) -> None:
        """Test that links and timestamps are parsed."""
        sys = _sys(
            space={"sys": {"type": "Link", "linkType": "Space", "id": "s1"}},
            createdAt="2017-06-13T00:00:00.000Z",
        )

        assert sys.space == Link(id="s1", link_type="Space")
        assert sys.created_at is not None
        assert sys.created_at.year == 2017

    def test_unknown_keys_ignored(self) -> None:
        """Test that new API keys do not break parsing."""
        sys = _sys(somethingNew=True)

        assert sys.id == "e1"

    def test_to_dict_uses_api_keys(self) -> None:
        """Test camelCase output without unset values."""
        sys = _sys(version=3, publishedVersion=2)

        assert sys.to_dict() == {
            "id": "e1",
            "type": "Entry",
            "version": 3,
            "publishedVersion": 2,
        }
