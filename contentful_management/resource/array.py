"""Paginated collection of resources."""

from collections.abc import Iterator, Sequence
from typing import overload

from contentful_management.resource.base import BaseResource
from contentful_management.resource.link import Link


ArrayItem = BaseResource | Link


class ResourceArray(Sequence[ArrayItem]):
    """One page of a listing (``sys.type == "Array"``).

    Items keep the order of the response. Fetching the next page is up to
    the caller, by re-issuing the query with a larger ``skip``.
    """

    def __init__(
        self,
        items: list[ArrayItem],
        total: int,
        skip: int,
        limit: int,
    ) -> None:
        """Initialize the collection.

        Args:
            items: Built items of this page.
            total: Total number of matching resources on the server.
            skip: Offset of this page.
            limit: Page size requested.
        """
        self._items = list(items)
        self.total = total
        self.skip = skip
        self.limit = limit

    @overload
    def __getitem__(self, index: int) -> ArrayItem: ...

    @overload
    def __getitem__(self, index: slice) -> list[ArrayItem]: ...

    def __getitem__(self, index: int | slice) -> ArrayItem | list[ArrayItem]:
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ArrayItem]:
        return iter(self._items)

    def resources(self) -> list[BaseResource]:
        """Items that are full resources, leaving unresolved links out."""
        return [item for item in self._items if isinstance(item, BaseResource)]

    @property
    def has_more(self) -> bool:
        """Whether more items exist past this page."""
        return self.skip + len(self._items) < self.total

    def next_skip(self) -> int:
        """Skip value for fetching the following page."""
        return self.skip + len(self._items)

    def __repr__(self) -> str:
        return (
            f"<ResourceArray total={self.total} skip={self.skip} "
            f"limit={self.limit} items={len(self._items)}>"
        )
