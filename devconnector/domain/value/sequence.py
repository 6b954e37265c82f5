"""Prepend-ordered collection of sub-items.

Nested collections (likes, comments, experience, education) only ever
change by inserting at the front or removing matching items, so the
most recent item is always first.
"""

from typing import Callable, Generic, Iterator, TypeVar

from pydantic import ConfigDict, RootModel

ItemT = TypeVar("ItemT")


class OrderedItems(RootModel[tuple[ItemT, ...]], Generic[ItemT]):
    """Immutable most-recent-first sequence.

    Every operation returns a new sequence; the original is untouched.
    """

    model_config = ConfigDict(frozen=True)

    root: tuple[ItemT, ...] = ()

    def insert_front(self, item: ItemT) -> "OrderedItems[ItemT]":
        """Return a new sequence with item placed first."""
        return type(self)((item, *self.root))

    def remove_where(self, predicate: Callable[[ItemT], bool]) -> "OrderedItems[ItemT]":
        """Return a new sequence without the items matching predicate."""
        return type(self)(tuple(item for item in self.root if not predicate(item)))

    def find(self, predicate: Callable[[ItemT], bool]) -> ItemT | None:
        """Return the first (most recent) matching item, if any."""
        return next((item for item in self.root if predicate(item)), None)

    def contains(self, predicate: Callable[[ItemT], bool]) -> bool:
        return any(predicate(item) for item in self.root)

    def __iter__(self) -> Iterator[ItemT]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> ItemT:
        return self.root[index]
