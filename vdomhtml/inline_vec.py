"""A growable sequence that records whether it outgrew its inline capacity."""

from __future__ import annotations

from typing import Generic, Iterator, List, Optional, TypeVar

__all__ = ["InlineVec"]

T = TypeVar("T")


class InlineVec(Generic[T]):
    """A list that is "inline" until more than `capacity` items are pushed.

    Once an item is pushed while the vector already holds `capacity` items,
    it moves to the heap and stays there, even if items are later removed.
    """

    __slots__ = ("_capacity", "_items", "_heap")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: List[T] = []
        self._heap = False

    @property
    def capacity(self) -> int:
        """Number of items that fit before the vector moves to the heap."""
        return self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        value = self._checked_index(index)
        if value is None:
            raise IndexError("index out of bounds")
        return self._items[value]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, InlineVec):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"InlineVec<{len(self._items)} items>"

    def _checked_index(self, index: int) -> Optional[int]:
        if 0 <= index < len(self._items):
            return index
        return None

    def is_heap_allocated(self) -> bool:
        """Whether the vector has outgrown its inline capacity."""
        return self._heap

    def to_list(self) -> List[T]:
        """Return a new list holding the items in order."""
        return list(self._items)

    def push(self, value: T) -> None:
        """Append an item, moving to the heap if the inline space is full."""
        if not self._heap and len(self._items) >= self._capacity:
            self._heap = True
        self._items.append(value)

    def get(self, index: int) -> Optional[T]:
        """Return the item at `index`, or None if it is out of bounds."""
        checked = self._checked_index(index)
        return None if checked is None else self._items[checked]

    def set(self, index: int, value: T) -> None:
        """Replace the item at `index`; raise IndexError if out of bounds."""
        checked = self._checked_index(index)
        if checked is None:
            raise IndexError("index out of bounds")
        self._items[checked] = value

    def remove(self, index: int) -> T:
        """Remove and return the item at `index`, shifting later items down.

        Raises IndexError if `index` is out of bounds.
        """
        checked = self._checked_index(index)
        if checked is None:
            raise IndexError(
                f"removal index {index} out of bounds for length {len(self._items)}"
            )
        return self._items.pop(checked)

    def copy(self) -> "InlineVec[T]":
        """Return a shallow copy with the same items and allocation state."""
        other: InlineVec[T] = InlineVec(self._capacity)
        other._items = list(self._items)
        other._heap = self._heap
        return other

    def __copy__(self) -> "InlineVec[T]":
        return self.copy()