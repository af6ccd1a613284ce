"""A small map that scans a list until it outgrows its inline capacity."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

__all__ = ["InlineHashMap"]

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class InlineHashMap(Generic[K, V]):
    """A map kept as a list of pairs until more than `capacity` entries exist.

    While inline, lookups scan the pairs in order and iteration follows
    insertion order (a removal moves the last pair into the freed slot).
    Inserting while `capacity` entries are already held moves the map to a
    dictionary, where it stays even if entries are later removed.
    """

    __slots__ = ("_capacity", "_pairs", "_map")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._pairs: List[Tuple[K, V]] = []
        self._map: Optional[Dict[K, V]] = None

    @property
    def capacity(self) -> int:
        """Number of entries that fit before the map moves to the heap."""
        return self._capacity

    def __len__(self) -> int:
        if self._map is not None:
            return len(self._map)
        return len(self._pairs)

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def __getitem__(self, key: K) -> V:
        index = self._find(key)
        if self._map is not None:
            return self._map[key]
        if index is None:
            raise KeyError(key)
        return self._pairs[index][1]

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def __repr__(self) -> str:
        return f"InlineHashMap<{len(self)} items>"

    def _find(self, key: K) -> Optional[int]:
        if self._map is not None:
            return None
        return next(
            (index for index, (k, _) in enumerate(self._pairs) if k == key), None
        )

    def items(self) -> Iterator[Tuple[K, V]]:
        """Iterate over the `(key, value)` pairs."""
        if self._map is not None:
            return iter(list(self._map.items()))
        return iter(list(self._pairs))

    def to_dict(self) -> Dict[K, V]:
        """Copy the entries into a new dictionary."""
        if self._map is not None:
            return dict(self._map)
        return dict(self._pairs)

    def is_heap_allocated(self) -> bool:
        """Whether the map has outgrown its inline capacity."""
        return self._map is not None

    def insert(self, key: K, value: V) -> None:
        """Insert an entry, moving to the heap if the inline space is full."""
        if self._map is not None:
            self._map[key] = value
            return
        if len(self._pairs) >= self._capacity:
            moved = dict(self._pairs)
            moved[key] = value
            self._map = moved
            self._pairs = []
            return
        self._pairs.append((key, value))

    def remove(self, key: K) -> Optional[V]:
        """Remove an entry and return its value, or None if the key is absent."""
        if self._map is not None:
            return self._map.pop(key, None)
        index = self._find(key)
        if index is None:
            return None
        value = self._pairs[index][1]
        last = self._pairs.pop()
        if index < len(self._pairs):
            self._pairs[index] = last
        return value

    def get(self, key: K) -> Optional[V]:
        """Return the value for `key`, or None if the key is absent."""
        if self._map is not None:
            return self._map.get(key)
        index = self._find(key)
        return None if index is None else self._pairs[index][1]

    def replace(self, key: K, value: V) -> bool:
        """Overwrite the value of an existing key; return whether it existed."""
        if self._map is not None:
            if key not in self._map:
                return False
            self._map[key] = value
            return True
        index = self._find(key)
        if index is None:
            return False
        self._pairs[index] = (self._pairs[index][0], value)
        return True

    def contains_key(self, key: K) -> bool:
        """Whether an entry exists for `key`."""
        if self._map is not None:
            return key in self._map
        return self._find(key) is not None

    def copy(self) -> "InlineHashMap[K, V]":
        """Return a shallow copy with the same entries and allocation state."""
        other: InlineHashMap[K, V] = InlineHashMap(self._capacity)
        other._pairs = list(self._pairs)
        other._map = None if self._map is None else dict(self._map)
        return other

    def __copy__(self) -> "InlineHashMap[K, V]":
        return self.copy()