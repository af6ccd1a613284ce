"""The attributes of an HTML element."""

from __future__ import annotations

import re
from typing import Iterator, Optional, Tuple, Union

from .bytes import Bytes
from .inline_map import InlineHashMap

__all__ = ["Attributes", "INLINED_ATTRIBUTES"]

# Number of raw attributes kept inline before the map moves to the heap.
INLINED_ATTRIBUTES = 2

_ID = b"id"
_CLASS = b"class"
_ASCII_WHITESPACE = re.compile(r"[ \t\n\x0c\r]+")

KeyLike = Union[Bytes, str, bytes, bytearray, memoryview]


def _key(key: KeyLike) -> Bytes:
    return key if isinstance(key, Bytes) else Bytes(key)


def _value(value: Optional[KeyLike]) -> Optional[Bytes]:
    if value is None or isinstance(value, Bytes):
        return value
    return Bytes(value)


def _member_bytes(member: KeyLike) -> bytes:
    if isinstance(member, Bytes):
        return member.as_bytes()
    if isinstance(member, str):
        return member.encode("utf-8")
    return bytes(member)


class Attributes:
    """All attributes of an HTML tag, with `id` and `class` kept apart.

    Values are `Bytes`, or None for an attribute present without a value.
    Lookups by key return the stored `Bytes` object, which may be changed
    in place with `Bytes.set`.
    """

    __slots__ = ("_raw", "_id", "_class")

    def __init__(self) -> None:
        self._raw: InlineHashMap[Bytes, Optional[Bytes]] = InlineHashMap(
            INLINED_ATTRIBUTES
        )
        self._id: Optional[Bytes] = None
        self._class: Optional[Bytes] = None

    def __len__(self) -> int:
        return (
            len(self._raw)
            + (self._id is not None)
            + (self._class is not None)
        )

    def __contains__(self, key: object) -> bool:
        return self.contains(key)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Attributes({dict(self.items())!r})"

    def is_empty(self) -> bool:
        return len(self) == 0

    def is_class_member(self, member: KeyLike) -> bool:
        """Whether `member` is one of the names in the `class` attribute."""
        classes = self.class_iter()
        if classes is None:
            return False
        target = _member_bytes(member)
        return any(name.encode("utf-8") == target for name in classes)

    def get(self, key: KeyLike) -> Optional[Bytes]:
        """Return the value of an attribute.

        None is returned both for a missing attribute and for one without a
        value; use `contains` to tell them apart.
        """
        k = _key(key)
        data = k.as_bytes()
        if data == _ID:
            return self._id
        if data == _CLASS:
            return self._class
        return self._raw.get(k)

    def contains(self, key: KeyLike) -> bool:
        """Whether the attribute is present, with or without a value."""
        k = _key(key)
        data = k.as_bytes()
        if data == _ID:
            return self._id is not None
        if data == _CLASS:
            return self._class is not None
        return self._raw.contains_key(k)

    def remove(self, key: KeyLike) -> Optional[Bytes]:
        """Remove an attribute and return its value (None if it had none)."""
        k = _key(key)
        data = k.as_bytes()
        if data == _ID:
            old, self._id = self._id, None
            return old
        if data == _CLASS:
            old, self._class = self._class, None
            return old
        return self._raw.remove(k)

    def remove_value(self, key: KeyLike) -> Optional[Bytes]:
        """Clear the value of an attribute, keeping the attribute itself.

        `id` and `class` cannot exist without a value, so for them the whole
        attribute is removed.
        """
        k = _key(key)
        data = k.as_bytes()
        if data in (_ID, _CLASS):
            return self.remove(k)
        if not self._raw.contains_key(k):
            return None
        old = self._raw.get(k)
        self._raw.replace(k, None)
        return old

    def insert(self, key: KeyLike, value: Optional[KeyLike]) -> None:
        """Add an attribute; `value` None makes it a valueless attribute."""
        k = _key(key)
        v = _value(value)
        data = k.as_bytes()
        if data == _ID:
            self._id = v
        elif data == _CLASS:
            self._class = v
        else:
            self._raw.insert(k, v)

    def items(self) -> Iterator[Tuple[str, Optional[str]]]:
        """Iterate over `(key, value)` as text, other attributes first."""
        for key, value in self._raw.items():
            yield key.as_utf8_str(), None if value is None else value.as_utf8_str()
        if self._id is not None:
            yield "id", self._id.as_utf8_str()
        if self._class is not None:
            yield "class", self._class.as_utf8_str()

    def id(self) -> Optional[Bytes]:
        """The `id` attribute, if present."""
        return self._id

    def class_name(self) -> Optional[Bytes]:
        """The `class` attribute, if present."""
        return self._class

    def class_iter(self) -> Optional[Iterator[str]]:
        """Iterate over the class names, or None without valid UTF-8 classes."""
        if self._class is None:
            return None
        text = self._class.try_as_utf8_str()
        if text is None:
            return None
        return (name for name in _ASCII_WHITESPACE.split(text) if name)

    def unstable_raw(self) -> InlineHashMap:
        """The map of attributes other than `id` and `class`."""
        return self._raw