"""Byte strings that reference parsed input or hold their own content."""

from __future__ import annotations

from typing import Optional, Union

from .errors import SetBytesError

__all__ = ["Bytes", "MAX_LENGTH"]

# Largest length any stored byte string may have.
MAX_LENGTH = 0xFFFF_FFFF

BytesLike = Union["Bytes", str, bytes, bytearray, memoryview, list, tuple]


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, Bytes):
        return data.as_bytes()
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview, list, tuple)):
        return bytes(data)
    raise TypeError(f"cannot convert {type(data).__name__} to bytes")


class Bytes:
    """Raw byte data used throughout the document tree.

    A value built from existing data is *borrowed*: it refers to that data.
    Calling `set` gives it content of its own, after which it is *owned*.
    """

    __slots__ = ("_data", "_owned")

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = _to_bytes(data)
        self._owned = False

    def as_utf8_str(self) -> str:
        """Decode as UTF-8, replacing invalid sequences."""
        return self._data.decode("utf-8", errors="replace")

    def try_as_utf8_str(self) -> Optional[str]:
        """Decode as UTF-8, or return None if the data is not valid UTF-8."""
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError:
            return None

    def as_bytes(self) -> bytes:
        """Return the raw data."""
        return self._data

    def as_bytes_borrowed(self) -> Optional[bytes]:
        """Return the data if it is borrowed, None if it is owned."""
        return None if self._owned else self._data

    def is_owned(self) -> bool:
        """Whether this value holds data given to it by `set`."""
        return self._owned

    def set(self, data: BytesLike) -> Optional[bytes]:
        """Replace the content, returning the previous data if it was owned."""
        new = _to_bytes(data)
        if len(new) > MAX_LENGTH:
            raise SetBytesError()
        old = self._data if self._owned else None
        self._data = new
        self._owned = True
        return old

    def copy(self) -> "Bytes":
        """Return an independent copy with the same content and ownership."""
        other = Bytes(self._data)
        other._owned = self._owned
        return other

    def __copy__(self) -> "Bytes":
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Bytes):
            return self._data == other._data
        if isinstance(other, str):
            return self._data == other.encode("utf-8")
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._data == bytes(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bytes__(self) -> bytes:
        return self._data

    def __str__(self) -> str:
        return self.as_utf8_str()

    def __repr__(self) -> str:
        return f"Bytes({self.as_utf8_str()!r})"