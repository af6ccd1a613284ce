"""Byte classification, searching and a cursor over input bytes."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Union

__all__ = [
    "is_ident",
    "to_lower",
    "is_closing",
    "find",
    "find4",
    "search_non_ident",
    "matches_case_insensitive",
    "Stream",
]

_IDENT_BYTES = frozenset(
    b"0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-_:+/"
)
_NON_IDENT = re.compile(rb"[^0-9A-Za-z_:+/\-]")
_SLASH = ord("/")
_GT = ord(">")


def is_ident(c: int) -> bool:
    """Whether the byte may appear in a tag or attribute identifier."""
    return c in _IDENT_BYTES


def to_lower(byte: int) -> int:
    """Lower-case an ASCII upper-case letter; other bytes are unchanged."""
    return byte + 0x20 if 0x41 <= byte <= 0x5A else byte


def is_closing(c: int) -> bool:
    """Whether the byte is `/` or `>`."""
    return c == _SLASH or c == _GT


def find(haystack: bytes, needle: Union[int, bytes]) -> Optional[int]:
    """Index of the first occurrence of the byte `needle`, or None."""
    index = haystack.find(needle)
    return index if index >= 0 else None


def find4(haystack: bytes, needle: Iterable[int]) -> Optional[int]:
    """Index of the first byte that is any of the bytes in `needle`, or None."""
    positions = [i for i in (haystack.find(b) for b in needle) if i >= 0]
    return min(positions) if positions else None


def search_non_ident(haystack: bytes) -> Optional[int]:
    """Index of the first byte that is not an identifier byte, or None."""
    match = _NON_IDENT.search(haystack)
    return match.start() if match else None


def matches_case_insensitive(haystack: bytes, needle: bytes) -> bool:
    """Whether `haystack`, lower-cased, equals the lower-case `needle`."""
    return len(haystack) == len(needle) and bytes(haystack).lower() == bytes(needle)


class Stream:
    """A cursor over a byte string."""

    __slots__ = ("data", "idx")

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.idx = 0

    def __len__(self) -> int:
        return len(self.data)

    def current(self) -> Optional[int]:
        """The byte at the cursor, or None at the end."""
        return self.data[self.idx] if self.idx < len(self.data) else None

    def expect_and_skip(self, expect: int) -> Optional[int]:
        """Advance past the current byte if it equals `expect` and return it."""
        c = self.current()
        if c is not None and c == expect:
            self.idx += 1
            return c
        return None

    def expect_oneof_and_skip(self, expect: Iterable[int]) -> Optional[int]:
        """Advance past the current byte if it is one of `expect` and return it."""
        c = self.current()
        if c is not None and c in expect:
            self.idx += 1
            return c
        return None

    def expect_and_skip_cond(self, expect: int) -> bool:
        """Like `expect_and_skip`, but report only whether it matched."""
        return self.expect_and_skip(expect) is not None

    def advance(self) -> None:
        self.idx += 1

    def advance_by(self, step: int) -> None:
        self.idx += step

    def is_eof(self) -> bool:
        return self.idx >= len(self.data)

    def slice(self, start: int, end: int) -> bytes:
        """Return data[start:end]; raise IndexError if the range is out of bounds."""
        if not 0 <= start <= end <= len(self.data):
            raise IndexError(
                f"range {start}..{end} out of bounds for length {len(self.data)}"
            )
        return self.data[start:end]

    def slice_checked(self, start: int, end: int) -> bytes:
        """Like `slice`, but clamp `end` to the length of the data."""
        return self.slice(start, min(len(self.data), end))

    def slice_len(self, start: int, length: int) -> bytes:
        """Slice from `start` up to `length` bytes past the cursor, clamped."""
        return self.slice_checked(start, self.idx + length)