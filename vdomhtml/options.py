"""Parser options and fixed tables used while parsing."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

__all__ = ["ParserFlag", "ParserOptions", "COMMENT", "VOID_TAGS"]

# Marker that opens and closes an HTML comment body.
COMMENT = b"--"

# Tags that never have content and are never pushed on the open-element stack.
VOID_TAGS = (
    b"area",
    b"base",
    b"br",
    b"col",
    b"embed",
    b"hr",
    b"img",
    b"input",
    b"keygen",
    b"link",
    b"meta",
    b"param",
    b"source",
    b"track",
    b"wbr",
)


class ParserFlag(enum.IntFlag):
    """Individual option bits."""

    TRACK_IDS = 1 << 0
    TRACK_CLASSES = 1 << 1


_HIGHEST = ParserFlag.TRACK_CLASSES
_ALL_BITS = int(_HIGHEST) * 2 - 1


@dataclass(frozen=True)
class ParserOptions:
    """Options for the HTML parser.

    The defaults do no extra bookkeeping. Enabling tracking records ids and
    class names as tags are parsed, making lookups by id or class cheap.
    """

    flags: int = 0

    @classmethod
    def from_raw_checked(cls, flags: int) -> Optional["ParserOptions"]:
        """Build options from a raw bit set, or None if it has unknown bits."""
        if flags < 0 or flags > _ALL_BITS:
            return None
        return cls(flags)

    def to_raw(self) -> int:
        """Return the raw bit set."""
        return self.flags

    def _with(self, flag: ParserFlag) -> "ParserOptions":
        return ParserOptions(self.flags | int(flag))

    def _has(self, flag: ParserFlag) -> bool:
        return self.flags & int(flag) != 0

    def track_ids(self) -> "ParserOptions":
        """Return options that also record element ids."""
        return self._with(ParserFlag.TRACK_IDS)

    def track_classes(self) -> "ParserOptions":
        """Return options that also record element class names."""
        return self._with(ParserFlag.TRACK_CLASSES)

    def is_tracking_ids(self) -> bool:
        return self._has(ParserFlag.TRACK_IDS)

    def is_tracking_classes(self) -> bool:
        return self._has(ParserFlag.TRACK_CLASSES)

    def is_tracking(self) -> bool:
        """Whether ids or classes are being tracked."""
        return self.flags != 0