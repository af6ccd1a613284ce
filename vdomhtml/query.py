"""Parsing query selector text and iterating over the nodes that match."""

from __future__ import annotations

from typing import Any, Iterator, Optional, Union

from .scan import Stream, is_ident
from .selector import Selector

__all__ = ["SelectorParser", "parse_query_selector", "QuerySelectorIterator"]

_SPACE = ord(" ")
_COMMA = ord(",")
_GT = ord(">")
_HASH = ord("#")
_DOT = ord(".")
_STAR = ord("*")
_OPEN_BRACKET = ord("[")
_CLOSE_BRACKET = ord("]")
_EQUALS = ord("=")
_QUOTES = (ord('"'), ord("'"))

_VALUE_OPERATORS = {
    ord("~"): Selector.attribute_contains_word,
    ord("^"): Selector.attribute_starts_with,
    ord("$"): Selector.attribute_ends_with,
    ord("*"): Selector.attribute_substring,
}


def _as_bytes(data: Union[str, bytes, bytearray, memoryview]) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class SelectorParser:
    """Parses query selector text such as `div.item > a[href]`."""

    __slots__ = ("_stream",)

    def __init__(self, data: Union[str, bytes, bytearray, memoryview]) -> None:
        self._stream = Stream(_as_bytes(data))

    def _skip_whitespaces(self) -> bool:
        stream = self._stream
        had_whitespace = stream.expect_and_skip_cond(_SPACE)
        while not stream.is_eof() and stream.expect_and_skip(_SPACE) is not None:
            pass
        return had_whitespace

    def _read_identifier(self) -> bytes:
        stream = self._stream
        start = stream.idx
        while not stream.is_eof() and is_ident(stream.current()):  # type: ignore[arg-type]
            stream.advance()
        return stream.slice(start, stream.idx)

    def _read_value(self) -> Optional[bytes]:
        """Read an optionally quoted value followed by `]`."""
        stream = self._stream
        quote = stream.expect_oneof_and_skip(_QUOTES)
        value = self._read_identifier()
        if quote is not None and stream.expect_and_skip(quote) is None:
            return None
        if stream.expect_and_skip(_CLOSE_BRACKET) is None:
            return None
        return value

    def _parse_combinator(self, left: Selector) -> Optional[Selector]:
        had_whitespace = self._skip_whitespaces()
        stream = self._stream
        token = stream.current()
        if token is None:
            return left

        if token == _COMMA:
            stream.advance()
            right = self.selector()
            return None if right is None else Selector.or_(left, right)
        if token == _GT:
            stream.advance()
            right = self.selector()
            return None if right is None else Selector.parent(left, right)

        right = self.selector()
        if right is None:
            return None
        if had_whitespace:
            return Selector.descendant(left, right)
        return Selector.and_(left, right)

    def _parse_attribute(self) -> Optional[Selector]:
        stream = self._stream
        attribute = self._read_identifier()
        token = stream.current()

        if token == _CLOSE_BRACKET:
            stream.advance()
            return Selector.attribute(attribute)
        if token == _EQUALS:
            stream.advance()
            value = self._read_value()
            return None if value is None else Selector.attribute_value(attribute, value)
        if token is not None and token in _VALUE_OPERATORS:
            stream.advance()
            if stream.expect_and_skip(_EQUALS) is None:
                return None
            value = self._read_value()
            if value is None:
                return None
            return _VALUE_OPERATORS[token](attribute, value)
        return None

    def selector(self) -> Optional[Selector]:
        """Parse a full selector, or return None if the text is not valid."""
        self._skip_whitespaces()
        stream = self._stream
        token = stream.current()
        if token is None:
            return None

        left: Optional[Selector]
        if token == _HASH:
            stream.advance()
            left = Selector.id(self._read_identifier())
        elif token == _DOT:
            stream.advance()
            left = Selector.class_(self._read_identifier())
        elif token == _STAR:
            stream.advance()
            left = Selector.all()
        elif token == _OPEN_BRACKET:
            stream.advance()
            left = self._parse_attribute()
            if left is None:
                return None
        elif is_ident(token):
            left = Selector.tag(self._read_identifier())
        else:
            return None

        return self._parse_combinator(left)


def parse_query_selector(
    text: Union[str, bytes, bytearray, memoryview]
) -> Optional[Selector]:
    """Parse query selector text, returning None if it is not valid."""
    return SelectorParser(text).selector()


class QuerySelectorIterator:
    """Yields handles of the nodes in a collection that match a selector.

    The collection provides `query_len(parser)` and `query_get(parser, index)`;
    the latter returns a `(node, handle)` pair or None. The number of nodes
    is fixed when the iterator is created.
    """

    __slots__ = ("selector", "_parser", "_collection", "_index", "_len")

    def __init__(self, selector: Selector, parser: Any, collection: Any) -> None:
        self.selector = selector
        self._parser = parser
        self._collection = collection
        self._index = 0
        self._len = collection.query_len(parser)

    def __iter__(self) -> Iterator[Any]:
        return self

    def __next__(self) -> Any:
        while self._index < self._len:
            found = self._collection.query_get(self._parser, self._index)
            self._index += 1
            if found is None:
                continue
            node, handle = found
            if self.selector.matches(node):
                return handle
        raise StopIteration

    def copy(self) -> "QuerySelectorIterator":
        """Return an iterator that continues from the same position."""
        other = QuerySelectorIterator.__new__(QuerySelectorIterator)
        other.selector = self.selector
        other._parser = self._parser
        other._collection = self._collection
        other._index = self._index
        other._len = self._len
        return other

    def __copy__(self) -> "QuerySelectorIterator":
        return self.copy()