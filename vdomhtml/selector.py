"""Query selectors and how they match against document nodes."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable, Optional

from .bytes import Bytes

__all__ = ["SelectorKind", "Selector"]


class SelectorKind(enum.Enum):
    """The kinds of selector node."""

    TAG = "tag"
    ID = "id"
    CLASS = "class"
    ALL = "all"
    AND = "and"
    OR = "or"
    DESCENDANT = "descendant"
    PARENT = "parent"
    ATTRIBUTE = "attribute"
    ATTRIBUTE_VALUE = "attribute_value"
    ATTRIBUTE_VALUE_WHITESPACED_CONTAINS = "attribute_value_whitespaced_contains"
    ATTRIBUTE_VALUE_STARTS_WITH = "attribute_value_starts_with"
    ATTRIBUTE_VALUE_ENDS_WITH = "attribute_value_ends_with"
    ATTRIBUTE_VALUE_SUBSTRING = "attribute_value_substring"


_COMBINATORS = frozenset(
    {
        SelectorKind.AND,
        SelectorKind.OR,
        SelectorKind.DESCENDANT,
        SelectorKind.PARENT,
    }
)

_VALUE_TESTS: dict = {
    SelectorKind.ATTRIBUTE_VALUE: lambda attr, value: attr == value,
    SelectorKind.ATTRIBUTE_VALUE_ENDS_WITH: lambda attr, value: attr.endswith(value),
    SelectorKind.ATTRIBUTE_VALUE_STARTS_WITH: lambda attr, value: attr.startswith(
        value
    ),
    SelectorKind.ATTRIBUTE_VALUE_SUBSTRING: lambda attr, value: value in attr,
    SelectorKind.ATTRIBUTE_VALUE_WHITESPACED_CONTAINS: lambda attr, value: value
    in attr.split(),
}


@dataclass(frozen=True)
class Selector:
    """A single query selector node.

    `name` holds the tag, id, class or attribute name; `value` the attribute
    value to compare with; `left` and `right` the operands of a combinator.
    """

    kind: SelectorKind
    name: bytes = b""
    value: bytes = b""
    left: Optional["Selector"] = None
    right: Optional["Selector"] = None

    def __post_init__(self) -> None:
        if self.kind in _COMBINATORS and (self.left is None or self.right is None):
            raise ValueError(f"{self.kind.name} selector needs two operands")

    @classmethod
    def tag(cls, name: bytes) -> "Selector":
        return cls(SelectorKind.TAG, name=bytes(name))

    @classmethod
    def id(cls, name: bytes) -> "Selector":
        return cls(SelectorKind.ID, name=bytes(name))

    @classmethod
    def class_(cls, name: bytes) -> "Selector":
        return cls(SelectorKind.CLASS, name=bytes(name))

    @classmethod
    def all(cls) -> "Selector":
        return cls(SelectorKind.ALL)

    @classmethod
    def and_(cls, left: "Selector", right: "Selector") -> "Selector":
        return cls(SelectorKind.AND, left=left, right=right)

    @classmethod
    def or_(cls, left: "Selector", right: "Selector") -> "Selector":
        return cls(SelectorKind.OR, left=left, right=right)

    @classmethod
    def descendant(cls, left: "Selector", right: "Selector") -> "Selector":
        return cls(SelectorKind.DESCENDANT, left=left, right=right)

    @classmethod
    def parent(cls, left: "Selector", right: "Selector") -> "Selector":
        return cls(SelectorKind.PARENT, left=left, right=right)

    @classmethod
    def attribute(cls, name: bytes) -> "Selector":
        return cls(SelectorKind.ATTRIBUTE, name=bytes(name))

    @classmethod
    def attribute_value(cls, name: bytes, value: bytes) -> "Selector":
        return cls(SelectorKind.ATTRIBUTE_VALUE, name=bytes(name), value=bytes(value))

    @classmethod
    def attribute_contains_word(cls, name: bytes, value: bytes) -> "Selector":
        return cls(
            SelectorKind.ATTRIBUTE_VALUE_WHITESPACED_CONTAINS,
            name=bytes(name),
            value=bytes(value),
        )

    @classmethod
    def attribute_starts_with(cls, name: bytes, value: bytes) -> "Selector":
        return cls(
            SelectorKind.ATTRIBUTE_VALUE_STARTS_WITH,
            name=bytes(name),
            value=bytes(value),
        )

    @classmethod
    def attribute_ends_with(cls, name: bytes, value: bytes) -> "Selector":
        return cls(
            SelectorKind.ATTRIBUTE_VALUE_ENDS_WITH, name=bytes(name), value=bytes(value)
        )

    @classmethod
    def attribute_substring(cls, name: bytes, value: bytes) -> "Selector":
        return cls(
            SelectorKind.ATTRIBUTE_VALUE_SUBSTRING, name=bytes(name), value=bytes(value)
        )

    def matches(self, node: Any) -> bool:
        """Whether `node` matches this selector.

        Descendant and parent combinators depend on the tree around a node,
        which a single node cannot tell, so they never match here.
        """
        kind = self.kind
        if kind is SelectorKind.ALL:
            return True
        if kind is SelectorKind.AND:
            return self.left.matches(node) and self.right.matches(node)  # type: ignore[union-attr]
        if kind is SelectorKind.OR:
            return self.left.matches(node) or self.right.matches(node)  # type: ignore[union-attr]
        if kind in (SelectorKind.DESCENDANT, SelectorKind.PARENT):
            return False

        tag = node.as_tag()
        if tag is None:
            return False
        attributes = tag.attributes()

        if kind is SelectorKind.TAG:
            return tag.name() == self.name
        if kind is SelectorKind.ID:
            element_id = attributes.id()
            return element_id is not None and element_id == self.name
        if kind is SelectorKind.CLASS:
            return attributes.is_class_member(self.name)
        if kind is SelectorKind.ATTRIBUTE:
            return attributes.contains(self.name)
        return _check_attribute(attributes, self.name, self.value, _VALUE_TESTS[kind])


def _check_attribute(
    attributes: Any, name: bytes, value: bytes, test: Callable[[str, str], bool]
) -> bool:
    found = attributes.get(name)
    if not isinstance(found, Bytes):
        return False
    return test(found.as_utf8_str(), value.decode("utf-8", errors="replace"))