"""Typed value nodes that can be stored in a vector and cloned."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

_INT_MIN, _INT_MAX = -(2**31), 2**31 - 1
_LONG_MIN, _LONG_MAX = -(2**63), 2**63 - 1


class ValueKind(Enum):
    """The kind of value a node holds."""

    CHAR = "char"
    INT = "int"
    LONG = "long"
    STR = "str"


@dataclass(eq=False)
class ValueNode:
    """A single value of a given kind; nodes compare by identity."""

    kind: ValueKind
    value: Any

    def clone(self) -> ValueNode:
        """Return a new node holding the same kind and value."""
        return ValueNode(self.kind, self.value)


def _checked_int(value: int, low: int, high: int, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} value must be an integer")
    if not low <= value <= high:
        raise OverflowError(f"{value} does not fit in a {name}")
    return value


def char_node(value: str) -> ValueNode:
    """Return a node holding a single character."""
    if not isinstance(value, str):
        raise TypeError("char value must be a string")
    if len(value) != 1:
        raise ValueError("char value must be a single character")
    return ValueNode(ValueKind.CHAR, value)


def int_node(value: int) -> ValueNode:
    """Return a node holding a signed 32-bit integer."""
    return ValueNode(ValueKind.INT, _checked_int(value, _INT_MIN, _INT_MAX, "int"))


def long_node(value: int) -> ValueNode:
    """Return a node holding a signed 64-bit integer."""
    return ValueNode(ValueKind.LONG, _checked_int(value, _LONG_MIN, _LONG_MAX, "long"))


def str_node(value: str | None) -> ValueNode:
    """Return a node holding a copy of ``value``; ``None`` becomes empty text."""
    if value is None:
        return ValueNode(ValueKind.STR, "")
    if not isinstance(value, str):
        raise TypeError("str value must be a string")
    return ValueNode(ValueKind.STR, value)