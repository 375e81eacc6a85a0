"""Cons cells and helpers over chains of them.

A list is either the canonical `Empty` or a `Pair(first, rest)`. Chains are
built by prepending onto an already complete tail and are never mutated, so
they cannot be cyclic. The tail of the last Pair is normally `Empty`, but any
value may sit there (an improper list); iteration stops quietly at such a
tail and only the operations that need a proper list refuse it.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator

from lis import LispValue
from lis.errors import LisTypeMismatch
from lis.types.nil import Empty, NilType


class Pair:
    __slots__ = ("first", "rest")

    def __init__(self, first: LispValue, rest: LispValue = Empty):
        if first is None:
            raise LisTypeMismatch("a Pair requires a first element")
        self.first = first
        self.rest = Empty if rest is None else rest

    def __iter__(self) -> Iterator[LispValue]:
        return iter_list(self)

    def __eq__(self, other) -> bool:
        a, b = self, other
        while isinstance(a, Pair) and isinstance(b, Pair):
            if a.first != b.first:
                return False
            a, b = a.rest, b.rest
        if isinstance(a, Pair) or isinstance(b, Pair):
            return False
        return a == b

    __hash__ = None

    def __repr__(self):
        return f"Pair({self.first!r}, {self.rest!r})"

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("( ")
            node = self
            while isinstance(node, Pair):
                buffer.write(str(node.first))
                buffer.write(" ")
                node = node.rest
            if not is_exhausted(node):
                buffer.write(". ")
                buffer.write(str(node))
                buffer.write(" ")
            buffer.write(")")
            return buffer.getvalue()


def cons(head: LispValue, tail: LispValue) -> Pair:
    """Return a new Pair; `tail` is shared, never modified."""
    return Pair(head, tail)


def is_exhausted(node: LispValue) -> bool:
    """True for both list terminators: a missing reference and `Empty`."""
    return node is None or isinstance(node, NilType)


def is_list(value: LispValue) -> bool:
    return isinstance(value, (Pair, NilType))


class ListCursor:
    """Forward-only cursor over a chain. Never rewinds, never mutates."""

    __slots__ = ("_node",)

    def __init__(self, lst: LispValue):
        self._node = lst

    def good(self) -> bool:
        return isinstance(self._node, Pair)

    def current_pair(self) -> Pair:
        if not isinstance(self._node, Pair):
            raise LisTypeMismatch("list exhausted")
        return self._node

    def advance(self) -> ListCursor:
        self._node = self.current_pair().rest
        return self

    @property
    def remaining(self) -> LispValue:
        """The unconsumed part of the chain (`Empty` once fully consumed)."""
        return Empty if self._node is None else self._node

    @property
    def tail(self) -> LispValue:
        """The terminator reached, or None while pairs remain."""
        if isinstance(self._node, Pair):
            return None
        return self.remaining


def iter_list(lst: LispValue) -> Iterator[LispValue]:
    cursor = ListCursor(lst)
    while cursor.good():
        yield cursor.current_pair().first
        cursor.advance()


def from_iterable(items: Iterable[LispValue], tail: LispValue = Empty) -> LispValue:
    """Build a chain holding `items` in order, ending in `tail`."""
    node = tail
    for item in reversed(list(items)):
        node = Pair(item, node)
    return node


def to_list(lst: LispValue) -> list[LispValue]:
    """Collect the elements of a proper list into a Python list."""
    if not is_list(lst):
        raise LisTypeMismatch(f"expected a list, got {lst}")
    items = []
    cursor = ListCursor(lst)
    while cursor.good():
        items.append(cursor.current_pair().first)
        cursor.advance()
    if not is_exhausted(cursor.tail):
        raise LisTypeMismatch(f"improper list {lst}")
    return items


def list_length(lst: LispValue) -> int:
    return len(to_list(lst))


def append(lhs: LispValue, rhs: LispValue) -> LispValue:
    """A new chain with the elements of `lhs` followed by `rhs` (shared)."""
    return from_iterable(to_list(lhs), tail=rhs)
