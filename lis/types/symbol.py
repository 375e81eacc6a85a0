"""Symbols: the names of lis.

The reader turns every atom that is neither an Integer nor a Real literal into
a Symbol, so `set!`, `+` and `1_000` are all names. Keyword dispatch and
environment lookup compare Symbols by their interned text.
"""

from __future__ import annotations

import sys


class Symbol:
    __slots__ = ("id",)

    def __init__(self, name: str):
        # interned: lookups walk the whole binding stack
        self.id = sys.intern(name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self):
        return f"Symbol({self.id!r})"

    def __str__(self):
        return self.id
