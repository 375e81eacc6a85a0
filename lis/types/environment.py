"""Runtime environment for lis.

The Environment is one flat stack of (Symbol, value) bindings. Pushing a name
that is already bound shadows the older binding; popping uncovers it again.
Call-local parameters and top-level definitions live on the same stack, so
this is dynamic binding by stack discipline rather than nested frames.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from lis import LispValue
from lis.errors import LisError, LisUnboundName
from lis.types.symbol import Symbol


class Environment:
    """Ordered stack of bindings, newest last in storage, searched newest first."""

    __slots__ = ("bindings",)

    def __init__(self):
        self.bindings: list[tuple[Symbol, LispValue]] = []

    def push(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, shadowing any existing binding."""
        self.bindings.append((name, value))

    def pop(self, count: int = 1) -> None:
        """Remove the `count` most recently pushed bindings."""
        if count < 0 or count > len(self.bindings):
            raise LisError(f"cannot pop {count} binding(s) from depth {len(self.bindings)}")
        if count:
            del self.bindings[-count:]

    def find(self, name: Symbol) -> LispValue:
        """Return the newest value bound to `name`.

        Raises LisUnboundName if there is none.
        """
        for key, value in reversed(self.bindings):
            if key == name:
                return value
        raise LisUnboundName(name)

    @property
    def depth(self) -> int:
        return len(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __iter__(self) -> Iterator[tuple[Symbol, LispValue]]:
        """Bindings from newest to oldest, shadowed ones included."""
        return reversed(self.bindings)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment depth={len(self.bindings)}>"
