"""Function values: user lambdas and host-supplied natives.

Both carry a parameter list of `Param` entries and share one calling
convention (see lis.evaluation.apply). Neither captures an environment: the
body runs against whatever environment is current at call time, extended only
with the call's own parameter bindings.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from io import StringIO
from typing import Callable, TYPE_CHECKING

from lis import SExpression, LispValue
from lis.errors import LisTypeMismatch
from lis.types.cons import ListCursor, is_exhausted, is_list
from lis.types.symbol import Symbol

if TYPE_CHECKING:
    from lis.types.environment import Environment


class ParamKind(enum.Enum):
    POSITIONAL = "positional"
    # Binds the whole remaining, unevaluated operand list; ends the parameter list.
    VARIADIC = "variadic"


@dataclass(frozen=True)
class Param:
    name: Symbol
    kind: ParamKind = ParamKind.POSITIONAL


def parse_params(formals: SExpression) -> tuple[Param, ...]:
    """Turn a user-written parameter list into positional `Param` entries."""
    if not is_list(formals):
        raise LisTypeMismatch(f"lambda parameters must be a list, got {formals}")
    params = []
    cursor = ListCursor(formals)
    while cursor.good():
        name = cursor.current_pair().first
        if not isinstance(name, Symbol):
            raise LisTypeMismatch(f"lambda parameter must be a symbol, got {name}")
        params.append(Param(name))
        cursor.advance()
    if not is_exhausted(cursor.tail):
        raise LisTypeMismatch(f"improper lambda parameter list {formals}")
    return tuple(params)


def native_params(*names: str, rest: str | None = None) -> tuple[Param, ...]:
    """Parameters for a native function.

    Names get a leading space; the reader splits on whitespace, so no program
    can refer to (or accidentally shadow) a native's own parameters.
    """
    params = [Param(Symbol(" " + n)) for n in names]
    if rest is not None:
        params.append(Param(Symbol(" " + rest), ParamKind.VARIADIC))
    return tuple(params)


class Lambda:
    """A user function: parameter list and body, both kept unevaluated."""

    __slots__ = ("formals", "params", "body")

    def __init__(self, formals: SExpression, body: SExpression):
        self.params: tuple[Param, ...] = parse_params(formals)
        self.formals: SExpression = formals
        self.body: SExpression = body

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("lambda ")
            buffer.write(str(self.formals))
            buffer.write(" ")
            buffer.write(str(self.body))
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {self}>"


class NativeFunction:
    """A primitive implemented in Python.

    `impl` is called with the environment after the call's parameters have
    been bound into it, and reads its arguments back out by name.
    """

    __slots__ = ("name", "params", "impl")

    def __init__(
        self,
        name: str,
        params: tuple[Param, ...],
        impl: Callable[[Environment], LispValue],
    ):
        self.name = name
        self.params = params
        self.impl = impl

    def __str__(self) -> str:
        return "primitive function"

    def __repr__(self) -> str:
        return f"<NativeFunction {self.name}>"
