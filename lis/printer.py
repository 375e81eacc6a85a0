"""Canonical text rendering of lis values (REPL echo and error messages)."""

from lis import LispValue
from lis.errors import LisTypeMismatch
from lis.types.atoms import Integer, Real, Bool
from lis.types.cons import Pair
from lis.types.lambda_fn import Lambda, NativeFunction
from lis.types.nil import NilType
from lis.types.symbol import Symbol


def render(value: LispValue) -> str:
    match value:
        case Integer() | Real() | Bool() | Symbol() | Pair() | NilType():
            return str(value)
        case Lambda() | NativeFunction():
            return str(value)
    raise LisTypeMismatch(f"not a lis value: {value!r}")
