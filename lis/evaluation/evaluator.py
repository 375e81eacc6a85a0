"""Core evaluator for the lis interpreter.

Literals and function values evaluate to themselves, symbols are looked up,
and a non-empty list is either a special form (head is a keyword) or an
application (head evaluates to a function). Evaluation recurses on the host
stack; `evaluate` is the entry point that turns stack exhaustion into a
LisRecursionError.
"""

from __future__ import annotations

from lis import SExpression, LispValue
from lis.errors import LisRecursionError, LisTypeMismatch
from lis.types.atoms import Integer, Real, Bool
from lis.types.cons import Pair, to_list
from lis.types.environment import Environment
from lis.types.lambda_fn import Lambda, NativeFunction
from lis.types.nil import NilType
from lis.types.symbol import Symbol
from lis.evaluation.apply import apply
from lis.evaluation.special_forms import SPECIAL_FORMS, KEYWORDS


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate one top-level expression."""
    try:
        return evaluate0(expr, env)
    except RecursionError as err:
        raise LisRecursionError("maximum evaluation depth exceeded") from err


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    match expr:
        case Integer() | Real() | Bool():
            return expr

        case Symbol():
            return env.find(expr)

        case NilType():
            return expr

        case Pair(first=Symbol(id=name), rest=operands) if name in KEYWORDS:
            # Keywords win over any binding of the same name
            return SPECIAL_FORMS[KEYWORDS[name]](to_list(operands), env, evaluate0)

        case Pair(first=head, rest=operands):
            operator = evaluate0(head, env)
            return apply(operator, operands, env, evaluate0)

        case Lambda() | NativeFunction():
            return expr

    raise LisTypeMismatch(f"cannot evaluate {expr!r}")
