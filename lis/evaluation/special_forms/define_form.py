from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.errors import LisSyntaxError, LisTypeMismatch
from lis.types.symbol import Symbol
from lis.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)
    Always pushes a new binding; returns the value.
    """
    if len(tail) != 2:
        raise LisSyntaxError("define requires exactly 2 operands")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise LisTypeMismatch(f"define first operand must be a Symbol, got {name}")
    value = evaluate_fn(val_expr, env)
    env.push(name, value)
    return value
