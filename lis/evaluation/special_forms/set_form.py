from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.errors import LisSyntaxError, LisTypeMismatch
from lis.types.symbol import Symbol
from lis.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! name value)
    The name must already be bound. The new value shadows the old binding
    instead of overwriting it.
    """
    if len(tail) != 2:
        raise LisSyntaxError("set! requires exactly 2 operands: (set! name value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise LisTypeMismatch(f"set! first operand must be a Symbol, got {var_sym}")
    env.find(var_sym)
    value = evaluate_fn(val_expr, env)
    env.push(var_sym, value)
    return value
