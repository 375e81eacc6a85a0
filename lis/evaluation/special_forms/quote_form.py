from lis import SExpression, LispValue, EvaluatorFn
from lis.errors import LisSyntaxError
from lis.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise LisSyntaxError("quote expects exactly 1 operand")
    return tail[0]
