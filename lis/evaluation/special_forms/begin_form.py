from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.errors import LisSyntaxError
from lis.types.environment import Environment


def begin_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if not tail:
        raise LisSyntaxError("begin requires at least 1 operand")
    for e in tail[:-1]:
        evaluate_fn(e, env)
    return evaluate_fn(tail[-1], env)
