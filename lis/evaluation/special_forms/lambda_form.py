from lis.errors import LisSyntaxError
from lis.types.lambda_fn import Lambda

from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.types.environment import Environment


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (lambda (params) body): exactly one body expression, nothing is captured.
    if len(tail) != 2:
        raise LisSyntaxError("lambda requires a parameter list and a body")

    params, body = tail
    return Lambda(params, body)
