from lis import EvaluatorFn
from lis import SExpression, LispValue
from lis.errors import LisSyntaxError, LisTypeMismatch
from lis.types.atoms import Bool
from lis.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 3:
        raise LisSyntaxError("if requires a test, a consequent and an alternative")

    test, consequent, alternative = tail
    cond = evaluate_fn(test, env)
    # No truthiness: the test has to produce a Bool
    if not isinstance(cond, Bool):
        raise LisTypeMismatch(f"if test must be a Bool, got {cond}")

    return evaluate_fn(consequent if cond.value else alternative, env)
