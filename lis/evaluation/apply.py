"""Application engine for lis.

User lambdas and native functions share one calling convention:

- Parameters and the caller's unevaluated operands are walked in lock-step.
  Each positional parameter gets its operand evaluated in the current
  environment (which already holds the parameters bound earlier in the same
  call) and pushed as a binding.
- A variadic parameter is bound to the rest of the operand list, unevaluated,
  and ends the walk.
- Missing operands leave the remaining parameters unbound; surplus operands
  are ignored.
- The body (or native implementation) then runs in the extended environment,
  after which exactly as many bindings as were pushed are popped, also when
  evaluation raised.
"""

from lis import SExpression, LispValue, EvaluatorFn
from lis.errors import LisNotCallable
from lis.types.cons import ListCursor
from lis.types.environment import Environment
from lis.types.lambda_fn import Lambda, NativeFunction, ParamKind


def apply(
    head: LispValue,
    operands: SExpression,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda or NativeFunction to an unevaluated operand list."""
    if not isinstance(head, (Lambda, NativeFunction)):
        raise LisNotCallable(str(head))

    pushed = 0
    try:
        cursor = ListCursor(operands)
        for param in head.params:
            if param.kind is ParamKind.VARIADIC:
                env.push(param.name, cursor.remaining)
                pushed += 1
                break
            if not cursor.good():
                break
            env.push(param.name, evaluate_fn(cursor.current_pair().first, env))
            pushed += 1
            cursor.advance()

        if isinstance(head, Lambda):
            return evaluate_fn(head.body, env)
        return head.impl(env)
    finally:
        # No Python-level call here: this also runs while the host stack is
        # exhausted, where any further frame would raise again.
        if pushed:
            del env.bindings[-pushed:]
