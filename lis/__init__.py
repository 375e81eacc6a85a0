# Core type aliases for the lis data model.
# Every runtime value is one of the classes in lis.types: Integer, Real, Bool,
# Symbol, Pair, the Empty list, Lambda or NativeFunction. Programs are read into
# the same classes, so code and data share one representation.
#
# Naming guidance:
# - SExpression: Use in reader/special-form code to denote unevaluated forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type passed into special forms and the application engine
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
