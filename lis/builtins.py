"""Built-in functions for the lis runtime environment.

This module defines arithmetic, comparison, list processing and type
predicates, and `register`, which pushes them into a global environment
before any user input is evaluated. Every primitive is a NativeFunction: the
application engine binds its parameters into the environment and the
implementation reads them back by name.
"""
from __future__ import annotations

import logging
import operator
from typing import Callable

from lis import LispValue
from lis.errors import LisArithmeticOverflow, LisArithmeticTypeError, LisDivisionByZero, LisTypeMismatch
from lis.evaluation.evaluator import evaluate0
from lis.types.atoms import Integer, Real, Bool, TRUE, FALSE
from lis.types.cons import Pair, cons, append, from_iterable, is_exhausted, is_list, list_length, to_list
from lis.types.environment import Environment
from lis.types.lambda_fn import NativeFunction, native_params
from lis.types.symbol import Symbol

logger = logging.getLogger(__name__)

X = Symbol(" x")
Y = Symbol(" y")
ARGS = Symbol(" args")

UNARY = native_params("x")
BINARY = native_params("x", "y")
VARIADIC = native_params(rest="args")


# -------------------------------
# Arithmetic and comparison
# -------------------------------
def _numbers(name: str, lhs: LispValue, rhs: LispValue) -> tuple[LispValue, LispValue]:
    if not isinstance(lhs, (Integer, Real)):
        raise LisArithmeticTypeError(f"{name}: invalid 1st argument {lhs}")
    if not isinstance(rhs, (Integer, Real)):
        raise LisArithmeticTypeError(f"{name}: invalid 2nd argument {rhs}")
    return lhs, rhs


def divide(a, b):
    """Integer division truncates toward zero; anything with a Real is a float division."""
    if b == 0:
        raise LisDivisionByZero("division by zero")
    if isinstance(a, int) and isinstance(b, int):
        q = abs(a) // abs(b)
        return q if (a < 0) == (b < 0) else -q
    return a / b


def arithmetic(name: str, op: Callable) -> Callable[[Environment], LispValue]:
    """Integer op Integer gives an Integer; a Real on either side promotes to Real."""
    def impl(env: Environment) -> LispValue:
        lhs, rhs = _numbers(name, env.find(X), env.find(Y))
        if isinstance(lhs, Integer) and isinstance(rhs, Integer):
            return Integer(op(lhs.value, rhs.value))
        try:
            return Real(op(float(lhs.value), float(rhs.value)))
        except OverflowError:
            raise LisArithmeticOverflow(f"{name}: integer too large to promote to Real") from None
    return impl


def comparison(name: str, op: Callable) -> Callable[[Environment], LispValue]:
    def impl(env: Environment) -> LispValue:
        lhs, rhs = _numbers(name, env.find(X), env.find(Y))
        return Bool.of(op(lhs.value, rhs.value))
    return impl


def logical_not(env: Environment) -> LispValue:
    x = env.find(X)
    if not isinstance(x, Bool):
        raise LisTypeMismatch(f"not requires a Bool, got {x}")
    return Bool.of(not x.value)


# -------------------------------
# Equality
# -------------------------------
def is_equal(a: LispValue, b: LispValue) -> bool:
    """Structural equality; Integer and Real compare by numeric value."""
    while isinstance(a, Pair) and isinstance(b, Pair):
        if not is_equal(a.first, b.first):
            return False
        a, b = a.rest, b.rest
    if isinstance(a, (Integer, Real)) and isinstance(b, (Integer, Real)):
        return a.value == b.value
    if isinstance(a, Pair) or isinstance(b, Pair):
        return False
    return a == b


def equal(env: Environment) -> LispValue:
    return Bool.of(is_equal(env.find(X), env.find(Y)))


# -------------------------------
# List operations
# -------------------------------
def _pair(name: str, value: LispValue) -> Pair:
    if not isinstance(value, Pair):
        raise LisTypeMismatch(f"{name} requires a non-empty list, got {value}")
    return value


def length(env: Environment) -> LispValue:
    return Integer(list_length(env.find(X)))


def cons_builtin(env: Environment) -> LispValue:
    return cons(env.find(X), env.find(Y))


def car(env: Environment) -> LispValue:
    return _pair("car", env.find(X)).first


def cdr(env: Environment) -> LispValue:
    return _pair("cdr", env.find(X)).rest


def append_builtin(env: Environment) -> LispValue:
    return append(env.find(X), env.find(Y))


def list_builtin(env: Environment) -> LispValue:
    # The variadic parameter holds the operands unevaluated
    return from_iterable(evaluate0(expr, env) for expr in to_list(env.find(ARGS)))


# -------------------------------
# Predicates
# -------------------------------
def is_list_builtin(env: Environment) -> LispValue:
    return Bool.of(is_list(env.find(X)))


def is_null(env: Environment) -> LispValue:
    return Bool.of(is_exhausted(env.find(X)))


def is_symbol(env: Environment) -> LispValue:
    return Bool.of(isinstance(env.find(X), Symbol))


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: list[NativeFunction] = [
    NativeFunction("+", BINARY, arithmetic("+", operator.add)),
    NativeFunction("-", BINARY, arithmetic("-", operator.sub)),
    NativeFunction("*", BINARY, arithmetic("*", operator.mul)),
    NativeFunction("/", BINARY, arithmetic("/", divide)),
    NativeFunction("not", UNARY, logical_not),
    NativeFunction(">", BINARY, comparison(">", operator.gt)),
    NativeFunction("<", BINARY, comparison("<", operator.lt)),
    NativeFunction(">=", BINARY, comparison(">=", operator.ge)),
    NativeFunction("<=", BINARY, comparison("<=", operator.le)),
    NativeFunction("=", BINARY, comparison("=", operator.eq)),
    NativeFunction("equal?", BINARY, equal),
    NativeFunction("length", UNARY, length),
    NativeFunction("cons", BINARY, cons_builtin),
    NativeFunction("car", UNARY, car),
    NativeFunction("cdr", UNARY, cdr),
    NativeFunction("append", BINARY, append_builtin),
    NativeFunction("list", VARIADIC, list_builtin),
    NativeFunction("list?", UNARY, is_list_builtin),
    NativeFunction("null?", UNARY, is_null),
    NativeFunction("symbol?", UNARY, is_symbol),
]

CONSTANTS: dict[str, LispValue] = {
    "true": TRUE,
    "false": FALSE,
}


def register(env: Environment) -> None:
    for name, value in CONSTANTS.items():
        env.push(Symbol(name), value)
    for fn in PRIMITIVES:
        env.push(Symbol(fn.name), fn)
    logger.debug("registered %d primitives and %d constants", len(PRIMITIVES), len(CONSTANTS))
