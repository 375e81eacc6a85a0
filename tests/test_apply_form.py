import pytest

from lis import errors
from lis.evaluation.apply import apply
from lis.evaluation.evaluator import evaluate0
from lis.reader.parser import parse
from lis.types.atoms import Integer
from lis.types.lambda_fn import NativeFunction, Param, ParamKind, native_params
from lis.types.nil import Empty
from lis.types.symbol import Symbol


def test_missing_operand_leaves_parameter_unbound(run):
    with pytest.raises(errors.LisUnboundName) as info:
        run("((lambda (a b) (+ a b)) 1)")
    assert info.value.name == Symbol("b")


def test_missing_operand_is_fine_when_unused(run):
    assert run("((lambda (a b) a) 1)") == Integer(1)


def test_surplus_operands_are_ignored(run):
    assert run("((lambda (a) a) 1 2 3)") == Integer(1)
    # surplus operands are never evaluated
    assert run("((lambda (a) a) 1 (car 1))") == Integer(1)


def test_operands_see_earlier_parameters(run):
    # each operand is evaluated after the previous parameters are pushed
    assert run("((lambda (a b) b) 1 a)") == Integer(1)


def test_native_parameters_cannot_be_captured(run):
    run("(define x 10) (define y 20)")
    assert run("(+ 1 x)") == Integer(11)
    assert run("(- y x)") == Integer(10)


def test_bindings_are_popped_after_call(env, run):
    depth = env.depth
    assert run("((lambda (a b) (+ a b)) 3 4)") == Integer(7)
    assert env.depth == depth
    with pytest.raises(errors.LisUnboundName):
        run("a")


def test_bindings_are_popped_when_body_raises(env, run):
    run("(define f (lambda (a b) (car a)))")
    depth = env.depth
    with pytest.raises(errors.LisTypeMismatch):
        run("(f 1 2)")
    assert env.depth == depth
    with pytest.raises(errors.LisUnboundName):
        run("a")


def test_bindings_are_popped_when_an_operand_raises(env, run):
    depth = env.depth
    with pytest.raises(errors.LisUnboundName):
        run("((lambda (a b c) a) 1 2 nope)")
    assert env.depth == depth


def test_pops_by_count_not_by_name(env, run):
    # the body's define is popped in place of the parameter, which stays bound
    depth = env.depth
    assert run("((lambda (a) (define z a)) 7)") == Integer(7)
    assert env.depth == depth + 1
    assert run("a") == Integer(7)
    with pytest.raises(errors.LisUnboundName):
        run("z")


def test_variadic_binds_unevaluated_rest(env):
    seen = []

    def impl(e):
        seen.append(e.find(Symbol(" rest")))
        return e.find(Symbol(" first"))

    fn = NativeFunction("probe", native_params("first", rest="rest"), impl)
    operands = parse("(1 (car 1) undefined)")
    assert apply(fn, operands, env, evaluate0) == Integer(1)
    assert seen == [parse("((car 1) undefined)")]


def test_variadic_with_no_operands_binds_empty(env):
    fn = NativeFunction("probe", native_params(rest="rest"), lambda e: e.find(Symbol(" rest")))
    assert apply(fn, Empty, env, evaluate0) is Empty


def test_variadic_marker_ends_parameter_walk(env):
    params = (
        Param(Symbol(" rest"), ParamKind.VARIADIC),
        Param(Symbol(" never")),
    )
    fn = NativeFunction("probe", params, lambda e: Integer(e.depth))
    depth = env.depth
    assert apply(fn, parse("(1 2)"), env, evaluate0) == Integer(depth + 1)
    assert env.depth == depth


def test_apply_non_function(env):
    with pytest.raises(errors.LisNotCallable):
        apply(Integer(3), Empty, env, evaluate0)


def test_list_builtin_evaluates_operands(run):
    assert str(run("(list 1 (+ 1 1) (quote x))")) == "( 1 2 x )"
    assert run("(list)") is Empty
