import pytest

from lis import errors
from lis.types.atoms import Integer, TRUE, FALSE
from lis.types.nil import Empty


@pytest.mark.parametrize(
    "source,rendered",
    [
        ("(cons 1 (quote (2 3)))", "( 1 2 3 )"),
        ("(cons 1 (quote ()))", "( 1 )"),
        ("(cons (quote (a)) (quote (b)))", "( ( a ) b )"),
        ("(cons 1 2)", "( 1 . 2 )"),
        ("(cdr (quote (1 2)))", "( 2 )"),
        ("(append (quote (1 2)) (quote (3)))", "( 1 2 3 )"),
        ("(append (quote ()) (quote (3)))", "( 3 )"),
        ("(append (quote (1)) 2)", "( 1 . 2 )"),
        ("(list 1 (list 2 3))", "( 1 ( 2 3 ) )"),
    ]
)
def test_list_construction(run, source, rendered):
    assert str(run(source)) == rendered


def test_car_cdr(run):
    assert run("(car (quote (1 2)))") == Integer(1)
    assert run("(cdr (quote (1)))") is Empty
    assert run("(car (cdr (quote (1 2 3))))") == Integer(2)


@pytest.mark.parametrize("source", ["(car (quote ()))", "(cdr (quote ()))", "(car 1)", "(cdr (quote a))"])
def test_car_cdr_need_a_pair(run, source):
    with pytest.raises(errors.LisTypeMismatch):
        run(source)


def test_length(run):
    assert run("(length (quote (1 2 3)))") == Integer(3)
    assert run("(length (quote ()))") == Integer(0)


@pytest.mark.parametrize("source", ["(length 5)", "(length (cons 1 2))", "(append 1 (quote ()))"])
def test_operations_needing_proper_lists(run, source):
    with pytest.raises(errors.LisTypeMismatch):
        run(source)


def test_append_does_not_modify_operands(run):
    run("(define a (quote (1 2)))")
    run("(define b (append a (quote (3))))")
    assert str(run("a")) == "( 1 2 )"
    assert str(run("b")) == "( 1 2 3 )"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(list? (quote ()))", TRUE),
        ("(list? (quote (1)))", TRUE),
        ("(list? 1)", FALSE),
        ("(null? (quote ()))", TRUE),
        ("(null? (quote (1)))", FALSE),
        ("(null? 0)", FALSE),
        ("(symbol? (quote a))", TRUE),
        ("(symbol? 1)", FALSE),
        ("(symbol? (quote (a)))", FALSE),
        ("(equal? (quote (1 (2))) (list 1 (list 2.0)))", TRUE),
        ("(equal? (quote a) (quote a))", TRUE),
        ("(equal? (quote a) (quote b))", FALSE),
        ("(equal? (quote (1 2)) (quote (1)))", FALSE),
        ("(equal? 3 3)", TRUE),
        ("(equal? true false)", FALSE),
    ]
)
def test_predicates(run, source, expected):
    assert run(source) is expected
