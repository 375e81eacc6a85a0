import pytest
from hypothesis import given, strategies as st

from lis.errors import LisSyntaxError, LisRecursionError
from lis.reader.parser import lex, classify, parse, parse_all, TokenStream
from lis.types.atoms import Integer, Real
from lis.types.cons import from_iterable
from lis.types.nil import Empty
from lis.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(a(b)c)", [("lparen", "("), ("atom", "a"), ("lparen", "("), ("atom", "b"),
                     ("rparen", ")"), ("atom", "c"), ("rparen", ")")]),
        ("  12\t-3.5\n", [("atom", "12"), ("atom", "-3.5")]),
        ("'x", [("atom", "'x")]),            # no quote shorthand
        ("; note", [("atom", ";"), ("atom", "note")]),  # no comments
        ("", []),
        ("   \n\t ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "token,expected",
    [
        ("123", Integer(123)),
        ("-45", Integer(-45)),
        ("+7", Integer(7)),
        ("007", Integer(7)),
        ("3.14", Real(3.14)),
        ("-0.5", Real(-0.5)),
        (".5", Real(0.5)),
        ("1e3", Real(1000.0)),
        ("abc", Symbol("abc")),
        ("+", Symbol("+")),
        ("-", Symbol("-")),
        ("set!", Symbol("set!")),
        ("12abc", Symbol("12abc")),
        ("1_000", Symbol("1_000")),
        ("1.2.3", Symbol("1.2.3")),
    ]
)
def test_classify(token, expected):
    assert classify(token) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("123", Integer(123)),
        ("x", Symbol("x")),
        ("()", Empty),
        ("(1 2 3)", from_iterable([Integer(1), Integer(2), Integer(3)])),
        ("(a (b c) ())", from_iterable([
            Symbol("a"),
            from_iterable([Symbol("b"), Symbol("c")]),
            Empty,
        ])),
        ("  ( + 1   2.5 )  ", from_iterable([Symbol("+"), Integer(1), Real(2.5)])),
    ]
)
def test_parser(source, expected):
    assert parse(source) == expected


def test_parse_preserves_source_order():
    result = parse("(1 2 3 4 5)")
    assert [item.value for item in result] == [1, 2, 3, 4, 5]


def test_parse_all_reads_every_expression():
    exprs = list(parse_all("1 (a) b"))
    assert exprs == [Integer(1), from_iterable([Symbol("a")]), Symbol("b")]


def test_token_stream_parse_all_empty():
    assert list(TokenStream(lex("  ")).parse_all()) == []


@pytest.mark.parametrize(
    "source,message",
    [
        (")", "unexpected ')'"),
        ("(1 2", "unexpected end of input"),
        ("((1)", "unexpected end of input"),
        ("", "unexpected end of input"),
    ]
)
def test_parse_errors(source, message):
    with pytest.raises(LisSyntaxError, match=message):
        parse(source)


def test_parse_rejects_trailing_input():
    with pytest.raises(LisSyntaxError):
        parse("1 2")


def test_parse_all_unmatched_close():
    with pytest.raises(LisSyntaxError, match="unexpected"):
        list(parse_all("(a) )"))


def test_deep_nesting_is_a_lis_error():
    depth = 100_000
    with pytest.raises(LisRecursionError):
        parse("(" * depth + ")" * depth)


# -------------------------------
# Hypothesis tests
# -------------------------------
atom_chars = st.characters(
    blacklist_categories=("Zs", "Zl", "Zp", "Cc", "Cs"),
    blacklist_characters="()",
)


@given(st.text())
def test_lexer_no_crash_and_classification_total(source):
    for tok_type, tok_val in lex(source):
        assert tok_type in ("lparen", "rparen", "atom")
        if tok_type == "atom":
            value = classify(tok_val)
            kinds = [isinstance(value, t) for t in (Integer, Real, Symbol)]
            assert kinds.count(True) == 1
            assert classify(tok_val) == value


@given(st.integers())
def test_integer_round_trip(i):
    assert parse(str(Integer(i))) == Integer(i)


@given(st.floats(allow_nan=False))
def test_real_round_trip(r):
    assert parse(str(Real(r))) == Real(r)


@given(st.text(alphabet=atom_chars, min_size=1))
def test_symbol_round_trip(name):
    value = classify(name)
    if isinstance(value, Symbol):
        assert parse(str(value)) == value
