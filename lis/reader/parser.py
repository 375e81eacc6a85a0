"""
  Lisp Reader: lexer and recursive-descent parser

- Parentheses are self-delimiting tokens; everything else is split on whitespace.
- No comments, no strings, no quote shorthand: `(quote x)` is the only quoting.
- Emits lis values directly:

    - integer literal  -> Integer   (optional sign, ASCII digits, whole token)
    - real literal     -> Real      (anything float() accepts, whole token)
    - anything else    -> Symbol
    - ( ... )          -> Pair chain ending in Empty, or Empty for ()
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lis import SExpression
from lis.errors import LisSyntaxError, LisRecursionError
from lis.types.atoms import Integer, Real
from lis.types.cons import from_iterable
from lis.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<atom>[^\s()]+)"  # any other run of non-space characters
    r")"
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+\Z")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if not m:
            # only trailing whitespace is left
            break
        pos = m.end()
        yield m.lastgroup, m.group(m.lastgroup)


def classify(token: str) -> SExpression:
    """Classify one atom token as an Integer, a Real or a Symbol."""
    if INTEGER_RE.match(token):
        try:
            return Integer(int(token))
        except ValueError:
            # sys.get_int_max_str_digits() exceeded
            raise LisSyntaxError(f"integer literal too long ({len(token)} digits)") from None
    # float() also takes "1_000" and non-ASCII digits; the grammar does not
    if token.isascii() and "_" not in token:
        try:
            return Real(float(token))
        except ValueError:
            pass
    return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise LisSyntaxError("unexpected end of input")

        if tok_type == "rparen":
            raise LisSyntaxError("unexpected ')'")

        if tok_type == "lparen":
            items = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise LisSyntaxError("unexpected end of input")
                if next_type == "rparen":
                    self.advance()
                    break
                items.append(self.parse_expr())
            return from_iterable(items)

        return classify(tok_val)

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str) -> SExpression:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    try:
        expr = stream.parse_expr()
    except RecursionError as err:
        raise LisRecursionError("input nested too deeply") from err
    tok_type, tok_val = stream.peek()
    if tok_type is not None:
        raise LisSyntaxError(f"unexpected {tok_val!r} after expression")
    return expr


def parse_all(source: str) -> Iterator[SExpression]:
    """Read every top-level expression in `source`, lazily."""
    stream = TokenStream(lex(source))
    try:
        yield from stream.parse_all()
    except RecursionError as err:
        raise LisRecursionError("input nested too deeply") from err
