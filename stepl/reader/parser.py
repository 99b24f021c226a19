"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the plain Python values the evaluator works on:

    - lists -> Python list
    - symbols -> Symbol
    - strings -> str
    - numbers -> int/float
    - #t / true, #f / false -> bool
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from stepl import SExpression
from stepl.errors import LispSyntaxError
from stepl.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # '
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols and numbers
    r")",
    re.DOTALL,
)

BOOLEANS: dict[str, bool] = {
    "#t": True,
    "true": True,
    "#f": False,
    "false": False,
}

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?\Z")

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise LispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in ("quote", "lparen", "rparen", "string", "symbol"):
            if m.group(nm):
                yield nm, m.group(nm)
                break


def parse_atom(tok_val: str) -> SExpression:
    if tok_val in BOOLEANS:
        return BOOLEANS[tok_val]
    if INT_RE.match(tok_val):
        return int(tok_val)
    if FLOAT_RE.match(tok_val):
        return float(tok_val)
    return Symbol(tok_val)


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
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
        """Read one form. Callers check `peek()` for end of input first."""
        tok_type, tok_val = self.advance()

        if tok_type is None:
            raise LispSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return parse_atom(tok_val)

        if tok_type == "string":
            return ast.literal_eval(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise LispSyntaxError("Nothing to quote at end of input")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items = []
            while True:
                nxt = self.peek()[0]
                if nxt is None:
                    raise LispSyntaxError("Unmatched '('")
                if nxt == "rparen":
                    self.advance()
                    return items
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise LispSyntaxError("Unexpected ')'")

        raise LispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
