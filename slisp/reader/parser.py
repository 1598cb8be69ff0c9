"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits Python primitives for code:

    - lists          -> Python list
    - dotted lists   -> (list_part, tail)
    - symbols        -> Symbol
    - strings        -> str
    - integers       -> int
    - floats         -> float
    - #t / #f        -> True / False
    - #nil           -> Nil
    - 'x             -> [Symbol("quote"), x]

Lists stay Python lists here; `quote` turns them into Cons data at runtime.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from slisp import SExpression
from slisp.errors import SlispSyntaxError, SlispIncompleteInput
from slisp.types.nil import Nil
from slisp.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # quote shorthand
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<unterminated>"(?:\\.|[^\\"])*\Z)'  # string running off the end
    r'|(?P<symbol>[^\s()\'";]+)'  # atoms
    r")",
    re.DOTALL,
)

INT_RE = re.compile(r"[+-]?\d+\Z")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+(?:\.\d*)?[eE][+-]?\d+|\.\d+[eE][+-]?\d+)\Z")

LITERALS: dict[str, SExpression] = {
    "#t": True,
    "#f": False,
    "#nil": Nil,
}

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

QUOTE = Symbol("quote")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        if m is None:
            # only trailing whitespace is left
            if source[pos:].strip() == "":
                return
            raise SlispSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        kind = next(nm for nm in TOKEN_RE.groupindex if m.group(nm) is not None)
        if kind == "comment":
            continue
        if kind == "unterminated":
            raise SlispIncompleteInput("Unterminated string literal")
        yield kind, m.group(kind)


def read_string(token: str) -> str:
    """Strip quotes from a string token and resolve backslash escapes."""
    body = token[1:-1]
    out: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            out.append(ESCAPES.get(nxt, nxt))
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def read_atom(token: str) -> SExpression:
    if token in LITERALS:
        return LITERALS[token]
    if INT_RE.match(token):
        try:
            return int(token)
        except ValueError as ex:
            raise SlispSyntaxError(f"integer literal too long: {ex}")
    if FLOAT_RE.match(token):
        return float(token)
    return Symbol(token)


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

    def parse_expr(self) -> SExpression | None:
        """Parse one form; returns None at end of input."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == "symbol":
            return read_atom(tok_val)

        if tok_type == "string":
            return read_string(tok_val)

        if tok_type == "quote":
            if self.peek()[0] is None:
                raise SlispIncompleteInput("Expected an expression after quote")
            return [QUOTE, self.parse_expr()]

        if tok_type == "lparen":
            items: list[SExpression] = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SlispIncompleteInput("Unmatched '('")
                if next_type == "rparen":
                    self.advance()
                    return items
                if next_type == "symbol" and self.peek()[1] == "." and items:
                    self.advance()
                    if self.peek()[0] is None:
                        raise SlispIncompleteInput("Unmatched '('")
                    if self.peek()[0] == "rparen":
                        raise SlispSyntaxError("Expected an expression after '.'")
                    cdr_expr = self.parse_expr()
                    if self.peek()[0] is None:
                        raise SlispIncompleteInput("Unmatched '('")
                    if self.peek()[0] != "rparen":
                        raise SlispSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    return items, cdr_expr  # tuple for a dotted list
                items.append(self.parse_expr())

        if tok_type == "rparen":
            raise SlispSyntaxError("Unexpected ')'")

        raise SlispSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while self.peek()[0] is not None:
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Read every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
