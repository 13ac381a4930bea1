r"""
  Reader: lexer and parser producing atoms.

- Streaming, lazy parsing over a token iterator
- Emits owned Atom trees:

    - lists ( ... )      -> PAIR chain, () -> None
    - dotted lists       -> (a b . c) with c as the final cdr
    - blocks { ... }     -> BEGIN whose cdr chains the enclosed expressions
    - "text"             -> STRING (escapes \\ \" \n \t \r; raw newlines allowed)
    - #t / #f            -> BOOL
    - integers           -> NUMBER (must fit in signed 64 bits)
    - anything else      -> SYMBOL
    - ; to end of line   -> comment
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from ueval.errors import UevalSyntaxError
from ueval.types.atom import (
    Atom,
    INT64_MAX,
    INT64_MIN,
    cons,
    make_begin,
    make_bool,
    make_number,
    make_string,
    make_symbol,
)
from ueval.types.refcount import release


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s(){}",;]+)'  # fallback: symbols, numbers, booleans
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}

_ESCAPES = {"\\": "\\", '"': '"', "n": "\n", "t": "\t", "r": "\r"}

ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _decode_string(tok_val: str) -> str:
    """Body of a string token with its escapes resolved."""
    def _replace(m: re.Match) -> str:
        ch = m.group(1)
        if ch not in _ESCAPES:
            raise UevalSyntaxError(f"Unknown escape \\{ch} in string literal {tok_val}")
        return _ESCAPES[ch]

    return ESCAPE_RE.sub(_replace, tok_val[1:-1])


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            if source[pos] == '"':
                raise UevalSyntaxError(f"Unterminated string at {pos}")
            raise UevalSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for nm in TOKEN_RE.groupindex:
            if nm != "comment" and m.group(nm):
                yield nm, m.group(nm)
                break


def _atom_from_symbol_token(tok_val: str) -> Atom:
    if tok_val == "#t":
        return make_bool(True)
    if tok_val == "#f":
        return make_bool(False)
    if INTEGER_RE.fullmatch(tok_val):
        n = int(tok_val)
        if not INT64_MIN <= n <= INT64_MAX:
            raise UevalSyntaxError(f"Integer out of 64-bit range: {tok_val}")
        return make_number(n)
    return make_symbol(tok_val)


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

    def at_end(self) -> bool:
        return self.peek()[0] is None

    def parse_expr(self) -> Optional[Atom]:
        """Read one expression and return it as an owned atom."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise UevalSyntaxError("Unexpected end of input")

        if tok_type == "symbol":
            return _atom_from_symbol_token(tok_val)

        if tok_type == "string":
            return make_string(_decode_string(tok_val))

        if tok_type in _CLOSERS:
            return self._parse_sequence(tok_type)

        raise UevalSyntaxError(f"Unexpected {tok_val!r}")

    def _parse_sequence(self, opener: str) -> Optional[Atom]:
        closer = _CLOSERS[opener]
        items: list[Optional[Atom]] = []
        tail: Optional[Atom] = None
        try:
            while True:
                tok_type, tok_val = self.peek()
                if tok_type is None:
                    raise UevalSyntaxError("Unmatched '('" if opener == "lparen" else "Unmatched '{'")
                if tok_type == closer:
                    self.advance()
                    break
                if opener == "lparen" and tok_type == "symbol" and tok_val == ".":
                    if not items:
                        raise UevalSyntaxError("Dotted list needs an element before '.'")
                    self.advance()
                    tail = self.parse_expr()
                    if self.peek()[0] != "rparen":
                        raise UevalSyntaxError("Expected ')' after dotted cdr")
                    self.advance()
                    break
                items.append(self.parse_expr())
        except BaseException:
            release(tail)
            for item in items:
                release(item)
            raise

        if opener == "lbrace":
            return make_begin(*items)
        result = tail
        for item in reversed(items):
            result = cons(item, result)
        return result

    def parse_all(self) -> Iterator[Optional[Atom]]:
        while not self.at_end():
            yield self.parse_expr()


def read(source: str) -> Optional[Atom]:
    """Read exactly one expression from `source`."""
    stream = TokenStream(lex(source))
    expr = stream.parse_expr()
    if not stream.at_end():
        release(expr)
        raise UevalSyntaxError("Unexpected input after expression")
    return expr


def read_program(source: str) -> Atom:
    """Read every top-level expression of `source` into a BEGIN root."""
    exprs: list[Optional[Atom]] = []
    try:
        for expr in TokenStream(lex(source)).parse_all():
            exprs.append(expr)
    except BaseException:
        for expr in exprs:
            release(expr)
        raise
    return make_begin(*exprs)
