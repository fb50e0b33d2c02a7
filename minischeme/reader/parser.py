"""
  Reader: lexer and recursive-descent parser.

- Streaming: characters are pulled from a text stream one at a time, so a
  TokenStream can sit on top of a file or stdin as well as a string.
- One token of lookahead, no backtracking.
- Emits minischeme values directly:

    - integers  -> int
    - #t / #f   -> True / False
    - symbols   -> Symbol
    - ()        -> Nil
    - lists     -> chain of Pair ending in Nil
"""

from __future__ import annotations

import io
import re
from typing import Iterator, NamedTuple, Optional, TextIO

from minischeme import SExpression
from minischeme.errors import UnexpectedEOF, UnmatchedCloseParen
from minischeme.types.pair import from_iterable
from minischeme.types.symbol import Symbol


INTEGER_RE = re.compile(r"-?[0-9]+")

PARENS = "()"


class Token(NamedTuple):
    kind: str  # "lparen" | "rparen" | "atom"
    text: str
    line: int  # 0-based
    col: int  # 0-based


def parse_atom(text: str) -> SExpression:
    """Classify a non-paren token: integer, boolean, else symbol."""
    if INTEGER_RE.fullmatch(text):
        return int(text)
    if text == "#t":
        return True
    if text == "#f":
        return False
    return Symbol(text)


class TokenStream:
    """Tokens and expressions read on demand from a character stream.

    Reading an atom consumes the character that ends it; when that character
    is a paren it is held in a one-character push-back so the next token sees
    it. Call `parse_expr` repeatedly to read successive top-level forms.
    """

    def __init__(self, source: str | TextIO):
        self.chars: TextIO = io.StringIO(source) if isinstance(source, str) else source
        self._pushback: list[str] = []
        self.buffer: list[Token] = []
        self.line = 0
        self.col = 0

    # --- characters ---
    def _getc(self) -> str:
        c = self._pushback.pop() if self._pushback else self.chars.read(1)
        if c == "\n":
            self.line += 1
            self.col = 0
        elif c:
            self.col += 1
        return c

    def _ungetc(self, c: str) -> None:
        # only parens are pushed back, so the line never changes
        self._pushback.append(c)
        self.col -= 1

    def _scan(self) -> Optional[Token]:
        c = self._getc()
        while c and c.isspace():
            c = self._getc()
        if not c:
            return None

        line, col = self.line, self.col - 1
        if c == "(":
            return Token("lparen", c, line, col)
        if c == ")":
            return Token("rparen", c, line, col)

        chars = [c]
        while True:
            c = self._getc()
            if not c or c.isspace():
                break
            if c in PARENS:
                self._ungetc(c)
                break
            chars.append(c)
        return Token("atom", "".join(chars), line, col)

    # --- tokens ---
    def peek(self) -> Optional[Token]:
        if not self.buffer:
            tok = self._scan()
            if tok is None:
                return None
            self.buffer.append(tok)
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return self._scan()

    def at_eof(self) -> bool:
        """True when nothing but whitespace is left."""
        return self.peek() is None

    # --- expressions ---
    def parse_expr(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise UnexpectedEOF("Unexpected EOF while reading", self.line, self.col)

        if tok.kind == "rparen":
            raise UnmatchedCloseParen(
                f"Unexpected ')' at line {tok.line + 1}, column {tok.col + 1}",
                tok.line,
                tok.col,
            )

        if tok.kind == "lparen":
            items: list[SExpression] = []
            while True:
                nxt = self.peek()
                if nxt is None:
                    raise UnexpectedEOF(
                        f"Unexpected EOF while reading list opened at line {tok.line + 1}, "
                        f"column {tok.col + 1}",
                        tok.line,
                        tok.col,
                    )
                if nxt.kind == "rparen":
                    self.advance()
                    return from_iterable(items)
                items.append(self.parse_expr())

        return parse_atom(tok.text)

    def parse_all(self) -> Iterator[SExpression]:
        while not self.at_eof():
            yield self.parse_expr()


def lex(source: str | TextIO) -> Iterator[Token]:
    """Token generator over a string or text stream."""
    stream = TokenStream(source)
    while (tok := stream.advance()) is not None:
        yield tok


def read(source: str | TokenStream) -> SExpression:
    """Read one complete expression.

    Given a TokenStream, the stream is left positioned after the expression,
    so calling `read` again returns the next one. A string is read from its
    beginning.
    """
    stream = source if isinstance(source, TokenStream) else TokenStream(source)
    return stream.parse_expr()


def read_all(source: str | TextIO | TokenStream) -> Iterator[SExpression]:
    """Yield every top-level expression in `source`."""
    stream = source if isinstance(source, TokenStream) else TokenStream(source)
    return stream.parse_all()
