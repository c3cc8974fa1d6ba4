"""Tokenizer for the GraphViz dot language."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

_END = "\0"
_WHITESPACE = " \t\n\r\x0c"
_DIGITS = "0123456789"


class TokenKind(Enum):
    EOF = "eof"
    IDENTIFIER = "identifier"
    GRAPH_KW = "graph"
    NODE_KW = "node"
    EDGE_KW = "edge"
    DIGRAPH_KW = "digraph"
    STRICT_KW = "strict"
    SUBGRAPH_KW = "subgraph"
    EQUAL = "="
    COLON = ":"
    COMMA = ","
    SEMICOLON = ";"
    ARROW_RIGHT = "->"
    ARROW_LINE = "--"
    OPEN_BRACKET = "["
    CLOSE_BRACKET = "]"
    OPEN_BRACE = "{"
    CLOSE_BRACE = "}"
    ERROR = "error"


@dataclass(frozen=True)
class Token:
    """A token; identifiers carry their text, errors their input position."""

    kind: TokenKind
    text: Optional[str] = None
    pos: Optional[int] = None


_KEYWORDS = {
    "graph": TokenKind.GRAPH_KW,
    "node": TokenKind.NODE_KW,
    "edge": TokenKind.EDGE_KW,
    "digraph": TokenKind.DIGRAPH_KW,
    "strict": TokenKind.STRICT_KW,
    "subgraph": TokenKind.SUBGRAPH_KW,
}

_PUNCTUATION = {
    "=": TokenKind.EQUAL,
    ";": TokenKind.SEMICOLON,
    ":": TokenKind.COLON,
    "[": TokenKind.OPEN_BRACKET,
    "]": TokenKind.CLOSE_BRACKET,
    "{": TokenKind.OPEN_BRACE,
    "}": TokenKind.CLOSE_BRACE,
    ",": TokenKind.COMMA,
}


def _is_ascii_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _is_ascii_control(ch: str) -> bool:
    code = ord(ch)
    return code < 32 or code == 127


class Lexer:
    """Splits dot source text into tokens.

    ``ch`` is the current character and ``pos`` the index just past it;
    ``"\\0"`` marks the end of the input.
    """

    def __init__(self, text: str) -> None:
        self._input = text
        self.pos = 0
        self.ch = _END
        self.read_char()

    def _error_chunks(self) -> Iterator[str]:
        """Yield the input up to the error line, then a caret marker line."""
        found_loc = False
        since_last_line = 0
        for idx, ch in enumerate(self._input, start=1):
            yield ch
            if idx == self.pos:
                found_loc = True
            if ch == "\n":
                if found_loc:
                    yield "\n"
                    yield " " * max(0, since_last_line - 2)
                    yield "^\n"
                    return
                since_last_line = 0
            since_last_line += 1

    def format_error(self) -> str:
        """The input up to the end of the line holding ``pos``, with a caret marker."""
        return "".join(self._error_chunks())

    def print_error(self) -> None:
        """Write the input with a caret under the error position to stdout."""
        out = sys.stdout
        for chunk in self._error_chunks():
            out.write(chunk)
        out.flush()

    def has_next(self) -> bool:
        return self.pos < len(self._input)

    def read_char(self) -> None:
        if not self.has_next():
            self.ch = _END
        else:
            self.ch = self._input[self.pos]
            self.pos += 1

    def skip_whitespace(self) -> bool:
        changed = False
        while self.ch in _WHITESPACE and self.ch != "":
            self.read_char()
            changed = True
        return changed

    def skip_comment(self) -> bool:
        """Skip a ``/* */`` or ``//`` comment; a lone ``/`` is dropped too."""
        if self.ch != "/":
            return False
        self.read_char()

        if self.ch == "*":
            prev = _END
            while self.has_next():
                self.read_char()
                if prev == "*" and self.ch == "/":
                    self.read_char()
                    return True
                prev = self.ch
            return True

        if self.ch == "/":
            while self.has_next():
                self.read_char()
                if _is_ascii_control(self.ch):
                    self.read_char()
                    return True
        return True

    def read_identifier(self) -> str:
        result = []
        while _is_ascii_alnum(self.ch) or self.ch == "_":
            result.append(self.ch)
            self.read_char()
        return "".join(result)

    def read_number(self) -> str:
        """Read digits with at most one period."""
        result = []
        period = False
        while self.ch.isnumeric() or self.ch == ".":
            if self.ch == ".":
                if period:
                    break
                period = True
            result.append(self.ch)
            self.read_char()
        return "".join(result)

    def read_string(self) -> Token:
        """Read a quoted string; the closing quote is left as the current char."""
        result = []
        self.read_char()
        while self.ch != '"':
            if self.ch == "\\":
                self.read_char()
                if self.ch in ("n", "l"):
                    self.ch = "\n"
            elif self.ch == _END:
                return Token(TokenKind.ERROR, pos=self.pos)
            result.append(self.ch)
            self.read_char()
        return Token(TokenKind.IDENTIFIER, text="".join(result))

    def next_token(self) -> Token:
        while self.skip_comment() or self.skip_whitespace():
            pass

        ch = self.ch
        if ch in _PUNCTUATION:
            tok = Token(_PUNCTUATION[ch])
        elif ch == '"':
            tok = self.read_string()
        elif ch == "-":
            self.read_char()
            if self.ch == ">":
                tok = Token(TokenKind.ARROW_RIGHT)
            elif self.ch == "-":
                tok = Token(TokenKind.ARROW_LINE)
            elif self.ch in _DIGITS:
                tok = Token(TokenKind.IDENTIFIER, text="-" + self.read_number())
            else:
                tok = Token(TokenKind.ERROR, pos=self.pos)
        elif ch == _END:
            tok = Token(TokenKind.EOF)
        else:
            if _is_ascii_alpha(ch):
                name = self.read_identifier()
                kind = _KEYWORDS.get(name)
                if kind is not None:
                    return Token(kind)
                return Token(TokenKind.IDENTIFIER, text=name)
            if ch in _DIGITS:
                return Token(TokenKind.IDENTIFIER, text=self.read_number())
            return Token(TokenKind.ERROR, pos=self.pos)

        self.read_char()
        return tok

    def tokens(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF or error token."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind in (TokenKind.EOF, TokenKind.ERROR):
                return