"""Osprey tokenizer.

Converts raw source text into a gap-free token sequence. Whitespace,
newlines and comments are tokens too: several rules depend on exact
spacing, and tabs must stay distinguishable from spaces.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ospreylint.domain.exceptions.lexing import LexError
from ospreylint.domain.model.enums import TokenKind
from ospreylint.domain.model.token import Token

if TYPE_CHECKING:
    from collections.abc import Iterator

KEYWORDS = frozenset(
    {
        # Declarations
        "class",
        "struct",
        "interface",
        "trait",
        "enum",
        "fn",
        "iterator",
        "operator",
        "property",
        "var",
        "let",
        "const",
        "get",
        "set",
        # Modifiers
        "public",
        "protected",
        "private",
        "static",
        "abstract",
        "override",
        "virtual",
        "readonly",
        "async",
        "extern",
        # Control flow
        "if",
        "else",
        "while",
        "for",
        "foreach",
        "do",
        "switch",
        "case",
        "default",
        "break",
        "continue",
        "return",
        "throw",
        "try",
        "catch",
        "finally",
        "yield",
        "await",
        "new",
        "import",
        "package",
        # Values
        "this",
        "super",
        "null",
        "true",
        "false",
    }
)

WORD_OPERATORS = frozenset({"and", "or", "not", "is", "as", "in"})

# Longest first: the scanner takes the first match.
OPERATORS: tuple[str, ...] = (
    "**=",
    "<<=",
    ">>=",
    "::",
    "->",
    "**",
    "==",
    "!=",
    "<=",
    ">=",
    "&&",
    "||",
    "+=",
    "-=",
    "*=",
    "/=",
    "%=",
    "&=",
    "|=",
    "^=",
    "<<",
    ">>",
    "++",
    "--",
    "=>",
    "??",
    "?.",
    "..",
    "+",
    "-",
    "*",
    "/",
    "%",
    "=",
    "<",
    ">",
    "!",
    "~",
    "&",
    "|",
    "^",
    "?",
    ".",
)

_WHITESPACE_RE = re.compile(r"(?:[ \t\f\v]|\r(?!\n))+")
_IDENTIFIER_RE = re.compile(r"[^\W\d]\w*")
_NUMBER_RE = re.compile(
    r"0[xX][0-9a-fA-F_]+"
    r"|0[bB][01_]+"
    r"|\d[\d_]*(?:\.\d[\d_]*)?(?:[eE][+-]?\d+)?"
)


class Tokenizer:
    """Lazy, restartable token sequence over one source text.

    Every iteration starts a fresh scan, so the same instance can be
    consumed any number of times and always yields equal tokens.

    Usage:
        tokens = list(Tokenizer(source))

    Raises:
        LexError: During iteration, at an unterminated string or comment
    """

    def __init__(self, source: str) -> None:
        if source is None:
            raise TypeError("source must not be None")
        self._source = source

    @property
    def source(self) -> str:
        """Text being tokenized."""
        return self._source

    def __iter__(self) -> Iterator[Token]:
        scanner = _Scanner(self._source)
        while not scanner.at_end():
            yield scanner.next_token()


def tokenize(source: str) -> tuple[Token, ...]:
    """Tokenize source text completely.

    Args:
        source: Osprey source text

    Returns:
        Tokens covering the whole input in order

    Raises:
        LexError: Unterminated string literal or block comment
    """
    return tuple(Tokenizer(source))


class _Scanner:
    """Single-use cursor over the source text."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._length = len(source)
        self._pos = 0
        self._line = 1
        self._column = 1

    def at_end(self) -> bool:
        return self._pos >= self._length

    def _peek(self, offset: int = 1) -> str:
        pos = self._pos + offset
        return self._source[pos] if pos < self._length else ""

    def next_token(self) -> Token:
        ch = self._source[self._pos]
        nxt = self._peek()

        if ch == "\n":
            return self._take(TokenKind.NEWLINE, 1)
        if ch == "\r" and nxt == "\n":
            return self._take(TokenKind.NEWLINE, 2)

        match = _WHITESPACE_RE.match(self._source, self._pos)
        if match:
            return self._take(TokenKind.WHITESPACE, match.end() - self._pos)

        if ch == "/" and nxt == "/":
            return self._take(TokenKind.COMMENT, self._line_comment_length())
        if ch == "/" and nxt == "*":
            return self._take(TokenKind.COMMENT, self._block_comment_length())
        if ch in "\"'":
            return self._take(TokenKind.STRING_LITERAL, self._string_length(ch))

        if ch.isdigit():
            match = _NUMBER_RE.match(self._source, self._pos)
            if match:
                return self._take(TokenKind.NUMBER_LITERAL, match.end() - self._pos)

        match = _IDENTIFIER_RE.match(self._source, self._pos)
        if match:
            word = match.group()
            if word in WORD_OPERATORS:
                kind = TokenKind.OPERATOR
            elif word in KEYWORDS:
                kind = TokenKind.KEYWORD
            else:
                kind = TokenKind.IDENTIFIER
            return self._take(kind, len(word))

        for op in OPERATORS:
            if self._source.startswith(op, self._pos):
                return self._take(TokenKind.OPERATOR, len(op))

        # ( ) [ ] { } , ; : and anything unrecognised
        return self._take(TokenKind.PUNCTUATION, 1)

    def _line_comment_length(self) -> int:
        end = self._source.find("\n", self._pos)
        if end == -1:
            end = self._length
        elif self._source[end - 1] == "\r":
            end -= 1
        return end - self._pos

    def _block_comment_length(self) -> int:
        close = self._source.find("*/", self._pos + 2)
        if close == -1:
            raise LexError("unterminated block comment", self._line, self._column)
        return close + 2 - self._pos

    def _string_length(self, quote: str) -> int:
        i = self._pos + 1
        while i < self._length:
            ch = self._source[i]
            if ch == "\\":
                if i + 1 < self._length and self._source[i + 1] not in "\r\n":
                    i += 2
                    continue
                break
            if ch == quote:
                return i + 1 - self._pos
            if ch in "\r\n":
                break
            i += 1
        raise LexError("unterminated string literal", self._line, self._column)

    def _take(self, kind: TokenKind, length: int) -> Token:
        """Emit the next `length` characters as one token and advance."""
        text = self._source[self._pos : self._pos + length]
        start_line, start_column, offset = self._line, self._column, self._pos

        end_line, end_column = start_line, start_column
        for ch in text[:-1]:
            if ch == "\n":
                end_line += 1
                end_column = 1
            else:
                end_column += 1

        if text[-1] == "\n":
            self._line, self._column = end_line + 1, 1
        else:
            self._line, self._column = end_line, end_column + 1
        self._pos += length

        return Token(
            kind=kind,
            text=text,
            start_line=start_line,
            start_column=start_column,
            end_line=end_line,
            end_column=end_column,
            offset=offset,
        )
