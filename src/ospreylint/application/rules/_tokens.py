"""Token stream helpers shared by rules.

Every helper is a pure function of the token sequence. Rules call them
independently; nothing is cached between rules.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from ospreylint.domain.model.enums import TokenKind
from ospreylint.infrastructure.declarations import brace_opens_expression, match_brackets

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.token import Token

VALUE_KEYWORDS = frozenset({"this", "super", "null", "true", "false"})
MEMBER_ACCESS = frozenset({".", "?."})
OPENERS = {"(": ")", "[": "]", "{": "}"}
CLOSERS = {")": "(", "]": "[", "}": "{"}

_UPPER_CAMEL_RE = re.compile(r"[A-Z][A-Za-z0-9]*")
_GENERIC_INNER = frozenset({",", "[", "]", "?", ".", "<", ">", ">>"})
_GENERIC_DECLARATIONS = frozenset({"fn", "iterator", "class", "struct", "interface", "trait", "enum"})


class OperatorRole(Enum):
    """How an operator token is used at its position."""

    INFIX = "infix"
    PREFIX = "prefix"
    POSTFIX = "postfix"
    MEMBER = "member"
    GENERIC = "generic"
    OVERLOAD_NAME = "overload name"


@dataclass(frozen=True, slots=True)
class Line:
    """One physical line of a file.

    Attributes:
        number: Line number (1-based)
        tokens: Tokens starting on this line, newline excluded
        continued: True if the line starts inside a multi-line token
    """

    number: int
    tokens: tuple[Token, ...]
    continued: bool

    @property
    def is_blank(self) -> bool:
        """True for an empty or whitespace-only line."""
        if self.continued:
            return False
        return all(t.kind is TokenKind.WHITESPACE for t in self.tokens)

    @property
    def leading_whitespace(self) -> Token | None:
        """Indentation token, None if the line starts with code."""
        if self.continued or not self.tokens:
            return None
        first = self.tokens[0]
        return first if first.kind is TokenKind.WHITESPACE else None


def physical_lines(tokens: Sequence[Token]) -> tuple[Line, ...]:
    """Group tokens into physical lines."""
    if not tokens:
        return ()
    last_line = tokens[-1].end_line
    grouped: list[list[Token]] = [[] for _ in range(last_line + 1)]
    continued = [False] * (last_line + 1)
    for tok in tokens:
        if tok.kind is not TokenKind.NEWLINE:
            grouped[tok.start_line].append(tok)
        for n in range(tok.start_line + 1, tok.end_line + 1):
            continued[n] = True
    return tuple(
        Line(number=n, tokens=tuple(grouped[n]), continued=continued[n])
        for n in range(1, last_line + 1)
    )


def line_texts(tokens: Sequence[Token]) -> list[str]:
    """Source text of each physical line, without line terminators."""
    source = "".join(t.text for t in tokens)
    return [line.removesuffix("\r") for line in source.split("\n")]


def prev_significant(tokens: Sequence[Token], i: int) -> Token | None:
    """Nearest significant token before tokens[i]."""
    j = i - 1
    while j >= 0:
        if tokens[j].is_significant:
            return tokens[j]
        j -= 1
    return None


def next_significant(tokens: Sequence[Token], i: int) -> Token | None:
    """Nearest significant token after tokens[i]."""
    j = i + 1
    while j < len(tokens):
        if tokens[j].is_significant:
            return tokens[j]
        j += 1
    return None


def is_leading(tokens: Sequence[Token], i: int) -> bool:
    """True if tokens[i] is the first token of its line."""
    return i == 0 or tokens[i - 1].kind is TokenKind.NEWLINE


def is_value(tok: Token | None) -> bool:
    """True for tokens that end an operand."""
    if tok is None:
        return False
    if tok.kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER_LITERAL, TokenKind.STRING_LITERAL):
        return True
    if tok.kind is TokenKind.KEYWORD:
        return tok.text in VALUE_KEYWORDS
    return tok.is_punct(")", "]", "}")


def match_openers(tokens: Sequence[Token]) -> dict[int, int]:
    """Map bracket token index → index of its partner, both directions.

    Mismatched or unclosed brackets get no entry.
    """
    matches = match_brackets(tokens)
    matches.update({close: start for start, close in matches.items()})
    return matches


def block_braces(tokens: Sequence[Token]) -> frozenset[int]:
    """Indexes of `{` tokens that open code blocks (not literals).

    A brace right after the type parameters of a declaration header
    (`class Box<T> {`) opens a body, not a literal.
    """
    generics = generic_angles(tokens)
    blocks: set[int] = set()
    prev: int | None = None
    for i, tok in enumerate(tokens):
        if tok.is_punct("{"):
            after_generic = prev is not None and prev in generics
            if after_generic or not brace_opens_expression(None if prev is None else tokens[prev]):
                blocks.add(i)
        if tok.is_significant:
            prev = i
    return frozenset(blocks)


def bracket_parents(tokens: Sequence[Token]) -> list[int | None]:
    """Index of the innermost open bracket enclosing each token."""
    parents: list[int | None] = []
    stack: list[int] = []
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.PUNCTUATION and tok.text in CLOSERS and stack:
            if tokens[stack[-1]].text == CLOSERS[tok.text]:
                stack.pop()
        parents.append(stack[-1] if stack else None)
        if tok.kind is TokenKind.PUNCTUATION and tok.text in OPENERS:
            stack.append(i)
    return parents


def generic_angles(tokens: Sequence[Token]) -> frozenset[int]:
    """Indexes of `<`/`>`/`>>` tokens that delimit generic arguments.

    A `<` counts when it directly follows an UpperCamel identifier (or
    the name in a declaration header) and is closed on the same line by
    angle brackets alone.
    """
    found: set[int] = set()
    for i, tok in enumerate(tokens):
        if i in found or tok.kind is not TokenKind.OPERATOR or tok.text != "<":
            continue
        if i == 0 or tokens[i - 1].kind is not TokenKind.IDENTIFIER:
            continue
        if not _UPPER_CAMEL_RE.fullmatch(tokens[i - 1].text) and not _declares(tokens, i - 1):
            continue
        closed = _close_generic(tokens, i)
        if closed is not None:
            found.update(closed)
    return frozenset(found)


def _declares(tokens: Sequence[Token], name: int) -> bool:
    before = prev_significant(tokens, name)
    return before is not None and before.is_keyword(*_GENERIC_DECLARATIONS)


def _close_generic(tokens: Sequence[Token], start: int) -> list[int] | None:
    depth = 0
    angles: list[int] = []
    for j in range(start, len(tokens)):
        tok = tokens[j]
        if tok.kind is TokenKind.NEWLINE:
            return None
        if tok.kind in (TokenKind.WHITESPACE, TokenKind.IDENTIFIER, TokenKind.COMMENT):
            continue
        if tok.text not in _GENERIC_INNER:
            return None
        if tok.text == "<":
            depth += 1
        elif tok.text == ">":
            depth -= 1
        elif tok.text == ">>":
            depth -= 2
        else:
            continue
        angles.append(j)
        if depth == 0:
            return angles
        if depth < 0:
            return None
    return None


def operator_roles(tokens: Sequence[Token]) -> dict[int, OperatorRole]:
    """Classify every operator token of a file."""
    generics = generic_angles(tokens)
    roles: dict[int, OperatorRole] = {}
    prev: Token | None = None
    prev_role: OperatorRole | None = None
    for i, tok in enumerate(tokens):
        if tok.kind is TokenKind.OPERATOR:
            role = _role_of(tokens, i, prev, prev_role, generics)
            roles[i] = role
            prev_role = role
        elif tok.is_significant:
            prev_role = None
        if tok.is_significant:
            prev = tok
    return roles


def _role_of(
    tokens: Sequence[Token],
    i: int,
    prev: Token | None,
    prev_role: OperatorRole | None,
    generics: frozenset[int],
) -> OperatorRole:
    tok = tokens[i]
    text = tok.text
    if prev is not None and prev.is_keyword("operator"):
        return OperatorRole.OVERLOAD_NAME
    if i in generics:
        return OperatorRole.GENERIC
    if text in MEMBER_ACCESS:
        return OperatorRole.MEMBER

    # Operand on the left: the previous token is a value or a postfix operator
    after_operand = is_value(prev) or prev_role in (OperatorRole.POSTFIX, OperatorRole.GENERIC)
    attached = i > 0 and tokens[i - 1].is_significant

    if text in ("++", "--"):
        return OperatorRole.POSTFIX if after_operand and attached else OperatorRole.PREFIX
    if text == "?":
        return OperatorRole.POSTFIX if attached else OperatorRole.INFIX
    if text == "not":
        nxt = next_significant(tokens, i)
        if after_operand and nxt is not None and nxt.text == "in":
            return OperatorRole.INFIX
        return OperatorRole.PREFIX
    if text in ("!", "~"):
        return OperatorRole.PREFIX
    if text in ("-", "+"):
        return OperatorRole.INFIX if after_operand else OperatorRole.PREFIX
    return OperatorRole.INFIX
