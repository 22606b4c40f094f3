"""no-align-in-declarations rule.

Declarations, enum values and default parameter values must not be
lined up with extra spaces:

    var a    = 1;        // flagged
    var long = 2;

Hash literal pairs are the one place where alignment is allowed:

    var data = {
        a:    1,         // fine
        long: 2
    };
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import TYPE_CHECKING

from ospreylint.application.rules._tokens import (
    block_braces,
    bracket_parents,
    prev_significant,
)
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import DeclarationCategory, Severity, TokenKind
from ospreylint.infrastructure.declarations import FIELD_KEYWORDS, MODIFIERS

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.token import Token

NO_ALIGN_IN_DECLARATIONS = "no-align-in-declarations"


class _Context(Enum):
    DECLARATION = "declaration"
    ENUM = "enum value"
    PARAMETER = "parameter default"
    HASH = "hash pair"


@dataclass(frozen=True, slots=True)
class _Sign:
    """An `=` or `:` that may take part in an aligned run."""

    index: int
    token: Token
    value_column: int | None
    padded_before: bool
    padded_after: bool

    @property
    def padded(self) -> bool:
        return self.padded_before or self.padded_after


def check_no_align_in_declarations(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag `=`/`:` signs aligned across consecutive declaration lines.

    A run is two or more signs with the same text on consecutive lines,
    lined up either at the sign or at the value after it. Every padded
    sign of a run is reported.
    """
    signs = _collect_signs(tokens, spans)
    flagged: dict[int, _Sign] = {}

    ordered = sorted(signs, key=lambda s: (s.token.text, s.token.start_line))
    for _, group in groupby(ordered, key=lambda s: s.token.text):
        for chain in _consecutive_lines(list(group)):
            for run in _runs(chain, lambda s: s.token.start_column):
                flagged.update((s.index, s) for s in run if s.padded_before)
            for run in _runs(chain, lambda s: s.value_column):
                flagged.update((s.index, s) for s in run if s.padded_after)

    return tuple(
        Diagnostic(
            rule_id=NO_ALIGN_IN_DECLARATIONS,
            severity=Severity.ERROR,
            message=f"'{sign.token.text}' is aligned with neighbouring lines using extra spaces",
            line=sign.token.start_line,
            column=sign.token.start_column,
        )
        for sign in flagged.values()
    )


def _collect_signs(tokens: Sequence[Token], spans: Sequence[DeclarationSpan]) -> list[_Sign]:
    """First `=` and first `:` of each line, when in a checked context."""
    parents = bracket_parents(tokens)
    blocks = block_braces(tokens)
    enum_values = [s for s in spans if s.category is DeclarationCategory.ENUM_VALUE]

    signs: list[_Sign] = []
    line_start = 0
    seen: set[str] = set()
    for i, tok in enumerate(tokens):
        if i == 0 or tokens[i - 1].kind is TokenKind.NEWLINE:
            line_start = i
            seen = set()
        is_equals = tok.kind is TokenKind.OPERATOR and tok.text == "="
        is_colon = tok.is_punct(":")
        if not (is_equals or is_colon) or tok.text in seen:
            continue
        seen.add(tok.text)
        # A colon after the initializer started is not a type annotation
        if is_colon and "=" in seen:
            continue

        context = _context_of(tokens, i, line_start, parents, blocks, enum_values)
        if context is None or context is _Context.HASH:
            continue
        signs.append(_make_sign(tokens, i))
    return signs


def _context_of(
    tokens: Sequence[Token],
    i: int,
    line_start: int,
    parents: list[int | None],
    blocks: frozenset[int],
    enum_values: list[DeclarationSpan],
) -> _Context | None:
    tok = tokens[i]
    parent = parents[i]

    if parent is not None and tokens[parent].is_punct("{") and parent not in blocks:
        return _Context.HASH if tok.text == ":" else None

    if any(span.contains(tok) for span in enum_values):
        return _Context.ENUM

    if tok.text == "=" and parent is not None and tokens[parent].is_punct("("):
        if _is_parameter_list(tokens, parent):
            return _Context.PARAMETER

    first = line_start
    while first < i and not tokens[first].is_significant:
        first += 1
    if parents[first] != parent:
        return None
    while first < i and tokens[first].is_keyword(*MODIFIERS):
        first += 1
    if tokens[first].is_keyword(*FIELD_KEYWORDS):
        return _Context.DECLARATION
    return None


def _is_parameter_list(tokens: Sequence[Token], paren: int) -> bool:
    """True if the `(` at paren opens a callable's parameter list."""
    name = paren - 1
    while name >= 0 and not tokens[name].is_significant:
        name -= 1
    if name < 0:
        return False
    before = tokens[name]
    if before.is_keyword("fn", "iterator"):
        return True  # lambda
    if before.kind is TokenKind.IDENTIFIER or before.kind is TokenKind.OPERATOR:
        keyword = prev_significant(tokens, name)
        return keyword is not None and keyword.is_keyword("fn", "iterator", "operator")
    return False


def _make_sign(tokens: Sequence[Token], i: int) -> _Sign:
    tok = tokens[i]
    minimum = 2 if tok.text == "=" else 1

    padded_before = False
    if i > 0 and tokens[i - 1].kind is TokenKind.WHITESPACE:
        leading = i == 1 or tokens[i - 2].kind is TokenKind.NEWLINE
        padded_before = not leading and len(tokens[i - 1].text) >= minimum

    padded_after = False
    value_column = None
    j = i + 1
    if j < len(tokens) and tokens[j].kind is TokenKind.WHITESPACE:
        followed = j + 1 < len(tokens) and tokens[j + 1].kind not in (
            TokenKind.NEWLINE,
            TokenKind.COMMENT,
        )
        padded_after = followed and len(tokens[j].text) >= 2
        j += 1
    if j < len(tokens) and tokens[j].is_significant and tokens[j].start_line == tok.start_line:
        value_column = tokens[j].start_column

    return _Sign(
        index=i,
        token=tok,
        value_column=value_column,
        padded_before=padded_before,
        padded_after=padded_after,
    )


def _consecutive_lines(signs: list[_Sign]) -> list[list[_Sign]]:
    """Split signs (sorted by line) into chains on consecutive lines."""
    chains: list[list[_Sign]] = []
    for sign in signs:
        if chains and chains[-1][-1].token.start_line + 1 == sign.token.start_line:
            chains[-1].append(sign)
        else:
            chains.append([sign])
    return [c for c in chains if len(c) > 1]


def _runs(chain: list[_Sign], column_of: Callable[[_Sign], int | None]) -> list[list[_Sign]]:
    """Maximal sub-runs of chain sharing the same (non-None) column."""
    runs: list[list[_Sign]] = []
    for column, group in groupby(chain, key=column_of):
        members = list(group)
        if column is not None and len(members) > 1 and any(s.padded for s in members):
            runs.append(members)
    return runs
