"""Spacing rules around brackets and operators.

- paren-bracket-spacing: no space inside (), [] and literal {}
- infix-operator-spacing: exactly one space around infix operators
- unary-not-spacing: `not` takes one trailing space, other unary
  operators hug their operand
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ospreylint.application.rules._tokens import (
    CLOSERS,
    OPENERS,
    OperatorRole,
    block_braces,
    is_leading,
    match_openers,
    operator_roles,
)
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import Severity, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.token import Token

PAREN_BRACKET_SPACING = "paren-bracket-spacing"
INFIX_OPERATOR_SPACING = "infix-operator-spacing"
UNARY_NOT_SPACING = "unary-not-spacing"

_LINE_END = frozenset({TokenKind.NEWLINE, TokenKind.COMMENT})


def check_paren_bracket_spacing(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag whitespace just inside brackets.

    Braces that delimit code blocks are exempt, as is a space that
    separates the bracket from an infix operator. Whitespace that runs
    into a line break or comment is left to the whitespace rules.
    """
    roles = operator_roles(tokens)
    blocks = block_braces(tokens)
    partners = match_openers(tokens)
    diagnostics: list[Diagnostic] = []

    def is_infix(j: int) -> bool:
        return roles.get(j) is OperatorRole.INFIX

    for i, tok in enumerate(tokens):
        if tok.kind is not TokenKind.PUNCTUATION:
            continue

        if tok.text in OPENERS:
            if tok.text == "{" and i in blocks:
                continue
            if i + 2 >= len(tokens) or tokens[i + 1].kind is not TokenKind.WHITESPACE:
                continue
            after = i + 2
            if tokens[after].kind in _LINE_END or is_infix(after):
                continue
            space = tokens[i + 1]
            diagnostics.append(_bracket_diagnostic(space, f"unexpected space after '{tok.text}'"))

        elif tok.text in CLOSERS:
            opener = partners.get(i)
            if tok.text == "}" and (opener is None or opener in blocks):
                continue
            if i < 2 or tokens[i - 1].kind is not TokenKind.WHITESPACE:
                continue
            if is_leading(tokens, i - 1):
                continue
            before = i - 2
            if tokens[before].kind is TokenKind.COMMENT or is_infix(before):
                continue
            # `( )` was already reported after the opener
            if before == opener:
                continue
            space = tokens[i - 1]
            diagnostics.append(_bracket_diagnostic(space, f"unexpected space before '{tok.text}'"))

    return tuple(diagnostics)


def _bracket_diagnostic(space: Token, message: str) -> Diagnostic:
    return Diagnostic(
        rule_id=PAREN_BRACKET_SPACING,
        severity=Severity.ERROR,
        message=message,
        line=space.start_line,
        column=space.start_column,
    )


def check_infix_operator_spacing(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Require exactly one space on each side of an infix operator.

    A side that touches a line break needs no space. A missing space
    after the operator is reported at the token that follows it.
    """
    diagnostics: list[Diagnostic] = []

    def report(anchor: Token, message: str) -> None:
        diagnostics.append(
            Diagnostic(
                rule_id=INFIX_OPERATOR_SPACING,
                severity=Severity.ERROR,
                message=message,
                line=anchor.start_line,
                column=anchor.start_column,
            )
        )

    for i, role in operator_roles(tokens).items():
        if role is not OperatorRole.INFIX:
            continue
        op = tokens[i]

        if i > 0:
            left = tokens[i - 1]
            if left.kind is TokenKind.WHITESPACE:
                if not is_leading(tokens, i - 1) and left.text != " ":
                    report(left, f"expected a single space before '{op.text}'")
            elif left.kind is not TokenKind.NEWLINE:
                report(op, f"missing space before '{op.text}'")

        if i + 1 < len(tokens):
            right = tokens[i + 1]
            if right.kind is TokenKind.WHITESPACE:
                runs_to_break = i + 2 >= len(tokens) or tokens[i + 2].kind is TokenKind.NEWLINE
                if not runs_to_break and right.text != " ":
                    report(right, f"expected a single space after '{op.text}'")
            elif right.kind is not TokenKind.NEWLINE:
                report(right, f"missing space after '{op.text}'")

    return tuple(diagnostics)


def check_unary_not_spacing(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Check spacing around prefix and postfix operators.

    `not` needs exactly one space after it. Other unary operators take
    no space between themselves and their operand. A space before any
    of them is only allowed where something else mandates it: after an
    infix operator, a keyword, `,`, `;`, `:` or an opening brace.
    """
    roles = operator_roles(tokens)
    diagnostics: list[Diagnostic] = []

    def report(anchor: Token, message: str) -> None:
        diagnostics.append(
            Diagnostic(
                rule_id=UNARY_NOT_SPACING,
                severity=Severity.ERROR,
                message=message,
                line=anchor.start_line,
                column=anchor.start_column,
            )
        )

    def space_mandated_after(j: int) -> bool:
        tok = tokens[j]
        if tok.kind is TokenKind.OPERATOR:
            return roles.get(j) is OperatorRole.INFIX
        if tok.kind in (TokenKind.KEYWORD, TokenKind.COMMENT):
            return True
        return tok.is_punct(",", ";", ":", "{")

    for i, role in roles.items():
        if role not in (OperatorRole.PREFIX, OperatorRole.POSTFIX):
            continue
        op = tokens[i]

        # Leading side
        if i > 1 and tokens[i - 1].kind is TokenKind.WHITESPACE and not is_leading(tokens, i - 1):
            if not space_mandated_after(i - 2):
                report(tokens[i - 1], f"unexpected space before '{op.text}'")

        if role is OperatorRole.POSTFIX or i + 1 >= len(tokens):
            continue
        right = tokens[i + 1]

        # Trailing side
        if op.text == "not":
            if right.kind is TokenKind.WHITESPACE:
                if right.text != " ":
                    report(right, "expected a single space after 'not'")
            elif right.kind is not TokenKind.NEWLINE:
                report(op, "missing space after 'not'")
        elif right.kind is TokenKind.WHITESPACE:
            runs_to_break = i + 2 >= len(tokens) or tokens[i + 2].kind is TokenKind.NEWLINE
            if not runs_to_break:
                report(right, f"unexpected space after '{op.text}'")

    return tuple(diagnostics)
