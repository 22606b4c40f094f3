"""Line and whitespace rules.

- max-line-length: soft limit on physical line length
- indentation-tabs: tabs for indentation, spaces only for alignment
- trailing-whitespace: no whitespace before a line break
- final-newline: exactly one newline at end of file
- multiple-blank-lines: at most one blank line in a row
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ospreylint.application.rules._tokens import line_texts, physical_lines
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import Severity, TokenKind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.token import Token

MAX_LINE_LENGTH = "max-line-length"
INDENTATION_TABS = "indentation-tabs"
TRAILING_WHITESPACE = "trailing-whitespace"
FINAL_NEWLINE = "final-newline"
MULTIPLE_BLANK_LINES = "multiple-blank-lines"

_VALID_INDENT_RE = re.compile(r"\t*|\t+ +")


def check_max_line_length(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag lines longer than config.max_line_length.

    Anchored at the first overflowing column. A line is exempt when
    that column falls inside a string literal, so long messages never
    have to be broken up.
    """
    limit = config.max_line_length
    overflow = limit + 1

    strings: dict[int, list[Token]] = {}
    for tok in tokens:
        if tok.kind is TokenKind.STRING_LITERAL:
            strings.setdefault(tok.start_line, []).append(tok)

    diagnostics: list[Diagnostic] = []
    for number, text in enumerate(line_texts(tokens), start=1):
        if len(text) <= limit:
            continue
        if any(s.start_column <= overflow <= s.end_column for s in strings.get(number, ())):
            continue
        diagnostics.append(
            Diagnostic(
                rule_id=MAX_LINE_LENGTH,
                severity=Severity.WARNING,
                message=f"line is {len(text)} characters long (limit {limit})",
                line=number,
                column=overflow,
            )
        )
    return tuple(diagnostics)


def check_indentation_tabs(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag indentation that is not tabs optionally followed by alignment spaces."""
    diagnostics: list[Diagnostic] = []
    for line in physical_lines(tokens):
        indent = line.leading_whitespace
        if indent is None or line.is_blank:
            continue
        if _VALID_INDENT_RE.fullmatch(indent.text):
            continue
        offset, message = _indent_problem(indent.text)
        diagnostics.append(
            Diagnostic(
                rule_id=INDENTATION_TABS,
                severity=Severity.ERROR,
                message=message,
                line=line.number,
                column=indent.start_column + offset,
            )
        )
    return tuple(diagnostics)


def _indent_problem(text: str) -> tuple[int, str]:
    """Locate and describe the first problem in an invalid indent."""
    for offset, ch in enumerate(text):
        if ch not in " \t":
            return offset, "unexpected whitespace character in indentation"
    first_space = text.index(" ")
    if "\t" in text[first_space:]:
        return first_space, "space before tab in indentation"
    return first_space, "spaces only allowed for alignment after tabs"


def check_trailing_whitespace(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag whitespace directly before a newline or the end of the file."""
    diagnostics: list[Diagnostic] = []
    for i, tok in enumerate(tokens):
        if tok.kind is not TokenKind.WHITESPACE:
            continue
        at_end = i + 1 == len(tokens)
        if at_end or tokens[i + 1].kind is TokenKind.NEWLINE:
            diagnostics.append(
                Diagnostic(
                    rule_id=TRAILING_WHITESPACE,
                    severity=Severity.ERROR,
                    message="trailing whitespace",
                    line=tok.start_line,
                    column=tok.start_column,
                )
            )
    return tuple(diagnostics)


def check_final_newline(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Require exactly one newline at the end of a non-empty file.

    A missing newline is reported at the last character. Extra newlines
    are reported once, at the first superfluous newline.
    """
    if not tokens:
        return ()

    last = tokens[-1]
    if last.kind is not TokenKind.NEWLINE:
        return (
            Diagnostic(
                rule_id=FINAL_NEWLINE,
                severity=Severity.ERROR,
                message="missing newline at end of file",
                line=last.end_line,
                column=last.end_column,
            ),
        )

    newlines: list[Token] = []
    for tok in reversed(tokens):
        if tok.kind is TokenKind.NEWLINE:
            newlines.append(tok)
        elif tok.kind is not TokenKind.WHITESPACE:
            break
    if len(newlines) < 2:
        return ()

    # newlines is in reverse order; [-1] ends the last line with content
    extra = newlines[-2]
    return (
        Diagnostic(
            rule_id=FINAL_NEWLINE,
            severity=Severity.ERROR,
            message=f"{len(newlines)} newlines at end of file, expected 1",
            line=extra.start_line,
            column=extra.start_column,
        ),
    )


def check_multiple_blank_lines(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Flag runs of two or more blank lines, once per run."""
    diagnostics: list[Diagnostic] = []
    run = 0
    for line in physical_lines(tokens):
        if not line.is_blank:
            run = 0
            continue
        run += 1
        if run == 2:
            diagnostics.append(
                Diagnostic(
                    rule_id=MULTIPLE_BLANK_LINES,
                    severity=Severity.ERROR,
                    message="multiple consecutive blank lines",
                    line=line.number,
                    column=1,
                )
            )
    return tuple(diagnostics)
