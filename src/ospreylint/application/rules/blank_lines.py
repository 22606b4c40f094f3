"""blank-line-separation rule."""

from __future__ import annotations

from itertools import pairwise
from typing import TYPE_CHECKING

from ospreylint.application.rules._tokens import physical_lines
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import DeclarationCategory, Severity

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.token import Token

BLANK_LINE_SEPARATION = "blank-line-separation"

SEPARATED_CATEGORIES = frozenset(
    {
        DeclarationCategory.TYPE,
        DeclarationCategory.METHOD,
        DeclarationCategory.PROPERTY,
        DeclarationCategory.ENUM_VALUE,
        DeclarationCategory.OPERATOR_OVERLOAD,
        DeclarationCategory.ITERATOR,
    }
)


def check_blank_line_separation(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Require a blank line between adjacent sibling declarations.

    Types, methods, properties, enum values, operator overloads and
    iterators are always separated. Adjacent fields only need a blank
    line where visibility changes. Declarations sharing a line are left
    alone.
    """
    blank = {line.number for line in physical_lines(tokens) if line.is_blank}

    siblings: dict[int | None, list[DeclarationSpan]] = {}
    for span in spans:
        siblings.setdefault(span.parent_index, []).append(span)

    diagnostics: list[Diagnostic] = []
    for group in siblings.values():
        for first, second in pairwise(group):
            if first.end_line >= second.start_line:
                continue
            if not _needs_separation(first, second):
                continue
            if any(n in blank for n in range(first.end_line + 1, second.start_line)):
                continue
            diagnostics.append(
                Diagnostic(
                    rule_id=BLANK_LINE_SEPARATION,
                    severity=Severity.ERROR,
                    message=(
                        f"expected a blank line between {first.category.value} "
                        f"'{first.name}' and {second.category.value} '{second.name}'"
                    ),
                    line=second.start_token.start_line,
                    column=second.start_token.start_column,
                )
            )
    return tuple(diagnostics)


def _needs_separation(first: DeclarationSpan, second: DeclarationSpan) -> bool:
    if first.category in SEPARATED_CATEGORIES and second.category in SEPARATED_CATEGORIES:
        return True
    if first.category is DeclarationCategory.FIELD and second.category is DeclarationCategory.FIELD:
        return first.visibility is not second.visibility
    return False
