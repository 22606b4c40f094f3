"""Naming rules.

- type-name-casing: UpperCamelCase type names
- member-name-casing: lowerCamelCase for everything else
- backing-field-underscore: `_name` for property backing fields only

Abbreviations count as words: at most two capitals in a row stand for
an abbreviation (`IOError`, `HtmlDocument`, not `HTMLDocument`).
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import DeclarationCategory, Severity, Visibility

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.token import Token

TYPE_NAME_CASING = "type-name-casing"
MEMBER_NAME_CASING = "member-name-casing"
BACKING_FIELD_UNDERSCORE = "backing-field-underscore"

MAX_ABBREVIATION = 2

UPPER_CAMEL_RE = re.compile(r"[A-Z][A-Za-z0-9]*")
LOWER_CAMEL_RE = re.compile(r"[a-z][A-Za-z0-9]*")
UPPER_SNAKE_RE = re.compile(r"[A-Z][A-Z0-9]*(?:_[A-Z0-9]+)+|[A-Z][A-Z0-9]+")
_CAPITALS_RE = re.compile(r"[A-Z]+")


def longest_abbreviation(name: str) -> int:
    """Length of the longest all-capitals abbreviation in a camel-case name.

    A capital directly followed by a lowercase letter starts the next
    word and does not count: `IOError` → 2, `HTMLDocument` → 4.
    """
    longest = 0
    for match in _CAPITALS_RE.finditer(name):
        length = len(match.group())
        end = match.end()
        if end < len(name) and name[end].islower():
            length -= 1
        longest = max(longest, length)
    return longest


def check_type_name_casing(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Type names must be UpperCamelCase."""
    diagnostics: list[Diagnostic] = []
    for span in spans:
        if span.category is not DeclarationCategory.TYPE:
            continue
        name = span.name
        if not UPPER_CAMEL_RE.fullmatch(name):
            message = f"type name '{name}' must be UpperCamelCase"
        elif longest_abbreviation(name) > MAX_ABBREVIATION:
            message = f"type name '{name}' capitalizes an abbreviation longer than two letters"
        else:
            continue
        diagnostics.append(_at_name(TYPE_NAME_CASING, message, span))
    return tuple(diagnostics)


def check_member_name_casing(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Non-type names must be lowerCamelCase, constants included.

    Leading and trailing underscores are the business of the backing
    field rule and are ignored here.
    """
    diagnostics: list[Diagnostic] = []
    for span in spans:
        if span.category in (DeclarationCategory.TYPE, DeclarationCategory.OPERATOR_OVERLOAD):
            continue
        name = span.name.strip("_")
        if not name:
            continue
        if UPPER_SNAKE_RE.fullmatch(name):
            kind = "constant" if span.is_constant else span.category.value
            message = f"{kind} '{span.name}' must be lowerCamelCase, not UPPER_SNAKE_CASE"
        elif not LOWER_CAMEL_RE.fullmatch(name):
            message = f"{span.category.value} name '{span.name}' must be lowerCamelCase"
        elif longest_abbreviation(name) > MAX_ABBREVIATION:
            message = (
                f"{span.category.value} name '{span.name}' capitalizes an abbreviation "
                "longer than two letters"
            )
        else:
            continue
        diagnostics.append(_at_name(MEMBER_NAME_CASING, message, span))
    return tuple(diagnostics)


def check_backing_field_underscore(
    tokens: Sequence[Token],
    spans: Sequence[DeclarationSpan],
    config: RuleConfiguration,
) -> tuple[Diagnostic, ...]:
    """Only property backing fields carry an underscore, exactly one, in front.

    A private field backs a property when a sibling property has the
    same name apart from underscores and case. Fields that a property
    merely reads are not backing fields.
    """
    members: dict[int | None, list[DeclarationSpan]] = {}
    for span in spans:
        members.setdefault(span.parent_index, []).append(span)

    diagnostics: list[Diagnostic] = []
    for group in members.values():
        properties = [s for s in group if s.category is DeclarationCategory.PROPERTY]
        property_names = {p.name.strip("_").lower(): p for p in properties}

        for field in group:
            if field.category is not DeclarationCategory.FIELD:
                continue
            message = _backing_field_problem(field, property_names)
            if message is not None:
                diagnostics.append(_at_name(BACKING_FIELD_UNDERSCORE, message, field))
    return tuple(diagnostics)


def _backing_field_problem(
    field: DeclarationSpan,
    property_names: dict[str, DeclarationSpan],
) -> str | None:
    name = field.name
    bare = name.strip("_")
    if not bare:
        return None

    is_backing = field.visibility is Visibility.PRIVATE and bare.lower() in property_names
    if is_backing:
        if name.startswith("_") and not name.startswith("__") and not name.endswith("_"):
            return None
        return f"backing field '{name}' must be named '_{bare}'"

    if name.startswith("_") or name.endswith("_"):
        return f"field '{name}' backs no property and must not start or end with '_'"
    return None


def _at_name(rule_id: str, message: str, span: DeclarationSpan) -> Diagnostic:
    return Diagnostic(
        rule_id=rule_id,
        severity=Severity.ERROR,
        message=message,
        line=span.name_token.start_line,
        column=span.name_token.start_column,
    )
