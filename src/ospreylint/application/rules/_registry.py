"""Rule registry.

Central mapping of rule id → rule function. Rules are plain functions;
there is no rule class hierarchy.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from ospreylint.application.rules import alignment, blank_lines, naming, spacing, whitespace
from ospreylint.domain.exceptions.configuration import RuleConfigurationError
from ospreylint.domain.model.enums import Severity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.ports.rule import RuleCheck

# Registry - read-only view, order is the order of the style guide
RULES: Mapping[str, RuleCheck] = MappingProxyType(
    {
        whitespace.MAX_LINE_LENGTH: whitespace.check_max_line_length,
        whitespace.INDENTATION_TABS: whitespace.check_indentation_tabs,
        alignment.NO_ALIGN_IN_DECLARATIONS: alignment.check_no_align_in_declarations,
        whitespace.TRAILING_WHITESPACE: whitespace.check_trailing_whitespace,
        whitespace.FINAL_NEWLINE: whitespace.check_final_newline,
        spacing.PAREN_BRACKET_SPACING: spacing.check_paren_bracket_spacing,
        spacing.INFIX_OPERATOR_SPACING: spacing.check_infix_operator_spacing,
        spacing.UNARY_NOT_SPACING: spacing.check_unary_not_spacing,
        blank_lines.BLANK_LINE_SEPARATION: blank_lines.check_blank_line_separation,
        whitespace.MULTIPLE_BLANK_LINES: whitespace.check_multiple_blank_lines,
        naming.TYPE_NAME_CASING: naming.check_type_name_casing,
        naming.MEMBER_NAME_CASING: naming.check_member_name_casing,
        naming.BACKING_FIELD_UNDERSCORE: naming.check_backing_field_underscore,
    }
)

DEFAULT_SEVERITIES: Mapping[str, Severity] = MappingProxyType(
    {
        rule_id: Severity.WARNING if rule_id == whitespace.MAX_LINE_LENGTH else Severity.ERROR
        for rule_id in RULES
    }
)

RULE_DESCRIPTIONS: Mapping[str, str] = MappingProxyType(
    {
        whitespace.MAX_LINE_LENGTH: "Lines should not exceed the configured length (soft limit)",
        whitespace.INDENTATION_TABS: "Indent with tabs; spaces only for alignment after tabs",
        alignment.NO_ALIGN_IN_DECLARATIONS: "Do not align '=' or ':' in declarations, enums or parameters",
        whitespace.TRAILING_WHITESPACE: "No whitespace at the end of a line",
        whitespace.FINAL_NEWLINE: "Files end with exactly one newline",
        spacing.PAREN_BRACKET_SPACING: "No space inside parentheses, brackets or literal braces",
        spacing.INFIX_OPERATOR_SPACING: "Exactly one space around infix operators",
        spacing.UNARY_NOT_SPACING: "'not' takes one trailing space; other unary operators none",
        blank_lines.BLANK_LINE_SEPARATION: "Blank line between adjacent declarations",
        whitespace.MULTIPLE_BLANK_LINES: "No more than one blank line in a row",
        naming.TYPE_NAME_CASING: "Type names are UpperCamelCase",
        naming.MEMBER_NAME_CASING: "Member names are lowerCamelCase, constants included",
        naming.BACKING_FIELD_UNDERSCORE: "Only property backing fields start with '_'",
    }
)

# Rules that consume declaration spans. The detector only runs for these.
SPAN_RULES = frozenset(
    {
        alignment.NO_ALIGN_IN_DECLARATIONS,
        blank_lines.BLANK_LINE_SEPARATION,
        naming.TYPE_NAME_CASING,
        naming.MEMBER_NAME_CASING,
        naming.BACKING_FIELD_UNDERSCORE,
    }
)

# Soft rules never report above warning, whatever the configuration says.
SOFT_RULES = frozenset({whitespace.MAX_LINE_LENGTH})


def enabled_rules(config: RuleConfiguration) -> tuple[tuple[str, RuleCheck], ...]:
    """Select the rules a configuration enables.

    Args:
        config: Run configuration

    Returns:
        (rule id, rule function) pairs in registry order

    Raises:
        RuleConfigurationError: Configuration names an unknown rule
    """
    for rule_id in config.rules:
        if rule_id not in RULES:
            raise RuleConfigurationError(rule_id, "unknown rule id")
    return tuple((rule_id, check) for rule_id, check in RULES.items() if config.is_enabled(rule_id))
