"""Style rules.

Each rule is a function (tokens, spans, config) → diagnostics:
- whitespace: line length, indentation, trailing whitespace, final
  newline, blank line runs
- spacing: brackets, infix and unary operators
- alignment: no aligned declarations
- blank_lines: blank lines between declarations
- naming: type and member casing, backing fields
"""

from ospreylint.application.rules._registry import (
    DEFAULT_SEVERITIES,
    RULE_DESCRIPTIONS,
    RULES,
    SOFT_RULES,
    SPAN_RULES,
    enabled_rules,
)

__all__ = [
    "RULES",
    "DEFAULT_SEVERITIES",
    "RULE_DESCRIPTIONS",
    "SPAN_RULES",
    "SOFT_RULES",
    "enabled_rules",
]
