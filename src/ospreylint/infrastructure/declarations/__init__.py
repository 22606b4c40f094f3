"""Declaration boundary detection."""

from ospreylint.infrastructure.declarations.detector import (
    FIELD_KEYWORDS,
    MODIFIERS,
    TYPE_KEYWORDS,
    brace_opens_expression,
    detect_declarations,
    match_brackets,
)

__all__ = [
    "FIELD_KEYWORDS",
    "MODIFIERS",
    "TYPE_KEYWORDS",
    "brace_opens_expression",
    "detect_declarations",
    "match_brackets",
]
