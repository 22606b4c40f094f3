"""ospreylint application layer.

Rules, the rule engine and Linter facade, source discovery and reporters.
"""

from ospreylint.application.discovery import discover_sources
from ospreylint.application.reporters import (
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from ospreylint.application.rules import RULES, enabled_rules
from ospreylint.application.services import LEX_ERROR, Linter, lint_source

__all__ = [
    "RULES",
    "enabled_rules",
    "LEX_ERROR",
    "Linter",
    "lint_source",
    "discover_sources",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
]
