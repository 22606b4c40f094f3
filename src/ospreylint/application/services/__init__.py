"""Application services."""

from ospreylint.application.services.engine import resolve_severity, run_rules
from ospreylint.application.services.linter import (
    LEX_ERROR,
    Linter,
    lint_source,
    read_source,
)

__all__ = [
    "LEX_ERROR",
    "Linter",
    "lint_source",
    "read_source",
    "resolve_severity",
    "run_rules",
]
