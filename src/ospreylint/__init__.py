"""ospreylint - style checker for the Osprey language."""

__version__ = "0.1.0"

from ospreylint.application.discovery import discover_sources
from ospreylint.application.services import Linter, lint_source
from ospreylint.domain.model import (
    Diagnostic,
    FileReport,
    LintResult,
    RuleConfiguration,
    RuleSetting,
    Severity,
)
from ospreylint.infrastructure.config import load_configuration

__all__ = [
    "Diagnostic",
    "FileReport",
    "Linter",
    "LintResult",
    "RuleConfiguration",
    "RuleSetting",
    "Severity",
    "__version__",
    "discover_sources",
    "lint_source",
    "load_configuration",
]
