"""Domain model: value objects and aggregates."""

from ospreylint.domain.model.configuration import (
    DEFAULT_MAX_LINE_LENGTH,
    RuleConfiguration,
    RuleSetting,
)
from ospreylint.domain.model.declaration import DeclarationSpan
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import (
    DeclarationCategory,
    LintStatus,
    Severity,
    TokenKind,
    Visibility,
)
from ospreylint.domain.model.file_report import FileReport
from ospreylint.domain.model.lint_result import LintResult
from ospreylint.domain.model.lint_stats import LintStats
from ospreylint.domain.model.token import Token

__all__ = [
    # Enums
    "TokenKind",
    "DeclarationCategory",
    "Visibility",
    "Severity",
    "LintStatus",
    # Value objects
    "Token",
    "DeclarationSpan",
    "Diagnostic",
    # Configuration
    "DEFAULT_MAX_LINE_LENGTH",
    "RuleSetting",
    "RuleConfiguration",
    # Results
    "FileReport",
    "LintStats",
    "LintResult",
]
