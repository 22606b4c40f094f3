"""ospreylint domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, enum, pathlib, types, collections.abc
"""

from ospreylint.domain.exceptions import (
    ConfigurationError,
    LexError,
    OspreyLintError,
    RuleConfigurationError,
    SourceReadError,
)
from ospreylint.domain.model import (
    DeclarationCategory,
    DeclarationSpan,
    Diagnostic,
    FileReport,
    LintResult,
    LintStats,
    LintStatus,
    RuleConfiguration,
    RuleSetting,
    Severity,
    Token,
    TokenKind,
    Visibility,
)
from ospreylint.domain.ports import ReporterProtocol, RuleCheck

__all__ = [
    # Exceptions
    "OspreyLintError",
    "LexError",
    "ConfigurationError",
    "RuleConfigurationError",
    "SourceReadError",
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
    "RuleSetting",
    "RuleConfiguration",
    # Results
    "FileReport",
    "LintStats",
    "LintResult",
    # Ports
    "RuleCheck",
    "ReporterProtocol",
]
