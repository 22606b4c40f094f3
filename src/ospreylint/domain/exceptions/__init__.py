"""Domain exceptions."""

from ospreylint.domain.exceptions.base import OspreyLintError
from ospreylint.domain.exceptions.configuration import (
    ConfigurationError,
    RuleConfigurationError,
)
from ospreylint.domain.exceptions.lexing import LexError
from ospreylint.domain.exceptions.source import SourceReadError

__all__ = [
    "OspreyLintError",
    "LexError",
    "ConfigurationError",
    "RuleConfigurationError",
    "SourceReadError",
]
