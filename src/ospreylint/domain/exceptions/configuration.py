"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ospreylint.domain.exceptions.base import OspreyLintError

if TYPE_CHECKING:
    from pathlib import Path


class ConfigurationError(OspreyLintError):
    """Configuration file is missing or malformed.

    Attributes:
        path: Configuration file
        reason: Why it was rejected
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration {path}: {reason}")


class RuleConfigurationError(OspreyLintError):
    """Configuration refers to a rule in an unusable way.

    Raised before any file is analysed, e.g. for unknown rule ids.

    Attributes:
        rule_id: Offending rule id (must not be empty)
        reason: Why the setting is invalid (must not be empty)
    """

    def __init__(self, rule_id: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not rule_id:
            raise ValueError("rule_id must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.rule_id = rule_id
        self.reason = reason
        super().__init__(f"Invalid rule '{rule_id}': {reason}")
