"""Diagnostic value object."""

from __future__ import annotations

from dataclasses import dataclass

from ospreylint.domain.model.enums import Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """One reported style violation.

    Attributes:
        rule_id: Stable identifier of the rule that produced it
        severity: ERROR or WARNING
        message: Human-readable message
        line: Line number (1-based)
        column: Column number (1-based)
    """

    rule_id: str
    severity: Severity
    message: str
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.rule_id:
            raise ValueError("rule_id must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column <= 0:
            raise ValueError(f"column must be > 0, got {self.column}")

    @property
    def sort_key(self) -> tuple[int, int, str]:
        """Ordering key: line, then column, then rule id."""
        return (self.line, self.column, self.rule_id)

    @property
    def is_error(self) -> bool:
        """True for ERROR severity."""
        return self.severity is Severity.ERROR

    def __str__(self) -> str:
        """Format as line:column: severity: message [rule]."""
        return f"{self.line}:{self.column}: {self.severity.value}: {self.message} [{self.rule_id}]"
