"""Per-file lint report."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import LintStatus, Severity


@dataclass(frozen=True, slots=True)
class FileReport:
    """Diagnostics for one file, ordered by (line, column, rule_id).

    Attributes:
        path: File the diagnostics belong to
        diagnostics: Sorted diagnostics
    """

    path: Path
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants and normalize ordering. FAIL-FIRST."""
        if self.path is None:
            raise TypeError("path must not be None")
        ordered = tuple(sorted(self.diagnostics, key=lambda d: d.sort_key))
        object.__setattr__(self, "diagnostics", ordered)

    @classmethod
    def from_unordered(cls, path: Path, diagnostics: Iterable[Diagnostic]) -> FileReport:
        """Build a report from diagnostics in any order."""
        return cls(path=path, diagnostics=tuple(diagnostics))

    @property
    def status(self) -> LintStatus:
        """CLEAN when there is nothing to report."""
        return LintStatus.VIOLATIONS_FOUND if self.diagnostics else LintStatus.CLEAN

    @property
    def passed(self) -> bool:
        """True if no diagnostics."""
        return not self.diagnostics

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity is Severity.ERROR)

    @property
    def warning_count(self) -> int:
        """Number of WARNING diagnostics."""
        return sum(1 for d in self.diagnostics if d.severity is Severity.WARNING)

    def by_rule(self, rule_id: str) -> tuple[Diagnostic, ...]:
        """Diagnostics produced by one rule."""
        return tuple(d for d in self.diagnostics if d.rule_id == rule_id)
