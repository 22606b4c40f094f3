"""Lint result aggregate for a multi-file run."""

from __future__ import annotations

from dataclasses import dataclass

from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.file_report import FileReport
from ospreylint.domain.model.lint_stats import LintStats


@dataclass(frozen=True, slots=True)
class LintResult:
    """Result of linting a set of files.

    Immutable aggregate used by reporters.

    Attributes:
        reports: One report per file, in input order
        stats: Run statistics
    """

    reports: tuple[FileReport, ...]
    stats: LintStats

    @property
    def passed(self) -> bool:
        """True if no file has diagnostics."""
        return all(r.passed for r in self.reports)

    @property
    def diagnostic_count(self) -> int:
        """Total number of diagnostics."""
        return sum(len(r.diagnostics) for r in self.reports)

    @property
    def error_count(self) -> int:
        """Number of ERROR diagnostics across files."""
        return sum(r.error_count for r in self.reports)

    @property
    def warning_count(self) -> int:
        """Number of WARNING diagnostics across files."""
        return sum(r.warning_count for r in self.reports)

    @property
    def exit_code(self) -> int:
        """0 unless an ERROR diagnostic was produced. Warnings never fail."""
        return 1 if self.error_count else 0

    def iter_diagnostics(self) -> tuple[tuple[FileReport, Diagnostic], ...]:
        """All (report, diagnostic) pairs in report order."""
        return tuple((r, d) for r in self.reports for d in r.diagnostics)

    @classmethod
    def empty(cls) -> LintResult:
        """Create empty result (passed, no files)."""
        return cls(reports=(), stats=LintStats.empty())
