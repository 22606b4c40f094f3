"""Statistics for a lint run."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LintStats:
    """Statistics from a lint run.

    Attributes:
        files_checked: Number of files analysed
        rules_run: Number of enabled rules per file
        analysis_time_ms: Wall time in milliseconds
    """

    files_checked: int
    rules_run: int
    analysis_time_ms: float

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.files_checked < 0:
            raise ValueError(f"files_checked must be >= 0, got {self.files_checked}")
        if self.rules_run < 0:
            raise ValueError(f"rules_run must be >= 0, got {self.rules_run}")
        if self.analysis_time_ms < 0:
            raise ValueError(f"analysis_time_ms must be >= 0, got {self.analysis_time_ms}")

    @classmethod
    def empty(cls) -> LintStats:
        """Create empty stats."""
        return cls(files_checked=0, rules_run=0, analysis_time_ms=0.0)
