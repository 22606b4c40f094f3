"""Base reporter class for output formatting.

Provides default implementation of ReporterProtocol.
Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ospreylint.domain.model.lint_result import LintResult


class BaseReporter(ABC):
    """Base class for reporters implementing ReporterProtocol.

    ospreylint provides PlainTextReporter, JSONReporter and
    ConsoleReporter. Users can add their own (SARIF, HTML, ...).

    Example:
        class CountReporter(BaseReporter):
            def report(self, result: LintResult) -> None:
                print(f"Diagnostics: {result.diagnostic_count}")
    """

    @abstractmethod
    def report(self, result: LintResult) -> None:
        """Report lint results.

        Implementation decides output format and destination.
        Must not raise for a well-formed result.

        Args:
            result: Complete lint result
        """


def summary_line(result: LintResult) -> str:
    """Totals line shared by the text reporters."""
    return (
        f"{result.error_count} error(s), {result.warning_count} warning(s) "
        f"in {result.stats.files_checked} file(s)"
    )
