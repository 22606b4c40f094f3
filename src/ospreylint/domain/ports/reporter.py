"""Reporter protocol for output formatting.

Users extend ospreylint by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ospreylint.domain.model.lint_result import LintResult


class ReporterProtocol(Protocol):
    """Contract for reporters.

    ospreylint provides PlainTextReporter, JSONReporter and ConsoleReporter.
    Rendering must be total: a well-formed result never raises.
    """

    def report(self, result: LintResult) -> None:
        """Report lint results.

        Args:
            result: Complete lint result
        """
        ...
