"""Plain text reporter using print().

Stdlib-only reporter, one line per diagnostic:

    src/main.osp:12:5: error: trailing whitespace [trailing-whitespace]
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from ospreylint.application.reporters._base import BaseReporter, summary_line

if TYPE_CHECKING:
    from ospreylint.domain.model.diagnostic import Diagnostic
    from ospreylint.domain.model.file_report import FileReport
    from ospreylint.domain.model.lint_result import LintResult


def format_diagnostic(report: FileReport, diagnostic: Diagnostic) -> str:
    """Format as <file>:<line>:<column>: <severity>: <message> [<ruleId>]."""
    return f"{report.path}:{diagnostic}"


class PlainTextReporter(BaseReporter):
    """Plain text reporter using print().

    Outputs to stdout by default, can be configured for any TextIO.
    """

    def __init__(self, output: TextIO | None = None, *, show_summary: bool = True) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            show_summary: Print the trailing totals line
        """
        self._output = output if output is not None else sys.stdout
        self._show_summary = show_summary

    def report(self, result: LintResult) -> None:
        """Report lint results as plain text.

        Args:
            result: Complete lint result
        """
        for report, diagnostic in result.iter_diagnostics():
            self._write(format_diagnostic(report, diagnostic))

        if self._show_summary:
            self._write(summary_line(result))

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
