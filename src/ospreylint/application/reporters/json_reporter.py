"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from ospreylint.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from ospreylint.domain.model.diagnostic import Diagnostic
    from ospreylint.domain.model.file_report import FileReport
    from ospreylint.domain.model.lint_result import LintResult


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs lint results as JSON for CI/CD integration,
    editor plugins or other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, result: LintResult) -> None:
        """Report lint results as JSON.

        Args:
            result: Complete lint result
        """
        data = self._result_to_dict(result)
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _result_to_dict(self, result: LintResult) -> dict[str, object]:
        """Convert LintResult to JSON-serializable dict.

        Args:
            result: Lint result to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "passed": result.passed,
            "summary": {
                "diagnostic_count": result.diagnostic_count,
                "error_count": result.error_count,
                "warning_count": result.warning_count,
            },
            "files": [self._report_to_dict(r) for r in result.reports],
            "stats": {
                "files_checked": result.stats.files_checked,
                "rules_run": result.stats.rules_run,
                "analysis_time_ms": result.stats.analysis_time_ms,
            },
        }

    def _report_to_dict(self, report: FileReport) -> dict[str, object]:
        """Convert FileReport to JSON-serializable dict."""
        return {
            "path": str(report.path),
            "status": report.status.value,
            "diagnostics": [self._diagnostic_to_dict(d) for d in report.diagnostics],
        }

    def _diagnostic_to_dict(self, diagnostic: Diagnostic) -> dict[str, object]:
        """Convert Diagnostic to JSON-serializable dict.

        Args:
            diagnostic: Diagnostic to convert

        Returns:
            Dictionary suitable for json.dump()
        """
        return {
            "rule_id": diagnostic.rule_id,
            "severity": diagnostic.severity.value,
            "message": diagnostic.message,
            "line": diagnostic.line,
            "column": diagnostic.column,
        }
