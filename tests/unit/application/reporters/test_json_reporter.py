"""Tests for reporters/json_reporter.py."""

import io
import json
from pathlib import Path

from ospreylint.application.reporters.json_reporter import JSONReporter
from ospreylint.domain.model.enums import Severity
from ospreylint.domain.model.lint_result import LintResult
from tests.factories import make_diagnostic, make_report, make_result


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_empty_result(self) -> None:
        """Clean run serializes as passed."""
        output = io.StringIO()

        JSONReporter(output).report(LintResult.empty())

        data = json.loads(output.getvalue())
        assert data["passed"] is True
        assert data["summary"] == {"diagnostic_count": 0, "error_count": 0, "warning_count": 0}
        assert data["files"] == []

    def test_full_structure(self) -> None:
        """Files, diagnostics and stats are serialized."""
        output = io.StringIO()
        result = make_result(
            make_report(make_diagnostic(line=4, column=2), path=Path("a.osp")),
            make_report(path=Path("b.osp")),
        )

        JSONReporter(output).report(result)

        data = json.loads(output.getvalue())
        assert data["passed"] is False
        assert data["files"] == [
            {
                "path": "a.osp",
                "status": "violations found",
                "diagnostics": [
                    {
                        "rule_id": "trailing-whitespace",
                        "severity": "error",
                        "message": "trailing whitespace",
                        "line": 4,
                        "column": 2,
                    },
                ],
            },
            {"path": "b.osp", "status": "clean", "diagnostics": []},
        ]
        assert data["stats"] == {"files_checked": 2, "rules_run": 13, "analysis_time_ms": 1.5}

    def test_warning_counts(self) -> None:
        """Warnings are counted separately."""
        output = io.StringIO()
        result = make_result(make_report(make_diagnostic(severity=Severity.WARNING)))

        JSONReporter(output).report(result)

        summary = json.loads(output.getvalue())["summary"]
        assert summary == {"diagnostic_count": 1, "error_count": 0, "warning_count": 1}

    def test_compact_output(self) -> None:
        """indent=None writes one line."""
        output = io.StringIO()

        JSONReporter(output, indent=None).report(LintResult.empty())

        assert output.getvalue().count("\n") == 1
