"""Tests for reporters/plain_text.py."""

import io
from pathlib import Path

from ospreylint.application.reporters.plain_text import PlainTextReporter, format_diagnostic
from ospreylint.domain.model.enums import Severity
from ospreylint.domain.model.lint_result import LintResult
from tests.factories import make_diagnostic, make_report, make_result


class TestFormatDiagnostic:
    """Tests for format_diagnostic."""

    def test_line_format(self) -> None:
        """<file>:<line>:<column>: <severity>: <message> [<ruleId>]."""
        diagnostic = make_diagnostic(line=12, column=5)
        report = make_report(diagnostic, path=Path("src/main.osp"))

        assert format_diagnostic(report, diagnostic) == (
            "src/main.osp:12:5: error: trailing whitespace [trailing-whitespace]"
        )


class TestPlainTextReporter:
    """Tests for PlainTextReporter."""

    def test_reports_clean_result(self) -> None:
        """A clean run prints only the summary."""
        output = io.StringIO()
        reporter = PlainTextReporter(output)

        reporter.report(LintResult.empty())

        assert output.getvalue() == "0 error(s), 0 warning(s) in 0 file(s)\n"

    def test_one_line_per_diagnostic(self) -> None:
        """Diagnostics in file order, then the summary."""
        output = io.StringIO()
        reporter = PlainTextReporter(output)
        result = make_result(
            make_report(
                make_diagnostic("final-newline", line=3, message="missing newline at end of file"),
                make_diagnostic(line=1, column=7),
                path=Path("b.osp"),
            ),
            make_report(
                make_diagnostic(
                    "max-line-length",
                    line=2,
                    column=121,
                    severity=Severity.WARNING,
                    message="line is 130 characters long (limit 120)",
                ),
                path=Path("a.osp"),
            ),
        )

        reporter.report(result)

        assert output.getvalue().splitlines() == [
            "b.osp:1:7: error: trailing whitespace [trailing-whitespace]",
            "b.osp:3:1: error: missing newline at end of file [final-newline]",
            "a.osp:2:121: warning: line is 130 characters long (limit 120) [max-line-length]",
            "2 error(s), 1 warning(s) in 2 file(s)",
        ]

    def test_summary_can_be_disabled(self) -> None:
        """show_summary=False prints diagnostics only."""
        output = io.StringIO()
        reporter = PlainTextReporter(output, show_summary=False)

        reporter.report(make_result(make_report(make_diagnostic())))

        assert output.getvalue().count("\n") == 1
