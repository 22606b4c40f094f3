"""Tests for domain/model/file_report.py, lint_result.py and lint_stats.py."""

from pathlib import Path

import pytest

from ospreylint.domain.model.enums import LintStatus, Severity
from ospreylint.domain.model.file_report import FileReport
from ospreylint.domain.model.lint_result import LintResult
from ospreylint.domain.model.lint_stats import LintStats
from tests.factories import make_diagnostic, make_report, make_result


class TestFileReport:
    """Tests for FileReport."""

    def test_sorts_diagnostics(self) -> None:
        """Diagnostics are ordered by (line, column, rule id)."""
        late = make_diagnostic("z-rule", line=3, column=1)
        early = make_diagnostic("z-rule", line=1, column=4)
        tie = make_diagnostic("a-rule", line=1, column=4)

        report = make_report(late, early, tie)

        assert report.diagnostics == (tie, early, late)

    def test_clean_status(self) -> None:
        """Empty report is clean."""
        report = FileReport(path=Path("a.osp"))

        assert report.status is LintStatus.CLEAN
        assert report.passed

    def test_violations_status(self) -> None:
        """Any diagnostic means violations found."""
        report = make_report(make_diagnostic())

        assert report.status is LintStatus.VIOLATIONS_FOUND
        assert not report.passed

    def test_counts_and_by_rule(self) -> None:
        """Counts split by severity; by_rule filters."""
        report = make_report(
            make_diagnostic("max-line-length", severity=Severity.WARNING),
            make_diagnostic("final-newline", line=2),
            make_diagnostic("final-newline", line=3),
        )

        assert report.error_count == 2
        assert report.warning_count == 1
        assert len(report.by_rule("final-newline")) == 2

    def test_none_path_fails(self) -> None:
        """Path must be given."""
        with pytest.raises(TypeError, match="path must not be None"):
            FileReport(path=None)  # type: ignore[arg-type]


class TestLintResult:
    """Tests for LintResult."""

    def test_empty_passes(self) -> None:
        """Empty result passes with exit code 0."""
        result = LintResult.empty()

        assert result.passed
        assert result.exit_code == 0
        assert result.diagnostic_count == 0

    def test_warnings_do_not_fail(self) -> None:
        """Warnings alone keep exit code 0."""
        result = make_result(make_report(make_diagnostic(severity=Severity.WARNING)))

        assert not result.passed
        assert result.exit_code == 0

    def test_errors_fail(self) -> None:
        """Any error gives exit code 1."""
        result = make_result(
            make_report(path=Path("a.osp")),
            make_report(make_diagnostic(), path=Path("b.osp")),
        )

        assert result.exit_code == 1
        assert result.error_count == 1

    def test_iter_diagnostics_keeps_report_order(self) -> None:
        """Pairs follow report order, then diagnostic order."""
        first = make_report(make_diagnostic(line=9), path=Path("z.osp"))
        second = make_report(make_diagnostic(line=1), path=Path("a.osp"))

        pairs = make_result(first, second).iter_diagnostics()

        assert [r.path.name for r, _ in pairs] == ["z.osp", "a.osp"]


class TestLintStats:
    """Tests for LintStats."""

    def test_empty(self) -> None:
        """Empty stats are zero."""
        stats = LintStats.empty()

        assert stats.files_checked == 0
        assert stats.analysis_time_ms == 0.0

    def test_negative_fails(self) -> None:
        """Negative counters raise ValueError."""
        with pytest.raises(ValueError, match="files_checked must be >= 0"):
            LintStats(files_checked=-1, rules_run=0, analysis_time_ms=0.0)
        with pytest.raises(ValueError, match="analysis_time_ms must be >= 0"):
            LintStats(files_checked=0, rules_run=0, analysis_time_ms=-1.0)
