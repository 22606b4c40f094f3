"""Tests for presentation/cli.py.

Tests:
- check: exit codes, output formats, configuration lookup
- rules: listing
- usage and configuration errors exit with 2
"""

import json
from pathlib import Path

import pytest

from ospreylint.presentation.cli import main

CLEAN = "class Widget {\n\tvar size = 0;\n}\n"
DIRTY = "class widget {\n\tvar size = 0; \n}\n"


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty working directory with no configuration above it."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def write(path: Path, text: str) -> Path:
    """Write text and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestCheck:
    """Tests for the check subcommand."""

    def test_clean_file_exits_zero(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """No diagnostics: exit 0 and a zero summary."""
        write(project / "ok.osp", CLEAN)

        code = main(["check", "ok.osp"])

        assert code == 0
        assert capsys.readouterr().out == "0 error(s), 0 warning(s) in 1 file(s)\n"

    def test_errors_exit_one(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Error diagnostics give exit 1, one line each."""
        write(project / "bad.osp", DIRTY)

        code = main(["check", "bad.osp"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 1
        assert lines == [
            "bad.osp:1:7: error: type name 'widget' must be UpperCamelCase [type-name-casing]",
            "bad.osp:2:15: error: trailing whitespace [trailing-whitespace]",
            "2 error(s), 0 warning(s) in 1 file(s)",
        ]

    def test_warnings_exit_zero(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Warnings alone do not fail the run."""
        write(project / "long.osp", "var size = 100000;\n")

        code = main(["check", "long.osp", "--max-line-length", "10"])

        assert code == 0
        assert "warning: line is 18 characters long (limit 10)" in capsys.readouterr().out

    def test_directory_scan(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Directories are scanned for .osp files."""
        write(project / "src" / "a.osp", CLEAN)
        write(project / "src" / "b.osp", DIRTY)
        write(project / "src" / "notes.txt", DIRTY)

        code = main(["check", "src", "--jobs", "2"])

        assert code == 1
        assert "in 2 file(s)" in capsys.readouterr().out

    def test_json_format(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--format json writes a JSON document."""
        write(project / "bad.osp", DIRTY)

        main(["check", "bad.osp", "--format", "json"])

        data = json.loads(capsys.readouterr().out)
        assert data["passed"] is False
        assert data["summary"]["error_count"] == 2

    def test_rich_format(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--format rich renders the console report."""
        write(project / "bad.osp", DIRTY)

        code = main(["check", "bad.osp", "--format", "rich", "--group", "rule"])

        assert code == 1
        out = capsys.readouterr().out
        assert "OSPREY LINT" in out
        assert "FAILED" in out

    def test_discovered_config(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """The nearest .ospreylint.json is used."""
        write(project / ".ospreylint.json", json.dumps({"rules": {"type-name-casing": False}}))
        write(project / "bad.osp", DIRTY)

        main(["check", "bad.osp"])

        out = capsys.readouterr().out
        assert "type-name-casing" not in out
        assert "trailing-whitespace" in out

    def test_explicit_config(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--config overrides discovery; severities apply."""
        config = {"rules": {"trailing-whitespace": {"severity": "warning"}, "type-name-casing": False}}
        write(project / "conf" / "style.json", json.dumps(config))
        write(project / "bad.osp", DIRTY)

        code = main(["check", "bad.osp", "--config", "conf/style.json"])

        assert code == 0
        assert "warning: trailing whitespace" in capsys.readouterr().out

    def test_lex_error_is_reported(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unterminated constructs become a lex-error diagnostic."""
        write(project / "broken.osp", 'var s = "open\n')

        code = main(["check", "broken.osp"])

        assert code == 1
        assert "broken.osp:1:9: error: unterminated string literal [lex-error]" in capsys.readouterr().out


class TestErrors:
    """Tests for error exits."""

    def test_missing_path(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing path exits 2 with a message."""
        code = main(["check", "missing.osp"])

        assert code == 2
        assert "ospreylint: error: Failed to read missing.osp" in capsys.readouterr().err

    def test_invalid_config(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Malformed configuration exits 2."""
        write(project / ".ospreylint.json", "{not json")
        write(project / "ok.osp", CLEAN)

        assert main(["check", "ok.osp"]) == 2
        assert "invalid JSON" in capsys.readouterr().err

    def test_unknown_rule_in_config(self, project: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Unknown rule ids exit 2 before any file is read."""
        write(project / ".ospreylint.json", json.dumps({"rules": {"tabs": False}}))

        assert main(["check", "never-read.osp"]) == 2
        assert "Invalid rule 'tabs': unknown rule id" in capsys.readouterr().err

    def test_invalid_jobs(self, project: Path) -> None:
        """--jobs 0 is a usage error."""
        with pytest.raises(SystemExit) as info:
            main(["check", ".", "--jobs", "0"])

        assert info.value.code == 2

    def test_missing_subcommand(self) -> None:
        """A subcommand is required."""
        with pytest.raises(SystemExit) as info:
            main([])

        assert info.value.code == 2


class TestRules:
    """Tests for the rules subcommand."""

    def test_lists_every_rule(self, capsys: pytest.CaptureFixture[str]) -> None:
        """One line per rule with severity and description."""
        assert main(["rules"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 13
        assert lines[0].startswith("max-line-length")
        assert "warning" in lines[0]
        assert lines[-1].split()[:2] == ["backing-field-underscore", "error"]

    def test_verbose_flag_before_subcommand(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Global flags may precede the subcommand."""
        assert main(["-v", "rules"]) == 0
