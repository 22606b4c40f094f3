"""Tests for rules/whitespace.py.

Tests:
- max-line-length soft limit and string exemption
- indentation-tabs
- trailing-whitespace
- final-newline
- multiple-blank-lines
"""

from ospreylint.domain.model.enums import Severity
from tests.factories import only, positions, run_rule


class TestMaxLineLength:
    """Tests for max-line-length."""

    def test_long_line_warns(self) -> None:
        """Anchored at the first column past the limit."""
        config = only("max-line-length", max_line_length=10)

        (diagnostic,) = run_rule("max-line-length", "var abc = 12345;\n", config)

        assert (diagnostic.line, diagnostic.column) == (1, 11)
        assert diagnostic.severity is Severity.WARNING
        assert diagnostic.message == "line is 16 characters long (limit 10)"

    def test_line_at_limit_passes(self) -> None:
        """Exactly max_line_length characters is fine."""
        config = only("max-line-length", max_line_length=10)

        assert run_rule("max-line-length", "var a = 1;\n", config) == ()

    def test_default_limit_is_120(self) -> None:
        """Default configuration allows 120 characters."""
        source = "x" * 120 + "\n" + "y" * 121 + "\n"

        assert positions(run_rule("max-line-length", source)) == [(2, 121)]

    def test_string_pushing_line_over_is_exempt(self) -> None:
        """A string literal spanning the limit does not fire."""
        config = only("max-line-length", max_line_length=10)

        assert run_rule("max-line-length", 'var s = "abcdefghij";\n', config) == ()

    def test_string_before_limit_does_not_exempt(self) -> None:
        """Only a string covering the overflow column exempts the line."""
        config = only("max-line-length", max_line_length=10)

        diagnostics = run_rule("max-line-length", 'f("ab", x + yyyyyyy);\n', config)

        assert positions(diagnostics) == [(1, 11)]


class TestIndentationTabs:
    """Tests for indentation-tabs."""

    def test_tabs_with_alignment_spaces_pass(self) -> None:
        """Tabs, optionally followed by spaces, are valid."""
        source = "class A {\n\tfn f(a,\n\t     b) {}\n}\n"

        assert run_rule("indentation-tabs", source) == ()

    def test_space_indent_fails(self) -> None:
        """Spaces without a tab first are flagged."""
        (diagnostic,) = run_rule("indentation-tabs", "class A {\n    var a;\n}\n")

        assert (diagnostic.line, diagnostic.column) == (2, 1)
        assert diagnostic.message == "spaces only allowed for alignment after tabs"

    def test_space_before_tab_fails(self) -> None:
        """A space followed by a tab is flagged at the space."""
        (diagnostic,) = run_rule("indentation-tabs", "\t \tvar a;\n")

        assert (diagnostic.line, diagnostic.column) == (1, 2)
        assert diagnostic.message == "space before tab in indentation"

    def test_other_whitespace_fails(self) -> None:
        """Form feeds are not indentation."""
        (diagnostic,) = run_rule("indentation-tabs", "\t\fvar a;\n")

        assert diagnostic.column == 2
        assert diagnostic.message == "unexpected whitespace character in indentation"

    def test_blank_lines_are_ignored(self) -> None:
        """Whitespace-only lines are left to trailing-whitespace."""
        assert run_rule("indentation-tabs", "a;\n    \nb;\n") == ()

    def test_block_comment_continuation_is_ignored(self) -> None:
        """Lines inside a multi-line comment have no indentation."""
        assert run_rule("indentation-tabs", "/* a\n    b */\nc;\n") == ()


class TestTrailingWhitespace:
    """Tests for trailing-whitespace."""

    def test_before_newline(self) -> None:
        """Whitespace before a newline is flagged, blank lines included."""
        diagnostics = run_rule("trailing-whitespace", "var a;  \n\t\nb;\n")

        assert positions(diagnostics) == [(1, 7), (2, 1)]
        assert diagnostics[0].message == "trailing whitespace"

    def test_at_end_of_file(self) -> None:
        """Whitespace at end of input is flagged."""
        assert positions(run_rule("trailing-whitespace", "var a; ")) == [(1, 7)]

    def test_inner_whitespace_passes(self) -> None:
        """Whitespace between tokens is not trailing."""
        assert run_rule("trailing-whitespace", "var a = 1;\n") == ()


class TestFinalNewline:
    """Tests for final-newline."""

    def test_exactly_one_newline_passes(self) -> None:
        """One trailing newline is correct."""
        assert run_rule("final-newline", "var a;\n") == ()

    def test_missing_newline(self) -> None:
        """Reported at the last character."""
        (diagnostic,) = run_rule("final-newline", "var a;")

        assert (diagnostic.line, diagnostic.column) == (1, 6)
        assert diagnostic.message == "missing newline at end of file"

    def test_two_newlines_give_one_diagnostic(self) -> None:
        """Extra newlines are reported once, at the first extra one."""
        diagnostics = run_rule("final-newline", "var a;\n\n")

        assert positions(diagnostics) == [(2, 1)]
        assert diagnostics[0].message == "2 newlines at end of file, expected 1"

    def test_whitespace_between_newlines_counts(self) -> None:
        """Whitespace-only trailing lines are extra newlines too."""
        diagnostics = run_rule("final-newline", "var a;\n  \n\n")

        assert positions(diagnostics) == [(2, 3)]
        assert diagnostics[0].message == "3 newlines at end of file, expected 1"

    def test_empty_file_passes(self) -> None:
        """An empty file needs no newline."""
        assert run_rule("final-newline", "") == ()


class TestMultipleBlankLines:
    """Tests for multiple-blank-lines."""

    def test_two_blank_lines(self) -> None:
        """Reported at the second blank line."""
        diagnostics = run_rule("multiple-blank-lines", "a;\n\n\nb;\n")

        assert positions(diagnostics) == [(3, 1)]
        assert diagnostics[0].message == "multiple consecutive blank lines"

    def test_long_run_reported_once(self) -> None:
        """A run of four blank lines is one diagnostic."""
        assert positions(run_rule("multiple-blank-lines", "a;\n\n\n\n\nb;\n")) == [(3, 1)]

    def test_separate_runs(self) -> None:
        """Each run is reported."""
        source = "a;\n\n\nb;\n\n\nc;\n"

        assert positions(run_rule("multiple-blank-lines", source)) == [(3, 1), (6, 1)]

    def test_single_blank_line_passes(self) -> None:
        """One blank line is fine."""
        assert run_rule("multiple-blank-lines", "a;\n\nb;\n") == ()

    def test_blank_lines_in_comment_pass(self) -> None:
        """Empty lines inside a block comment are not blank lines."""
        assert run_rule("multiple-blank-lines", "/*\n\n\n*/\n") == ()
