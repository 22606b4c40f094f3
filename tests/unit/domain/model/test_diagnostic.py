"""Tests for domain/model/diagnostic.py."""

import pytest

from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import Severity
from tests.factories import make_diagnostic


class TestDiagnostic:
    """Tests for Diagnostic."""

    def test_str_format(self) -> None:
        """Formats as line:column: severity: message [rule]."""
        diagnostic = make_diagnostic(line=12, column=5)

        assert str(diagnostic) == "12:5: error: trailing whitespace [trailing-whitespace]"

    def test_sort_key_orders_by_position_then_rule(self) -> None:
        """Sorting is by line, column, then rule id."""
        a = make_diagnostic("b-rule", line=2, column=1)
        b = make_diagnostic("a-rule", line=2, column=1)
        c = make_diagnostic("a-rule", line=1, column=9)

        assert sorted([a, b, c], key=lambda d: d.sort_key) == [c, b, a]

    def test_is_error(self) -> None:
        """is_error follows severity."""
        assert make_diagnostic().is_error
        assert not make_diagnostic(severity=Severity.WARNING).is_error

    def test_zero_line_fails(self) -> None:
        """Line 0 raises ValueError."""
        with pytest.raises(ValueError, match="line must be > 0"):
            Diagnostic("rule", Severity.ERROR, "message", 0, 1)

    def test_zero_column_fails(self) -> None:
        """Column 0 raises ValueError."""
        with pytest.raises(ValueError, match="column must be > 0"):
            Diagnostic("rule", Severity.ERROR, "message", 1, 0)

    def test_empty_rule_id_fails(self) -> None:
        """Empty rule id raises ValueError."""
        with pytest.raises(ValueError, match="rule_id must not be empty"):
            Diagnostic("", Severity.ERROR, "message", 1, 1)

    def test_empty_message_fails(self) -> None:
        """Empty message raises ValueError."""
        with pytest.raises(ValueError, match="message must not be empty"):
            Diagnostic("rule", Severity.ERROR, "", 1, 1)
