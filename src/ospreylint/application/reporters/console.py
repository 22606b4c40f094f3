"""Console reporter: LintResult → rich formatted output."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.markup import escape

from ospreylint.application.reporters._base import BaseReporter, summary_line
from ospreylint.application.reporters.strategies import (
    ByFileStrategy,
    GroupStrategy,
)
from ospreylint.domain.model.enums import Severity

if TYPE_CHECKING:
    from ospreylint.application.reporters.strategies import Entry
    from ospreylint.domain.model.lint_result import LintResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        show_clean_files: List files without diagnostics.
        max_diagnostics: Max diagnostics to display. None = unlimited.
        min_severity: Hide WARNING diagnostics when set to ERROR.
        group_by: Strategy for grouping diagnostics. None = ByFileStrategy().
        width: Console width in characters.
    """

    show_clean_files: bool = False
    max_diagnostics: int | None = None
    min_severity: Severity = Severity.WARNING
    group_by: GroupStrategy | None = None
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.max_diagnostics is not None and self.max_diagnostics < 0:
            raise ValueError(f"max_diagnostics must be >= 0, got {self.max_diagnostics}")
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    render() returns the text; report() writes it to the output stream.
    """

    def __init__(self, output: TextIO | None = None, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            config: Reporter configuration. Uses defaults if None.
        """
        self._output = output if output is not None else sys.stdout
        self._config = config or ConsoleConfig()

    def report(self, result: LintResult) -> None:
        """Report lint results as rich formatted text.

        Args:
            result: Complete lint result
        """
        self._output.write(self.render(result))

    def render(self, result: LintResult) -> str:
        """Format lint result as rich formatted string.

        Args:
            result: Lint result to format.

        Returns:
            Formatted string with colors and tables.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        entries = self._filter(result)

        self._render_header(console, result)
        if entries:
            strategy = self._config.group_by or ByFileStrategy()
            strategy.render(console, strategy.group(entries))
        if self._config.show_clean_files:
            self._render_clean(console, result)
        self._render_footer(console, result, shown=len(entries))

        return output.getvalue()

    def _filter(self, result: LintResult) -> tuple[Entry, ...]:
        """Apply severity and count limits. Only explicit config filters applied."""
        entries: list[Entry] = []
        for report, diagnostic in result.iter_diagnostics():
            limit = self._config.max_diagnostics
            if limit is not None and len(entries) >= limit:
                break
            if self._config.min_severity is Severity.ERROR and not diagnostic.is_error:
                continue
            entries.append((report, diagnostic))
        return tuple(entries)

    def _render_header(self, console: Console, result: LintResult) -> None:
        """Render header rule."""
        console.print()
        console.rule("[bold]OSPREY LINT[/bold]")
        console.print()
        console.print(
            f"[bold]Files:[/bold] {result.stats.files_checked}  "
            f"[bold]Rules:[/bold] {result.stats.rules_run}"
        )
        console.print()

    def _render_clean(self, console: Console, result: LintResult) -> None:
        """Render list of files without diagnostics."""
        clean = [r for r in result.reports if r.passed]
        if not clean:
            return
        console.print(f"[bold green]CLEAN[/bold green] ({len(clean)})")
        for report in clean:
            console.print(f"  {escape(str(report.path))}")
        console.print()

    def _render_footer(self, console: Console, result: LintResult, *, shown: int) -> None:
        """Render summary rule."""
        if result.exit_code == 0:
            status = "[bold green]PASSED[/bold green]"
        else:
            status = "[bold red]FAILED[/bold red]"
        console.rule(status)
        hidden = result.diagnostic_count - shown
        suffix = f" ({hidden} not shown)" if hidden else ""
        console.print(f"{summary_line(result)}{suffix}")
