"""Group strategies for console reporter.

GroupStrategy Protocol defines interface for grouping and rendering diagnostics.
Built-in strategies: ByFileStrategy, ByRuleStrategy.
User can implement custom strategies with same Protocol.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from rich.markup import escape
from rich.table import Table

from ospreylint.domain.model.enums import Severity

if TYPE_CHECKING:
    from rich.console import Console

    from ospreylint.domain.model.diagnostic import Diagnostic
    from ospreylint.domain.model.file_report import FileReport

Entry = tuple["FileReport", "Diagnostic"]

SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
}


class GroupStrategy(Protocol):
    """Protocol for diagnostic grouping and rendering.

    User can implement custom strategies by satisfying this Protocol.
    Built-in strategies are NOT special - same interface, same status.
    """

    def group(self, entries: tuple[Entry, ...]) -> dict[str, list[Entry]]:
        """Group diagnostics by strategy-specific key.

        Args:
            entries: (report, diagnostic) pairs in report order.

        Returns:
            Dict mapping group key to its entries.
        """
        ...

    def render(self, console: Console, grouped: dict[str, list[Entry]]) -> None:
        """Render grouped diagnostics to console.

        Args:
            console: Rich console for output.
            grouped: Diagnostics grouped by key.
        """
        ...


def format_severity(severity: Severity) -> str:
    """Severity as rich markup."""
    style = SEVERITY_STYLES[severity]
    return f"[{style}]{severity.value}[/{style}]"


@dataclass(frozen=True, slots=True)
class ByFileStrategy:
    """Group diagnostics by file, files in input order.

    Attributes:
        show_rule: Show the rule id column.
    """

    show_rule: bool = True

    def group(self, entries: tuple[Entry, ...]) -> dict[str, list[Entry]]:
        """Group diagnostics by file path."""
        by_file: dict[str, list[Entry]] = {}
        for report, diagnostic in entries:
            by_file.setdefault(str(report.path), []).append((report, diagnostic))
        return by_file

    def render(self, console: Console, grouped: dict[str, list[Entry]]) -> None:
        """Render one table per file."""
        for file_path, entries in grouped.items():
            console.print(f"[bold]{escape(file_path)}[/bold] ({len(entries)})")
            table = Table(show_header=False, box=None, padding=(0, 1))
            table.add_column("position", style="cyan")
            table.add_column("severity")
            table.add_column("message")
            if self.show_rule:
                table.add_column("rule", style="dim")

            for _, diagnostic in entries:
                row = [
                    f"{diagnostic.line}:{diagnostic.column}",
                    format_severity(diagnostic.severity),
                    escape(diagnostic.message),
                ]
                if self.show_rule:
                    row.append(diagnostic.rule_id)
                table.add_row(*row)

            console.print(table)
            console.print()


@dataclass(frozen=True, slots=True)
class ByRuleStrategy:
    """Group diagnostics by rule id."""

    def group(self, entries: tuple[Entry, ...]) -> dict[str, list[Entry]]:
        """Group diagnostics by rule id."""
        by_rule: dict[str, list[Entry]] = {}
        for report, diagnostic in entries:
            by_rule.setdefault(diagnostic.rule_id, []).append((report, diagnostic))
        return by_rule

    def render(self, console: Console, grouped: dict[str, list[Entry]]) -> None:
        """Render one table per rule, rules sorted by id."""
        for rule_id, entries in sorted(grouped.items()):
            console.print(f"[bold]{rule_id}[/bold] ({len(entries)})")
            table = Table(show_header=True, header_style="bold", box=None)
            table.add_column("Location", style="cyan")
            table.add_column("Severity")
            table.add_column("Message")

            for report, diagnostic in entries:
                table.add_row(
                    escape(f"{report.path}:{diagnostic.line}:{diagnostic.column}"),
                    format_severity(diagnostic.severity),
                    escape(diagnostic.message),
                )

            console.print(table)
            console.print()
