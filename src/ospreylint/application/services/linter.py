"""Main facade for linting Osprey sources.

Linter is the primary entry point: it resolves the enabled rules once,
then runs the per-file pipeline (tokenizer → declaration detector →
rules) over sources, files or whole file lists.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import TYPE_CHECKING

from ospreylint.application.rules import enabled_rules
from ospreylint.application.services.engine import needs_spans, run_rules
from ospreylint.domain.exceptions.lexing import LexError
from ospreylint.domain.exceptions.source import SourceReadError
from ospreylint.domain.model.configuration import RuleConfiguration
from ospreylint.domain.model.diagnostic import Diagnostic
from ospreylint.domain.model.enums import Severity
from ospreylint.domain.model.file_report import FileReport
from ospreylint.domain.model.lint_result import LintResult
from ospreylint.domain.model.lint_stats import LintStats
from ospreylint.infrastructure.declarations import detect_declarations
from ospreylint.infrastructure.lexer import tokenize

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

LEX_ERROR = "lex-error"
SOURCE_PATH = Path("<source>")


class Linter:
    """Lints Osprey sources against a fixed configuration.

    The configuration is resolved once at construction; unknown rule ids
    fail here, before any file is analysed. Files share no state, so
    multi-file runs are spread over a thread pool.

    Example:
        linter = Linter(load_configuration(Path(".ospreylint.json")), jobs=4)
        result = linter.lint_paths(discover_sources([Path("src")]))
        if not result.passed:
            print(f"Diagnostics: {result.diagnostic_count}")
    """

    def __init__(
        self,
        config: RuleConfiguration | None = None,
        *,
        jobs: int = 1,
        reporter: ReporterProtocol | None = None,
    ) -> None:
        """Initialize linter.

        Args:
            config: Rule configuration (all rules with defaults if None)
            jobs: Worker threads for multi-file runs
            reporter: Optional reporter invoked by lint_paths

        Raises:
            RuleConfigurationError: config names an unknown rule
        """
        if jobs < 1:
            raise ValueError(f"jobs must be >= 1, got {jobs}")
        self._config = config or RuleConfiguration.default()
        self._rules = enabled_rules(self._config)
        self._needs_spans = needs_spans(self._rules)
        self._jobs = jobs
        self._reporter = reporter

    @property
    def config(self) -> RuleConfiguration:
        """Configuration every file is checked against."""
        return self._config

    @property
    def rule_ids(self) -> tuple[str, ...]:
        """Ids of the enabled rules, in registry order."""
        return tuple(rule_id for rule_id, _ in self._rules)

    def lint_source(self, source: str, path: Path = SOURCE_PATH) -> FileReport:
        """Lint source text.

        Args:
            source: Osprey source text
            path: Path reported for the source

        Returns:
            Sorted diagnostics for the source. An unterminated string or
            comment yields a single lex-error diagnostic.
        """
        if not self._rules:
            return FileReport(path=path)

        try:
            tokens = tokenize(source)
        except LexError as e:
            logger.debug(f"Cannot tokenize {path}: {e}")
            return FileReport(
                path=path,
                diagnostics=(
                    Diagnostic(
                        rule_id=LEX_ERROR,
                        severity=Severity.ERROR,
                        message=e.reason,
                        line=e.line,
                        column=e.column,
                    ),
                ),
            )

        spans = detect_declarations(tokens) if self._needs_spans else ()
        diagnostics = run_rules(tokens, self._rules, self._config, spans)
        logger.debug(
            f"{path}: {len(tokens)} tokens, {len(spans)} declarations, "
            f"{len(diagnostics)} diagnostics"
        )
        return FileReport.from_unordered(path, diagnostics)

    def lint_file(self, path: Path) -> FileReport:
        """Read and lint one file.

        Raises:
            SourceReadError: File missing, unreadable or not UTF-8
        """
        return self.lint_source(read_source(path), path)

    def lint_paths(self, paths: Sequence[Path]) -> LintResult:
        """Lint files and collect a result in input order.

        Reports the result if a reporter is configured.

        Args:
            paths: Files to lint

        Returns:
            LintResult with one report per path

        Raises:
            SourceReadError: A file cannot be read
        """
        start_time = time.perf_counter()
        logger.info(f"Linting {len(paths)} files with {len(self._rules)} rules ({self._jobs} jobs)")

        if self._jobs == 1 or len(paths) < 2:
            reports = tuple(self.lint_file(p) for p in paths)
        else:
            with ThreadPoolExecutor(max_workers=self._jobs) as pool:
                reports = tuple(pool.map(self.lint_file, paths))

        end_time = time.perf_counter()
        result = LintResult(
            reports=reports,
            stats=LintStats(
                files_checked=len(reports),
                rules_run=len(self._rules),
                analysis_time_ms=(end_time - start_time) * 1000,
            ),
        )
        logger.info(
            f"Found {result.error_count} errors and {result.warning_count} warnings "
            f"in {result.stats.analysis_time_ms:.1f} ms"
        )

        if self._reporter is not None:
            self._reporter.report(result)

        return result


def read_source(path: Path) -> str:
    """Read a file as UTF-8 text, keeping line endings as they are.

    Raises:
        SourceReadError: File missing, unreadable or not UTF-8
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise SourceReadError(path, e.strerror or str(e)) from e
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SourceReadError(path, f"not valid UTF-8 at byte {e.start}") from e


def lint_source(
    source: str,
    config: RuleConfiguration | None = None,
    path: Path = SOURCE_PATH,
) -> FileReport:
    """Lint source text with a one-off Linter (library mode).

    Args:
        source: Osprey source text
        config: Rule configuration (defaults if None)
        path: Path reported for the source

    Returns:
        Sorted diagnostics for the source
    """
    return Linter(config).lint_source(source, path)
