"""Command line interface.

    ospreylint check PATH... [--config FILE] [--format text|json|rich]
                             [--jobs N] [--extensions .osp,...]
                             [--max-line-length N] [--group file|rule]
    ospreylint rules

Exit status: 0 when no error diagnostics were produced, 1 when some
were, 2 for usage, configuration and read errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler

from ospreylint.application.discovery import OSPREY_EXTENSIONS, discover_sources
from ospreylint.application.reporters import (
    ByFileStrategy,
    ByRuleStrategy,
    ConsoleConfig,
    ConsoleReporter,
    JSONReporter,
    PlainTextReporter,
)
from ospreylint.application.rules import DEFAULT_SEVERITIES, RULE_DESCRIPTIONS, RULES
from ospreylint.application.services import Linter
from ospreylint.domain.exceptions.base import OspreyLintError
from ospreylint.domain.model.configuration import RuleConfiguration
from ospreylint.infrastructure.config import discover_config, load_configuration

if TYPE_CHECKING:
    from ospreylint.domain.ports.reporter import ReporterProtocol

logger = logging.getLogger(__name__)

EXIT_USAGE = 2

FORMATS = ("text", "json", "rich")


def _build_global_parser() -> argparse.ArgumentParser:
    gp = argparse.ArgumentParser(add_help=False)
    gp.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    return gp


def _build_parser() -> argparse.ArgumentParser:
    # Global flags are pre-parsed so they may appear before or after the subcommand
    p = argparse.ArgumentParser(
        prog="ospreylint",
        description="Style checker for Osprey source files.",
        parents=[_build_global_parser()],
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help="Check files and report style violations.")
    sp_check.add_argument(
        "paths",
        nargs="+",
        help="Files or directories to check (directories are scanned recursively).",
    )
    sp_check.add_argument(
        "--config",
        help="JSON configuration file (default: nearest .ospreylint.json).",
    )
    sp_check.add_argument(
        "--format",
        default="text",
        choices=FORMATS,
        help="Output format (default: text).",
    )
    sp_check.add_argument(
        "--group",
        default="file",
        choices=("file", "rule"),
        help="Grouping for --format rich (default: file).",
    )
    sp_check.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Files checked in parallel (default: 1).",
    )
    sp_check.add_argument(
        "--extensions",
        default=",".join(OSPREY_EXTENSIONS),
        help="Comma-separated extensions to scan in directories (default: .osp).",
    )
    sp_check.add_argument(
        "--max-line-length",
        type=int,
        help="Override the configured line length limit.",
    )

    sub.add_parser("rules", help="List rule ids, default severities and descriptions.")
    return p


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr through rich.

    Args:
        verbosity: 0 warnings only, 1 info, 2 or more debug
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    root = logging.getLogger("ospreylint")
    root.handlers.clear()
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(level)


def main(argv: list[str] | None = None) -> int:
    gp = _build_global_parser()
    global_args, remaining = gp.parse_known_args(argv)

    parser = _build_parser()
    args = parser.parse_args(remaining)
    args.verbose += global_args.verbose

    configure_logging(args.verbose)

    if args.cmd == "rules":
        return _list_rules()

    if args.jobs < 1:
        parser.error("--jobs must be >= 1")
    if args.max_line_length is not None and args.max_line_length < 1:
        parser.error("--max-line-length must be >= 1")

    exts = tuple(
        e.strip() if e.strip().startswith(".") else f".{e.strip()}"
        for e in str(args.extensions).split(",")
        if e.strip()
    )
    if not exts:
        parser.error("--extensions must name at least one extension")

    try:
        return _check(args, exts)
    except OspreyLintError as e:
        logger.debug("Aborted", exc_info=True)
        sys.stderr.write(f"ospreylint: error: {e}\n")
        return EXIT_USAGE


def _check(args: argparse.Namespace, exts: tuple[str, ...]) -> int:
    config = _resolve_config(args)
    linter = Linter(config, jobs=args.jobs, reporter=_reporter(args))
    paths = discover_sources([Path(p) for p in args.paths], extensions=exts)
    result = linter.lint_paths(paths)
    return result.exit_code


def _resolve_config(args: argparse.Namespace) -> RuleConfiguration:
    if args.config:
        config = load_configuration(Path(args.config))
    else:
        found = discover_config(Path.cwd())
        config = load_configuration(found) if found is not None else RuleConfiguration.default()

    if args.max_line_length is not None:
        config = replace(config, max_line_length=args.max_line_length)
    return config


def _reporter(args: argparse.Namespace) -> ReporterProtocol:
    if args.format == "json":
        return JSONReporter(sys.stdout)
    if args.format == "rich":
        strategy = ByRuleStrategy() if args.group == "rule" else ByFileStrategy()
        return ConsoleReporter(sys.stdout, ConsoleConfig(group_by=strategy))
    return PlainTextReporter(sys.stdout)


def _list_rules() -> int:
    width = max(len(rule_id) for rule_id in RULES)
    for rule_id in RULES:
        severity = DEFAULT_SEVERITIES[rule_id].value
        sys.stdout.write(f"{rule_id:<{width}}  {severity:<7}  {RULE_DESCRIPTIONS[rule_id]}\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
