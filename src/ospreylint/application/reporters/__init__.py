"""Reporters for lint results.

PlainTextReporter and JSONReporter use stdlib only;
ConsoleReporter renders with rich.
"""

from ospreylint.application.reporters._base import BaseReporter, summary_line
from ospreylint.application.reporters.console import ConsoleConfig, ConsoleReporter
from ospreylint.application.reporters.json_reporter import JSONReporter
from ospreylint.application.reporters.plain_text import PlainTextReporter, format_diagnostic
from ospreylint.application.reporters.strategies import (
    ByFileStrategy,
    ByRuleStrategy,
    GroupStrategy,
)

__all__ = [
    "BaseReporter",
    "PlainTextReporter",
    "JSONReporter",
    "ConsoleReporter",
    "ConsoleConfig",
    "GroupStrategy",
    "ByFileStrategy",
    "ByRuleStrategy",
    "format_diagnostic",
    "summary_line",
]
