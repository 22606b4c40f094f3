"""Rule engine: runs enabled rules over one tokenized file."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from ospreylint.application.rules import DEFAULT_SEVERITIES, SOFT_RULES, SPAN_RULES
from ospreylint.domain.model.enums import Severity
from ospreylint.infrastructure.declarations import detect_declarations

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.diagnostic import Diagnostic
    from ospreylint.domain.model.token import Token
    from ospreylint.domain.ports.rule import RuleCheck


def needs_spans(rules: Sequence[tuple[str, RuleCheck]]) -> bool:
    """True if any of the rules consumes declaration spans."""
    return any(rule_id in SPAN_RULES for rule_id, _ in rules)


def run_rules(
    tokens: Sequence[Token],
    rules: Sequence[tuple[str, RuleCheck]],
    config: RuleConfiguration,
    spans: Sequence[DeclarationSpan] | None = None,
) -> tuple[Diagnostic, ...]:
    """Run rules and apply configured severities.

    Args:
        tokens: Complete token sequence of the file
        rules: (rule id, rule function) pairs to run
        config: Run configuration
        spans: Declaration spans; detected on demand when None

    Returns:
        Unordered union of all rule diagnostics
    """
    if spans is None:
        spans = detect_declarations(tokens) if needs_spans(rules) else ()

    diagnostics: list[Diagnostic] = []
    for rule_id, check in rules:
        severity = resolve_severity(rule_id, config)
        for diagnostic in check(tokens, spans, config):
            if diagnostic.severity is not severity:
                diagnostic = replace(diagnostic, severity=severity)
            diagnostics.append(diagnostic)
    return tuple(diagnostics)


def resolve_severity(rule_id: str, config: RuleConfiguration) -> Severity:
    """Effective severity of a rule: override, then default, clamped for soft rules."""
    severity = config.severity_for(rule_id, DEFAULT_SEVERITIES.get(rule_id, Severity.ERROR))
    if rule_id in SOFT_RULES:
        return Severity.WARNING
    return severity
