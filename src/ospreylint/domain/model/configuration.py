"""Rule configuration for a lint run.

Loaded once per run by the caller and passed explicitly into the pipeline.
Nothing in the pipeline mutates it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ospreylint.domain.model.enums import Severity

DEFAULT_MAX_LINE_LENGTH = 120


@dataclass(frozen=True, slots=True)
class RuleSetting:
    """Per-rule setting.

    Attributes:
        enabled: False skips the rule entirely
        severity: Severity override. None = rule default.
    """

    enabled: bool = True
    severity: Severity | None = None


_DEFAULT_SETTING = RuleSetting()


@dataclass(frozen=True, slots=True)
class RuleConfiguration:
    """Resolved configuration DTO.

    Rules absent from `rules` are enabled with their default severity.

    Attributes:
        rules: Rule id → setting mapping (read-only view)
        max_line_length: Soft limit used by the line length rule
    """

    rules: Mapping[str, RuleSetting] = field(default_factory=dict)
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.rules is None:
            raise TypeError("rules must not be None")
        if self.max_line_length < 1:
            raise ValueError(f"max_line_length must be >= 1, got {self.max_line_length}")
        for rule_id, setting in self.rules.items():
            if not rule_id:
                raise ValueError("rule ids must not be empty")
            if not isinstance(setting, RuleSetting):
                raise TypeError(f"setting for '{rule_id}' must be a RuleSetting")
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))

    def setting_for(self, rule_id: str) -> RuleSetting:
        """Get the setting for a rule (default when not configured)."""
        return self.rules.get(rule_id, _DEFAULT_SETTING)

    def is_enabled(self, rule_id: str) -> bool:
        """Check if rule should run."""
        return self.setting_for(rule_id).enabled

    def severity_for(self, rule_id: str, default: Severity) -> Severity:
        """Resolve effective severity for a rule."""
        override = self.setting_for(rule_id).severity
        return default if override is None else override

    @classmethod
    def default(cls) -> RuleConfiguration:
        """All rules enabled with default severities."""
        return cls()
