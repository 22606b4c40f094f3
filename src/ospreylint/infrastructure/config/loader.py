"""JSON configuration loader.

Reads `.ospreylint.json` style files into a RuleConfiguration:

    {
      "max_line_length": 120,
      "rules": {
        "multiple-blank-lines": {"enabled": false},
        "trailing-whitespace": {"severity": "warning"}
      }
    }

Only the shape is validated here. Whether rule ids exist is checked by
the rule registry before any file is analysed.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ospreylint.domain.exceptions.configuration import ConfigurationError
from ospreylint.domain.model.configuration import (
    DEFAULT_MAX_LINE_LENGTH,
    RuleConfiguration,
    RuleSetting,
)
from ospreylint.domain.model.enums import Severity

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".ospreylint.json"

_TOP_LEVEL_KEYS = frozenset({"max_line_length", "rules"})
_SETTING_KEYS = frozenset({"enabled", "severity"})
_SEVERITIES = {s.value: s for s in Severity}


def load_configuration(path: Path) -> RuleConfiguration:
    """Load and validate a configuration file.

    Args:
        path: JSON configuration file

    Returns:
        Resolved configuration

    Raises:
        ConfigurationError: File unreadable, not JSON, or wrongly shaped
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(path, e.strerror or str(e)) from e
    except UnicodeDecodeError as e:
        raise ConfigurationError(path, "not valid UTF-8") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(path, f"invalid JSON: {e.msg} at line {e.lineno}") from e

    config = parse_configuration(raw, path)
    logger.debug(
        f"Loaded configuration from {path}: {len(config.rules)} rule settings, "
        f"max_line_length={config.max_line_length}"
    )
    return config


def parse_configuration(raw: Any, path: Path) -> RuleConfiguration:
    """Build a RuleConfiguration from decoded JSON.

    Args:
        raw: Decoded JSON document
        path: Source of the document (for error messages)

    Raises:
        ConfigurationError: Document is wrongly shaped
    """
    if not isinstance(raw, dict):
        raise ConfigurationError(path, "configuration must be a JSON object")

    unknown = sorted(set(raw) - _TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigurationError(path, f"unknown keys: {', '.join(unknown)}")

    max_line_length = _expect(raw, "max_line_length", int, "configuration", path, DEFAULT_MAX_LINE_LENGTH)
    # bool is an int subclass
    if isinstance(max_line_length, bool) or max_line_length < 1:
        raise ConfigurationError(path, "max_line_length must be a positive integer")

    raw_rules = _expect(raw, "rules", dict, "configuration", path, {})
    rules: dict[str, RuleSetting] = {}
    for rule_id, raw_setting in raw_rules.items():
        where = f"rules.{rule_id}"
        rules[rule_id] = _parse_setting(raw_setting, where, path)

    return RuleConfiguration(rules=rules, max_line_length=max_line_length)


def discover_config(start: Path) -> Path | None:
    """Find the nearest configuration file at or above start.

    Args:
        start: Directory (or file) to begin the upward search from

    Returns:
        Path of the first CONFIG_FILENAME found, None if there is none
    """
    current = start.resolve()
    if not current.is_dir():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug(f"Found configuration {candidate}")
            return candidate
    return None


def _parse_setting(raw: Any, where: str, path: Path) -> RuleSetting:
    # `"rule-id": false` is shorthand for disabling
    if isinstance(raw, bool):
        return RuleSetting(enabled=raw)
    if not isinstance(raw, dict):
        raise ConfigurationError(path, f"{where} must be an object or boolean")

    unknown = sorted(set(raw) - _SETTING_KEYS)
    if unknown:
        raise ConfigurationError(path, f"{where} has unknown keys: {', '.join(unknown)}")

    enabled = _expect(raw, "enabled", bool, where, path, True)
    severity_name = _expect(raw, "severity", str, where, path, None)
    severity = None
    if severity_name is not None:
        if severity_name not in _SEVERITIES:
            raise ConfigurationError(path, f"{where}.severity must be one of error|warning")
        severity = _SEVERITIES[severity_name]
    return RuleSetting(enabled=enabled, severity=severity)


def _expect(d: dict[str, Any], key: str, typ: type, where: str, path: Path, default: Any) -> Any:
    if key not in d:
        return default
    v = d[key]
    if not isinstance(v, typ):
        raise ConfigurationError(path, f"key '{key}' in {where} must be {typ.__name__}")
    return v
