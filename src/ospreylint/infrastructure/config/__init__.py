"""Configuration file loading."""

from ospreylint.infrastructure.config.loader import (
    CONFIG_FILENAME,
    discover_config,
    load_configuration,
    parse_configuration,
)

__all__ = [
    "CONFIG_FILENAME",
    "discover_config",
    "load_configuration",
    "parse_configuration",
]
