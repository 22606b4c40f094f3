"""Source discovery."""

from ospreylint.application.discovery.files import (
    DEFAULT_EXCLUDES,
    OSPREY_EXTENSIONS,
    discover_sources,
)

__all__ = [
    "DEFAULT_EXCLUDES",
    "OSPREY_EXTENSIONS",
    "discover_sources",
]
