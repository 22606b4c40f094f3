"""Source reading exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ospreylint.domain.exceptions.base import OspreyLintError

if TYPE_CHECKING:
    from pathlib import Path


class SourceReadError(OspreyLintError):
    """Source file cannot be read as UTF-8 text.

    Attributes:
        path: File that failed to read
        reason: Why reading failed
    """

    def __init__(self, path: Path, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")
