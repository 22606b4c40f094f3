"""Lexing exceptions."""

from ospreylint.domain.exceptions.base import OspreyLintError


class LexError(OspreyLintError):
    """Source text cannot be tokenized.

    Raised for unterminated string literals and block comments.
    Aborts analysis of the affected file only.

    Attributes:
        reason: What is malformed
        line: Line where the malformed construct starts (1-based)
        column: Column where the malformed construct starts (1-based)
    """

    def __init__(self, reason: str, line: int, column: int) -> None:
        # FAIL-FIRST validation
        if not reason:
            raise ValueError("reason must not be empty")
        if line <= 0:
            raise ValueError(f"line must be > 0, got {line}")
        if column <= 0:
            raise ValueError(f"column must be > 0, got {column}")

        self.reason = reason
        self.line = line
        self.column = column
        super().__init__(f"{reason} at {line}:{column}")
