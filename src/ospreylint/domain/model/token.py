"""Lexical token value object."""

from dataclasses import dataclass

from ospreylint.domain.model.enums import TokenKind

_TRIVIA = frozenset({TokenKind.WHITESPACE, TokenKind.NEWLINE, TokenKind.COMMENT})


@dataclass(frozen=True, slots=True)
class Token:
    """One lexical token of an Osprey source file.

    Positions are 1-based and count characters (a tab is one column).
    The end position is the position of the last character, so both ends
    always exist in the source text.

    Attributes:
        kind: Token kind
        text: Exact source text (never empty)
        start_line: Line of the first character
        start_column: Column of the first character
        end_line: Line of the last character
        end_column: Column of the last character
        offset: 0-based character offset of the first character
    """

    kind: TokenKind
    text: str
    start_line: int
    start_column: int
    end_line: int
    end_column: int
    offset: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.text:
            raise ValueError("text must not be empty")
        if self.start_line <= 0:
            raise ValueError(f"start_line must be > 0, got {self.start_line}")
        if self.start_column <= 0:
            raise ValueError(f"start_column must be > 0, got {self.start_column}")
        if self.end_line < self.start_line:
            raise ValueError(
                f"end_line ({self.end_line}) must be >= start_line ({self.start_line})"
            )
        if self.end_line == self.start_line and self.end_column < self.start_column:
            raise ValueError(
                f"end_column ({self.end_column}) must be >= start_column ({self.start_column})"
            )
        if self.offset < 0:
            raise ValueError(f"offset must be >= 0, got {self.offset}")

    @property
    def end_offset(self) -> int:
        """Offset just past the last character."""
        return self.offset + len(self.text)

    @property
    def is_trivia(self) -> bool:
        """True for whitespace, newlines and comments."""
        return self.kind in _TRIVIA

    @property
    def is_significant(self) -> bool:
        """True for tokens that carry program structure."""
        return self.kind not in _TRIVIA

    @property
    def has_tab(self) -> bool:
        """True if a whitespace token contains a tab."""
        return self.kind is TokenKind.WHITESPACE and "\t" in self.text

    @property
    def has_space(self) -> bool:
        """True if a whitespace token contains a space."""
        return self.kind is TokenKind.WHITESPACE and " " in self.text

    def is_punct(self, *texts: str) -> bool:
        """True if this is a punctuation token with one of texts."""
        return self.kind is TokenKind.PUNCTUATION and self.text in texts

    def is_keyword(self, *texts: str) -> bool:
        """True if this is a keyword token with one of texts."""
        return self.kind is TokenKind.KEYWORD and self.text in texts

    def __str__(self) -> str:
        """Format as kind 'text' @line:column."""
        return f"{self.kind.value} {self.text!r} @{self.start_line}:{self.start_column}"
