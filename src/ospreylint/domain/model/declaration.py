"""Declaration span entity."""

from __future__ import annotations

from dataclasses import dataclass

from ospreylint.domain.model.enums import DeclarationCategory, Visibility
from ospreylint.domain.model.token import Token


@dataclass(frozen=True, slots=True)
class DeclarationSpan:
    """Textual boundary of one declaration.

    Attributes:
        category: What kind of declaration this is
        name_token: Token carrying the declared name (the operator for overloads)
        start_token: First token, including modifiers
        end_token: Last token (closing brace, semicolon or last value token)
        visibility: Visibility from modifiers (PRIVATE when none given)
        depth: Nesting level, 0 at top level
        modifiers: Modifier and declaration keywords seen before the name
        parent_index: Index of the enclosing type span, None at top level
    """

    category: DeclarationCategory
    name_token: Token
    start_token: Token
    end_token: Token
    visibility: Visibility
    depth: int = 0
    modifiers: frozenset[str] = frozenset()
    parent_index: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.depth < 0:
            raise ValueError(f"depth must be >= 0, got {self.depth}")
        if self.end_token.offset < self.start_token.offset:
            raise ValueError("end_token must not precede start_token")
        if not self.start_token.offset <= self.name_token.offset <= self.end_token.offset:
            raise ValueError("name_token must lie within the span")
        if self.parent_index is not None and self.parent_index < 0:
            raise ValueError(f"parent_index must be >= 0, got {self.parent_index}")

    @property
    def name(self) -> str:
        """Declared name."""
        return self.name_token.text

    @property
    def start_line(self) -> int:
        """Line of the first token."""
        return self.start_token.start_line

    @property
    def end_line(self) -> int:
        """Line of the last character of the last token."""
        return self.end_token.end_line

    @property
    def is_constant(self) -> bool:
        """True for `const` fields."""
        return "const" in self.modifiers

    def contains(self, token: Token) -> bool:
        """Check if token lies within this span."""
        return self.start_token.offset <= token.offset <= self.end_token.offset
