"""Osprey tokenizer."""

from ospreylint.infrastructure.lexer.tokenizer import (
    KEYWORDS,
    OPERATORS,
    WORD_OPERATORS,
    Tokenizer,
    tokenize,
)

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "WORD_OPERATORS",
    "Tokenizer",
    "tokenize",
]
