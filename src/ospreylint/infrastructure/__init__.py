"""ospreylint infrastructure layer.

Tokenizer, declaration detector and configuration loading.
Depends on domain only.
"""

from ospreylint.infrastructure.config import discover_config, load_configuration
from ospreylint.infrastructure.declarations import detect_declarations
from ospreylint.infrastructure.lexer import Tokenizer, tokenize

__all__ = [
    "Tokenizer",
    "tokenize",
    "detect_declarations",
    "load_configuration",
    "discover_config",
]
