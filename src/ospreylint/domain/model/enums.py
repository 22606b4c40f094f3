"""Domain enumerations."""

from enum import Enum


class TokenKind(Enum):
    """Lexical token kind.

    Values are the names used in rendered output and JSON.
    """

    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    PUNCTUATION = "punctuation"
    NUMBER_LITERAL = "numberLiteral"
    STRING_LITERAL = "stringLiteral"
    COMMENT = "comment"
    WHITESPACE = "whitespace"
    NEWLINE = "newline"


class DeclarationCategory(Enum):
    """Kind of declaration found by the boundary detector."""

    TYPE = "type"
    METHOD = "method"
    PROPERTY = "property"
    FIELD = "field"
    ENUM_VALUE = "enumValue"
    OPERATOR_OVERLOAD = "operatorOverload"
    ITERATOR = "iterator"


class Visibility(Enum):
    """Declaration visibility by modifier keyword."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"  # no modifier


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = "error"  # affects exit status
    WARNING = "warning"  # reported only


class LintStatus(Enum):
    """Outcome of linting one file."""

    CLEAN = "clean"
    VIOLATIONS_FOUND = "violations found"
