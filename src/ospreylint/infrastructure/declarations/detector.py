"""Declaration boundary detector.

Shallow structural pass over the token stream: finds type, method,
property, field, enum value, operator overload and iterator boundaries
by keyword and brace matching. No expression parsing.

Callable bodies are opaque; only top level and type bodies are scanned
for members, so lambdas and local blocks never become spans. Anything
that cannot be classified confidently is skipped: missing spans are
preferred over wrong ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ospreylint.domain.model.declaration import DeclarationSpan
from ospreylint.domain.model.enums import DeclarationCategory, TokenKind, Visibility

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.token import Token

TYPE_KEYWORDS = frozenset({"class", "struct", "interface", "trait", "enum"})
FIELD_KEYWORDS = frozenset({"var", "let", "const"})
MODIFIERS = frozenset(
    {
        "public",
        "protected",
        "private",
        "static",
        "abstract",
        "override",
        "virtual",
        "readonly",
        "async",
        "extern",
    }
)

_VISIBILITY = {
    "public": Visibility.PUBLIC,
    "protected": Visibility.PROTECTED,
    "private": Visibility.PRIVATE,
}
_CALLABLE_CATEGORY = {
    "fn": DeclarationCategory.METHOD,
    "iterator": DeclarationCategory.ITERATOR,
}
_PAIRS = {"(": ")", "[": "]", "{": "}"}


def detect_declarations(tokens: Sequence[Token]) -> tuple[DeclarationSpan, ...]:
    """Find declaration spans in one file.

    Args:
        tokens: Complete token sequence of the file

    Returns:
        Spans in source order; a type span precedes its members
    """
    detector = _Detector(tuple(t for t in tokens if t.is_significant))
    detector.scan_container(0, len(detector.sig), depth=0, parent=None, in_enum=False)
    return tuple(detector.spans)


def match_brackets(sig: Sequence[Token]) -> dict[int, int]:
    """Map opening bracket index → closing bracket index.

    Mismatched or unclosed brackets get no entry.
    """
    matches: dict[int, int] = {}
    stack: list[tuple[str, int]] = []
    for i, tok in enumerate(sig):
        if tok.kind is not TokenKind.PUNCTUATION:
            continue
        if tok.text in _PAIRS:
            stack.append((tok.text, i))
        elif tok.text in (")", "]", "}") and stack:
            opener, start = stack[-1]
            if _PAIRS[opener] == tok.text:
                stack.pop()
                matches[start] = i
    return matches


class _Detector:
    """Scans significant tokens and collects spans."""

    def __init__(self, sig: tuple[Token, ...]) -> None:
        self.sig = sig
        self.spans: list[DeclarationSpan] = []
        self._matches = match_brackets(sig)

    def scan_container(
        self,
        start: int,
        end: int,
        *,
        depth: int,
        parent: int | None,
        in_enum: bool,
    ) -> None:
        """Scan member declarations in sig[start:end]."""
        i = start
        values_open = in_enum
        while i < end:
            tok = self.sig[i]
            if values_open:
                if tok.is_punct(";"):
                    values_open = False
                    i += 1
                    continue
                if tok.is_punct(","):
                    i += 1
                    continue
                if tok.kind is TokenKind.IDENTIFIER:
                    last = self._value_end(i, end)
                    self._emit(
                        DeclarationCategory.ENUM_VALUE,
                        name=i,
                        start=i,
                        end=last,
                        visibility=Visibility.PUBLIC,
                        depth=depth,
                        modifiers=(),
                        parent=parent,
                    )
                    i = last + 1
                    continue
                values_open = False
            i = self._scan_member(i, end, depth=depth, parent=parent)

    def _scan_member(self, i: int, end: int, *, depth: int, parent: int | None) -> int:
        """Classify the member starting at i. Returns the next index to scan."""
        start = i
        modifiers: list[str] = []
        while i < end and self.sig[i].is_keyword(*MODIFIERS):
            modifiers.append(self.sig[i].text)
            i += 1
        if i >= end:
            return end

        tok = self.sig[i]
        context = _Context(
            start=start,
            keyword=i,
            end=end,
            depth=depth,
            parent=parent,
            modifiers=tuple(modifiers),
        )

        if tok.is_keyword(*TYPE_KEYWORDS):
            return self._type(context)
        if tok.is_keyword(*_CALLABLE_CATEGORY):
            return self._callable(context, _CALLABLE_CATEGORY[tok.text])
        if tok.is_keyword("operator"):
            return self._operator(context)
        if tok.is_keyword("property"):
            return self._property(context)
        if tok.is_keyword(*FIELD_KEYWORDS):
            return self._field(context)
        return self._skip_statement(i, end)

    def _type(self, ctx: _Context) -> int:
        name = ctx.keyword + 1
        if not self._is_identifier(name, ctx.end):
            return self._skip_statement(ctx.keyword, ctx.end)

        opener = None
        j = name + 1
        while j < ctx.end:
            tok = self.sig[j]
            if tok.is_punct(";"):
                return j + 1  # forward declaration
            if tok.is_punct("{"):
                opener = j
                break
            if tok.is_punct("(", "[") and j in self._matches:
                j = self._matches[j]
            j += 1
        if opener is None:
            return ctx.end

        close = self._matches.get(opener)
        if close is None or close >= ctx.end:
            return ctx.end

        index = self._emit(
            DeclarationCategory.TYPE,
            name=name,
            start=ctx.start,
            end=close,
            visibility=_visibility_of(ctx.modifiers),
            depth=ctx.depth,
            modifiers=(*ctx.modifiers, self.sig[ctx.keyword].text),
            parent=ctx.parent,
        )
        self.scan_container(
            opener + 1,
            close,
            depth=ctx.depth + 1,
            parent=index,
            in_enum=self.sig[ctx.keyword].text == "enum",
        )
        return close + 1

    def _callable(self, ctx: _Context, category: DeclarationCategory) -> int:
        name = ctx.keyword + 1
        # `fn(` without a name is a lambda
        if not self._is_identifier(name, ctx.end):
            return self._skip_statement(ctx.keyword, ctx.end)
        return self._with_body(ctx, category, name)

    def _operator(self, ctx: _Context) -> int:
        name = ctx.keyword + 1
        if name >= ctx.end:
            return ctx.end
        tok = self.sig[name]
        if tok.kind is not TokenKind.OPERATOR and not tok.is_punct("[", "("):
            return self._skip_statement(ctx.keyword, ctx.end)
        return self._with_body(ctx, DeclarationCategory.OPERATOR_OVERLOAD, name)

    def _property(self, ctx: _Context) -> int:
        name = ctx.keyword + 1
        if not self._is_identifier(name, ctx.end):
            return self._skip_statement(ctx.keyword, ctx.end)
        return self._with_body(ctx, DeclarationCategory.PROPERTY, name)

    def _field(self, ctx: _Context) -> int:
        name = ctx.keyword + 1
        if not self._is_identifier(name, ctx.end):
            return self._skip_statement(ctx.keyword, ctx.end)

        j = name + 1
        while j < ctx.end:
            tok = self.sig[j]
            if tok.is_punct(";"):
                self._emit(
                    DeclarationCategory.FIELD,
                    name=name,
                    start=ctx.start,
                    end=j,
                    visibility=_visibility_of(ctx.modifiers),
                    depth=ctx.depth,
                    modifiers=(*ctx.modifiers, self.sig[ctx.keyword].text),
                    parent=ctx.parent,
                )
                return j + 1
            if tok.is_punct("(", "[", "{"):
                close = self._matches.get(j)
                if close is None or close >= ctx.end:
                    return ctx.end
                j = close
            j += 1
        return ctx.end

    def _with_body(self, ctx: _Context, category: DeclarationCategory, name: int) -> int:
        """Find the end of a signature followed by `{ body }` or `;`."""
        j = name + 1
        while j < ctx.end:
            tok = self.sig[j]
            if tok.is_punct(";"):
                last = j
                break
            if tok.is_punct("{"):
                close = self._matches.get(j)
                if close is None or close >= ctx.end:
                    return ctx.end
                last = close
                break
            if tok.is_punct("(", "["):
                close = self._matches.get(j)
                if close is None or close >= ctx.end:
                    return ctx.end
                j = close
            j += 1
        else:
            return ctx.end

        self._emit(
            category,
            name=name,
            start=ctx.start,
            end=last,
            visibility=_visibility_of(ctx.modifiers),
            depth=ctx.depth,
            modifiers=(*ctx.modifiers, self.sig[ctx.keyword].text),
            parent=ctx.parent,
        )
        return last + 1

    def _skip_statement(self, i: int, end: int) -> int:
        """Skip one unclassified statement or block."""
        j = i
        while j < end:
            tok = self.sig[j]
            if tok.is_punct(";"):
                return j + 1
            if tok.is_punct("{"):
                close = self._matches.get(j)
                if close is None or close >= end:
                    return end
                # A brace after `=`, `(`, `,` etc. is part of an expression
                if not brace_opens_expression(self.sig[j - 1] if j else None):
                    return close + 1
                j = close
            elif tok.is_punct("(", "["):
                close = self._matches.get(j)
                if close is None or close >= end:
                    return end
                j = close
            elif tok.is_punct(")", "]", "}") and j == i:
                return j + 1  # stray closer
            j += 1
        return end

    def _value_end(self, i: int, end: int) -> int:
        """Index of the last token of the enum value starting at i."""
        j = i
        while j < end:
            tok = self.sig[j]
            if tok.is_punct(",", ";"):
                return j - 1
            if tok.is_punct("(", "[", "{"):
                close = self._matches.get(j)
                if close is None or close >= end:
                    return end - 1
                j = close
            j += 1
        return end - 1

    def _is_identifier(self, i: int, end: int) -> bool:
        return i < end and self.sig[i].kind is TokenKind.IDENTIFIER

    def _emit(
        self,
        category: DeclarationCategory,
        *,
        name: int,
        start: int,
        end: int,
        visibility: Visibility,
        depth: int,
        modifiers: Sequence[str],
        parent: int | None,
    ) -> int:
        self.spans.append(
            DeclarationSpan(
                category=category,
                name_token=self.sig[name],
                start_token=self.sig[start],
                end_token=self.sig[end],
                visibility=visibility,
                depth=depth,
                modifiers=frozenset(modifiers),
                parent_index=parent,
            )
        )
        return len(self.spans) - 1


@dataclass(frozen=True, slots=True)
class _Context:
    """Positions of the member currently being classified."""

    start: int
    keyword: int
    end: int
    depth: int
    parent: int | None
    modifiers: tuple[str, ...]


def _visibility_of(modifiers: Sequence[str]) -> Visibility:
    visibility = Visibility.PRIVATE
    for modifier in modifiers:
        visibility = _VISIBILITY.get(modifier, visibility)
    return visibility


def brace_opens_expression(prev: Token | None) -> bool:
    """True if a `{` after prev starts a literal rather than a code block.

    Args:
        prev: Significant token before the brace, None at file start
    """
    if prev is None:
        return False
    if prev.kind is TokenKind.OPERATOR:
        return prev.text not in ("=>", "->")
    if prev.is_punct("(", "[", ",", ":"):
        return True
    return prev.is_keyword("return", "yield", "throw", "await")
