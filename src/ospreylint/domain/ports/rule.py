"""Rule protocol.

A rule is any callable with this signature. Rules are collected in a
mapping from rule id to callable; there is no rule class hierarchy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ospreylint.domain.model.configuration import RuleConfiguration
    from ospreylint.domain.model.declaration import DeclarationSpan
    from ospreylint.domain.model.diagnostic import Diagnostic
    from ospreylint.domain.model.token import Token


class RuleCheck(Protocol):
    """Contract for style rules.

    Rules are pure: same input, same diagnostics. They never mutate their
    arguments and share no state, so they may run in any order.

    Example:
        def check_no_tabs_anywhere(
            tokens: Sequence[Token],
            spans: Sequence[DeclarationSpan],
            config: RuleConfiguration,
        ) -> tuple[Diagnostic, ...]:
            return tuple(
                Diagnostic("no-tabs", Severity.ERROR, "tab", t.start_line, t.start_column)
                for t in tokens
                if t.has_tab
            )
    """

    def __call__(
        self,
        tokens: Sequence[Token],
        spans: Sequence[DeclarationSpan],
        config: RuleConfiguration,
        /,
    ) -> tuple[Diagnostic, ...]:
        """Check one file.

        Args:
            tokens: Complete token sequence of the file
            spans: Declaration spans of the file
            config: Run configuration

        Returns:
            Diagnostics in any order (empty if the file complies)
        """
        ...
