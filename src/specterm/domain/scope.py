"""Run scope: description chain and backtrace focus.

The runner owns scopes. Reporting only reads them through ScopeProtocol.
Scope is the minimal implementation used by runners that have no scope
model of their own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specterm.domain.frame import Frame


class ScopeProtocol(Protocol):
    """Contract for scopes referenced by Log nodes."""

    @property
    def backtrace_focus(self) -> str | None:
        """Glob pattern used to rebase failure traces. None = no rebase."""
        ...

    @property
    def backtrace(self) -> Sequence[Frame]:
        """Where the scope was declared, most recent call first."""
        ...

    def messages(self) -> tuple[str, ...]:
        """Description chain, root first, own message last."""
        ...


class Scope:
    """Suite or spec scope: one description in a parent chain.

    Example:
        root = Scope(backtrace_focus="*_spec.py")
        suite = Scope("Log", parent=root)
        spec = Scope("sets default values", parent=suite)
        spec.messages()  # ("", "Log", "sets default values")
    """

    __slots__ = ("_backtrace", "_focus", "message", "parent")

    def __init__(
        self,
        message: str = "",
        *,
        parent: Scope | None = None,
        backtrace_focus: str | None = None,
        backtrace: Sequence[Frame] = (),
    ) -> None:
        """Initialize scope.

        Args:
            message: Description of this scope (empty for the root)
            parent: Enclosing scope
            backtrace_focus: Focus glob. None = inherit from parent.
            backtrace: Declaration site frames
        """
        self.message = message
        self.parent = parent
        self._focus = backtrace_focus
        self._backtrace = tuple(backtrace)

    @property
    def backtrace_focus(self) -> str | None:
        """Own focus pattern, or the nearest ancestor's."""
        if self._focus is not None:
            return self._focus
        if self.parent is not None:
            return self.parent.backtrace_focus
        return None

    @backtrace_focus.setter
    def backtrace_focus(self, pattern: str | None) -> None:
        self._focus = pattern

    @property
    def backtrace(self) -> tuple[Frame, ...]:
        return self._backtrace

    def messages(self) -> tuple[str, ...]:
        """Description chain from the root down to this scope."""
        chain: list[str] = []
        scope: Scope | None = self
        while scope is not None:
            chain.append(scope.message)
            scope = scope.parent
        return tuple(reversed(chain))

    def __repr__(self) -> str:
        return f"Scope({self.message!r})"
