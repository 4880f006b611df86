"""Log tree: one node per reported event (suite, spec, expectation).

Nodes grow only through add(). Children are never reordered or pruned.
Failed expectation traces are rebased onto the scope's focus pattern at
append time. Exception traces are kept whole, from the true throw site.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from specterm.domain.enums import LogType
from specterm.domain.focus import focus_backtrace
from specterm.domain.frame import extract_backtrace

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from specterm.domain.frame import Frame
    from specterm.domain.scope import ScopeProtocol


class Log:
    """Report event node with ordered children.

    Attributes are read-only for callers. Mutation goes through add()
    and the exception setter.
    """

    __slots__ = (
        "_backtrace",
        "_children",
        "_data",
        "_description",
        "_exception",
        "_file",
        "_line",
        "_matcher",
        "_matcher_name",
        "_negated",
        "_scope",
        "_type",
    )

    def __init__(
        self,
        *,
        scope: ScopeProtocol | None = None,
        type: LogType | str = LogType.PASSED,  # noqa: A002
        negated: bool = False,
        description: str | None = None,
        matcher: str | None = None,
        matcher_name: str | None = None,
        data: Mapping[str, Any] | None = None,
        backtrace: Sequence[Frame] = (),
        exception: BaseException | None = None,
        file: str | None = None,
        line: int | None = None,
    ) -> None:
        """Initialize node. All optional fields default to unset/empty.

        Args:
            scope: Enclosing run scope (referenced, not owned)
            type: Outcome status or "pass"/"fail" verb
            negated: True when the expectation was negated
            description: Matcher description, e.g. "be equal to 2"
            matcher: Matcher class name
            matcher_name: Matcher method name, e.g. "toBe"
            data: Values for diff rendering, insertion order kept
            backtrace: Frames, most recent call first (kept as given)
            exception: Error thrown by the spec; replaces backtrace
            file: File of the reported event
            line: Line of the reported event
        """
        self._scope = scope
        self._type = LogType.coerce(type)
        self._negated = negated
        self._description = description
        self._matcher = matcher
        self._matcher_name = matcher_name
        self._data: dict[str, Any] = dict(data) if data else {}
        self._backtrace: tuple[Frame, ...] = tuple(backtrace)
        self._exception: BaseException | None = None
        self._file = file
        self._line = line
        self._children: list[Log] = []
        if exception is not None:
            self.exception = exception

    @property
    def scope(self) -> ScopeProtocol | None:
        return self._scope

    @property
    def type(self) -> LogType:
        return self._type

    @property
    def negated(self) -> bool:
        return self._negated

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def matcher(self) -> str | None:
        return self._matcher

    @property
    def matcher_name(self) -> str | None:
        return self._matcher_name

    @property
    def data(self) -> dict[str, Any]:
        return self._data

    @property
    def backtrace(self) -> tuple[Frame, ...]:
        return self._backtrace

    @property
    def file(self) -> str | None:
        return self._file

    @property
    def line(self) -> int | None:
        return self._line

    @property
    def children(self) -> tuple[Log, ...]:
        return tuple(self._children)

    @property
    def exception(self) -> BaseException | None:
        return self._exception

    @exception.setter
    def exception(self, value: BaseException) -> None:
        """Attach an error. Its full trace becomes this node's backtrace."""
        self._exception = value
        self._backtrace = extract_backtrace(value)

    def messages(self) -> tuple[str, ...]:
        """Description chain of the scope, root first. Empty without scope."""
        if self._scope is None:
            return ()
        return tuple(self._scope.messages())

    def add(
        self,
        type: LogType | str,  # noqa: A002
        *,
        negated: bool = False,
        description: str | None = None,
        matcher: str | None = None,
        matcher_name: str | None = None,
        data: Mapping[str, Any] | None = None,
        backtrace: Sequence[Frame] = (),
        file: str | None = None,
        line: int | None = None,
    ) -> Log:
        """Append a child entry and return it.

        Failed entries get their backtrace rebased on the scope's focus
        pattern. The child shares this node's scope.

        Args:
            type: Outcome status or "pass"/"fail" verb
            negated: True when the expectation was negated
            description: Matcher description
            matcher: Matcher class name
            matcher_name: Matcher method name
            data: Values for diff rendering
            backtrace: Frames, most recent call first
            file: File of the expectation
            line: Line of the expectation

        Returns:
            The new child node

        Raises:
            ValueError: If type names no status
        """
        status = LogType.coerce(type)
        frames = tuple(backtrace)
        if status is LogType.FAILED and self._scope is not None:
            frames = focus_backtrace(frames, self._scope.backtrace_focus)

        child = Log(
            scope=self._scope,
            type=status,
            negated=negated,
            description=description,
            matcher=matcher,
            matcher_name=matcher_name,
            data=data,
            backtrace=frames,
            file=file,
            line=line,
        )
        self._children.append(child)
        return child

    def __repr__(self) -> str:
        return f"Log(type={self._type.value!r}, children={len(self._children)})"
