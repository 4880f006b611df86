"""Run summary: finished specs grouped by status, plus keyed extras.

Reporters read summaries through SummaryProtocol. Summary is the
implementation runners feed with finished spec logs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from specterm.domain.enums import LogType

if TYPE_CHECKING:
    from specterm.domain.log import Log


class SummaryProtocol(Protocol):
    """Contract consumed by summary renderers."""

    @property
    def passed(self) -> int: ...

    @property
    def failed(self) -> int: ...

    @property
    def errored(self) -> int: ...

    @property
    def skipped(self) -> int: ...

    @property
    def pending(self) -> int: ...

    @property
    def excluded(self) -> int: ...

    @property
    def expectation(self) -> int: ...

    @property
    def executable(self) -> int: ...

    def logs(self, status: LogType | str) -> tuple[Log, ...]: ...

    def get(self, key: str) -> Any: ...


class Summary:
    """Collects finished spec logs.

    Counters are bucket sizes. executable = passed + failed + errored.
    Extras (e.g. "focused" scopes) live in a keyed store.
    """

    __slots__ = ("_expectation", "_extras", "_logs")

    def __init__(self) -> None:
        self._logs: dict[LogType, list[Log]] = {status: [] for status in LogType}
        self._expectation = 0
        self._extras: dict[str, Any] = {}

    def log(self, log: Log) -> None:
        """Record a finished spec and count its expectations."""
        self._logs[log.type].append(log)
        self._expectation += len(log.children)

    def logs(self, status: LogType | str) -> tuple[Log, ...]:
        """Logs recorded for a status, in completion order."""
        return tuple(self._logs[LogType.coerce(status)])

    @property
    def passed(self) -> int:
        return len(self._logs[LogType.PASSED])

    @property
    def failed(self) -> int:
        return len(self._logs[LogType.FAILED])

    @property
    def errored(self) -> int:
        return len(self._logs[LogType.ERRORED])

    @property
    def skipped(self) -> int:
        return len(self._logs[LogType.SKIPPED])

    @property
    def pending(self) -> int:
        return len(self._logs[LogType.PENDING])

    @property
    def excluded(self) -> int:
        return len(self._logs[LogType.EXCLUDED])

    @property
    def expectation(self) -> int:
        return self._expectation

    @property
    def executable(self) -> int:
        return self.passed + self.failed + self.errored

    @property
    def total(self) -> int:
        return sum(len(logs) for logs in self._logs.values())

    def get(self, key: str, default: Any = None) -> Any:
        return self._extras.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._extras[key] = value

    def add(self, key: str, value: Any) -> None:
        """Append value to the list stored under key."""
        self._extras.setdefault(key, []).append(value)
