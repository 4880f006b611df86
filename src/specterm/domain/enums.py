"""Domain enumerations."""

from __future__ import annotations

from enum import Enum


class LogType(Enum):
    """Outcome of a reported event (suite, spec or expectation)."""

    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
    PENDING = "pending"
    EXCLUDED = "excluded"
    ERRORED = "errored"

    @classmethod
    def coerce(cls, value: LogType | str) -> LogType:
        """Resolve an enum member, a status name or an expectation verb.

        Expectation reports use the short verbs "pass" and "fail".

        Raises:
            ValueError: If value names no status.
        """
        if isinstance(value, LogType):
            return value
        return cls(_VERBS.get(value, value))


_VERBS = {"pass": "passed", "fail": "failed"}
