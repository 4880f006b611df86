"""Stack frame value object and trace extraction.

Traces are ordered most-recent-call first: index 0 is the throw site
(or the failure site for expectation reports).
"""

from __future__ import annotations

import sys
import traceback
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class Frame:
    """One stack frame (file, line, func).

    Attributes:
        file: Source file path. None for frames without a file (builtins).
        line: Line number. None when unknown.
        func: Function name. None when unknown.
    """

    file: str | None
    line: int | None = None
    func: str | None = None

    @classmethod
    def from_summary(cls, summary: traceback.FrameSummary) -> Frame:
        """Convert a traceback.FrameSummary."""
        return cls(file=summary.filename, line=summary.lineno, func=summary.name)


def _innermost_first(summaries: Iterable[traceback.FrameSummary]) -> tuple[Frame, ...]:
    return tuple(Frame.from_summary(s) for s in reversed(list(summaries)))


def capture_backtrace(skip: int = 0) -> tuple[Frame, ...]:
    """Capture the current call stack, caller first.

    Args:
        skip: Number of additional caller frames to drop from the top.

    Returns:
        Frames ordered most-recent-call first, excluding this function.
    """
    frame = sys._getframe(1 + skip)  # noqa: SLF001
    return _innermost_first(traceback.extract_stack(frame))


def extract_backtrace(exc: BaseException) -> tuple[Frame, ...]:
    """Full trace of an exception, throw site first.

    Exceptions that were never raised carry no traceback. Their trace is
    the stack of the caller at extraction time.

    Args:
        exc: Exception instance.

    Returns:
        Frames ordered most-recent-call first.
    """
    if exc.__traceback__ is None:
        return capture_backtrace(skip=1)
    return _innermost_first(traceback.extract_tb(exc.__traceback__))
