"""Trace rendering helpers for failure and focus reports."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specterm.domain.frame import Frame


def relative_path(path: str | None, cwd: str) -> str:
    """Strip the working directory prefix from a path."""
    if not path:
        return ""
    prefix = cwd.rstrip(os.sep) + os.sep
    if path.startswith(prefix):
        return path[len(prefix) :]
    return path


def format_frame(frame: Frame) -> str:
    """Format one frame as: func() - file, line N."""
    func = frame.func or "?"
    file = frame.file or "[internal]"
    line = "?" if frame.line is None else frame.line
    return f"{func}() - {file}, line {line}"


def format_trace(backtrace: Sequence[Frame], *, depth: int | None = None) -> str:
    """Render frames one per line, most recent call first.

    Args:
        backtrace: Frames to render
        depth: Max frames. None = all.

    Returns:
        Newline-joined frames, no trailing newline
    """
    frames = backtrace if depth is None else backtrace[:depth]
    return "\n".join(format_frame(frame) for frame in frames)


def exception_code(exc: BaseException) -> int:
    """Numeric code of an error: errno, then an int .code attribute, else 0."""
    for attr in ("errno", "code"):
        value = getattr(exc, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return 0
