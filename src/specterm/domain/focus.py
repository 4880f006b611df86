"""Backtrace focus: rebase a trace onto the first frame in the user's files.

Glob syntax (matched against the whole file path):
    *    any characters, including path separators
    ?    one character

Every other character is literal.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specterm.domain.frame import Frame

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FocusPattern:
    """Compiled backtrace focus pattern.

    Attributes:
        original: Glob pattern as configured
        regex: Anchored regex equivalent
    """

    original: str
    regex: re.Pattern[str]

    def match(self, path: str | None) -> bool:
        """Check if a file path matches. Frames without a file never match."""
        if path is None:
            return False
        return self.regex.fullmatch(path) is not None

    def __str__(self) -> str:
        """Return original pattern string."""
        return self.original


@lru_cache(maxsize=64)
def compile_focus(pattern: str) -> FocusPattern:
    """Compile a glob focus pattern.

    Escapes regex metacharacters, then maps * to .* and ? to .

    Args:
        pattern: Glob pattern, e.g. "*_spec.py"

    Returns:
        FocusPattern matching whole paths

    Raises:
        ValueError: If pattern is empty
    """
    if not pattern:
        raise ValueError("pattern must not be empty")
    translated = re.escape(pattern).replace(r"\*", ".*").replace(r"\?", ".")
    return FocusPattern(original=pattern, regex=re.compile(translated, re.DOTALL))


def focus_backtrace(
    backtrace: Sequence[Frame],
    pattern: str | FocusPattern | None,
) -> tuple[Frame, ...]:
    """Rebase a trace to start at the first frame whose file matches.

    The matching frame is kept. Frames before it are dropped. Without a
    pattern, or when nothing matches, the trace is returned unchanged.
    Rebasing an already rebased trace is a no-op.

    Args:
        backtrace: Frames, most recent call first
        pattern: Glob pattern or compiled FocusPattern

    Returns:
        Rebased frames in original order
    """
    frames = tuple(backtrace)
    if not pattern:
        return frames

    focus = pattern if isinstance(pattern, FocusPattern) else compile_focus(pattern)
    for index, frame in enumerate(frames):
        if focus.match(frame.file):
            return frames[index:]

    logger.debug("No frame matches focus pattern %r, trace kept as is", focus.original)
    return frames
