"""Domain layer: report log tree, frames, scopes and run summary."""

from specterm.domain.context import RunContext
from specterm.domain.enums import LogType
from specterm.domain.exceptions import (
    OutputStreamError,
    SpecTermError,
    StyleSpecError,
    WriterClosedError,
)
from specterm.domain.focus import FocusPattern, compile_focus, focus_backtrace
from specterm.domain.frame import Frame, capture_backtrace, extract_backtrace
from specterm.domain.log import Log
from specterm.domain.scope import Scope, ScopeProtocol
from specterm.domain.summary import Summary, SummaryProtocol

__all__ = [
    "FocusPattern",
    "Frame",
    "Log",
    "LogType",
    "OutputStreamError",
    "RunContext",
    "Scope",
    "ScopeProtocol",
    "SpecTermError",
    "StyleSpecError",
    "Summary",
    "SummaryProtocol",
    "WriterClosedError",
    "capture_backtrace",
    "compile_focus",
    "extract_backtrace",
    "focus_backtrace",
]
