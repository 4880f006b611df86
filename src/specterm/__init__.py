"""specterm - hierarchical result log and terminal reporters for spec runners."""

__version__ = "0.1.0"

from specterm.application.reporters import (
    DotReporter,
    JSONReporter,
    TerminalConfig,
    VerboseReporter,
)
from specterm.domain import Frame, Log, LogType, RunContext, Scope, Summary

__all__ = [
    "DotReporter",
    "Frame",
    "JSONReporter",
    "Log",
    "LogType",
    "RunContext",
    "Scope",
    "Summary",
    "TerminalConfig",
    "VerboseReporter",
    "__version__",
]
