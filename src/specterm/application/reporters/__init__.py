"""Reporters for spec run results.

Terminal reporters share a TerminalSession (writer, walker, summary
renderer). Users can implement custom reporters via ReporterProtocol.
"""

from specterm.application.config import TerminalConfig
from specterm.application.reporters.dot import DotReporter
from specterm.application.reporters.json_reporter import JSONReporter
from specterm.application.reporters.protocol import ReporterProtocol
from specterm.application.reporters.session import TerminalSession
from specterm.application.reporters.verbose import VerboseReporter

__all__ = [
    "DotReporter",
    "JSONReporter",
    "ReporterProtocol",
    "TerminalConfig",
    "TerminalSession",
    "VerboseReporter",
]
