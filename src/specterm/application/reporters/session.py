"""Terminal session: writer, walker and summary renderer of one run.

Terminal reporters compose a session instead of inheriting output
plumbing. The session owns the writer and releases it on close().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from specterm import __version__
from specterm.application.config import TerminalConfig
from specterm.application.summary_renderer import SummaryRenderer
from specterm.application.walker import ReportWalker
from specterm.application.writer import StreamWriter
from specterm.domain.context import RunContext

if TYPE_CHECKING:
    from specterm.application.text import ObjectFormatter

BANNER = f"specterm {__version__}"
BASELINE = "Hierarchical spec reports for the terminal."


class TerminalSession:
    """Shared state of a terminal reporter.

    Attributes:
        config: Terminal configuration
        context: Run context
        writer: Output writer (owned)
        walker: Spec log renderer
        summary: Summary renderer
    """

    __slots__ = ("config", "context", "summary", "walker", "writer")

    def __init__(
        self,
        config: TerminalConfig | None = None,
        context: RunContext | None = None,
        *,
        object_formatter: ObjectFormatter | None = None,
    ) -> None:
        self.config = config or TerminalConfig()
        self.context = context or RunContext()
        self.writer = StreamWriter.from_config(self.config)
        if object_formatter is None:
            self.walker = ReportWalker(self.writer, cwd=self.context.cwd)
        else:
            self.walker = ReportWalker(self.writer, cwd=self.context.cwd, object_formatter=object_formatter)
        self.summary = SummaryRenderer(self.writer, self.context)

    def banner(self) -> None:
        """Print banner and working directory when the header is enabled."""
        if not self.config.header:
            return
        self.writer.write(f"{BANNER}\n\n")
        self.writer.write(f"{BASELINE}\n", "d")
        self.writer.write("\nWorking Directory: ", "blue")
        self.writer.write(f"{self.context.cwd}\n")

    def close(self) -> None:
        self.writer.close()
