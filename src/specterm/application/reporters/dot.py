"""Dot reporter: one glyph per spec, failure details at the end."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specterm.application.reporters.session import TerminalSession
from specterm.domain.enums import LogType

if TYPE_CHECKING:
    from types import TracebackType

    from specterm.application.config import TerminalConfig
    from specterm.application.text import ObjectFormatter
    from specterm.domain.context import RunContext
    from specterm.domain.log import Log
    from specterm.domain.summary import SummaryProtocol

# status → (glyph, style)
_DOTS: dict[LogType, tuple[str, str | None]] = {
    LogType.PASSED: (".", None),
    LogType.FAILED: ("F", "red"),
    LogType.ERRORED: ("E", "magenta"),
    LogType.SKIPPED: ("S", "d"),
    LogType.PENDING: ("P", "cyan"),
    LogType.EXCLUDED: ("X", "yellow"),
}


class DotReporter:
    """Compact progress: a glyph per spec, wrapped with a counter.

    Each full line ends with " count / total (percent%)" when the
    planned total is known, " count" otherwise. Failed and errored specs
    are printed in full form before the summary.
    """

    def __init__(
        self,
        config: TerminalConfig | None = None,
        context: RunContext | None = None,
        *,
        object_formatter: ObjectFormatter | None = None,
    ) -> None:
        """Initialize reporter.

        Args:
            config: Terminal configuration. Uses defaults if None.
            context: Run context; its total drives the counter.
            object_formatter: Renders objects in diffs
        """
        self._session = TerminalSession(config, context, object_formatter=object_formatter)
        self._count = 0
        self._column = 0

    @property
    def session(self) -> TerminalSession:
        return self._session

    def start(self) -> None:
        self._session.banner()
        self._session.writer.write("\n")

    def report_event(self, log: Log) -> None:
        glyph, style = _DOTS[log.type]
        self._session.writer.write(glyph, style)
        self._count += 1
        self._column += 1
        if self._column == self._session.config.dots_per_line:
            self._write_counter()
        self._session.writer.flush()

    def _write_counter(self) -> None:
        total = self._session.context.total
        if total:
            percent = self._count * 100 // total
            self._session.writer.write(f" {self._count} / {total} ({percent}%)\n")
        else:
            self._session.writer.write(f" {self._count}\n")
        self._column = 0

    def report_summary(self, summary: SummaryProtocol, *, now: float | None = None) -> None:
        writer = self._session.writer
        if self._column:
            writer.write(" " * (self._session.config.dots_per_line - self._column))
            self._write_counter()
        writer.write("\n")
        for status in (LogType.FAILED, LogType.ERRORED):
            for log in summary.logs(status):
                self._session.walker.report(log)
        self._session.summary.render(summary, now=now)

    def stop(self) -> None:
        self._session.close()

    def __enter__(self) -> DotReporter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
