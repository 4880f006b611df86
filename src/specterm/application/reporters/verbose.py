"""Verbose reporter: every finished spec under its suite headers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specterm.application.reporters.session import TerminalSession

if TYPE_CHECKING:
    from types import TracebackType

    from specterm.application.config import TerminalConfig
    from specterm.application.text import ObjectFormatter
    from specterm.domain.context import RunContext
    from specterm.domain.log import Log
    from specterm.domain.summary import SummaryProtocol


class VerboseReporter:
    """Prints each spec as it finishes.

    Suite headers shared with the previously printed spec are not
    repeated: only the differing tail of the chain is printed, indented
    by its position in the chain.
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
            context: Run context. Starts now, in os.getcwd(), if None.
            object_formatter: Renders objects in diffs
        """
        self._session = TerminalSession(config, context, object_formatter=object_formatter)
        self._last_chain: tuple[str, ...] = ()

    @property
    def session(self) -> TerminalSession:
        return self._session

    def start(self) -> None:
        self._session.banner()
        self._session.writer.write("\n")

    def report_event(self, log: Log) -> None:
        self._last_chain = self._session.walker.report(log, previous=self._last_chain)

    def report_summary(self, summary: SummaryProtocol, *, now: float | None = None) -> None:
        self._session.writer.write("\n")
        self._session.summary.render(summary, now=now)

    def stop(self) -> None:
        self._session.close()

    def __enter__(self) -> VerboseReporter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
