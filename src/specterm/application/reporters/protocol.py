"""Reporter protocol: contract between a spec runner and its reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from specterm.domain.log import Log
    from specterm.domain.summary import SummaryProtocol


class ReporterProtocol(Protocol):
    """Contract for reporters.

    The runner calls start() once, report_event() for every finished
    spec in completion order, report_summary() once, then stop().
    Calls are strictly sequential.

    Example:
        class CountingReporter:
            def __init__(self) -> None:
                self.count = 0

            def start(self) -> None: ...

            def report_event(self, log: Log) -> None:
                self.count += 1

            def report_summary(self, summary: SummaryProtocol) -> None:
                print(f"{self.count} specs")

            def stop(self) -> None: ...
    """

    def start(self) -> None:
        """Run is starting."""
        ...

    def report_event(self, log: Log) -> None:
        """A spec finished.

        Args:
            log: Spec log with its expectation children
        """
        ...

    def report_summary(self, summary: SummaryProtocol) -> None:
        """Run finished.

        Args:
            summary: Counters and logs per status
        """
        ...

    def stop(self) -> None:
        """Release output resources. Idempotent."""
        ...
