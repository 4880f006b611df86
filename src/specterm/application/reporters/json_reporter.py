"""JSON reporter: the finished run as one document for CI tooling."""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any, TextIO

from specterm.application.text import kind_of, to_string
from specterm.domain.context import RunContext
from specterm.domain.enums import LogType

if TYPE_CHECKING:
    from specterm.domain.frame import Frame
    from specterm.domain.log import Log
    from specterm.domain.summary import SummaryProtocol


class JSONReporter:
    """Dumps counters, failed and errored specs and focused scopes.

    Nothing is written until report_summary(). Values in expectation
    data carry their kind label next to the rendered text.
    The output stream is not owned: stop() flushes it.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        context: RunContext | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            context: Run context for elapsed time
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._context = context or RunContext()
        self._indent = indent

    def start(self) -> None:
        """Nothing is printed before the summary."""

    def report_event(self, log: Log) -> None:
        """Specs are read back from the summary."""

    def report_summary(self, summary: SummaryProtocol, *, now: float | None = None) -> None:
        """Report the run as JSON.

        Args:
            summary: Finished run summary
            now: perf_counter() value for elapsed time. None = current time.
        """
        data = self._summary_to_dict(summary, self._context.elapsed(now))
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def stop(self) -> None:
        self._output.flush()

    def _summary_to_dict(self, summary: SummaryProtocol, elapsed: float) -> dict[str, object]:
        """Convert a summary to a JSON-serializable dict."""
        return {
            "passed": summary.failed + summary.errored == 0,
            "summary": {
                "passed": summary.passed,
                "failed": summary.failed,
                "errored": summary.errored,
                "skipped": summary.skipped,
                "pending": summary.pending,
                "excluded": summary.excluded,
                "executable": summary.executable,
                "expectations": summary.expectation,
                "elapsed_seconds": round(elapsed, 3),
            },
            "failures": [self._spec_to_dict(log) for log in summary.logs(LogType.FAILED)],
            "errors": [self._spec_to_dict(log) for log in summary.logs(LogType.ERRORED)],
            "focused": [_frames_to_list(scope.backtrace[:1]) for scope in summary.get("focused") or ()],
        }

    def _spec_to_dict(self, log: Log) -> dict[str, object]:
        """Convert a spec log to a JSON-serializable dict."""
        data: dict[str, object] = {
            "messages": [m for m in log.messages() if m],
            "type": log.type.value,
            "file": log.file,
            "line": log.line,
            "expectations": [self._expectation_to_dict(e) for e in log.children if e.type is LogType.FAILED],
        }
        if log.exception is not None:
            data["exception"] = {
                "type": type(log.exception).__qualname__,
                "message": str(log.exception),
                "backtrace": _frames_to_list(log.backtrace),
            }
        return data

    def _expectation_to_dict(self, log: Log) -> dict[str, object]:
        """Convert a failed expectation to a JSON-serializable dict."""
        return {
            "matcher": log.matcher_name,
            "not": log.negated,
            "description": log.description,
            "file": log.file,
            "line": log.line,
            "data": {key: _value_to_dict(value) for key, value in log.data.items()},
            "backtrace": _frames_to_list(log.backtrace),
        }


def _value_to_dict(value: Any) -> dict[str, str]:
    return {"kind": kind_of(value), "value": to_string(value)}


def _frames_to_list(frames: tuple[Frame, ...]) -> list[dict[str, object]]:
    return [{"file": f.file, "line": f.line, "func": f.func} for f in frames]
