"""Summary renderer: skipped call-outs, totals and focus mode warning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from specterm.domain.enums import LogType
from specterm.infrastructure.debugger import format_trace

if TYPE_CHECKING:
    from specterm.application.writer import StreamWriter
    from specterm.domain.context import RunContext
    from specterm.domain.summary import SummaryProtocol

# Buckets listed file by file before the totals, with their style.
_CALL_OUT_STYLES: tuple[tuple[LogType, str], ...] = (
    (LogType.PENDING, "cyan"),
    (LogType.EXCLUDED, "yellow"),
    (LogType.SKIPPED, "d"),
)


class SummaryRenderer:
    """Renders a run summary through a StreamWriter."""

    def __init__(self, writer: StreamWriter, context: RunContext) -> None:
        """Initialize renderer.

        Args:
            writer: Output writer (shared, not owned)
            context: Run context; elapsed time is measured from its start
        """
        self._writer = writer
        self._context = context

    def render(self, summary: SummaryProtocol, *, now: float | None = None) -> None:
        """Print call-outs, totals and the focus warning.

        Args:
            summary: Finished run summary
            now: perf_counter() value to measure elapsed time against.
                None = current time.
        """
        self.render_call_outs(summary)
        self.render_totals(summary, self._context.elapsed(now))
        self.render_focused(summary)

    def render_call_outs(self, summary: SummaryProtocol) -> None:
        """List pending, excluded and skipped specs by location."""
        writer = self._writer
        for status, style in _CALL_OUT_STYLES:
            logs = summary.logs(status)
            if not logs:
                continue
            count = len(logs)
            plural = "s" if count > 1 else ""
            writer.write(f"{status.value.capitalize()} specification{plural}: {count}\n\n", style)
            for log in logs:
                line = "" if log.line is None else log.line
                writer.write(f"{log.file or ''}, line {line}\n", "d")
            writer.write("\n")

    def render_totals(self, summary: SummaryProtocol, elapsed: float) -> None:
        """Print expectation/specification counts and the PASS/FAIL line."""
        writer = self._writer
        failed = summary.failed
        errored = summary.errored

        writer.write("Expectations   : ")
        writer.write(f"{summary.expectation} Executed")
        writer.write("\n")
        writer.write("Specifications : ")
        writer.write(f"{summary.pending} Pending", "cyan")
        writer.write(", ")
        writer.write(f"{summary.excluded} Excluded", "yellow")
        writer.write(", ")
        writer.write(f"{summary.skipped} Skipped", "d")
        writer.write("\n\n")
        writer.write(f"Passed {summary.passed}", "green")
        writer.write(f" of {summary.executable} ")

        if failed or errored:
            writer.write("FAIL ", "red")
            writer.write("(")
            parts: list[tuple[str, str]] = []
            if failed:
                parts.append((f"FAILURE: {failed}", "red"))
            if errored:
                parts.append((f"EXCEPTION: {errored}", "magenta"))
            for index, (text, style) in enumerate(parts):
                if index:
                    writer.write(", ")
                writer.write(text, style)
            writer.write(")")
        else:
            writer.write("PASS", "green")
        writer.write(f" in {elapsed:.3f} seconds")
        writer.write("\n\n")

    def render_focused(self, summary: SummaryProtocol) -> None:
        """Warn about focused scopes: the run exits non-zero."""
        focused = summary.get("focused")
        if not focused:
            return
        writer = self._writer
        writer.write("Focus Mode Detected in the following files:\n", "b;yellow;")
        for scope in focused:
            writer.write(format_trace(scope.backtrace, depth=1), "n;yellow")
            writer.write("\n")
        writer.write("exit(-1)\n\n", "red")
