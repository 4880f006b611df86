"""Report walker: renders one spec log through a StreamWriter.

Phases of the full form (report):
    1. suite headers   ancestor descriptions, one level deeper each
    2. spec message    status glyph and the spec's own description
    3. failure detail  expectation diffs or the uncaught exception trace
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from specterm.application.text import describe_instance, dump_string, kind_of, to_string
from specterm.domain.enums import LogType
from specterm.infrastructure.debugger import exception_code, format_trace, relative_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from specterm.application.text import ObjectFormatter
    from specterm.application.writer import StreamWriter
    from specterm.domain.log import Log

logger = logging.getLogger(__name__)

# status → (glyph, glyph style, message style)
_GLYPHS: dict[LogType, tuple[str, str, str]] = {
    LogType.PASSED: ("✔", "green", "d"),
    LogType.SKIPPED: ("✔", "d", "d"),
    LogType.PENDING: ("✔", "cyan", "cyan"),
    LogType.EXCLUDED: ("✔", "yellow", "yellow"),
    LogType.FAILED: ("✘", "red", "red"),
    LogType.ERRORED: ("✘", "red", "red"),
}


def split_messages(log: Log) -> tuple[tuple[str, ...], str]:
    """Split a log's description chain into (ancestors, own message).

    Empty ancestor descriptions (e.g. the root scope) are dropped.
    """
    messages = log.messages()
    if not messages:
        return (), ""
    ancestors = tuple(message for message in messages[:-1] if message)
    return ancestors, messages[-1]


class ReportWalker:
    """Drives a StreamWriter over spec logs.

    Reporting never raises on malformed logs: missing descriptions,
    matcher names, files or exceptions render as empty placeholders.
    """

    def __init__(
        self,
        writer: StreamWriter,
        *,
        cwd: str | None = None,
        object_formatter: ObjectFormatter = describe_instance,
    ) -> None:
        """Initialize walker.

        Args:
            writer: Output writer (shared, not owned)
            cwd: Prefix stripped from exception file paths. None = os.getcwd().
            object_formatter: Renders objects in diffs
        """
        self._writer = writer
        self._cwd = cwd if cwd is not None else os.getcwd()
        self._object_formatter = object_formatter

    def report(self, log: Log, *, previous: Sequence[str] = ()) -> tuple[str, ...]:
        """Print a spec with its suite headers, then reset indentation.

        Args:
            log: Spec log
            previous: Suite chain already on screen. Shared leading
                headers are not printed again. () = print all.

        Returns:
            Suite chain of this log, for the next call's previous
        """
        chain = self.report_suite_messages(log, previous=previous)
        self.report_spec_message(log)
        self.report_failure(log)
        self._writer.indent = 0
        return chain

    def report_spec(self, log: Log) -> None:
        """Print a spec without suite headers, at the current indentation."""
        self.report_spec_message(log)
        self.report_failure(log)

    def report_suite_messages(self, log: Log, *, previous: Sequence[str] = ()) -> tuple[str, ...]:
        """Print ancestor descriptions, one indentation level per message.

        Indentation is reset to 0 first and left one level below the
        last ancestor.
        """
        chain, _ = split_messages(log)
        shared = 0
        for printed, message in zip(previous, chain, strict=False):
            if printed != message:
                break
            shared += 1

        self._writer.indent = shared
        for message in chain[shared:]:
            self._writer.write(message)
            self._writer.write("\n")
            self._writer.indent += 1
        return chain

    def report_spec_message(self, log: Log) -> None:
        """Print the status glyph and the spec's own description."""
        _, message = split_messages(log)
        glyph, glyph_style, message_style = _GLYPHS[log.type]
        self._writer.write(glyph, glyph_style)
        self._writer.write(" ")
        self._writer.write(f"{message}\n", message_style)

    def report_failure(self, log: Log) -> None:
        """Print failure detail one level deeper. No-op for other statuses."""
        writer = self._writer
        writer.indent += 1
        try:
            match log.type:
                case LogType.FAILED:
                    for expectation in log.children:
                        if expectation.type is not LogType.FAILED:
                            continue
                        writer.write(f"expect->{expectation.matcher_name or ''}() failed in ", "red")
                        writer.write(f"`{expectation.file or ''}` ")
                        writer.write(f"line {_or_empty(expectation.line)}", "red")
                        writer.write("\n\n")
                        self.report_diff(expectation)
                case LogType.ERRORED:
                    self._report_error(log)
                case _:
                    pass
        finally:
            writer.prefix = ""
            writer.indent -= 1

    def _report_error(self, log: Log) -> None:
        writer = self._writer
        backtrace = log.backtrace
        origin = backtrace[0] if backtrace else None
        file = relative_path(origin.file, self._cwd) if origin else ""
        line = _or_empty(origin.line) if origin else ""

        writer.write("an uncaught exception has been thrown in ", "magenta")
        writer.write(f"`{file}` ")
        writer.write(f"line {line}", "magenta")
        writer.write("\n\n")

        writer.write("message:", "yellow")
        self.report_exception(log.exception)
        writer.prefix = writer.format(" ", "n;;magenta") + " "
        writer.write(format_trace(backtrace))
        writer.prefix = ""
        writer.write("\n\n")

    def report_exception(self, exception: BaseException | None) -> None:
        """Print error kind, code and message."""
        if exception is None:
            self._writer.write("`<none>` Code(0) with no message\n\n")
            return
        summary = f"`{type(exception).__qualname__}` Code({exception_code(exception)}) with "
        message = _message_of(exception)
        summary += f"message {dump_string(message)}" if message else "no message"
        self._writer.write(f"{summary}\n\n")

    def report_diff(self, log: Log) -> None:
        """Print the expectation sentence and every data entry with its kind."""
        writer = self._writer
        writer.write("It expect actual ")
        negation = ""
        if log.negated:
            writer.write("NOT ", "cyan")
            negation = "not "
        writer.write(f"to {log.description or ''}\n\n")

        for key, value in log.data.items():
            if "actual" in key:
                writer.write(f"{key}:\n", "yellow")
                writer.prefix = writer.format(" ", "n;;91") + " "
            elif "expected" in key:
                writer.write(f"{negation}{key}:\n", "yellow")
                writer.prefix = writer.format(" ", "n;;92") + " "
            else:
                writer.write(f"{key}:\n")
            writer.write(f"({kind_of(value)}) " + to_string(value, self._object_formatter))
            writer.prefix = ""
            writer.write("\n")
        writer.write("\n")


def _or_empty(value: object) -> str:
    return "" if value is None else str(value)


def _message_of(exception: BaseException) -> str:
    try:
        return str(exception)
    except Exception:  # noqa: BLE001
        # An unprintable error must still be reported with its trace.
        logger.warning("Message of %s could not be read, using repr", type(exception).__name__, exc_info=True)
        return object.__repr__(exception)
