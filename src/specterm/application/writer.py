"""Stream writer: indentation, prefix and styling over one output sink.

State owned per run:
    indent    depth, repeated indent_value per level
    prefix    text injected after the indent on every new line
    new line  whether the previous write ended with a line break

Every new visual line, including continuation lines inside one
multi-line write, starts with indent + prefix. Text continuing an
unterminated line is not indented again.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import IO, TYPE_CHECKING, Any

from specterm.application.styles import colorize
from specterm.domain.exceptions import OutputStreamError, WriterClosedError

if TYPE_CHECKING:
    from types import TracebackType

    from specterm.application.config import TerminalConfig

logger = logging.getLogger(__name__)


def _is_binary(output: IO[Any]) -> bool:
    if isinstance(output, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(output, "mode", "")


class StreamWriter:
    """Owns the output sink and the console state of one run.

    The sink is acquired at construction and released exactly once by
    close() (or leaving the with-block). A sink the writer opened itself
    is closed. A caller-provided sink is flushed and left open.
    Writes to the writer's own stdout handle are flushed at once so they
    stay in order with anything printed through sys.stdout.
    """

    __slots__ = (
        "_binary",
        "_closed",
        "_colors",
        "_indent",
        "_indent_value",
        "_new_line",
        "_output",
        "_owns_output",
        "_prefix",
    )

    def __init__(
        self,
        output: IO[Any] | None = None,
        *,
        colors: bool = True,
        indent_value: str = "  ",
    ) -> None:
        """Initialize writer.

        Args:
            output: Text or binary stream. None = new handle on stdout's
                file descriptor, owned by the writer.
            colors: Emit ANSI styling
            indent_value: Text per indentation level

        Raises:
            OutputStreamError: If stdout cannot be opened
        """
        if output is None:
            try:
                output = open(sys.stdout.fileno(), "w", encoding="utf-8", closefd=False)  # noqa: SIM115
            except (OSError, ValueError) as exc:
                raise OutputStreamError(f"cannot open stdout: {exc}") from exc
            self._owns_output = True
        else:
            self._owns_output = False
        self._output = output
        self._binary = _is_binary(output)
        self._colors = colors
        self._indent_value = indent_value
        self._indent = 0
        self._prefix = ""
        self._new_line = True
        self._closed = False

    @classmethod
    def from_config(cls, config: TerminalConfig) -> StreamWriter:
        """Create writer from terminal config."""
        return cls(config.output, colors=config.colors, indent_value=config.indent_value)

    @property
    def indent(self) -> int:
        """Current indentation depth."""
        return self._indent

    @indent.setter
    def indent(self, level: int) -> None:
        if level < 0:
            raise ValueError(f"indent must be >= 0, got {level}")
        self._indent = level

    @property
    def prefix(self) -> str:
        """Text written after the indentation on each new line."""
        return self._prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        self._prefix = value

    @property
    def colors(self) -> bool:
        return self._colors

    @property
    def closed(self) -> bool:
        return self._closed

    def format(self, text: str, style: str | None = None) -> str:
        """Apply a style specification. Plain passthrough when colors are off.

        Raises:
            StyleSpecError: If style contains an unknown token (colors on)
        """
        if not self._colors:
            return text
        return colorize(text, style)

    def write(self, text: str, style: str | None = None) -> None:
        """Write text, indenting and prefixing every new line.

        Args:
            text: Text, may contain line breaks
            style: Style specification, e.g. "b;yellow"

        Raises:
            WriterClosedError: If the writer was closed
            OutputStreamError: If the sink fails
        """
        if self._closed:
            raise WriterClosedError
        indent = self._indent_value * self._indent + self._prefix

        new_line = text.endswith("\n")
        if new_line:
            text = text[:-1]
        text = text.replace("\n", "\n" + indent) + ("\n" if new_line else "")

        lead = indent if self._new_line else ""
        self._new_line = new_line
        self._emit(lead + self.format(text, style))

    def _emit(self, chunk: str) -> None:
        try:
            if self._binary:
                self._output.write(chunk.encode("utf-8"))
            else:
                self._output.write(chunk)
            # The own stdout handle buffers apart from sys.stdout.
            if self._owns_output:
                self._output.flush()
        except (OSError, ValueError) as exc:
            raise OutputStreamError(f"cannot write to output: {exc}") from exc

    def flush(self) -> None:
        """Push buffered output to the sink.

        Raises:
            WriterClosedError: If the writer was closed
            OutputStreamError: If the sink fails
        """
        if self._closed:
            raise WriterClosedError
        try:
            self._output.flush()
        except (OSError, ValueError) as exc:
            raise OutputStreamError(f"cannot flush output: {exc}") from exc

    def close(self) -> None:
        """Release the sink. Idempotent: only the first call acts.

        Raises:
            OutputStreamError: If flushing or closing the sink fails
        """
        if self._closed:
            return
        self._closed = True
        try:
            if self._owns_output:
                self._output.close()
            elif not getattr(self._output, "closed", False):
                self._output.flush()
        except (OSError, ValueError) as exc:
            raise OutputStreamError(f"cannot release output: {exc}") from exc
        logger.debug("Output released (owned=%s)", self._owns_output)

    def __enter__(self) -> StreamWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
