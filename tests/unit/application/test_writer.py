"""Tests for application/writer.py.

Tests:
- write(): indentation, continuation lines, prefix, unterminated lines
- indent/prefix state
- format(): colors on/off
- close(): sink released exactly once, failures surface
"""

import io
from pathlib import Path

import pytest

from specterm.application.config import TerminalConfig
from specterm.application.writer import StreamWriter
from specterm.domain.exceptions import OutputStreamError, WriterClosedError
from tests.factories import make_writer

STYLE_SHAPES = ["red", "b;red", "b;red;blue", "n;;91", "d", ";red;", "", None]


class RecordingSink(io.StringIO):
    """StringIO counting flush/close calls."""

    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0
        self.closes = 0

    def flush(self) -> None:
        self.flushes += 1
        super().flush()

    def close(self) -> None:
        self.closes += 1


class FailingSink(io.StringIO):
    """Sink whose writes fail."""

    def write(self, s: str) -> int:
        raise OSError("disk full")


class TestWrite:
    """Tests for StreamWriter.write()."""

    def test_plain_line(self) -> None:
        writer, output = make_writer()
        writer.write("hello\n")
        assert output.getvalue() == "hello\n"

    def test_indents_new_line(self) -> None:
        writer, output = make_writer()
        writer.indent = 2
        writer.write("hello\n")
        assert output.getvalue() == "    hello\n"

    def test_multi_line_indents_every_line(self) -> None:
        """Continuation lines get the same indentation as single writes."""
        writer, output = make_writer()
        writer.indent = 1
        writer.write("a\nb\nc\n")
        single, single_output = make_writer()
        single.indent = 1
        for text in ("a\n", "b\n", "c\n"):
            single.write(text)
        assert output.getvalue() == "  a\n  b\n  c\n"
        assert output.getvalue() == single_output.getvalue()

    def test_multi_line_without_trailing_break(self) -> None:
        writer, output = make_writer()
        writer.indent = 1
        writer.write("a\nb")
        assert output.getvalue() == "  a\n  b"

    def test_unterminated_line_is_not_reindented(self) -> None:
        writer, output = make_writer()
        writer.indent = 1
        writer.write("foo")
        writer.write("bar\n")
        writer.write("baz\n")
        assert output.getvalue() == "  foobar\n  baz\n"

    def test_prefix_after_indent(self) -> None:
        writer, output = make_writer()
        writer.indent = 1
        writer.prefix = "| "
        writer.write("x\ny\n")
        assert output.getvalue() == "  | x\n  | y\n"

    def test_prefix_applies_to_next_call(self) -> None:
        writer, output = make_writer()
        writer.write("label:\n")
        writer.prefix = "> "
        writer.write("value")
        writer.prefix = ""
        writer.write("\n")
        assert output.getvalue() == "label:\n> value\n"

    def test_blank_lines_carry_indentation(self) -> None:
        writer, output = make_writer()
        writer.indent = 1
        writer.write("x\n\n")
        assert output.getvalue() == "  x\n  \n"

    def test_custom_indent_value(self) -> None:
        writer, output = make_writer(indent_value="\t")
        writer.indent = 2
        writer.write("x\n")
        assert output.getvalue() == "\t\tx\n"

    def test_style_wraps_text_not_leading_indent(self) -> None:
        writer, output = make_writer(colors=True)
        writer.indent = 1
        writer.write("x", "red")
        assert output.getvalue() == "  \x1b[31mx\x1b[0m"

    def test_binary_sink_receives_utf8(self) -> None:
        output = io.BytesIO()
        writer = StreamWriter(output, colors=False)
        writer.write("✔ ok\n")
        assert output.getvalue() == "✔ ok\n".encode()

    def test_sink_failure_surfaces(self) -> None:
        writer = StreamWriter(FailingSink(), colors=False)
        with pytest.raises(OutputStreamError, match="disk full") as exc_info:
            writer.write("x")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_write_after_close_raises(self) -> None:
        writer, _ = make_writer()
        writer.close()
        with pytest.raises(WriterClosedError):
            writer.write("x")


class TestState:
    """Tests for indent and prefix state."""

    def test_defaults(self) -> None:
        writer, _ = make_writer()
        assert writer.indent == 0
        assert writer.prefix == ""

    def test_negative_indent_raises(self) -> None:
        writer, _ = make_writer()
        with pytest.raises(ValueError, match="indent must be >= 0"):
            writer.indent = -1


class TestFormat:
    """Tests for StreamWriter.format()."""

    @pytest.mark.parametrize("style", STYLE_SHAPES)
    def test_colors_disabled_returns_text(self, style: str | None) -> None:
        writer, _ = make_writer(colors=False)
        assert writer.format("text", style) == "text"

    def test_colors_disabled_ignores_unknown_tokens(self) -> None:
        writer, _ = make_writer(colors=False)
        assert writer.format("text", "notacolor") == "text"

    def test_colors_enabled(self) -> None:
        writer, _ = make_writer(colors=True)
        assert writer.format("text", "green") == "\x1b[32mtext\x1b[0m"


class TestClose:
    """Tests for sink release."""

    def test_provided_sink_flushed_once_not_closed(self) -> None:
        sink = RecordingSink()
        writer = StreamWriter(sink)
        writer.close()
        writer.close()
        assert sink.flushes == 1
        assert sink.closes == 0
        assert writer.closed is True

    def test_context_manager_releases_on_error(self) -> None:
        sink = RecordingSink()
        with pytest.raises(RuntimeError), StreamWriter(sink) as writer:
            writer.write("x")
            raise RuntimeError("reporting failed")
        assert sink.flushes == 1

    def test_owned_stdout_handle_closed(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without output the writer opens its own handle on stdout's descriptor."""
        target = tmp_path / "stdout.txt"
        with target.open("w", encoding="utf-8") as stdout:
            monkeypatch.setattr("sys.stdout", stdout)
            writer = StreamWriter(colors=False)
            writer.write("owned\n")
            writer.close()
            writer.close()
            assert writer.closed is True
            assert stdout.closed is False
        assert target.read_text(encoding="utf-8") == "owned\n"

    def test_owned_stdout_stays_in_order(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Writes reach stdout immediately, interleaved with sys.stdout prints."""
        target = tmp_path / "stdout.txt"
        with target.open("w", encoding="utf-8") as stdout:
            monkeypatch.setattr("sys.stdout", stdout)
            writer = StreamWriter(colors=False)
            writer.write("reporter line 1\n")
            assert target.read_text(encoding="utf-8") == "reporter line 1\n"
            print("spec print", flush=True)
            writer.write("reporter line 2\n")
            writer.close()
        assert target.read_text(encoding="utf-8") == "reporter line 1\nspec print\nreporter line 2\n"

    def test_already_closed_sink(self) -> None:
        sink = io.StringIO()
        writer = StreamWriter(sink)
        sink.close()
        writer.close()
        assert writer.closed is True


class TestFlush:
    """Tests for StreamWriter.flush()."""

    def test_flushes_provided_sink(self) -> None:
        sink = RecordingSink()
        writer = StreamWriter(sink)
        writer.write("x")
        assert sink.flushes == 0
        writer.flush()
        assert sink.flushes == 1

    def test_flush_after_close_raises(self) -> None:
        writer, _ = make_writer()
        writer.close()
        with pytest.raises(WriterClosedError):
            writer.flush()

    def test_flush_failure_surfaces(self) -> None:
        sink = io.StringIO()
        writer = StreamWriter(sink)
        sink.close()
        with pytest.raises(OutputStreamError, match="cannot flush output"):
            writer.flush()


class TestFromConfig:
    """Tests for StreamWriter.from_config()."""

    def test_uses_config(self) -> None:
        output = io.StringIO()
        writer = StreamWriter.from_config(TerminalConfig(output=output, colors=False, indent_value="-"))
        writer.indent = 1
        writer.write("x", "red")
        assert output.getvalue() == "-x"
        assert writer.colors is False
