"""Tests for reporters/verbose.py."""

import io

import pytest

from specterm.application.config import TerminalConfig
from specterm.application.reporters.verbose import VerboseReporter
from specterm.domain.context import RunContext
from specterm.domain.exceptions import WriterClosedError
from tests.factories import make_failed_spec, make_spec, make_summary


def _reporter(**config: object) -> tuple[VerboseReporter, io.StringIO]:
    output = io.StringIO()
    options = {"colors": False, "header": False, **config}
    reporter = VerboseReporter(
        TerminalConfig(output=output, **options),  # type: ignore[arg-type]
        RunContext(started_at=0.0, cwd="/project"),
    )
    return reporter, output


class TestVerboseReporter:
    """Tests for VerboseReporter."""

    def test_start_without_header(self) -> None:
        """Only a blank line is printed when the header is off."""
        reporter, output = _reporter()
        reporter.start()
        assert output.getvalue() == "\n"

    def test_start_with_header(self) -> None:
        reporter, output = _reporter(header=True)
        reporter.start()
        assert output.getvalue().endswith("Working Directory: /project\n\n")

    def test_shared_headers_printed_once(self) -> None:
        """Specs under the same suites share one set of headers."""
        reporter, output = _reporter()
        reporter.report_event(make_spec("Log", "add()", "first"))
        reporter.report_event(make_spec("Log", "add()", "second"))
        reporter.report_event(make_spec("Log", "messages()", "third"))
        reporter.report_event(make_spec("Summary", "fourth"))
        assert output.getvalue() == (
            "Log\n"
            "  add()\n"
            "    ✔ first\n"
            "    ✔ second\n"
            "  messages()\n"
            "    ✔ third\n"
            "Summary\n"
            "  ✔ fourth\n"
        )

    def test_failure_detail_inline(self) -> None:
        reporter, output = _reporter()
        reporter.report_event(make_failed_spec("Log", "fails"))
        text = output.getvalue()
        assert text.startswith("Log\n  ✘ fails\n")
        assert "expect->toEqual() failed in `spec/log_spec.py` line 12" in text

    def test_full_run(self) -> None:
        """start, events, summary, stop in order."""
        passed = make_spec("Log", "works")
        failed = make_failed_spec("Log", "fails")
        reporter, output = _reporter()

        reporter.start()
        reporter.report_event(passed)
        reporter.report_event(failed)
        reporter.report_summary(make_summary(passed, failed), now=1.0)
        reporter.stop()

        text = output.getvalue()
        assert text.startswith("\nLog\n  ✔ works\n  ✘ fails\n")
        assert text.endswith("Passed 1 of 2 FAIL (FAILURE: 1) in 1.000 seconds\n\n")

    def test_stop_is_idempotent(self) -> None:
        reporter, output = _reporter()
        reporter.stop()
        reporter.stop()
        assert not output.closed

    def test_context_manager_closes(self) -> None:
        reporter, _ = _reporter()
        with reporter:
            reporter.start()
        with pytest.raises(WriterClosedError):
            reporter.report_event(make_spec("late"))
