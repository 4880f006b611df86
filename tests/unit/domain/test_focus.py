"""Tests for domain/focus.py.

Tests:
- compile_focus: glob → anchored regex
- focus_backtrace: rebase onto first matching frame
"""

import pytest

from specterm.domain.focus import compile_focus, focus_backtrace
from tests.factories import make_frame

TRACE = (
    make_frame("/lib/matchers/equal.py", 40, "match"),
    make_frame("/lib/expectation.py", 12, "run"),
    make_frame("/project/spec/FooSuite.py", 7, "it_works"),
    make_frame("/project/spec/BarSuite.py", 3, "describe"),
    make_frame("/lib/runner.py", 99, "main"),
)


class TestCompileFocus:
    """Tests for compile_focus()."""

    def test_star_matches_any_characters(self) -> None:
        focus = compile_focus("*Suite.py")
        assert focus.match("/project/spec/FooSuite.py") is True
        assert focus.match("FooSuite.py") is True
        assert focus.match("/project/spec/FooSuite.pyc") is False

    def test_question_mark_matches_one_character(self) -> None:
        focus = compile_focus("spec/?_spec.py")
        assert focus.match("spec/a_spec.py") is True
        assert focus.match("spec/ab_spec.py") is False

    def test_whole_path_is_anchored(self) -> None:
        focus = compile_focus("spec/*.py")
        assert focus.match("/root/spec/a.py") is False

    def test_regex_metacharacters_are_literal(self) -> None:
        focus = compile_focus("spec/a+b.(py)")
        assert focus.match("spec/a+b.(py)") is True
        assert focus.match("spec/aab.py") is False

    def test_brackets_are_literal(self) -> None:
        focus = compile_focus("spec/[ab].py")
        assert focus.match("spec/[ab].py") is True
        assert focus.match("spec/a.py") is False

    def test_none_path_never_matches(self) -> None:
        assert compile_focus("*").match(None) is False

    def test_empty_pattern_raises(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            compile_focus("")

    def test_str_returns_original(self) -> None:
        assert str(compile_focus("*Suite.py")) == "*Suite.py"


class TestFocusBacktrace:
    """Tests for focus_backtrace()."""

    def test_starts_at_first_matching_frame(self) -> None:
        rebased = focus_backtrace(TRACE, "*Suite.py")
        assert rebased == TRACE[2:]
        assert rebased[0].file == "/project/spec/FooSuite.py"

    def test_no_match_keeps_trace(self) -> None:
        assert focus_backtrace(TRACE, "*_spec.py") == TRACE

    def test_no_pattern_keeps_trace(self) -> None:
        assert focus_backtrace(TRACE, None) == TRACE
        assert focus_backtrace(TRACE, "") == TRACE

    def test_idempotent(self) -> None:
        for pattern in ("*Suite.py", "*_spec.py", "/lib/*", "*"):
            once = focus_backtrace(TRACE, pattern)
            assert focus_backtrace(once, pattern) == once

    def test_accepts_compiled_pattern(self) -> None:
        assert focus_backtrace(TRACE, compile_focus("*BarSuite.py")) == TRACE[3:]

    def test_frames_without_file_are_skipped(self) -> None:
        trace = (make_frame(None), *TRACE)
        assert focus_backtrace(trace, "*") == TRACE

    def test_empty_trace(self) -> None:
        assert focus_backtrace((), "*Suite.py") == ()

    def test_returns_tuple_for_list_input(self) -> None:
        assert focus_backtrace(list(TRACE), "*Suite.py") == TRACE[2:]
