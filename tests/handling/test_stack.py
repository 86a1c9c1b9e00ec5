"""Tests for stack capture and rendering."""

from __future__ import annotations

import traceback

from errpolicy import StackTracer, render_stack
from errpolicy.stack import capture_stack, frames_of


def _level_three() -> None:
    raise ValueError("deep")


def _level_two() -> None:
    _level_three()


def _level_one() -> None:
    _level_two()


def _raised() -> ValueError:
    try:
        _level_one()
    except ValueError as e:
        return e
    raise AssertionError("not raised")


class TracedError(Exception):
    """Error that brings its own frames."""

    def stack_trace(self) -> list[traceback.FrameSummary]:
        return [
            traceback.FrameSummary("tracer.py", 7, "origin", lookup_line=False),
            traceback.FrameSummary("tracer.py", 12, "caller", lookup_line=False),
        ]


class TestFramesOf:
    """Tests for frames_of."""

    def test_unraised_error_has_no_frames(self) -> None:
        assert frames_of(ValueError("never raised")) is None

    def test_raised_error_frames(self) -> None:
        names = [frame.name for frame in frames_of(_raised())]
        assert names[-3:] == ["_level_one", "_level_two", "_level_three"]

    def test_stack_tracer_is_preferred(self) -> None:
        err = TracedError()
        assert isinstance(err, StackTracer)
        assert [f.name for f in frames_of(err)] == ["origin", "caller"]


class TestCaptureStack:
    """Tests for capture_stack."""

    def test_includes_caller(self) -> None:
        names = [frame.name for frame in capture_stack()]
        assert names[-1] == "test_includes_caller"


class TestRenderStack:
    """Tests for render_stack."""

    def test_zero_budget_renders_nothing(self) -> None:
        assert render_stack(_raised(), 0) == ""

    def test_no_frames_renders_nothing(self) -> None:
        assert render_stack(ValueError("never raised"), 5) == ""

    def test_budget_keeps_most_recent_frames(self) -> None:
        text = render_stack(_raised(), 1)
        assert text.count('File "') == 1
        assert "_level_three" in text
        assert "_level_one" not in text

    def test_negative_budget_renders_all(self) -> None:
        err = _raised()
        text = render_stack(err, -1)
        assert text.count('File "') == len(frames_of(err))
        assert "_level_one" in text

    def test_budget_larger_than_stack(self) -> None:
        err = _raised()
        assert render_stack(err, 100) == render_stack(err, -1)

    def test_custom_tracer(self) -> None:
        text = render_stack(TracedError(), 3)
        assert 'File "tracer.py", line 7, in origin' in text
        assert 'File "tracer.py", line 12, in caller' in text
