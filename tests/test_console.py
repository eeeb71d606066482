"""
Tests for the text menu wiring into state and controller.

Run with: pytest tests/test_console.py -v
"""

import io
import time

import pytest

from harmonator.console import build, run_menu
from harmonator.core.controller import AnimationController
from harmonator.core.frame import RenderMode
from harmonator.settings import Settings
from harmonator.utils.terminal import MemorySurface, TerminalSurface

pytestmark = pytest.mark.timeout(20)


def scripted(*answers):
    it = iter(answers)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return read


@pytest.fixture
def harness():
    state = build(Settings(width=40, height=16, frame_interval_ms=10))
    out = io.StringIO()
    controller = AnimationController(state, MemorySurface())
    yield state, controller, TerminalSurface(out), out
    controller.stop()


class TestBuild:

    def test_initial_sequence(self):
        state = build(Settings())
        assert state.snapshot.sequence == (2, 4, 8, 7, 5, 1)

    def test_invalid_canvas_falls_back(self):
        state = build(Settings(width=10))
        assert state.config.width == 80


class TestMenu:

    def test_regenerate_and_show(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("1", "3", "7", "7", "0"))
        assert state.snapshot.sequence == (3, 2, 6, 4, 5, 1)
        assert "period 6" in out.getvalue()

    def test_invalid_regenerate_reported(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("1", "x", "9", "1", "4", "0", "0"))
        assert state.snapshot.sequence == (2, 4, 8, 7, 5, 1)
        assert out.getvalue().count("Invalid input, sequence unchanged.") == 2

    def test_config_options(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("4", "2", "5", "10", "10", "6", "150", "0"))
        assert state.config.mode is RenderMode.LISSAJOUS
        assert state.config.width == 40
        assert state.config.frame_interval_ms == 150
        assert "between 40x16" in out.getvalue()

    def test_start_stop(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("2", "2", "0"))
        assert controller.is_running
        assert "already running" in surface.caption
        run_menu(state, controller, surface, scripted("3", "0"))
        assert not controller.is_running

    def test_unknown_option_and_eof(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("9"))
        assert "Invalid option" in out.getvalue()

    def test_menu_moves_under_footer_while_animating(self, harness):
        """While frames are drawn the menu rides along as the frame caption."""
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("2", "4", "3", "0"))
        assert "--- harmonator ---" in surface.caption
        assert "Plasma" in surface.caption
        assert "Plasma" not in out.getvalue()
        run_menu(state, controller, surface, scripted("3", "0"))
        assert surface.caption == ""


def _wait_for(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.005)
    return False


class TestTermStreamOption:

    def test_streams_until_enter(self, harness):
        state, controller, surface, out = harness
        answers = iter(["8", None, "0"])

        def read(prompt):
            answer = next(answers)
            if answer is None:
                assert _wait_for(lambda: out.getvalue().count("Term ") >= 7)
                return ""
            return answer

        run_menu(state, controller, surface, read)
        text = out.getvalue()
        for line in ("Term 1: 2", "Term 2: 4", "Term 3: 8", "Term 6: 1", "Term 7: 2"):
            assert line in text
        assert "Streamed up to term" in text

    def test_refused_while_animating(self, harness):
        state, controller, surface, out = harness
        run_menu(state, controller, surface, scripted("2", "8", "0"))
        assert "Stop the animation" in surface.caption
        assert "Term " not in out.getvalue()
