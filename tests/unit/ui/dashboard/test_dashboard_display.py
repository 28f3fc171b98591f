# tests/unit/ui/dashboard/test_dashboard_display.py
# Unit tests for the dashboard session loop & headless snapshots

from unittest.mock import MagicMock, patch

import pytest

from rusuku.config.settings import DashboardSettings
from rusuku.core.exceptions import GridShapeError
from rusuku.core.output import reset_output_manager, set_output_manager
from rusuku.ui.core.rich_components import Text
from rusuku.ui.dashboard.dashboard_display import (
    DashboardSession,
    FixedElapsed,
    render_snapshot,
)
from tests.test_support.fake_clock import ScriptedPoller

DISPLAY = "rusuku.ui.dashboard.dashboard_display"


@pytest.fixture
def patched_terminal():
    # Live & TerminalSession both touch the real terminal; swap them for mocks
    with patch(f"{DISPLAY}.Live") as live_cls, patch(f"{DISPLAY}.TerminalSession") as term_cls:
        yield live_cls, term_cls


class TestStep:

    # * Verify no key keeps the loop going
    def test_idle_step(self, clock):
        session = DashboardSession(clock=clock, poller=ScriptedPoller([]))
        assert session.step(None) is True
        assert session.is_complete is False

    # * Verify bound keys drive the timer & 'q' ends the loop
    def test_key_steps(self, clock):
        session = DashboardSession(clock=clock, poller=ScriptedPoller([]))
        assert session.step("i") is True
        clock.advance(3.0)
        assert session.step("p") is True
        assert session.step("q") is False
        assert session.state.timer.elapsed() == pytest.approx(3.0)


class TestRenderScreen:

    # * Verify explicit sizes render a rich Text of that geometry
    def test_explicit_size(self, clock):
        session = DashboardSession(clock=clock, poller=ScriptedPoller([]))
        frame = session.render_screen(55, 18)
        assert isinstance(frame, Text)
        lines = frame.plain.split("\n")
        assert len(lines) == 18
        assert all(len(line) == 55 for line in lines)
        assert "00:00" in lines[1]

    # * Verify frame size changes are logged once per size
    def test_resize_logged(self, clock):
        manager = MagicMock()
        set_output_manager(manager)
        try:
            session = DashboardSession(clock=clock, poller=ScriptedPoller([]))
            session.render_screen(55, 18)
            session.render_screen(55, 18)
            session.render_screen(80, 24)
        finally:
            reset_output_manager()
        resize_calls = [
            c for c in manager.debug.call_args_list if c.args[1:2] == ("RENDER",)
        ]
        assert len(resize_calls) == 2

    # * Verify settings shape the grid
    def test_settings_shape(self, clock):
        settings = DashboardSettings(grid_rows=2, grid_cols=4)
        session = DashboardSession(settings=settings, clock=clock, poller=ScriptedPoller([]))
        assert (session.plan.rows, session.plan.cols) == (2, 4)


class TestRun:

    # * Verify the loop polls, dispatches & exits on 'q' returning elapsed time
    def test_run_until_quit(self, clock, patched_terminal):
        live_cls, term_cls = patched_terminal
        poller = ScriptedPoller(["i", None, None, "p", "x", "q"], clock=clock)
        session = DashboardSession(clock=clock, poller=poller)

        elapsed = session.run()

        # start at t+1, pause at t+4
        assert elapsed == pytest.approx(3.0)
        assert session.is_complete
        assert poller.entered and poller.exited
        assert poller.timeouts == [0.01] * 6
        term_cls.assert_called_once_with()
        live = live_cls.return_value.__enter__.return_value
        # one refresh per iteration that didn't quit
        assert live.update.call_count == 5

    # * Verify the Live display runs full screen w/ manual refresh
    def test_live_options(self, clock, patched_terminal):
        live_cls, _ = patched_terminal
        session = DashboardSession(clock=clock, poller=ScriptedPoller(["q"], clock=clock))
        session.run()
        kwargs = live_cls.call_args.kwargs
        assert kwargs["screen"] is True
        assert kwargs["auto_refresh"] is False

    # * Verify console logging is muted while the dashboard owns the screen
    def test_console_muted_during_run(self, clock, patched_terminal):
        manager = MagicMock()
        set_output_manager(manager)
        try:
            session = DashboardSession(clock=clock, poller=ScriptedPoller(["q"], clock=clock))
            session.run()
        finally:
            reset_output_manager()
        manager.console_muted.assert_called_once_with()
        manager.console_muted.return_value.__exit__.assert_called_once()

    # * Verify an interrupt still unwinds the terminal & poller contexts
    def test_interrupt_unwinds(self, clock, patched_terminal):
        _, term_cls = patched_terminal
        poller = ScriptedPoller([], clock=clock)
        poller.poll = MagicMock(side_effect=KeyboardInterrupt)
        session = DashboardSession(clock=clock, poller=poller)
        with pytest.raises(KeyboardInterrupt):
            session.run()
        assert poller.exited
        term_cls.return_value.__exit__.assert_called_once()


class TestSnapshot:

    # * Verify a snapshot is a list of fixed-width lines
    def test_default_snapshot(self):
        lines = render_snapshot()
        assert len(lines) == 18
        assert lines[0][18:37] == " Welcome to Rusuku "
        assert "00:00" in lines[1]

    # * Verify the elapsed override reaches the header
    def test_elapsed(self):
        assert "02:05" in render_snapshot(elapsed=125.0)[1]

    # * Verify invalid shapes surface as GridShapeError
    def test_invalid_shape(self):
        settings = DashboardSettings()
        settings.grid_rows = 0
        with pytest.raises(GridShapeError):
            render_snapshot(settings)

    # * Verify the fixed elapsed source
    def test_fixed_elapsed(self):
        assert FixedElapsed(9.5).elapsed() == 9.5
