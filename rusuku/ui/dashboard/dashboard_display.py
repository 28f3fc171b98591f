# rusuku/ui/dashboard/dashboard_display.py
# Full-screen dashboard session: single-threaded poll -> dispatch -> render loop on a rich Live display

from __future__ import annotations

import time
from dataclasses import dataclass

from ..core.rich_components import Live, RenderableType
from ...config.settings import DashboardSettings
from ...core.grid_plan import GridBorderPlan, build_grid_plan
from ...core.output import get_output_manager
from ...core.timer import Clock, Timer
from ...core.verbose import vlog, vlog_frame
from ...rusuku_io.console import get_console
from ...rusuku_io.terminal import KeyPoller, TerminalSession
from .dashboard_input import DashboardInputHandler
from .dashboard_renderer import DashboardRenderer
from .dashboard_state import DashboardState, DashboardStateManager
from .screen_buffer import HEAVY_GLYPHS, GlyphSet


# * Orchestrates one dashboard session
# * Owns the state exclusively; input mutates it, rendering only reads it
class DashboardSession:
    def __init__(
        self,
        settings: DashboardSettings | None = None,
        clock: Clock = time.monotonic,
        poller: KeyPoller | None = None,
        glyphs: GlyphSet = HEAVY_GLYPHS,
    ):
        self._settings = settings or DashboardSettings()
        self._state = DashboardState(timer=Timer(clock))
        self._state_manager = DashboardStateManager(self._state)
        self._plan = build_grid_plan(self._settings.grid_rows, self._settings.grid_cols)
        self._renderer = DashboardRenderer(
            self._plan, self._settings.layout_options(), glyphs
        )
        self._input_handler = DashboardInputHandler(self._state, self._state_manager)
        self._poller = poller or KeyPoller()
        self._frame_size: tuple[int, int] | None = None

    # ===== COMPONENT ACCESSORS (read-only) =====

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def plan(self) -> GridBorderPlan:
        return self._plan

    @property
    def renderer(self) -> DashboardRenderer:
        return self._renderer

    @property
    def input_handler(self) -> DashboardInputHandler:
        return self._input_handler

    @property
    def settings(self) -> DashboardSettings:
        return self._settings

    # ===== PUBLIC API =====

    @property
    def is_complete(self) -> bool:
        return self._state.is_complete

    # render a frame; defaults to the current terminal size
    def render_screen(self, width: int | None = None, height: int | None = None) -> RenderableType:
        if width is None or height is None:
            size = get_console().size
            width = size.width if width is None else width
            height = size.height if height is None else height
        if self._frame_size != (width, height):
            self._frame_size = (width, height)
            vlog_frame(width, height)
        return self._renderer.render_screen(self._state.timer, width, height)

    def handle_key(self, k: str) -> bool:
        # Handle one key press. Returns False to exit loop.
        return self._input_handler.handle_key(k)

    # one loop iteration minus the terminal: dispatch an optional key. Returns False to exit.
    def step(self, k: str | None) -> bool:
        if k is not None:
            return self.handle_key(k)
        return not self.is_complete

    # Run until quit. Returns the elapsed seconds on exit.
    def run(self) -> float:
        vlog("SESSION", f"Dashboard started ({self._plan.rows}x{self._plan.cols} grid)")
        with get_output_manager().console_muted(), TerminalSession(), self._poller:
            with Live(
                self.render_screen(),
                console=get_console(),
                screen=True,
                auto_refresh=False,
                refresh_per_second=self._settings.refresh_per_second,
            ) as live:
                while not self.is_complete:
                    k = self._poller.poll(self._settings.poll_interval)
                    if not self.step(k):
                        break
                    live.update(self.render_screen(), refresh=True)

        elapsed = self._state.timer.elapsed()
        vlog("SESSION", f"Dashboard closed at {elapsed:.1f}s elapsed")
        return elapsed


@dataclass(frozen=True)
class FixedElapsed:
    seconds: float = 0.0

    def elapsed(self) -> float:
        return self.seconds


# * Render a single frame to plain lines (headless snapshot)
def render_snapshot(
    settings: DashboardSettings | None = None,
    width: int = 55,
    height: int = 18,
    elapsed: float = 0.0,
    glyphs: GlyphSet = HEAVY_GLYPHS,
) -> list[str]:
    settings = settings or DashboardSettings()
    renderer = DashboardRenderer(
        build_grid_plan(settings.grid_rows, settings.grid_cols),
        settings.layout_options(),
        glyphs,
    )
    return renderer.render_buffer(FixedElapsed(elapsed), width, height).lines()
