# rusuku/ui/dashboard/__init__.py
# Full-screen dashboard: state, key dispatch, frame painting & the poll-render loop

from .dashboard_display import DashboardSession, render_snapshot
from .dashboard_renderer import DashboardRenderer
from .dashboard_state import DashboardState, DashboardStateManager
from .dashboard_input import DashboardInputHandler, KeyEvent, KeyEventKind, KEY_BINDINGS
from .screen_buffer import ScreenBuffer, GlyphSet, GLYPH_SETS, HEAVY_GLYPHS

__all__ = [
    "DashboardSession",
    "render_snapshot",
    "DashboardRenderer",
    "DashboardState",
    "DashboardStateManager",
    "DashboardInputHandler",
    "KeyEvent",
    "KeyEventKind",
    "KEY_BINDINGS",
    "ScreenBuffer",
    "GlyphSet",
    "GLYPH_SETS",
    "HEAVY_GLYPHS",
]
