# rusuku/ui/dashboard/dashboard_renderer.py
# Paints the per-frame render model into a screen buffer sized to the terminal

from __future__ import annotations

from ..core.rich_components import Text
from ...core.grid_plan import GridBorderPlan
from ...core.render_model import (
    ElapsedSource,
    LayoutOptions,
    Rect,
    RenderModel,
    build_render_model,
)
from .screen_buffer import HEAVY_GLYPHS, GlyphSet, ScreenBuffer


class DashboardRenderer:

    def __init__(
        self,
        plan: GridBorderPlan,
        options: LayoutOptions | None = None,
        glyphs: GlyphSet = HEAVY_GLYPHS,
    ):
        self.plan = plan
        self.options = options or LayoutOptions()
        self.glyphs = glyphs

    def build_model(self, timer: ElapsedSource, width: int, height: int) -> RenderModel:
        return build_render_model(timer, self.plan, Rect(0, 0, width, height), self.options)

    def render_buffer(self, timer: ElapsedSource, width: int, height: int) -> ScreenBuffer:
        buffer = ScreenBuffer(width, height)
        buffer.paint_model(self.build_model(timer, width, height), self.glyphs)
        return buffer

    def render_screen(self, timer: ElapsedSource, width: int, height: int) -> Text:
        return self.render_buffer(timer, width, height).to_text()
