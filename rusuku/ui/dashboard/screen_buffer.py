# rusuku/ui/dashboard/screen_buffer.py
# Character/style frame buffer & block-border painting for the dashboard

from __future__ import annotations

from dataclasses import dataclass

from ..core.rich_components import Text, box
from ...core.grid_plan import Junction, Side
from ...core.render_model import BoxRegion, RenderModel


@dataclass(frozen=True)
class GlyphSet:
    """Box-drawing characters for every ``Junction``.

    Field names match ``Junction`` values so a junction resolves by attribute
    lookup. Sets are derived from rich's ``Box`` definitions so they stay in
    step with the tables rich draws elsewhere in the UI.
    """

    horizontal: str
    vertical: str
    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    tee_down: str
    tee_up: str
    tee_right: str
    tee_left: str
    cross: str

    @classmethod
    def from_box(cls, b: box.Box) -> "GlyphSet":
        return cls(
            horizontal=b.top,
            vertical=b.head_left,
            top_left=b.top_left,
            top_right=b.top_right,
            bottom_left=b.bottom_left,
            bottom_right=b.bottom_right,
            tee_down=b.top_divider,
            tee_up=b.bottom_divider,
            tee_right=b.row_left,
            tee_left=b.row_right,
            cross=b.row_cross,
        )

    def glyph(self, junction: Junction) -> str:
        return getattr(self, junction.value)


HEAVY_GLYPHS = GlyphSet.from_box(box.HEAVY)

GLYPH_SETS: dict[str, GlyphSet] = {
    "heavy": HEAVY_GLYPHS,
    "square": GlyphSet.from_box(box.SQUARE),
    "double": GlyphSet.from_box(box.DOUBLE),
}


class ScreenBuffer:
    """Fixed-size grid of (character, style) cells; writes outside it are dropped."""

    def __init__(self, width: int, height: int, fill: str = " "):
        self.width = max(0, width)
        self.height = max(0, height)
        self._chars = [[fill] * self.width for _ in range(self.height)]
        self._styles: list[list[str | None]] = [
            [None] * self.width for _ in range(self.height)
        ]

    def set(self, x: int, y: int, char: str, style: str | None = None) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            self._chars[y][x] = char
            self._styles[y][x] = style

    def get(self, x: int, y: int) -> str:
        return self._chars[y][x]

    def style_at(self, x: int, y: int) -> str | None:
        return self._styles[y][x]

    def put_text(self, x: int, y: int, text: str, style: str | None = None, max_width: int | None = None) -> None:
        if max_width is not None:
            text = text[: max(0, max_width)]
        for offset, ch in enumerate(text):
            self.set(x + offset, y, ch, style)

    # * Paint a bordered box: sides first, then corner junctions where both meeting edges are drawn
    def paint_box(self, region: BoxRegion, glyphs: GlyphSet = HEAVY_GLYPHS) -> None:
        rect = region.rect
        if rect.is_empty:
            return

        sides = region.sides
        left, right = rect.x, rect.right - 1
        top, bottom = rect.y, rect.bottom - 1
        style = region.border_style

        if Side.LEFT in sides:
            for y in range(top, bottom + 1):
                self.set(left, y, glyphs.vertical, style)
        if Side.RIGHT in sides:
            for y in range(top, bottom + 1):
                self.set(right, y, glyphs.vertical, style)
        if Side.TOP in sides:
            for x in range(left, right + 1):
                self.set(x, top, glyphs.horizontal, style)
        if Side.BOTTOM in sides:
            for x in range(left, right + 1):
                self.set(x, bottom, glyphs.horizontal, style)

        corners = region.corners
        if Side.TOP in sides and Side.LEFT in sides:
            self.set(left, top, glyphs.glyph(corners.top_left), style)
        if Side.TOP in sides and Side.RIGHT in sides:
            self.set(right, top, glyphs.glyph(corners.top_right), style)
        if Side.BOTTOM in sides and Side.LEFT in sides:
            self.set(left, bottom, glyphs.glyph(corners.bottom_left), style)
        if Side.BOTTOM in sides and Side.RIGHT in sides:
            self.set(right, bottom, glyphs.glyph(corners.bottom_right), style)

        # title & body text are centered between whichever vertical edges are drawn
        inner_left = left + 1 if Side.LEFT in sides else left
        inner_right = right - 1 if Side.RIGHT in sides else right
        inner_width = inner_right - inner_left + 1

        if region.title:
            self._put_centered(top, inner_left, inner_width, region.title, region.title_style)

        if region.text:
            text_row = top + 1 if Side.TOP in sides else top
            last_inner_row = bottom - 1 if Side.BOTTOM in sides else bottom
            if text_row <= last_inner_row:
                self._put_centered(text_row, inner_left, inner_width, region.text, region.text_style)

    def _put_centered(self, y: int, x: int, width: int, text: str, style: str) -> None:
        if width <= 0:
            return
        text = text[:width]
        offset = (width - len(text)) // 2
        self.put_text(x + offset, y, text, style)

    def paint_model(self, model: RenderModel, glyphs: GlyphSet = HEAVY_GLYPHS) -> None:
        for region in model.boxes():
            self.paint_box(region, glyphs)

    # plain rows, trailing spaces kept so columns line up
    def lines(self) -> list[str]:
        return ["".join(row) for row in self._chars]

    # * Convert to a single rich Text, merging runs of equally styled cells
    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop", end="")
        for y in range(self.height):
            if y:
                text.append("\n")
            run_start = 0
            for x in range(1, self.width + 1):
                if x == self.width or self._styles[y][x] != self._styles[y][run_start]:
                    chunk = "".join(self._chars[y][run_start:x])
                    text.append(chunk, style=self._styles[y][run_start] or "")
                    run_start = x
        return text

    def __str__(self) -> str:
        return "\n".join(self.lines())
