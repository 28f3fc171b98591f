# rusuku/core/render_model.py
# Per-frame projection of timer + grid plan into boxes for a host renderer to paint

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Protocol

from .grid_plan import CellBorderSpec, Corners, GridBorderPlan, Side

DEFAULT_TITLE = " Welcome to Rusuku "

TITLE_STYLE = "rusuku.title"
TIMER_STYLE = "rusuku.timer"
BORDER_STYLE = "rusuku.border"


class ElapsedSource(Protocol):
    def elapsed(self) -> float: ...


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class BoxRegion:
    rect: Rect
    sides: Side = Side.ALL
    corners: Corners = field(default_factory=Corners)
    title: str | None = None
    text: str | None = None
    title_style: str = TITLE_STYLE
    text_style: str = TIMER_STYLE
    border_style: str = BORDER_STYLE


@dataclass(frozen=True)
class GridCellRegion:
    rect: Rect
    spec: CellBorderSpec

    def as_box(self) -> BoxRegion:
        return BoxRegion(rect=self.rect, sides=self.spec.sides, corners=self.spec.corners)


@dataclass(frozen=True)
class LayoutOptions:
    header_percent: int = 15
    max_cell_width: int = 18
    max_cell_height: int = 18
    title: str = DEFAULT_TITLE


@dataclass(frozen=True)
class RenderModel:
    area: Rect
    header_text: str
    header_regions: tuple[BoxRegion, BoxRegion, BoxRegion]
    grid_regions: tuple[GridCellRegion, ...]

    # header first, then grid cells row-major
    def boxes(self) -> Iterator[BoxRegion]:
        yield from self.header_regions
        for region in self.grid_regions:
            yield region.as_box()


# * Format elapsed seconds as MM:SS (minutes keep counting past 59, no hour rollover)
def format_elapsed(seconds: float) -> str:
    total = int(seconds)
    minutes = total // 60
    secs = total % 60
    return f"{minutes:02d}:{secs:02d}"


# * Split `total` into `parts` near-equal lengths; leftovers go to the center-most parts first
def split_even(total: int, parts: int) -> list[int]:
    base, remainder = divmod(max(0, total), parts)
    sizes = [base] * parts
    by_centrality = sorted(range(parts), key=lambda i: (abs(2 * i - (parts - 1)), i))
    for i in by_centrality[:remainder]:
        sizes[i] += 1
    return sizes


# * Split area into header band (header_percent, rounded half-up) & body band
def split_header_body(area: Rect, header_percent: int) -> tuple[Rect, Rect]:
    header_h = min(area.height, int(area.height * header_percent / 100 + 0.5))
    header = Rect(area.x, area.y, area.width, header_h)
    body = Rect(area.x, area.y + header_h, area.width, area.height - header_h)
    return header, body


def layout_header(header: Rect, header_text: str, title: str) -> tuple[BoxRegion, BoxRegion, BoxRegion]:
    widths = split_even(header.width, 3)
    rects = []
    x = header.x
    for w in widths:
        rects.append(Rect(x, header.y, w, header.height))
        x += w

    left = BoxRegion(rect=rects[0])
    center = BoxRegion(
        rect=rects[1], sides=Side.TOP | Side.BOTTOM, title=title, text=header_text
    )
    right = BoxRegion(rect=rects[2])
    return left, center, right


# * Fixed-size cells centered on both axes, shrunk evenly when the body is too small
def layout_grid(
    body: Rect, rows: int, cols: int, max_cell_width: int, max_cell_height: int
) -> dict[tuple[int, int], Rect]:
    cell_w = min(max_cell_width, body.width // cols)
    cell_h = min(max_cell_height, body.height // rows)
    x0 = body.x + (body.width - cell_w * cols) // 2
    y0 = body.y + (body.height - cell_h * rows) // 2
    return {
        (col, row): Rect(x0 + col * cell_w, y0 + row * cell_h, cell_w, cell_h)
        for row in range(rows)
        for col in range(cols)
    }


def build_render_model(
    timer: ElapsedSource,
    plan: GridBorderPlan,
    area: Rect,
    options: LayoutOptions | None = None,
) -> RenderModel:
    opts = options or LayoutOptions()
    header_text = format_elapsed(timer.elapsed())
    header, body = split_header_body(area, opts.header_percent)

    cell_rects = layout_grid(
        body, plan.rows, plan.cols, opts.max_cell_width, opts.max_cell_height
    )
    grid_regions = tuple(
        GridCellRegion(rect=cell_rects[(spec.col, spec.row)], spec=spec) for spec in plan
    )

    return RenderModel(
        area=area,
        header_text=header_text,
        header_regions=layout_header(header, header_text, opts.title),
        grid_regions=grid_regions,
    )
