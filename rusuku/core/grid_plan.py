# rusuku/core/grid_plan.py
# Border & junction plan for a rows x cols grid of cells so the grid paints as one ruled surface

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto
from functools import lru_cache
from typing import Iterator

from .exceptions import GridShapeError


# * Cell edges a box may paint
class Side(Flag):
    NONE = 0
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    ALL = TOP | BOTTOM | LEFT | RIGHT


# * Where an index sits along its axis
class Position(Enum):
    FIRST = "first"
    MIDDLE = "middle"
    LAST = "last"


# * Abstract glyph painted where edges meet (resolved to characters by the renderer)
class Junction(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"
    TEE_DOWN = "tee_down"
    TEE_UP = "tee_up"
    TEE_RIGHT = "tee_right"
    TEE_LEFT = "tee_left"
    CROSS = "cross"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


# junction at a grid-line intersection keyed by (vertical line position, horizontal line position)
_LATTICE_JUNCTIONS: dict[tuple[Position, Position], Junction] = {
    (Position.FIRST, Position.FIRST): Junction.TOP_LEFT,
    (Position.MIDDLE, Position.FIRST): Junction.TEE_DOWN,
    (Position.LAST, Position.FIRST): Junction.TOP_RIGHT,
    (Position.FIRST, Position.MIDDLE): Junction.TEE_RIGHT,
    (Position.MIDDLE, Position.MIDDLE): Junction.CROSS,
    (Position.LAST, Position.MIDDLE): Junction.TEE_LEFT,
    (Position.FIRST, Position.LAST): Junction.BOTTOM_LEFT,
    (Position.MIDDLE, Position.LAST): Junction.TEE_UP,
    (Position.LAST, Position.LAST): Junction.BOTTOM_RIGHT,
}


# * Classify an index as first, middle or last of `count` (first wins when count == 1)
def classify(index: int, count: int) -> Position:
    if index == 0:
        return Position.FIRST
    if index == count - 1:
        return Position.LAST
    return Position.MIDDLE


# * Junction at grid-line intersection (x, y); x in 0..cols, y in 0..rows
def junction_at(x: int, y: int, cols: int, rows: int) -> Junction:
    # cols + 1 vertical lines & rows + 1 horizontal lines, so both ends are always distinct
    return _LATTICE_JUNCTIONS[(classify(x, cols + 1), classify(y, rows + 1))]


@dataclass(frozen=True)
class Corners:
    top_left: Junction = Junction.TOP_LEFT
    top_right: Junction = Junction.TOP_RIGHT
    bottom_left: Junction = Junction.BOTTOM_LEFT
    bottom_right: Junction = Junction.BOTTOM_RIGHT


@dataclass(frozen=True)
class CellBorderSpec:
    col: int
    row: int
    sides: Side
    corners: Corners

    def draws(self, side: Side) -> bool:
        return side in self.sides


# * Edges cell (col, row) paints so every shared edge is drawn exactly once
def cell_sides(col: int, row: int, cols: int, rows: int) -> Side:
    last_col = cols - 1
    sides = Side.BOTTOM
    if row == 0:
        sides |= Side.TOP
    # the last column's left separator belongs to its neighbor's right edge
    if col == 0 or col < last_col:
        sides |= Side.LEFT
    if col >= last_col - 1:
        sides |= Side.RIGHT
    return sides


def cell_border_spec(col: int, row: int, cols: int, rows: int) -> CellBorderSpec:
    corners = Corners(
        top_left=junction_at(col, row, cols, rows),
        top_right=junction_at(col + 1, row, cols, rows),
        bottom_left=junction_at(col, row + 1, cols, rows),
        bottom_right=junction_at(col + 1, row + 1, cols, rows),
    )
    return CellBorderSpec(
        col=col, row=row, sides=cell_sides(col, row, cols, rows), corners=corners
    )


class GridBorderPlan:
    """Per-cell border lookup table for one grid shape.

    The table is built once at construction and never changes; its domain is
    exactly ``0 <= col < cols`` x ``0 <= row < rows``.
    """

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 1 or cols < 1:
            raise GridShapeError(
                f"Grid needs at least one row and one column, got {rows}x{cols}",
                rows=rows,
                cols=cols,
            )
        self.rows = rows
        self.cols = cols
        self._table: dict[tuple[int, int], CellBorderSpec] = {
            (col, row): cell_border_spec(col, row, cols, rows)
            for row in range(rows)
            for col in range(cols)
        }

    def cell(self, col: int, row: int) -> CellBorderSpec:
        try:
            return self._table[(col, row)]
        except KeyError:
            raise IndexError(
                f"Cell ({col}, {row}) is outside the {self.rows}x{self.cols} grid"
            ) from None

    def __getitem__(self, key: tuple[int, int]) -> CellBorderSpec:
        return self.cell(*key)

    # row-major iteration
    def __iter__(self) -> Iterator[CellBorderSpec]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBorderPlan):
            return NotImplemented
        return self._table == other._table

    def __hash__(self) -> int:
        return hash((self.rows, self.cols))

    def __repr__(self) -> str:
        return f"GridBorderPlan(rows={self.rows}, cols={self.cols})"


# * Cached plan per shape; the plan is immutable so sharing is safe
@lru_cache(maxsize=16)
def build_grid_plan(rows: int, cols: int) -> GridBorderPlan:
    return GridBorderPlan(rows, cols)
