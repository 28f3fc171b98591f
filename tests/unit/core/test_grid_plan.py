# tests/unit/core/test_grid_plan.py
# Unit tests for per-cell border sides & corner junctions of the ruled grid

import pytest

from rusuku.core.exceptions import GridShapeError
from rusuku.core.grid_plan import (
    Corners,
    GridBorderPlan,
    Junction,
    Position,
    Side,
    build_grid_plan,
    classify,
    junction_at,
)

T, B, L, R = Side.TOP, Side.BOTTOM, Side.LEFT, Side.RIGHT

SHAPES = [(r, c) for r in range(1, 6) for c in range(1, 6)]


class TestThreeByThree:

    # * Verify the nine cells paint the expected side sets
    def test_sides(self):
        plan = GridBorderPlan(3, 3)
        expected = {
            (0, 0): T | B | L,
            (1, 0): Side.ALL,
            (2, 0): T | B | R,
            (0, 1): B | L,
            (1, 1): B | L | R,
            (2, 1): B | R,
            (0, 2): B | L,
            (1, 2): B | L | R,
            (2, 2): B | R,
        }
        for (col, row), sides in expected.items():
            assert plan.cell(col, row).sides == sides, (col, row)

    # * Verify outer corners, T-junctions & the shared interior crosses
    def test_corners(self):
        plan = GridBorderPlan(3, 3)
        assert plan.cell(0, 0).corners.top_left is Junction.TOP_LEFT
        assert plan.cell(2, 0).corners.top_right is Junction.TOP_RIGHT
        assert plan.cell(0, 2).corners.bottom_left is Junction.BOTTOM_LEFT
        assert plan.cell(2, 2).corners.bottom_right is Junction.BOTTOM_RIGHT

        assert plan.cell(1, 0).corners.top_left is Junction.TEE_DOWN
        assert plan.cell(1, 0).corners.top_right is Junction.TEE_DOWN
        assert plan.cell(1, 2).corners.bottom_left is Junction.TEE_UP
        assert plan.cell(1, 2).corners.bottom_right is Junction.TEE_UP
        assert plan.cell(0, 0).corners.bottom_left is Junction.TEE_RIGHT
        assert plan.cell(2, 1).corners.bottom_right is Junction.TEE_LEFT

        # the center cell touches all four interior lattice points
        center = plan.cell(1, 1).corners
        assert center == Corners(
            top_left=Junction.CROSS,
            top_right=Junction.CROSS,
            bottom_left=Junction.CROSS,
            bottom_right=Junction.CROSS,
        )

    # * Verify draws() reflects the side set
    def test_draws(self):
        spec = GridBorderPlan(3, 3).cell(2, 1)
        assert spec.draws(Side.RIGHT)
        assert spec.draws(Side.BOTTOM)
        assert not spec.draws(Side.LEFT)
        assert not spec.draws(Side.TOP)


class TestEdgeOwnership:

    # * Verify every vertical separator is painted by exactly one of its two neighbors
    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_vertical_separators_drawn_once(self, rows, cols):
        plan = GridBorderPlan(rows, cols)
        for row in range(rows):
            for col in range(cols - 1):
                left_owns = plan.cell(col, row).draws(R)
                right_owns = plan.cell(col + 1, row).draws(L)
                assert left_owns != right_owns, (rows, cols, col, row)

    # * Verify every horizontal separator is painted by exactly one of its two neighbors
    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_horizontal_separators_drawn_once(self, rows, cols):
        plan = GridBorderPlan(rows, cols)
        for row in range(rows - 1):
            for col in range(cols):
                upper_owns = plan.cell(col, row).draws(B)
                lower_owns = plan.cell(col, row + 1).draws(T)
                assert upper_owns != lower_owns, (rows, cols, col, row)

    # * Verify the outer perimeter is fully drawn
    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_perimeter_drawn(self, rows, cols):
        plan = GridBorderPlan(rows, cols)
        for col in range(cols):
            assert plan.cell(col, 0).draws(T)
            assert plan.cell(col, rows - 1).draws(B)
        for row in range(rows):
            assert plan.cell(0, row).draws(L)
            assert plan.cell(cols - 1, row).draws(R)


class TestJunctionConsistency:

    # * Verify neighbors sharing a lattice point agree on its junction
    @pytest.mark.parametrize("rows,cols", SHAPES)
    def test_shared_corners_agree(self, rows, cols):
        plan = GridBorderPlan(rows, cols)
        for spec in plan:
            c, r = spec.col, spec.row
            assert spec.corners.top_left is junction_at(c, r, cols, rows)
            assert spec.corners.top_right is junction_at(c + 1, r, cols, rows)
            assert spec.corners.bottom_left is junction_at(c, r + 1, cols, rows)
            assert spec.corners.bottom_right is junction_at(c + 1, r + 1, cols, rows)

    # * Verify a single cell is a plain box
    def test_single_cell(self):
        spec = GridBorderPlan(1, 1).cell(0, 0)
        assert spec.sides == Side.ALL
        assert spec.corners == Corners()

    # * Verify a single row uses tees along the top & bottom only
    def test_single_row(self):
        plan = GridBorderPlan(1, 4)
        assert plan.cell(1, 0).corners.top_left is Junction.TEE_DOWN
        assert plan.cell(1, 0).corners.bottom_left is Junction.TEE_UP
        assert all(spec.corners.top_left is not Junction.CROSS for spec in plan)

    # * Verify a single column uses side tees between rows
    def test_single_column(self):
        plan = GridBorderPlan(4, 1)
        assert plan.cell(0, 1).corners.top_left is Junction.TEE_RIGHT
        assert plan.cell(0, 1).corners.top_right is Junction.TEE_LEFT

    # * Verify axis classification
    def test_classify(self):
        assert classify(0, 4) is Position.FIRST
        assert classify(1, 4) is Position.MIDDLE
        assert classify(3, 4) is Position.LAST
        assert classify(0, 1) is Position.FIRST


class TestPlanContainer:

    # * Verify invalid shapes are rejected
    @pytest.mark.parametrize("rows,cols", [(0, 3), (3, 0), (-1, 2)])
    def test_rejects_empty_shapes(self, rows, cols):
        with pytest.raises(GridShapeError) as exc_info:
            GridBorderPlan(rows, cols)
        assert exc_info.value.rows == rows
        assert exc_info.value.cols == cols

    # * Verify out-of-range lookups raise IndexError
    @pytest.mark.parametrize("col,row", [(3, 0), (0, 3), (-1, 0)])
    def test_lookup_outside_grid(self, col, row):
        plan = GridBorderPlan(3, 3)
        with pytest.raises(IndexError):
            plan.cell(col, row)

    # * Verify subscript access & row-major iteration
    def test_mapping_access(self):
        plan = GridBorderPlan(2, 3)
        assert plan[(2, 1)] is plan.cell(2, 1)
        assert len(plan) == 6
        assert [(s.col, s.row) for s in plan] == [
            (0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)
        ]

    # * Verify plans of the same shape are equal & cached plans are shared
    def test_equality_and_cache(self):
        assert GridBorderPlan(3, 3) == GridBorderPlan(3, 3)
        assert GridBorderPlan(3, 3) != GridBorderPlan(3, 4)
        assert build_grid_plan(3, 3) is build_grid_plan(3, 3)
        assert repr(build_grid_plan(2, 5)) == "GridBorderPlan(rows=2, cols=5)"
