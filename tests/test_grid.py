"""
Unit tests for the Grid adapter.
"""

import pytest

from pathfinder.exceptions import PreconditionError
from pathfinder.grid import Cell, Grid


class TestConstruction:
    """Test grid creation and the initial layout."""

    def test_default_start_end_layout(self):
        """Start and end sit in the middle row, a quarter in from each side."""
        grid = Grid(30, 20, allow_diagonal=False)
        assert grid.start == Cell(7, 10)
        assert grid.end == Cell(23, 10)

    def test_dimensions_must_be_positive(self):
        """A grid smaller than 1x1 should be rejected."""
        with pytest.raises(PreconditionError):
            Grid(0, 5)
        with pytest.raises(PreconditionError):
            Grid(5, 0)

    def test_single_cell_grid_has_no_end(self):
        """A 1x1 grid cannot hold both markers; the end is left unset."""
        grid = Grid(1, 1)
        assert grid.start == Cell(0, 0)
        assert grid.end is None
        with pytest.raises(PreconditionError):
            grid.require_endpoints()

    def test_start_equal_to_end_rejected(self):
        """Explicit start and end must differ."""
        with pytest.raises(PreconditionError):
            Grid(3, 3, start=Cell(1, 1), end=Cell(1, 1))

    def test_out_of_bounds_start_rejected(self):
        """Start outside the grid should be rejected."""
        with pytest.raises(PreconditionError):
            Grid(3, 3, start=Cell(5, 5), end=Cell(0, 0))

    def test_new_grid_is_open(self, open_grid):
        """No cell should be blocked or visited on a new grid."""
        assert open_grid.blocked_count() == 0
        assert open_grid.visited_count() == 0
        assert len(open_grid.open_cells()) == 25


class TestLookup:
    """Test cell lookup."""

    def test_get_cell_in_bounds(self, open_grid):
        assert open_grid.get_cell(4, 4) == Cell(4, 4)

    def test_get_cell_out_of_bounds(self, open_grid):
        """Out-of-bounds lookups return None."""
        assert open_grid.get_cell(5, 0) is None
        assert open_grid.get_cell(0, -1) is None

    def test_get_cells_resolves_positions(self, open_grid):
        cells = open_grid.get_cells([(0, 0), (1, 2)])
        assert cells == [Cell(0, 0), Cell(1, 2)]

    def test_get_cells_raises_for_unresolved(self, open_grid):
        """Positions outside the grid are a precondition failure."""
        with pytest.raises(PreconditionError):
            open_grid.get_cells([(0, 0), (7, 7)])

    def test_cells_are_value_handles(self):
        """Cells with the same coordinates are equal and hashable."""
        assert Cell(1, 2) == Cell(1, 2)
        assert len({Cell(1, 2), Cell(1, 2)}) == 1

    def test_manhattan(self):
        assert Cell(0, 2).manhattan(Cell(4, 2)) == 4
        assert Cell(1, 1).manhattan(Cell(3, 4)) == 5


class TestAdjacentCells:
    """Test neighbour enumeration."""

    def test_orthogonal_order(self):
        """Neighbours come right, down, left, up."""
        grid = Grid(3, 3, start=Cell(0, 0), end=Cell(2, 2), allow_diagonal=False)
        assert grid.adjacent_cells(Cell(1, 1)) == [
            Cell(2, 1),
            Cell(1, 2),
            Cell(0, 1),
            Cell(1, 0),
        ]

    def test_diagonal_mode_adds_diagonals_and_skips_start(self):
        """Diagonal mode appends the four diagonals; start is never returned."""
        grid = Grid(3, 3, start=Cell(0, 0), end=Cell(2, 2), allow_diagonal=True)
        assert grid.adjacent_cells(Cell(1, 1)) == [
            Cell(2, 1),
            Cell(1, 2),
            Cell(0, 1),
            Cell(1, 0),
            Cell(0, 2),
            Cell(2, 2),
            Cell(2, 0),
        ]

    def test_corner_excludes_out_of_bounds(self):
        grid = Grid(3, 3, start=Cell(0, 0), end=Cell(1, 1), allow_diagonal=False)
        assert grid.adjacent_cells(Cell(2, 2)) == [Cell(1, 2), Cell(2, 1)]

    def test_start_excluded(self, open_grid):
        """The start cell is never a neighbour."""
        assert open_grid.start not in open_grid.adjacent_cells(Cell(1, 2))

    def test_ignore_blocked(self, open_grid):
        open_grid.set_blocked(Cell(2, 2), True)
        assert Cell(2, 2) in open_grid.adjacent_cells(Cell(1, 2))
        assert Cell(2, 2) not in open_grid.adjacent_cells(Cell(1, 2), ignore_blocked=True)

    def test_ignore_visited(self, open_grid):
        open_grid.mark_visited(Cell(1, 1))
        assert Cell(1, 1) in open_grid.adjacent_cells(Cell(1, 2))
        assert Cell(1, 1) not in open_grid.adjacent_cells(Cell(1, 2), ignore_visited=True)


class TestVisitMarking:
    """Test the visited marker and observer notifications."""

    def test_mark_visited_notifies_observer(self, open_grid, recorder):
        open_grid.mark_visited(Cell(1, 1))
        assert open_grid.is_visited(Cell(1, 1))
        assert recorder.visits == [Cell(1, 1)]
        assert open_grid.cells_checked == 1

    def test_mark_visited_is_idempotent(self, open_grid, recorder):
        """A second mark of the same cell is not counted or reported."""
        open_grid.mark_visited(Cell(1, 1))
        open_grid.mark_visited(Cell(1, 1))
        assert recorder.visits == [Cell(1, 1)]
        assert open_grid.cells_checked == 1

    def test_clear_visited_resets_markers(self, open_grid):
        open_grid.mark_visited(Cell(1, 1))
        open_grid.clear_visited()
        assert not open_grid.is_visited(Cell(1, 1))
        assert open_grid.cells_checked == 0

    def test_mark_path(self, open_grid, recorder):
        path = [Cell(0, 2), Cell(1, 2)]
        open_grid.mark_path(path)
        assert open_grid.is_in_path(Cell(1, 2))
        assert recorder.path == path
        open_grid.clear_path()
        assert not open_grid.is_in_path(Cell(1, 2))


class TestBlocking:
    """Test wall placement and editing."""

    def test_block_wall_skips_start_and_end(self, open_grid, recorder):
        """block_wall leaves start/end open and blocks the rest."""
        row = open_grid.get_cells([(column, 2) for column in range(5)])
        open_grid.block_wall(*row)
        assert not open_grid.is_blocked(open_grid.start)
        assert not open_grid.is_blocked(open_grid.end)
        assert open_grid.blocked_count() == 3
        assert recorder.walls == [[Cell(1, 2), Cell(2, 2), Cell(3, 2)]]
        assert recorder.pauses  # walls pause for display

    @pytest.mark.parametrize("cell", [Cell(-1, 0), Cell(5, 0), Cell(0, -1), Cell(0, 5)])
    def test_block_wall_rejects_out_of_bounds(self, open_grid, recorder, cell):
        """A wall cell off the grid fails and no cell is blocked."""
        with pytest.raises(PreconditionError):
            open_grid.block_wall(Cell(1, 0), cell)
        assert open_grid.blocked_count() == 0
        assert recorder.walls == []

    def test_negative_cell_does_not_wrap(self, open_grid):
        """Cell(-1, 0) must not alias the last column."""
        with pytest.raises(PreconditionError):
            open_grid.block_wall(Cell(-1, 0))
        assert not open_grid.is_blocked(Cell(4, 0))

    @pytest.mark.parametrize("cell", [Cell(-1, 0), Cell(5, 0)])
    def test_flag_access_rejects_out_of_bounds(self, open_grid, cell):
        open_grid.fill_all_blocked()
        with pytest.raises(PreconditionError):
            open_grid.unblock(Cell(1, 1), cell)
        assert open_grid.is_blocked(Cell(1, 1))
        for access in (open_grid.is_blocked, open_grid.is_visited, open_grid.is_in_path, open_grid.mark_visited):
            with pytest.raises(PreconditionError):
                access(cell)
        with pytest.raises(PreconditionError):
            open_grid.mark_path([cell])

    def test_fill_all_blocked(self, open_grid):
        """Every cell but start and end is blocked."""
        open_grid.fill_all_blocked()
        assert open_grid.blocked_count() == 23
        assert open_grid.open_cells() == [Cell(0, 2), Cell(4, 2)]

    def test_unblock(self, open_grid):
        open_grid.fill_all_blocked()
        open_grid.unblock(Cell(1, 1), Cell(2, 2))
        assert open_grid.blocked_count() == 21

    def test_cannot_block_start_or_end(self, open_grid):
        with pytest.raises(PreconditionError):
            open_grid.set_blocked(open_grid.start, True)
        with pytest.raises(PreconditionError):
            open_grid.set_blocked(open_grid.end, True)

    def test_toggle_blocked(self, open_grid):
        assert open_grid.toggle_blocked(Cell(2, 2)) is True
        assert open_grid.toggle_blocked(Cell(2, 2)) is False

    def test_move_start(self, open_grid):
        open_grid.move_start(Cell(0, 0))
        assert open_grid.start == Cell(0, 0)

    def test_move_start_onto_blocked_rejected(self, open_grid):
        open_grid.set_blocked(Cell(0, 0), True)
        with pytest.raises(PreconditionError):
            open_grid.move_start(Cell(0, 0))

    def test_move_end_onto_start_rejected(self, open_grid):
        with pytest.raises(PreconditionError):
            open_grid.move_end(open_grid.start)


class TestHousekeeping:
    """Test reset, resize and rendering."""

    def test_reset_restores_layout(self, open_grid):
        open_grid.set_blocked(Cell(2, 2), True)
        open_grid.mark_visited(Cell(1, 1))
        open_grid.reset()
        assert open_grid.blocked_count() == 0
        assert open_grid.visited_count() == 0
        assert open_grid.start == Cell(1, 2)
        assert open_grid.end == Cell(4, 2)

    def test_resize(self, open_grid):
        open_grid.set_blocked(Cell(2, 2), True)
        open_grid.resize(8, 4)
        assert (open_grid.columns, open_grid.rows) == (8, 4)
        assert open_grid.blocked_count() == 0
        assert open_grid.start == Cell(2, 2)
        assert open_grid.end == Cell(6, 2)

    def test_to_text(self, walled_grid):
        walled_grid.mark_visited(Cell(0, 0))
        text = walled_grid.to_text(path=[Cell(0, 2)])
        assert text.splitlines() == [".  ", "S#E", "*  "]

    def test_stats(self, open_grid):
        stats = open_grid.stats()
        assert stats["columns"] == 5
        assert stats["blocked"] == 0
        assert stats["allow_diagonal"] is False
