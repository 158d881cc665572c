"""
Test suite for swap verification helpers.

Covers:
- Bounds checks, including malformed coordinates
- Four-directional adjacency
- Grid swaps
- Matching a swap against reachable tree nodes
"""

import pytest
from src.verifiers import Cell, are_adjacent, in_bounds, match_move, swap_cells, touched_lines


GRID = [
    ["C", "T", "A"],
    ["O", "A", "R"],
]


class TestInBounds:
    """Test cases for in_bounds."""

    @pytest.mark.parametrize("cell", [(0, 0), (1, 2), Cell(1, 0), [0, 1]])
    def test_on_grid(self, cell):
        assert in_bounds(GRID, cell) is True

    @pytest.mark.parametrize("cell", [(-1, 0), (2, 0), (0, 3), (0, -1)])
    def test_off_grid(self, cell):
        assert in_bounds(GRID, cell) is False

    @pytest.mark.parametrize("cell", [None, (0,), (0, 1, 2), ("a", "b"), (0.5, 1)])
    def test_malformed(self, cell):
        """Anything that is not a pair of ints is out of bounds."""
        assert in_bounds(GRID, cell) is False

    def test_empty_grid(self):
        assert in_bounds([], (0, 0)) is False


class TestAdjacency:
    """Test cases for are_adjacent."""

    @pytest.mark.parametrize("b", [(1, 2), (0, 1), (1, 0), (2, 1)])
    def test_neighbours(self, b):
        assert are_adjacent((1, 1), b) is True

    @pytest.mark.parametrize("b", [(0, 0), (2, 2), (1, 3), (1, 1)])
    def test_not_neighbours(self, b):
        """Diagonals, gaps and the cell itself are not adjacent."""
        assert are_adjacent((1, 1), b) is False

    def test_symmetric(self):
        assert are_adjacent((0, 0), (0, 1)) == are_adjacent((0, 1), (0, 0))


class TestSwapCells:
    """Test cases for swap_cells."""

    def test_swaps_letters(self):
        swapped = swap_cells(GRID, Cell(0, 1), Cell(0, 2))
        assert swapped[0] == ["C", "A", "T"]

    def test_original_untouched(self):
        swap_cells(GRID, Cell(0, 0), Cell(1, 0))
        assert GRID[0][0] == "C"
        assert GRID[1][0] == "O"

    def test_swap_twice_restores(self):
        a, b = Cell(0, 0), Cell(1, 0)
        assert swap_cells(swap_cells(GRID, a, b), a, b) == GRID


class TestTouchedLines:
    """Test cases for touched_lines."""

    def test_horizontal_swap(self):
        """A swap within a row touches that row and both columns."""
        assert touched_lines(Cell(0, 1), Cell(0, 2)) == [("row", 0), ("col", 1), ("col", 2)]

    def test_vertical_swap(self):
        assert touched_lines(Cell(0, 1), Cell(1, 1)) == [("row", 0), ("row", 1), ("col", 1)]


class TestMatchMove:
    """Test cases for match_move."""

    def test_matches_either_direction(self, level):
        tree = level.exploration_tree
        assert match_move(tree, tree.roots, Cell(0, 1), Cell(0, 2)) == 0
        assert match_move(tree, tree.roots, Cell(0, 2), Cell(0, 1)) == 0

    def test_only_reachable_nodes(self, level):
        """A node deeper in the tree does not match from the roots."""
        tree = level.exploration_tree
        assert match_move(tree, tree.roots, Cell(1, 0), Cell(2, 0)) is None
        assert match_move(tree, [1, 3], Cell(1, 0), Cell(2, 0)) == 3

    def test_no_match(self, level):
        tree = level.exploration_tree
        assert match_move(tree, tree.roots, Cell(0, 0), Cell(0, 1)) is None
