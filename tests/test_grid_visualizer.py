"""
Test suite for text rendering and swap parsing.
"""

import pytest
from src.engine import MoveSpec
from src.utils.grid_visualizer import format_move, parse_swap, render_grid


GRID = [["C", "T"], ["O", "A"]]


class TestParseSwap:
    """Test cases for parse_swap."""

    def test_parses_pair(self):
        assert parse_swap("0,1:1,1") == [(0, 1), (1, 1)]

    def test_allows_spaces(self):
        assert parse_swap(" 0, 1 : 1,1") == [(0, 1), (1, 1)]

    @pytest.mark.parametrize("text", ["", "0,1", "0,1:1", "a,b:c,d", "0,1:1,1:2,2"])
    def test_rejects_malformed(self, text):
        with pytest.raises(ValueError, match="expected R,C:R,C"):
            parse_swap(text)


class TestRender:
    """Test cases for render_grid and format_move."""

    def test_plain_grid(self):
        assert render_grid(GRID) == " C  T\n O  A"

    def test_highlighted_cells(self):
        assert render_grid(GRID, [(0, 1)]) == " C [T]\n O  A"

    def test_empty_grid(self):
        assert render_grid([]) == ""

    def test_format_move(self):
        move = MoveSpec(from_cell=(0, 1), to_cell=(1, 1))
        assert format_move(move) == "Swap (0, 1) <-> (1, 1)"
