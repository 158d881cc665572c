"""Swap and word verification for the puzzle engine."""

from .models import Cell, Grid, WordPlacement
from .moves import in_bounds, are_adjacent, swap_cells, match_move, touched_lines
from .words import find_new_words, find_word_coordinates, locate_words
from .data import load_word_list

__all__ = [
    # Models
    "Cell",
    "Grid",
    "WordPlacement",
    # Moves
    "in_bounds",
    "are_adjacent",
    "swap_cells",
    "match_move",
    "touched_lines",
    # Words
    "find_new_words",
    "find_word_coordinates",
    "locate_words",
    # Dictionary
    "load_word_list",
]
