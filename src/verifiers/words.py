"""Word scanning on swap grids."""

from typing import AbstractSet, List, Optional, Set

from .models import Cell, Grid, WordPlacement
from .moves import in_bounds, touched_lines


def line_cells(grid: Grid, kind: str, index: int) -> List[Cell]:
    """The cells of one row or column, in reading order."""
    if kind == "row":
        return [Cell(index, c) for c in range(len(grid[0]))]
    return [Cell(r, index) for r in range(len(grid))]


def find_new_words(
    grid: Grid,
    a: Cell,
    b: Cell,
    lexicon: AbstractSet[str],
    word_length: int,
    already_found: Optional[AbstractSet[str]] = None,
) -> List[str]:
    """
    Find the words a swap of `a` and `b` created.

    Scans every row and column touched by the swap on the post-swap `grid`
    for windows of exactly `word_length` letters that appear in `lexicon`
    and have not been formed before.

    Args:
        grid: The grid after the swap
        a, b: The swapped cells
        lexicon: Upper-case words considered valid
        word_length: Length of a word
        already_found: Words formed earlier in the session

    Returns:
        Sorted list of newly formed words
    """
    already_found = already_found or set()
    found: Set[str] = set()

    for kind, index in touched_lines(a, b):
        cells = line_cells(grid, kind, index)
        text = "".join(grid[cell.row][cell.col] for cell in cells).upper()
        for start in range(len(text) - word_length + 1):
            window = text[start:start + word_length]
            if window in lexicon and window not in already_found:
                found.add(window)

    return sorted(found)


def find_word_coordinates(grid: Grid, word: str, a: Cell, b: Cell) -> List[Cell]:
    """
    Locate `word` in the rows, then the columns, touched by a swap.

    Returns:
        The cells spelling the word, or an empty list if it is not there
    """
    if not word or not in_bounds(grid, a) or not in_bounds(grid, b):
        return []

    word = word.upper()
    lines = touched_lines(a, b)
    for kind, index in sorted(lines, key=lambda line: line[0] != "row"):
        cells = line_cells(grid, kind, index)
        text = "".join(grid[cell.row][cell.col] for cell in cells).upper()
        start = text.find(word)
        if start != -1:
            return cells[start:start + len(word)]
    return []


def locate_words(grid: Grid, words: List[str], a: Cell, b: Cell) -> List[WordPlacement]:
    """Placements for each of `words` that can be found around a swap."""
    placements = []
    for word in words:
        cells = find_word_coordinates(grid, word, a, b)
        if cells:
            placements.append(WordPlacement(word.upper(), cells))
    return placements
