"""Data models for move and word verification."""

from typing import List, NamedTuple


Grid = List[List[str]]


class Cell(NamedTuple):
    """A grid coordinate."""
    row: int
    col: int


class WordPlacement(NamedTuple):
    """A word found on the grid and the cells spelling it."""
    word: str
    cells: List[Cell]
