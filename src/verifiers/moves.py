"""
Move verification for swaps.

Validates:
1. Both cells lie on the grid
2. The cells are four-directionally adjacent
3. The swap matches one of the currently reachable exploration nodes
"""

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from .models import Cell, Grid

if TYPE_CHECKING:
    from ..engine.models import ExplorationTree


def in_bounds(grid: Grid, cell: Sequence[int]) -> bool:
    """Check that `cell` is a (row, col) pair addressing a cell of `grid`."""
    try:
        row, col = cell
    except (TypeError, ValueError):
        return False
    if not (isinstance(row, int) and isinstance(col, int)):
        return False
    return bool(grid) and 0 <= row < len(grid) and 0 <= col < len(grid[0])


def are_adjacent(a: Sequence[int], b: Sequence[int]) -> bool:
    """True for cells one step apart horizontally or vertically."""
    row_diff = abs(a[0] - b[0])
    col_diff = abs(a[1] - b[1])
    return (row_diff, col_diff) in ((1, 0), (0, 1))


def swap_cells(grid: Grid, a: Cell, b: Cell) -> Grid:
    """Return a copy of `grid` with the letters at `a` and `b` exchanged."""
    swapped = [list(row) for row in grid]
    swapped[a.row][a.col], swapped[b.row][b.col] = swapped[b.row][b.col], swapped[a.row][a.col]
    return swapped


def match_move(
    tree: "ExplorationTree",
    reachable: Iterable[int],
    a: Cell,
    b: Cell,
) -> Optional[int]:
    """
    Find the reachable node whose move swaps `a` and `b`.

    Matching is exact on coordinates and ignores direction. Nodes without a
    move never match.

    Returns:
        The matched node id, or None
    """
    for node_id in reachable:
        move = tree.node(node_id).move
        if move is not None and move.covers(a, b):
            return node_id
    return None


def touched_lines(a: Cell, b: Cell) -> List[Tuple[str, int]]:
    """Rows and columns a swap can change, as ('row' | 'col', index) pairs."""
    lines = [("row", a.row)]
    if b.row != a.row:
        lines.append(("row", b.row))
    lines.append(("col", a.col))
    if b.col != a.col:
        lines.append(("col", b.col))
    return lines
