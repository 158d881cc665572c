from typing import Iterable, List, Optional, Sequence, Tuple

from ..verifiers import Grid


def format_cell(cell: Sequence[int]) -> str:
    return f"({cell[0]}, {cell[1]})"


def format_move(move) -> str:
    """Render a MoveSpec as 'Swap (r, c) <-> (r, c)'."""
    return f"Swap {format_cell(move.from_cell)} <-> {format_cell(move.to_cell)}"


def parse_swap(text: str) -> List[Tuple[int, int]]:
    """
    Parse 'R,C:R,C' into two (row, col) tuples.

    Raises ValueError on anything else.
    """
    try:
        first, second = text.split(":")
        cells = []
        for part in (first, second):
            row, col = part.split(",")
            cells.append((int(row), int(col)))
    except ValueError:
        raise ValueError(f"Invalid swap '{text}', expected R,C:R,C") from None
    return cells


def render_grid(grid: Grid, highlight: Optional[Iterable[Sequence[int]]] = None) -> str:
    """Render the grid to a string, bracketing highlighted cells."""
    if not grid:
        return ""

    marked = {tuple(cell) for cell in highlight or []}
    lines = []
    for r, row in enumerate(grid):
        line = ''
        for c, letter in enumerate(row):
            line += f"[{letter}]" if (r, c) in marked else f" {letter} "
        lines.append(line.rstrip())
    return '\n'.join(lines)


if __name__ == '__main__':
    example = [
        ["C", "T", "A"],
        ["O", "A", "R"],
        ["W", "E", "N"],
    ]

    print("Grid:")
    print(render_grid(example))
    print("\nWith (0, 1) and (0, 2) highlighted:")
    print(render_grid(example, [(0, 1), (0, 2)]))
