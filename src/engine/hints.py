"""Hint selection from the reachable moves."""

from typing import TYPE_CHECKING, List, Optional

from ..verifiers import Cell, find_word_coordinates, swap_cells

if TYPE_CHECKING:
    from .game import Session


def select_hint_node(session: "Session") -> Optional[int]:
    """
    Pick the reachable node that keeps the best depth in play.

    Highest max_depth_reached wins; ties go to the node listed first.
    """
    if session.level is None or session.is_game_over:
        return None

    tree = session.level.exploration_tree
    best_id: Optional[int] = None
    best_depth = -1
    for node_id in session.reachable_moves:
        node = tree.node(node_id)
        if node.move is not None and node.max_depth_reached > best_depth:
            best_id = node_id
            best_depth = node.max_depth_reached
    return best_id


def calculate_hint_coordinates(session: "Session") -> List[Cell]:
    """
    The two cells of the suggested swap.

    Returns an empty list when there is nothing to suggest (no level, game
    over, or no reachable moves after leaving or exhausting the tree).
    """
    node_id = select_hint_node(session)
    if node_id is None:
        return []
    move = session.level.exploration_tree.node(node_id).move
    return [move.from_cell, move.to_cell]


def calculate_hint_word_coordinates(session: "Session") -> List[Cell]:
    """Cells of the first word the suggested swap would form."""
    node_id = select_hint_node(session)
    if node_id is None:
        return []
    node = session.level.exploration_tree.node(node_id)
    if not node.words_formed:
        return []

    move = node.move
    swapped = swap_cells(session.grid, move.from_cell, move.to_cell)
    return find_word_coordinates(swapped, node.words_formed[0], move.from_cell, move.to_cell)
