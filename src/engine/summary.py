"""
Solution view and completion summaries.

A finished run is summarised once for the caller to keep; later the same run
can be loaded back into a session in read-only solution view.
"""

from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence, Union

from pydantic import TypeAdapter

from ..verifiers import Grid
from .models import CompletionSummary, ExplorationTree, HistoryEntry

if TYPE_CHECKING:
    from .game import Session

_grid_adapter = TypeAdapter(Grid)
_history_adapter = TypeAdapter(List[HistoryEntry])


def set_state_for_solution_view(
    session: "Session",
    grid: Grid,
    history: Sequence[Union[HistoryEntry, Mapping[str, Any]]],
    score: int,
) -> "Session":
    """
    Replace the live session with a recorded run for display.

    History entries may be models or their decoded JSON, as stored with a
    completion summary. The session is left game-over with nothing
    reachable, so swaps and undo are refused until the level is reset or
    reloaded.

    Raises:
        pydantic.ValidationError: If the grid or history is malformed
    """
    grid = _grid_adapter.validate_python(grid)
    entries = _history_adapter.validate_python(list(history))

    session.grid = [list(row) for row in grid]
    session.history = [entry.model_copy(deep=True) for entry in entries]
    session.current_depth = score
    session.reachable_moves = []
    session.has_deviated = False
    session.off_optimal_path = False
    session.turn_failed_attempts = 0
    session.is_game_over = True
    session.is_solution_view = True
    return session


def _matching_prefix(path: List[str], history: List[HistoryEntry]) -> int:
    count = 0
    for word, entry in zip(path, history):
        if not entry.words_formed_by_move or word.upper() != entry.words_formed_by_move[0].upper():
            break
        count += 1
    return count


def find_longest_word_chain(tree: ExplorationTree, history: Optional[List[HistoryEntry]] = None) -> List[str]:
    """
    The longest sequence of words along any root-to-leaf path.

    Among equally long sequences, the one whose opening words agree longest
    with the player's history wins, then the one found first.
    """
    history = history or []
    best: List[str] = []
    best_match = -1

    # (node id, words up to and including this node)
    pending = [(root, tree.node(root).words_formed) for root in reversed(tree.roots)]
    while pending:
        node_id, path = pending.pop()
        node = tree.node(node_id)
        if not node.next_moves:
            match = _matching_prefix(path, history)
            if len(path) > len(best) or (len(path) == len(best) and match > best_match):
                best, best_match = path, match
            continue
        pending.extend(
            (child, path + tree.node(child).words_formed)
            for child in reversed(node.next_moves)
        )
    return list(best)


def build_completion_summary(session: "Session") -> Optional[CompletionSummary]:
    """
    Summarise a finished session.

    Returns:
        CompletionSummary, or None while the session is still in play
    """
    if session.level is None or not session.is_game_over:
        return None

    from .game import player_words

    return CompletionSummary(
        history=[entry.model_copy(deep=True) for entry in session.history],
        score=session.current_depth,
        max_score=session.max_depth,
        optimal_path_words=find_longest_word_chain(session.level.exploration_tree, session.history),
        player_words=player_words(session),
        final_grid=[list(row) for row in session.grid],
    )
