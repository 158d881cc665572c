"""
Move history: after-move snapshots and undo.

Every committed move appends a full snapshot of the session, so undo is a
pop plus a verbatim restore of the new top entry (or of the level's initial
state once the history is empty).
"""

import logging
from typing import TYPE_CHECKING, List, Optional

from .models import HistoryEntry, MoveSpec, UndoResult

if TYPE_CHECKING:
    from .game import Session

logger = logging.getLogger(__name__)


def record_move(
    session: "Session",
    move: MoveSpec,
    words: List[str],
    failed_before: int,
) -> HistoryEntry:
    """
    Append a snapshot of `session` as it stands after `move`.

    Args:
        session: Session that has just committed the move
        move: The swap that was made
        words: Words the move formed
        failed_before: Failed attempts spent on this turn before the move

    Returns:
        The recorded entry
    """
    entry = HistoryEntry(
        grid=[list(row) for row in session.grid],
        reachable_moves=list(session.reachable_moves),
        current_depth=session.current_depth,
        move_made=move,
        words_formed_by_move=list(words),
        turn_failed_attempts=failed_before,
        is_deviated=session.has_deviated,
        off_optimal_path=session.off_optimal_path,
    )
    session.history.append(entry)
    return entry


def restore_snapshot(session: "Session", entry: Optional[HistoryEntry]) -> None:
    """
    Restore grid, reachable moves, depth and path flags from `entry`.

    With no entry the level's initial state is restored. The failed-attempt
    counter, history list and game-over flag are left to the caller.
    """
    level = session.level
    if entry is None:
        session.grid = level.copy_initial_grid()
        session.reachable_moves = list(level.exploration_tree.roots)
        session.current_depth = 0
        session.has_deviated = False
        session.off_optimal_path = False
    else:
        session.grid = [list(row) for row in entry.grid]
        session.reachable_moves = list(entry.reachable_moves)
        session.current_depth = entry.current_depth
        session.has_deviated = entry.is_deviated
        session.off_optimal_path = entry.off_optimal_path


def undo_last_move(session: "Session") -> UndoResult:
    """
    Undo the most recent committed move.

    The grid, reachable moves, depth and deviation flags are taken from the
    entry before the popped one; the failed-attempt counter returns to what
    it was when the undone move was made. Game-over is cleared.

    Returns:
        UndoResult with the undone move reversed, ready to animate back
    """
    if session.level is None:
        return UndoResult(success=False, error="NOT_READY", message="No level loaded.")
    if session.is_solution_view:
        return UndoResult(success=False, error="NOT_READY", message="Viewing a recorded solution.")
    if not session.history:
        return UndoResult(success=False, error="NOTHING_TO_UNDO", message="Nothing to undo.")

    popped = session.history.pop()
    restore_snapshot(session, session.history[-1] if session.history else None)
    session.turn_failed_attempts = popped.turn_failed_attempts
    session.is_game_over = False

    logger.debug("Undid %s, depth now %d", popped.move_made, session.current_depth)
    return UndoResult(success=True, undone_move=popped.move_made.reversed())
