"""
Saved-progress conversion.

Turns a live session into the minimal SavedProgress projection and back.
Storage, keying and level-version checks belong to the caller; nothing here
touches the filesystem.
"""

import json
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

from pydantic import ValidationError

from .history import restore_snapshot
from .models import LevelData, SavedProgress

if TYPE_CHECKING:
    from .game import Session

logger = logging.getLogger(__name__)


def get_game_state_for_saving(session: "Session") -> Optional[SavedProgress]:
    """
    Project the session onto what needs storing.

    The grid and reachable moves are omitted; both come back from the last
    history entry (or the level) on reload.

    Returns:
        SavedProgress, or None if no level is loaded
    """
    if session.level is None:
        return None

    return SavedProgress(
        history=[entry.model_copy(deep=True) for entry in session.history],
        current_depth=session.current_depth,
        has_deviated=session.has_deviated,
        turn_failed_attempts=session.turn_failed_attempts,
        off_optimal_path=session.off_optimal_path,
    )


def find_inconsistency(level: LevelData, progress: SavedProgress) -> Optional[str]:
    """Describe the first way `progress` cannot belong to `level`, if any."""
    node_count = len(level.exploration_tree.nodes)

    for i, entry in enumerate(progress.history):
        if len(entry.grid) != level.rows or any(len(row) != level.cols for row in entry.grid):
            return f"history[{i}] grid is not {level.rows}x{level.cols}"
        if any(len(cell) != 1 for row in entry.grid for cell in row):
            return f"history[{i}] grid has a cell that is not a single letter"
        for cell in (entry.move_made.from_cell, entry.move_made.to_cell):
            if not (0 <= cell.row < level.rows and 0 <= cell.col < level.cols):
                return f"history[{i}] move {cell} is off the grid"
        for node_id in entry.reachable_moves:
            if not 0 <= node_id < node_count:
                return f"history[{i}] refers to unknown tree node {node_id}"
        if not entry.is_deviated and entry.current_depth != i + 1:
            return f"history[{i}] has depth {entry.current_depth}, expected {i + 1}"

    if not progress.has_deviated and len(progress.history) != progress.current_depth:
        return (
            f"depth {progress.current_depth} does not match "
            f"{len(progress.history)} history entries"
        )
    return None


def apply_saved_progress(
    session: "Session",
    saved: Union[SavedProgress, Mapping[str, Any]],
) -> bool:
    """
    Restore saved progress onto a freshly loaded session.

    Malformed or mismatched progress is logged and ignored, leaving the
    session untouched.

    Returns:
        True if the progress was applied
    """
    try:
        progress = saved if isinstance(saved, SavedProgress) else SavedProgress.model_validate(saved)
    except ValidationError as e:
        logger.warning("Ignoring malformed saved progress (%d problems)", e.error_count())
        return False

    problem = find_inconsistency(session.level, progress)
    if problem:
        logger.warning("Ignoring saved progress that does not fit this level: %s", problem)
        return False

    session.history = [entry.model_copy(deep=True) for entry in progress.history]
    restore_snapshot(session, session.history[-1] if session.history else None)
    session.current_depth = progress.current_depth
    session.has_deviated = progress.has_deviated
    session.off_optimal_path = progress.off_optimal_path
    session.turn_failed_attempts = progress.turn_failed_attempts
    return True


def dump_saved_progress(progress: SavedProgress) -> str:
    """Serialize saved progress to JSON with camelCase keys."""
    return progress.model_dump_json(by_alias=True)


def parse_saved_progress(text: str) -> Optional[SavedProgress]:
    """
    Parse saved progress JSON.

    Returns:
        SavedProgress, or None if the text is not valid saved progress
    """
    try:
        return SavedProgress.model_validate(json.loads(text))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.warning("Ignoring unreadable saved progress: %s", e.__class__.__name__)
        return None
