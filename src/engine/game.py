"""
Puzzle state machine.

A Session holds everything that changes while a level is played: the grid,
the player's position in the exploration tree, depth, history and flags.
The operations below take the session explicitly and mutate it in place;
the caller owns the session and serializes access to it.
"""

import logging
from typing import Any, FrozenSet, List, Mapping, Optional, Sequence, Set, Union

from pydantic import BaseModel, Field, PrivateAttr

from ..verifiers import Cell, Grid, are_adjacent, find_new_words, in_bounds, match_move, swap_cells
from ..verifiers.data import load_word_list
from .history import record_move, restore_snapshot
from .levels import parse_level
from .models import (
    EngineConfig,
    ExplorationNode,
    HistoryEntry,
    LevelData,
    MoveSpec,
    SavedProgress,
    SwapResult,
)
from .persistence import apply_saved_progress

logger = logging.getLogger(__name__)


class Session(BaseModel):
    """
    Mutable state of one level being played.

    Attributes:
        level: The loaded level, shared read-only
        config: Engine behaviour switches
        grid: Current letters
        reachable_moves: Ids of the tree nodes playable from here; empty once
            the player has left the tree or exhausted it
        current_depth: Number of committed moves (the score)
        history: After-move snapshots, one per committed move
        has_deviated: A move outside the exploration tree has been made
        off_optimal_path: The best reachable depth has dropped below the
            level's maximum
        turn_failed_attempts: Failed swaps since the last committed move
        is_game_over: No further moves are accepted
        is_solution_view: Showing a recorded run rather than live play
    """

    level: Optional[LevelData] = None
    config: EngineConfig = Field(default_factory=EngineConfig)
    grid: Grid = Field(default_factory=list)
    reachable_moves: List[int] = Field(default_factory=list)
    current_depth: int = Field(default=0, ge=0)
    history: List[HistoryEntry] = Field(default_factory=list)
    has_deviated: bool = False
    off_optimal_path: bool = False
    turn_failed_attempts: int = Field(default=0, ge=0)
    is_game_over: bool = False
    is_solution_view: bool = False
    _lexicon: FrozenSet[str] = PrivateAttr(default_factory=frozenset)

    @property
    def max_depth(self) -> int:
        """Depth that completes the level."""
        return self.level.max_depth_reached if self.level else 0

    @property
    def reachable_nodes(self) -> List[ExplorationNode]:
        if self.level is None:
            return []
        tree = self.level.exploration_tree
        return [tree.node(node_id) for node_id in self.reachable_moves]

    @property
    def lexicon(self) -> FrozenSet[str]:
        """Words accepted for moves outside the exploration tree."""
        return self._lexicon

    def found_words(self) -> Set[str]:
        return {word.upper() for entry in self.history for word in entry.words_formed_by_move}


def _build_lexicon(level: LevelData, config: EngineConfig) -> FrozenSet[str]:
    words = set(level.lexicon())
    if config.dictionary_path is not None:
        words |= load_word_list(config.dictionary_path, min_length=level.word_length)
    return frozenset(words)


def check_game_over(session: Session) -> bool:
    """
    Decide whether the session has finished.

    An on-tree session ends when it reaches the level's maximum depth or runs
    out of reachable moves. A deviated session has no reachable moves by
    definition, so it only ends on depth, and only when configured to.
    """
    if session.level is None:
        return False
    max_depth = session.max_depth

    if session.has_deviated:
        return (
            session.config.deviation_counts_toward_completion
            and max_depth > 0
            and session.current_depth >= max_depth
        )

    if max_depth > 0 and session.current_depth == max_depth:
        return True
    return session.current_depth > 0 and not session.reachable_moves


def load_level(
    level_data: Union[LevelData, Mapping[str, Any]],
    saved_progress: Optional[Union[SavedProgress, Mapping[str, Any]]] = None,
    *,
    config: Optional[EngineConfig] = None,
) -> Session:
    """
    Start a session for a level, optionally resuming saved progress.

    Saved progress is trusted to belong to this level; if it is malformed or
    does not fit the level it is discarded and the session starts fresh.

    Args:
        level_data: LevelData or the decoded level JSON
        saved_progress: SavedProgress or its decoded JSON
        config: Engine configuration (defaults apply when omitted)

    Returns:
        The new session

    Raises:
        LevelDataInvalid: If the level has no usable grid or tree
    """
    level = parse_level(level_data)
    session = Session(level=level, config=config or EngineConfig())
    session._lexicon = _build_lexicon(level, session.config)
    restore_snapshot(session, None)

    if saved_progress is not None and apply_saved_progress(session, saved_progress):
        logger.info("Resumed level at depth %d", session.current_depth)

    session.is_game_over = check_game_over(session)
    logger.debug(
        "Loaded %dx%d level, %d reachable moves, game over: %s",
        level.rows, level.cols, len(session.reachable_moves), session.is_game_over,
    )
    return session


def _not_ready(message: str) -> SwapResult:
    return SwapResult(success=False, error="NOT_READY", message=message)


def _reject(session: Session, message: str) -> SwapResult:
    session.turn_failed_attempts += 1
    return SwapResult(
        success=False,
        error="INVALID_MOVE",
        message=message,
        has_deviated=session.has_deviated,
        is_game_over=session.is_game_over,
    )


def _commit(
    session: Session,
    grid: Grid,
    move: MoveSpec,
    words: List[str],
    next_moves: List[int],
    *,
    deviated: bool,
    off_optimal: bool,
) -> SwapResult:
    failed_before = session.turn_failed_attempts

    session.grid = grid
    session.reachable_moves = list(next_moves)
    session.current_depth += 1
    session.has_deviated = session.has_deviated or deviated
    session.off_optimal_path = session.off_optimal_path or off_optimal
    session.turn_failed_attempts = 0
    record_move(session, move, words, failed_before)
    session.is_game_over = check_game_over(session)

    logger.debug(
        "Depth %d: %s formed %s%s",
        session.current_depth, move, words, " (off tree)" if deviated else "",
    )
    return SwapResult(
        success=True,
        words_formed=list(words),
        move=move,
        is_deviated_move=deviated,
        has_deviated=session.has_deviated,
        is_game_over=session.is_game_over,
    )


def perform_swap(session: Session, cell_a: Sequence[int], cell_b: Sequence[int]) -> SwapResult:
    """
    Attempt to swap two cells.

    A swap matching a reachable tree node advances along the tree. A swap off
    the tree that still forms a new word is committed as a deviation (when
    allowed). Anything else counts as a failed attempt. Never raises.

    Returns:
        SwapResult describing what happened
    """
    if session.level is None:
        return _not_ready("No level loaded.")
    if session.is_solution_view:
        return _not_ready("Viewing a recorded solution.")
    if session.is_game_over:
        return _not_ready("Game is over.")

    if not (in_bounds(session.grid, cell_a) and in_bounds(session.grid, cell_b)):
        return _reject(session, "Cell is outside the grid.")
    a, b = Cell(*cell_a), Cell(*cell_b)
    if not are_adjacent(a, b):
        return _reject(session, "Must swap adjacent cells.")

    level = session.level
    tree = level.exploration_tree
    candidate = swap_cells(session.grid, a, b)

    node_id = match_move(tree, session.reachable_moves, a, b)
    if node_id is not None:
        node = tree.node(node_id)
        reachable_depth = session.current_depth + 1 + node.max_depth_reached
        return _commit(
            session, candidate, node.move, node.words_formed, node.next_moves,
            deviated=False,
            off_optimal=reachable_depth < session.max_depth,
        )

    if session.config.allow_deviation:
        words = find_new_words(
            candidate, a, b, session.lexicon, level.word_length, session.found_words()
        )
        if words:
            return _commit(
                session, candidate, MoveSpec(from_cell=a, to_cell=b), words, [],
                deviated=True,
                off_optimal=True,
            )

    return _reject(session, "No new word formed.")


def reset_level(session: Session) -> Session:
    """Return the session to the level's initial state. Idempotent."""
    if session.level is None:
        return session

    restore_snapshot(session, None)
    session.history = []
    session.turn_failed_attempts = 0
    session.is_game_over = False
    session.is_solution_view = False
    return session


def force_game_over(session: Session) -> None:
    """Mark the session finished without touching anything else."""
    session.is_game_over = True


def get_current_game_state(session: Session) -> Session:
    """
    Snapshot of the session for readers.

    Mutable containers are copied, so changes to the snapshot do not reach
    the live session. The level is shared.
    """
    return session.model_copy(update={
        "grid": [list(row) for row in session.grid],
        "reachable_moves": list(session.reachable_moves),
        "history": list(session.history),
    })


def player_words(session: Session) -> List[str]:
    """Unique words formed so far, in the order they were first formed."""
    seen: List[str] = []
    for entry in session.history:
        for word in entry.words_formed_by_move:
            if word not in seen:
                seen.append(word)
    return seen
