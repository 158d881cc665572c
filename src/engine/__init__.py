"""Puzzle engine for the word-chain grid game."""

from .errors import LevelDataInvalid
from .models import (
    Cell,
    MoveSpec,
    ExplorationNode,
    ExplorationTree,
    LevelData,
    HistoryEntry,
    SavedProgress,
    CompletionSummary,
    SwapResult,
    UndoResult,
    EngineConfig,
)
from .levels import parse_level, load_level_file
from .game import (
    Session,
    load_level,
    perform_swap,
    reset_level,
    force_game_over,
    get_current_game_state,
    check_game_over,
    player_words,
)
from .history import undo_last_move
from .hints import select_hint_node, calculate_hint_coordinates, calculate_hint_word_coordinates
from .summary import set_state_for_solution_view, find_longest_word_chain, build_completion_summary
from .persistence import get_game_state_for_saving, dump_saved_progress, parse_saved_progress

__all__ = [
    "LevelDataInvalid",
    "Cell",
    "MoveSpec",
    "ExplorationNode",
    "ExplorationTree",
    "LevelData",
    "HistoryEntry",
    "SavedProgress",
    "CompletionSummary",
    "SwapResult",
    "UndoResult",
    "EngineConfig",
    "parse_level",
    "load_level_file",
    "Session",
    "load_level",
    "perform_swap",
    "reset_level",
    "force_game_over",
    "get_current_game_state",
    "check_game_over",
    "player_words",
    "undo_last_move",
    "select_hint_node",
    "calculate_hint_coordinates",
    "calculate_hint_word_coordinates",
    "set_state_for_solution_view",
    "find_longest_word_chain",
    "build_completion_summary",
    "get_game_state_for_saving",
    "dump_saved_progress",
    "parse_saved_progress",
]
