"""
Pydantic models for the puzzle engine.

This module contains the data models (level data, exploration tree, history
snapshots, saved progress, results, configuration) shared by the engine
modules. The state machine itself lives in game.py.
"""

from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from ..verifiers.models import Cell, Grid
from .errors import LevelDataInvalid


# Type aliases
FailureKind = Literal["NOT_READY", "INVALID_MOVE", "NOTHING_TO_UNDO"]


class CamelModel(BaseModel):
    """Base model that reads and writes the camelCase keys of level files."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MoveSpec(CamelModel):
    """A swap of two cells. Swaps are symmetric."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    from_cell: Cell = Field(..., alias="from")
    to_cell: Cell = Field(..., alias="to")

    def covers(self, a: Cell, b: Cell) -> bool:
        """True if this move swaps exactly `a` and `b`, in either order."""
        return {self.from_cell, self.to_cell} == {Cell(*a), Cell(*b)}

    def reversed(self) -> "MoveSpec":
        return MoveSpec(from_cell=self.to_cell, to_cell=self.from_cell)


class ExplorationNode(CamelModel):
    """One valid forward move in the exploration tree."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    move: Optional[MoveSpec] = None  # None only for synthetic roots
    words_formed: List[str] = Field(default_factory=list)
    max_depth_reached: int = Field(default=0, ge=0)
    next_moves: List[int] = Field(default_factory=list)  # child node ids


class ExplorationTree(CamelModel):
    """
    Arena of exploration nodes addressed by index.

    Level files ship the tree nested (each node carries its children under
    `nextMoves`); `from_nested` flattens that form into the arena without
    recursion. The validator rejects anything that is not a finite forest,
    and any node below the roots that has no move.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    nodes: List[ExplorationNode] = Field(default_factory=list)
    roots: List[int] = Field(default_factory=list)

    @classmethod
    def from_nested(cls, roots: List[Any]) -> "ExplorationTree":
        """Build the arena from nested node mappings, preserving sibling order."""
        raw_nodes: List[Dict[str, Any]] = []
        children: List[List[int]] = []
        root_ids: List[int] = []

        pending = [(raw, None) for raw in reversed(roots)]
        while pending:
            raw, parent = pending.pop()
            if not isinstance(raw, dict):
                raise LevelDataInvalid(
                    "Exploration tree nodes must be objects",
                    code="INVALID_TREE",
                )
            node_id = len(raw_nodes)
            raw_nodes.append(raw)
            children.append([])
            if parent is None:
                root_ids.append(node_id)
            else:
                children[parent].append(node_id)

            next_moves = raw.get("nextMoves") or []
            if not isinstance(next_moves, list):
                raise LevelDataInvalid(
                    f"Node {node_id}: nextMoves must be a list",
                    code="INVALID_TREE",
                )
            pending.extend((child, node_id) for child in reversed(next_moves))

        nodes = [
            ExplorationNode.model_validate({
                "move": raw.get("move"),
                "wordsFormed": raw.get("wordsFormed") or [],
                "maxDepthReached": raw.get("maxDepthReached", 0),
                "nextMoves": children[node_id],
            })
            for node_id, raw in enumerate(raw_nodes)
        ]
        return cls(nodes=nodes, roots=root_ids)

    @model_validator(mode="after")
    def _check_forest(self) -> "ExplorationTree":
        size = len(self.nodes)
        seen = [False] * size
        pending = list(self.roots)
        while pending:
            node_id = pending.pop()
            if not 0 <= node_id < size:
                raise ValueError(f"node id {node_id} out of range")
            if seen[node_id]:
                raise ValueError(f"node {node_id} is reachable more than once")
            seen[node_id] = True
            node = self.nodes[node_id]
            for child_id in node.next_moves:
                if not 0 <= child_id < size:
                    continue
                child = self.nodes[child_id]
                if child.move is None:
                    raise ValueError(f"node {child_id} has no move but is not a root")
                if child.max_depth_reached > node.max_depth_reached:
                    raise ValueError(
                        f"node {child_id} reaches deeper than its parent {node_id}"
                    )
            pending.extend(node.next_moves)
        if not all(seen):
            raise ValueError("exploration tree contains unreachable nodes")
        return self

    def node(self, node_id: int) -> ExplorationNode:
        return self.nodes[node_id]

    def words(self) -> Set[str]:
        """Every word formed anywhere in the tree."""
        return {word.upper() for node in self.nodes for word in node.words_formed}


class LevelData(CamelModel):
    """A single level: the starting grid plus its precomputed move tree.

    Treated as read-only once loaded; sessions share it without copying.
    """

    initial_grid: Grid
    word_length: int = Field(default=4, ge=1)
    min_word_length: Optional[int] = Field(default=None, ge=1)
    max_depth_reached: Optional[int] = Field(default=None, ge=0)
    required_min_turns: Optional[int] = None
    required_max_turns: Optional[int] = None
    exploration_tree: ExplorationTree = Field(default_factory=ExplorationTree)

    @field_validator("initial_grid")
    @classmethod
    def _check_grid(cls, grid: Grid) -> Grid:
        if not grid or not grid[0]:
            raise ValueError("initialGrid must have at least one row and column")
        width = len(grid[0])
        for r, row in enumerate(grid):
            if len(row) != width:
                raise ValueError(f"initialGrid row {r} has {len(row)} cells, expected {width}")
            for c, cell in enumerate(row):
                if len(cell) != 1:
                    raise ValueError(f"initialGrid cell ({r}, {c}) must be a single character")
        return grid

    @field_validator("exploration_tree", mode="before")
    @classmethod
    def _flatten_nested_tree(cls, value: Any) -> Any:
        if value is None:
            return ExplorationTree()
        if isinstance(value, list):
            return ExplorationTree.from_nested(value)
        return value

    @model_validator(mode="after")
    def _fill_defaults(self) -> "LevelData":
        if self.min_word_length is None:
            self.min_word_length = self.word_length
        if self.max_depth_reached is None:
            tree = self.exploration_tree
            depth = max((tree.node(r).max_depth_reached + 1 for r in tree.roots), default=0)
            self.max_depth_reached = depth
        return self

    @property
    def rows(self) -> int:
        return len(self.initial_grid)

    @property
    def cols(self) -> int:
        return len(self.initial_grid[0])

    def copy_initial_grid(self) -> Grid:
        return [list(row) for row in self.initial_grid]

    def lexicon(self) -> Set[str]:
        """Words the level itself knows about."""
        return self.exploration_tree.words()


class HistoryEntry(CamelModel):
    """Full session snapshot taken after a committed move."""
    grid: Grid
    reachable_moves: List[int] = Field(default_factory=list)
    current_depth: int = Field(..., ge=1)
    move_made: MoveSpec
    words_formed_by_move: List[str] = Field(default_factory=list)
    turn_failed_attempts: int = Field(default=0, ge=0)  # failures spent on this turn before the move
    is_deviated: bool = False
    off_optimal_path: bool = False


class SavedProgress(CamelModel):
    """Minimal projection of a session needed to resume play."""
    history: List[HistoryEntry] = Field(default_factory=list)
    current_depth: int = Field(..., ge=0)
    has_deviated: bool
    turn_failed_attempts: int = Field(..., ge=0)
    off_optimal_path: bool = False


class CompletionSummary(CamelModel):
    """Record of a finished session, owned by the caller once produced."""
    history: List[HistoryEntry] = Field(default_factory=list)
    score: int = 0
    max_score: int = 0
    optimal_path_words: List[str] = Field(default_factory=list)
    player_words: List[str] = Field(default_factory=list)
    final_grid: Grid = Field(default_factory=list)


class SwapResult(BaseModel):
    """Result of a single swap attempt."""
    success: bool
    message: Optional[str] = None
    error: Optional[FailureKind] = None
    words_formed: List[str] = Field(default_factory=list)
    move: Optional[MoveSpec] = None
    is_deviated_move: bool = False  # this move left the exploration tree
    has_deviated: bool = False
    is_game_over: bool = False


class UndoResult(BaseModel):
    """Result of an undo request."""
    success: bool
    message: Optional[str] = None
    error: Optional[FailureKind] = None
    undone_move: Optional[MoveSpec] = None  # what to animate swapping back


class EngineConfig(BaseModel):
    """Engine behaviour switches, usually loaded from YAML."""
    allow_deviation: bool = True
    deviation_counts_toward_completion: bool = False
    dictionary_path: Optional[Path] = None
