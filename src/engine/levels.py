"""Level parsing utilities."""

import json
import logging
from pathlib import Path
from typing import Any, List, Mapping, Union

from pydantic import ValidationError

from .errors import LevelDataInvalid
from .models import ExplorationTree, LevelData

logger = logging.getLogger(__name__)


def _describe(exc: ValidationError) -> List[str]:
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"]) or "level"
        problems.append(f"{location}: {err['msg']}")
    return problems


def _flatten_tree(nodes: List[Any]) -> ExplorationTree:
    try:
        return ExplorationTree.from_nested(nodes)
    except ValidationError as e:
        problems = _describe(e)
        raise LevelDataInvalid(
            f"Invalid exploration tree: {problems[0]}",
            code="INVALID_TREE",
            problems=problems,
        ) from e


def parse_level(data: Union[LevelData, Mapping[str, Any], str]) -> LevelData:
    """
    Parse a level document into LevelData.

    Accepts an already-built LevelData (returned as is), a mapping decoded
    from JSON, or the JSON text itself.

    Raises:
        LevelDataInvalid: If the document is not a usable level
    """
    if isinstance(data, LevelData):
        return data

    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError as e:
            raise LevelDataInvalid(f"Level is not valid JSON: {e}", code="INVALID_JSON") from e

    if not isinstance(data, Mapping):
        raise LevelDataInvalid("Level document must be a JSON object", code="INVALID_LEVEL")

    if data.get("initialGrid") is None and data.get("initial_grid") is None:
        raise LevelDataInvalid("Level has no initialGrid", code="MISSING_GRID")

    data = dict(data)
    for key in ("explorationTree", "exploration_tree"):
        if isinstance(data.get(key), list):
            data[key] = _flatten_tree(data[key])

    try:
        level = LevelData.model_validate(data)
    except ValidationError as e:
        problems = _describe(e)
        raise LevelDataInvalid(
            f"Invalid level data: {problems[0]}",
            code="INVALID_LEVEL",
            problems=problems,
        ) from e

    logger.debug(
        "Parsed %dx%d level (word length %d, max depth %d, %d tree nodes)",
        level.rows, level.cols, level.word_length, level.max_depth_reached,
        len(level.exploration_tree.nodes),
    )
    return level


def load_level_file(path: Union[str, Path]) -> LevelData:
    """
    Read and parse a level JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        LevelDataInvalid: If the file is not a usable level
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Level file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return parse_level(f.read())
