"""
Command-line player for word-chain levels.

Loads a level file, optionally resumes saved progress, applies a scripted
list of actions and reports the resulting state.

Usage:
    python -m src.main level.json --actions 0,1:0,2 hint undo --verbose
    python -m src.main level.json --progress saved.json --save saved.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .engine import (
    EngineConfig,
    LevelDataInvalid,
    Session,
    build_completion_summary,
    calculate_hint_coordinates,
    dump_saved_progress,
    force_game_over,
    get_game_state_for_saving,
    load_level,
    load_level_file,
    parse_saved_progress,
    perform_swap,
    reset_level,
    undo_last_move,
)
from .utils.grid_visualizer import format_move, parse_swap, render_grid
from .verifiers import locate_words


def load_config(config_path: str) -> EngineConfig:
    """Load engine configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return EngineConfig(**data)


def run_action(session: Session, action: str, verbose: bool = False) -> bool:
    """
    Apply one scripted action to the session.

    Actions are 'R,C:R,C' swaps, 'undo', 'hint' and 'reset'.

    Returns:
        True if the action succeeded
    """
    action = action.strip().lower()

    if action == "undo":
        result = undo_last_move(session)
        if verbose:
            if result.success:
                print(f"Undo: {format_move(result.undone_move)}")
            else:
                print(f"Undo failed: {result.message}")
        return result.success

    if action == "hint":
        cells = calculate_hint_coordinates(session)
        if verbose:
            if cells:
                print("Hint:")
                print(render_grid(session.grid, cells))
            else:
                print("No hint available")
        return bool(cells)

    if action == "reset":
        reset_level(session)
        if verbose:
            print("Level reset")
        return True

    cell_a, cell_b = parse_swap(action)
    result = perform_swap(session, cell_a, cell_b)
    if verbose:
        if result.success:
            suffix = " (off the tree)" if result.is_deviated_move else ""
            print(f"{format_move(result.move)}: {', '.join(result.words_formed)}{suffix}")
            placements = locate_words(
                session.grid, result.words_formed, result.move.from_cell, result.move.to_cell
            )
            print(render_grid(session.grid, [cell for p in placements for cell in p.cells]))
        else:
            print(f"✗ {result.message} (failed attempts: {session.turn_failed_attempts})")
    return result.success


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Play or replay a word-chain level",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Actions:
  R,C:R,C   swap two adjacent cells, e.g. 0,1:0,2
  undo      undo the last committed move
  hint      show the suggested swap
  reset     start the level over

Example config.yaml:
  allow_deviation: true
  deviation_counts_toward_completion: false
  dictionary_path: words.txt
        """
    )
    parser.add_argument(
        "level",
        help="Path to the level JSON file"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML engine configuration"
    )
    parser.add_argument(
        "--progress", "-p",
        help="Resume from a saved progress JSON file"
    )
    parser.add_argument(
        "--actions", "-a",
        nargs="*",
        default=[],
        help="Actions to apply in order"
    )
    parser.add_argument(
        "--save",
        help="Write saved progress JSON to this path"
    )
    parser.add_argument(
        "--summary",
        help="Write the completion summary JSON to this path once the game is over"
    )
    parser.add_argument(
        "--completed",
        action="store_true",
        help="Treat the level as already completed elsewhere"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print each action and the grid"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        level = load_level_file(args.level)
    except (FileNotFoundError, LevelDataInvalid) as e:
        print(f"Error loading level {args.level}: {e}", file=sys.stderr)
        sys.exit(1)

    progress = None
    if args.progress:
        progress_path = Path(args.progress)
        if progress_path.exists():
            progress = parse_saved_progress(progress_path.read_text())
        elif args.verbose:
            print(f"No saved progress at {args.progress}, starting fresh")

    session = load_level(level, progress, config=config)
    if args.completed and not session.history:
        force_game_over(session)

    if args.verbose:
        print(f"Level: {args.level} ({level.rows}x{level.cols}, word length {level.word_length})")
        print(render_grid(session.grid))
        print("-" * 40)

    for action in args.actions:
        try:
            run_action(session, action, verbose=args.verbose)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)

    if args.save:
        save_path = Path(args.save)
        save_path.parent.mkdir(parents=True, exist_ok=True)
        save_path.write_text(dump_saved_progress(get_game_state_for_saving(session)))

    if args.summary:
        summary = build_completion_summary(session)
        if summary is None:
            print("Game is not over, no summary written", file=sys.stderr)
        else:
            summary_path = Path(args.summary)
            summary_path.parent.mkdir(parents=True, exist_ok=True)
            with open(summary_path, "w") as f:
                json.dump(summary.model_dump(by_alias=True, mode="json"), f, indent=2)

    # Print summary
    print()
    print("=== Session Summary ===")
    print(render_grid(session.grid))
    print(f"Depth: {session.current_depth}/{session.max_depth}")
    print(f"Deviated: {session.has_deviated}")
    print(f"Game over: {session.is_game_over}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
