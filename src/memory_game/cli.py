# Area: Shared
"""
memory_game.cli — Command-line interface
========================================

Plays one memory game in the terminal against the wall clock.

Usage:
    memory-game                                   # Competitive, default settings
    memory-game --config defaults.json --seed 7   # Custom defaults, fixed boards
    memory-game --casual --settings casual.json   # Casual game, own settings
    python -m memory_game --verbose --log-file game.log

Moves are typed as ``row col`` (zero based); ``q`` leaves the game.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from ._engine import GameStatus, Player, ThreadingScheduler
from .area import MemoryGameArea
from .config import load_default_settings
from .errors import InvalidParametersError, InvalidSettingsError
from .leaderboard import Leaderboard, LeaderboardDatabase
from .logging_config import log_settings_error, setup_logging
from .types import MEMORY_GAME_AREA_TYPE, MemoryGameStateModel

logger = logging.getLogger("memory_game.cli")

TILE_GLYPHS = {"square": "■", "circle": "●"}


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="memory-game",
        description="Memorize the highlighted tiles, then find them again",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  memory-game
  memory-game --seed 42 --config defaults.json
  memory-game --casual --settings casual.json
  MEMORY_GAME_STARTING_LIVES=5 memory-game
        """,
    )
    parser.add_argument(
        "--casual",
        action="store_true",
        help="Play an unranked game with the settings from --settings",
    )
    parser.add_argument(
        "--settings",
        type=str,
        help="JSON file with casual game settings (camelCase keys)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="JSON file overriding the competitive default settings",
    )
    parser.add_argument(
        "--env-file",
        type=str,
        help="Path to a .env file (default: search from the current directory)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for board generation",
    )
    parser.add_argument(
        "--username",
        type=str,
        default="player",
        help="Name recorded on the leaderboard (default: player)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default="memory_game.log",
        help="JSON-lines log file (default: memory_game.log)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level and echo logs to the terminal",
    )
    return parser.parse_args(argv)


def load_casual_settings(settings_path: Optional[str], fallback: Dict[str, Any]) -> Dict[str, Any]:
    """Read casual settings from JSON, falling back to ``fallback``."""
    if not settings_path:
        return dict(fallback)
    with open(Path(settings_path), encoding="utf-8") as f:
        return json.load(f)


def parse_move(line: str) -> Optional[tuple]:
    """Parse ``row col``. Returns None when the line is not two integers."""
    parts = line.replace(",", " ").split()
    if len(parts) != 2:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        return None


def render_board(state: MemoryGameStateModel) -> str:
    """Draw the board: targets while memorizing, guesses while guessing."""
    glyph = TILE_GLYPHS.get(state["tile_shape"] or "square", "■")
    rows = state["board_size"]["rows"]
    columns = state["board_size"]["columns"]
    memorizing = state["status"] == GameStatus.WAITING_TO_START.value

    lines = ["    " + " ".join(f"{c:>2}" for c in range(columns))]
    for r in range(rows):
        cells = []
        for c in range(columns):
            if memorizing:
                cells.append(" ◆" if state["solution_board"][r][c] else f" {glyph}")
            else:
                guess = state["guesses_board"][r][c]
                cells.append(" ✓" if guess is True else " ✗" if guess is False else f" {glyph}")
        lines.append(f"{r:>3} " + " ".join(cells))

    phase = ("MEMORIZE" if memorizing else
             "GUESS" if state["status"] == GameStatus.IN_PROGRESS.value else
             state["status"])
    lines.append(f"{phase} │ score {state['score']} │ lives {state['lives']}")
    return "\n".join(lines)


def play(
    area: MemoryGameArea,
    player: Player,
    game_id: str,
    competitive: bool,
    read_line: Optional[Callable[[str], str]] = None,
    write: Optional[Callable[[str], None]] = None,
) -> None:
    """Read moves until the game ends or the player quits."""
    read_line = read_line or input
    write = write or print
    while area.game is not None and area.game.state.status is not GameStatus.OVER:
        try:
            line = read_line("move> ").strip().lower()
        except EOFError:
            line = "q"

        # A deadline may have ended the game while waiting for input
        if area.game.state.status is GameStatus.OVER:
            write("Time ran out: the game is over.")
            return

        if line in ("q", "quit", "exit"):
            area.handle_command({"type": "LeaveGame", "game_id": game_id}, player)
            write("You left the game.")
            return

        move = parse_move(line)
        if move is None:
            write("Type a move as 'row col', or 'q' to leave.")
            continue

        try:
            area.handle_command({
                "type": "GameMove",
                "game_id": game_id,
                "move": {"row": move[0], "column": move[1], "transmit_score": competitive},
            }, player)
        except InvalidParametersError as e:
            write(e.message)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(args.log_file, level=level, terminal=args.verbose)

    try:
        defaults = load_default_settings(args.config, args.env_file)
    except InvalidSettingsError as e:
        log_settings_error(e)
        return 1

    database = LeaderboardDatabase()
    leaderboard = Leaderboard("leaderboard", database)
    player = Player(id="player-1", username=args.username)

    def show() -> None:
        # Also called from the timer thread on deadline transitions
        game = area.game
        if game is not None and game.state.status is not GameStatus.WAITING_FOR_PLAYERS:
            print("\n" + render_board(game.to_model()["state"]), flush=True)

    area = MemoryGameArea(
        "memory-game-area", defaults, database, emitter=show,
        scheduler=ThreadingScheduler(), seed=args.seed,
    )
    area.add_occupant(player)

    competitive = not args.casual
    try:
        result = area.handle_command({"type": "JoinGame"}, player)
        command: Dict[str, Any] = {
            "type": "MemoryGameStartGame",
            "game_id": result["game_id"],
            "competitive_mode": competitive,
        }
        if not competitive:
            command["customized_settings"] = load_casual_settings(
                args.settings, defaults.to_wire(),
            )
        area.handle_command(command, player)
    except InvalidSettingsError as e:
        log_settings_error(e)
        return 1
    except InvalidParametersError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read settings: {e}", file=sys.stderr)
        return 1

    play(area, player, result["game_id"], competitive)

    final = area.game.to_model()["state"] if area.game is not None else None
    if final is not None:
        logger.info("Session finished for %s, score=%d", player.username, final["score"])
        print(f"Game over. Final score: {final['score']}")
    for record in leaderboard.get_scores(MEMORY_GAME_AREA_TYPE, player.username):
        print(f"Leaderboard: {record['player_username']} scored {record['score']}")
    return 0
