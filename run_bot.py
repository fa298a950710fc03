#!/usr/bin/env python3
"""Ask the computer opponent for its move on a saved Othello position."""
import argparse
import json
import logging
import random
from pathlib import Path
from typing import List, Optional

from gridgames.bots import BOTS, Difficulty
from gridgames.game import Game, as_player


def load_game(path: Path) -> Optional[Game]:
    """Load a saved game state from ``path``.

    The file may either contain a single game state or a history list. In
    the latter case the last state in the history is used. ``None`` is
    returned when the state is malformed.
    """
    with path.open() as f:
        data = json.load(f)
    if isinstance(data, dict) and "history" in data:
        history = data["history"]
        if not isinstance(history, list) or not history:
            return None
        data = history[-1]
    return Game.from_dict(data)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Pick the computer's move for a saved Othello position")
    parser.add_argument("file", type=Path, help="Path to saved game JSON file")
    parser.add_argument("--player", help="Piece to move for ('#' or 'O'); defaults to the side to move")
    parser.add_argument(
        "--difficulty",
        choices=sorted(BOTS),
        default=Difficulty.HARD.value,
        help="Computer strength",
    )
    parser.add_argument("--seed", type=int, help="Seed for the random fallback")
    parser.add_argument("--verbose", action="store_true", help="Log the selection process")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        game = load_game(args.file)
    except (OSError, json.JSONDecodeError) as exc:
        parser.error(f"cannot read {args.file}: {exc}")
    if game is None:
        parser.error(f"{args.file} does not hold an 8x8 Othello position")

    player = game.current
    if args.player is not None:
        player = as_player(args.player)
        if player is None:
            parser.error(f"unknown piece {args.player!r}")

    move = None
    if player is not None:
        move = BOTS[args.difficulty](game.board, player, random.Random(args.seed))
    if move:
        print(f"Next move: {move[0]} {move[1]}")
    else:
        print("No valid moves available.")


if __name__ == "__main__":
    main()
