"""Computer opponent strategies for Othello."""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Dict, Optional

from .game import Game, Move, OthelloBoard
from .grid import Grid

logger = logging.getLogger(__name__)

CORNER_WEIGHT = 4
EDGE_WEIGHT = 2


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


BotStrategy = Callable[[OthelloBoard, Any, Optional[random.Random]], Optional[Move]]


def positional_weight(grid: Grid, x: int, y: int) -> int:
    """Bonus for playing ``(x, y)``: corners beat edges, interior gets nothing."""
    if not grid.is_valid(x, y):
        return 0
    on_x_edge = x in (1, grid.size_x)
    on_y_edge = y in (1, grid.size_y)
    if on_x_edge and on_y_edge:
        return CORNER_WEIGHT
    if on_x_edge or on_y_edge:
        return EDGE_WEIGHT
    return 0


def select_move(
    board: OthelloBoard,
    player: Any,
    difficulty: Difficulty = Difficulty.HARD,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """Choose a move for ``player`` without touching ``board``.

    Easy picks uniformly among the legal moves. Hard plays every candidate
    on a scratch copy and keeps the one with the best gain in pieces plus
    :func:`positional_weight`; the first candidate in ``(x, y)`` order wins
    ties. If no candidate scores above zero the choice falls back to random.
    Returns ``None`` when ``player`` has no legal move.
    """
    moves = sorted(board.legal_moves(player))
    if not moves:
        return None
    if rng is None:
        rng = random.Random()
    if difficulty != Difficulty.HARD:
        return rng.choice(moves)

    current = board.score(player)
    best_move: Optional[Move] = None
    best_val = 0
    for x, y in moves:
        sim = board.copy()
        sim.place(x, y, player)
        val = sim.score(player) - current + positional_weight(board.grid, x, y)
        if val > best_val:
            best_val = val
            best_move = (x, y)
    if best_move is None:
        logger.debug("No positive candidate among %d moves, picking at random", len(moves))
        return rng.choice(moves)
    logger.debug("Selected %s with weighted gain %d", best_move, best_val)
    return best_move


def play_computer_move(
    game: Game,
    difficulty: Difficulty = Difficulty.HARD,
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """Let the computer take the current turn of ``game``.

    Returns the move played, or ``None`` if the game is over.
    """
    if game.current is None:
        return None
    move = select_move(game.board, game.current, difficulty, rng)
    if move is not None:
        game.play(*move)
    return move


def easy(board: OthelloBoard, player: Any, rng: Optional[random.Random] = None) -> Optional[Move]:
    """Easy: any legal move, uniformly at random."""
    return select_move(board, player, Difficulty.EASY, rng)


def hard(board: OthelloBoard, player: Any, rng: Optional[random.Random] = None) -> Optional[Move]:
    """Hard: best one-ply gain, weighted towards corners and edges."""
    return select_move(board, player, Difficulty.HARD, rng)


BOTS: Dict[str, BotStrategy] = {
    Difficulty.EASY.value: easy,
    Difficulty.HARD.value: hard,
}
