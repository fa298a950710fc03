"""Othello game logic built on :class:`~gridgames.grid.Grid`."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .grid import COMPASS, Grid

logger = logging.getLogger(__name__)

BOARD_SIZE = 8

Move = Tuple[int, int]


class Piece(str, Enum):
    EMPTY = " "
    BLACK = "#"
    WHITE = "O"


PLAYERS: Tuple[Piece, Piece] = (Piece.BLACK, Piece.WHITE)


def as_player(piece: Any) -> Optional[Piece]:
    """Return ``piece`` as a player :class:`Piece`, or ``None`` if it is not one."""
    for player in PLAYERS:
        if piece == player:
            return player
    return None


def opponent(piece: Any) -> Optional[Piece]:
    player = as_player(piece)
    if player is None:
        return None
    return Piece.WHITE if player is Piece.BLACK else Piece.BLACK


class OthelloBoard:
    """An 8x8 Othello board.

    The board owns a :class:`Grid` of :class:`Piece` values and adds the
    rules on top of it. Coordinates are 1-based ``(row, column)`` pairs.
    """

    def __init__(self) -> None:
        self.grid = Grid(BOARD_SIZE, BOARD_SIZE, Piece.EMPTY)
        mid = BOARD_SIZE // 2
        self.grid.populate(
            [
                (mid, mid, Piece.BLACK),
                (mid, mid + 1, Piece.WHITE),
                (mid + 1, mid, Piece.WHITE),
                (mid + 1, mid + 1, Piece.BLACK),
            ]
        )

    @classmethod
    def from_contents(cls, contents: Iterable[Sequence[Any]]) -> "OthelloBoard":
        """Return a fresh board holding exactly ``contents``."""
        board = cls()
        board.grid.reset_all()
        board.grid.populate(contents)
        return board

    @classmethod
    def from_rows(cls, rows: Any) -> Optional["OthelloBoard"]:
        """Build a board from eight rows of eight piece symbols.

        Rows may be strings (``"   #O   "``) or lists of symbols. ``None`` is
        returned if the shape is wrong or a symbol is unknown.
        """
        if not isinstance(rows, (list, tuple)) or len(rows) != BOARD_SIZE:
            return None
        contents = []
        for x, row in enumerate(rows, start=1):
            if not isinstance(row, (str, list, tuple)) or len(row) != BOARD_SIZE:
                return None
            for y, symbol in enumerate(row, start=1):
                try:
                    piece = Piece(symbol)
                except (TypeError, ValueError):
                    return None
                contents.append((x, y, piece))
        return cls.from_contents(contents)

    def rows(self) -> List[str]:
        """Return the board as eight strings of piece symbols."""
        return [
            "".join(piece.value for piece in self.grid.get_row(x))
            for x in range(1, self.grid.size_x + 1)
        ]

    def copy(self) -> "OthelloBoard":
        """Return an independent copy seeded from this board's contents."""
        return OthelloBoard.from_contents(self.grid.get_contents())

    def legal_moves(self, player: Any) -> Set[Move]:
        """Return every empty cell where ``player`` would capture something.

        A cell qualifies when, in some direction, the adjacent cell holds the
        opponent and the player's own piece appears further along before any
        empty cell. Each cell appears once however many directions capture.
        """
        opp = opponent(player)
        moves: Set[Move] = set()
        if opp is None:
            return moves
        for x, y, piece in self.grid.get_contents():
            if piece != Piece.EMPTY:
                continue
            for direction in COMPASS:
                if self.grid.get_neighbor(x, y, direction) != opp:
                    continue
                if self._anchored(self.grid.traverse(x, y, direction) or [], player):
                    moves.add((x, y))
                    break
        return moves

    @staticmethod
    def _anchored(cells: Iterable[Tuple[int, int, Any]], player: Any) -> bool:
        for _, _, piece in cells:
            if piece == player:
                return True
            if piece == Piece.EMPTY:
                return False
        return False

    def is_legal_move(self, x: int, y: int, player: Any) -> bool:
        return (x, y) in self.legal_moves(player)

    def has_legal_moves(self, player: Any) -> bool:
        return bool(self.legal_moves(player))

    def place(self, x: int, y: int, player: Any) -> List[Move]:
        """Put ``player``'s piece on ``(x, y)`` and flip captured runs.

        Legality is not checked here; callers should use
        :meth:`is_legal_move` first. Each direction flips its whole run of
        opponent pieces only when the run ends at the player's own piece.
        Returns the flipped coordinates. Nothing changes for an invalid piece
        or coordinate.
        """
        piece = as_player(player)
        if piece is None or not self.grid.is_valid(x, y):
            return []
        opp = opponent(piece)
        self.grid.set_cell(x, y, piece)
        flipped: List[Move] = []
        for direction in COMPASS:
            if self.grid.get_neighbor(x, y, direction) != opp:
                continue
            run: List[Move] = []
            anchored = False
            for cx, cy, value in self.grid.traverse(x, y, direction) or []:
                if value == opp:
                    run.append((cx, cy))
                    continue
                anchored = value == piece
                break
            if anchored:
                for cx, cy in run:
                    self.grid.set_cell(cx, cy, piece)
                flipped.extend(run)
        logger.debug("%s placed at %s, flipped %d", piece.name, (x, y), len(flipped))
        return flipped

    def score(self, player: Any) -> int:
        if as_player(player) is None:
            return 0
        return sum(1 for _, _, piece in self.grid.get_contents() if piece == player)


class GameState(str, Enum):
    BLACK_TURN = "black_turn"
    WHITE_TURN = "white_turn"
    TERMINAL = "terminal"


class Game:
    """Othello game state: the board, whose turn it is and the last move."""

    def __init__(self, board: Optional[OthelloBoard] = None, current: Piece = Piece.BLACK) -> None:
        self.board = board if board is not None else OthelloBoard()
        # ``None`` once neither player can move.
        self.current: Optional[Piece] = as_player(current) or Piece.BLACK
        # Coordinates of the latest accepted play(), if any.
        self.last_move: Optional[Move] = None
        self.passes = 0
        self._resolve_turn()

    def copy(self) -> "Game":
        new_game = Game.__new__(Game)
        new_game.board = self.board.copy()
        new_game.current = self.current
        new_game.last_move = self.last_move
        new_game.passes = self.passes
        return new_game

    @property
    def state(self) -> GameState:
        if self.current is None:
            return GameState.TERMINAL
        if self.current is Piece.BLACK:
            return GameState.BLACK_TURN
        return GameState.WHITE_TURN

    def valid_moves(self) -> List[Move]:
        """Legal moves for the player to move, in ascending order."""
        if self.current is None:
            return []
        return sorted(self.board.legal_moves(self.current))

    def _resolve_turn(self) -> None:
        """Skip a player with no move; end the game when nobody can move."""
        if self.current is None or self.board.has_legal_moves(self.current):
            return
        opp = opponent(self.current)
        if self.board.has_legal_moves(opp):
            logger.debug("%s has no legal move and passes", self.current.name)
            self.passes += 1
            self.current = opp
            return
        self.current = None
        black, white = self.scores()
        logger.info("Game over: black %d, white %d", black, white)

    def play(self, x: int, y: int) -> bool:
        """Play ``(x, y)`` for the side to move and report whether it was accepted.

        A rejected move leaves the game untouched so the caller can ask again.
        """
        player = self.current
        if player is None or not self.board.is_legal_move(x, y, player):
            return False
        self.board.place(x, y, player)
        self.last_move = (x, y)
        self.current = opponent(player)
        self._resolve_turn()
        return True

    def scores(self) -> Tuple[int, int]:
        return self.board.score(Piece.BLACK), self.board.score(Piece.WHITE)

    def winner(self) -> Optional[Piece]:
        """Return the player with more pieces once the game is over.

        ``None`` while the game is running or when it ended in a tie.
        """
        if self.current is not None:
            return None
        black, white = self.scores()
        if black > white:
            return Piece.BLACK
        if white > black:
            return Piece.WHITE
        return None

    def is_tie(self) -> bool:
        black, white = self.scores()
        return self.current is None and black == white

    def to_dict(self) -> Dict[str, Any]:
        return {
            "board": self.board.rows(),
            "current": self.current.value if self.current is not None else None,
            "last": list(self.last_move) if self.last_move is not None else None,
        }

    @classmethod
    def from_dict(cls, data: Any) -> Optional["Game"]:
        """Load a saved game state, or ``None`` if ``data`` is malformed.

        A missing or unknown ``current`` player defaults to black.
        """
        if not isinstance(data, dict):
            return None
        board = OthelloBoard.from_rows(data.get("board"))
        if board is None:
            return None
        current = as_player(data.get("current")) or Piece.BLACK
        game = cls(board, current)
        last = data.get("last")
        if isinstance(last, (list, tuple)) and len(last) == 2:
            game.last_move = (last[0], last[1])
        return game
