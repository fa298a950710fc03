"""Tic-tac-toe on a 3x3 :class:`~gridgames.grid.Grid`."""
from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Union

from .grid import Grid

SIZE = 3
TIE = "tie"


class Mark(str, Enum):
    BLANK = " "
    X = "X"
    O = "O"


MARKS = (Mark.X, Mark.O)

DIAGONALS = (
    ((1, 1), (2, 2), (3, 3)),
    ((1, 3), (2, 2), (3, 1)),
)


class TicTacToe:
    def __init__(self) -> None:
        self.grid = Grid(SIZE, SIZE, Mark.BLANK)

    @staticmethod
    def is_mark(value: Any) -> bool:
        return any(value == mark for mark in MARKS)

    def is_empty(self, x: int, y: int) -> bool:
        return self.grid.get_cell(x, y) == Mark.BLANK

    def place(self, x: int, y: int, mark: Any) -> bool:
        if not self.is_mark(mark) or not self.is_empty(x, y):
            return False
        self.grid.set_cell(x, y, Mark(mark))
        return True

    def _line_winner(self, line: List[Any]) -> Optional[Mark]:
        if len(line) == SIZE and self.is_mark(line[0]) and all(v == line[0] for v in line):
            return Mark(line[0])
        return None

    def check_winner(self) -> Union[Mark, str, None]:
        """Return the winning mark, ``"tie"`` for a full board, or ``None``."""
        lines = [self.grid.get_row(x) for x in range(1, SIZE + 1)]
        lines += [self.grid.get_column(y) for y in range(1, SIZE + 1)]
        lines += [self.grid.get_cells(diagonal) for diagonal in DIAGONALS]
        for line in lines:
            winner = self._line_winner(line)
            if winner is not None:
                return winner

        # The centre touches every other cell.
        if self.is_empty(2, 2):
            return None
        if all(value != Mark.BLANK for _, _, value in self.grid.get_neighbors(2, 2)):
            return TIE
        return None
