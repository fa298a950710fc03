"""Generic bounded 2-D grid with directional traversal."""
from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 4

# Markers are strings rather than numbers so numeric cell data never collides.
OUTSIDE = "GRID_OUTSIDE"
NIL_VALUE = "GRID_NIL_VALUE"

Cell = Tuple[int, int, Any]


class Direction(IntEnum):
    TOP_LEFT = 1
    TOP = 2
    TOP_RIGHT = 3
    LEFT = 4
    CENTER = 5
    RIGHT = 6
    BOTTOM_LEFT = 7
    BOTTOM = 8
    BOTTOM_RIGHT = 9


# x is the row (growing downwards), y the column (growing rightwards).
_VECTORS: Dict[int, Tuple[int, int]] = {
    Direction.TOP_LEFT: (-1, -1),
    Direction.TOP: (-1, 0),
    Direction.TOP_RIGHT: (-1, 1),
    Direction.LEFT: (0, -1),
    Direction.CENTER: (0, 0),
    Direction.RIGHT: (0, 1),
    Direction.BOTTOM_LEFT: (1, -1),
    Direction.BOTTOM: (1, 0),
    Direction.BOTTOM_RIGHT: (1, 1),
}

# The eight neighbours in scan order.
COMPASS: Tuple[Direction, ...] = tuple(d for d in Direction if d is not Direction.CENTER)


def vector_of(direction: Any) -> Optional[Tuple[int, int]]:
    """Return the ``(dx, dy)`` step for ``direction`` or ``None`` if unknown."""
    try:
        return _VECTORS.get(direction)
    except TypeError:
        # Unhashable input cannot be a direction.
        return None


def _is_size(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class Grid:
    """Fixed-size grid addressed by 1-based ``(x, y)`` coordinates.

    Every in-range cell always holds a value; cells start out as ``default``.
    The grid is data agnostic, so any object may be stored, but ``None`` is
    never stored: a ``None`` default becomes :data:`NIL_VALUE`.

    Out-of-range coordinates never raise. Reads return ``None`` or an empty
    list and writes are ignored, so callers must check results.
    """

    def __init__(self, size_x: int = DEFAULT_SIZE, size_y: int = DEFAULT_SIZE, default: Any = None) -> None:
        if not _is_size(size_x):
            logger.debug("Invalid grid width %r, using %d", size_x, DEFAULT_SIZE)
            size_x = DEFAULT_SIZE
        if not _is_size(size_y):
            logger.debug("Invalid grid height %r, using %d", size_y, DEFAULT_SIZE)
            size_y = DEFAULT_SIZE
        self.size_x = size_x
        self.size_y = size_y
        self.default = NIL_VALUE if default is None else default
        self._cells: List[List[Any]] = self._blank(size_x, size_y)

    def _blank(self, size_x: int, size_y: int) -> List[List[Any]]:
        return [[self.default for _ in range(size_y)] for _ in range(size_x)]

    def copy(self) -> "Grid":
        """Return an independent grid with the same size, default and contents."""
        new_grid = Grid.__new__(Grid)
        new_grid.size_x = self.size_x
        new_grid.size_y = self.size_y
        new_grid.default = self.default
        new_grid._cells = [row[:] for row in self._cells]
        return new_grid

    def is_valid(self, x: Any, y: Any) -> bool:
        for value in (x, y):
            if not isinstance(value, int) or isinstance(value, bool):
                return False
        return 1 <= x <= self.size_x and 1 <= y <= self.size_y

    def get_cell(self, x: int, y: int) -> Optional[Any]:
        if self.is_valid(x, y):
            return self._cells[x - 1][y - 1]
        return None

    def get_cells(self, cells: Iterable[Sequence[int]]) -> List[Any]:
        """Return the values of the valid ``(x, y)`` pairs in ``cells``, in order."""
        data = []
        for x, y in cells:
            if self.is_valid(x, y):
                data.append(self._cells[x - 1][y - 1])
        return data

    def set_cell(self, x: int, y: int, value: Any) -> None:
        if self.is_valid(x, y):
            self._cells[x - 1][y - 1] = self.default if value is None else value

    def reset_cell(self, x: int, y: int) -> bool:
        if not self.is_valid(x, y):
            return False
        self._cells[x - 1][y - 1] = self.default
        return True

    def reset_all(self) -> None:
        self._cells = self._blank(self.size_x, self.size_y)

    def populate(self, entries: Iterable[Sequence[Any]]) -> None:
        """Write many cells at once.

        Each entry is ``(x, y, value)`` as produced by :meth:`get_contents`.
        A missing or ``None`` value stores the default. Entries with
        out-of-range coordinates are skipped.
        """
        for entry in entries:
            x, y = entry[0], entry[1]
            value = entry[2] if len(entry) > 2 else None
            if not self.is_valid(x, y):
                continue
            self._cells[x - 1][y - 1] = self.default if value is None else value

    def get_contents(self, exclude_default: bool = False) -> List[Cell]:
        """Return every cell as ``(x, y, value)``, rows first.

        With ``exclude_default`` cells still holding the default are left out.
        The result can be fed straight back into :meth:`populate`.
        """
        data = []
        for x in range(1, self.size_x + 1):
            for y in range(1, self.size_y + 1):
                value = self._cells[x - 1][y - 1]
                if exclude_default and value == self.default:
                    continue
                data.append((x, y, value))
        return data

    def resize(self, new_x: int, new_y: int) -> bool:
        """Change the grid size, keeping values at coordinates that still exist.

        Cells that fall outside the new bounds are lost and new cells get the
        default. Returns ``False`` and leaves the grid untouched when either
        dimension is not a positive integer.
        """
        if not (_is_size(new_x) and _is_size(new_y)):
            return False
        contents = self.get_contents()
        self.size_x = new_x
        self.size_y = new_y
        self._cells = self._blank(new_x, new_y)
        self.populate(contents)
        logger.debug("Grid resized to %dx%d", new_x, new_y)
        return True

    def get_row(self, x: int) -> List[Any]:
        if not self.is_valid(x, 1):
            return []
        return list(self._cells[x - 1])

    def get_column(self, y: int) -> List[Any]:
        if not self.is_valid(1, y):
            return []
        return [row[y - 1] for row in self._cells]

    def get_neighbor(self, x: int, y: int, direction: Any) -> Optional[Any]:
        """Return the value one step from ``(x, y)`` towards ``direction``."""
        vector = vector_of(direction)
        if vector is None or not self.is_valid(x, y):
            return None
        return self.get_cell(x + vector[0], y + vector[1])

    def get_neighbors(self, x: int, y: int) -> List[Tuple[Optional[int], Optional[int], Any]]:
        """Return the eight neighbours of ``(x, y)`` in :data:`COMPASS` order.

        Neighbours beyond the edge are reported as ``(None, None, OUTSIDE)``.
        An invalid origin gives an empty list.
        """
        if not self.is_valid(x, y):
            return []
        data: List[Tuple[Optional[int], Optional[int], Any]] = []
        for direction in COMPASS:
            dx, dy = _VECTORS[direction]
            nx, ny = x + dx, y + dy
            if self.is_valid(nx, ny):
                data.append((nx, ny, self._cells[nx - 1][ny - 1]))
            else:
                data.append((None, None, OUTSIDE))
        return data

    def traverse(self, x: int, y: int, direction: Any) -> Optional[List[Cell]]:
        """Walk from ``(x, y)`` towards ``direction`` until the edge.

        The origin itself is not included; cells are ordered nearest first.
        Returns ``None`` when the origin is invalid and an empty list when
        there is nothing to walk (unknown direction, ``CENTER`` or the origin
        already sits on that edge).
        """
        if not self.is_valid(x, y):
            return None
        vector = vector_of(direction)
        if vector is None or vector == (0, 0):
            return []
        dx, dy = vector
        data = []
        gx, gy = x + dx, y + dy
        while self.is_valid(gx, gy):
            data.append((gx, gy, self._cells[gx - 1][gy - 1]))
            gx += dx
            gy += dy
        return data
