"""The sudoku board and its undo history."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Optional

from numples import kennett
from numples.cell import Cell
from numples.consts import CELL_SIZE, MAGICAL_ADJUSTMENT_NUMBER
from numples.level import Level

_SIDE = 9
_CELLS = _SIDE * _SIDE
_CENTRE = _CELLS // 2


class InnerBoard:
    """One snapshot of the board: 81 cells, the highlighted cell and whether it is solved.

    Moves return a new board rather than changing this one.
    """

    def __init__(
        self,
        cells: Optional[Iterable[Cell]] = None,
        cursor: int = _CENTRE,
        done: bool = False,
    ) -> None:
        self._cells = [Cell() for _ in range(_CELLS)] if cells is None else list(cells)
        if len(self._cells) != _CELLS:
            raise ValueError(f"a board holds {_CELLS} cells")
        self._cursor = cursor
        self._done = done

    @classmethod
    def from_values(cls, values: Iterable[int]) -> "InnerBoard":
        """Build a board by placing each value in turn, row by row; 0 leaves a cell empty."""
        values = list(values)
        if len(values) != _CELLS:
            raise ValueError(f"a board holds {_CELLS} cells")
        board = cls()
        for index, value in enumerate(values):
            y, x = divmod(index, _SIDE)
            board = board.set_value(x, y, value) or board
        return board

    @classmethod
    def from_level(cls, level: Level) -> "InnerBoard":
        return cls.from_values(kennett.generate(level))

    def _clone(self) -> "InnerBoard":
        return InnerBoard((cell.copy() for cell in self._cells), self._cursor, self._done)

    def _recalculate(self) -> "InnerBoard":
        self._done = all(cell.value() != 0 for cell in self._cells)
        return self

    def is_done(self) -> bool:
        return self._done

    def cell(self, x: int, y: int) -> Cell:
        return self._cells[x + y * _SIDE]

    def highlight(self) -> tuple[int, int]:
        y, x = divmod(self._cursor, _SIDE)
        return x, y

    def set_highlight(self, x: int, y: int) -> None:
        self._cursor = (x % _SIDE) + (y % _SIDE) * _SIDE

    def cursor_position(self) -> tuple[float, float]:
        """Screen offset of the highlighted cell from the board centre."""
        x, y = self.highlight()
        return (
            (x - 4) * CELL_SIZE,
            (y - 4) * CELL_SIZE + MAGICAL_ADJUSTMENT_NUMBER,
        )

    def size(self) -> tuple[float, float]:
        return CELL_SIZE * _SIDE, CELL_SIZE * _SIDE

    def set_value(self, x: int, y: int, value: int) -> Optional["InnerBoard"]:
        """Place a value and strike it from the peers' candidates; None if not allowed."""
        board = self._clone()
        if not board.cell(x, y).set_value(value):
            return None
        for ax, ay in _peers(x, y):
            board.cell(ax, ay).clean_candidate(value)
        return board._recalculate()

    def toggle_candidate(self, x: int, y: int, value: int) -> Optional["InnerBoard"]:
        board = self._clone()
        if board.cell(x, y).toggle_candidate(value):
            return board
        return None


def _peers(x: int, y: int) -> Iterable[tuple[int, int]]:
    """Cells sharing a row, column or box with (x, y), excluding itself."""
    yield from ((ax, y) for ax in range(_SIDE) if ax != x)
    yield from ((x, ay) for ay in range(_SIDE) if ay != y)
    gx, gy = (x // 3) * 3, (y // 3) * 3
    yield from (
        (ax, ay)
        for ax in range(gx, gx + 3)
        for ay in range(gy, gy + 3)
        if ax != x or ay != y
    )


class Board:
    """A board with undo: the history of snapshots, newest last."""

    def __init__(self, history: Iterable[InnerBoard] = ()) -> None:
        self._history = list(history)

    @classmethod
    def from_level(cls, level: Level) -> "Board":
        return cls([InnerBoard.from_level(level)])

    def current(self) -> InnerBoard:
        if not self._history:
            raise ValueError("No board available")
        return self._history[-1]

    def is_done(self) -> bool:
        return self.current().is_done()

    def highlight(self) -> tuple[int, int]:
        return self.current().highlight()

    def set_highlight(self, xi: int, yi: int) -> None:
        """Move the highlight, wrapping around the edges, in every snapshot."""
        for board in self._history:
            board.set_highlight(xi % _SIDE, yi % _SIDE)

    def size(self) -> tuple[float, float]:
        return self.current().size()

    def set_value(self, value: int) -> bool:
        x, y = self.highlight()
        return self._push(self.current().set_value(x, y, value))

    def toggle_candidate(self, candidate: int) -> bool:
        x, y = self.highlight()
        return self._push(self.current().toggle_candidate(x, y, candidate))

    def undo(self) -> bool:
        """Drop the latest move; the first snapshot is never removed."""
        if len(self._history) < 2:
            return False
        self._history.pop()
        return True

    def _push(self, board: Optional[InnerBoard]) -> bool:
        if board is None:
            return False
        self._history.append(board)
        return True