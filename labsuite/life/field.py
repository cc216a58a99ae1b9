"""A toroidal grid of Life cells."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Cell(Enum):
    """State of a single cell."""

    ALIVE = "alive"
    DEAD = "dead"


class Field:
    """Grid of cells addressed by ``(x, y)``.

    Coordinates wrap: the flat offset ``y * width + x`` is taken modulo the
    number of cells.
    """

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self.width = 0
        self.height = 0
        self._cells: list[Cell] = []
        self.resize(width, height)

    def _offset(self, pos: tuple[int, int]) -> int:
        x, y = pos
        area = self.width * self.height
        if area == 0:
            raise IndexError("field has no cells")
        return (y * self.width + x) % area

    def __getitem__(self, pos: tuple[int, int]) -> Cell:
        return self._cells[self._offset(pos)]

    def __setitem__(self, pos: tuple[int, int], cell: Cell) -> None:
        self._cells[self._offset(pos)] = cell

    def resize(self, width: int, height: int) -> None:
        """Set new dimensions and make every cell dead."""
        if width < 0 or height < 0:
            raise ValueError("field dimensions must not be negative")
        self.width = width
        self.height = height
        self._cells = [Cell.DEAD] * (width * height)

    def replace(self, cells: Iterable[Cell]) -> None:
        """Replace all cells with ``cells`` given in row-major order."""
        new_cells = list(cells)
        if len(new_cells) != self.width * self.height:
            raise ValueError("cell count does not match the field size")
        self._cells = new_cells