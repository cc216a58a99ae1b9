"""Life universe: a field, its name and birth/survival rules."""

from __future__ import annotations

from dataclasses import dataclass

from labsuite.life.field import Cell, Field

_OFFSETS = (
    (1, -1), (0, -1), (-1, -1),
    (1, 0), (-1, 0),
    (1, 1), (0, 1), (-1, 1),
)


@dataclass(frozen=True)
class Rules:
    """Neighbour counts at which a dead cell is born or a live one survives."""

    born: frozenset[int] = frozenset()
    survive: frozenset[int] = frozenset()


class Universe:
    """A named field evolving under a set of rules."""

    def __init__(
        self,
        field: Field | None = None,
        name: str = "",
        rules: Rules | None = None,
    ) -> None:
        self.field = field if field is not None else Field()
        self.name = name
        self.rules = rules if rules is not None else Rules()

    def alive_neighbours(self, row: int, col: int) -> int:
        """Count live cells around ``(row, col)`` on the torus."""
        field = self.field
        return sum(
            field[(col + dc) % field.width, (row + dr) % field.height] is Cell.ALIVE
            for dr, dc in _OFFSETS
        )

    def step(self) -> None:
        """Advance the universe by one generation."""
        field = self.field
        cells = []
        for row in range(field.height):
            for col in range(field.width):
                count = self.alive_neighbours(row, col)
                if field[col, row] is Cell.ALIVE:
                    alive = count in self.rules.survive
                else:
                    alive = count in self.rules.born
                cells.append(Cell.ALIVE if alive else Cell.DEAD)
        field.replace(cells)