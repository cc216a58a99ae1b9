"""Text rendering of a Life field."""

from __future__ import annotations

import sys
from typing import TextIO

from labsuite.life.field import Cell, Field

ALIVE_CHAR = "0"
DEAD_CHAR = "#"
SEPARATOR = "-" * 10


def render(field: Field) -> str:
    """Return the field as text rows followed by a separator line."""
    rows = (
        "".join(
            ALIVE_CHAR if field[x, y] is Cell.ALIVE else DEAD_CHAR
            for x in range(field.width)
        )
        for y in range(field.height)
    )
    return "".join(f"{row}\n" for row in rows) + SEPARATOR + "\n"


def show(field: Field, stream: TextIO | None = None) -> None:
    """Write the rendered field to ``stream`` (standard output by default)."""
    target = sys.stdout if stream is None else stream
    target.write(render(field))