"""Reading and writing universes in the Life 1.06 text format."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable

from labsuite.life.field import Cell
from labsuite.life.model import Rules, Universe

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Standard name"
_RULE_DIGITS = "012345678"


def parse_rule_digits(text: str) -> frozenset[int]:
    """Turn a string of neighbour counts such as ``"23"`` into a set."""
    digits = set()
    for char in text:
        if char not in _RULE_DIGITS:
            raise ValueError(f"invalid neighbour count {char!r} in rules")
        digits.add(int(char))
    return frozenset(digits)


def _parse_rules(line: str) -> Rules:
    born_at = line.find("B")
    survive_at = line.find("S")
    if born_at < 0 or survive_at < 0:
        raise ValueError(f"invalid rules line: {line!r}")
    born = parse_rule_digits(line[born_at + 1 : survive_at - 1])
    survive = parse_rule_digits(line[survive_at + 1 :])
    return Rules(born=born, survive=survive)


def _parse_size(line: str) -> tuple[int, int]:
    height_at = line.find("H")
    width_at = line.find("W")
    if height_at < 0 or width_at < 0:
        raise ValueError(f"invalid size line: {line!r}")
    try:
        height = int(line[height_at + 1 : width_at - 1])
        width = int(line[width_at + 1 :])
    except ValueError:
        raise ValueError(f"invalid size line: {line!r}") from None
    return width, height


def _parse_coordinates(line: str, number: int) -> tuple[int, int] | None:
    parts = line.split()
    if not parts:
        return None
    try:
        return int(parts[0]), int(parts[1])
    except (IndexError, ValueError):
        raise ValueError(f"invalid cell on line {number}: {line!r}") from None


def _parse_lines(lines: Iterable[str]) -> Universe:
    universe = Universe()
    field = universe.field
    sized = False
    for number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if number == 1:
            if "#Life" not in line:
                raise ValueError("not a Life 1.06 file: missing #Life header")
        elif number == 2:
            name_at = line.find("#N")
            if name_at < 0:
                logger.warning("universe has no name")
                universe.name = DEFAULT_NAME
            else:
                universe.name = line[name_at + 3 :]
        elif number == 3:
            universe.rules = _parse_rules(line)
        elif number == 4:
            field.resize(*_parse_size(line))
            sized = True
        else:
            coordinates = _parse_coordinates(line, number)
            if coordinates is None:
                continue
            x, y = coordinates
            if x >= field.width or y >= field.height:
                continue
            field[x % field.width, y % field.height] = Cell.ALIVE
    if not sized:
        raise ValueError("incomplete Life 1.06 header")
    return universe


def read_universe(path: str | os.PathLike[str]) -> Universe:
    """Load a universe from a Life 1.06 file."""
    with open(path, encoding="utf-8") as source:
        return _parse_lines(source)


def format_universe(universe: Universe) -> str:
    """Render a universe as Life 1.06 text."""
    field = universe.field
    born = "".join(str(n) for n in sorted(universe.rules.born))
    survive = "".join(str(n) for n in sorted(universe.rules.survive))
    lines = [
        "#Life 1.06",
        f"#N {universe.name}",
        f"#R B{born}/S{survive}",
        f"#SIZE H{field.height}/W{field.width}",
    ]
    lines.extend(
        f"{x} {y}"
        for y in range(field.height)
        for x in range(field.width)
        if field[x, y] is Cell.ALIVE
    )
    return "\n".join(lines) + "\n"


def write_universe(universe: Universe, path: str | os.PathLike[str]) -> None:
    """Save a universe to a Life 1.06 file, replacing any existing file."""
    with open(path, "w", encoding="utf-8") as target:
        target.write(format_universe(universe))