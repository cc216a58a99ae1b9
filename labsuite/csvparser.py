"""Iterate over the rows of a CSV stream as typed tuples."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import TextIO

from labsuite.csvtuples import create_tuple, format_tuple

DEFAULT_TYPES = (int, str, int, int)


class CSVError(ValueError):
    """A row could not be converted; the message names the line."""


def split_row(row: str) -> list[str]:
    """Split a row on ``;`` or ``,``; an empty trailing field is dropped."""
    fields = []
    current: list[str] = []
    for char in row:
        if char == "\n":
            break
        if char in ";,":
            fields.append("".join(current))
            current.clear()
            continue
        current.append(char)
    if current:
        fields.append("".join(current))
    return fields


class CSVParser:
    """Reads rows of ``types`` from ``stream`` until the first empty line."""

    def __init__(
        self, stream: TextIO, types: Sequence[type], skip_lines: int = 0
    ) -> None:
        if getattr(stream, "closed", False):
            raise OSError("no input file")
        self._stream = stream
        self._types = tuple(types)
        self._skip_lines = skip_lines
        self._line = 0

    def _skip(self) -> None:
        for _ in range(self._skip_lines):
            if not self._stream.readline():
                raise ValueError("not enough lines to skip")

    def __iter__(self) -> Iterator[tuple]:
        self._skip()
        while True:
            row = self._stream.readline()
            if row.endswith("\n"):
                row = row[:-1]
            self._line += 1
            if not row:
                return
            try:
                yield create_tuple(self._types, split_row(row))
            except ValueError as error:
                raise CSVError(f"{error}, line:{self._line}") from None


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("usage: csvparser FILE", file=sys.stderr)
        return 1
    try:
        with open(args[0], encoding="utf-8") as stream:
            for row in CSVParser(stream, DEFAULT_TYPES):
                print(format_tuple(row))
    except (OSError, ValueError, IndexError) as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())