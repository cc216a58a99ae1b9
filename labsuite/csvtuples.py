"""Typed conversion of CSV fields into tuples and their text form."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def convert_value(kind: type, text: str) -> Any:
    """Read a value of type ``kind`` from the start of ``text``.

    Leading whitespace is skipped and trailing text is ignored; a string
    value is the first whitespace-delimited word.
    """
    if kind is str:
        words = text.split()
        if not words:
            raise ValueError("Error: Cannot convert string to the desired type")
        return words[0]
    if kind is int:
        pattern = _INT
    elif kind is float:
        pattern = _FLOAT
    else:
        raise TypeError(f"unsupported column type: {kind!r}")
    match = pattern.match(text)
    if match is None:
        raise ValueError("Error: Cannot convert string to the desired type")
    return kind(match.group(1))


def create_tuple(types: Sequence[type], fields: Sequence[str]) -> tuple:
    """Convert ``fields`` column by column into a tuple of ``types``."""
    values = []
    for index, kind in enumerate(types):
        if index >= len(fields):
            raise IndexError("Error: Index out of range while creating tuple")
        try:
            values.append(convert_value(kind, fields[index]))
        except ValueError:
            raise ValueError(f"Error at column: {index + 1}") from None
    return tuple(values)


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def format_tuple(values: Sequence[Any]) -> str:
    """Render values as ``(a, b, c)``."""
    return "(" + ", ".join(_format_value(value) for value in values) + ")"