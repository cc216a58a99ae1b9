"""Count word frequencies in a text file and write them as a CSV report."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

HEADER = "Word;Frequency;Percent"


def _is_word_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


def count_words(lines: Iterable[str]) -> tuple[dict[str, int], int]:
    """Return word counts and the total number of separators seen.

    Every non-alphanumeric character ends a word (an empty one too).  Line
    breaks are not separators, so a word may continue onto the next line,
    and a word not followed by a separator is not counted.
    """
    counts: dict[str, int] = {}
    total = 0
    word: list[str] = []
    for line in lines:
        if line.endswith("\n"):
            line = line[:-1]
        for char in line:
            if _is_word_char(char):
                word.append(char)
                continue
            key = "".join(word)
            counts[key] = counts.get(key, 0) + 1
            total += 1
            word.clear()
    return counts, total


def ranked_words(counts: dict[str, int]) -> list[tuple[str, int]]:
    """Order words by ascending count; ties in descending word order."""
    by_word = sorted(counts.items(), reverse=True)
    return sorted(by_word, key=lambda pair: pair[1])


def format_report(counts: dict[str, int], total: int) -> str:
    """Render the report; the first percentage uses general notation."""
    rows = [HEADER]
    for position, (word, count) in enumerate(ranked_words(counts)):
        percent = 100.0 * count / total
        text = f"{percent:g}" if position == 0 else f"{percent:.6f}"
        rows.append(f"{word};{count};{text}%")
    return "\n".join(rows) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Word frequency report.")
    parser.add_argument("input")
    parser.add_argument("output")
    args = parser.parse_args(argv)
    try:
        with open(args.input, encoding="utf-8", errors="replace") as source:
            counts, total = count_words(source)
        with open(args.output, "w", encoding="utf-8") as target:
            target.write(format_report(counts, total))
    except OSError as error:
        print(error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())