"""Interactive and batch runners for the Game of Life."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterable
from typing import TextIO

from labsuite.life.lifefile import read_universe, write_universe
from labsuite.life.model import Universe
from labsuite.life.view import show

DEFAULT_INPUT = "base.life"
DEFAULT_DUMP = "output.life"
PROMPT = "Command:"
UNKNOWN = "No such command. Enter help to see the list of commands"
HELP = (
    "Game commands:\n"
    "1. dump <filename> - save the universe to a file\n"
    "2. tick <n=1> (or t <n=1>) - compute n iterations (1 by default) "
    "and print the result\n"
    "3. exit - quit the game\n"
    "4. help - print this help\n"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _tick_count(text: str) -> int:
    if not text:
        return 1
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid tick count: {text!r}")
    return int(match.group(1))


class Game:
    """Command interpreter driving a universe."""

    def __init__(self, universe: Universe, out: TextIO | None = None) -> None:
        self.universe = universe
        self.out = sys.stdout if out is None else out

    def tick(self, count: int = 1) -> None:
        """Advance ``count`` generations, printing the field after each."""
        for _ in range(count):
            self.universe.step()
            show(self.universe.field, self.out)

    def dump(self, path: str | os.PathLike[str]) -> None:
        write_universe(self.universe, path)

    def handle(self, command: str) -> bool:
        """Run one command; return False when the game should stop."""
        pos = command.find("t ")
        if pos >= 0:
            self.tick(_tick_count(command[pos + 2 :]))
            return True
        pos = command.find("tick")
        if pos >= 0:
            self.tick(_tick_count(command[pos + 4 :]))
            return True
        pos = command.find("dump")
        if pos >= 0:
            self.dump(command[pos + 5 :] or DEFAULT_DUMP)
            return True
        if command == "exit":
            return False
        if command == "help":
            self.out.write(HELP)
            return True
        self.out.write(UNKNOWN + "\n")
        self.out.write(HELP)
        return True

    def play(self, lines: Iterable[str] | None = None) -> None:
        """Read commands from ``lines`` (standard input by default) until exit."""
        commands = iter(sys.stdin if lines is None else lines)
        self.out.write(HELP)
        while True:
            self.out.write(PROMPT + "\n")
            try:
                line = next(commands)
            except StopIteration:
                return
            try:
                if not self.handle(line.rstrip("\r\n")):
                    return
            except (ValueError, OSError) as error:
                self.out.write(f"Error: {error}\n")


def run_offline(
    universe: Universe, iterations: int, out_path: str | os.PathLike[str]
) -> None:
    """Advance ``iterations`` generations and save the result."""
    game = Game(universe)
    game.tick(iterations)
    game.dump(out_path)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) <= 1:
            universe = read_universe(args[0] if args else DEFAULT_INPUT)
            game = Game(universe)
            show(universe.field, game.out)
            game.play()
            return 0
        if len(args) == 5:
            if args[1] != "-i" or args[3] != "-o":
                print("Invalid key format")
                return 1
            iterations = int(args[2])
            run_offline(read_universe(args[0]), iterations, args[4])
            return 0
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    print("Invalid input format")
    return 1


if __name__ == "__main__":
    sys.exit(main())