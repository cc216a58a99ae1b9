"""Applies the converters named in a config file to a WAV stream."""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from labsuite.sound.converters import Factory, default_factory
from labsuite.sound.wav import SoundSource, WavWriter

logger = logging.getLogger(__name__)

CONVERTERS = ("mix", "mute", "vol")
_ARITY = {"mix": 1, "mute": 2, "vol": 3}
HELP = (
    "1. mix index start_sec\n"
    "2. mute start_sec end_sec\n"
    "3. vol sec_start sec_end coefficient"
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``, ignoring what follows."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def parse_config(lines: Iterable[str]) -> list[list[str]]:
    """Split config lines into words, skipping comments and blank lines."""
    commands = []
    for line in lines:
        if line.startswith("#"):
            continue
        words = line.split()
        if words:
            commands.append(words)
    return commands


@dataclass(frozen=True)
class Arguments:
    config: str
    output: str
    inputs: tuple[str, ...]
    show_help: bool = False


def parse_args(argv: Sequence[str]) -> Arguments:
    """Parse ``[-h] -c config output input...``."""
    if len(argv) < 4:
        raise ValueError("Pass the files")
    position = 0
    show_help = argv[0] == "-h"
    if show_help:
        position += 1
    if argv[position] != "-c":
        raise ValueError("Invalid keys")
    rest = argv[position + 1 :]
    if len(rest) < 3:
        raise ValueError("Pass the files")
    return Arguments(rest[0], rest[1], tuple(rest[2:]), show_help)


class Processor:
    """Runs the main input through the configured converters second by second."""

    def __init__(
        self,
        source: SoundSource,
        factory: Factory,
        writer: WavWriter,
        config_path: str | os.PathLike[str],
    ) -> None:
        self._source = source
        self._factory = factory
        self._writer = writer
        with open(config_path, encoding="utf-8") as config:
            self._commands = parse_config(config)

    def process_config(self, samples: Sequence[int], second: int) -> list[int]:
        """Apply every command active at ``second`` to ``samples``."""
        result = list(samples)
        for name, *args in self._commands:
            if name not in CONVERTERS:
                logger.warning("impossible conversion in config file: %s", name)
                continue
            if len(args) < _ARITY[name]:
                raise ValueError(f"malformed config line: {' '.join([name, *args])}")
            result = self._apply(name, args, result, second)
        return result

    def _apply(self, name: str, args: list[str], samples: list[int], second: int) -> list[int]:
        if name == "mute":
            start, end = _to_int(args[0]), _to_int(args[1])
            if start <= second <= end:
                return self._factory.create("mute").convert(samples)
        elif name == "mix":
            index = _to_int(args[0])
            start = _to_int(args[1]) if len(args) == 2 else 0
            if not 0 <= index < len(self._source):
                logger.warning("no input file with index %d", index)
                return samples
            if start <= second < self._source.seconds(index):
                other = self._source.read_second(index)
                return self._factory.create("mix", other).convert(samples)
        elif name == "vol":
            start, end = _to_int(args[0]), _to_int(args[1])
            coefficient = float(_to_int(args[2]))
            if start <= second <= end:
                return self._factory.create("vol", coefficient).convert(samples)
        return samples

    def run(self) -> int:
        """Process the whole main input; return the number of seconds written."""
        source = self._source
        self._writer.write_header(source.header)
        while source.processed(0) < source.seconds(0):
            samples = source.read_second(0)
            samples = self.process_config(samples, source.processed(0) - 1)
            logger.info("processed second %d", source.processed(0))
            self._writer.write_samples(samples[: source.samples_per_second])
        return source.processed(0)


def main(argv: list[str] | None = None) -> int:
    raw = sys.argv[1:] if argv is None else list(argv)
    try:
        args = parse_args(raw)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    if args.show_help:
        print(HELP)
    try:
        with SoundSource(args.inputs) as source, WavWriter(args.output) as writer:
            Processor(source, default_factory(), writer, args.config).run()
    except (OSError, ValueError) as error:
        print(error, file=sys.stderr)
        return 1
    print("Processing finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())