"""Reading and writing 16-bit PCM WAV data one second at a time."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import BinaryIO, ClassVar

_HEADER = struct.Struct("<4sI4s4sIHHIIHH4sI")
SAMPLE_BYTES = 2


def _decode_samples(data: bytes) -> list[int]:
    count = len(data) // SAMPLE_BYTES
    return list(struct.unpack(f"<{count}h", data[: count * SAMPLE_BYTES]))


@dataclass
class WavHeader:
    """The 44-byte canonical WAV header."""

    SIZE: ClassVar[int] = _HEADER.size

    chunk_id: bytes = b"RIFF"
    chunk_size: int = 0
    format: bytes = b"WAVE"
    subchunk1_id: bytes = b"fmt "
    subchunk1_size: int = 16
    audio_format: int = 1
    num_channels: int = 1
    sample_rate: int = 44100
    byte_rate: int = 88200
    block_align: int = 2
    bits_per_sample: int = 16
    subchunk2_id: bytes = b"data"
    subchunk2_size: int = 0

    @classmethod
    def unpack(cls, data: bytes) -> WavHeader:
        """Decode a header from the first bytes of ``data``."""
        if len(data) < cls.SIZE:
            raise ValueError("truncated WAV header")
        return cls(*_HEADER.unpack(data[: cls.SIZE]))

    def pack(self) -> bytes:
        return _HEADER.pack(
            self.chunk_id,
            self.chunk_size,
            self.format,
            self.subchunk1_id,
            self.subchunk1_size,
            self.audio_format,
            self.num_channels,
            self.sample_rate,
            self.byte_rate,
            self.block_align,
            self.bits_per_sample,
            self.subchunk2_id,
            self.subchunk2_size,
        )


class SoundSource:
    """A set of open WAV inputs read second by second.

    The number of samples per second is the sample rate of the last file
    opened and is shared by all inputs; the header reported is the first one.
    """

    def __init__(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        self._files: list[BinaryIO] = []
        self._headers: list[WavHeader] = []
        self._seconds: list[int] = []
        self._processed: list[int] = []
        self.samples_per_second = 0
        try:
            for path in paths:
                stream = open(path, "rb")
                self._files.append(stream)
                header = WavHeader.unpack(stream.read(WavHeader.SIZE))
                if header.sample_rate == 0:
                    raise ValueError(f"{os.fspath(path)}: sample rate is zero")
                self._headers.append(header)
                self._processed.append(0)
                self.samples_per_second = header.sample_rate
                self._seconds.append(
                    header.chunk_size // (SAMPLE_BYTES * header.sample_rate)
                )
            if not self._files:
                raise ValueError("no input files")
        except BaseException:
            self.close()
            raise

    @property
    def header(self) -> WavHeader:
        return self._headers[0]

    def __len__(self) -> int:
        return len(self._files)

    def read_second(self, index: int) -> list[int]:
        """Read the next second of input ``index``, padded with silence."""
        stream = self._files[index]
        count = self.samples_per_second
        stream.seek(WavHeader.SIZE + self._processed[index] * count * SAMPLE_BYTES)
        samples = _decode_samples(stream.read(count * SAMPLE_BYTES))
        self._processed[index] += 1
        samples.extend([0] * (count - len(samples)))
        return samples

    def seconds(self, index: int) -> int:
        """Length of input ``index`` in whole seconds."""
        return self._seconds[index]

    def processed(self, index: int) -> int:
        """Number of seconds already read from input ``index``."""
        return self._processed[index]

    def close(self) -> None:
        for stream in self._files:
            stream.close()

    def __enter__(self) -> SoundSource:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class WavWriter:
    """Writes a WAV header followed by 16-bit samples."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._stream: BinaryIO = open(path, "wb")

    def write_header(self, header: WavHeader) -> None:
        self._stream.write(header.pack())

    def write_samples(self, samples: Sequence[int]) -> None:
        try:
            data = struct.pack(f"<{len(samples)}h", *samples)
        except struct.error as error:
            raise ValueError(f"sample out of 16-bit range: {error}") from None
        self._stream.write(data)

    def close(self) -> None:
        self._stream.close()

    def __enter__(self) -> WavWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()