"""Sample converters and a registry that creates them by name."""

from __future__ import annotations

from collections.abc import Callable, Sequence

SAMPLE_MAX = 32767
SAMPLE_MIN = -SAMPLE_MAX - 1


class Converter:
    """A transformation of one second of samples; the base one changes nothing."""

    def convert(self, samples: Sequence[int]) -> list[int]:
        return list(samples)


class MuteConverter(Converter):
    """Replaces every sample with silence."""

    def convert(self, samples: Sequence[int]) -> list[int]:
        return [0] * len(samples)


class MixConverter(Converter):
    """Averages the samples with those of another stream."""

    def __init__(self, other: Sequence[int]) -> None:
        self.other = list(other)

    def convert(self, samples: Sequence[int]) -> list[int]:
        if len(self.other) < len(samples):
            raise ValueError("mix stream is shorter than the input")
        mixed = []
        for sample, extra in zip(samples, self.other):
            total = sample + extra
            half = abs(total) // 2
            mixed.append(-half if total < 0 else half)
        return mixed


class VolumeConverter(Converter):
    """Scales samples by a coefficient, clipping to the 16-bit range."""

    def __init__(self, coefficient: float = 1.0) -> None:
        self.coefficient = coefficient

    def convert(self, samples: Sequence[int]) -> list[int]:
        return [
            int(min(max(sample * self.coefficient, SAMPLE_MIN), SAMPLE_MAX))
            for sample in samples
        ]


class Factory:
    """Creates converters from registered names."""

    def __init__(self) -> None:
        self._creators: dict[str, Callable[..., Converter]] = {}

    def register(self, name: str, creator: Callable[..., Converter]) -> None:
        """Register ``creator`` under ``name``; an existing name is kept."""
        self._creators.setdefault(name, creator)

    def create(self, name: str, *args: object) -> Converter:
        try:
            creator = self._creators[name]
        except KeyError:
            raise KeyError(f"unknown converter: {name}") from None
        return creator(*args)

    def __contains__(self, name: object) -> bool:
        return name in self._creators


def default_factory() -> Factory:
    """A factory knowing the ``mix``, ``mute`` and ``vol`` converters."""
    factory = Factory()
    factory.register("mix", MixConverter)
    factory.register("mute", MuteConverter)
    factory.register("vol", VolumeConverter)
    return factory