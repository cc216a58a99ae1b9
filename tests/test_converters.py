import pytest

from labsuite.sound.converters import (
    SAMPLE_MAX,
    SAMPLE_MIN,
    Converter,
    Factory,
    MixConverter,
    MuteConverter,
    VolumeConverter,
    default_factory,
)


def test_base_converter_returns_copy():
    samples = [1, 2, 3]
    result = Converter().convert(samples)
    assert result == samples
    result.append(4)
    assert samples == [1, 2, 3]


def test_mute_silences_everything():
    assert MuteConverter().convert([5, -7, 300]) == [0, 0, 0]


def test_mute_keeps_length():
    assert len(MuteConverter().convert(list(range(10)))) == 10


def test_mix_with_itself_is_identity():
    samples = [100, -200, 32767, -32768, 0]
    assert MixConverter(samples).convert(samples) == samples


def test_mix_truncates_toward_zero():
    assert MixConverter([0]).convert([-3]) == [-1]


def test_mix_is_symmetric_in_sign():
    positive = MixConverter([0, 0, 0]).convert([7, 11, 13])
    negative = MixConverter([0, 0, 0]).convert([-7, -11, -13])
    assert negative == [-value for value in positive]


def test_mix_is_commutative():
    a = [10, -5, 301]
    b = [4, 9, -100]
    assert MixConverter(a).convert(b) == MixConverter(b).convert(a)


def test_mix_with_short_stream_raises():
    with pytest.raises(ValueError):
        MixConverter([1]).convert([1, 2])


def test_volume_clips_to_sample_range():
    assert VolumeConverter(2).convert([20000, -20000]) == [SAMPLE_MAX, SAMPLE_MIN]
    assert SAMPLE_MAX == 32767
    assert SAMPLE_MIN == -32768


def test_volume_one_is_identity():
    samples = [1, -1, 32767, -32768]
    assert VolumeConverter(1).convert(samples) == samples


def test_volume_zero_silences():
    assert VolumeConverter(0).convert([5, -9]) == MuteConverter().convert([5, -9])


def test_factory_unknown_name():
    with pytest.raises(KeyError):
        Factory().create("echo")


def test_factory_passes_arguments():
    factory = Factory()
    factory.register("vol", VolumeConverter)
    converter = factory.create("vol", 0)
    assert converter.convert([10, 20]) == [0, 0]


def test_factory_keeps_first_registration():
    factory = Factory()
    factory.register("x", MuteConverter)
    factory.register("x", Converter)
    assert factory.create("x").convert([3]) == [0]


def test_default_factory_knows_converters():
    factory = default_factory()
    assert {"mix", "mute", "vol"} <= {n for n in ("mix", "mute", "vol") if n in factory}
    assert factory.create("mute").convert([4, 4]) == [0, 0]
    assert factory.create("mix", [6]).convert([6]) == [6]
    assert factory.create("vol", 1).convert([-8]) == [-8]