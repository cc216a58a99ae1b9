import pytest

from labsuite.sound.converters import MixConverter, VolumeConverter, default_factory
from labsuite.sound.processor import Processor, main, parse_args, parse_config
from labsuite.sound.wav import SoundSource, WavHeader, WavWriter


def write_wav(path, rate, samples):
    header = WavHeader(sample_rate=rate, byte_rate=rate * 2, chunk_size=len(samples) * 2)
    with WavWriter(path) as writer:
        writer.write_header(header)
        writer.write_samples(samples)
    return path


def read_all(path):
    with SoundSource([path]) as source:
        return [source.read_second(0) for _ in range(source.seconds(0))]


def make_processor(tmp_path, config_text, inputs):
    config = tmp_path / "config.txt"
    config.write_text(config_text)
    source = SoundSource(inputs)
    writer = WavWriter(tmp_path / "out.wav")
    return Processor(source, default_factory(), writer, config), source, writer


def test_parse_config_skips_comments_and_blanks():
    lines = ["# comment\n", "mute 0 1\n", "\n", "vol 0 1 2\n"]
    assert parse_config(lines) == [["mute", "0", "1"], ["vol", "0", "1", "2"]]


def test_parse_args_basic():
    args = parse_args(["-c", "cfg.txt", "out.wav", "a.wav", "b.wav"])
    assert args.config == "cfg.txt"
    assert args.output == "out.wav"
    assert args.inputs == ("a.wav", "b.wav")
    assert args.show_help is False


def test_parse_args_help_flag():
    args = parse_args(["-h", "-c", "cfg.txt", "out.wav", "a.wav"])
    assert args.show_help is True
    assert args.inputs == ("a.wav",)


@pytest.mark.parametrize(
    "argv",
    [["-c", "cfg", "out"], ["-x", "cfg", "out", "in"], ["-h", "-c", "cfg", "out"]],
)
def test_parse_args_errors(argv):
    with pytest.raises(ValueError):
        parse_args(argv)


def test_mute_in_range(tmp_path):
    path = write_wav(tmp_path / "in.wav", 4, [1, 2, 3, 4])
    processor, source, writer = make_processor(tmp_path, "mute 1 2\n", [path])
    with source, writer:
        assert processor.process_config([1, 2, 3, 4], 1) == [0, 0, 0, 0]
        assert processor.process_config([1, 2, 3, 4], 3) == [1, 2, 3, 4]


def test_unknown_command_is_ignored(tmp_path):
    path = write_wav(tmp_path / "in.wav", 4, [1, 2, 3, 4])
    processor, source, writer = make_processor(tmp_path, "echo 1 2\n", [path])
    with source, writer:
        assert processor.process_config([1, 2, 3, 4], 0) == [1, 2, 3, 4]


def test_vol_coefficient_uses_integer_part(tmp_path):
    path = write_wav(tmp_path / "in.wav", 2, [1, 2])
    processor, source, writer = make_processor(tmp_path, "vol 0 0 2.9\n", [path])
    with source, writer:
        result = processor.process_config([100, -300], 0)
    assert result == VolumeConverter(2).convert([100, -300])


def test_malformed_line_raises(tmp_path):
    path = write_wav(tmp_path / "in.wav", 2, [1, 2])
    processor, source, writer = make_processor(tmp_path, "mute 0\n", [path])
    with source, writer:
        with pytest.raises(ValueError):
            processor.process_config([1, 2], 0)


def test_missing_config_raises(tmp_path):
    path = write_wav(tmp_path / "in.wav", 2, [1, 2])
    with SoundSource([path]) as source, WavWriter(tmp_path / "o.wav") as writer:
        with pytest.raises(FileNotFoundError):
            Processor(source, default_factory(), writer, tmp_path / "none.txt")


def test_run_writes_all_seconds(tmp_path):
    samples = [1, 2, 3, 4, 5, 6, 7, 8]
    path = write_wav(tmp_path / "in.wav", 4, samples)
    processor, source, writer = make_processor(tmp_path, "# nothing\n", [path])
    with source, writer:
        assert processor.run() == 2
    assert read_all(tmp_path / "out.wav") == [samples[:4], samples[4:]]


def test_main_applies_mute(tmp_path):
    samples = [1, 2, 3, 4, 5, 6, 7, 8]
    source = write_wav(tmp_path / "in.wav", 4, samples)
    config = tmp_path / "config.txt"
    config.write_text("mute 0 0\n")
    output = tmp_path / "out.wav"
    assert main(["-c", str(config), str(output), str(source)]) == 0
    assert read_all(output) == [[0, 0, 0, 0], samples[4:]]
    assert output.read_bytes()[:44] == source.read_bytes()[:44]


def test_main_applies_mix(tmp_path):
    main_samples = [100, -100, 50, 7]
    extra_samples = [20, 20, -50, 1]
    first = write_wav(tmp_path / "a.wav", 4, main_samples)
    second = write_wav(tmp_path / "b.wav", 4, extra_samples)
    config = tmp_path / "config.txt"
    config.write_text("mix 1\n")
    output = tmp_path / "out.wav"
    assert main(["-c", str(config), str(output), str(first), str(second)]) == 0
    expected = MixConverter(extra_samples).convert(main_samples)
    assert read_all(output) == [expected]


def test_main_missing_input_fails(tmp_path):
    config = tmp_path / "config.txt"
    config.write_text("")
    code = main(["-c", str(config), str(tmp_path / "o.wav"), str(tmp_path / "x.wav")])
    assert code == 1


def test_main_bad_arguments_fail():
    assert main(["-c", "only"]) == 1