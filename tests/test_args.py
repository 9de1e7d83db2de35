import pytest

from rkcapture.args import ArgsError, help_text, parse_args


def test_required_args_short():
    args = parse_args(["-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/sock"])
    assert args.width == 1920
    assert args.height == 1080
    assert args.input_path == "/dev/video0"
    assert args.output_path == "/tmp/sock"
    assert args.bit_rate == 10 * 1024
    assert args.gop == 60
    assert args.help_flag is False
    assert args.version_flag is False


def test_long_options():
    args = parse_args(
        [
            "--width", "1280",
            "--height", "720",
            "--input", "/dev/video1",
            "--output", "/var/run/out.sock",
            "--bit-rate", "5000",
            "--gop", "30",
        ]
    )
    assert args.width == 1280
    assert args.height == 720
    assert args.input_path == "/dev/video1"
    assert args.output_path == "/var/run/out.sock"
    assert args.bit_rate == 5000
    assert args.gop == 30


def test_default_values():
    args = parse_args(["-w", "800", "-h", "600", "-i", "/dev/video0", "-o", "/tmp/out"])
    assert args.bit_rate == 10 * 1024
    assert args.gop == 60


@pytest.mark.parametrize(
    "argv",
    [
        pytest.param(["-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out"], id="missing-width"),
        pytest.param(["-w", "1920", "-i", "/dev/video0", "-o", "/tmp/out"], id="missing-height"),
        pytest.param(["-w", "1920", "-h", "1080", "-o", "/tmp/out"], id="missing-input"),
        pytest.param(["-w", "1920", "-h", "1080", "-i", "/dev/video0"], id="missing-output"),
    ],
)
def test_missing_required(argv):
    with pytest.raises(ArgsError):
        parse_args(argv)


@pytest.mark.parametrize("width", ["0", "8193"])
def test_width_out_of_range(width):
    with pytest.raises(ArgsError, match="width"):
        parse_args(["-w", width, "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out"])


@pytest.mark.parametrize("height", ["0", "8193"])
def test_height_out_of_range(height):
    with pytest.raises(ArgsError, match="height"):
        parse_args(["-w", "1920", "-h", height, "-i", "/dev/video0", "-o", "/tmp/out"])


def test_upper_bound_accepted():
    args = parse_args(["-w", "8192", "-h", "8192", "-i", "/dev/video0", "-o", "/tmp/out"])
    assert (args.width, args.height) == (8192, 8192)


def test_bit_rate_zero():
    with pytest.raises(ArgsError, match="bit rate"):
        parse_args(["-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out", "-b", "0"])


def test_gop_zero():
    with pytest.raises(ArgsError, match="gop"):
        parse_args(["-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out", "-g", "0"])


def test_help_option(capsys):
    args = parse_args(["--help"])
    assert args.help_flag is True
    assert args.version_flag is False
    assert help_text() in capsys.readouterr().out


def test_version_option(capsys):
    args = parse_args(["--version"])
    assert args.version_flag is True
    assert args.help_flag is False
    assert "Version: dev" in capsys.readouterr().out


def test_invalid_option():
    with pytest.raises(ArgsError):
        parse_args(["-x", "-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out"])


def test_short_v_is_not_an_option():
    with pytest.raises(ArgsError):
        parse_args(["-v"])


def test_missing_option_value():
    with pytest.raises(ArgsError):
        parse_args(["-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o"])


def test_extra_arguments():
    args = parse_args(
        ["-w", "1920", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out", "extra1", "extra2"]
    )
    assert args.width == 1920
    assert args.height == 1080


def test_non_numeric_width_reads_as_zero():
    with pytest.raises(ArgsError, match="get 0"):
        parse_args(["-w", "abc", "-h", "1080", "-i", "/dev/video0", "-o", "/tmp/out"])


def test_help_text_lists_every_option():
    text = help_text()
    for flag in ("-w", "-h", "-i", "-o", "-b", "-g"):
        assert flag in text