"""Command-line parsing for the capture program."""

from __future__ import annotations

import getopt
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from rkcapture.version import version_text

DEFAULT_BIT_RATE = 10 * 1024
DEFAULT_GOP = 60
MAX_DIMENSION = 8192

_SHORT_OPTS = "w:h:i:o:b:g:"
_LONG_OPTS = ["width=", "height=", "input=", "output=", "bit-rate=", "gop=", "help", "version"]

_UINT32_MASK = 0xFFFFFFFF
_ULONG_MAX = (1 << 64) - 1
_NUMBER = re.compile(r"[+-]?\d+")


class ArgsError(ValueError):
    """Raised when the command line is malformed or fails validation."""


@dataclass
class Args:
    """Parsed command-line settings."""

    width: int = 0
    height: int = 0
    input_path: Optional[str] = None
    output_path: Optional[str] = None
    bit_rate: int = DEFAULT_BIT_RATE
    gop: int = DEFAULT_GOP
    help_flag: bool = False
    version_flag: bool = False


def help_text() -> str:
    """Return the usage text shown by ``--help``."""
    return "\n".join(
        (
            "Usage: -w <width> -h <height> -i <input path> -o <output path> -b <bit_rate> -g <gop>",
            "Required args:",
            "-w <pixel>   Must be greater than 0",
            "-h <pixel>   Must be greater than 0",
            "-i <path>    Input device path, eg. `/dev/video0`",
            "-o <path>    Output socket path, eg. `/var/run/capture.sock`",
            "-b <number>  Encoder bit rate, default is `10240`",
            "-g <number>  Encode group of pictures, default is `60`",
        )
    )


def _to_uint32(text: str) -> int:
    """Read an unsigned decimal the way strtoul does, truncated to 32 bits."""
    match = _NUMBER.match(text.lstrip())
    if match is None:
        return 0
    token = match.group()
    negative = token.startswith("-")
    magnitude = min(int(token.lstrip("+-")), _ULONG_MAX)
    if negative:
        magnitude = (-magnitude) & _ULONG_MAX
    return magnitude & _UINT32_MASK


def _validate(args: Args) -> None:
    if not 0 < args.width <= MAX_DIMENSION:
        raise ArgsError(f"width must be in (0,{MAX_DIMENSION}], get {args.width}")
    if not 0 < args.height <= MAX_DIMENSION:
        raise ArgsError(f"height must be in (0,{MAX_DIMENSION}], get {args.height}")
    if args.input_path is None:
        raise ArgsError("input path is required")
    if args.output_path is None:
        raise ArgsError("output path is required")
    if args.bit_rate == 0:
        raise ArgsError("bit rate must be greater than 0")
    if args.gop == 0:
        raise ArgsError("gop must be greater than 0")


def parse_args(argv: Sequence[str]) -> Args:
    """Parse options (without the program name) and validate them.

    ``--help`` and ``--version`` print their text and skip validation.
    """
    try:
        options, _ = getopt.gnu_getopt(list(argv), _SHORT_OPTS, _LONG_OPTS)
    except getopt.GetoptError as exc:
        raise ArgsError(f"unknown option {exc.opt}: {exc.msg}") from exc

    args = Args()
    for option, value in options:
        if option in ("-w", "--width"):
            args.width = _to_uint32(value)
        elif option in ("-h", "--height"):
            args.height = _to_uint32(value)
        elif option in ("-i", "--input"):
            args.input_path = value
        elif option in ("-o", "--output"):
            args.output_path = value
        elif option in ("-b", "--bit-rate"):
            args.bit_rate = _to_uint32(value)
        elif option in ("-g", "--gop"):
            args.gop = _to_uint32(value)
        elif option == "--help":
            print(help_text())
            args.help_flag = True
        elif option == "--version":
            print(version_text())
            args.version_flag = True

    if not (args.help_flag or args.version_flag):
        _validate(args)
    return args