"""Picture stitching: device limits, geometry and channel settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_DEV_NUM = 16
MAX_CHN_NUM = 128

S32_MIN = -(1 << 31)
S32_MAX = (1 << 31) - 1
U32_MAX = 0xFFFFFFFF


class StitchMode(IntEnum):
    """Whether stitching serves live preview or playback."""

    PREVIEW = 0
    PLAYBACK = 1


def _check_signed(name: str, value: int) -> None:
    if not S32_MIN <= value <= S32_MAX:
        raise ValueError(f"{name} must fit in a signed 32-bit value, got {value}")


def _check_unsigned(name: str, value: int) -> None:
    if not 0 <= value <= U32_MAX:
        raise ValueError(f"{name} must fit in an unsigned 32-bit value, got {value}")


@dataclass(frozen=True)
class PvsPoint:
    """A point on the stitched canvas."""

    x: int = 0
    y: int = 0

    def __post_init__(self) -> None:
        _check_signed("x", self.x)
        _check_signed("y", self.y)


@dataclass(frozen=True)
class PvsSize:
    """Width and height of the stitched canvas."""

    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_unsigned("width", self.width)
        _check_unsigned("height", self.height)


@dataclass(frozen=True)
class PvsRect:
    """Rectangle with a signed origin and an unsigned size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        _check_signed("x", self.x)
        _check_signed("y", self.y)
        _check_unsigned("width", self.width)
        _check_unsigned("height", self.height)


@dataclass(frozen=True)
class PvsChnAttr:
    """Where a channel is placed on the canvas."""

    rect: PvsRect = PvsRect()


@dataclass
class PvsChnParam:
    """Channel frame rate, receive threshold and stitching mode."""

    chn_frm_rate: int = 0
    recv_threshold: int = 0
    stitch_mode: StitchMode = StitchMode.PREVIEW

    def __post_init__(self) -> None:
        _check_signed("chn_frm_rate", self.chn_frm_rate)
        _check_signed("recv_threshold", self.recv_threshold)
        self.stitch_mode = StitchMode(self.stitch_mode)