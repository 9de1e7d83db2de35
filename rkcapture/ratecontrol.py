"""Rate-control modes, settings and tuning parameters for the video encoder."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Union

DEFAULT_STAT_TIME = 3


class RcQuality(IntEnum):
    """Rate-control quality preset."""

    HIGHEST = 0
    HIGHER = 1
    HIGH = 2
    MEDIUM = 3
    LOW = 4
    LOWER = 5
    LOWEST = 6


class RcMode(IntEnum):
    """Rate-control mode for each codec."""

    H264CBR = 1
    H264VBR = 2
    H264AVBR = 3
    H264FIXQP = 4
    MJPEGCBR = 5
    MJPEGVBR = 6
    MJPEGFIXQP = 7
    H265CBR = 8
    H265VBR = 9
    H265AVBR = 10
    H265FIXQP = 11


class NaluType(IntEnum):
    """Generic NAL unit type reported by the encoder."""

    BSLICE = 1
    PSLICE = 2
    ISLICE = 3
    IDRSLICE = 4
    SEI = 5
    VPS = 6
    SPS = 7
    PPS = 8


@dataclass
class H264Cbr:
    """Constant bit rate settings; bit rate in kbps, statistics time in seconds."""

    gop: int
    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    bit_rate: int
    stat_time: int = DEFAULT_STAT_TIME


@dataclass
class _VariableBitRate:
    gop: int
    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    bit_rate: int
    max_bit_rate: Optional[int] = None
    min_bit_rate: Optional[int] = None
    stat_time: int = DEFAULT_STAT_TIME

    def __post_init__(self) -> None:
        if self.max_bit_rate is None:
            self.max_bit_rate = self.bit_rate * 3 // 2
        if self.min_bit_rate is None:
            self.min_bit_rate = self.bit_rate // 2
        if not self.min_bit_rate <= self.bit_rate <= self.max_bit_rate:
            raise ValueError(
                f"bit rates must satisfy min <= average <= max, got "
                f"{self.min_bit_rate} <= {self.bit_rate} <= {self.max_bit_rate}"
            )


@dataclass
class H264Vbr(_VariableBitRate):
    """Variable bit rate settings; max and min default to 3/2 and 1/2 of the average."""


@dataclass
class H264Avbr(_VariableBitRate):
    """Adaptive variable bit rate settings; same bounds as VBR."""


@dataclass
class H264FixQp:
    """Fixed quantiser settings."""

    gop: int
    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    i_qp: int
    p_qp: int
    b_qp: int = 0


@dataclass
class MjpegCbr:
    """MJPEG constant bit rate settings."""

    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    bit_rate: int
    stat_time: int = DEFAULT_STAT_TIME


@dataclass
class MjpegVbr:
    """MJPEG variable bit rate settings."""

    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    bit_rate: int
    max_bit_rate: Optional[int] = None
    min_bit_rate: Optional[int] = None
    stat_time: int = DEFAULT_STAT_TIME

    def __post_init__(self) -> None:
        if self.max_bit_rate is None:
            self.max_bit_rate = self.bit_rate * 3 // 2
        if self.min_bit_rate is None:
            self.min_bit_rate = self.bit_rate // 2
        if not self.min_bit_rate <= self.bit_rate <= self.max_bit_rate:
            raise ValueError("bit rates must satisfy min <= average <= max")


@dataclass
class MjpegFixQp:
    """MJPEG fixed quality settings."""

    src_frame_rate_num: int
    src_frame_rate_den: int
    dst_frame_rate_num: int
    dst_frame_rate_den: int
    qfactor: int


H265Cbr = H264Cbr
H265Vbr = H264Vbr
H265Avbr = H264Avbr
H265FixQp = H264FixQp

RcSettings = Union[H264Cbr, H264Vbr, H264Avbr, H264FixQp, MjpegCbr, MjpegVbr, MjpegFixQp]

_SETTINGS_FOR_MODE = {
    RcMode.H264CBR: H264Cbr,
    RcMode.H264VBR: H264Vbr,
    RcMode.H264AVBR: H264Avbr,
    RcMode.H264FIXQP: H264FixQp,
    RcMode.MJPEGCBR: MjpegCbr,
    RcMode.MJPEGVBR: MjpegVbr,
    RcMode.MJPEGFIXQP: MjpegFixQp,
    RcMode.H265CBR: H265Cbr,
    RcMode.H265VBR: H265Vbr,
    RcMode.H265AVBR: H265Avbr,
    RcMode.H265FIXQP: H265FixQp,
}


@dataclass
class RcAttr:
    """A rate-control mode together with the settings that belong to it."""

    mode: RcMode
    settings: RcSettings

    def __post_init__(self) -> None:
        self.mode = RcMode(self.mode)
        expected = _SETTINGS_FOR_MODE[self.mode]
        if type(self.settings) is not expected:
            raise ValueError(
                f"{self.mode.name} needs {expected.__name__} settings, "
                f"got {type(self.settings).__name__}"
            )


@dataclass
class H264Param:
    """Quantiser limits for H.264 and H.265 rate control."""

    step_qp: int = 0
    max_qp: int = 51
    min_qp: int = 0
    max_i_qp: int = 51
    min_i_qp: int = 0
    delt_ip_qp: int = 0
    max_re_encode_times: int = 0
    frm_max_qp: int = 51
    frm_min_qp: int = 0
    frm_max_i_qp: int = 51
    frm_min_i_qp: int = 0
    motion_static_switch_frm_qp: int = 0


H265Param = H264Param


@dataclass
class MjpegParam:
    """MJPEG quality factor and its bounds, all within [1, 99]."""

    qfactor: int = 70
    max_qfactor: int = 99
    min_qfactor: int = 30

    def __post_init__(self) -> None:
        if not 1 <= self.min_qfactor <= self.qfactor <= self.max_qfactor <= 99:
            raise ValueError(
                "quality factors must satisfy 1 <= min <= qfactor <= max <= 99, got "
                f"{self.min_qfactor}, {self.qfactor}, {self.max_qfactor}"
            )


@dataclass
class RcParam:
    """Start quantiser of the first frame and the codec's rate-control limits."""

    first_frame_start_qp: int
    codec: Union[H264Param, MjpegParam]


def _check_length(name: str, values: List[int], length: int) -> None:
    if len(values) != length:
        raise ValueError(f"{name} needs {length} entries, got {len(values)}")


@dataclass
class RcParam2:
    """Adaptive-quantisation thresholds and steps."""

    thrd_i: List[int] = field(default_factory=lambda: [0] * 16)
    thrd_p: List[int] = field(default_factory=lambda: [0] * 16)
    aq_step_i: List[int] = field(default_factory=lambda: [0] * 17)
    aq_step_p: List[int] = field(default_factory=lambda: [0] * 17)
    row_qp_delta: int = 0
    row_i_qp_delta: int = 0

    def __post_init__(self) -> None:
        _check_length("thrd_i", self.thrd_i, 16)
        _check_length("thrd_p", self.thrd_p, 16)
        _check_length("aq_step_i", self.aq_step_i, 17)
        _check_length("aq_step_p", self.aq_step_p, 17)
        for name in ("row_qp_delta", "row_i_qp_delta"):
            value = getattr(self, name)
            if not 0 <= value <= 10:
                raise ValueError(f"{name} must be in [0, 10], got {value}")


@dataclass
class RcParam3:
    """Adaptive-quantisation ranges."""

    aq_range: List[int] = field(default_factory=lambda: [0] * 10)

    def __post_init__(self) -> None:
        _check_length("aq_range", self.aq_range, 10)