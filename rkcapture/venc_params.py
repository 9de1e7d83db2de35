"""Tunable encoder channel parameters with the ranges the encoder accepts."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import gcd
from typing import List

from rkcapture.venc_types import (
    FrameLostMode,
    GopMode,
    IntraRefreshMode,
    RcPriority,
    SuperFrameMode,
)

U8_MAX = 0xFF
U16_MAX = 0xFFFF
U32_MAX = 0xFFFFFFFF
S32_MAX = 0x7FFFFFFF
QUANT_TABLE_SIZE = 64
HIERARCHICAL_LAYERS = 4


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


def _check_flag(name: str, value: int) -> None:
    _check_range(name, value, 0, 1)


@dataclass
class GopAttr:
    """Reference structure of the group of pictures."""

    gop_mode: GopMode = GopMode.NORMALP
    vir_idr_len: int = 0
    max_ltr_count: int = 0
    tsvc_preload: int = 0

    def __post_init__(self) -> None:
        self.gop_mode = GopMode(self.gop_mode)
        _check_range("max_ltr_count", self.max_ltr_count, 0, U32_MAX)
        _check_range("tsvc_preload", self.tsvc_preload, 0, U32_MAX)


@dataclass
class ChnBufWrap:
    """Line-wrapped channel buffer allocation; ``buf_line`` is at least 128 when enabled."""

    enable: bool = False
    buf_line: int = 0
    wrap_buffer_size: int = 0

    def __post_init__(self) -> None:
        if self.enable and self.buf_line < 128:
            raise ValueError(f"buf_line must be at least 128, got {self.buf_line}")
        _check_range("buf_line", self.buf_line, 0, U32_MAX)
        _check_range("wrap_buffer_size", self.wrap_buffer_size, 0, U32_MAX)


@dataclass
class ComboAttr:
    """Combined encoding with a source channel."""

    enable: bool = False
    chn_id: int = 0

    def __post_init__(self) -> None:
        if self.enable and self.chn_id < 0:
            raise ValueError(f"chn_id must not be negative, got {self.chn_id}")


@dataclass
class RecvPicParam:
    """Number of pictures to receive; -1 means no limit and 0 is not supported."""

    recv_pic_num: int = -1

    def __post_init__(self) -> None:
        _check_range("recv_pic_num", self.recv_pic_num, -1, S32_MAX)
        if self.recv_pic_num == 0:
            raise ValueError("recv_pic_num of 0 is not supported")


@dataclass
class SliceSplit:
    """Slice splitting by byte count (mode 0) or by macroblock/CTU count (modes 1-3)."""

    split_enable: bool = False
    split_mode: int = 0
    split_size: int = 0

    def __post_init__(self) -> None:
        _check_range("split_mode", self.split_mode, 0, 3)
        _check_range("split_size", self.split_size, 0, U32_MAX)

    @property
    def by_bytes(self) -> bool:
        """True when ``split_size`` counts bytes rather than macroblocks."""
        return self.split_mode == 0


@dataclass
class H264Entropy:
    """Entropy coding: 0 for CAVLC, 1 for CABAC."""

    entropy_enc_mode: int = 1
    cabac_init_idc: int = 0

    def __post_init__(self) -> None:
        _check_flag("entropy_enc_mode", self.entropy_enc_mode)
        _check_range("cabac_init_idc", self.cabac_init_idc, 0, 2)


@dataclass
class H264Dblk:
    """H.264 deblocking filter controls."""

    disable_deblocking_filter_idc: int = 0
    slice_alpha_c0_offset_div2: int = 0
    slice_beta_offset_div2: int = 0

    def __post_init__(self) -> None:
        _check_range("disable_deblocking_filter_idc", self.disable_deblocking_filter_idc, 0, 2)
        _check_range("slice_alpha_c0_offset_div2", self.slice_alpha_c0_offset_div2, -6, 6)
        _check_range("slice_beta_offset_div2", self.slice_beta_offset_div2, -6, 6)


@dataclass
class H264VuiTimeInfo:
    """H.264 VUI timing; the tick values must be positive when timing is present."""

    timing_info_present_flag: int = 0
    fixed_frame_rate_flag: int = 0
    num_units_in_tick: int = 0
    time_scale: int = 0

    def __post_init__(self) -> None:
        _check_flag("timing_info_present_flag", self.timing_info_present_flag)
        _check_flag("fixed_frame_rate_flag", self.fixed_frame_rate_flag)
        low = 1 if self.timing_info_present_flag else 0
        _check_range("num_units_in_tick", self.num_units_in_tick, low, U32_MAX)
        _check_range("time_scale", self.time_scale, low, U32_MAX)


@dataclass
class VuiAspectRatio:
    """VUI sample aspect ratio; width and height must be relatively prime."""

    aspect_ratio_info_present_flag: int = 0
    aspect_ratio_idc: int = 0
    overscan_info_present_flag: int = 0
    overscan_appropriate_flag: int = 0
    sar_width: int = 1
    sar_height: int = 1

    def __post_init__(self) -> None:
        _check_flag("aspect_ratio_info_present_flag", self.aspect_ratio_info_present_flag)
        _check_range("aspect_ratio_idc", self.aspect_ratio_idc, 0, U8_MAX)
        _check_flag("overscan_info_present_flag", self.overscan_info_present_flag)
        _check_flag("overscan_appropriate_flag", self.overscan_appropriate_flag)
        _check_range("sar_width", self.sar_width, 1, U16_MAX)
        _check_range("sar_height", self.sar_height, 1, U16_MAX)
        if gcd(self.sar_width, self.sar_height) != 1:
            raise ValueError(
                f"sar_width and sar_height must be relatively prime, "
                f"got {self.sar_width}:{self.sar_height}"
            )


@dataclass
class VuiVideoSignal:
    """VUI video signal type."""

    video_signal_type_present_flag: int = 0
    video_format: int = 5
    video_full_range_flag: int = 0
    colour_description_present_flag: int = 0
    colour_primaries: int = 2
    transfer_characteristics: int = 2
    matrix_coefficients: int = 2

    def __post_init__(self) -> None:
        _check_flag("video_signal_type_present_flag", self.video_signal_type_present_flag)
        _check_range("video_format", self.video_format, 0, 7)
        _check_flag("video_full_range_flag", self.video_full_range_flag)
        _check_flag("colour_description_present_flag", self.colour_description_present_flag)
        _check_range("colour_primaries", self.colour_primaries, 0, U8_MAX)
        _check_range("transfer_characteristics", self.transfer_characteristics, 0, U8_MAX)
        _check_range("matrix_coefficients", self.matrix_coefficients, 0, U8_MAX)


@dataclass
class H265Dblk:
    """H.265 deblocking filter controls."""

    slice_deblocking_filter_disabled_flag: int = 0
    slice_beta_offset_div2: int = 0
    slice_tc_offset_div2: int = 0

    def __post_init__(self) -> None:
        _check_flag(
            "slice_deblocking_filter_disabled_flag", self.slice_deblocking_filter_disabled_flag
        )
        _check_range("slice_beta_offset_div2", self.slice_beta_offset_div2, -6, 6)
        _check_range("slice_tc_offset_div2", self.slice_tc_offset_div2, -6, 6)


@dataclass
class H265Sao:
    """H.265 sample adaptive offset controls."""

    slice_sao_luma_flag: int = 1
    slice_sao_chroma_flag: int = 1
    slice_sao_bit_ratio: int = 0

    def __post_init__(self) -> None:
        _check_flag("slice_sao_luma_flag", self.slice_sao_luma_flag)
        _check_flag("slice_sao_chroma_flag", self.slice_sao_chroma_flag)
        _check_range("slice_sao_bit_ratio", self.slice_sao_bit_ratio, 0, 7)


@dataclass
class IntraRefresh:
    """Gradual intra refresh by rows or columns."""

    refresh_enable: bool = False
    mode: IntraRefreshMode = IntraRefreshMode.ROW
    refresh_num: int = 0
    req_i_qp: int = 0

    def __post_init__(self) -> None:
        self.mode = IntraRefreshMode(self.mode)
        _check_range("refresh_num", self.refresh_num, 0, U32_MAX)
        _check_range("req_i_qp", self.req_i_qp, 0, 51)


@dataclass
class VencFrameRate:
    """Input and output frame rate of a channel as fractions, each term in [0, 240]."""

    enable: bool = False
    src_frm_rate_num: int = 0
    src_frm_rate_den: int = 0
    dst_frm_rate_num: int = 0
    dst_frm_rate_den: int = 0

    def __post_init__(self) -> None:
        for name in (
            "src_frm_rate_num",
            "src_frm_rate_den",
            "dst_frm_rate_num",
            "dst_frm_rate_den",
        ):
            _check_range(name, getattr(self, name), 0, 240)


@dataclass
class SuperFrameCfg:
    """Handling of frames whose size exceeds the per-type bit thresholds."""

    mode: SuperFrameMode = SuperFrameMode.NONE
    super_i_frm_bits_thr: int = 0
    super_p_frm_bits_thr: int = 0
    super_b_frm_bits_thr: int = 0
    rc_priority: RcPriority = RcPriority.BITRATE_FIRST

    def __post_init__(self) -> None:
        self.mode = SuperFrameMode(self.mode)
        self.rc_priority = RcPriority(self.rc_priority)
        for name in ("super_i_frm_bits_thr", "super_p_frm_bits_thr", "super_b_frm_bits_thr"):
            _check_range(name, getattr(self, name), 0, U32_MAX)


@dataclass
class FrameLost:
    """Frame dropping when the bit rate passes a threshold."""

    frm_lost_open: bool = False
    frm_lost_bps_thr: int = 0
    mode: FrameLostMode = FrameLostMode.NORMAL
    enc_frm_gaps: int = 0

    def __post_init__(self) -> None:
        self.mode = FrameLostMode(self.mode)
        _check_range("frm_lost_bps_thr", self.frm_lost_bps_thr, 0, U32_MAX)
        _check_range("enc_frm_gaps", self.enc_frm_gaps, 0, U32_MAX)


@dataclass
class H264Qbias:
    """H.264 quantisation bias for I and P frames, each in [0, 1023]."""

    enable: bool = False
    qbias_i: int = 0
    qbias_p: int = 0

    def __post_init__(self) -> None:
        _check_range("qbias_i", self.qbias_i, 0, 1023)
        _check_range("qbias_p", self.qbias_p, 0, 1023)


@dataclass
class H265Qbias:
    """H.265 quantisation bias for I and P frames, each in [0, 511]."""

    enable: bool = False
    qbias_i: int = 0
    qbias_p: int = 0

    def __post_init__(self) -> None:
        _check_range("qbias_i", self.qbias_i, 0, 511)
        _check_range("qbias_p", self.qbias_p, 0, 511)


@dataclass
class VencFilter:
    """Filter strength for I and P frames, each in [0, 3]."""

    strength_i: int = 0
    strength_p: int = 0

    def __post_init__(self) -> None:
        _check_range("strength_i", self.strength_i, 0, 3)
        _check_range("strength_p", self.strength_p, 0, 3)


@dataclass
class Lambda:
    """Rate-distortion lambda level, overall and for I frames, each in [0, 8]."""

    value: int = 0
    value_i: int = 0

    def __post_init__(self) -> None:
        _check_range("value", self.value, 0, 8)
        _check_range("value_i", self.value_i, 0, 8)


def _check_skip_weight(name: str, value: int) -> None:
    if value != 0 and not 3 <= value <= 8:
        raise ValueError(f"{name} must be 0 or in [3, 8], got {value}")


@dataclass
class StaticWeight:
    """Skip weighting for static content."""

    frm_num: int = 0
    madp16_th: int = 0
    skip16_weight: int = 0
    skip32_weight: int = 0

    def __post_init__(self) -> None:
        _check_range("frm_num", self.frm_num, 0, 7)
        _check_range("madp16_th", self.madp16_th, 0, 63)
        _check_skip_weight("skip16_weight", self.skip16_weight)
        _check_skip_weight("skip32_weight", self.skip32_weight)


@dataclass
class DebreathEffect:
    """Suppression of the breathing effect between I frames."""

    enable: bool = False
    strength0: int = 0
    strength1: int = 0

    def __post_init__(self) -> None:
        _check_range("strength0", self.strength0, 0, 35)
        _check_range("strength1", self.strength1, 0, 35)


@dataclass
class HierarchicalQp:
    """Per-layer QP deltas and frame counts for hierarchical coding."""

    enable: bool = False
    qp_delta: List[int] = field(default_factory=lambda: [0] * HIERARCHICAL_LAYERS)
    frame_num: List[int] = field(default_factory=lambda: [0] * HIERARCHICAL_LAYERS)

    def __post_init__(self) -> None:
        self.qp_delta = list(self.qp_delta)
        self.frame_num = list(self.frame_num)
        for name, values, low, high in (
            ("qp_delta", self.qp_delta, -10, 10),
            ("frame_num", self.frame_num, 0, 5),
        ):
            if len(values) != HIERARCHICAL_LAYERS:
                raise ValueError(
                    f"{name} needs {HIERARCHICAL_LAYERS} entries, got {len(values)}"
                )
            for layer, value in enumerate(values):
                _check_range(f"{name}[{layer}]", value, low, high)


def _flat_table() -> bytes:
    return bytes([1] * QUANT_TABLE_SIZE)


@dataclass
class JpegParam:
    """JPEG quality factor and quantisation tables for Y, Cb and Cr."""

    qfactor: int
    y_qt: bytes = field(default_factory=_flat_table)
    cb_qt: bytes = field(default_factory=_flat_table)
    cr_qt: bytes = field(default_factory=_flat_table)
    mcu_per_ecs: int = 0

    def __post_init__(self) -> None:
        _check_range("qfactor", self.qfactor, 1, 99)
        for name in ("y_qt", "cb_qt", "cr_qt"):
            table = bytes(getattr(self, name))
            if len(table) != QUANT_TABLE_SIZE:
                raise ValueError(f"{name} needs {QUANT_TABLE_SIZE} entries, got {len(table)}")
            if 0 in table:
                raise ValueError(f"{name} entries must be in [1, 255]")
            setattr(self, name, table)
        _check_range("mcu_per_ecs", self.mcu_per_ecs, 0, U32_MAX)


@dataclass
class RefParam:
    """Base and enhance layer periods for frame-skipping reference."""

    base: int = 0
    enhance: int = 0
    enable_pred: bool = False

    def __post_init__(self) -> None:
        _check_range("base", self.base, 0, U32_MAX)
        _check_range("enhance", self.enhance, 0, 255)


@dataclass
class RoiBgFrameRate:
    """Frame rate of the non-ROI background; -1 means unrestricted and 0 is not allowed."""

    src_frm_rate: int = -1
    dst_frm_rate: int = -1

    def __post_init__(self) -> None:
        _check_range("src_frm_rate", self.src_frm_rate, -1, S32_MAX)
        _check_range("dst_frm_rate", self.dst_frm_rate, -1, S32_MAX)
        if self.src_frm_rate == 0:
            raise ValueError("src_frm_rate can not be 0")
        if self.src_frm_rate > 0 and self.dst_frm_rate > self.src_frm_rate:
            raise ValueError(
                f"dst_frm_rate {self.dst_frm_rate} exceeds src_frm_rate {self.src_frm_rate}"
            )