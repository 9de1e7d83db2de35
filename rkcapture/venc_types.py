"""Enumerations used by the video encoder: NAL and pack types, profiles and modes."""

from __future__ import annotations

from enum import IntEnum

QP_HISTOGRAM_SIZE = 52
MAX_TILE_NUM = 1
RC_TEXTURE_THR_SIZE = 16


class H264NaluType(IntEnum):
    """NAL unit types produced by the H.264 encoder."""

    BSLICE = 0
    PSLICE = 1
    ISLICE = 2
    IDRSLICE = 5
    SEI = 6
    SPS = 7
    PPS = 8


class H265NaluType(IntEnum):
    """NAL unit types produced by the H.265 encoder."""

    BSLICE = 0
    PSLICE = 1
    ISLICE = 2
    IDRSLICE = 19
    VPS = 32
    SPS = 33
    PPS = 34
    SEI = 39


class H264RefSliceType(IntEnum):
    """Reference slice kind for each H.264 reference mode."""

    FOR_1X = 1
    FOR_2X = 2
    FOR_4X = 5
    NOT_FOR_REF = 6


class JpegPackType(IntEnum):
    """Pack types produced by the JPEG encoder."""

    ECS = 5
    APP = 6
    VDO = 7
    PIC = 8
    DCF = 9
    DCF_PIC = 10


class H264Profile(IntEnum):
    """H.264 profile indicator."""

    BASELINE = 66
    MAIN = 77
    HIGH = 100


class H265Profile(IntEnum):
    """H.265 profile."""

    MAIN = 0
    MAIN10 = 1


class ProresPackType(IntEnum):
    """Pack types produced by the ProRes encoder."""

    PIC = 1


class H264RefType(IntEnum):
    """Frame kind and reference relation in frame-skipping reference streams."""

    BASE_IDRSLICE = 0
    BASE_PSLICE_REFTOIDR = 1
    BASE_PSLICE_REFBYBASE = 2
    BASE_PSLICE_REFBYENHANCE = 3
    ENHANCE_PSLICE_REFBYENHANCE = 4
    ENHANCE_PSLICE_NOTFORREF = 5


H265RefType = H264RefType


class GopMode(IntEnum):
    """Reference structure of a group of pictures."""

    INIT = 0
    NORMALP = 1
    TSVC2 = 2
    TSVC3 = 3
    TSVC4 = 4
    SMARTP = 5


class VencRotation(IntEnum):
    """Encoder input rotation, in degrees."""

    ROTATION_0 = 0
    ROTATION_90 = 90
    ROTATION_180 = 180
    ROTATION_270 = 270


class PicReceiveMode(IntEnum):
    """Whether a JPEG channel receives one picture or several."""

    SINGLE = 0
    MULTI = 1


class JpegEncodeMode(IntEnum):
    """JPEG snap mode: encode every picture, or only flashed ones."""

    ALL = 0
    SNAP = 1


class IntraRefreshMode(IntEnum):
    """Direction of intra refresh."""

    ROW = 0
    COLUMN = 1


class ModType(IntEnum):
    """Encoder sub-module that a module parameter applies to."""

    VENC = 1
    H264E = 2
    H265E = 3
    JPEGE = 4
    RC = 5


class FrameType(IntEnum):
    """Forced encoding type of a user-supplied frame."""

    NONE = 1
    IDR = 2


class CropType(IntEnum):
    """Encoder input crop behaviour."""

    NONE = 0
    ONLY = 1
    SCALE = 2


class SceneMode(IntEnum):
    """Scene hint for the encoder."""

    SCENE_0 = 0
    SCENE_1 = 1
    SCENE_2 = 2
    SCENE_3 = 3


class SuperFrameMode(IntEnum):
    """What to do with an oversized frame."""

    NONE = 0
    DISCARD = 1
    REENCODE = 2


class RcPriority(IntEnum):
    """Whether rate control favours the bit rate or the per-frame bit budget."""

    BITRATE_FIRST = 1
    FRAMEBITS_FIRST = 2


class FrameLostMode(IntEnum):
    """How frames are dropped when the bit rate exceeds its threshold."""

    NORMAL = 0
    PSKIP = 1