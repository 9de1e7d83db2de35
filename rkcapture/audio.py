"""Audio decoder modes, status and error codes, and audio filter types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rkcapture.errcodes import ErrCode

U32_MAX = 0xFFFFFFFF


class AdecMode(IntEnum):
    """Decoder input mode: whole encoded packets, or a raw stream."""

    PACK = 0
    STREAM = 1


class AdecErrCode(IntEnum):
    """Error identifiers private to the audio decoder."""

    DECODER_ERR = 64
    BUF_LACK = 65
    REGISTER_ERR = 66


class DecoderResult(IntEnum):
    """Result reported by a registered decoder."""

    OK = 0
    TRY_AGAIN = 1
    ERROR = 2
    EOS = 3


class AudioFilterType(IntEnum):
    """Kind of audio filter."""

    RESAMPLE = 0
    THREE_A = 1


assert min(AdecErrCode) > ErrCode.BUTT


@dataclass
class AdecChnState:
    """End-of-stream flag and buffer counts of a decoder channel."""

    end_of_stream: bool = False
    buffer_frm_num: int = 0
    buffer_free_num: int = 0
    buffer_busy_num: int = 0

    def __post_init__(self) -> None:
        for name in ("buffer_frm_num", "buffer_free_num", "buffer_busy_num"):
            value = getattr(self, name)
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"{name} must be in [0, {U32_MAX}], got {value}")