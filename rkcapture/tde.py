"""Two-dimensional engine: error codes, blit commands and rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from rkcapture.errcodes import ErrCode

S32_MIN = -(1 << 31)
S32_MAX = (1 << 31) - 1
U32_MAX = 0xFFFFFFFF


class TdeErrCode(IntEnum):
    """Error identifiers private to the two-dimensional engine."""

    NOT_ALIGNED = ErrCode.BUTT - 1
    MINIFICATION = ErrCode.BUTT
    CLIP_AREA = ErrCode.BUTT + 1
    JOB_TIMEOUT = ErrCode.BUTT + 2
    UNSUPPORTED_OPERATION = ErrCode.BUTT + 3
    QUERY_TIMEOUT = ErrCode.BUTT + 4
    INTERRUPT = ErrCode.BUTT + 5


class AluCmd(IntEnum):
    """On-screen display blending command."""

    OSD_COVER = 0x100
    OSD_DST_ALPHA = 0x105
    OSD_ALL_ALPHA = 0x405


class ColorKeyMode(IntEnum):
    """Which bitmap the colour key applies to."""

    NONE = 0
    FOREGROUND = 1
    BACKGROUND = 2


class BlendCmd(IntEnum):
    """Porter-Duff style blend rule between source and destination."""

    NONE = 0
    CLEAR = 1
    SRC = 2
    SRCOVER = 3
    DSTOVER = 4
    SRCIN = 5
    DSTIN = 6
    SRCOUT = 7
    DSTOUT = 8
    SRCATOP = 9
    DSTATOP = 10
    ADD = 11
    XOR = 12
    DST = 13
    CONFIG = 14


@dataclass(frozen=True)
class TdeRect:
    """Rectangle with a signed origin and an unsigned size."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self) -> None:
        for name in ("x", "y"):
            value = getattr(self, name)
            if not S32_MIN <= value <= S32_MAX:
                raise ValueError(f"{name} must fit in a signed 32-bit value, got {value}")
        for name in ("width", "height"):
            value = getattr(self, name)
            if not 0 <= value <= U32_MAX:
                raise ValueError(f"{name} must fit in an unsigned 32-bit value, got {value}")

    @property
    def right(self) -> int:
        """Horizontal coordinate just past the rectangle."""
        return self.x + self.width

    @property
    def bottom(self) -> int:
        """Vertical coordinate just past the rectangle."""
        return self.y + self.height