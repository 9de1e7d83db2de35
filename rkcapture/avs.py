"""Panoramic stitching: lookup-table, projection and output settings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SPLIT_NUM = 2
SPLIT_PIPE_NUM = 6
CUBE_MAP_SURFACE_NUM = 6

S32_MIN = -(1 << 31)
S32_MAX = (1 << 31) - 1
U32_MAX = 0xFFFFFFFF


class LutAccuracy(IntEnum):
    """Precision of the stitching lookup table."""

    HIGH = 0
    LOW = 1


class LutStep(IntEnum):
    """Lookup-table sampling step."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2

    @property
    def pixels(self) -> int:
        """Step size in pixels."""
        return 16 << self.value


class FuseWidth(IntEnum):
    """Width of the blending zone between neighbouring images."""

    HIGH = 0
    MEDIUM = 1
    LOW = 2

    @property
    def pixels(self) -> int:
        """Fusion zone size in pixels."""
        return 128 << self.value


class ProjectionMode(IntEnum):
    """Projection of the stitched output."""

    EQUIRECTANGULAR = 0
    RECTILINEAR = 1
    CYLINDRICAL = 2
    CUBE_MAP = 3
    EQUIRECTANGULAR_TRANS = 4


class GainMode(IntEnum):
    """How per-pipe gain is set."""

    MANUAL = 0
    AUTO = 1


class AvsMode(IntEnum):
    """Stitching group work mode."""

    BLEND = 0
    NOBLEND_VER = 1
    NOBLEND_HOR = 2
    NOBLEND_QR = 3
    NOBLEND_OVL = 4
    BLEND_DYN = 5

    @property
    def blends(self) -> bool:
        """True when images are blended at the stitching seam."""
        return self in (AvsMode.BLEND, AvsMode.BLEND_DYN)


class ParamSource(IntEnum):
    """Where stitching parameters come from."""

    LUT = 0
    CALIB = 1


def _check(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass(frozen=True)
class AvsRotation:
    """Yaw, pitch and roll of the output view."""

    yaw: int = 0
    pitch: int = 0
    roll: int = 0

    def __post_init__(self) -> None:
        for name in ("yaw", "pitch", "roll"):
            _check(name, getattr(self, name), S32_MIN, S32_MAX)


@dataclass(frozen=True)
class AvsFov:
    """Horizontal and vertical field of view of the output."""

    fov_x: int = 0
    fov_y: int = 0

    def __post_init__(self) -> None:
        _check("fov_x", self.fov_x, 0, U32_MAX)
        _check("fov_y", self.fov_y, 0, U32_MAX)


@dataclass(frozen=True)
class LutStepAttr:
    """Horizontal and vertical lookup-table steps."""

    step_x: LutStep = LutStep.HIGH
    step_y: LutStep = LutStep.HIGH

    def __post_init__(self) -> None:
        object.__setattr__(self, "step_x", LutStep(self.step_x))
        object.__setattr__(self, "step_y", LutStep(self.step_y))


@dataclass(frozen=True)
class OverlayAttr:
    """Background fill used by the overlay mode."""

    bg_color_enable: bool = False
    bg_color: int = 0

    def __post_init__(self) -> None:
        _check("bg_color", self.bg_color, 0, U32_MAX)