"""Intelligent video analysis: detection modes and motion-detection tuning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag

MAX_AREA_NUM = 16
MAX_AREA_POINT_NUM = 6

S32_MIN = -(1 << 31)
S32_MAX = (1 << 31) - 1


class IvsMode(IntFlag):
    """Which detectors run: motion detection, occlusion detection, or both."""

    MD = 1 << 0
    OD = 1 << 1
    MD_OD = MD | OD


def _check(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


@dataclass
class MdAttr:
    """Motion-detection thresholds and dust filtering."""

    thresh_sad: int = 0
    thresh_move: int = 0
    switch_sad: int = 0
    flycatkin_flt: bool = False
    thres_dust_move: int = 0
    thres_dust_blk: int = 0
    thres_dust_chng: int = 0

    def __post_init__(self) -> None:
        _check("thresh_sad", self.thresh_sad, 0, 4095)
        _check("thresh_move", self.thresh_move, 0, 4)
        _check("switch_sad", self.switch_sad, 0, 3)
        for name in ("thres_dust_move", "thres_dust_blk", "thres_dust_chng"):
            _check(name, getattr(self, name), S32_MIN, S32_MAX)