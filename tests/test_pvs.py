import pytest

from rkcapture.pvs import (
    PvsChnAttr,
    PvsChnParam,
    PvsPoint,
    PvsRect,
    PvsSize,
    StitchMode,
)


def test_stitch_modes_round_trip():
    assert StitchMode(0) is StitchMode.PREVIEW
    assert StitchMode(1) is StitchMode.PLAYBACK


def test_point_allows_negative():
    point = PvsPoint(-5, 7)
    assert (point.x, point.y) == (-5, 7)


def test_size_rejects_negative():
    with pytest.raises(ValueError):
        PvsSize(-1, 10)


def test_rect_rejects_overflow():
    with pytest.raises(ValueError):
        PvsRect(0, 0, 1 << 32, 10)
    with pytest.raises(ValueError):
        PvsRect(1 << 31, 0, 1, 1)


def test_chn_attr_holds_rect():
    rect = PvsRect(10, 20, 640, 360)
    attr = PvsChnAttr(rect)
    assert attr.rect == rect
    assert PvsChnAttr().rect == PvsRect()


def test_chn_param_converts_mode():
    param = PvsChnParam(chn_frm_rate=25, recv_threshold=2, stitch_mode=1)
    assert param.stitch_mode is StitchMode.PLAYBACK


def test_chn_param_rejects_unknown_mode():
    with pytest.raises(ValueError):
        PvsChnParam(stitch_mode=2)