import pytest

from rkcapture.avs import (
    AvsFov,
    AvsMode,
    AvsRotation,
    FuseWidth,
    GainMode,
    LutAccuracy,
    LutStep,
    LutStepAttr,
    OverlayAttr,
    ParamSource,
    ProjectionMode,
)


def test_lut_step_pixels():
    assert [LutStep(value).pixels for value in range(3)] == [16, 32, 64]


def test_fuse_width_pixels():
    assert [FuseWidth(value).pixels for value in range(3)] == [128, 256, 512]


def test_blend_modes():
    assert AvsMode(0).blends
    assert AvsMode(5).blends
    assert not AvsMode(3).blends


def test_enum_round_trips():
    assert ProjectionMode(3) is ProjectionMode.CUBE_MAP
    assert GainMode(1) is GainMode.AUTO
    assert ParamSource(1) is ParamSource.CALIB
    assert LutAccuracy(0) is LutAccuracy.HIGH


def test_step_attr_converts_ints():
    attr = LutStepAttr(step_x=2, step_y=1)
    assert attr.step_x is LutStep.LOW
    assert attr.step_y is LutStep.MEDIUM


def test_step_attr_rejects_unknown_step():
    with pytest.raises(ValueError):
        LutStepAttr(step_x=7)


def test_rotation_allows_negative_angles():
    rotation = AvsRotation(yaw=-90, pitch=10, roll=0)
    assert rotation.yaw == -90


def test_rotation_rejects_overflow():
    with pytest.raises(ValueError):
        AvsRotation(roll=1 << 31)


def test_fov_rejects_negative():
    with pytest.raises(ValueError):
        AvsFov(fov_x=-1)


def test_overlay_keeps_colour():
    overlay = OverlayAttr(bg_color_enable=True, bg_color=0xFF00FF)
    assert overlay.bg_color == 0xFF00FF
    assert overlay.bg_color_enable is True


def test_overlay_rejects_wide_colour():
    with pytest.raises(ValueError):
        OverlayAttr(bg_color=1 << 32)