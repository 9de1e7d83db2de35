import pytest

from rkcapture.ratecontrol import (
    H264Avbr,
    H264Cbr,
    H264FixQp,
    H264Param,
    H264Vbr,
    MjpegCbr,
    MjpegFixQp,
    MjpegParam,
    MjpegVbr,
    RcAttr,
    RcMode,
    RcParam,
    RcParam2,
    RcParam3,
)


def _cbr():
    return H264Cbr(gop=60, src_frame_rate_num=30, src_frame_rate_den=1,
                   dst_frame_rate_num=30, dst_frame_rate_den=1, bit_rate=10240)


def test_cbr_default_stat_time():
    assert _cbr().stat_time == 3


def test_vbr_default_bounds():
    vbr = H264Vbr(60, 30, 1, 30, 1, bit_rate=1000)
    assert vbr.max_bit_rate == 1500
    assert vbr.min_bit_rate == 500


def test_vbr_explicit_bounds_kept():
    vbr = H264Vbr(60, 30, 1, 30, 1, bit_rate=1000, max_bit_rate=1200, min_bit_rate=900)
    assert (vbr.min_bit_rate, vbr.bit_rate, vbr.max_bit_rate) == (900, 1000, 1200)


@pytest.mark.parametrize("bit_rate", [2, 10, 4097, 200000])
def test_vbr_bounds_bracket_average(bit_rate):
    for cls in (H264Vbr, H264Avbr):
        vbr = cls(60, 30, 1, 30, 1, bit_rate=bit_rate)
        assert vbr.min_bit_rate <= vbr.bit_rate <= vbr.max_bit_rate


def test_vbr_inconsistent_bounds_rejected():
    with pytest.raises(ValueError):
        H264Vbr(60, 30, 1, 30, 1, bit_rate=1000, max_bit_rate=800)
    with pytest.raises(ValueError):
        MjpegVbr(30, 1, 30, 1, bit_rate=1000, min_bit_rate=2000)


def test_rc_attr_accepts_matching_settings():
    attr = RcAttr(RcMode.H264CBR, _cbr())
    assert attr.mode is RcMode.H264CBR
    assert attr.settings.bit_rate == 10240


def test_h265_modes_share_h264_settings():
    attr = RcAttr(RcMode.H265CBR, _cbr())
    assert attr.settings.gop == 60
    fixqp = RcAttr(RcMode.H265FIXQP, H264FixQp(60, 30, 1, 30, 1, i_qp=26, p_qp=28))
    assert fixqp.settings.p_qp == 28


def test_rc_attr_coerces_integer_mode():
    attr = RcAttr(5, MjpegCbr(30, 1, 30, 1, bit_rate=5000))
    assert attr.mode is RcMode.MJPEGCBR


@pytest.mark.parametrize(
    "mode, settings",
    [
        (RcMode.H264VBR, H264Avbr(60, 30, 1, 30, 1, bit_rate=1000)),
        (RcMode.H264AVBR, H264Vbr(60, 30, 1, 30, 1, bit_rate=1000)),
        (RcMode.MJPEGFIXQP, H264FixQp(60, 30, 1, 30, 1, i_qp=26, p_qp=28)),
        (RcMode.H264FIXQP, MjpegFixQp(30, 1, 30, 1, qfactor=70)),
    ],
)
def test_rc_attr_rejects_mismatched_settings(mode, settings):
    with pytest.raises(ValueError):
        RcAttr(mode, settings)


def test_rc_attr_rejects_unknown_mode():
    with pytest.raises(ValueError):
        RcAttr(99, _cbr())


def test_mjpeg_param_defaults():
    param = MjpegParam()
    assert (param.qfactor, param.max_qfactor, param.min_qfactor) == (70, 99, 30)


@pytest.mark.parametrize(
    "qfactor, max_qfactor, min_qfactor",
    [(70, 60, 30), (70, 99, 80), (70, 100, 30), (70, 99, 0)],
)
def test_mjpeg_param_bounds_rejected(qfactor, max_qfactor, min_qfactor):
    with pytest.raises(ValueError):
        MjpegParam(qfactor, max_qfactor, min_qfactor)


def test_rc_param_holds_codec_limits():
    param = RcParam(first_frame_start_qp=26, codec=H264Param(max_qp=48, min_qp=10))
    assert param.codec.max_qp == 48
    assert param.codec.min_qp == 10


def test_rc_param2_default_lengths():
    param = RcParam2()
    assert len(param.thrd_i) == len(param.thrd_p) == 16
    assert len(param.aq_step_i) == len(param.aq_step_p) == 17


def test_rc_param2_wrong_lengths_rejected():
    with pytest.raises(ValueError):
        RcParam2(thrd_i=[0] * 15)
    with pytest.raises(ValueError):
        RcParam2(aq_step_p=[0] * 16)


def test_rc_param2_row_delta_range():
    with pytest.raises(ValueError):
        RcParam2(row_qp_delta=11)
    assert RcParam2(row_i_qp_delta=10).row_i_qp_delta == 10


def test_rc_param3_length():
    assert len(RcParam3().aq_range) == 10
    with pytest.raises(ValueError):
        RcParam3(aq_range=[1, 2, 3])


def test_rc_param2_defaults_are_independent():
    first, second = RcParam2(), RcParam2()
    first.thrd_i[0] = 7
    assert second.thrd_i[0] == 0