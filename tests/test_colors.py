import io

import pytest

from rasterkit.colors import (
    CMY,
    CMYK,
    HLS,
    HSV,
    RGB,
    XYZ,
    cmy_to_rgb,
    cmyk_to_rgb,
    hls_to_rgb,
    hsv_to_rgb,
    main,
    rgb_to_cmy,
    rgb_to_cmyk,
    rgb_to_hls,
    rgb_to_hsv,
    rgb_to_xyz,
    xyz_to_rgb,
)


def _rgb(c):
    return (c.r, c.g, c.b)


@pytest.mark.parametrize("rgb", [RGB(0.2, 0.4, 0.6), RGB(1, 0, 0), RGB(0, 0, 0)])
def test_cmy_round_trip(rgb):
    cmy = rgb_to_cmy(rgb)
    back = cmy_to_rgb(cmy)
    assert _rgb(back) == pytest.approx(_rgb(rgb), abs=1e-6)
    sums = (cmy.c + rgb.r, cmy.m + rgb.g, cmy.y + rgb.b)
    assert sums == pytest.approx((1, 1, 1), abs=1e-6)


def test_cmyk_key_is_darkest_complement():
    rgb = RGB(0.25, 0.5, 0.75)
    cmyk = rgb_to_cmyk(rgb)
    assert cmyk.k == pytest.approx(min(1 - rgb.r, 1 - rgb.g, 1 - rgb.b))
    assert min(cmyk.c, cmyk.m, cmyk.y) == pytest.approx(0.0)


def test_cmyk_black_uses_plain_complement():
    cmyk = rgb_to_cmyk(RGB(0, 0, 0))
    assert (cmyk.c, cmyk.m, cmyk.y, cmyk.k) == (1, 1, 1, 1)


def test_cmyk_round_trip_when_magenta_and_yellow_are_zero():
    rgb = RGB(0.3, 1.0, 1.0)
    back = cmyk_to_rgb(rgb_to_cmyk(rgb))
    assert _rgb(back) == pytest.approx((0.3, 1.0, 1.0), abs=1e-6)


def test_hsv_primary_hues():
    assert rgb_to_hsv(RGB(0, 1, 0)).h == 120
    assert rgb_to_hsv(RGB(0, 0, 1)).h == 240
    red = rgb_to_hsv(RGB(1, 0, 0))
    assert (red.h, red.s, red.v) == (0, 1, 1)


def test_hsv_grey_has_no_saturation():
    hsv = rgb_to_hsv(RGB(0.5, 0.5, 0.5))
    assert hsv.h == 0
    assert hsv.s == 0
    assert hsv.v == pytest.approx(127 / 255)


@pytest.mark.parametrize(
    "rgb, expected", [(RGB(0, 1, 0), (0, 1, 0)), (RGB(0, 0, 1), (0, 0, 1))]
)
def test_hsv_round_trip(rgb, expected):
    back = hsv_to_rgb(rgb_to_hsv(rgb))
    assert _rgb(back) == pytest.approx(expected, abs=1e-6)


def test_hsv_undefined_hue_is_black():
    assert _rgb(hsv_to_rgb(HSV(0, 1.0, 1.0))) == (0, 0, 0)


def test_hsv_negative_hue_rejected():
    with pytest.raises(ValueError):
        hsv_to_rgb(HSV(-10, 0.5, 0.5))


def test_hls_green():
    hls = rgb_to_hls(RGB(0, 1, 0))
    assert hls.h == 120
    assert hls.l == pytest.approx(0.5)
    assert hls.s == pytest.approx(1.0)


@pytest.mark.parametrize(
    "rgb, expected",
    [
        (RGB(0, 1, 0), (0, 1, 0)),
        (RGB(0, 0, 1), (0, 0, 1)),
        (RGB(0.2, 0.6, 0.2), (0.2, 0.6, 0.2)),
    ],
)
def test_hls_round_trip(rgb, expected):
    back = hls_to_rgb(rgb_to_hls(rgb))
    assert _rgb(back) == pytest.approx(expected, abs=0.02)


def test_hls_undefined_hue_gives_grey_of_lightness():
    rgb = hls_to_rgb(HLS(0, 0.0, 0.4))
    assert _rgb(rgb) == pytest.approx((0.4, 0.4, 0.4), abs=1e-6)


def test_hls_hue_out_of_range_rejected():
    with pytest.raises(ValueError):
        hls_to_rgb(HLS(360, 0.5, 0.5))


@pytest.mark.parametrize(
    "rgb, expected",
    [
        (RGB(1, 1, 1), (1, 1, 1)),
        (RGB(0.3, 0.5, 0.9), (0.3, 0.5, 0.9)),
        (RGB(0, 0, 0), (0, 0, 0)),
    ],
)
def test_xyz_round_trip(rgb, expected):
    back = xyz_to_rgb(rgb_to_xyz(rgb))
    assert _rgb(back) == pytest.approx(expected, abs=1e-2)


def test_xyz_white_components_are_equal():
    xyz = rgb_to_xyz(RGB(1, 1, 1))
    assert xyz.x == pytest.approx(xyz.y, rel=1e-3)
    assert xyz.z == pytest.approx(xyz.y, rel=1e-3)


def test_string_forms():
    assert str(RGB(1, 0, 0.5)) == "( 1, 0, 0.5)"
    assert str(HSV(0, 1, 1)) == "( NaN, 1, 1)"
    assert str(HLS(120, 1, 0.5)) == "( 120, 1, 0.5)"
    assert str(CMYK(0, 1, 1, 0)) == "( 0, 1, 1, 0)"
    assert str(XYZ(0.5, 0, 0)) == "( 0.5, 0, 0)"
    assert str(CMY(0, 0.25, 1)) == "( 0, 0.25, 1)"


def test_main_converts_rgb(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1 0 0\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "RGB  : ( 1, 0, 0)" in out
    assert "CMY  : ( 0, 1, 1)" in out
    assert "HSV  : ( NaN, 1, 1)" in out


def test_main_reports_bad_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "input error" in out
    assert "RGB  :" not in out


def test_main_rejects_non_numeric_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "input error" in capsys.readouterr().out