"""Colour model conversions between RGB, CMY, CMYK, HSV, HLS and XYZ.

RGB, CMY, CMYK and XYZ components are floats, normally in 0..1. Hues are
integer degrees. A hue of 0 counts as "undefined": it prints as NaN, and the
conversions back to RGB treat it as having no hue.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, TextIO

_XYZ_SCALE = 0.17697


def _fmt(value: float) -> str:
    return f"{value:g}"


def _hue_text(hue: int) -> str:
    return "NaN" if hue == 0 else str(hue)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True)
class RGB:
    """Red, green and blue intensities."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __str__(self) -> str:
        return f"( {_fmt(self.r)}, {_fmt(self.g)}, {_fmt(self.b)})"


@dataclass(frozen=True)
class CMY:
    """Cyan, magenta and yellow amounts."""

    c: float = 0.0
    m: float = 0.0
    y: float = 0.0

    def __str__(self) -> str:
        return f"( {_fmt(self.c)}, {_fmt(self.m)}, {_fmt(self.y)})"


@dataclass(frozen=True)
class CMYK:
    """Cyan, magenta, yellow and key (black) amounts."""

    c: float = 0.0
    m: float = 0.0
    y: float = 0.0
    k: float = 0.0

    def __str__(self) -> str:
        return f"( {_fmt(self.c)}, {_fmt(self.m)}, {_fmt(self.y)}, {_fmt(self.k)})"


@dataclass(frozen=True)
class HSV:
    """Hue in degrees, saturation and value."""

    h: int = 0
    s: float = 0.0
    v: float = 0.0

    def __str__(self) -> str:
        return f"( {_hue_text(self.h)}, {_fmt(self.s)}, {_fmt(self.v)})"


@dataclass(frozen=True)
class HLS:
    """Hue in degrees, saturation and lightness."""

    h: int = 0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    def __str__(self) -> str:
        return f"( {_hue_text(self.h)}, {_fmt(self.s)}, {_fmt(self.l)})"


@dataclass(frozen=True)
class XYZ:
    """CIE 1931 tristimulus values."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"( {_fmt(self.x)}, {_fmt(self.y)}, {_fmt(self.z)})"


def rgb_to_cmy(rgb: RGB) -> CMY:
    return CMY(1 - rgb.r, 1 - rgb.g, 1 - rgb.b)


def cmy_to_rgb(cmy: CMY) -> RGB:
    return RGB(1 - cmy.c, 1 - cmy.m, 1 - cmy.y)


def rgb_to_cmyk(rgb: RGB) -> CMYK:
    k = min(1 - rgb.r, 1 - rgb.g, 1 - rgb.b)
    if k < 1:
        return CMYK(
            (1 - rgb.r - k) / (1 - k),
            (1 - rgb.g - k) / (1 - k),
            (1 - rgb.b - k) / (1 - k),
            k,
        )
    return CMYK(1 - rgb.r, 1 - rgb.g, 1 - rgb.b, k)


def cmyk_to_rgb(cmyk: CMYK) -> RGB:
    """Convert to RGB; green and blue are weighted by their own channel."""
    return RGB(
        1 - cmyk.c * (1 - cmyk.k) - cmyk.k,
        1 - cmyk.m * (1 - cmyk.m) - cmyk.k,
        1 - cmyk.y * (1 - cmyk.y) - cmyk.k,
    )


def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert via 8-bit channel values; grey colours get the undefined hue 0."""
    r = int(rgb.r * 255)
    g = int(rgb.g * 255)
    b = int(rgb.b * 255)
    high = max(r, g, b)
    low = min(r, g, b)
    hue = 0
    if high != low:
        span = high - low
        if high == r and g >= b:
            hue = _trunc_div(60 * (g - b), span)
        elif high == r:
            hue = _trunc_div(60 * (g - b), span) + 360
        elif high == g:
            hue = _trunc_div(60 * (b - r), span) + 120
        else:
            hue = _trunc_div(60 * (r - g), span) + 240
    saturation = 0.0 if high == 0 else 1 - low / high
    return HSV(hue, saturation, high / 255)


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Convert to RGB; the undefined hue 0 gives black."""
    if hsv.h < 0:
        raise ValueError(f"hue must not be negative: {hsv.h}")
    if hsv.h == 0:
        return RGB(0.0, 0.0, 0.0)
    vmin = (1 - hsv.s) * hsv.v
    a = (hsv.v - vmin) * (hsv.h % 60) / 60
    vinc = vmin + a
    vdec = hsv.v - a
    sector = (hsv.h // 60) % 6
    v = hsv.v
    return RGB(*(
        (v, vinc, vmin),
        (vdec, v, vmin),
        (vmin, v, vinc),
        (vmin, vdec, v),
        (vinc, vmin, v),
        (v, vmin, vdec),
    )[sector])


def rgb_to_hls(rgb: RGB) -> HLS:
    high = max(rgb.r, rgb.g, rgb.b)
    low = min(rgb.r, rgb.g, rgb.b)
    lightness = 0.5 * (high + low)
    hue = 0
    if high != low:
        span = high - low
        if high == rgb.r and rgb.g >= rgb.b:
            hue = int(60 * (rgb.g - rgb.b) / span)
        elif high == rgb.r:
            hue = int(60 * (rgb.g - rgb.b) / span + 360)
        elif high == rgb.g:
            hue = int(60 * (rgb.b - rgb.r) / span + 120)
        else:
            hue = int(60 * (rgb.r - rgb.g) / span + 240)
    if lightness == 0 or high == low:
        saturation = 0.0
    elif 0 < lightness <= 0.5:
        saturation = (high - low) / (2 * lightness)
    elif 0.5 < lightness < 1:
        saturation = (high - low) / (2 - 2 * lightness)
    else:
        saturation = (high - low) / (1 - abs(1 - high - low))
    return HLS(hue, saturation, lightness)


def hls_to_rgb(hls: HLS) -> RGB:
    """Convert to RGB; the undefined hue 0 gives a grey of the chroma offset."""
    if hls.h < 0 or hls.h >= 360:
        raise ValueError(f"hue must lie in 0..359: {hls.h}")
    sector = hls.h // 60
    chroma = (1 - abs(2 * hls.l - 1)) * hls.s
    second = chroma * (1 - abs(sector % 2 - 1))
    if hls.h == 0:
        r, g, b = 0.0, 0.0, 0.0
    else:
        r, g, b = (
            (chroma, second, 0.0),
            (second, chroma, 0.0),
            (0.0, chroma, second),
            (0.0, second, chroma),
            (second, 0.0, chroma),
            (chroma, 0.0, second),
        )[sector]
    offset = hls.l - 0.5 * chroma
    return RGB(r + offset, g + offset, b + offset)


def rgb_to_xyz(rgb: RGB) -> XYZ:
    return XYZ(
        (0.4900 * rgb.r + 0.3100 * rgb.g + 0.2000 * rgb.b) / _XYZ_SCALE,
        (0.1770 * rgb.r + 0.8124 * rgb.g + 0.0106 * rgb.b) / _XYZ_SCALE,
        (0.0000 * rgb.r + 0.0100 * rgb.g + 0.9900 * rgb.b) / _XYZ_SCALE,
    )


def xyz_to_rgb(xyz: XYZ) -> RGB:
    return RGB(
        0.4185 * xyz.x - 0.1587 * xyz.y - 0.0828 * xyz.z,
        -0.0912 * xyz.x + 0.2524 * xyz.y + 0.0157 * xyz.z,
        0.0009 * xyz.x - 0.0025 * xyz.y + 0.1786 * xyz.z,
    )


_MENU = (
    "Enter the number of the source colour model:\n"
    "1: rgb \n"
    "2: cmy \n"
    "3: cmyk \n"
    "4: hsv \n"
    "5: hls \n"
    "6: xyz \n"
    "Or enter 0 to quit. \n"
    "\n-> \n"
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for text in stream:
        yield from text.split()


def _report(out: TextIO, colors: dict) -> None:
    out.write("Your colour in different models:\n\n")
    for label, key in (("RGB  : ", "rgb"), ("CMY  : ", "cmy"), ("CMYK : ", "cmyk"),
                       ("HSV  : ", "hsv"), ("HSL  : ", "hls"), ("XYZ  : ", "xyz")):
        out.write(f"{label}{colors[key]}\n")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Interactive converter reading choices and components from standard input."""
    out = sys.stdout
    tokens = _tokens(sys.stdin)
    colors = {"rgb": RGB(), "cmy": CMY(), "cmyk": CMYK(),
              "hsv": HSV(), "hls": HLS(), "xyz": XYZ()}

    def floats(count: int) -> list[float]:
        return [float(next(tokens)) for _ in range(count)]

    def from_rgb(rgb: RGB, *skip: str) -> None:
        colors["rgb"] = rgb
        converters = {"cmy": rgb_to_cmy, "cmyk": rgb_to_cmyk, "hsv": rgb_to_hsv,
                      "hls": rgb_to_hls, "xyz": rgb_to_xyz}
        for key, convert in converters.items():
            if key not in skip:
                colors[key] = convert(rgb)

    try:
        while True:
            out.write(_MENU)
            choice = int(next(tokens))
            if choice == 0:
                out.write("Exiting\n")
                return 0
            if choice == 1:
                out.write("Enter 3 real numbers for rgb\n")
                from_rgb(RGB(*floats(3)))
            elif choice == 2:
                out.write("Enter 3 real numbers for cmy (0 to 1)\n")
                colors["cmy"] = CMY(*floats(3))
                from_rgb(cmy_to_rgb(colors["cmy"]), "cmy")
            elif choice == 3:
                out.write("Enter 4 real numbers for cmyk (0 to 1)\n")
                colors["cmyk"] = CMYK(*floats(4))
                from_rgb(cmyk_to_rgb(colors["cmyk"]), "cmyk")
            elif choice == 4:
                out.write("For hsv enter an integer hue, then two real numbers (0 to 1)\n")
                hue = int(next(tokens))
                s, v = floats(2)
                colors["hsv"] = HSV(hue, s, v)
                from_rgb(hsv_to_rgb(colors["hsv"]), "hsv")
            elif choice == 5:
                out.write("For hls enter an integer hue, then two real numbers (0 to 1)\n")
                hue = int(next(tokens))
                lightness, s = floats(2)
                colors["hls"] = HLS(hue, s, lightness)
                from_rgb(hls_to_rgb(colors["hls"]), "hls")
            elif choice == 6:
                out.write("Enter 3 real numbers for xyz (0 to 1)\n")
                colors["xyz"] = XYZ(*floats(3))
                from_rgb(xyz_to_rgb(colors["xyz"]), "xyz")
            else:
                out.write("input error\n")
                continue
            _report(out, colors)
    except StopIteration:
        return 0
    except ValueError as exc:
        out.write(f"input error: {exc}\n")
        return 1