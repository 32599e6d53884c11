"""RGBA colours, colour differences, blends, HSL conversion and brightness estimates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Sequence

from .util import is_real_close, is_real_close_or_less, map_ratio_to

_WEIGHTED_EUCLID_MAX = math.sqrt(584970.0)


def _check_channel(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"colour channel {name} must be in [0, 255], got {value}")


@dataclass(frozen=True)
class Color:
    """An 8-bit RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    TRANSPARENT: ClassVar["Color"]
    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))


Color.TRANSPARENT = Color(0, 0, 0, 0)
Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)


# channel value differences


def diff(left: int, right: int) -> int:
    return left - right


def diff_abs(left: int, right: int) -> int:
    return abs(left - right)


def diff_ratio(left: int, right: int) -> float:
    return diff_abs(left, right) / 255.0


# whole colour differences


def diff_magnitude_count(left: Color, right: Color) -> int:
    return (
        diff_abs(left.r, right.r)
        + diff_abs(left.g, right.g)
        + diff_abs(left.b, right.b)
        + diff_abs(left.a, right.a)
    )


def diff_magnitude_count_opaque(left: Color, right: Color) -> int:
    return diff_abs(left.r, right.r) + diff_abs(left.g, right.g) + diff_abs(left.b, right.b)


def diff_magnitude(left: Color, right: Color) -> float:
    return diff_magnitude_count(left, right) / (255 * 4)


def diff_magnitude_opaque(left: Color, right: Color) -> float:
    return diff_magnitude_count_opaque(left, right) / (255 * 3)


def diff_euclid(left: Color, right: Color) -> float:
    total = sum(
        diff_abs(x, y) ** 2
        for x, y in (
            (left.r, right.r),
            (left.g, right.g),
            (left.b, right.b),
            (left.a, right.a),
        )
    )
    return math.sqrt(total) / math.sqrt(255 * 255 * 4)


def diff_euclid_opaque(left: Color, right: Color) -> float:
    total = sum(
        diff_abs(x, y) ** 2 for x, y in ((left.r, right.r), (left.g, right.g), (left.b, right.b))
    )
    return math.sqrt(total) / math.sqrt(255 * 255 * 3)


def diff_weighted_euclid_opaque(left: Color, right: Color) -> float:
    """Colour distance weighted to look closer to what the eye sees, in [0, 1]."""
    avg_red = (left.r + right.r) // 2
    diff_red = diff(left.r, right.r)
    diff_grn = diff(left.g, right.g)
    diff_blu = diff(left.b, right.b)

    bits_red = ((512 + avg_red) * diff_red * diff_red) >> 8
    bits_grn = 4 * diff_grn * diff_grn
    bits_blu = ((767 - avg_red) * diff_blu * diff_blu) >> 8

    return math.sqrt(bits_red + bits_grn + bits_blu) / _WEIGHTED_EUCLID_MAX


# blends


def blend_value(ratio: float, start: int, end: int) -> int:
    """Blend one channel value; ``ratio`` is expected in [0, 1]."""
    value = int(map_ratio_to(ratio, float(start), float(end)))
    return min(max(value, 0), 255)


def blend(ratio: float, start: Color, end: Color) -> Color:
    return Color(
        blend_value(ratio, start.r, end.r),
        blend_value(ratio, start.g, end.g),
        blend_value(ratio, start.b, end.b),
        blend_value(ratio, start.a, end.a),
    )


def blend_sequence(ratio: float, colors: Sequence[Color]) -> Color:
    """Blend across evenly spaced colours; empty gives transparent."""
    count = len(colors)
    if count == 0:
        return Color.TRANSPARENT
    if count == 1 or not ratio > 0.0:
        return colors[0]
    if not ratio < 1.0:
        return colors[-1]

    steps = float(count - 1)
    from_index = int(ratio * steps)
    spread = 1.0 / steps
    color_ratio = (ratio - from_index * spread) / spread
    return blend(color_ratio, colors[from_index], colors[from_index + 1])


# HSL


def _hue_ratio_correct(hue_ratio: float) -> float:
    result = hue_ratio
    if result < 0.0:
        result += 1.0
    if result > 1.0:
        result -= 1.0
    return result


def _hue_ratio_to_rgb(var1: float, var2: float, hue_param: float) -> int:
    hue = _hue_ratio_correct(hue_param)

    if 6.0 * hue < 1.0:
        result = var1 + (var2 - var1) * 6.0 * hue
    elif 2.0 * hue < 1.0:
        result = var2
    elif 3.0 * hue < 2.0:
        result = var1 + (var2 - var1) * ((2.0 / 3.0) - hue) * 6.0
    else:
        result = var1

    result *= 255.0

    # fix float math errors
    if result < 255.0 and (result - math.floor(result)) > 0.99:
        result = math.ceil(result)

    return min(max(int(result), 0), 255)


@dataclass
class Hsla:
    """Hue, saturation and lightness as ratios in [0, 1], plus 8-bit alpha."""

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741
    a: int = 255

    @classmethod
    def from_color(cls, color: Color) -> "Hsla":
        hsla = cls(a=color.a)

        red = color.r / 255.0
        grn = color.g / 255.0
        blu = color.b / 255.0

        low = min(red, grn, blu)
        high = max(red, grn, blu)
        spread = high - low

        hsla.l = (high + low) * 0.5

        if is_real_close_or_less(spread, 0.0):
            return hsla

        if hsla.l < 0.5:
            hsla.s = spread / (high + low)
        else:
            hsla.s = spread / (2.0 - high - low)

        red_diff = (((high - red) / 6.0) + (spread / 2.0)) / spread
        grn_diff = (((high - grn) / 6.0) + (spread / 2.0)) / spread
        blu_diff = (((high - blu) / 6.0) + (spread / 2.0)) / spread

        if is_real_close(red, high):
            hsla.h = blu_diff - grn_diff
        elif is_real_close(grn, high):
            hsla.h = ((1.0 / 3.0) + red_diff) - blu_diff
        elif is_real_close(blu, high):
            hsla.h = ((2.0 / 3.0) + grn_diff) - red_diff

        hsla.h = _hue_ratio_correct(hsla.h)
        return hsla

    def to_color(self) -> Color:
        if is_real_close(self.s, 0.0):
            value = min(max(int(self.l * 255.0), 0), 255)
            return Color(value, value, value, self.a)

        if self.l < 0.5:
            var2 = self.l * (1.0 + self.s)
        else:
            var2 = (self.l + self.s) - (self.s * self.l)
        var1 = (2.0 * self.l) - var2

        return Color(
            _hue_ratio_to_rgb(var1, var2, self.h + (1.0 / 3.0)),
            _hue_ratio_to_rgb(var1, var2, self.h),
            _hue_ratio_to_rgb(var1, var2, self.h - (1.0 / 3.0)),
            self.a,
        )

    def __str__(self) -> str:
        parts = [format(self.h, "g"), format(self.s, "g"), format(self.l, "g")]
        if self.a < 255:
            parts.append(str(self.a))
        return "[" + ",".join(parts) + "]"


# brightness estimates


def brightness_hsl(color: Color) -> float:
    """HSL lightness: fast but crude."""
    return Hsla.from_color(color).l


def brightness_weighted_mean(color: Color) -> float:
    return 0.2126 * color.r * color.r + 0.7152 * color.g * color.g + 0.0722 * color.b * color.b


def brightness_w3_perceived(color: Color) -> float:
    return (0.299 * color.r + 0.587 * color.g + 0.114 * color.b) / 1000.0


def brightness_luminosity(color: Color) -> float:
    return (
        0.2126 * (color.r / 255.0) ** 2.2
        + 0.7152 * (color.g / 255.0) ** 2.2
        + 0.0722 * (color.b / 255.0) ** 2.2
    )