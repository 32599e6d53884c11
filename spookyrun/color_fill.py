"""Colour stops, ratio lookups, random colours and blended colour ranges."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .color_range import Color, blend, diff
from .util import is_real_close

_IDEAL_COLORS_PER_BLEND = 512


@dataclass
class ColorAtRatio:
    """A colour placed at a ratio along a colour range."""

    color: Color = Color.TRANSPARENT
    ratio: float = 0.0


def normalize(colors_at: Sequence[ColorAtRatio]) -> List[ColorAtRatio]:
    """Return the stops sorted, deduplicated by ratio, and stretched to span [0, 1]."""
    ordered = sorted(colors_at, key=lambda stop: stop.ratio)

    unique: List[ColorAtRatio] = []
    for stop in ordered:
        if unique and is_real_close(unique[-1].ratio, stop.ratio):
            continue
        unique.append(ColorAtRatio(stop.color, stop.ratio))

    if not unique:
        return unique

    first_ratio = unique[0].ratio
    if first_ratio != 0.0:
        for stop in unique:
            stop.ratio -= first_ratio
        unique[0].ratio = 0.0

    if len(unique) == 1:
        return unique

    last_ratio = unique[-1].ratio
    if last_ratio != 1.0:
        for stop in unique:
            stop.ratio *= 1.0 / last_ratio
        unique[-1].ratio = 1.0

    return unique


def ratio_from_clamped(ratio: float, colors: Sequence[Color]) -> Color:
    """Pick the colour at ``ratio``, clamping outside [0, 1]; empty gives transparent."""
    size = len(colors)
    if size == 0:
        return Color.TRANSPARENT
    if not ratio > 0.0:
        return colors[0]
    index = int(ratio * size)
    if index >= size:
        return colors[-1]
    return colors[index]


def ratio_from_rotation(ratio: float, colors: Sequence[Color]) -> Color:
    """Pick the colour at the fractional part of ``ratio``."""
    return ratio_from_clamped(ratio - math.floor(ratio), colors)


def _channel(rng: random.Random) -> int:
    return rng.randint(0, 255)


def random_color(rng: random.Random, will_randomize_alpha: bool = False) -> Color:
    """A uniformly random colour, opaque unless alpha is randomised too."""
    red, green, blue = _channel(rng), _channel(rng), _channel(rng)
    alpha = _channel(rng) if will_randomize_alpha else 255
    return Color(red, green, blue, alpha)


def random_vibrant(rng: random.Random, will_randomize_alpha: bool = False) -> Color:
    """A random colour pushed towards saturation by forcing one channel to an extreme."""
    values = [_channel(rng), _channel(rng), _channel(rng)]

    if diff(values[0], values[1]) < 191:
        average = (values[0] + values[1]) // 2
        if average < 127:
            values[2] = rng.randint(235, 255)
        else:
            values[2] = rng.randint(0, 20)

    rng.shuffle(values)

    alpha = _channel(rng) if will_randomize_alpha else 255
    return Color(values[0], values[1], values[2], alpha)


def blend_fill(count: int, start: Color, end: Color) -> List[Color]:
    """``count`` colours evenly blended from ``start`` to ``end``."""
    divisor = 1.0 if count <= 2 else float(count - 1)
    return [blend(i / divisor, start, end) for i in range(count)]


def blend_fill_colors(count: int, colors: Sequence[Color]) -> List[Color]:
    """``count`` colours blended across evenly spaced ``colors``."""
    if count <= 0:
        return []
    if not colors:
        return [Color.BLACK] * count

    divisor = 1.0 if len(colors) <= 2 else float(len(colors) - 1)
    stops = [ColorAtRatio(color, i / divisor) for i, color in enumerate(colors)]
    return blend_fill_non_linear(count, stops)


def blend_fill_non_linear(count: int, colors_at: Sequence[ColorAtRatio]) -> List[Color]:
    """``count`` colours blended across stops placed at arbitrary ratios."""
    if count <= 0:
        return []

    stops = normalize(colors_at)
    if not stops:
        return [Color.BLACK] * count

    if len(stops) == 1 or count == 1:
        return [stops[0].color] * count

    if len(stops) == 2:
        return blend_fill(count, stops[0].color, stops[1].color)

    ideal_size = len(stops) * _IDEAL_COLORS_PER_BLEND

    if count >= ideal_size:
        result = [Color.BLACK] * count
        dst_index = 0
        for start, end in zip(stops, stops[1:]):
            if dst_index >= count:
                break
            blend_count = int((end.ratio - start.ratio) * count)
            blend_count = min(blend_count, count - dst_index)
            result[dst_index : dst_index + blend_count] = blend_fill(
                blend_count, start.color, end.color
            )
            dst_index += blend_count
        result[-1] = stops[-1].color
        return result

    ideal = blend_fill_non_linear(ideal_size, stops)
    last_ideal = len(ideal) - 1
    result = [ideal[int((i / (count - 1)) * last_ideal)] for i in range(count)]
    result[-1] = ideal[-1]
    return result


class BlendCache:
    """A precomputed colour range, looked up by ratio."""

    def __init__(self, colors: Sequence[Color] = ()) -> None:
        self._colors: Tuple[Color, ...] = tuple(colors)

    @classmethod
    def from_colors(cls, size: int, colors: Sequence[Color]) -> "BlendCache":
        return cls(blend_fill_colors(size, colors))

    @classmethod
    def from_colors_non_linear(
        cls, size: int, colors_at: Sequence[ColorAtRatio]
    ) -> "BlendCache":
        return cls(blend_fill_non_linear(size, colors_at))

    @property
    def colors(self) -> Tuple[Color, ...]:
        return self._colors

    @property
    def is_empty(self) -> bool:
        return not self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def at_ratio_clamped(self, ratio: float) -> Color:
        return ratio_from_clamped(ratio, self._colors)

    def at_ratio_rotation(self, ratio: float) -> Color:
        return ratio_from_rotation(ratio, self._colors)

    def first(self) -> Color:
        return self._colors[0] if self._colors else Color.TRANSPARENT

    def last(self) -> Color:
        return self._colors[-1] if self._colors else Color.TRANSPARENT