"""Small numeric, bit and collection helpers used throughout the game."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Any, Iterable, MutableSequence, Sequence

FLOAT_COMPARE_EPSILON = sys.float_info.epsilon * 100.0
PI = math.pi
TINY = 0.0001


def _is_integral(*values: Any) -> bool:
    return all(isinstance(v, int) and not isinstance(v, bool) for v in values)


def is_real_close(left, right) -> bool:
    """Loose equality for games: exact for integers, epsilon-scaled for floats."""
    if _is_integral(left, right):
        return left == right
    diff_abs = abs(right - left)
    if diff_abs < 1:
        return diff_abs < FLOAT_COMPARE_EPSILON
    max_for_epsilon = max(abs(left), abs(right), 1.0)
    return diff_abs < max_for_epsilon * FLOAT_COMPARE_EPSILON


def is_real_close_or_less(number, compared_to) -> bool:
    return number < compared_to or is_real_close(number, compared_to)


def is_real_close_or_greater(number, compared_to) -> bool:
    return number > compared_to or is_real_close(number, compared_to)


def map_range(number, in_min, in_max, out_min, out_max):
    """Map ``number`` from one range to another; a degenerate input range gives ``out_max``."""
    if is_real_close(in_min, in_max):
        return out_max
    scaled = ((number - in_min) * (out_max - out_min)) / (in_max - in_min)
    if _is_integral(out_min, out_max):
        scaled = int(scaled)
    return out_min + scaled


def map_ratio_to(ratio: float, out_min, out_max):
    """Map a ratio in [0, 1] onto ``[out_min, out_max]``."""
    scaled = ratio * (float(out_max) - float(out_min))
    if _is_integral(out_min, out_max):
        scaled = int(scaled)
    return out_min + scaled


def map_to_ratio(number, in_min, in_max) -> float:
    """Map ``number`` in ``[in_min, in_max]`` to a ratio; a degenerate range gives 1."""
    if is_real_close(in_min, in_max):
        return 1.0
    return float(number - in_min) / float(in_max - in_min)


def map_ratio_to_color_value(ratio: float) -> int:
    """Clamp ``ratio`` to [0, 1] and map it to a colour channel value in [0, 255]."""
    clamped = min(max(ratio, 0.0), 1.0)
    return int(map_range(clamped, 0.0, 1.0, 0, 255))


def degrees_to_radians(degrees: float) -> float:
    return degrees * (PI / 180.0)


def radians_to_degrees(radians: float) -> float:
    return radians * (180.0 / PI)


def is_abs_tiny(value: float) -> bool:
    return abs(value) < TINY


def make_even(number: int, will_add: bool) -> int:
    """Return ``number`` made even by adding or subtracting one when it is odd."""
    if number % 2 != 0:
        return number + 1 if will_add else number - 1
    return number


def is_bit_set(bits: int, to_check: int) -> bool:
    return (bits & to_check) != 0


def set_bit(bits: int, to_set: int) -> int:
    return bits | to_set


def _require_unsigned(number: int) -> None:
    if number < 0:
        raise ValueError(f"expected a non-negative integer, got {number}")


def count_high_bits(number: int) -> int:
    """Count the set bits of a non-negative integer."""
    _require_unsigned(number)
    count = 0
    while number:
        number &= number - 1
        count += 1
    return count


def is_power_of_two(number: int) -> bool:
    _require_unsigned(number)
    return number > 0 and (number & (number - 1)) == 0


def find_power_of_two_greater_than(number: int) -> int:
    """Smallest power of two, starting at 2, that is strictly greater than ``number``."""
    power = 2
    while power <= number:
        power <<= 1
    return power


def sort_then_unique(items: Iterable) -> list:
    """Return the items sorted with duplicates removed."""
    return sorted(set(items))


def swap_and_pop(items: MutableSequence, index: int):
    """Remove ``items[index]`` quickly by swapping it with the last item first.

    Returns the removed item, or ``None`` when ``items`` is empty.
    """
    if not items:
        return None
    if len(items) > 1:
        items[index], items[-1] = items[-1], items[index]
    return items.pop()


def container_to_string(items: Iterable, separator: str = ",", wrap: str = "") -> str:
    """Join items with ``separator``, wrapped by the first and second characters of ``wrap``."""
    content = separator.join(str(item) for item in items)
    if not content:
        return ""
    front = wrap[0] if len(wrap) >= 1 else ""
    back = wrap[1] if len(wrap) >= 2 else ""
    return f"{front}{content}{back}"


def _format_number(value) -> str:
    if _is_integral(value):
        return f"{value:,}"
    return format(value, ",.6g")


@dataclass
class Stats:
    """Summary statistics of a collection of numbers."""

    count: int = 0
    min: Any = 0
    max: Any = 0
    sum: Any = 0
    avg: float = 0.0
    sdv: float = 0.0

    def to_string(self, number_width: int = 5) -> str:
        avg_shown = int(self.avg) if _is_integral(self.min) else self.avg
        return (
            f"x{self.count}"
            f" [{_format_number(self.min):>{number_width}}"
            f", {_format_number(avg_shown):>{number_width}}"
            f", {_format_number(self.max):>{number_width}}"
            f"] sd={_format_number(self.sdv):<{number_width}}"
        )

    def __str__(self) -> str:
        return self.to_string()


def make_stats(values: Iterable) -> Stats:
    """Compute count, min, max, sum, mean and population standard deviation."""
    numbers: Sequence = list(values)
    stats = Stats(count=len(numbers))
    if not numbers:
        return stats

    stats.sum = sum(numbers)
    stats.min = min(numbers)
    stats.max = max(numbers)
    stats.avg = float(stats.sum) / stats.count

    if stats.count < 2:
        return stats

    deviation_sum = sum((float(n) - stats.avg) ** 2 for n in numbers)
    stats.sdv = math.sqrt(deviation_sum / stats.count)
    return stats


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def calc_percent(num, den, after_dot_count: int = 1) -> float:
    """Percentage of ``num`` over ``den``; zero when ``den`` is not positive."""
    if not den > 0:
        return 0.0
    result = (float(num) / float(den)) * 100.0
    if after_dot_count > 0:
        mult = 10.0 * after_dot_count
        result = _round_half_away(result * mult) / mult
    return result


def make_percent_string(
    num,
    den,
    prefix: str = "",
    postfix: str = "",
    after_dot_count: int = 1,
    wrap: str = "()",
) -> str:
    """Format a percentage such as ``(50%)``."""
    percent = format(calc_percent(num, den, after_dot_count), "g")
    front = wrap[0] if wrap else ""
    back = wrap[-1] if wrap else ""
    return f"{front}{prefix}{percent}%{postfix}{back}"