import math

import pytest

from spookyrun import util


def test_is_real_close_integers():
    assert util.is_real_close(3, 3)
    assert not util.is_real_close(3, 4)


def test_is_real_close_floats():
    assert util.is_real_close(0.1 + 0.2, 0.3)
    assert not util.is_real_close(1.0, 1.1)
    assert util.is_real_close(1e10, 1e10 + 1e-4)


def test_close_or_less_and_greater():
    assert util.is_real_close_or_less(1.0, 2.0)
    assert util.is_real_close_or_less(0.1 + 0.2, 0.3)
    assert not util.is_real_close_or_less(3.0, 2.0)
    assert util.is_real_close_or_greater(3.0, 2.0)
    assert util.is_real_close_or_greater(0.3, 0.1 + 0.2)
    assert not util.is_real_close_or_greater(1.0, 2.0)


def test_map_range_endpoints():
    assert util.map_range(0.0, 0.0, 10.0, 20.0, 40.0) == pytest.approx(20.0)
    assert util.map_range(10.0, 0.0, 10.0, 20.0, 40.0) == pytest.approx(40.0)


def test_map_range_degenerate_gives_out_max():
    assert util.map_range(7.0, 3.0, 3.0, 1.0, 9.0) == 9.0


def test_map_range_integer_output_is_integer():
    result = util.map_range(0.33, 0.0, 1.0, 0, 255)
    assert isinstance(result, int)
    assert 0 <= result <= 255


def test_map_ratio_to_endpoints():
    assert util.map_ratio_to(0.0, 10.0, 30.0) == pytest.approx(10.0)
    assert util.map_ratio_to(1.0, 10.0, 30.0) == pytest.approx(30.0)


@pytest.mark.parametrize("ratio", [0.0, 0.25, 0.5, 0.9, 1.0])
def test_map_to_ratio_round_trip(ratio):
    value = util.map_ratio_to(ratio, -5.0, 15.0)
    assert util.map_to_ratio(value, -5.0, 15.0) == pytest.approx(ratio)


def test_map_to_ratio_degenerate():
    assert util.map_to_ratio(4.0, 2.0, 2.0) == 1.0


def test_map_ratio_to_color_value_clamps():
    assert util.map_ratio_to_color_value(1.0) == 255
    assert util.map_ratio_to_color_value(0.0) == 0
    assert util.map_ratio_to_color_value(5.0) == 255
    assert util.map_ratio_to_color_value(-2.0) == 0


def test_degrees_radians():
    assert util.degrees_to_radians(180.0) == pytest.approx(math.pi)
    for degrees in (0.0, 45.0, 123.4, -90.0):
        back = util.radians_to_degrees(util.degrees_to_radians(degrees))
        assert back == pytest.approx(degrees)


def test_is_abs_tiny():
    assert util.is_abs_tiny(0.0)
    assert util.is_abs_tiny(-0.00001)
    assert not util.is_abs_tiny(0.001)


@pytest.mark.parametrize("number", [-5, -4, 0, 3, 8, 11])
@pytest.mark.parametrize("will_add", [True, False])
def test_make_even(number, will_add):
    result = util.make_even(number, will_add)
    assert result % 2 == 0
    if number % 2 == 0:
        assert result == number
    else:
        assert result == (number + 1 if will_add else number - 1)


def test_bits():
    assert util.is_bit_set(0b1010, 0b0010)
    assert not util.is_bit_set(0b1010, 0b0100)
    flags = util.set_bit(0b1000, 0b0001)
    assert util.is_bit_set(flags, 0b0001)
    assert util.is_bit_set(flags, 0b1000)


@pytest.mark.parametrize("k", [1, 3, 8, 31])
def test_count_high_bits(k):
    assert util.count_high_bits(2**k) == 1
    assert util.count_high_bits(2**k - 1) == k


def test_count_high_bits_zero_and_negative():
    assert util.count_high_bits(0) == 0
    with pytest.raises(ValueError):
        util.count_high_bits(-1)


def test_is_power_of_two():
    assert util.is_power_of_two(1)
    assert util.is_power_of_two(1024)
    assert not util.is_power_of_two(0)
    assert not util.is_power_of_two(6)


@pytest.mark.parametrize("number", [0, 1, 2, 3, 64, 100, 1000])
def test_find_power_of_two_greater_than(number):
    result = util.find_power_of_two_greater_than(number)
    assert result > number
    assert util.is_power_of_two(result)
    assert result == 2 or result // 2 <= number


def test_sort_then_unique():
    assert util.sort_then_unique([3, 1, 3, 2, 1]) == [1, 2, 3]
    assert util.sort_then_unique([]) == []


def test_swap_and_pop():
    items = ["a", "b", "c", "d"]
    removed = util.swap_and_pop(items, 1)
    assert removed == "b"
    assert items == ["a", "d", "c"]


def test_swap_and_pop_single_and_empty():
    items = ["only"]
    assert util.swap_and_pop(items, 0) == "only"
    assert items == []
    assert util.swap_and_pop(items, 0) is None


def test_container_to_string():
    assert util.container_to_string([1, 2, 3]) == "1,2,3"
    assert util.container_to_string([1, 2, 3], ", ", "[]") == "[1, 2, 3]"
    assert util.container_to_string(["x"], ",", "(") == "(x"
    assert util.container_to_string([], ",", "[]") == ""


def test_make_stats_empty():
    stats = util.make_stats([])
    assert stats.count == 0
    assert stats.sdv == 0.0


def test_make_stats_single():
    stats = util.make_stats([7])
    assert (stats.count, stats.min, stats.max, stats.sum) == (1, 7, 7, 7)
    assert stats.avg == 7.0
    assert stats.sdv == 0.0


def test_make_stats_worked_example():
    values = [2, 4, 4, 4, 5, 5, 7, 9]
    stats = util.make_stats(values)
    assert stats.count == len(values)
    assert stats.min == min(values)
    assert stats.max == max(values)
    assert stats.sum == sum(values)
    assert stats.avg == pytest.approx(5.0)
    assert stats.sdv == pytest.approx(2.0)


def test_stats_to_string():
    text = util.make_stats([2, 4, 4, 4, 5, 5, 7, 9]).to_string()
    assert text.startswith("x8 [")
    assert "] sd=" in text
    assert str(util.make_stats([1, 2])) == util.make_stats([1, 2]).to_string()


def test_calc_percent():
    assert util.calc_percent(4, 4) == pytest.approx(100.0)
    assert util.calc_percent(0, 9) == 0.0
    assert util.calc_percent(3, 0) == 0.0
    assert util.calc_percent(3, -1) == 0.0


def test_make_percent_string():
    assert util.make_percent_string(1, 1) == "(100%)"
    assert util.make_percent_string(1, 1, "a", "b", 1, "") == "a100%b"
    assert util.make_percent_string(0, 0) == "(0%)"