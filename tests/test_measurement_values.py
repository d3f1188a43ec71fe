import statistics

import pytest

from speedwire.measurement_values import (
    FLT_MAX,
    MeasurementValues,
    TimestampDoublePair,
    abs_time_difference,
    time_difference,
)


def _filled(values, start_time=1000, step=1000, capacity=None):
    mv = MeasurementValues(capacity if capacity is not None else len(values))
    for i, v in enumerate(values):
        mv.add_measurement(v, start_time + i * step)
    return mv


def test_time_difference_wraps_around():
    assert time_difference(0, 0xFFFFFFFF) == 1
    assert time_difference(0xFFFFFFFF, 0) == -1
    assert abs_time_difference(0xFFFFFFFF, 0) == 1


def test_time_difference_is_antisymmetric():
    for a, b in [(5, 100), (1000, 3), (0x7FFF0000, 0x10)]:
        assert time_difference(a, b) == -time_difference(b, a)
        assert abs_time_difference(a, b) == abs_time_difference(b, a)


def test_add_measurement_stores_pairs():
    mv = MeasurementValues(3)
    mv.add_measurement(1.5, 42)
    assert mv.newest() == TimestampDoublePair(1.5, 42)
    assert mv.value_string == ""


def test_default_pair_values():
    pair = TimestampDoublePair()
    assert pair.value == 999999.0
    assert pair.time == 0


def test_find_closest_index_empty_is_none():
    assert MeasurementValues(4).find_closest_index(100) is None


def test_find_closest_measurement_empty_returns_default():
    assert MeasurementValues(4).find_closest_measurement(100) == TimestampDoublePair()


def test_find_closest_index_exact_times():
    mv = _filled([float(v) for v in range(8)])
    for i, pair in enumerate(mv):
        assert mv.find_closest_index(pair.time) == i
        assert mv.find_closest_measurement(pair.time) == pair


def test_find_closest_index_between_times():
    mv = _filled([0.0, 1.0, 2.0, 3.0])
    assert mv.find_closest_index(2100) == 1
    assert mv.find_closest_index(2900) == 2
    assert mv.find_closest_index(0) == 0
    assert mv.find_closest_index(999999) == 3


def test_interpolate_empty_is_zero():
    assert MeasurementValues(2).interpolate_closest_values(5) == 0.0


def test_interpolate_single_value():
    mv = _filled([7.5])
    assert mv.interpolate_closest_values(123456) == 7.5


def test_interpolate_at_measurement_time_returns_value():
    values = [3.0, 8.0, -2.0, 11.0]
    mv = _filled(values)
    for pair in mv:
        assert mv.interpolate_closest_values(pair.time) == pytest.approx(pair.value)


def test_interpolate_between_lies_between_neighbours():
    mv = _filled([10.0, 20.0, 40.0])
    result = mv.interpolate_closest_values(2400)
    assert 20.0 <= result <= 40.0
    result = mv.interpolate_closest_values(1300)
    assert 10.0 <= result <= 20.0


def test_interpolate_midpoint():
    mv = _filled([10.0, 20.0])
    assert mv.interpolate_closest_values(1500) == pytest.approx(15.0)


def test_estimate_mean_all_and_range():
    values = [1.0, 4.0, 9.0, 16.0, 25.0]
    mv = _filled(values)
    assert mv.estimate_mean() == pytest.approx(statistics.mean(values))
    assert mv.estimate_mean(1, 3) == pytest.approx(statistics.mean(values[1:4]))


def test_estimate_mean_after_wrap_uses_ring_order():
    mv = _filled([1.0, 2.0, 3.0, 4.0, 5.0], capacity=3)
    assert list(p.value for p in mv) == [3.0, 4.0, 5.0]
    assert mv.estimate_mean(0, 1) == pytest.approx(statistics.mean([3.0, 4.0]))


def test_estimate_mean_empty_raises():
    with pytest.raises(IndexError):
        MeasurementValues(3).estimate_mean()


def test_estimate_mean_and_variance_matches_statistics():
    values = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
    mv = _filled(values)
    mean, var = mv.estimate_mean_and_variance(0, len(values) - 1)
    assert mean == pytest.approx(statistics.mean(values))
    assert var == pytest.approx(statistics.variance(values))


def test_variance_of_single_value_is_flt_max():
    mv = _filled([3.0, 5.0])
    mean, var = mv.estimate_mean_and_variance(1, 1)
    assert mean == 5.0
    assert var == FLT_MAX


def test_invalid_range_raises():
    mv = _filled([1.0, 2.0, 3.0])
    with pytest.raises(IndexError):
        mv.estimate_mean_and_variance(2, 1)
    with pytest.raises(IndexError):
        mv.estimate_linear_regression(0, 3)


def test_linear_regression_on_exact_line():
    slope_in, offset = 2.5, -3.0
    values = [offset + slope_in * x for x in range(10)]
    mv = _filled(values)
    mean, var, slope = mv.estimate_linear_regression(0, 9)
    assert slope == pytest.approx(slope_in)
    assert mean == pytest.approx(statistics.mean(values))
    assert var == pytest.approx(statistics.variance(values))


def test_linear_regression_subrange_uses_relative_x():
    values = [100.0, 100.0, 1.0, 3.0, 5.0, 7.0]
    mv = _filled(values)
    mean, _var, slope = mv.estimate_linear_regression(2, 5)
    assert slope == pytest.approx(2.0)
    assert mean == pytest.approx(statistics.mean(values[2:]))


def test_linear_regression_single_value_has_zero_slope():
    mv = _filled([4.0, 6.0])
    mean, var, slope = mv.estimate_linear_regression(0, 0)
    assert (mean, var, slope) == (4.0, FLT_MAX, 0.0)


def test_linear_regression_constant_has_zero_slope():
    mv = _filled([5.0] * 6)
    mean, var, slope = mv.estimate_linear_regression(0, 5)
    assert mean == pytest.approx(5.0)
    assert var == pytest.approx(0.0)
    assert slope == pytest.approx(0.0)