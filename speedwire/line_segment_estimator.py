"""Change point detection and piecewise interval fitting for measurement series.

Change points are found by a simplified total variation approach: statistical
parameters are estimated in a sliding window around each value, and the sum of
variances of two adjacent windows is searched for local minima.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from speedwire.measurement_values import FLT_MAX, MeasurementValues

_MEAN_WINDOW_SIZE = 6
_REGRESSION_WINDOW_SIZE = 10


@dataclass
class MeasurementValueInterval:
    """A range of measurement indexes (both ends included) with its fitted parameters."""

    start_index: int
    end_index: int
    mean_value: float
    slope: float = 0.0


@dataclass
class StatisticalEstimates:
    """Statistical parameters estimated in a sliding window around one value."""

    mean: float
    variance: float
    slope: float
    sloped_variance: float


def _ieee_div(numerator: float, denominator: float) -> float:
    """Floating point division that yields inf or nan instead of raising."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _check_values(values: MeasurementValues) -> None:
    if len(values) == 0:
        raise ValueError("no measurement values given")


def estimate_statistics(
    values: MeasurementValues, window_size: int, linear_regression: bool
) -> list[StatisticalEstimates]:
    """Estimate statistics in a window ``-window_size .. 0 .. window_size`` around each value.

    Windows are truncated symmetrically near both ends of the series, and the
    variances of truncated windows are enlarged to reflect their uncertainty.
    With ``linear_regression`` the regression slope and the variance of the
    values around the regression line are estimated as well.
    """
    num_values = len(values)
    if window_size < 0:
        raise ValueError("window size must not be negative")
    if window_size >= num_values:
        raise ValueError("window size must be smaller than the number of values")

    last_full = num_values - window_size - 1
    estimates: list[StatisticalEstimates] = []
    for i in range(num_values):
        if i > last_full:
            truncated = num_values - i - 1
        else:
            truncated = min(i, window_size)
        start, end = i - truncated, i + truncated
        n = end - start + 1

        if not linear_regression:
            mean, var = values.estimate_mean_and_variance(start, end)
            if n > 1:
                var *= (2 * window_size + 1) // (n - 1)
            estimates.append(StatisticalEstimates(mean, var, 0.0, 0.0))
            continue

        mean, var, slope = values.estimate_linear_regression(start, end)
        y_dist_sum = 0.0
        for x, pair in enumerate(values[start:end + 1], start=start - i):
            y_dist = pair.value - (x * slope + mean)
            y_dist_sum += y_dist * y_dist
        slope_var = FLT_MAX
        if n > 1:
            var *= (2 * window_size + 1) // (n - 1)
            slope_var = (y_dist_sum / n) * (1 << (window_size - truncated))
            if i == 1 or i == num_values - 2:
                slope_var = FLT_MAX / 1e18
        estimates.append(StatisticalEstimates(mean, var, slope, slope_var))
    return estimates


def _total_variation_of_mean_values(
    estimates: list[StatisticalEstimates], window_size: int
) -> list[int]:
    num_values = len(estimates)
    distance = 2 * window_size + 1
    steps: list[int] = []
    downwards = False  # minimum seeker state, avoids saddle points
    for center_1 in range(1, num_values - 1 - distance):
        center_2 = center_1 + distance
        penalty_m1 = estimates[center_1 - 1].variance + estimates[center_2 - 1].variance
        penalty = estimates[center_1].variance + estimates[center_2].variance
        penalty_p1 = estimates[center_1 + 1].variance + estimates[center_2 + 1].variance

        if penalty < penalty_m1:
            downwards = True
        elif penalty > penalty_m1:
            downwards = False

        if downwards and penalty < penalty_p1:
            # accept only if the means differ by more than 3 sigma, and the
            # variance is not negligibly small
            mean_diff = estimates[center_1].mean - estimates[center_2].mean
            three_sigma_squared = 9.0 * 0.5 * (estimates[center_1].variance + estimates[center_2].variance)
            if mean_diff * mean_diff > three_sigma_squared and three_sigma_squared > 200.0:
                steps.append(center_1 + window_size)
    return steps


def _total_variation_of_linear_regression_values(
    estimates: list[StatisticalEstimates], window_size: int
) -> list[int]:
    num_estimates = len(estimates)
    min_window = 2 * window_size
    distance = 2 * window_size + 1

    minima: list[list] = []  # [index, cost] pairs
    for center_1 in range(num_estimates - distance):
        center_m = center_1 + window_size
        center_2 = center_1 + distance
        cost = estimates[center_1].sloped_variance + estimates[center_2].sloped_variance
        if minima and center_m <= minima[-1][0] + min_window:
            if cost < minima[-1][1]:
                minima[-1] = [center_m, cost]
        else:
            minima.append([center_m, cost])

    change_points: list[int] = []
    for min_index, _cost in minima:
        first = estimates[min_index - window_size]
        second = estimates[min_index + window_size + 1]
        mean_12 = first.mean + first.slope * distance
        mean_21 = second.mean - second.slope * distance
        mean_diff_12 = mean_12 - second.mean
        mean_diff_squared = _ieee_div(mean_diff_12 * mean_diff_12 + mean_21 * mean_21, 2 * window_size)
        sigma_squared = 0.5 * (first.sloped_variance + second.sloped_variance)
        ratio = _ieee_div(mean_diff_squared, sigma_squared)
        if ratio > 9.0:
            change_points.append(min_index)
    return change_points


def find_change_points_of_mean_values(values: MeasurementValues) -> list[int]:
    """Indexes of the last value before each change of the mean value."""
    _check_values(values)
    window_size = min(_MEAN_WINDOW_SIZE, len(values) // 4)
    estimates = estimate_statistics(values, window_size, False)
    return _total_variation_of_mean_values(estimates, window_size)


def find_change_points_of_linear_regression_values(values: MeasurementValues) -> list[int]:
    """Indexes of the last value before each change of the linear trend."""
    _check_values(values)
    window_size = min(_REGRESSION_WINDOW_SIZE, len(values) // 4)
    estimates = estimate_statistics(values, window_size, True)
    return _total_variation_of_linear_regression_values(estimates, window_size)


def _interval_bounds(change_points: list[int], num_values: int) -> list[tuple[int, int]]:
    starts = [0] + [point + 1 for point in change_points]
    ends = change_points + [num_values - 1]
    return list(zip(starts, ends))


def find_piecewise_constant_intervals(values: MeasurementValues) -> list[MeasurementValueInterval]:
    """Split the values into intervals of constant mean value."""
    changes = find_change_points_of_mean_values(values)
    return [
        MeasurementValueInterval(start, end, values.estimate_mean(start, end))
        for start, end in _interval_bounds(changes, len(values))
    ]


def find_piecewise_linear_intervals(values: MeasurementValues) -> list[MeasurementValueInterval]:
    """Split the values into intervals following a linear trend."""
    changes = find_change_points_of_linear_regression_values(values)
    intervals = []
    for start, end in _interval_bounds(changes, len(values)):
        mean, _var, slope = values.estimate_linear_regression(start, end)
        intervals.append(MeasurementValueInterval(start, end, mean, slope))
    return intervals