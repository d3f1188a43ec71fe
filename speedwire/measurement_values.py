"""Time-stamped measurement values kept in a ring buffer, with simple statistics."""

from __future__ import annotations

from dataclasses import dataclass

from speedwire.ring_buffer import RingBuffer

FLT_MAX = 3.4028234663852886e38
"""Variance reported for samples too small to estimate one."""

_MASK32 = 0xFFFFFFFF


def time_difference(time1: int, time2: int) -> int:
    """Signed difference ``time1 - time2`` of two wrapping 32-bit timestamps."""
    diff = (time1 - time2) & _MASK32
    return diff - (1 << 32) if diff & 0x80000000 else diff


def abs_time_difference(time1: int, time2: int) -> int:
    """Absolute difference of two wrapping 32-bit timestamps."""
    return abs(time_difference(time1, time2))


@dataclass(frozen=True)
class TimestampDoublePair:
    """A measurement value together with its timestamp."""

    value: float = 999999.0
    time: int = 0


class MeasurementValues(RingBuffer[TimestampDoublePair]):
    """Ring buffer of measurements, added with monotonically increasing timestamps."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)
        self.value_string = ""

    def add_measurement(self, value: float, time: int) -> None:
        """Add a measurement, replacing the oldest one if the buffer is full."""
        self.add(TimestampDoublePair(value, time))

    def find_closest_index(self, time: int) -> int | None:
        """Index of the measurement time-wise closest to ``time``, or None if empty."""
        if not len(self):
            return None
        low, high = 0, len(self) - 1
        while low + 1 < high:
            mid = (low + high) // 2
            if time_difference(time, self[mid].time) > 0:
                low = mid
            else:
                high = mid
        low_is_closer = abs_time_difference(time, self[low].time) < abs_time_difference(time, self[high].time)
        return low if low_is_closer else high

    def find_closest_measurement(self, time: int) -> TimestampDoublePair:
        """Measurement closest to ``time``; a default pair if the buffer is empty."""
        index = self.find_closest_index(time)
        if index is None:
            return TimestampDoublePair()
        return self[index]

    def interpolate_closest_values(self, time: int) -> float:
        """Interpolate the two measurements time-wise closest to ``time``.

        Returns 0.0 for an empty buffer.
        """
        center = self.find_closest_index(time)
        if center is None:
            return 0.0
        count = len(self)
        if count == 1:
            return self[center].value
        before = center - 1 if center > 0 else center
        after = center + 1 if center < count - 1 else center
        diff_before = abs_time_difference(time, self[before].time)
        diff_center = abs_time_difference(time, self[center].time)
        diff_after = abs_time_difference(time, self[after].time)
        if after == center or (before != center and diff_before <= diff_after):
            total = diff_before + diff_center
            if total == 0:
                return self[center].value
            return (diff_center * self[before].value + diff_before * self[center].value) / total
        total = diff_center + diff_after
        if total == 0:
            return self[center].value
        return (diff_after * self[center].value + diff_center * self[after].value) / total

    def estimate_mean(self, start: int | None = None, end: int | None = None) -> float:
        """Mean of the values from ``start`` to ``end`` inclusive; all values by default."""
        values = self._window(start, end)
        return sum(values) / len(values)

    def estimate_mean_and_variance(self, start: int, end: int) -> tuple[float, float]:
        """Sample mean and sample variance of the values from ``start`` to ``end`` inclusive."""
        values = self._window(start, end)
        n = len(values)
        y_sum = sum(values)
        y_sq_sum = sum(v * v for v in values)
        mean = y_sum / n
        var = FLT_MAX if n <= 1 else (y_sq_sum - mean * y_sum) / (n - 1)
        return mean, var

    def estimate_linear_regression(self, start: int, end: int) -> tuple[float, float, float]:
        """Mean, sample variance and regression slope of the values from ``start`` to ``end``.

        The x coordinate of each value is its offset from ``start``.
        """
        values = self._window(start, end)
        n = len(values)
        m = n - 1
        y_sum = sum(values)
        y_sq_sum = sum(v * v for v in values)
        xy_sum = sum(v * x for x, v in enumerate(values))
        mean = y_sum / n
        var = FLT_MAX if n <= 1 else (y_sq_sum - mean * y_sum) / m

        # integer arithmetic where possible for numerical accuracy
        x_mean_num, x_mean_den = m, 2
        x_var_num = m * (m + 1) * (2 * m + 1) * x_mean_den * x_mean_den - x_mean_num * x_mean_num * n * 6
        x_var_den = 6 * x_mean_den * x_mean_den * n
        xy_var_num = xy_sum * x_mean_den - x_mean_num * y_sum
        xy_var_den = x_mean_den * n
        denominator = x_var_num * xy_var_den
        slope = (xy_var_num * x_var_den) / denominator if denominator != 0 else 0.0
        return mean, var, slope

    def _window(self, start: int | None, end: int | None) -> list[float]:
        size = len(self)
        start = 0 if start is None else start
        end = size - 1 if end is None else end
        if size == 0 or not 0 <= start <= end < size:
            raise IndexError("measurement range out of bounds")
        return [pair.value for pair in self[start:end + 1]]