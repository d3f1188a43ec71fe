"""Host utilities: sleeping, clocks, time formatting and hex dumps."""

from __future__ import annotations

import time
from datetime import datetime


def sleep(millis: int) -> None:
    """Sleep for the given number of milliseconds."""
    if millis < 0:
        raise ValueError("sleep time must not be negative")
    time.sleep(millis / 1000.0)


def tick_count_ms() -> int:
    """Monotonic tick count in milliseconds."""
    return time.monotonic_ns() // 1_000_000


def unix_epoch_time_ms() -> int:
    """Current time in milliseconds since the unix epoch."""
    return time.time_ns() // 1_000_000


def epoch_ms_to_string(epoch: int) -> str:
    """Format a unix epoch time in milliseconds as local time with millisecond precision."""
    seconds, millis = divmod(epoch, 1000)
    stamp = datetime.fromtimestamp(seconds)
    return f"{stamp:%Y-%m-%d %H:%M:%S}.{millis:03d}"


def abs_time_difference(time1: int, time2: int) -> int:
    """Absolute difference of two millisecond timestamps."""
    return abs(time1 - time2)


def hexdump(data: bytes | bytearray | memoryview) -> str:
    """Hex dump with 16 bytes per line, each line prefixed by its offset."""
    raw = bytes(data)
    lines = []
    for offset in range(0, len(raw), 16):
        chunk = raw[offset:offset + 16]
        lines.append(f"{offset:08x}: " + " ".join(f"{byte:02x}" for byte in chunk))
    return "\n".join(lines)