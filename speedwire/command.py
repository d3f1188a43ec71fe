"""Speedwire inverter command identifiers and packet id generation."""

from __future__ import annotations

import threading
from enum import IntFlag


class Command(IntFlag):
    """Command identifiers used in speedwire inverter packets."""

    NONE = 0x00000000

    ID_MASK = 0xFFFC0000
    COMPONENT_MASK = 0x00030000
    RW_MASK = 0x0000FF00
    REQUEST_TYPE_MASK = 0x000000FF

    DISCOVERY = 0x00000000
    AC = 0x51000000
    STATUS = 0x51800000
    TEMPERATURE = 0x52000000
    ID_UNKNOWN = 0x53400000
    DC = 0x53800000
    ENERGY = 0x54000000
    DEVICE = 0x58000000
    YIELD_BY_MINUTE = 0x70000000
    EVENT = 0x70100000
    YIELD_BY_DAY = 0x70200000
    AUTHENTICATION = 0xFFFC0000

    COMPONENT_0 = 0x00000000
    COMPONENT_1 = 0x00010000
    COMPONENT_2 = 0x00020000
    COMPONENT_3 = 0x00030000

    WRITE = 0x00000100
    READ = 0x00000200
    RW_LOGIN = 0x00000400

    QUERY_REQUEST = 0x00000000
    QUERY_RESPONSE = 0x00000001
    UPDATE_RESPONSE = 0x0000000A
    LOGIN_REQUEST = 0x0000000C
    LOGIN_RESPONSE = 0x0000000D
    UPDATE_REQUEST = 0x0000000E
    LOGOFF_REQUEST = 0x000000E0

    AC_QUERY = 0x51000000 | 0x00000200
    STATUS_QUERY = 0x51800000 | 0x00000200
    TEMPERATURE_QUERY = 0x52000000 | 0x00000200
    DC_QUERY = 0x53800000 | 0x00000200
    UNKNOWN = 0x53400000 | 0x00000200
    ENERGY_QUERY = 0x54000000 | 0x00000200
    DEVICE_QUERY = 0x58000000 | 0x00000200
    YIELD_BY_MINUTE_QUERY = 0x70000000 | 0x00000200
    YIELD_BY_DAY_QUERY = 0x70200000 | 0x00000200
    EVENT_QUERY = 0x70100000 | 0x00000200

    LOGIN = 0xFFFC0000 | 0x00010000 | 0x00000400 | 0x0C
    LOGOFF = 0xFFFC0000 | 0x00010000 | 0x00000100 | 0xE0

    DEVICE_WRITE = 0x58000000 | 0x00000100


class _PacketIdCounter:
    """Thread-safe 16-bit packet id counter with the top bit always set."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value = ((self._value + 1) | 0x8000) & 0xFFFF
            return self._value


_packet_ids = _PacketIdCounter()


def next_packet_id() -> int:
    """Increment the shared packet id and return it; bit 15 is always set."""
    return _packet_ids.next()