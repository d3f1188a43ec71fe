"""Big and little endian access to unsigned integer fields in packet buffers.

Emeter packets carry their multi-byte fields in big endian byte order,
inverter packets in little endian byte order.
"""

from __future__ import annotations

from typing import Literal

ByteOrder = Literal["big", "little"]


def _get(buffer: bytes | bytearray | memoryview, offset: int, size: int, order: ByteOrder) -> int:
    if offset < 0 or offset + size > len(buffer):
        raise IndexError(f"{size}-byte field at offset {offset} exceeds buffer of {len(buffer)} bytes")
    return int.from_bytes(bytes(buffer[offset:offset + size]), order)


def _set(buffer: bytearray | memoryview, offset: int, size: int, order: ByteOrder, value: int) -> None:
    if offset < 0 or offset + size > len(buffer):
        raise IndexError(f"{size}-byte field at offset {offset} exceeds buffer of {len(buffer)} bytes")
    buffer[offset:offset + size] = value.to_bytes(size, order)


def get_uint8(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read an unsigned byte."""
    return _get(buffer, offset, 1, "big")


def set_uint8(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write an unsigned byte."""
    _set(buffer, offset, 1, "big", value)


def get_uint16_be(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a big endian unsigned 16-bit integer."""
    return _get(buffer, offset, 2, "big")


def get_uint32_be(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a big endian unsigned 32-bit integer."""
    return _get(buffer, offset, 4, "big")


def get_uint64_be(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a big endian unsigned 64-bit integer."""
    return _get(buffer, offset, 8, "big")


def set_uint16_be(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a big endian unsigned 16-bit integer."""
    _set(buffer, offset, 2, "big", value)


def set_uint32_be(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a big endian unsigned 32-bit integer."""
    _set(buffer, offset, 4, "big", value)


def set_uint64_be(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a big endian unsigned 64-bit integer."""
    _set(buffer, offset, 8, "big", value)


def get_uint16_le(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a little endian unsigned 16-bit integer."""
    return _get(buffer, offset, 2, "little")


def get_uint32_le(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a little endian unsigned 32-bit integer."""
    return _get(buffer, offset, 4, "little")


def get_uint64_le(buffer: bytes | bytearray | memoryview, offset: int) -> int:
    """Read a little endian unsigned 64-bit integer."""
    return _get(buffer, offset, 8, "little")


def set_uint16_le(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a little endian unsigned 16-bit integer."""
    _set(buffer, offset, 2, "little", value)


def set_uint32_le(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a little endian unsigned 32-bit integer."""
    _set(buffer, offset, 4, "little", value)


def set_uint64_le(buffer: bytearray | memoryview, offset: int, value: int) -> None:
    """Write a little endian unsigned 64-bit integer."""
    _set(buffer, offset, 8, "little", value)