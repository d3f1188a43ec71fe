"""Conversions for ip addresses, network masks and ethernet mac addresses."""

from __future__ import annotations

import ipaddress
from typing import Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def is_ipv4(address: str) -> bool:
    """True if the string holds an ipv4 address in dot notation."""
    try:
        ipaddress.IPv4Address(address)
    except ValueError:
        return False
    return True


def is_ipv6(address: str) -> bool:
    """True if the string holds an ipv6 address in colon notation."""
    try:
        ipaddress.IPv6Address(address)
    except ValueError:
        return False
    return True


def to_net_mask_v4(prefix_length: int) -> ipaddress.IPv4Address:
    """Ipv4 network mask for the given prefix length."""
    if not 0 <= prefix_length <= 32:
        raise ValueError(f"invalid ipv4 prefix length {prefix_length}")
    bits = ((1 << prefix_length) - 1) << (32 - prefix_length)
    return ipaddress.IPv4Address(bits)


def to_net_mask_v6(prefix_length: int) -> ipaddress.IPv6Address:
    """Ipv6 network mask for the given prefix length."""
    if not 0 <= prefix_length <= 128:
        raise ValueError(f"invalid ipv6 prefix length {prefix_length}")
    bits = ((1 << prefix_length) - 1) << (128 - prefix_length)
    return ipaddress.IPv6Address(bits)


def _to_address(host: str | IPAddress) -> IPAddress:
    if isinstance(host, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return host
    return ipaddress.ip_address(strip_ip_address(host))


def reside_on_same_subnet(host1: str | IPAddress, host2: str | IPAddress, prefix_length: int) -> bool:
    """True if both hosts lie in the same subnet of the given prefix length.

    Hosts of different address families never share a subnet.
    """
    addr1 = _to_address(host1)
    addr2 = _to_address(host2)
    if addr1.version != addr2.version:
        return False
    mask_func = to_net_mask_v4 if addr1.version == 4 else to_net_mask_v6
    mask = int(mask_func(prefix_length))
    return (int(addr1) & mask) == (int(addr2) & mask)


def hex_to_int(nibble: str) -> int:
    """Value of a single hexadecimal digit."""
    if len(nibble) != 1 or nibble not in "0123456789abcdefABCDEF":
        raise ValueError(f"not a hexadecimal digit: {nibble!r}")
    return int(nibble, 16)


def to_mac_address(mac: str) -> bytes:
    """Parse a mac address of six hex byte pairs separated by ':' or '-'."""
    parts = mac.strip().replace("-", ":").split(":")
    if len(parts) != 6 or any(len(part) not in (1, 2) for part in parts):
        raise ValueError(f"invalid mac address: {mac!r}")
    result = bytearray()
    for part in parts:
        value = 0
        for digit in part:
            value = (value << 4) | hex_to_int(digit)
        result.append(value)
    return bytes(result)


def mac_to_string(mac: bytes | bytearray) -> str:
    """Format six mac address bytes as colon separated lower case hex pairs."""
    if len(mac) != 6:
        raise ValueError("a mac address has six bytes")
    return ":".join(f"{byte:02x}" for byte in mac)


def strip_ip_address(address: str) -> str:
    """Remove brackets, zone indexes, prefix lengths and escape characters from an address."""
    stripped = address.strip().replace("\\", "")
    for separator in ("%", "/"):
        stripped = stripped.split(separator, 1)[0]
    return stripped.strip("[] \t")