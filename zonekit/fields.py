"""Errors and wire-format checks for single RDATA fields."""

from __future__ import annotations

INT32_MAX = 2**31 - 1


class ZoneError(Exception):
    """Base class for zone data errors."""


class ZoneSyntaxError(ZoneError):
    """Data is malformed."""


class ZoneSemanticError(ZoneError):
    """Data is well formed but its value is not acceptable."""


def check_bytes(data: bytes, size: int, field: str, rrtype: str) -> int:
    """Require a fixed-size field; return its size."""
    if len(data) < size:
        raise ZoneSyntaxError(f"Missing {field} in {rrtype}")
    return size


def check_ttl(data: bytes, field: str, rrtype: str) -> int:
    """Require a 32-bit TTL that does not exceed 2**31 - 1; return its size."""
    if len(data) < 4:
        raise ZoneSyntaxError(f"Missing {field} in {rrtype}")
    if int.from_bytes(data[:4], "big") > INT32_MAX:
        raise ZoneSemanticError(f"Invalid {field} in {rrtype}")
    return 4


def check_name(data: bytes, field: str, rrtype: str) -> int:
    """Walk the labels of an uncompressed domain name; return its length."""
    length = len(data)
    count = 0
    while count < length:
        label = data[count]
        count += 1 + label
        if not label:
            break
    if not count or count > length:
        raise ZoneSyntaxError(f"Invalid {field} in {rrtype}")
    return count


def check_string(data: bytes, field: str, rrtype: str) -> int:
    """Require a length-prefixed character string; return its length."""
    if not data or 1 + data[0] > len(data):
        raise ZoneSyntaxError(f"Invalid {field} in {rrtype}")
    return 1 + data[0]


def check_nsec(data: bytes, field: str, rrtype: str) -> int:
    """Validate a type bitmap of ascending windows; return its length."""
    length = len(data)
    count = 0
    last_window = -1
    while count + 2 < length:
        window = data[count]
        blocks = data[count + 1]
        if window <= last_window:
            raise ZoneSyntaxError(
                f"Invalid {field} in {rrtype}, windows are out-of-order")
        if not blocks or blocks > 32:
            raise ZoneSyntaxError(
                f"Invalid {field} in {rrtype}, blocks are out-of-bounds")
        count += 2 + blocks
        last_window = window
    if count != length:
        raise ZoneSyntaxError(f"Invalid {field} in {rrtype}")
    return count