"""Decoding of base32hex (extended hex alphabet) values such as NSEC3 hashes."""

from __future__ import annotations

from zonekit.fields import ZoneSyntaxError


def _digit(char: int) -> int:
    if 0x30 <= char <= 0x39:  # 0-9
        return char - 0x30
    if 0x41 <= char <= 0x56:  # A-V
        return char - 0x41 + 10
    if 0x61 <= char <= 0x76:  # a-v
        return char - 0x61 + 10
    return -1


def decode_base32hex(text: str | bytes) -> bytes:
    """Decode unpadded, case-insensitive base32hex; trailing partial bits are dropped."""
    data = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    out = bytearray()
    accumulator = 0
    pending = 0
    for position, char in enumerate(data):
        value = _digit(char)
        if value < 0:
            raise ValueError(f"invalid base32hex character at offset {position}")
        accumulator = (accumulator << 5) | value
        pending += 5
        if pending >= 8:
            pending -= 8
            out.append((accumulator >> pending) & 0xFF)
            accumulator &= (1 << pending) - 1
    return bytes(out)


def parse_base32(text: str | bytes) -> bytes:
    """Decode a base32hex field into its length-prefixed wire form."""
    length = (len(text) * 5) // 8
    if length > 255:
        raise ZoneSyntaxError("Invalid base32 value, too long")
    try:
        decoded = decode_base32hex(text)
    except ValueError as exc:
        raise ZoneSyntaxError(f"Invalid base32 value: {exc}") from exc
    return bytes([length]) + decoded