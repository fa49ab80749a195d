"""64-bit bit manipulation helpers used by the scanner."""

from __future__ import annotations

MASK64 = (1 << 64) - 1


def add_overflow(value1: int, value2: int) -> tuple[int, bool]:
    """Add two unsigned 64-bit values; return the wrapped sum and whether it overflowed."""
    total = (value1 & MASK64) + (value2 & MASK64)
    return total & MASK64, total > MASK64


def count_ones(bits: int) -> int:
    """Number of set bits in a 64-bit value."""
    return (bits & MASK64).bit_count()


def trailing_zeroes(bits: int) -> int:
    """Number of zero bits below the lowest set bit; 64 for zero."""
    bits &= MASK64
    if not bits:
        return 64
    return (bits & -bits).bit_length() - 1


def clear_lowest_bit(bits: int) -> int:
    """Clear the lowest set bit of a 64-bit value."""
    return bits & (bits - 1) & MASK64


def leading_zeroes(bits: int) -> int:
    """Number of zero bits above the highest set bit; 64 for zero."""
    return 64 - (bits & MASK64).bit_length()


def prefix_xor(bitmask: int) -> int:
    """Each result bit is the exclusive-or of the input bits at and below it."""
    value = bitmask & MASK64
    shift = 1
    while shift < 64:
        value = (value ^ (value << shift)) & MASK64
        shift <<= 1
    return value