"""Bit-field helpers — ranges, rotations, gray code. No engine imports.

All functions work on non-negative Python ints treated as fixed-width
unsigned values; callers guarantee ``start <= end <= width`` and ``width >= 1``.
"""

from __future__ import annotations


def _mask(width: int) -> int:
    return (1 << width) - 1


def bit_range(x: int, width: int, start: int, end: int) -> int:
    """Bits [start, end) of ``x`` read as a ``width``-bit value, MSB first.

    bit_range(0b1011, 4, 1, 3) == 0b01
    """
    return (x >> (width - end)) & _mask(end - start)


def rotate_left(x: int, amount: int, width: int) -> int:
    amount %= width
    x = (x << amount) | (x >> (width - amount))
    return x & _mask(width)


def rotate_right(x: int, amount: int, width: int) -> int:
    amount %= width
    x = (x >> amount) | (x << (width - amount))
    return x & _mask(width)


def set_bit(x: int, position: int, bit: int) -> int:
    """Return ``x`` with the bit at LSB ``position`` forced to ``bit``."""
    if bit:
        return x | (1 << position)
    return x & ~(1 << position)


def gray_encode(x: int) -> int:
    return x ^ (x >> 1)


def gray_decode(x: int) -> int:
    """Inverse of gray_encode: prefix-xor of x with its right shifts."""
    result = x
    shifted = x >> 1
    while shifted:
        result ^= shifted
        shifted >>= 1
    return result


def trailing_set_bits(x: int, width: int) -> int:
    """Number of consecutive 1-bits from the LSB, capped at ``width``.

    An all-ones ``width``-bit value reports exactly ``width``.
    """
    count = 0
    while x & 1 and count < width:
        x >>= 1
        count += 1
    return count
