"""Population count, parity, lowest set bit and power-of-two test."""

from __future__ import annotations

from .base import WidthLike, check_value, resolve_width


def count_set_bits(reg: int, width: WidthLike = None) -> int:
    """Number of one-bits in reg."""
    w = resolve_width(width)
    check_value(reg, w)
    return bin(reg).count("1")


def parity(reg: int, width: WidthLike = None) -> bool:
    """True if reg has an odd number of set bits."""
    return bool(count_set_bits(reg, width) & 1)


def parity_fold(reg: int, width: WidthLike = None) -> bool:
    """Parity by XOR-folding the register onto itself.

    Each step folds the upper half onto the lower half, so after log2(N)
    steps bit 0 holds the XOR of every bit. Same result as parity().
    """
    w = resolve_width(width)
    check_value(reg, w)
    half = w // 2
    while half:
        reg ^= reg >> half
        half //= 2
    return bool(reg & 1)


def first_set_bit(reg: int, width: WidthLike = None) -> int:
    """Index of the least significant set bit, or -1 if reg is 0."""
    w = resolve_width(width)
    check_value(reg, w)
    if reg == 0:
        return -1
    return (reg & -reg).bit_length() - 1


def is_power_of_two(num: int, width: WidthLike = None) -> bool:
    """True if exactly one bit of num is set. Zero is not a power of two."""
    w = resolve_width(width)
    check_value(num, w)
    return num > 0 and (num & (num - 1)) == 0
