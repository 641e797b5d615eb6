"""Mask builder.

A forward mask is a run of ``length`` one-bits starting at ``start_bit``;
the inverse mask is its complement within the register width and is what
field writes use to clear a field before rewriting it.

    forward_mask(5, 4, 16)  -> 0b0000_0001_1111_0000
    inverse_mask(3, 5, 8)   -> 0b0001_1111
"""

from __future__ import annotations

from .base import WidthLike, check_field, check_index, check_value, resolve_width


def all_ones(width: WidthLike = None) -> int:
    """All N bits set for an N-bit register."""
    w = resolve_width(width)
    return (1 << w) - 1


def forward_mask(length: int, start_bit: int = 0, width: WidthLike = None) -> int:
    """Mask of ``length`` ones starting at ``start_bit`` (LSB-relative).

    Raises:
        FieldRangeError: If the field does not fit in the register.
    """
    w = resolve_width(width)
    check_field(start_bit, length, w)
    if length == w:
        # Full-width field: start_bit is necessarily 0
        return all_ones(w)
    return ((1 << length) - 1) << start_bit


def inverse_mask(length: int, start_bit: int = 0, width: WidthLike = None) -> int:
    """Ones everywhere except the described field."""
    w = resolve_width(width)
    return forward_mask(length, start_bit, w) ^ all_ones(w)


def bit_mask(index: int, width: WidthLike = None) -> int:
    """Single-bit mask ``1 << index``."""
    w = resolve_width(width)
    check_index(index, w)
    return 1 << index


def complement(value: int, width: WidthLike = None) -> int:
    """Bitwise NOT of value, kept within the register width."""
    w = resolve_width(width)
    check_value(value, w)
    return value ^ all_ones(w)
