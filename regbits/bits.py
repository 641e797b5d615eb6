"""Single-bit set / clear / toggle / test."""

from __future__ import annotations

from .base import WidthLike, check_index, check_value, resolve_width
from .masks import all_ones, bit_mask


def set_bit(reg: int, index: int, width: WidthLike = None) -> int:
    """Set bit ``index`` to 1."""
    w = resolve_width(width)
    check_value(reg, w)
    return reg | bit_mask(index, w)


def clear_bit(reg: int, index: int, width: WidthLike = None) -> int:
    """Clear bit ``index`` to 0."""
    w = resolve_width(width)
    check_value(reg, w)
    return reg & (bit_mask(index, w) ^ all_ones(w))


def toggle_bit(reg: int, index: int, width: WidthLike = None) -> int:
    """Flip bit ``index``."""
    w = resolve_width(width)
    check_value(reg, w)
    return reg ^ bit_mask(index, w)


def is_bit_set(reg: int, index: int, width: WidthLike = None) -> bool:
    """True if bit ``index`` is 1."""
    w = resolve_width(width)
    check_value(reg, w)
    check_index(index, w)
    return bool((reg >> index) & 1)
