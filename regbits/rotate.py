"""Circular rotation.

The shift amount is reduced modulo the width first, so any int is accepted:
rotating an 8-bit value left by 11 is the same as rotating it by 3, and a
negative shift rotates the other way.
"""

from __future__ import annotations

from .base import WidthLike, check_shift, check_value, resolve_width
from .masks import all_ones


def rotate_left(reg: int, shift: int, width: WidthLike = None) -> int:
    """Rotate left; bits leaving the MSB re-enter at bit 0."""
    w = resolve_width(width)
    check_value(reg, w)
    s = check_shift(shift) % w
    if s == 0:
        return reg
    return ((reg << s) | (reg >> (w - s))) & all_ones(w)


def rotate_right(reg: int, shift: int, width: WidthLike = None) -> int:
    """Rotate right; bits leaving bit 0 re-enter at the MSB."""
    w = resolve_width(width)
    check_value(reg, w)
    s = check_shift(shift) % w
    if s == 0:
        return reg
    return ((reg >> s) | (reg << (w - s))) & all_ones(w)
