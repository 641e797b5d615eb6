"""Field accessor: read and read-modify-write of contiguous bit fields."""

from __future__ import annotations

from .base import RegisterValueError, WidthLike, check_field, check_value, resolve_width
from .masks import forward_mask, inverse_mask


def read_field(reg: int, start_bit: int, length: int, width: WidthLike = None) -> int:
    """Read ``length`` bits starting at ``start_bit``.

    Returns:
        The field value right-aligned (occupying bits [0, length)).

    Raises:
        RegisterValueError: If reg does not fit the width.
        FieldRangeError: If the field does not fit the width.
    """
    w = resolve_width(width)
    check_value(reg, w)
    check_field(start_bit, length, w)
    return (reg >> start_bit) & forward_mask(length, 0, w)


def write_field(
    reg: int,
    start_bit: int,
    length: int,
    new_value: int,
    width: WidthLike = None,
) -> int:
    """Replace the field at ``start_bit`` with ``new_value``.

    Bits of ``new_value`` above ``length`` are discarded without error.
    Every bit outside the field keeps its value.

    Args:
        reg: Current register value.
        start_bit: LSB position of the field.
        length: Field length in bits.
        new_value: Non-negative value to store; truncated to ``length`` bits.
        width: Register width.

    Returns:
        The updated register value.
    """
    w = resolve_width(width)
    check_value(reg, w)
    check_field(start_bit, length, w)
    if isinstance(new_value, bool) or not isinstance(new_value, int):
        raise TypeError(f"new_value must be an int, not {type(new_value).__name__}")
    if new_value < 0:
        raise RegisterValueError(
            new_value, int(w), f"field value {new_value} must be non-negative",
        )

    cleared = reg & inverse_mask(length, start_bit, w)
    truncated = new_value & forward_mask(length, 0, w)
    return cleared | (truncated << start_bit)
