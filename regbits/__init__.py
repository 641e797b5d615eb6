"""
regbits - width-generic bit manipulation for 8/16/32/64-bit registers.

Usage:
    from regbits import read_field, write_field, rotate_left, RegisterValue

    read_field(0xD6A1, 4, 5, width=16)            # 0b01010
    write_field(0xD6A1, 4, 5, 0b11111, width=16)  # 0xD7F1
    rotate_left(0x800000000000000F, 4, width=64)  # 0xF8

    reg = RegisterValue(0x800000000000000F, 64)
    reg.count_set_bits()                          # 5

Every function takes an optional ``width``; when omitted the width comes from
the REGBITS_DEFAULT_WIDTH environment variable (default 32).
"""

from .base import (
    BitIndexError,
    FieldRangeError,
    LayoutError,
    RegbitsError,
    RegisterValueError,
    Width,
    WidthError,
    default_width,
    resolve_width,
)
from .masks import all_ones, bit_mask, complement, forward_mask, inverse_mask
from .fields import read_field, write_field
from .bits import clear_bit, is_bit_set, set_bit, toggle_bit
from .rotate import rotate_left, rotate_right
from .analysis import count_set_bits, first_set_bit, is_power_of_two, parity, parity_fold
from .register import RegisterValue
from .layout import Field, RegisterLayout, parse_field, parse_layout

__all__ = [
    "Width",
    "default_width",
    "resolve_width",
    "RegbitsError",
    "WidthError",
    "RegisterValueError",
    "BitIndexError",
    "FieldRangeError",
    "LayoutError",
    "all_ones",
    "forward_mask",
    "inverse_mask",
    "bit_mask",
    "complement",
    "read_field",
    "write_field",
    "set_bit",
    "clear_bit",
    "toggle_bit",
    "is_bit_set",
    "rotate_left",
    "rotate_right",
    "count_set_bits",
    "parity",
    "parity_fold",
    "first_set_bit",
    "is_power_of_two",
    "RegisterValue",
    "Field",
    "RegisterLayout",
    "parse_field",
    "parse_layout",
]

__version__ = "0.1.0"
