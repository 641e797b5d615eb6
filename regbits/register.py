"""Width-tagged register value.

RegisterValue bundles an unsigned int with its width so callers don't have
to thread ``width=`` through every call. All operations return new instances;
the dataclass is frozen.

Usage:
    from regbits import RegisterValue

    reg = RegisterValue(0b1101011010100001, 16)
    reg.read_field(4, 5)              # RegisterValue(value=10, width=<Width.W16: 16>)
    reg.write_field(4, 5, 0b11111).hex_value   # '0xD7F1'
"""

from __future__ import annotations

from dataclasses import dataclass

from . import analysis, bits, fields, masks, rotate
from .base import Width, WidthLike, check_value, resolve_width


def bytes_to_int(data: bytes, size: int, byteorder: str = "little") -> int:
    """First ``size`` bytes of data as an unsigned int, zero-filling a short buffer."""
    return int.from_bytes(bytes(data).ljust(size, b"\x00")[:size], byteorder=byteorder)


@dataclass(frozen=True)
class RegisterValue:
    """An unsigned integer of a fixed bit width."""

    value: int
    width: Width = None  # type: ignore[assignment]  # resolved in __post_init__

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", resolve_width(self.width))
        check_value(self.value, self.width)

    def _new(self, value: int) -> RegisterValue:
        return RegisterValue(value, self.width)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def mask(cls, length: int, start_bit: int = 0, width: WidthLike = None) -> RegisterValue:
        w = resolve_width(width)
        return cls(masks.forward_mask(length, start_bit, w), w)

    @classmethod
    def inverse_mask(cls, length: int, start_bit: int = 0, width: WidthLike = None) -> RegisterValue:
        w = resolve_width(width)
        return cls(masks.inverse_mask(length, start_bit, w), w)

    @classmethod
    def from_bytes(cls, data: bytes, width: WidthLike = None, byteorder: str = "little") -> RegisterValue:
        """Build a register from raw memory bytes (little-endian by default)."""
        w = resolve_width(width)
        return cls(bytes_to_int(data, w.byte_size, byteorder), w)

    def to_bytes(self, byteorder: str = "little") -> bytes:
        return self.value.to_bytes(self.width.byte_size, byteorder=byteorder)

    # ------------------------------------------------------------------
    # Single bits
    # ------------------------------------------------------------------

    def set_bit(self, index: int) -> RegisterValue:
        return self._new(bits.set_bit(self.value, index, self.width))

    def clear_bit(self, index: int) -> RegisterValue:
        return self._new(bits.clear_bit(self.value, index, self.width))

    def toggle_bit(self, index: int) -> RegisterValue:
        return self._new(bits.toggle_bit(self.value, index, self.width))

    def is_bit_set(self, index: int) -> bool:
        return bits.is_bit_set(self.value, index, self.width)

    # ------------------------------------------------------------------
    # Fields and rotation
    # ------------------------------------------------------------------

    def read_field(self, start_bit: int, length: int) -> RegisterValue:
        """Field value right-aligned, in a register of the same width."""
        return self._new(fields.read_field(self.value, start_bit, length, self.width))

    def write_field(self, start_bit: int, length: int, new_value: int | RegisterValue) -> RegisterValue:
        if isinstance(new_value, RegisterValue):
            new_value = new_value.value
        return self._new(fields.write_field(self.value, start_bit, length, new_value, self.width))

    def rotate_left(self, shift: int) -> RegisterValue:
        return self._new(rotate.rotate_left(self.value, shift, self.width))

    def rotate_right(self, shift: int) -> RegisterValue:
        return self._new(rotate.rotate_right(self.value, shift, self.width))

    def invert(self) -> RegisterValue:
        return self._new(masks.complement(self.value, self.width))

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def count_set_bits(self) -> int:
        return analysis.count_set_bits(self.value, self.width)

    def parity(self) -> bool:
        return analysis.parity(self.value, self.width)

    def parity_fold(self) -> bool:
        return analysis.parity_fold(self.value, self.width)

    def first_set_bit(self) -> int:
        return analysis.first_set_bit(self.value, self.width)

    def is_power_of_two(self) -> bool:
        return analysis.is_power_of_two(self.value, self.width)

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    @property
    def bit_length(self) -> int:
        """Register width in bits (not the int's significant bit count)."""
        return int(self.width)

    @property
    def hex_value(self) -> str:
        """Upper-case hex, one digit per nibble of the register."""
        return f"0x{self.value:0{self.width // 4}X}"

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value
