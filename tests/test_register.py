"""Tests for the width-tagged RegisterValue."""

from __future__ import annotations

import dataclasses
import operator

import pytest

from regbits import (
    BitIndexError,
    RegisterValue,
    RegisterValueError,
    Width,
    WidthError,
    read_field,
    rotate_left,
    write_field,
)
from regbits.base import DEFAULT_WIDTH_ENV
from regbits.register import bytes_to_int


# =========================================================================
# Construction
# =========================================================================


class TestConstruction:
    def test_width_resolved(self):
        reg = RegisterValue(0x12, "u8")
        assert reg.width is Width.W8
        assert reg.bit_length == 8

    def test_default_width(self):
        assert RegisterValue(1).width is Width.W32

    def test_default_width_from_env(self, monkeypatch):
        monkeypatch.setenv(DEFAULT_WIDTH_ENV, "16")
        assert RegisterValue(1).width is Width.W16

    def test_value_must_fit(self):
        with pytest.raises(RegisterValueError):
            RegisterValue(0x100, 8)
        with pytest.raises(RegisterValueError):
            RegisterValue(-1, 8)

    def test_bad_width(self):
        with pytest.raises(WidthError):
            RegisterValue(0, 24)

    def test_frozen(self):
        reg = RegisterValue(1, 8)
        with pytest.raises(dataclasses.FrozenInstanceError):
            reg.value = 2

    def test_equality_includes_width(self):
        assert RegisterValue(5, 8) == RegisterValue(5, Width.W8)
        assert RegisterValue(5, 8) != RegisterValue(5, 16)
        assert len({RegisterValue(5, 8), RegisterValue(5, 8), RegisterValue(5, 16)}) == 2

    def test_masks(self):
        assert RegisterValue.mask(5, 4, 16) == RegisterValue(0x01F0, 16)
        assert RegisterValue.inverse_mask(3, 5, 8) == RegisterValue(0x1F, 8)
        assert RegisterValue.mask(64, 0, 64).value == 0xFFFF_FFFF_FFFF_FFFF


# =========================================================================
# Operations
# =========================================================================


class TestOperations:
    def test_field_scenario(self):
        reg = RegisterValue(0b1101011010100001, 16)
        assert reg.read_field(4, 5) == RegisterValue(0b01010, 16)
        written = reg.write_field(4, 5, 0b11111)
        assert written.value == 0xD7F1
        assert written.width is Width.W16

    def test_write_field_accepts_register_value(self):
        reg = RegisterValue(0, 8)
        assert reg.write_field(2, 3, RegisterValue(0b101, 8)).value == 0b10100

    def test_single_bits(self):
        reg = RegisterValue(0, 8).set_bit(7).toggle_bit(0)
        assert reg.value == 0x81
        assert reg.is_bit_set(7)
        assert not reg.clear_bit(7).is_bit_set(7)

    def test_single_bit_index_checked(self):
        with pytest.raises(BitIndexError):
            RegisterValue(0, 16).set_bit(16)

    def test_rotation(self):
        reg = RegisterValue(0x800000000000000F, 64)
        assert reg.rotate_left(4).value == 0xF8
        assert reg.rotate_left(4).rotate_right(4) == reg

    def test_analysis(self):
        reg = RegisterValue(0x800000000000000F, 64)
        assert reg.count_set_bits() == 5
        assert reg.parity() is True
        assert reg.parity_fold() is True
        assert reg.first_set_bit() == 0
        assert not reg.is_power_of_two()
        assert RegisterValue(0, 8).first_set_bit() == -1
        assert RegisterValue(0x40, 8).is_power_of_two()

    def test_invert(self, samples, width):
        for v in samples:
            reg = RegisterValue(v, width)
            assert reg.invert().invert() == reg
            assert reg.count_set_bits() + reg.invert().count_set_bits() == width

    def test_agrees_with_functions(self, samples, width):
        for v in samples:
            reg = RegisterValue(v, width)
            assert reg.rotate_left(3).value == rotate_left(v, 3, width)
            assert reg.read_field(1, 4).value == read_field(v, 1, 4, width)
            assert reg.write_field(2, 5, 0x1B).value == write_field(v, 2, 5, 0x1B, width)


# =========================================================================
# Bytes and presentation
# =========================================================================


class TestBytesAndFormatting:
    def test_bytes_to_int_little(self):
        assert bytes_to_int(b"\x34\x12", 2) == 0x1234

    def test_bytes_to_int_big(self):
        assert bytes_to_int(b"\x12\x34", 2, byteorder="big") == 0x1234

    def test_bytes_to_int_short_read_padded(self):
        assert bytes_to_int(b"\x01", 4) == 0x01

    def test_from_bytes_truncates_long_input(self):
        assert RegisterValue.from_bytes(b"\xAA\xBB\xCC", 16) == RegisterValue(0xBBAA, 16)

    def test_bytes_round_trip(self, samples, width):
        for v in samples:
            reg = RegisterValue(v, width)
            data = reg.to_bytes()
            assert len(data) == width // 8
            assert RegisterValue.from_bytes(data, width) == reg
            assert RegisterValue.from_bytes(reg.to_bytes("big"), width, "big") == reg

    def test_hex_value_padding(self):
        assert RegisterValue(0xA, 8).hex_value == "0x0A"
        assert RegisterValue(0xD7F1, 16).hex_value == "0xD7F1"
        assert RegisterValue(0xF8, 64).hex_value == "0x00000000000000F8"

    def test_int_and_index(self):
        reg = RegisterValue(0b1010, 8)
        assert int(reg) == 10
        assert operator.index(reg) == 10
        assert bin(reg) == "0b1010"
        assert (int(reg) >> 1) & 1 == 1
