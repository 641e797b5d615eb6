"""Register widths, default-width configuration, exceptions and validation.

Every operation in regbits is written once and parameterised by a Width.
This module is the leaf everything else builds on: it resolves whatever the
caller passed as ``width`` (enum, int, alias string or None) and rejects
values, indices and field descriptors that do not fit that width.
"""

from __future__ import annotations

import logging
import os
from enum import IntEnum
from typing import Union

logger = logging.getLogger(__name__)

# Environment variable consulted when a caller passes width=None
DEFAULT_WIDTH_ENV = "REGBITS_DEFAULT_WIDTH"
FALLBACK_WIDTH = 32

# Last invalid REGBITS_DEFAULT_WIDTH value already warned about
_warned_env_value: str | None = None


class Width(IntEnum):
    """Supported unsigned register widths, in bits."""

    W8 = 8
    W16 = 16
    W32 = 32
    W64 = 64

    @property
    def byte_size(self) -> int:
        return self.value // 8


WidthLike = Union[Width, int, str, None]

# Registry: alias -> Width
_WIDTHS: dict[str, Width] = {}
for _w in Width:
    for _alias in (str(_w.value), f"u{_w.value}", f"uint{_w.value}", f"uint{_w.value}_t"):
        _WIDTHS[_alias] = _w


# =============================================================================
# Exceptions
# =============================================================================

class RegbitsError(ValueError):
    """Base class for all regbits contract violations."""


class WidthError(RegbitsError):
    """Raised when a width is not one of 8, 16, 32 or 64."""


class RegisterValueError(RegbitsError):
    """Raised when a value is negative or does not fit the register width."""

    def __init__(self, value: int, width: int, message: str = ""):
        self.value = value
        self.width = width
        super().__init__(
            message
            or f"value {value:#x} does not fit a {width}-bit register "
               f"(valid: 0..{(1 << width) - 1:#x})"
        )


class BitIndexError(RegbitsError):
    """Raised when a bit index lies outside [0, width)."""

    def __init__(self, index: int, width: int):
        self.index = index
        self.width = width
        super().__init__(
            f"bit index {index} out of range for {width}-bit register "
            f"(valid: 0..{width - 1})"
        )


class FieldRangeError(RegbitsError):
    """Raised when a (start_bit, length) field does not fit the register."""

    def __init__(self, start_bit: int, length: int, width: int, reason: str):
        self.start_bit = start_bit
        self.length = length
        self.width = width
        super().__init__(
            f"invalid field start_bit={start_bit} length={length} "
            f"for {width}-bit register: {reason}"
        )


class LayoutError(RegbitsError):
    """Raised for malformed register layouts."""


# =============================================================================
# Width resolution
# =============================================================================

def default_width() -> Width:
    """Width used when an operation is called with width=None.

    Reads REGBITS_DEFAULT_WIDTH on every call; falls back to 32 bits when
    unset or invalid. An invalid value is warned about once until it changes.
    """
    raw = os.environ.get(DEFAULT_WIDTH_ENV)
    if raw is None or raw.strip() == "":
        return Width(FALLBACK_WIDTH)
    global _warned_env_value
    width = _WIDTHS.get(raw.strip().lower())
    if width is None:
        if raw != _warned_env_value:
            logger.warning(
                "Ignoring %s=%r (expected one of 8, 16, 32, 64); using %d",
                DEFAULT_WIDTH_ENV, raw, FALLBACK_WIDTH,
            )
            _warned_env_value = raw
        return Width(FALLBACK_WIDTH)
    return width


def resolve_width(width: WidthLike = None) -> Width:
    """Normalise a width argument to a Width.

    Args:
        width: Width member, int bit count, alias string ("u16", "uint32_t",
            "64", ...) or None for the configured default.

    Raises:
        WidthError: If the width is not supported.
        TypeError: If width is not one of the accepted types.
    """
    if width is None:
        return default_width()
    if isinstance(width, Width):
        return width
    if isinstance(width, bool):
        raise TypeError(f"width must be int, str or Width, not {type(width).__name__}")
    if isinstance(width, int):
        try:
            return Width(width)
        except ValueError:
            raise WidthError(
                f"unsupported register width {width} (supported: 8, 16, 32, 64)"
            ) from None
    if isinstance(width, str):
        resolved = _WIDTHS.get(width.strip().lower())
        if resolved is None:
            raise WidthError(
                f"unsupported register width {width!r} (supported: 8, 16, 32, 64)"
            )
        return resolved
    raise TypeError(f"width must be int, str or Width, not {type(width).__name__}")


# =============================================================================
# Argument validation
# =============================================================================

def require_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    return value


def check_value(value: int, width: Width) -> int:
    """Ensure value is an unsigned integer representable in width bits."""
    require_int("value", value)
    if value < 0 or value >> width:
        logger.debug("Rejected value %d for %d-bit register", value, width)
        raise RegisterValueError(value, int(width))
    return value


def check_index(index: int, width: Width) -> int:
    """Ensure index addresses a bit inside the register."""
    require_int("index", index)
    if not 0 <= index < width:
        logger.debug("Rejected bit index %d for %d-bit register", index, width)
        raise BitIndexError(index, int(width))
    return index


def check_field(start_bit: int, length: int, width: Width) -> None:
    """Ensure (start_bit, length) describes a field inside the register."""
    require_int("start_bit", start_bit)
    require_int("length", length)
    if start_bit < 0:
        reason = "start_bit must be >= 0"
    elif length < 0:
        reason = "length must be >= 0"
    elif start_bit + length > width:
        reason = f"start_bit + length = {start_bit + length} exceeds width {int(width)}"
    else:
        return
    logger.debug("Rejected field (%d, %d) for %d-bit register", start_bit, length, width)
    raise FieldRangeError(start_bit, length, int(width), reason)


def check_shift(shift: int) -> int:
    return require_int("shift", shift)
