"""Named bit fields and register layouts.

A RegisterLayout describes which fields live where in one register, so a raw
value can be decoded into named parts and built back up from them:

    ctrl = parse_layout("CTRL", {
        "width": 16,
        "fields": {
            "EN":   {"bit": 0, "description": "Enable"},
            "MODE": {"bits": [1, 3], "values": {"0": "off", "5": "burst"}},
        },
    })
    ctrl.decode(0x000B)        # {"EN": 1, "MODE": "burst"}
    ctrl.encode(EN=1, MODE=5)  # 0x000B
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .base import LayoutError, Width, WidthLike, check_field, require_int, resolve_width
from .fields import read_field, write_field
from .masks import forward_mask

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Field:
    """A named contiguous run of bits within a register."""

    name: str
    start_bit: int
    length: int = 1
    description: str = ""
    values: dict[str, str] | None = None  # str(field value) -> label

    @property
    def is_flag(self) -> bool:
        return self.length == 1

    def mask(self, width: WidthLike = None) -> int:
        """Bitmask covering this field."""
        return forward_mask(self.length, self.start_bit, width)

    def extract(self, raw: int, width: WidthLike = None) -> int:
        """Right-aligned value of this field in raw."""
        return read_field(raw, self.start_bit, self.length, width)

    def insert(self, raw: int, value: int, width: WidthLike = None) -> int:
        """Return raw with this field replaced by value (excess bits dropped)."""
        return write_field(raw, self.start_bit, self.length, value, width)

    def decode(self, raw: int, width: WidthLike = None) -> str | int:
        """Label from ``values`` for this field, or the plain int if unlabelled."""
        val = self.extract(raw, width)
        if not self.values:
            return val
        return self.values.get(str(val), f"unknown({val})")


@dataclass(frozen=True)
class RegisterLayout:
    """A register width together with its named fields."""

    name: str
    width: Width = None  # type: ignore[assignment]  # resolved in __post_init__
    fields: tuple[Field, ...] = field(default_factory=tuple)
    description: str = ""

    def __post_init__(self) -> None:
        w = resolve_width(self.width)
        object.__setattr__(self, "width", w)
        object.__setattr__(self, "fields", tuple(self.fields))

        seen: dict[str, Field] = {}
        occupied = 0
        for f in self.fields:
            if f.name in seen:
                raise LayoutError(f"{self.name}: duplicate field name '{f.name}'")
            check_field(f.start_bit, f.length, w)
            fmask = f.mask(w)
            if occupied & fmask:
                other = next(o for o in seen.values() if o.mask(w) & fmask)
                raise LayoutError(
                    f"{self.name}: field '{f.name}' overlaps field '{other.name}'"
                )
            occupied |= fmask
            seen[f.name] = f

    def get_field(self, name: str) -> Field | None:
        """Look up a field by name."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def decode(self, raw: int) -> dict[str, str | int]:
        """Field name -> decoded value, in layout order."""
        return {f.name: f.decode(raw, self.width) for f in self.fields}

    def active_flags(self, raw: int) -> list[str]:
        """Names of the one-bit fields that read 1."""
        return [f.name for f in self.fields if f.is_flag and f.extract(raw, self.width)]

    def update(self, raw: int, **values: int) -> int:
        """Write the named fields into raw, leaving every other bit alone.

        Raises:
            LayoutError: If a name does not match any field.
        """
        for name, value in values.items():
            f = self.get_field(name)
            if f is None:
                raise LayoutError(f"{self.name}: no field named '{name}'")
            raw = f.insert(raw, value, self.width)
        return raw

    def encode(self, **values: int) -> int:
        """Build a register value from named field values (others zero)."""
        return self.update(0, **values)


# =============================================================================
# Dict parsing
# =============================================================================

def parse_field(name: str, definition: dict) -> Field:
    """Parse a field definition.

    A field is either ``{"bit": n}`` or ``{"bits": [low, high]}`` (inclusive),
    optionally with "description" and "values".
    """
    bit = definition.get("bit")
    bits_raw = definition.get("bits")
    if (bit is None) == (bits_raw is None):
        raise LayoutError(f"field '{name}': exactly one of 'bit' or 'bits' is required")

    if bit is not None:
        start_bit, length = require_int(f"field '{name}' bit", bit), 1
    else:
        if not isinstance(bits_raw, (list, tuple)) or len(bits_raw) != 2:
            raise LayoutError(
                f"field '{name}': 'bits' must be a [low, high] pair, got {bits_raw!r}"
            )
        low = require_int(f"field '{name}' low bit", bits_raw[0])
        high = require_int(f"field '{name}' high bit", bits_raw[1])
        if high < low:
            raise LayoutError(f"field '{name}': high bit {high} is below low bit {low}")
        start_bit, length = low, high - low + 1

    return Field(
        name=name,
        start_bit=start_bit,
        length=length,
        description=definition.get("description", ""),
        values=definition.get("values"),
    )


def parse_layout(name: str, definition: dict) -> RegisterLayout:
    """Parse a register layout from a plain dict.

    Keys: "width" (default: configured default width), "description",
    "fields" (mapping of field name to field definition).
    """
    fields_section = definition.get("fields", {})
    parsed = [parse_field(f_name, f_def) for f_name, f_def in fields_section.items()]
    layout = RegisterLayout(
        name=name,
        width=definition.get("width"),
        fields=parsed,
        description=definition.get("description", ""),
    )
    logger.debug("Parsed layout %s: %d-bit, %d fields", name, layout.width, len(parsed))
    return layout
