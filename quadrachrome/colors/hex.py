from __future__ import annotations
import string
from ..types.color_types import UnitRGB

HEX_MAX = 0xFFFFFF


def hex_to_unit_rgb(value: int) -> UnitRGB:
    """
    Convert a packed 24-bit color (e.g. ``0xFFFF00``) to unit RGB.

    Args:
        value: Integer in ``[0, 0xFFFFFF]``

    Returns:
        Tuple of three floats in [0, 1]
    """
    if not 0 <= value <= HEX_MAX:
        raise ValueError(f"Hex color must be in [0, 0x{HEX_MAX:06X}], got {value!r}")
    return (
        ((value >> 16) & 255) / 255,
        ((value >> 8) & 255) / 255,
        (value & 255) / 255,
    )


def hex_string_to_unit_rgb(text: str) -> UnitRGB:
    """Parse ``#rrggbb``, ``rrggbb``, ``#rgb`` or ``0xrrggbb`` into unit RGB."""
    digits = text.strip()
    if digits[:2].lower() == "0x":
        digits = digits[2:]
    digits = digits.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color string: {text!r}")
    return hex_to_unit_rgb(int(digits, 16))


def unit_rgb_to_hex(color: UnitRGB) -> int:
    """Pack a unit RGB color into a 24-bit integer, rounding each channel."""
    r, g, b = (int(round(c * 255)) for c in color)
    return (r << 16) | (g << 8) | b


def unit_rgb_to_hex_string(color: UnitRGB) -> str:
    return f"#{unit_rgb_to_hex(color):06x}"
