from .hex import (
    hex_to_unit_rgb,
    hex_string_to_unit_rgb,
    unit_rgb_to_hex,
    unit_rgb_to_hex_string,
)
from .color_normalizer import normalize_color_input, normalize_position_input

__all__ = [
    "hex_to_unit_rgb",
    "hex_string_to_unit_rgb",
    "unit_rgb_to_hex",
    "unit_rgb_to_hex_string",
    "normalize_color_input",
    "normalize_position_input",
]
