from .color_types import (
    NUM_ANCHORS,
    Scalar,
    Position,
    UnitRGB,
    PositionInput,
    ColorInput,
    element_to_array,
)

__all__ = [
    "NUM_ANCHORS",
    "Scalar",
    "Position",
    "UnitRGB",
    "PositionInput",
    "ColorInput",
    "element_to_array",
]
