"""Quadrachrome: four-point inverse-distance-weighted color gradients."""

from .anchor import AnchorPoint
from .errors import IndexOutOfRange, InvalidDimensions
from .state import (
    GradientState,
    GradientSnapshot,
    DEFAULT_WIDTH,
    DEFAULT_HEIGHT,
    DEFAULT_BLEND,
    DEFAULT_POINTS,
)
from .blending import MIN_EXPONENT, MAX_EXPONENT, blend_to_exponent
from .evaluator import (
    ColorFieldEvaluator,
    DISTANCE_FLOOR,
    anchor_weights,
    evaluate,
    evaluate_many,
    render_field,
)
from .presets import Preset, PRESETS, get_preset, preset_names
from .gradient import FourPointGradient
from .colors import (
    hex_to_unit_rgb,
    hex_string_to_unit_rgb,
    unit_rgb_to_hex,
    unit_rgb_to_hex_string,
)

__version__ = "0.1.0"

__all__ = [
    # state
    "AnchorPoint",
    "GradientState",
    "GradientSnapshot",
    "DEFAULT_WIDTH",
    "DEFAULT_HEIGHT",
    "DEFAULT_BLEND",
    "DEFAULT_POINTS",
    # errors
    "IndexOutOfRange",
    "InvalidDimensions",
    # evaluation
    "ColorFieldEvaluator",
    "MIN_EXPONENT",
    "MAX_EXPONENT",
    "DISTANCE_FLOOR",
    "blend_to_exponent",
    "anchor_weights",
    "evaluate",
    "evaluate_many",
    "render_field",
    # presets and rendering
    "Preset",
    "PRESETS",
    "get_preset",
    "preset_names",
    "FourPointGradient",
    # colors
    "hex_to_unit_rgb",
    "hex_string_to_unit_rgb",
    "unit_rgb_to_hex",
    "unit_rgb_to_hex_string",
    "__version__",
]
