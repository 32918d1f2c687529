from __future__ import annotations
import logging
from typing import Optional, Sequence, Union

import numpy as np

from .anchor import AnchorInput, AnchorPoint
from .evaluator import evaluate, render_field, SampleInput
from .presets import Preset, get_preset
from .state import DEFAULT_BLEND, DEFAULT_HEIGHT, DEFAULT_WIDTH, GradientState
from .types.color_types import ColorInput, PositionInput, UnitRGB

log = logging.getLogger(__name__)


class FourPointGradient:
    """
    Four-point gradient surface.

    Owns a ``GradientState`` and turns it into pixels: float arrays,
    ``uint8`` arrays or Pillow images. Geometry and display handles belong
    to whoever draws the result; this class only forwards mutations to the
    state and pulls colors from the evaluator.
    """

    def __init__(self,
            width: float = DEFAULT_WIDTH,
            height: float = DEFAULT_HEIGHT,
            points: Optional[Sequence[AnchorInput]] = None,
            blend: float = DEFAULT_BLEND) -> None:
        self._state = GradientState(width, height, points, blend)

    @classmethod
    def from_preset(cls,
            preset: Union[str, Preset],
            width: float = DEFAULT_WIDTH,
            height: float = DEFAULT_HEIGHT) -> FourPointGradient:
        """
        Create a gradient from a named preset or a ``Preset`` instance.

        Args:
            preset: Catalog name (e.g. ``"sunset"``) or a Preset
            width: Surface width
            height: Surface height
        """
        if isinstance(preset, str):
            preset = get_preset(preset)
        return cls(width, height, preset.points, preset.blend)

    # ------------------ STATE FORWARDING ------------------
    @property
    def state(self) -> GradientState:
        return self._state

    @property
    def points(self) -> Sequence[AnchorPoint]:
        return self._state.points

    @property
    def blend(self) -> float:
        return self._state.blend

    @property
    def gradient_width(self) -> float:
        return self._state.surface_width

    @property
    def gradient_height(self) -> float:
        return self._state.surface_height

    def set_point(self, index: int, position: PositionInput, color: Optional[ColorInput] = None) -> None:
        self._state.set_point(index, position, color)

    def set_blend(self, value: float) -> None:
        self._state.set_blend(value)

    def resize(self, width: float, height: float) -> None:
        self._state.resize(width, height)

    def apply_configuration(self, points: Sequence[AnchorInput], blend: float) -> None:
        self._state.apply_configuration(points, blend)

    def apply_preset(self, preset: Union[str, Preset]) -> None:
        if isinstance(preset, str):
            preset = get_preset(preset)
        self._state.apply_preset(preset)

    # ------------------ RENDERING ------------------
    def evaluate(self, sample: SampleInput, normalized: bool = False) -> UnitRGB:
        return evaluate(self._state, sample, normalized)

    def render(self, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
        """Float RGB frame of shape ``(height, width, 3)`` in [0, 1]."""
        return render_field(self._state, width, height)

    def render_uint8(self, width: Optional[int] = None, height: Optional[int] = None) -> np.ndarray:
        frame = self.render(width, height)
        return np.clip(np.round(frame * 255.0), 0, 255).astype(np.uint8)

    def to_image(self, width: Optional[int] = None, height: Optional[int] = None):
        """Render to a Pillow ``Image`` in RGB mode."""
        from PIL import Image

        return Image.fromarray(self.render_uint8(width, height))

    def save(self, output_path, width: Optional[int] = None, height: Optional[int] = None) -> None:
        img = self.to_image(width, height)
        img.save(output_path)
        log.info("Saved %dx%d gradient to %s", img.width, img.height, output_path)

    def __repr__(self) -> str:
        return f"FourPointGradient({self._state!r})"


__all__ = ["FourPointGradient"]
