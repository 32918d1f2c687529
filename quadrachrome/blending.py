"""Mapping from the user-facing blend control to the IDW exponent."""

from __future__ import annotations

MIN_EXPONENT = 0.5
MAX_EXPONENT = 4.0


def blend_to_exponent(blend: float) -> float:
    """Map blend in [0, 1] linearly onto the exponent range [0.5, 4.0]."""
    return MIN_EXPONENT + (MAX_EXPONENT - MIN_EXPONENT) * blend


__all__ = ["MIN_EXPONENT", "MAX_EXPONENT", "blend_to_exponent"]
