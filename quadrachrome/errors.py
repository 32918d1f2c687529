"""Errors raised when a gradient state mutation is rejected."""

from __future__ import annotations


class IndexOutOfRange(IndexError):
    """Anchor index outside ``[0, 3]`` or the wrong number of anchors."""


class InvalidDimensions(ValueError):
    """Surface width or height that is not a finite positive number."""


__all__ = ["IndexOutOfRange", "InvalidDimensions"]
