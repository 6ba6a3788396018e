"""Core value types and errors."""

from .geometry import Size, Offset
from .errors import (
    ImageLayoutError,
    InvalidAnchor,
    InvalidFitMode,
    MissingDimension,
    InvalidDimension,
    RecipeError,
)

__all__ = [
    "Size",
    "Offset",
    "ImageLayoutError",
    "InvalidAnchor",
    "InvalidFitMode",
    "MissingDimension",
    "InvalidDimension",
    "RecipeError",
]
