"""imagelayout - layout geometry for cropping, resizing, thumbnailing and watermarking images."""

from .core import (
    Size,
    Offset,
    ImageLayoutError,
    InvalidAnchor,
    InvalidFitMode,
    MissingDimension,
    InvalidDimension,
    RecipeError,
)
from .layout import (
    Anchor,
    FitMode,
    LayoutPlan,
    LayoutPlanner,
    resolve_anchor,
    should_resize,
    plan_dimensions,
    plan_crop,
    plan_resize,
    plan_thumbnail,
    plan_watermark,
)
from .raster import RasterBackend, ThumbnailMode, PillowBackend
from .recipes import Recipe, RecipeStep, RecipeLoader
from .processor import ImageProcessor

__all__ = [
    "Size",
    "Offset",
    "ImageLayoutError",
    "InvalidAnchor",
    "InvalidFitMode",
    "MissingDimension",
    "InvalidDimension",
    "RecipeError",
    "Anchor",
    "FitMode",
    "LayoutPlan",
    "LayoutPlanner",
    "resolve_anchor",
    "should_resize",
    "plan_dimensions",
    "plan_crop",
    "plan_resize",
    "plan_thumbnail",
    "plan_watermark",
    "RasterBackend",
    "ThumbnailMode",
    "PillowBackend",
    "Recipe",
    "RecipeStep",
    "RecipeLoader",
    "ImageProcessor",
]
