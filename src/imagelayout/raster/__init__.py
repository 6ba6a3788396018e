"""Raster backends that execute layout plans on pixels."""

from .base import RasterBackend, ThumbnailMode
from .pillow import PillowBackend, parse_color

__all__ = ["RasterBackend", "ThumbnailMode", "PillowBackend", "parse_color"]
