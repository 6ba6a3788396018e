"""Image operations combining layout plans with a raster backend."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .core.geometry import Size
from .layout.anchors import Anchor, AnchorLike
from .layout.fit import FitMode
from .layout.planner import plan_crop, plan_resize, plan_thumbnail, plan_watermark
from .raster.base import RasterBackend, ThumbnailMode
from .raster.pillow import PillowBackend
from .recipes import Recipe

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "ffffff"
BACKGROUND_ALPHA = None


class ImageProcessor:
    """Crops, resizes, rotates, thumbnails and watermarks images.

    Geometry comes from the layout planners; pixels are handled by the
    backend given at construction time. Every operation accepts either a
    path or an image already opened by that backend, and returns a new
    image.

    Example:
        processor = ImageProcessor()
        thumb = processor.thumbnail("photo.jpg", 200, 200)
        processor.backend.save(thumb, "thumb.png")
    """

    def __init__(
        self,
        backend: RasterBackend | None = None,
        background_color: str = BACKGROUND_COLOR,
        background_alpha: int | None = BACKGROUND_ALPHA,
    ) -> None:
        """Initialize the processor.

        Args:
            backend: Raster backend to use. Defaults to a PillowBackend.
            background_color: Hex fill for rotations and thumbnail canvases
            background_alpha: Fill opacity percentage; None is opaque
        """
        self.backend = backend if backend is not None else PillowBackend()
        self.background_color = background_color
        self.background_alpha = background_alpha

    def _load(self, source: str | Path | Any) -> Any:
        if isinstance(source, (str, Path)):
            return self.backend.open(source)
        return source

    def crop(self, source: str | Path | Any, width: int, height: int, anchor: AnchorLike = (0, 0)) -> Any:
        """Crop a width x height region located at anchor."""
        img = self._load(source)
        plan = plan_crop(self.backend.size(img), Size(width, height), anchor)
        return self.backend.crop(img, plan.offset, plan.target_size)

    def resize(
        self,
        source: str | Path | Any,
        width: int | None = None,
        height: int | None = None,
        preserve_aspect: bool = True,
        fit: FitMode | str = FitMode.ALWAYS,
        resample: Any = None,
    ) -> Any:
        """Resize an image, unless the fit mode rules it out.

        Returns the source image itself when no resize is needed.
        """
        img = self._load(source)
        plan = plan_resize(self.backend.size(img), width, height, preserve_aspect, fit)
        if not plan.should_apply:
            logger.debug("skipping resize to %s under %s", plan.target_size, fit)
            return img
        return self.backend.resize(img, plan.target_size, resample)

    def rotate(
        self,
        source: str | Path | Any,
        angle: float,
        background_color: str | None = None,
        background_alpha: int | None = None,
    ) -> Any:
        """Rotate clockwise by angle degrees."""
        img = self._load(source)
        return self.backend.rotate(
            img,
            angle,
            background_color or self.background_color,
            background_alpha if background_alpha is not None else self.background_alpha,
        )

    def thumbnail(
        self,
        source: str | Path | Any,
        width: int,
        height: int,
        mode: ThumbnailMode = ThumbnailMode.OUTBOUND,
        anchor: AnchorLike = Anchor.CENTER,
        background_color: str | None = None,
        background_alpha: int | None = None,
    ) -> Any:
        """Make a width x height thumbnail on a background canvas.

        The scaled image is pasted onto the canvas at anchor, so INSET
        thumbnails are padded with the background color.
        """
        img = self._load(source)
        box = Size(width, height)
        thumb = self.backend.thumbnail(img, box, mode)
        plan = plan_thumbnail(box, self.backend.size(thumb), anchor)

        canvas = self.backend.create_canvas(
            plan.target_size,
            background_color or self.background_color,
            background_alpha if background_alpha is not None else self.background_alpha,
        )
        return self.backend.paste(canvas, thumb, plan.offset)

    def watermark(
        self,
        source: str | Path | Any,
        watermark: str | Path | Any,
        anchor: AnchorLike = Anchor.CENTER,
    ) -> Any:
        """Paste a watermark onto an image, shrinking it first if it is too big."""
        img = self._load(source)
        mark = self._load(watermark)

        plan = plan_watermark(self.backend.size(img), self.backend.size(mark), anchor)
        if plan.resize is not None and plan.resize.should_apply:
            mark = self.backend.resize(mark, plan.resize.target_size)

        return self.backend.paste(img, mark, plan.offset)

    def apply(self, recipe: Recipe, source: str | Path | Any) -> Any:
        """Run every step of a recipe on source, in order."""
        img = self._load(source)
        for step in recipe.steps:
            operation = getattr(self, step.op)
            logger.debug("recipe %r: %s %s", recipe.name, step.op, step.params)
            if step.op == "watermark":
                params = dict(step.params)
                img = operation(img, params.pop("image"), **params)
            else:
                img = operation(img, **step.params)
        return img
