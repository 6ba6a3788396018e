"""Per-operation layout plans built from anchors, fit policy and dimensions."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.errors import InvalidDimension
from ..core.geometry import Offset, Size
from .anchors import Anchor, AnchorLike, resolve_anchor
from .dimensions import plan_dimensions
from .fit import FitMode, should_resize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutPlan:
    """Geometry handed to a raster backend for a single operation.

    Attributes:
        target_size: Size of the resulting box (crop region, resized image,
            thumbnail canvas, or effective watermark)
        offset: Position of the box or pasted content
        should_apply: Whether the backend should perform the operation
        resize: Preparatory resize of the pasted content, if one is needed
    """

    target_size: Size
    offset: Offset
    should_apply: bool
    resize: LayoutPlan | None = None


def plan_crop(source: Size, target: Size, anchor: AnchorLike = (0, 0)) -> LayoutPlan:
    """Plan a crop of target size out of source at anchor.

    Raises:
        InvalidDimension: If target is larger than source on either axis
    """
    if not source.contains(target):
        raise InvalidDimension(f"Crop size {target} exceeds source size {source}")
    offset = resolve_anchor(source.width, source.height, target.width, target.height, anchor)
    plan = LayoutPlan(target_size=target, offset=offset, should_apply=True)
    logger.debug("crop %s -> %s", source, plan)
    return plan


def plan_resize(
    source: Size,
    width: int | None = None,
    height: int | None = None,
    preserve_aspect: bool = True,
    fit: FitMode | str = FitMode.ALWAYS,
) -> LayoutPlan:
    """Plan a resize of source, gated by the fit policy."""
    target = plan_dimensions(source.width, source.height, width, height, preserve_aspect)
    apply = should_resize(fit, source.width, source.height, target.width, target.height)
    plan = LayoutPlan(target_size=target, offset=Offset.origin(), should_apply=apply)
    logger.debug("resize %s -> %s", source, plan)
    return plan


def plan_thumbnail(box: Size, content: Size, anchor: AnchorLike = Anchor.CENTER) -> LayoutPlan:
    """Plan pasting a thumbnail of size content onto a canvas of size box.

    Backend thumbnailing may return content slightly larger than the box
    along one axis, so both offset components are made non-negative.
    """
    offset = resolve_anchor(box.width, box.height, content.width, content.height, anchor)
    plan = LayoutPlan(target_size=box, offset=abs(offset), should_apply=True)
    logger.debug("thumbnail %s in %s -> %s", content, box, plan)
    return plan


def plan_watermark(base: Size, watermark: Size, anchor: AnchorLike = Anchor.CENTER) -> LayoutPlan:
    """Plan pasting a watermark onto a base image.

    A watermark larger than the base on either axis is first shrunk to
    the base width, keeping its aspect ratio. If it is still taller than
    the base, it is shrunk to the base height instead, so the result always
    fits inside the base.
    """
    resize = None
    if not base.contains(watermark):
        resize = plan_resize(watermark, width=base.width, fit=FitMode.SHRINK_ONLY)
        fitted = resize.target_size if resize.should_apply else watermark
        if fitted.height > base.height:
            resize = plan_resize(watermark, height=base.height, fit=FitMode.SHRINK_ONLY)
        if resize.should_apply:
            watermark = resize.target_size

    offset = resolve_anchor(base.width, base.height, watermark.width, watermark.height, anchor)
    plan = LayoutPlan(target_size=watermark, offset=offset, should_apply=True, resize=resize)
    logger.debug("watermark on %s -> %s", base, plan)
    return plan


class LayoutPlanner:
    """Groups the per-operation plan functions behind one object.

    Holds no state; every method is a pure computation.
    """

    crop = staticmethod(plan_crop)
    resize = staticmethod(plan_resize)
    thumbnail = staticmethod(plan_thumbnail)
    watermark = staticmethod(plan_watermark)
