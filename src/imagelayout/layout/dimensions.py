"""Target size planning for resize requests."""

from __future__ import annotations

from ..core.errors import MissingDimension
from ..core.geometry import Size, check_dimension


def _scale_ceil(value: int, numerator: int, denominator: int) -> int:
    """Return ceil(value * numerator / denominator) without float error."""
    return -(-value * numerator // denominator)


def plan_dimensions(
    original_width: int,
    original_height: int,
    requested_width: int | None = None,
    requested_height: int | None = None,
    preserve_aspect: bool = True,
) -> Size:
    """Fill in and reconcile a requested width and height.

    A missing side is derived from the original aspect ratio. When both
    sides are given with preserve_aspect on a non-square original, the
    longer original axis keeps its requested value and the other one is
    recomputed from it; the shorter-axis request is ignored. Derived sides
    are rounded up.

    Args:
        original_width: Current image width
        original_height: Current image height
        requested_width: Desired width, or None to derive it
        requested_height: Desired height, or None to derive it
        preserve_aspect: Whether to lock both sides to the original ratio

    Returns:
        Size of the resize target

    Raises:
        MissingDimension: If both requested sides are None
        InvalidDimension: If any given dimension is not a positive integer
    """
    if requested_width is None and requested_height is None:
        raise MissingDimension("Specify at least one of width or height")

    original_width = check_dimension("original_width", original_width)
    original_height = check_dimension("original_height", original_height)

    if requested_width is None:
        height = check_dimension("requested_height", requested_height)
        return Size(_scale_ceil(height, original_width, original_height), height)

    width = check_dimension("requested_width", requested_width)
    if requested_height is None:
        return Size(width, _scale_ceil(width, original_height, original_width))

    height = check_dimension("requested_height", requested_height)
    if preserve_aspect:
        if original_width > original_height:
            height = _scale_ceil(width, original_height, original_width)
        elif original_height > original_width:
            width = _scale_ceil(height, original_width, original_height)

    return Size(width, height)
