"""Anchor point system for positioning content within containers."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from numbers import Integral
from typing import Union

from ..core.errors import InvalidAnchor
from ..core.geometry import Offset, check_dimension


class Anchor(Enum):
    """Named anchor points within a container's bounding box.

    Lookup by value is lenient: case is ignored, underscores may stand in
    for hyphens, and the two-letter short codes (``TL``, ``CB``...) are
    accepted.
    """
    # Edges
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    CENTER = "center"

    # Corners
    TOP_LEFT = "top-left"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_RIGHT = "bottom-right"

    # Edge centers
    CENTER_LEFT = "center-left"
    CENTER_RIGHT = "center-right"
    CENTER_TOP = "center-top"
    CENTER_BOTTOM = "center-bottom"

    @classmethod
    def _missing_(cls, value: object) -> Anchor | None:
        if not isinstance(value, str):
            return None
        token = value.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == token:
                return member
        return _SHORT_CODES.get(token.upper())


_SHORT_CODES: dict[str, Anchor] = {
    "T": Anchor.TOP,
    "R": Anchor.RIGHT,
    "B": Anchor.BOTTOM,
    "L": Anchor.LEFT,
    "C": Anchor.CENTER,
    "TL": Anchor.TOP_LEFT,
    "TR": Anchor.TOP_RIGHT,
    "BL": Anchor.BOTTOM_LEFT,
    "BR": Anchor.BOTTOM_RIGHT,
    "CL": Anchor.CENTER_LEFT,
    "CR": Anchor.CENTER_RIGHT,
    "CT": Anchor.CENTER_TOP,
    "CB": Anchor.CENTER_BOTTOM,
}


# Mapping from anchor to normalized placement (x, y)
# X: 0=left, 1=right | Y: 0=top, 1=bottom
# Plain edges are not centered along the other axis: "top" sits at the
# top-left corner, "right" at the top-right, "bottom" at the bottom-left.
ANCHOR_POSITIONS: dict[Anchor, tuple[float, float]] = {
    Anchor.TOP: (0.0, 0.0),
    Anchor.LEFT: (0.0, 0.0),
    Anchor.TOP_LEFT: (0.0, 0.0),

    Anchor.RIGHT: (1.0, 0.0),
    Anchor.TOP_RIGHT: (1.0, 0.0),

    Anchor.BOTTOM: (0.0, 1.0),
    Anchor.BOTTOM_LEFT: (0.0, 1.0),

    Anchor.BOTTOM_RIGHT: (1.0, 1.0),

    Anchor.CENTER: (0.5, 0.5),

    Anchor.CENTER_LEFT: (0.0, 0.5),
    Anchor.CENTER_RIGHT: (1.0, 0.5),
    Anchor.CENTER_TOP: (0.5, 0.0),
    Anchor.CENTER_BOTTOM: (0.5, 1.0),
}


AnchorLike = Union[Anchor, str, Offset, Sequence[int]]


def parse_anchor(anchor: AnchorLike) -> Anchor | Offset:
    """Normalize an anchor to either an Anchor member or an explicit Offset.

    Args:
        anchor: Anchor member, anchor token, Offset, or (x, y) pair

    Returns:
        The Anchor member, or the explicit Offset

    Raises:
        InvalidAnchor: If the token is unknown or the pair is malformed
    """
    if isinstance(anchor, (Anchor, Offset)):
        return anchor

    if isinstance(anchor, str):
        try:
            return Anchor(anchor)
        except ValueError:
            raise InvalidAnchor(f"Unknown anchor: {anchor!r}") from None

    if isinstance(anchor, Sequence):
        if len(anchor) != 2:
            raise InvalidAnchor(
                f"Explicit anchor must have exactly two components, got {len(anchor)}"
            )
        x, y = anchor
        for component in (x, y):
            if isinstance(component, bool) or not isinstance(component, Integral):
                raise InvalidAnchor(f"Explicit anchor components must be integers, got {anchor!r}")
        return Offset(int(x), int(y))

    raise InvalidAnchor(f"Unsupported anchor type: {type(anchor).__name__}")


def _place(free_space: int, factor: float) -> int:
    if factor == 0.0:
        return 0
    if factor == 1.0:
        return free_space
    # floor division keeps the bias toward the top-left for odd remainders
    return free_space // 2


def resolve_anchor(
    container_width: int,
    container_height: int,
    content_width: int,
    content_height: int,
    anchor: AnchorLike,
) -> Offset:
    """Compute the offset of content placed at an anchor inside a container.

    Args:
        container_width: Width of the container in pixels
        container_height: Height of the container in pixels
        content_width: Width of the content in pixels
        content_height: Height of the content in pixels
        anchor: Symbolic anchor or explicit (x, y) offset

    Returns:
        Offset of the content's top-left corner. Explicit offsets are
        returned unchanged; content larger than the container gives
        negative components.
    """
    container_width = check_dimension("container_width", container_width)
    container_height = check_dimension("container_height", container_height)
    content_width = check_dimension("content_width", content_width)
    content_height = check_dimension("content_height", content_height)

    anchor = parse_anchor(anchor)
    if isinstance(anchor, Offset):
        return anchor

    norm_x, norm_y = ANCHOR_POSITIONS[anchor]
    return Offset(
        _place(container_width - content_width, norm_x),
        _place(container_height - content_height, norm_y),
    )
