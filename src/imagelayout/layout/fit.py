"""Fit policy deciding whether a resize should run at all."""

from __future__ import annotations

from enum import Enum

from ..core.errors import InvalidFitMode


class FitMode(Enum):
    """Direction(s) in which a resize is allowed to change an image."""

    GROW_ONLY = "grow_only"
    SHRINK_ONLY = "shrink_only"
    ALWAYS = "always"

    @classmethod
    def _missing_(cls, value: object) -> FitMode | None:
        if not isinstance(value, str):
            return None
        token = value.strip().lower().replace("-", "_")
        for member in cls:
            if member.value == token:
                return member
        return None


def parse_fit_mode(mode: FitMode | str) -> FitMode:
    """Convert a fit mode name to a FitMode member.

    Raises:
        InvalidFitMode: If mode does not name a FitMode
    """
    if isinstance(mode, FitMode):
        return mode
    try:
        return FitMode(mode)
    except ValueError:
        raise InvalidFitMode(f"Unknown fit mode: {mode!r}") from None


def should_resize(
    mode: FitMode | str,
    original_width: int,
    original_height: int,
    target_width: int,
    target_height: int,
) -> bool:
    """Decide whether resizing original to target is allowed under mode.

    GROW_ONLY applies when the target is larger on at least one axis,
    SHRINK_ONLY when it is smaller on at least one axis, ALWAYS always.
    """
    mode = parse_fit_mode(mode)

    if mode is FitMode.GROW_ONLY:
        return original_width < target_width or original_height < target_height
    if mode is FitMode.SHRINK_ONLY:
        return original_width > target_width or original_height > target_height
    return True
