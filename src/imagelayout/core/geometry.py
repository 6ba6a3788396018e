"""Value types for image geometry."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral
from typing import Iterator

from .errors import InvalidDimension


def check_dimension(name: str, value: object) -> int:
    """Validate a single pixel dimension and return it as an int.

    Raises:
        InvalidDimension: If value is not an integer greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidDimension(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidDimension(f"{name} must be greater than zero, got {value}")
    return int(value)


@dataclass(frozen=True)
class Size:
    """Width and height of an image or box, in pixels."""

    width: int
    height: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", check_dimension("width", self.width))
        object.__setattr__(self, "height", check_dimension("height", self.height))

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height

    def contains(self, other: Size) -> bool:
        """Whether other fits inside this size on both axes."""
        return other.width <= self.width and other.height <= self.height


@dataclass(frozen=True)
class Offset:
    """Top-left position of content within a container."""

    x: int
    y: int

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __abs__(self) -> Offset:
        return Offset(abs(self.x), abs(self.y))

    @staticmethod
    def origin() -> Offset:
        return Offset(0, 0)
