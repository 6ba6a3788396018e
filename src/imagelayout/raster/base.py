"""Protocol for raster backends that execute layout plans."""

from enum import Enum
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from ..core.geometry import Offset, Size


class ThumbnailMode(Enum):
    """How a thumbnail is fitted to its box."""

    INSET = "inset"  # fit inside the box
    OUTBOUND = "outbound"  # cover the box, then crop to it


@runtime_checkable
class RasterBackend(Protocol):
    """Protocol for pixel-level image backends.

    Any class providing these methods satisfies the protocol. Every
    operation returns a new image and leaves its inputs untouched.
    """

    def open(self, path: str | Path) -> Any:
        """Open an image file."""
        ...

    def size(self, image: Any) -> Size:
        """Return the dimensions of an image."""
        ...

    def crop(self, image: Any, offset: Offset, size: Size) -> Any:
        """Cut a size box out of image, starting at offset."""
        ...

    def resize(self, image: Any, size: Size, resample: Any = None) -> Any:
        """Scale image to exactly size."""
        ...

    def rotate(self, image: Any, angle: float, background_color: str, background_alpha: int | None) -> Any:
        """Rotate image by angle degrees, filling uncovered area with the background."""
        ...

    def paste(self, image: Any, overlay: Any, offset: Offset) -> Any:
        """Composite overlay onto image at offset."""
        ...

    def thumbnail(self, image: Any, box: Size, mode: ThumbnailMode) -> Any:
        """Scale image down toward box according to mode."""
        ...

    def create_canvas(self, size: Size, background_color: str, background_alpha: int | None) -> Any:
        """Create a blank image filled with the background."""
        ...

    def save(self, image: Any, path: str | Path) -> None:
        """Write image to path."""
        ...
