"""Raster backend built on Pillow."""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from ..core.geometry import Offset, Size
from ..layout.anchors import Anchor, resolve_anchor
from .base import ThumbnailMode


def parse_color(color: str, alpha: int | None = None) -> tuple[int, int, int, int]:
    """Convert a hex color and an opacity percentage to an RGBA tuple.

    Args:
        color: Hex color, with or without '#', in 3 or 6 digit form
        alpha: Opacity from 0 (transparent) to 100 (opaque); None is opaque

    Returns:
        (r, g, b, a) tuple with components in 0-255
    """
    digits = color.lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) != 6:
        raise ValueError(f"Invalid hex color: {color!r}")
    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))

    if alpha is None:
        alpha = 100
    if not 0 <= alpha <= 100:
        raise ValueError(f"Alpha must be between 0 and 100, got {alpha}")

    return (r, g, b, round(alpha * 255 / 100))


def _has_alpha(image: Image.Image) -> bool:
    return image.mode in ("RGBA", "LA", "PA") or "transparency" in image.info


def _scaled(size: Size, ratio: float) -> Size:
    return Size(max(1, round(size.width * ratio)), max(1, round(size.height * ratio)))


class PillowBackend:
    """RasterBackend implementation using PIL images.

    Every operation works on a copy; input images are never modified.
    """

    def open(self, path: str | Path) -> Image.Image:
        with Image.open(path) as img:
            img.load()
            return img.copy()

    def size(self, image: Image.Image) -> Size:
        return Size(image.width, image.height)

    def crop(self, image: Image.Image, offset: Offset, size: Size) -> Image.Image:
        return image.crop((offset.x, offset.y, offset.x + size.width, offset.y + size.height))

    def resize(self, image: Image.Image, size: Size, resample: Image.Resampling | None = None) -> Image.Image:
        if resample is None:
            return image.resize((size.width, size.height))
        return image.resize((size.width, size.height), resample=resample)

    def rotate(
        self,
        image: Image.Image,
        angle: float,
        background_color: str,
        background_alpha: int | None,
    ) -> Image.Image:
        """Rotate clockwise by angle degrees, growing the image to fit."""
        fill = parse_color(background_color, background_alpha)
        if fill[3] < 255 or _has_alpha(image):
            image = image.convert("RGBA")
        else:
            image = image.convert("RGB")
            fill = fill[:3]
        # PIL rotates counter-clockwise
        return image.rotate(-angle, expand=True, fillcolor=fill)

    def paste(self, image: Image.Image, overlay: Image.Image, offset: Offset) -> Image.Image:
        result = image.copy()
        if _has_alpha(overlay):
            overlay = overlay.convert("RGBA")
            result.paste(overlay, (offset.x, offset.y), overlay)
        else:
            result.paste(overlay, (offset.x, offset.y))
        return result

    def thumbnail(self, image: Image.Image, box: Size, mode: ThumbnailMode) -> Image.Image:
        """Scale image toward box without ever enlarging it.

        INSET keeps the whole image inside the box. OUTBOUND scales so the
        box is covered, then crops the center to at most the box size.
        """
        current = self.size(image)
        width_ratio = box.width / current.width
        height_ratio = box.height / current.height

        if mode is ThumbnailMode.INSET:
            ratio = min(width_ratio, height_ratio)
        else:
            ratio = max(width_ratio, height_ratio)

        result = image.copy()
        if ratio < 1:
            current = _scaled(current, ratio)
            result = self.resize(result, current, Image.Resampling.LANCZOS)

        if mode is ThumbnailMode.OUTBOUND:
            crop_size = Size(min(box.width, current.width), min(box.height, current.height))
            if crop_size != current:
                offset = resolve_anchor(
                    current.width, current.height, crop_size.width, crop_size.height, Anchor.CENTER
                )
                result = self.crop(result, offset, crop_size)

        return result

    def create_canvas(self, size: Size, background_color: str, background_alpha: int | None) -> Image.Image:
        return Image.new("RGBA", (size.width, size.height), parse_color(background_color, background_alpha))

    def save(self, image: Image.Image, path: str | Path) -> None:
        path = Path(path)
        if path.suffix.lower() in (".jpg", ".jpeg") and image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        image.save(path)
