"""Tests for image-level operations."""

import pytest
from PIL import Image

from imagelayout import (
    Anchor,
    FitMode,
    ImageProcessor,
    InvalidAnchor,
    InvalidDimension,
    MissingDimension,
    PillowBackend,
    RecipeLoader,
    ThumbnailMode,
)

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)

WHITE = (255, 255, 255, 255)


@pytest.fixture
def processor():
    return ImageProcessor()


def test_default_backend_is_pillow(processor):
    assert isinstance(processor.backend, PillowBackend)


def test_injected_backend_is_used(split_image_path):
    class CountingBackend(PillowBackend):
        def __init__(self):
            self.opened = []

        def open(self, path):
            self.opened.append(path)
            return super().open(path)

    backend = CountingBackend()
    processor = ImageProcessor(backend)
    processor.crop(split_image_path, 5, 5)
    assert backend.opened == [split_image_path]


def test_crop_from_path(processor, split_image_path):
    cropped = processor.crop(split_image_path, 10, 10, "bottom-right")
    assert cropped.size == (10, 10)
    assert cropped.getpixel((5, 5)) == GREEN


def test_crop_default_anchor_is_origin(processor, split_image):
    assert processor.crop(split_image, 10, 10).getpixel((5, 5)) == RED


def test_crop_bad_anchor(processor, split_image):
    with pytest.raises(InvalidAnchor):
        processor.crop(split_image, 10, 10, [1])


def test_resize_derives_height(processor, split_image):
    assert processor.resize(split_image, width=20).size == (20, 10)


def test_resize_skipped_returns_source(processor, split_image):
    result = processor.resize(split_image, width=80, fit=FitMode.SHRINK_ONLY)
    assert result is split_image


def test_resize_missing_dimension(processor, split_image):
    with pytest.raises(MissingDimension):
        processor.resize(split_image)


def test_rotate(processor, split_image):
    assert processor.rotate(split_image, 90).size == (20, 40)


def test_thumbnail_inset_is_padded(processor):
    img = Image.new("RGB", (400, 200), BLUE)
    thumb = processor.thumbnail(img, 100, 100, mode=ThumbnailMode.INSET)
    assert thumb.size == (100, 100)
    assert thumb.getpixel((50, 10)) == WHITE
    assert thumb.getpixel((50, 50)) == BLUE + (255,)


def test_thumbnail_outbound_fills_canvas(processor):
    img = Image.new("RGB", (400, 200), BLUE)
    thumb = processor.thumbnail(img, 100, 100)
    assert thumb.size == (100, 100)
    assert thumb.getpixel((0, 0)) == BLUE + (255,)


def test_thumbnail_anchor_and_background(processor):
    img = Image.new("RGB", (20, 20), RED)
    thumb = processor.thumbnail(img, 50, 40, anchor=Anchor.TOP_LEFT, background_color="000000")
    assert thumb.getpixel((0, 0)) == RED + (255,)
    assert thumb.getpixel((49, 39)) == (0, 0, 0, 255)


def test_watermark_shrinks_large_mark(processor):
    base = Image.new("RGB", (100, 50), RED)
    mark = Image.new("RGBA", (200, 40), BLUE + (255,))
    result = processor.watermark(base, mark)
    assert result.size == (100, 50)
    # mark becomes 100x20 pasted at (0, 15)
    assert result.getpixel((50, 25)) == BLUE
    assert result.getpixel((50, 5)) == RED
    assert result.getpixel((50, 40)) == RED


def test_watermark_from_paths(processor, tmp_path):
    base_path = tmp_path / "base.png"
    mark_path = tmp_path / "mark.png"
    Image.new("RGB", (100, 100), RED).save(base_path)
    Image.new("RGB", (10, 10), GREEN).save(mark_path)
    result = processor.watermark(base_path, mark_path, "bottom-right")
    assert result.getpixel((95, 95)) == GREEN
    assert result.getpixel((85, 85)) == RED


def test_apply_recipe(processor, tmp_path, split_image):
    mark_path = tmp_path / "mark.png"
    Image.new("RGB", (4, 4), BLUE).save(mark_path)
    recipe = RecipeLoader().load_string(f"""
name: card
steps:
  - op: resize
    width: 20
  - op: crop
    width: 10
    height: 10
    anchor: top-right
  - op: watermark
    image: {mark_path}
    anchor: TL
""")
    result = processor.apply(recipe, split_image)
    assert result.size == (10, 10)
    assert result.getpixel((0, 0)) == BLUE
    assert result.getpixel((9, 9)) == GREEN


def test_watermark_shrinks_tall_mark_to_base_height(processor):
    base = Image.new("RGB", (100, 100), RED)
    mark = Image.new("RGB", (50, 300), BLUE)
    result = processor.watermark(base, mark)
    # mark becomes 17x100 pasted at (41, 0)
    assert result.getpixel((49, 0)) == BLUE
    assert result.getpixel((49, 99)) == BLUE
    assert result.getpixel((40, 50)) == RED
    assert result.getpixel((58, 50)) == RED


def test_crop_larger_than_source(processor, split_image):
    with pytest.raises(InvalidDimension):
        processor.crop(split_image, 50, 10)
