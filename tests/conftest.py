"""Shared fixtures for image tests."""

import pytest
from PIL import Image

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def split_image() -> Image.Image:
    """40x20 RGB image, left half red and right half green."""
    img = Image.new("RGB", (40, 20), RED)
    img.paste(GREEN, (20, 0, 40, 20))
    return img


@pytest.fixture
def split_image_path(tmp_path, split_image):
    path = tmp_path / "split.png"
    split_image.save(path)
    return path
