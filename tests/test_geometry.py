"""Tests for the Size and Offset value types."""

from dataclasses import FrozenInstanceError

import pytest

from imagelayout import InvalidDimension, Offset, Size


def test_size_unpacks():
    width, height = Size(640, 480)
    assert (width, height) == (640, 480)


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 4), (2.0, 3), (True, 3), ("4", 4)])
def test_size_rejects_invalid(width, height):
    with pytest.raises(InvalidDimension):
        Size(width, height)


def test_size_is_immutable():
    size = Size(1, 1)
    with pytest.raises(FrozenInstanceError):
        size.width = 5


def test_contains():
    assert Size(10, 10).contains(Size(10, 3))
    assert not Size(10, 10).contains(Size(11, 3))
    assert not Size(10, 10).contains(Size(3, 11))


def test_offset_abs_and_unpack():
    assert abs(Offset(-3, 4)) == Offset(3, 4)
    x, y = Offset(-1, 2)
    assert (x, y) == (-1, 2)
    assert Offset.origin() == Offset(0, 0)
