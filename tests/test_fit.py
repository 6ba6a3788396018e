"""Tests for the fit policy."""

import pytest

from imagelayout import FitMode, InvalidFitMode, should_resize


def test_documented_cases():
    assert should_resize(FitMode.GROW_ONLY, 100, 100, 50, 50) is False
    assert should_resize(FitMode.SHRINK_ONLY, 100, 100, 50, 50) is True
    assert should_resize(FitMode.ALWAYS, 100, 100, 50, 50) is True


@pytest.mark.parametrize("original,target,grow,shrink", [
    ((100, 100), (200, 200), True, False),
    ((100, 100), (100, 100), False, False),
    ((100, 100), (150, 50), True, True),
    ((100, 100), (100, 99), False, True),
    ((100, 100), (101, 100), True, False),
])
def test_one_directional_modes(original, target, grow, shrink):
    assert should_resize(FitMode.GROW_ONLY, *original, *target) is grow
    assert should_resize(FitMode.SHRINK_ONLY, *original, *target) is shrink
    assert should_resize(FitMode.ALWAYS, *original, *target) is True


@pytest.mark.parametrize("name,expected", [
    ("grow_only", FitMode.GROW_ONLY),
    ("shrink-only", FitMode.SHRINK_ONLY),
    ("ALWAYS", FitMode.ALWAYS),
])
def test_mode_by_name(name, expected):
    assert FitMode(name) is expected
    assert should_resize(name, 10, 10, 10, 10) is should_resize(expected, 10, 10, 10, 10)


@pytest.mark.parametrize("mode", ["sometimes", 3, None, "increase"])
def test_unknown_mode_raises(mode):
    with pytest.raises(InvalidFitMode):
        should_resize(mode, 100, 100, 50, 50)
