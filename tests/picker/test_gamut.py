from __future__ import annotations

import numpy as np
import pytest

from picker import Color, SafetyMode, hsv_to_rgb, is_print_safe, is_safe, is_web_safe, snap, to_print_safe, to_web_safe
from picker.gamut import to_web_safe_array, web_safe_mask


def test_web_safe_predicate_and_snap() -> None:
    assert is_web_safe(Color(51, 102, 153))
    assert is_web_safe(Color(0, 255, 204))
    assert not is_web_safe(Color(50, 100, 150))
    assert to_web_safe(Color(50, 100, 150)) == Color(51, 102, 153)
    assert to_web_safe(Color(25, 26, 230)) == Color(0, 51, 255)


def test_web_snap_per_channel_all_levels() -> None:
    for x in range(256):
        snapped = to_web_safe(Color(x, x, x))
        assert is_web_safe(snapped)
        assert to_web_safe(snapped) == snapped
        assert abs(snapped.r - x) <= 25


def test_web_safe_array_matches_scalar() -> None:
    levels = np.arange(256)
    rgb = np.stack([levels, levels[::-1], (levels * 7) % 256], axis=1)
    snapped = to_web_safe_array(rgb)
    for row, out in zip(rgb, snapped):
        expected = to_web_safe(Color(int(row[0]), int(row[1]), int(row[2])))
        assert tuple(int(v) for v in out) == expected.rgb
    assert web_safe_mask(snapped).all()
    assert not web_safe_mask(np.array([[50, 100, 150]]))[0]


def test_print_safe_examples() -> None:
    assert is_print_safe(Color(255, 255, 255))
    assert is_print_safe(Color(0, 0, 0))
    assert is_print_safe(Color(255, 0, 0))
    assert is_print_safe(Color(252, 0, 0))
    assert not is_print_safe(Color(254, 0, 0))
    assert not is_print_safe(Color(253, 0, 0))

    teal = Color(10, 20, 30)
    assert not is_print_safe(teal)
    fixed = to_print_safe(teal)
    assert fixed == Color(10, 21, 31)
    assert is_print_safe(fixed)


def test_print_snap_of_full_brightness_is_print_safe() -> None:
    for hue in range(0, 360, 7):
        for sat in (0.0, 0.13, 0.5, 0.87, 1.0):
            snapped = to_print_safe(hsv_to_rgb(float(hue), sat, 1.0))
            assert is_print_safe(snapped)
            assert to_print_safe(snapped) == snapped


def test_print_snap_of_grays_is_print_safe() -> None:
    for x in range(256):
        snapped = to_print_safe(Color(x, x, x))
        assert snapped.is_achromatic()
        assert is_print_safe(snapped)


@pytest.mark.parametrize("mode", list(SafetyMode))
def test_snap_lands_in_mode(mode: SafetyMode) -> None:
    for color in [Color(12, 34, 56), Color(250, 250, 3), Color(128, 0, 255)]:
        assert is_safe(snap(color, mode), mode)


def test_none_mode_passes_through() -> None:
    c = Color(12, 34, 56)
    assert snap(c, SafetyMode.NONE) is c
    assert is_safe(c, SafetyMode.NONE)


def test_unknown_mode_raises() -> None:
    with pytest.raises(ValueError):
        snap(Color(0, 0, 0), "web")  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        is_safe(Color(0, 0, 0), "web")  # type: ignore[arg-type]


def test_print_snap_is_print_safe_over_a_color_ramp() -> None:
    for b in range(0, 256, 3):
        for r in range(0, b + 1, 5):
            snapped = to_print_safe(Color(r, r // 2, b))
            assert is_print_safe(snapped)
