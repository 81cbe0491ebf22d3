from __future__ import annotations

import logging

import pytest

from common import settings
from picker import Color, Direction, PolarState, SafetyMode, is_print_safe, navigate_linear, navigate_polar

RED = Color(255, 0, 0)
CENTER = PolarState()


# --- polar: unconstrained ---


def test_unconstrained_right_from_center() -> None:
    result = navigate_polar(CENTER, Direction.RIGHT, SafetyMode.NONE)
    assert result is not None
    state, color = result
    assert color == Color(255, 242, 242)
    assert state.color == color
    assert state.hue == pytest.approx(0.0)
    assert state.saturation == pytest.approx(0.05)


@pytest.mark.parametrize(
    "direction, hue, expected",
    [
        (Direction.UP, 90.0, (249, 255, 242)),
        (Direction.LEFT, 180.0, (242, 255, 255)),
        (Direction.DOWN, 270.0, (249, 242, 255)),
    ],
)
def test_unconstrained_directions(direction: Direction, hue: float, expected: tuple[int, int, int]) -> None:
    result = navigate_polar(CENTER, direction, SafetyMode.NONE)
    assert result is not None
    state, color = result
    assert state.hue == pytest.approx(hue)
    assert color.rgb == expected


def test_unconstrained_saturation_clamps_at_rim() -> None:
    result = navigate_polar(PolarState(0.0, 1.0, RED), Direction.RIGHT, SafetyMode.NONE)
    assert result is not None
    state, color = result
    assert state.saturation == 1.0
    assert color == RED


def test_hue_wraps_into_range() -> None:
    result = navigate_polar(PolarState(0.0, 0.5, Color(255, 128, 128)), Direction.DOWN, SafetyMode.NONE)
    assert result is not None
    state, _ = result
    assert 270.0 < state.hue < 360.0


def test_step_override() -> None:
    result = navigate_polar(CENTER, Direction.RIGHT, SafetyMode.NONE, step=0.5)
    assert result is not None
    assert result[0].saturation == pytest.approx(0.5)


# --- polar: constrained ---


def test_web_safe_right_from_white() -> None:
    result = navigate_polar(CENTER, Direction.RIGHT, SafetyMode.WEB_SAFE)
    assert result is not None
    state, color = result
    assert color == Color(255, 204, 204)
    assert 0.09 <= state.saturation <= 0.12
    assert state.hue == pytest.approx(0.0)


def test_print_safe_right_from_white() -> None:
    result = navigate_polar(CENTER, Direction.RIGHT, SafetyMode.PRINT_SAFE)
    assert result is not None
    _, color = result
    assert color == Color(255, 252, 252)
    assert is_print_safe(color)


def test_search_exhausted_at_rim_returns_none(caplog: pytest.LogCaptureFixture) -> None:
    start = PolarState(0.0, 1.0, RED)
    with caplog.at_level(logging.DEBUG, logger="picker.navigator"):
        assert navigate_polar(start, Direction.RIGHT, SafetyMode.WEB_SAFE) is None
    assert "polar search exhausted" in caplog.text
    # 入力状態は不変
    assert start == PolarState(0.0, 1.0, RED)


def test_search_budget_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PICKER_POLAR_MAX_ITER", "5")
    settings.reload_from_env()
    assert navigate_polar(CENTER, Direction.RIGHT, SafetyMode.WEB_SAFE) is None
    assert navigate_polar(CENTER, Direction.RIGHT, SafetyMode.WEB_SAFE, max_iter=500) is not None


def test_from_color_seeds_position() -> None:
    state = PolarState.from_color(Color(0, 255, 0))
    assert state.hue == pytest.approx(120.0)
    assert state.saturation == pytest.approx(1.0)
    assert state.color == Color(0, 255, 0)


# --- linear ---

V254 = 254 / 255


def test_linear_already_safe_returns_none() -> None:
    assert navigate_linear(0.0, 1.0, 1.0, 0.5) is None
    assert navigate_linear(0.0, 0.0, 1.0, 0.0) is None


def test_linear_still_release_uses_round_trip() -> None:
    result = navigate_linear(0.0, 1.0, V254, V254)
    assert result is not None
    value, color = result
    assert color == RED
    assert value == pytest.approx(1.0)


def test_linear_walks_up_in_direction_of_travel() -> None:
    result = navigate_linear(0.0, 1.0, V254, 0.5)
    assert result is not None
    value, color = result
    assert color == RED
    assert V254 < value <= 1.0


def test_linear_walks_down_in_direction_of_travel() -> None:
    result = navigate_linear(0.0, 1.0, V254, 1.0)
    assert result is not None
    value, color = result
    assert color == Color(252, 0, 0)
    assert value < V254
    assert is_print_safe(color)


def test_linear_budget_exhaustion_falls_back_to_round_trip(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="picker.navigator"):
        result = navigate_linear(0.0, 1.0, V254, 0.5, max_steps=1)
    assert result is not None
    value, color = result
    assert color == RED
    assert value == pytest.approx(1.0)
    assert "fell back to round trip" in caplog.text
