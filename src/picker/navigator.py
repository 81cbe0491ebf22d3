from __future__ import annotations

"""Bounded searches that move through color space inside a safe gamut.

Two independent searches are provided:

- :func:`navigate_polar` moves a continuous hue/saturation position one
  keyboard step at a time and, under a safety mode, walks in small steps
  until the snapped full-brightness color changes.
- :func:`navigate_linear` settles a brightness value onto a print-safe
  level after an interaction, searching in the direction of travel.

Both keep the continuous ideal position separate from the emitted color and
return ``None`` when their iteration budget is exhausted; callers must then
leave their state untouched.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

from common import settings

from .color_types import WHITE, Color, Direction, SafetyMode
from .engine import hsv_to_rgb, normalize_hue, rgb_to_hsv
from .gamut import is_print_safe, snap, to_print_safe


logger = logging.getLogger(__name__)

# Below this saturation the angle is meaningless; the hue is kept as is.
HUE_FREEZE_SATURATION = 0.001
# Net displacement below which a release counts as "no movement".
STILL_DISPLACEMENT = 0.001


@dataclass(frozen=True)
class PolarState:
    """Ideal position on the hue/saturation wheel.

    Attributes
    ----------
    hue:
        Continuous hue in degrees, [0, 360).
    saturation:
        Continuous saturation (distance from the center), [0, 1].
    color:
        Last color emitted at this position (full brightness, snapped to the
        active mode). Searches compare against it to detect movement.
    """

    hue: float = 0.0
    saturation: float = 0.0
    color: Color = WHITE

    @classmethod
    def from_color(cls, color: Color) -> "PolarState":
        """Seed a position from an externally supplied pure color.

        Use this only when the color comes from outside the wheel (text entry,
        swatches). Colors emitted by :func:`navigate_polar` must not be fed
        back here, or repeated snapping drifts the cursor.
        """
        h, s, _ = rgb_to_hsv(color)
        return cls(hue=h, saturation=s, color=color)


def _direction_offset(direction: Direction, step: float) -> Tuple[float, float]:
    if direction == Direction.UP:
        return (0.0, step)
    if direction == Direction.DOWN:
        return (0.0, -step)
    if direction == Direction.RIGHT:
        return (step, 0.0)
    if direction == Direction.LEFT:
        return (-step, 0.0)
    raise ValueError(f"Unsupported Direction: {direction}")


def _to_cartesian(hue: float, saturation: float) -> Tuple[float, float]:
    angle = math.radians(hue)
    return (saturation * math.cos(angle), saturation * math.sin(angle))


def _polar_hue(x: float, y: float) -> float:
    return normalize_hue(math.degrees(math.atan2(y, x)))


def navigate_polar(
    state: PolarState,
    direction: Direction,
    mode: SafetyMode,
    *,
    step: Optional[float] = None,
    search_step: Optional[float] = None,
    max_iter: Optional[int] = None,
) -> Optional[Tuple[PolarState, Color]]:
    """Move one step on the wheel in ``direction``.

    Parameters
    ----------
    state:
        Current ideal position and last emitted color.
    direction:
        Cardinal direction; UP/DOWN move along +y/-y, RIGHT/LEFT along +x/-x.
    mode:
        Active safety mode.
    step, search_step, max_iter:
        Overrides for the unconstrained step, the constrained search step and
        the search budget. Defaults come from ``common.settings``.

    Returns
    -------
    (PolarState, Color) or None
        The committed position and the emitted color, or None when the
        constrained search found no different safe color within its budget.

    Notes
    -----
    Movement is detected against ``state.color``, the full-brightness
    emitted color, so the brightness slider never affects the search.
    """
    cfg = settings.get()

    if mode == SafetyMode.NONE:
        dx, dy = _direction_offset(direction, cfg.POLAR_STEP if step is None else step)
        x, y = _to_cartesian(state.hue, state.saturation)
        x += dx
        y += dy
        saturation = min(1.0, math.sqrt(x * x + y * y))
        hue = _polar_hue(x, y)
        color = hsv_to_rgb(hue, saturation, 1.0)
        return PolarState(hue=hue, saturation=saturation, color=color), color

    dx, dy = _direction_offset(
        direction, cfg.POLAR_SEARCH_STEP if search_step is None else search_step
    )
    budget = cfg.POLAR_MAX_ITER if max_iter is None else max(1, int(max_iter))
    hue = state.hue
    saturation = state.saturation
    for _ in range(budget):
        x, y = _to_cartesian(hue, saturation)
        x += dx
        y += dy
        saturation = min(1.0, math.sqrt(x * x + y * y))
        if saturation > HUE_FREEZE_SATURATION:
            hue = _polar_hue(x, y)
        candidate = snap(hsv_to_rgb(hue, saturation, 1.0), mode)
        if candidate != state.color:
            return PolarState(hue=hue, saturation=saturation, color=candidate), candidate

    logger.debug(
        "polar search exhausted: hue=%.3f sat=%.3f direction=%s mode=%s",
        state.hue,
        state.saturation,
        direction.name,
        mode.name,
    )
    return None


def _settle_by_round_trip(color: Color) -> Tuple[float, Color]:
    snapped = to_print_safe(color)
    _, _, value = rgb_to_hsv(snapped)
    return value, snapped


def navigate_linear(
    hue: float,
    saturation: float,
    value: float,
    start_value: float,
    *,
    step: Optional[float] = None,
    max_steps: Optional[int] = None,
) -> Optional[Tuple[float, Color]]:
    """Settle a brightness value onto a print-safe color.

    Parameters
    ----------
    hue, saturation:
        Hue and saturation of the base (pure) color.
    value:
        Brightness at the end of the interaction.
    start_value:
        Brightness when the interaction started. The search walks from
        ``value`` away from it so the slider never jumps backwards.
    step, max_steps:
        Overrides for the walk increment and budget. Defaults come from
        ``common.settings``.

    Returns
    -------
    (float, Color) or None
        The new brightness and its print-safe color, or None when the color
        at ``value`` is already print-safe.
    """
    color = hsv_to_rgb(hue, saturation, value)
    if is_print_safe(color):
        return None

    displacement = value - start_value
    if abs(displacement) < STILL_DISPLACEMENT:
        return _settle_by_round_trip(color)

    cfg = settings.get()
    increment = cfg.LINEAR_STEP if step is None else abs(step)
    if displacement < 0:
        increment = -increment
    budget = cfg.LINEAR_MAX_STEPS if max_steps is None else max(1, int(max_steps))

    search = value
    for _ in range(budget):
        if search < 0.0 or search > 1.0:
            break
        candidate = hsv_to_rgb(hue, saturation, search)
        if is_print_safe(candidate):
            return search, candidate
        search += increment

    logger.debug(
        "linear search fell back to round trip: value=%.4f start=%.4f",
        value,
        start_value,
    )
    return _settle_by_round_trip(color)
