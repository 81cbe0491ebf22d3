from __future__ import annotations

"""State model for the circular hue/saturation wheel.

The wheel owns one :class:`PolarState`. Pointer picks set it directly from
the pointer geometry, arrow keys go through :func:`navigate_polar`, and
colors set from outside the wheel re-seed it.
"""

import math
from typing import Optional

from .color_types import WHITE, Color, Direction, SafetyMode
from .engine import hsv_to_rgb, normalize_hue
from .gamut import snap
from .navigator import PolarState, navigate_polar


class WheelModel:
    """Hue/saturation wheel owned by a single picker.

    Attributes
    ----------
    mode:
        Active safety mode applied to every emitted color.
    state:
        Current ideal position and last emitted (pure) color.
    """

    def __init__(self, mode: SafetyMode = SafetyMode.NONE, color: Color = WHITE) -> None:
        self.mode = mode
        self.state = PolarState.from_color(color)

    @property
    def color(self) -> Color:
        return self.state.color

    def set_position_color(self, color: Color) -> None:
        """Place the wheel on an externally chosen pure color."""
        if color != self.state.color:
            self.state = PolarState.from_color(color)

    def pick(self, dx: float, dy: float, radius: float) -> Optional[Color]:
        """Select the point at offset (dx, dy) from the wheel center.

        ``dy`` grows downwards as in screen coordinates. Points outside the
        wheel are projected onto its rim. Returns the emitted color, or None
        when the wheel has no area.
        """
        if radius <= 0:
            return None
        dist = min(math.sqrt(dx * dx + dy * dy), radius)
        saturation = dist / radius
        hue = normalize_hue(math.degrees(math.atan2(-dy, dx)))
        color = snap(hsv_to_rgb(hue, saturation, 1.0), self.mode)
        self.state = PolarState(hue=hue, saturation=saturation, color=color)
        return color

    def move(self, direction: Direction) -> Optional[Color]:
        """Arrow-key move. Returns the new color, or None if the cursor is stuck."""
        result = navigate_polar(self.state, direction, self.mode)
        if result is None:
            return None
        self.state, color = result
        return color

    def marker_offset(self, radius: float) -> tuple[float, float]:
        """Screen offset of the selection marker from the wheel center."""
        angle = math.radians(self.state.hue)
        r = radius * self.state.saturation
        return (r * math.cos(angle), -r * math.sin(angle))
