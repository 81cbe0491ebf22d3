from __future__ import annotations

"""State model for the vertical brightness slider.

The slider holds a brightness value in [0, 1] for a base (pure) color. In
web-safe mode the value is quantized onto the slider's own
:class:`StepTable`; in print-safe mode it is settled onto a print-safe
level with :func:`navigate_linear` when an interaction ends.
"""

from typing import Optional

from .color_types import RED, Color, InputKey, SafetyMode
from .engine import hsv_to_rgb, rgb_to_hsv
from .gamut import to_print_safe
from .navigator import navigate_linear
from .steps import StepTable


VALUE_TOLERANCE = 1e-4
KEY_STEP = 0.01
PAGE_STEP = 0.1


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


class SliderModel:
    """Brightness slider owned by a single picker."""

    def __init__(
        self,
        base_color: Color = RED,
        mode: SafetyMode = SafetyMode.NONE,
        value: float = 1.0,
    ) -> None:
        self._base_color = base_color
        self._mode = mode
        self._value = _clamp01(value)
        self._steps = StepTable()
        self._start_value = self._value
        self._interacting = False
        self._refresh_steps()
        self.set_value(self._value)

    # --- properties ---
    @property
    def value(self) -> float:
        return self._value

    @property
    def base_color(self) -> Color:
        return self._base_color

    @base_color.setter
    def base_color(self, color: Color) -> None:
        if color == self._base_color:
            return
        self._base_color = color
        if self._refresh_steps():
            self.set_value(self._value)

    @property
    def mode(self) -> SafetyMode:
        return self._mode

    @mode.setter
    def mode(self, mode: SafetyMode) -> None:
        if mode == self._mode:
            return
        self._mode = mode
        self._refresh_steps()
        self.set_value(self._value)

    @property
    def steps(self) -> StepTable:
        return self._steps

    @property
    def is_quantized(self) -> bool:
        return self._mode == SafetyMode.WEB_SAFE and len(self._steps) > 1

    # --- value handling ---
    def _refresh_steps(self) -> bool:
        h, s, _ = rgb_to_hsv(self._base_color)
        return self._steps.update(h, s, self._mode)

    def set_value(self, value: float) -> bool:
        """Clamp (and in web-safe mode quantize) ``value``. Returns True if it changed."""
        new_value = _clamp01(value)
        if self.is_quantized:
            new_value = self._steps.quantize(new_value)
        if abs(self._value - new_value) > VALUE_TOLERANCE:
            self._value = new_value
            return True
        return False

    def selected_color(self) -> Color:
        """Color currently selected by the base color and the brightness value."""
        if self._mode == SafetyMode.WEB_SAFE and len(self._steps) > 0:
            color = self._steps.color_for_value(self._value)
            if color is not None:
                return color
        h, s, _ = rgb_to_hsv(self._base_color)
        result = hsv_to_rgb(h, s, self._value)
        if self._mode == SafetyMode.PRINT_SAFE:
            result = to_print_safe(result)
        return result

    # --- interaction ---
    def begin_interaction(self) -> None:
        """Record the value at the start of a drag or key press sequence."""
        if not self._interacting:
            self._interacting = True
            self._start_value = self._value

    def end_interaction(self) -> bool:
        """Finish an interaction, settling onto a print-safe level if needed.

        Returns True if the value changed during settling.
        """
        if not self._interacting:
            return False
        self._interacting = False
        if self._mode != SafetyMode.PRINT_SAFE:
            return False
        h, s, _ = rgb_to_hsv(self._base_color)
        result = navigate_linear(h, s, self._value, self._start_value)
        if result is None:
            return False
        new_value, _ = result
        return self.set_value(new_value)

    def drag_to(self, value: float) -> bool:
        self.begin_interaction()
        return self.set_value(value)

    def press(self, key: InputKey) -> bool:
        """Apply a key press. Returns True if the value changed."""
        self.begin_interaction()
        step = KEY_STEP
        page_step = PAGE_STEP
        if self.is_quantized:
            step = self._steps.step
            page_step = step

        if key in (InputKey.UP, InputKey.RIGHT):
            return self.set_value(self._value + step)
        if key in (InputKey.DOWN, InputKey.LEFT):
            return self.set_value(self._value - step)
        if key == InputKey.PAGE_UP:
            return self.set_value(self._value + page_step)
        if key == InputKey.PAGE_DOWN:
            return self.set_value(self._value - page_step)
        if key == InputKey.HOME:
            return self.set_value(1.0)
        if key == InputKey.END:
            return self.set_value(0.0)
        raise ValueError(f"Unsupported InputKey: {key}")

    def selector_fraction(self) -> float:
        """Position of the selector from the top of the track, in [0, 1]."""
        n = len(self._steps)
        if self._mode == SafetyMode.WEB_SAFE and n > 0:
            return (self._steps.index_for_value(self._value) + 0.5) / n
        return 1.0 - self._value

    def current_level(self) -> Optional[int]:
        """Index of the displayed step-table level, or None when not quantized."""
        if self._mode != SafetyMode.WEB_SAFE or len(self._steps) == 0:
            return None
        return self._steps.index_for_value(self._value)
