from __future__ import annotations

"""Picker session tying the wheel, slider and swatch grid together.

A :class:`PickerSession` owns one wheel, one brightness slider and one
swatch grid, plus the currently selected color. Every input is routed
through the session, which updates the controls explicitly instead of
letting them mutate each other.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from util.color import parse_hex_rgb

from .color_types import WHITE, Color, Direction, InputKey, SafetyMode
from .engine import cmyk_to_color, hsv_to_rgb, rgb_to_hsv
from .gamut import is_print_safe, is_web_safe, snap, to_print_safe, to_web_safe
from .slider import SliderModel
from .swatches import DEFAULT_SWATCHES, SwatchGrid, SwatchGroups
from .ui_helpers import CHANNEL_LIMITS, ChannelSpace, channel_values, format_color_info, parse_channel
from .wheel import WheelModel


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SafetyStatus:
    """Whether a color already lies in each safe subset."""

    web_safe: bool
    print_safe: bool


class PickerSession:
    """Complete picker state for one drop-down instance."""

    def __init__(self, color: Color = WHITE, swatches: SwatchGroups = DEFAULT_SWATCHES) -> None:
        self._mode = SafetyMode.NONE
        self.original_color = color
        self.selected_color = color
        self.wheel = WheelModel(self._mode, color)
        self.slider = SliderModel(mode=self._mode)
        self.grid = SwatchGrid(swatches)
        self.apply_color(color)

    # --- mode ---
    @property
    def mode(self) -> SafetyMode:
        return self._mode

    def set_mode(self, mode: SafetyMode) -> Color:
        """Switch the active safety mode and snap the selection into it.

        Web-safe and print-safe are mutually exclusive by construction:
        there is a single active mode.
        """
        self._mode = mode
        self.wheel.mode = mode
        self.slider.mode = mode
        logger.debug("safety mode set to %s", mode.name)
        return self.apply_color(snap(self.selected_color, mode))

    # --- core update paths ---
    def apply_color(self, color: Color) -> Color:
        """Make ``color`` the selection and place every control on it.

        The color is split into a pure (full-brightness) base color for the
        wheel and slider, and a brightness value for the slider. In
        print-safe mode an unsafe color is first forced through a round trip.
        """
        h, s, v = rgb_to_hsv(color)
        base = snap(hsv_to_rgb(h, s, 1.0), self._mode)
        if self._mode == SafetyMode.PRINT_SAFE and not is_print_safe(color):
            color = to_print_safe(color)
            h, s, v = rgb_to_hsv(color)
            base = to_print_safe(hsv_to_rgb(h, s, 1.0))

        self.selected_color = color
        self.slider.base_color = base
        self.slider.set_value(v)
        self.wheel.set_position_color(base)
        self.grid.select_matching(color, self._mode)
        return color

    def _update_from_controls(self) -> Color:
        color = self.slider.selected_color()
        if self._mode == SafetyMode.PRINT_SAFE and not is_print_safe(color):
            color = to_print_safe(color)
        self.selected_color = color
        self.grid.selection = None
        return color

    # --- wheel ---
    def pick_on_wheel(self, dx: float, dy: float, radius: float) -> Optional[Color]:
        pure = self.wheel.pick(dx, dy, radius)
        if pure is None:
            return None
        self.slider.base_color = pure
        return self._update_from_controls()

    def move_on_wheel(self, direction: Direction) -> Optional[Color]:
        """Arrow-key move on the wheel. None means the cursor did not move."""
        pure = self.wheel.move(direction)
        if pure is None:
            return None
        self.slider.base_color = pure
        return self._update_from_controls()

    # --- slider ---
    def press_slider(self, key: InputKey) -> Color:
        self.slider.press(key)
        return self._update_from_controls()

    def drag_slider(self, value: float) -> Color:
        self.slider.drag_to(value)
        return self._update_from_controls()

    def release_slider(self) -> Color:
        """End a slider interaction (key up, mouse up or focus loss)."""
        self.slider.end_interaction()
        return self._update_from_controls()

    # --- swatches ---
    def select_swatch(self, group: int, index: int) -> Color:
        return self.apply_color(self.grid.color_at(group, index, self._mode))

    def move_swatch(self, key: InputKey) -> Color:
        return self.apply_color(self.grid.move(key, self._mode))

    def restore_original(self) -> Color:
        return self.apply_color(self.original_color)

    # --- text entry ---
    def _commit_entry(self, color: Color) -> Color:
        return self.apply_color(snap(color, self._mode))

    def enter_hex(self, text: str) -> bool:
        """Apply a ``#RRGGBB`` entry. Malformed text keeps the current color."""
        try:
            r, g, b = parse_hex_rgb(text)
        except ValueError as exc:
            logger.debug("rejected hex entry %r: %s", text, exc)
            return False
        self._commit_entry(Color(r, g, b))
        return True

    def enter_channels(self, space: ChannelSpace | str, texts: Sequence[str]) -> bool:
        """Apply RGB (3 fields) or CMYK (4 fields) text entries.

        Out-of-range numbers are clamped; malformed text keeps the current
        color and returns False.
        """
        ch_space = space if isinstance(space, ChannelSpace) else ChannelSpace.from_value(space)
        expected = 3 if ch_space == ChannelSpace.RGB else 4
        if len(texts) != expected:
            raise ValueError(f"{ch_space.value} entry needs {expected} fields, got {len(texts)}.")
        try:
            values = [parse_channel(t, ch_space) for t in texts]
        except ValueError as exc:
            logger.debug("rejected %s entry %r: %s", ch_space.value, list(texts), exc)
            return False
        if ch_space == ChannelSpace.RGB:
            color = Color(*values)
        else:
            color = cmyk_to_color(*values)
        self._commit_entry(color)
        return True

    def nudge_channel(self, space: ChannelSpace | str, index: int, delta: int) -> bool:
        """Step one numeric field by ``delta`` (arrow keys in a text field).

        Disabled while a safety mode is active. Returns True if the
        selection changed.
        """
        if self._mode != SafetyMode.NONE:
            return False
        ch_space = space if isinstance(space, ChannelSpace) else ChannelSpace.from_value(space)
        values = list(channel_values(self.selected_color, ch_space))
        current = values[index]
        values[index] = max(0, min(CHANNEL_LIMITS[ch_space], current + delta))
        if values[index] == current:
            return False
        if ch_space == ChannelSpace.RGB:
            color = Color(*values)
        else:
            color = cmyk_to_color(*values)
        before = self.selected_color
        self._commit_entry(color)
        return self.selected_color != before

    # --- safety status ---
    def safety_status(self) -> SafetyStatus:
        return SafetyStatus(
            web_safe=is_web_safe(self.selected_color),
            print_safe=is_print_safe(self.selected_color),
        )

    def fix_web_safe(self) -> bool:
        """Snap the selection to web-safe if it is not already. Returns True if it changed."""
        if is_web_safe(self.selected_color):
            return False
        self.apply_color(to_web_safe(self.selected_color))
        return True

    def fix_print_safe(self) -> bool:
        """Snap the selection to print-safe if it is not already. Returns True if it changed."""
        if is_print_safe(self.selected_color):
            return False
        self.apply_color(to_print_safe(self.selected_color))
        return True

    def info(self) -> str:
        return format_color_info(self.selected_color)
