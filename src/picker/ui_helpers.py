from __future__ import annotations

"""Helper utilities for integrating the picker into external UIs.

This module exposes label/enum pairs for the safety modes, the numeric
limits of the editable channels, and small formatting helpers that turn a
Color into the strings a UI shows next to the picker.
"""

from enum import Enum
from typing import Dict, List, Tuple

from util.color import parse_clamped_int

from .color_types import CMYK, Color, SafetyMode
from .engine import rgb_to_cmyk
from .gamut import is_print_safe, is_web_safe


class ChannelSpace(Enum):
    """Editable numeric channel groups."""

    RGB = "rgb"
    CMYK = "cmyk"

    @classmethod
    def from_value(cls, value: str) -> "ChannelSpace":
        for space in cls:
            if space.value == value:
                return space
        raise ValueError(f"Unknown channel space: {value}")


CHANNEL_LIMITS: Dict[ChannelSpace, int] = {
    ChannelSpace.RGB: 255,
    ChannelSpace.CMYK: 100,
}

# Label/Enum pairs for UI choices
SAFETY_MODE_OPTIONS: List[Tuple[str, SafetyMode]] = [
    ("Any color", SafetyMode.NONE),
    ("Web-safe", SafetyMode.WEB_SAFE),
    ("Print-safe", SafetyMode.PRINT_SAFE),
]

SAFETY_MODE_LABEL_MAP: Dict[str, SafetyMode] = {
    label: value for label, value in SAFETY_MODE_OPTIONS
}


def parse_channel(text: str, space: ChannelSpace | str) -> int:
    """Parse one channel text field, clamping it into the channel's range."""
    ch_space = space if isinstance(space, ChannelSpace) else ChannelSpace.from_value(space)
    return parse_clamped_int(text, 0, CHANNEL_LIMITS[ch_space])


def channel_values(color: Color, space: ChannelSpace | str) -> Tuple[int, ...]:
    """Return the values shown in the RGB or CMYK fields for ``color``."""
    ch_space = space if isinstance(space, ChannelSpace) else ChannelSpace.from_value(space)
    if ch_space == ChannelSpace.RGB:
        return color.rgb
    return rgb_to_cmyk(color)


def describe_color(color: Color) -> Dict[str, object]:
    """Summarize a color for display: hex, RGB, CMYK and safety flags."""
    cmyk: CMYK = rgb_to_cmyk(color)
    return {
        "hex": color.to_hex(),
        "rgb": color.rgb,
        "cmyk": cmyk,
        "web_safe": is_web_safe(color),
        "print_safe": is_print_safe(color),
    }


def format_color_info(color: Color) -> str:
    """Multi-line HEX / RGB / CMYK text, as shown when hovering a swatch."""
    c, m, y, k = rgb_to_cmyk(color)
    return (
        f"HEX: {color.to_hex()}\n"
        f"RGB: {color.r}, {color.g}, {color.b}\n"
        f"CMYK: {c}, {m}, {y}, {k}"
    )


__all__ = [
    "ChannelSpace",
    "CHANNEL_LIMITS",
    "SAFETY_MODE_OPTIONS",
    "SAFETY_MODE_LABEL_MAP",
    "parse_channel",
    "channel_values",
    "describe_color",
    "format_color_info",
]
