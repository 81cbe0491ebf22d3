"""Public entrypoint for the gamut-constrained color picker engine.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``picker`` instead of individual
submodules.
"""

from .color_types import CMYK, HSL, HSV, Color, Direction, InputKey, SafetyMode
from .engine import (
    cmyk_to_color,
    hsl_to_rgb,
    hsv_to_rgb,
    rgb_to_cmyk,
    rgb_to_hsl,
    rgb_to_hsv,
)
from .gamut import is_print_safe, is_safe, is_web_safe, snap, to_print_safe, to_web_safe
from .navigator import PolarState, navigate_linear, navigate_polar
from .session import PickerSession, SafetyStatus
from .slider import SliderModel
from .steps import StepTable, build_step_table
from .swatches import DEFAULT_SWATCHES, SwatchGrid
from .ui_helpers import (
    SAFETY_MODE_OPTIONS,
    ChannelSpace,
    describe_color,
    format_color_info,
)
from .wheel import WheelModel

__all__ = [
    "Color",
    "HSV",
    "HSL",
    "CMYK",
    "Direction",
    "InputKey",
    "SafetyMode",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_color",
    "is_web_safe",
    "to_web_safe",
    "is_print_safe",
    "to_print_safe",
    "is_safe",
    "snap",
    "build_step_table",
    "StepTable",
    "PolarState",
    "navigate_polar",
    "navigate_linear",
    "WheelModel",
    "SliderModel",
    "SwatchGrid",
    "DEFAULT_SWATCHES",
    "PickerSession",
    "SafetyStatus",
    "ChannelSpace",
    "SAFETY_MODE_OPTIONS",
    "describe_color",
    "format_color_info",
]
