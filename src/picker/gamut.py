from __future__ import annotations

"""Web-safe and print-safe gamut predicates and snapping.

Web-safe colors use channel levels that are multiples of 51 (the legacy
6x6x6 palette). Print-safe colors survive an RGB -> CMYK -> RGB round trip
with CMYK quantized to integer percent; most colors do not.
"""

import numpy as np

from .color_types import Color, SafetyMode
from .engine import cmyk_to_color, rgb_to_cmyk


WEB_SAFE_STEP = 51
# One trip per integer percent level plus the first trip.
PRINT_SNAP_MAX_TRIPS = 102


def is_web_safe(color: Color) -> bool:
    return (
        color.r % WEB_SAFE_STEP == 0
        and color.g % WEB_SAFE_STEP == 0
        and color.b % WEB_SAFE_STEP == 0
    )


def _web_level(x: int) -> int:
    # x / 51 never lands on .5 for integer x, so the rounding mode is moot.
    return int(round(x / WEB_SAFE_STEP)) * WEB_SAFE_STEP


def to_web_safe(color: Color) -> Color:
    """Round each channel independently to the nearest multiple of 51."""
    return Color(_web_level(color.r), _web_level(color.g), _web_level(color.b))


def is_print_safe(color: Color) -> bool:
    return cmyk_to_color(*rgb_to_cmyk(color)) == color


def to_print_safe(color: Color) -> Color:
    """Force RGB -> CMYK -> RGB round trips until the color reproduces itself.

    One trip settles most colors. Dark colors can need a few more: after the
    first trip the key channel is fixed and each remaining channel moves
    monotonically, so the loop ends within ``PRINT_SNAP_MAX_TRIPS``.
    """
    current = color
    for _ in range(PRINT_SNAP_MAX_TRIPS):
        snapped = cmyk_to_color(*rgb_to_cmyk(current))
        if snapped == current:
            break
        current = snapped
    return current


def is_safe(color: Color, mode: SafetyMode) -> bool:
    """Return whether ``color`` lies in the subset selected by ``mode``."""
    if mode == SafetyMode.WEB_SAFE:
        return is_web_safe(color)
    if mode == SafetyMode.PRINT_SAFE:
        return is_print_safe(color)
    if mode == SafetyMode.NONE:
        return True
    raise ValueError(f"Unsupported SafetyMode: {mode}")


def snap(color: Color, mode: SafetyMode) -> Color:
    """Snap ``color`` into the subset selected by ``mode``."""
    if mode == SafetyMode.WEB_SAFE:
        return to_web_safe(color)
    if mode == SafetyMode.PRINT_SAFE:
        return to_print_safe(color)
    if mode == SafetyMode.NONE:
        return color
    raise ValueError(f"Unsupported SafetyMode: {mode}")


def web_safe_mask(rgb: np.ndarray) -> np.ndarray:
    """Boolean mask over the leading axes of an ``(..., 3)`` channel array."""
    arr = np.asarray(rgb, dtype=np.int64)
    return np.all(arr % WEB_SAFE_STEP == 0, axis=-1)


def to_web_safe_array(rgb: np.ndarray) -> np.ndarray:
    """Vectorized :func:`to_web_safe` over an ``(..., 3)`` channel array."""
    arr = np.asarray(rgb, dtype=np.int64)
    return (np.rint(arr / WEB_SAFE_STEP) * WEB_SAFE_STEP).astype(np.int64)
