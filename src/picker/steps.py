from __future__ import annotations

"""Discrete brightness levels for a web-safe constrained slider.

This module builds the ordered list of web-safe colors reachable by
varying the brightness of a base hue/saturation, and provides
:class:`StepTable`, a per-slider cache that maps a continuous [0, 1]
brightness onto those levels.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .color_types import Color, SafetyMode
from .engine import hsv_to_rgb_array, hue_distance, rgb_to_hsl, rgb_to_hsv
from .gamut import to_web_safe_array


logger = logging.getLogger(__name__)

SAMPLE_COUNT = 101
GRAY_BASE_SATURATION = 0.1
NEAR_GRAY_SATURATION = 0.15
HUE_TOLERANCE = 45.0


def build_step_table(
    hue: float,
    saturation: float,
    mode: SafetyMode = SafetyMode.WEB_SAFE,
) -> List[Color]:
    """Build the ordered web-safe brightness levels for a base color.

    Parameters
    ----------
    hue, saturation:
        Hue and saturation of the pure (full-brightness) base color.
    mode:
        Active safety mode. Only ``SafetyMode.WEB_SAFE`` quantizes the
        brightness axis; any other mode yields an empty table.

    Returns
    -------
    list of Color
        Deduplicated candidates sorted by descending HSL lightness, index 0
        being the lightest. Never empty in web-safe mode since black is
        always a candidate.
    """
    if mode != SafetyMode.WEB_SAFE:
        return []

    values = np.arange(SAMPLE_COUNT) / 100.0
    snapped = to_web_safe_array(hsv_to_rgb_array(hue, saturation, values))
    # dict.fromkeys keeps first-seen order, so equal-lightness ties stay stable.
    candidates = list(dict.fromkeys(Color(int(r), int(g), int(b)) for r, g, b in snapped))

    if saturation < GRAY_BASE_SATURATION:
        kept = [c for c in candidates if c.is_achromatic()]
    else:
        kept = [c for c in candidates if _is_compatible(c, hue)]

    return sorted(kept, key=lambda c: rgb_to_hsl(c)[2], reverse=True)


def _is_compatible(candidate: Color, base_hue: float) -> bool:
    c_h, c_s, _ = rgb_to_hsv(candidate)
    if c_s < NEAR_GRAY_SATURATION:
        return True
    return hue_distance(c_h, base_hue) < HUE_TOLERANCE


class StepTable:
    """Lazily rebuilt step table owned by a single slider.

    The table is keyed by (base hue, base saturation, mode) and rebuilt as a
    whole whenever any of them changes.
    """

    def __init__(self) -> None:
        self._key: Optional[Tuple[float, float, SafetyMode]] = None
        self._colors: List[Color] = []

    def update(self, hue: float, saturation: float, mode: SafetyMode) -> bool:
        """Rebuild when the key changed. Returns True if a rebuild happened."""
        key = (hue, saturation, mode)
        if key == self._key:
            return False
        self._key = key
        self._colors = build_step_table(hue, saturation, mode)
        logger.debug(
            "step table rebuilt: hue=%.3f sat=%.3f mode=%s steps=%d",
            hue,
            saturation,
            mode.name,
            len(self._colors),
        )
        return True

    @property
    def colors(self) -> List[Color]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getitem__(self, index: int) -> Color:
        return self._colors[index]

    @property
    def step(self) -> float:
        """Value increment between two adjacent levels (0.0 when not quantized)."""
        n = len(self._colors)
        return 1.0 / (n - 1) if n > 1 else 0.0

    def quantize(self, value: float) -> float:
        """Snap a [0, 1] value onto the nearest level boundary."""
        n = len(self._colors)
        if n <= 1:
            return value
        return round(value * (n - 1)) / (n - 1)

    def index_for_value(self, value: float) -> int:
        n = len(self._colors)
        if n <= 1:
            return 0
        idx = int(round((1.0 - value) * (n - 1)))
        return max(0, min(n - 1, idx))

    def value_for_index(self, index: int) -> float:
        n = len(self._colors)
        if n <= 1:
            return 1.0
        index = max(0, min(n - 1, index))
        return 1.0 - index / (n - 1)

    def color_for_value(self, value: float) -> Optional[Color]:
        """Return the level displayed for ``value``, or None when the table is empty."""
        if not self._colors:
            return None
        return self._colors[self.index_for_value(value)]
