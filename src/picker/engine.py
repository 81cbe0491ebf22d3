from __future__ import annotations

"""Color conversion engine for RGB, HSV, HSL and CMYK.

All functions are pure. The forward HSV conversion rounds each channel to
the nearest integer while the reverse conversion works in double precision
with an ``EPS`` threshold; ``hsv_to_rgb(*rgb_to_hsv(c))`` may therefore
differ from ``c`` by one unit per channel. Swatch matching elsewhere relies
on these exact results, so the two directions are kept as they are.
"""

import math
from typing import Sequence

import numpy as np

from .color_types import CMYK, HSL, HSV, Color


EPS = 1e-4


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def normalize_hue(h: float) -> float:
    """Normalize hue angle into [0, 360)."""
    return (h % 360.0 + 360.0) % 360.0


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance between two hue angles, in [0, 180]."""
    diff = abs(normalize_hue(h1) - normalize_hue(h2))
    return min(diff, 360.0 - diff)


def rgb_to_hsv(color: Color) -> HSV:
    """Convert a Color to (h, s, v) with h in [0, 360) and s, v in [0, 1].

    When several channels share the maximum, the hue formula is chosen in
    R, G, B order.
    """
    r = color.r / 255.0
    g = color.g / 255.0
    b = color.b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    delta = mx - mn

    h = 0.0
    if delta < EPS:
        h = 0.0
    elif abs(mx - r) < EPS:
        h = (60.0 * ((g - b) / delta) + 360.0) % 360.0
    elif abs(mx - g) < EPS:
        h = (60.0 * ((b - r) / delta) + 120.0) % 360.0
    elif abs(mx - b) < EPS:
        h = (60.0 * ((r - g) / delta) + 240.0) % 360.0

    s = 0.0 if mx < EPS else delta / mx
    return (h, s, mx)


def _hsv_sector(h: float) -> tuple[int, float]:
    h = normalize_hue(h)
    sector = math.floor(h / 60.0)
    return int(sector) % 6, h / 60.0 - sector


def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    """Convert (h, s, v) to a Color.

    Each of the four intermediate channel levels is rounded to the nearest
    integer (half to even) before the sector table picks the RGB triple.
    """
    hi, f = _hsv_sector(h)
    s = _clamp01(s)
    v = _clamp01(v) * 255.0

    vi = int(round(v))
    p = int(round(v * (1.0 - s)))
    q = int(round(v * (1.0 - f * s)))
    t = int(round(v * (1.0 - (1.0 - f) * s)))

    if hi == 0:
        return Color(vi, t, p)
    if hi == 1:
        return Color(q, vi, p)
    if hi == 2:
        return Color(p, vi, t)
    if hi == 3:
        return Color(p, q, vi)
    if hi == 4:
        return Color(t, p, vi)
    return Color(vi, p, q)


def hsv_to_rgb_array(h: float, s: float, values: Sequence[float] | np.ndarray) -> np.ndarray:
    """Vectorized :func:`hsv_to_rgb` over many values at a fixed hue/saturation.

    Returns an ``(n, 3)`` int array whose rows equal
    ``hsv_to_rgb(h, s, values[i]).rgb``.
    """
    hi, f = _hsv_sector(h)
    s = _clamp01(s)
    v = np.clip(np.asarray(values, dtype=np.float64), 0.0, 1.0) * 255.0

    vi = np.rint(v)
    p = np.rint(v * (1.0 - s))
    q = np.rint(v * (1.0 - f * s))
    t = np.rint(v * (1.0 - (1.0 - f) * s))

    table = {
        0: (vi, t, p),
        1: (q, vi, p),
        2: (p, vi, t),
        3: (p, q, vi),
        4: (t, p, vi),
        5: (vi, p, q),
    }
    return np.stack(table[hi], axis=-1).astype(np.int64)


def rgb_to_hsl(color: Color) -> HSL:
    """Convert a Color to (h, s, l) with h in [0, 360) and s, l in [0, 1]."""
    r = color.r / 255.0
    g = color.g / 255.0
    b = color.b / 255.0
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2.0

    if abs(mx - mn) < EPS:
        return (0.0, 0.0, l)

    d = mx - mn
    s = d / (2.0 - mx - mn) if l > 0.5 else d / (mx + mn)
    h = 0.0
    if abs(mx - r) < EPS:
        h = (g - b) / d + (6.0 if g < b else 0.0)
    elif abs(mx - g) < EPS:
        h = (b - r) / d + 2.0
    elif abs(mx - b) < EPS:
        h = (r - g) / d + 4.0
    h /= 6.0
    return (h * 360.0, s, l)


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    if t > 1.0:
        t -= 1.0
    if t < 1.0 / 6.0:
        return p + (q - p) * 6.0 * t
    if t < 1.0 / 2.0:
        return q
    if t < 2.0 / 3.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Color:
    """Convert (h, s, l) with h in degrees and s, l in [0, 1] to a Color."""
    h_f = normalize_hue(h) / 360.0
    s = _clamp01(s)
    l = _clamp01(l)

    if abs(s) < EPS:
        r = g = b = l
    else:
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q
        r = _hue_to_rgb(p, q, h_f + 1.0 / 3.0)
        g = _hue_to_rgb(p, q, h_f)
        b = _hue_to_rgb(p, q, h_f - 1.0 / 3.0)
    return Color.clamped(r * 255.0, g * 255.0, b * 255.0)


def rgb_to_cmyk(color: Color) -> CMYK:
    """Convert a Color to integer-percent (c, m, y, k).

    Pure black short-circuits to ``(0, 0, 0, 100)``.
    """
    r = color.r / 255.0
    g = color.g / 255.0
    b = color.b / 255.0
    k = 1.0 - max(r, g, b)
    if abs(1.0 - k) < EPS:
        return (0, 0, 0, 100)

    c = (1.0 - r - k) / (1.0 - k)
    m = (1.0 - g - k) / (1.0 - k)
    y = (1.0 - b - k) / (1.0 - k)
    return (
        int(round(c * 100.0)),
        int(round(m * 100.0)),
        int(round(y * 100.0)),
        int(round(k * 100.0)),
    )


def _clamp_percent(x: int) -> float:
    return max(0, min(100, int(x))) / 100.0


def cmyk_to_color(c: int, m: int, y: int, k: int) -> Color:
    """Convert integer-percent (c, m, y, k) to a Color."""
    c_f = _clamp_percent(c)
    m_f = _clamp_percent(m)
    y_f = _clamp_percent(y)
    k_f = _clamp_percent(k)
    return Color(
        int(round(255.0 * (1.0 - c_f) * (1.0 - k_f))),
        int(round(255.0 * (1.0 - m_f) * (1.0 - k_f))),
        int(round(255.0 * (1.0 - y_f) * (1.0 - k_f))),
    )
