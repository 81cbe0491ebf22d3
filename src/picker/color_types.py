from __future__ import annotations

"""Core value types used by the picker engine.

This module defines the immutable :class:`Color` value, tuple aliases for
the HSV / HSL / CMYK representations, and the small enums that select a
safety mode or a navigation direction.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Tuple

from util.color import format_hex_rgb


HSV = Tuple[float, float, float]
HSL = Tuple[float, float, float]
CMYK = Tuple[int, int, int, int]
RGB = Tuple[int, int, int]


def _clamp255(x: float) -> int:
    return max(0, min(255, int(round(x))))


@dataclass(frozen=True)
class Color:
    """Opaque 8-bit RGB color.

    Attributes
    ----------
    r, g, b:
        Channels as integers in [0, 255].
    a:
        Alpha channel. Always 255; the engine has no transparency semantics.

    Equality and hashing are exact component-wise comparisons, so colors can
    be collected in sets and compared against swatch tables directly.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int):
                raise ValueError(f"{name} must be an int, got {v!r}.")
            if not (0 <= v <= 255):
                raise ValueError(f"{name} must be in [0, 255].")
        if self.a != 255:
            raise ValueError("a must be 255.")

    @classmethod
    def clamped(cls, r: float, g: float, b: float) -> "Color":
        """Create a Color, rounding and clamping each channel into [0, 255]."""
        return cls(_clamp255(r), _clamp255(g), _clamp255(b))

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        """Return the upper-case ``#RRGGBB`` representation."""
        return format_hex_rgb(self.rgb)

    def is_achromatic(self) -> bool:
        """Return True when all three channels are equal (a gray)."""
        return self.r == self.g == self.b


class SafetyMode(Enum):
    """Device-safe subsets a picker can be constrained to."""

    NONE = auto()
    WEB_SAFE = auto()
    PRINT_SAFE = auto()


class Direction(Enum):
    """Cardinal directions for moving on the hue/saturation wheel."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class InputKey(Enum):
    """Discrete key inputs understood by the slider and the swatch grid."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()


WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
RED = Color(255, 0, 0)
