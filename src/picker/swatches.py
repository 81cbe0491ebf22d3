from __future__ import annotations

"""Swatch grid shown next to the wheel.

Swatches are organized in columns ("groups") of equal length. They are
displayed snapped to the active safety mode and matched against the
current selection by exact equality.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .color_types import Color, InputKey, SafetyMode
from .gamut import snap


SwatchGroups = Tuple[Tuple[Color, ...], ...]


def _group(*rgbs: Tuple[int, int, int]) -> Tuple[Color, ...]:
    return tuple(Color(r, g, b) for r, g, b in rgbs)


DEFAULT_SWATCHES: SwatchGroups = (
    _group((0, 0, 0), (64, 64, 64), (128, 128, 128), (192, 192, 192), (224, 224, 224), (255, 255, 255)),
    _group((183, 28, 28), (198, 40, 40), (229, 57, 53), (239, 154, 154), (255, 205, 210), (255, 235, 238)),
    _group((230, 81, 0), (239, 108, 0), (251, 140, 0), (255, 183, 77), (255, 224, 178), (255, 243, 224)),
    _group((245, 127, 23), (251, 192, 45), (253, 216, 53), (255, 241, 118), (255, 249, 196), (255, 253, 231)),
    _group((27, 94, 32), (46, 125, 50), (67, 160, 71), (129, 199, 132), (200, 230, 201), (232, 245, 233)),
    _group((0, 96, 100), (0, 131, 143), (0, 172, 193), (77, 208, 225), (178, 235, 242), (224, 247, 250)),
    _group((13, 71, 161), (21, 101, 192), (30, 136, 229), (100, 181, 246), (187, 222, 251), (227, 242, 253)),
    _group((74, 20, 140), (106, 27, 154), (142, 36, 170), (186, 104, 200), (225, 190, 231), (243, 229, 245)),
)


@dataclass
class SwatchGrid:
    """Grid of swatches with an optional selected cell.

    Attributes
    ----------
    groups:
        Columns of swatches; every column must have the same length.
    selection:
        (group, index) of the selected cell, or None.
    """

    groups: SwatchGroups = DEFAULT_SWATCHES
    selection: Optional[Tuple[int, int]] = field(default=None)

    def __post_init__(self) -> None:
        self.groups = tuple(tuple(g) for g in self.groups)
        if not self.groups or not self.groups[0]:
            raise ValueError("swatch grid must contain at least one swatch.")
        size = len(self.groups[0])
        if any(len(g) != size for g in self.groups):
            raise ValueError("all swatch groups must have the same length.")

    @property
    def group_count(self) -> int:
        return len(self.groups)

    @property
    def group_size(self) -> int:
        return len(self.groups[0])

    def color_at(self, group: int, index: int, mode: SafetyMode) -> Color:
        """Swatch color as displayed under ``mode``."""
        return snap(self.groups[group][index], mode)

    def displayed(self, mode: SafetyMode) -> Sequence[Sequence[Color]]:
        return [[snap(c, mode) for c in g] for g in self.groups]

    def find(self, color: Color, mode: SafetyMode) -> Optional[Tuple[int, int]]:
        """First (group, index) whose displayed color equals ``color`` exactly."""
        for g, swatches in enumerate(self.groups):
            for i, swatch in enumerate(swatches):
                if snap(swatch, mode) == color:
                    return (g, i)
        return None

    def select_matching(self, color: Color, mode: SafetyMode) -> Optional[Tuple[int, int]]:
        self.selection = self.find(color, mode)
        return self.selection

    def move(self, key: InputKey, mode: SafetyMode) -> Color:
        """Move the selection with a key and return the newly selected color.

        Without a selection any key selects the first swatch. Moves wrap
        around in both axes.
        """
        if self.selection is None:
            group, index = 0, 0
        else:
            group, index = self.selection
            if key == InputKey.RIGHT:
                group += 1
            elif key == InputKey.LEFT:
                group -= 1
            elif key == InputKey.DOWN:
                index += 1
            elif key == InputKey.UP:
                index -= 1
            elif key == InputKey.HOME:
                group = 0
            elif key == InputKey.END:
                group = self.group_count - 1
            elif key == InputKey.PAGE_UP:
                index = 0
            elif key == InputKey.PAGE_DOWN:
                index = self.group_size - 1
            else:
                raise ValueError(f"Unsupported InputKey: {key}")
        group %= self.group_count
        index %= self.group_size
        self.selection = (group, index)
        return self.color_at(group, index, mode)
