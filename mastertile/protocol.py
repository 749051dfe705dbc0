"""
Display Geometry Types

Plain value types shared by the display substrate and the layouts.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Side(Enum):
    """Side of a window on which a split places the new window."""

    LEFT = "left"
    RIGHT = "right"
    ABOVE = "above"
    BELOW = "below"

    @property
    def horizontal(self) -> bool:
        """Whether the split divides the width (side by side)."""
        return self in (Side.LEFT, Side.RIGHT)

    @property
    def leading(self) -> bool:
        """Whether the new window comes first in traversal order."""
        return self in (Side.LEFT, Side.ABOVE)


@dataclass
class Area:
    """Area with position and dimensions, in character cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def extent(self, horizontal: bool) -> int:
        """Width for horizontal splits, height otherwise."""
        return self.width if horizontal else self.height
