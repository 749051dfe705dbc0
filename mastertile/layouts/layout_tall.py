"""
Tall and Wide Layouts

Master-stack layouts composed from MasteredLayout and StackLayout.
"""

from __future__ import annotations

from .layout_base import LayoutContext
from .layout_mastered import MasteredLayout
from .layout_stack import StackLayout
from ..protocol import Side


def tall_side(ctx: LayoutContext) -> Side:
    """Master on the left, or above when the frame is narrower than the threshold."""
    if ctx.display.frame_width() < ctx.policy.narrow_threshold:
        return Side.ABOVE
    return Side.LEFT


class TallLayout(MasteredLayout):
    """
    Tall layout - the default.

    Master area on the left with the stack on the right; on narrow frames
    the master area moves above the stack.
    """

    def __init__(self):
        super().__init__(tall_side, StackLayout(), name="tall")


class WideLayout(MasteredLayout):
    """Wide layout - master area always above the stack."""

    def __init__(self):
        super().__init__(Side.ABOVE, StackLayout(), name="wide")
