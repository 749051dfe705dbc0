"""
Stack Layout

Panes stacked evenly on top of each other.
"""

from __future__ import annotations
import math
from typing import List, TYPE_CHECKING

from .layout_base import Layout, LayoutContext
from ..protocol import Side

if TYPE_CHECKING:
    from ..pane import Pane


class StackLayout(Layout):
    """
    Stack layout.

    Fills the selected window with the panes, one below the other.
    Each split keeps an even share of the rows still left, so heights differ
    by at most one and the taller windows come first.
    """

    @property
    def name(self) -> str:
        return "stack"

    def arrange(self, panes: List["Pane"], ctx: LayoutContext):
        if not panes:
            return

        display = ctx.display
        window = display.selected_window()
        ctx.restore(panes[0], window)

        for i, pane in enumerate(panes[1:], 1):
            remaining = len(panes) - i + 1
            split_height = math.ceil(display.window_area(window).height / remaining)
            window = display.split_window(window, split_height, Side.BELOW)
            display.select_window(window)
            ctx.restore(pane, window)
