"""
Mastered Layout

Wraps another layout with a master area split off one side of the display.
"""

from __future__ import annotations
import math
from typing import Callable, List, Optional, Union, TYPE_CHECKING

from .layout_base import Layout, LayoutContext
from .layout_stack import StackLayout
from ..protocol import Side

if TYPE_CHECKING:
    from ..pane import Pane


SideRule = Union[Side, Callable[[LayoutContext], Side]]


class MasteredLayout(Layout):
    """
    Master-stack combinator.

    `master_count` panes go to the master area on `side`, stacked evenly.
    The rest go to the remaining area, laid out by `inner`. Master panes are
    taken from the front of the list when `side` is left or above and from
    the back when it is right or below, so they sit where the master area
    falls in traversal order and a pass never reorders panes.

    The stack is built first over the whole display and the master area is
    split off the root afterwards, because splits are relative to existing
    windows and the root split scales the stack without reordering it.
    """

    def __init__(
        self,
        side: SideRule,
        inner: Optional[Layout] = None,
        name: Optional[str] = None,
    ):
        self.side = side
        self.inner = inner if inner is not None else StackLayout()
        self.master_layout = StackLayout()
        self._name = name

    @property
    def name(self) -> str:
        if self._name:
            return self._name
        side = self.side.value if isinstance(self.side, Side) else "auto"
        return f"mastered-{side}-{self.inner.name}"

    def side_for(self, ctx: LayoutContext) -> Side:
        """The side the master area goes to in this pass."""
        if isinstance(self.side, Side):
            return self.side
        return self.side(ctx)

    def master_size(self, side: Side, ctx: LayoutContext) -> int:
        """Cells taken by the master area along the split axis."""
        display = ctx.display
        dimension = display.frame_width() if side.horizontal else display.frame_height()
        return math.ceil(ctx.policy.master_fraction * dimension)

    def master_leading(self, ctx: LayoutContext) -> bool:
        return self.side_for(ctx).leading

    def arrange(self, panes: List["Pane"], ctx: LayoutContext):
        side = self.side_for(ctx)
        count = min(ctx.policy.master_count, len(panes))
        if side.leading:
            master, stack = panes[:count], panes[count:]
        else:
            stack, master = panes[: len(panes) - count], panes[len(panes) - count :]

        if stack:
            self.inner.arrange(stack, ctx)

        if master:
            if stack:
                display = ctx.display
                window = display.split_window(None, -self.master_size(side, ctx), side)
                display.select_window(window)
            self.master_layout.arrange(master, ctx)
