"""
In-Memory Display

A display substrate kept entirely in Python objects: a binary split tree
whose leaves are windows with integer cell geometry. Used by the demo entry
point and the test suite, and usable as a reference for host adapters.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Any, Callable, List, Optional, Union

from .display import Display, DisplayWindow, SplitSize
from .errors import SubstrateError
from .pane import DELETE_WINDOW
from .protocol import Area, Side

MIN_WINDOW_SIZE = 2


class MemoryWindow(DisplayWindow):
    """A leaf of the split tree."""

    def __init__(self, object_id: int, area: Area):
        super().__init__()
        self.object_id = object_id
        self.area = area
        self.is_live = True

    def __repr__(self):
        return f"MemoryWindow({self.object_id}, content={self.content!r})"


@dataclass(eq=False)
class _Split:
    """Internal node: two children side by side or on top of each other."""

    horizontal: bool
    children: List[Union["_Split", MemoryWindow]]
    area: Area


_Node = Union[_Split, MemoryWindow]


class MemoryDisplay(Display):
    """
    Display substrate backed by an in-memory split tree.

    The tree always holds at least one window.
    """

    def __init__(self, width: int = 160, height: int = 48, content: Any = None):
        if width < MIN_WINDOW_SIZE or height < MIN_WINDOW_SIZE:
            raise ValueError(f"Display too small: {width}x{height}")
        self.width = width
        self.height = height
        self._next_id = 1
        self.root: _Node = self._new_window(Area(0, 0, width, height))
        self.root.content = content
        self._selected: MemoryWindow = self.root

        # Called after open() creates a window outside the tiling engine
        self.on_window_opened: Optional[Callable[[MemoryWindow], None]] = None

    def _new_window(self, area: Area) -> MemoryWindow:
        window = MemoryWindow(self._next_id, area)
        self._next_id += 1
        return window

    # Display interface

    def frame_width(self) -> int:
        return self.width

    def frame_height(self) -> int:
        return self.height

    def window_area(self, window: MemoryWindow) -> Area:
        self._check_live(window)
        return replace(window.area)

    def list_windows(self) -> List[MemoryWindow]:
        return list(self._leaves(self.root))

    def selected_window(self) -> MemoryWindow:
        return self._selected

    def select_window(self, window: MemoryWindow):
        self._check_live(window)
        self._selected = window

    def split_window(
        self, window: Optional[MemoryWindow], size: SplitSize, side: Side
    ) -> MemoryWindow:
        if window is not None:
            self._check_live(window)
        target = self.root if window is None else window
        area = target.area
        extent = area.extent(side.horizontal)
        new_extent = self._new_extent(size, extent)
        if new_extent < MIN_WINDOW_SIZE or extent - new_extent < MIN_WINDOW_SIZE:
            raise SubstrateError(
                f"Window too small for splitting: {extent} cells into {new_extent}"
            )

        kept_area, new_area = _divide(area, new_extent, side)
        plan = self._plan_resize(target, kept_area)
        new = self._new_window(new_area)
        source = target if isinstance(target, MemoryWindow) else self._selected
        new.content = source.content
        new.point = source.point
        new.start = source.start

        self._apply(plan)
        children = [new, target] if side.leading else [target, new]
        self._replace(target, _Split(side.horizontal, children, area))
        return new

    def destroy_window(self, window: MemoryWindow):
        self._check_live(window)
        parent = self._parent_of(window)
        if parent is None:
            raise SubstrateError("Attempt to delete the sole window")

        sibling = parent.children[1] if parent.children[0] is window else parent.children[0]
        plan = self._plan_resize(sibling, parent.area)
        self._replace(parent, sibling)
        self._apply(plan)
        window.is_live = False
        if self._selected is window:
            self._selected = next(self._leaves(sibling))

    def destroy_all_except(self, window: MemoryWindow):
        self._check_live(window)
        for other in self.list_windows():
            if other is not window:
                other.is_live = False
        window.area = Area(0, 0, self.width, self.height)
        self.root = window
        self._selected = window

    # Host behaviour

    def delete_window(self, window: Optional[MemoryWindow] = None):
        """Close a window the way a user close request would.

        Routes through the window's delete-window parameter when present.
        """
        window = window or self._selected
        self._check_live(window)
        handler = window.parameters.get(DELETE_WINDOW)
        if handler is not None:
            handler(window)
        else:
            self.destroy_window(window)

    def open(self, content: Any) -> MemoryWindow:
        """Show new content in a fresh window below the selected one."""
        window = self.split_window(self._selected, None, Side.BELOW)
        window.content = content
        window.point = 0
        window.start = 0
        window.history = []
        self._selected = window
        if self.on_window_opened:
            self.on_window_opened(window)
        return window

    def describe(self) -> List[str]:
        """One line per window in traversal order, selected marked with '*'."""
        lines = []
        for window in self.list_windows():
            a = window.area
            mark = "*" if window is self._selected else " "
            lines.append(
                f"{mark} {window.object_id:3d} {a.width:4d}x{a.height:<4d} "
                f"+{a.x}+{a.y}  {window.content}"
            )
        return lines

    # Tree helpers

    def _check_live(self, window: MemoryWindow):
        if not getattr(window, "is_live", False):
            raise SubstrateError(f"{window!r} is not a live window")

    def _leaves(self, node: _Node):
        if isinstance(node, MemoryWindow):
            yield node
        else:
            for child in node.children:
                yield from self._leaves(child)

    def _parent_of(self, target: _Node, node: Optional[_Node] = None) -> Optional[_Split]:
        node = self.root if node is None else node
        if isinstance(node, MemoryWindow):
            return None
        for child in node.children:
            if child is target:
                return node
            found = self._parent_of(target, child)
            if found is not None:
                return found
        return None

    def _replace(self, old: _Node, new: _Node):
        parent = self._parent_of(old)
        if parent is None:
            self.root = new
        else:
            parent.children[parent.children.index(old)] = new

    @staticmethod
    def _apply(plan):
        for node, area in plan:
            node.area = area

    def _plan_resize(self, node: _Node, area: Area, plan=None):
        """
        Fit a subtree into a new area, scaling children proportionally.

        Returns (node, area) pairs for _apply() and leaves the tree untouched.

        Raises:
            SubstrateError: If a window would end up smaller than MIN_WINDOW_SIZE
        """
        plan = [] if plan is None else plan
        if isinstance(node, MemoryWindow):
            if area.width < MIN_WINDOW_SIZE or area.height < MIN_WINDOW_SIZE:
                raise SubstrateError(
                    f"{node!r} would shrink to {area.width}x{area.height}"
                )
            plan.append((node, area))
            return plan

        plan.append((node, area))
        old_total = node.area.extent(node.horizontal)
        new_total = area.extent(node.horizontal)
        offset = area.x if node.horizontal else area.y
        remaining = new_total
        for i, child in enumerate(node.children):
            if i == len(node.children) - 1:
                size = remaining
            else:
                old = child.area.extent(node.horizontal)
                size = round(old * new_total / old_total)
                remaining -= size
            if node.horizontal:
                child_area = Area(offset, area.y, size, area.height)
            else:
                child_area = Area(area.x, offset, area.width, size)
            self._plan_resize(child, child_area, plan)
            offset += size
        return plan

    @staticmethod
    def _new_extent(size: SplitSize, extent: int) -> int:
        if size is None:
            return extent // 2
        if isinstance(size, float):
            if not 0.0 < size < 1.0:
                raise SubstrateError(f"Split proportion out of range: {size}")
            return math.floor(extent * size)
        if size < 0:
            return -size
        return extent - size


def _divide(area: Area, new_extent: int, side: Side):
    """Split an area into (kept, new) with the new part on `side`."""
    if side.horizontal:
        kept_width = area.width - new_extent
        if side is Side.LEFT:
            new = Area(area.x, area.y, new_extent, area.height)
            kept = Area(area.x + new_extent, area.y, kept_width, area.height)
        else:
            kept = Area(area.x, area.y, kept_width, area.height)
            new = Area(area.x + kept_width, area.y, new_extent, area.height)
    else:
        kept_height = area.height - new_extent
        if side is Side.ABOVE:
            new = Area(area.x, area.y, area.width, new_extent)
            kept = Area(area.x, area.y + new_extent, area.width, kept_height)
        else:
            kept = Area(area.x, area.y, area.width, kept_height)
            new = Area(area.x, area.y + kept_height, area.width, new_extent)
    return kept, new
