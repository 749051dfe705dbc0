"""
Display Substrate Interface

The window substrate the tiling engine drives. Hosts implement `Display` and
hand out window objects carrying the `DisplayWindow` attributes.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union

from .protocol import Area, Side


class DisplayWindow:
    """Per-window state the engine reads and writes.

    Hosts may subclass this with properties that forward to their own
    window objects. The attribute set is fixed: these are exactly the
    fields a pane snapshot carries.
    """

    def __init__(self):
        self.content: Any = None
        self.start: int = 0
        self.hscroll: int = 0
        self.vscroll: float = 0.0
        self.point: int = 0
        self.history: List[Any] = []
        self.parameters: Dict[Any, Any] = {}


SplitSize = Optional[Union[int, float]]


class Display(ABC):
    """Abstract display substrate.

    All operations are synchronous and take effect immediately.
    """

    @abstractmethod
    def frame_width(self) -> int:
        """Width of the whole display area."""

    @abstractmethod
    def frame_height(self) -> int:
        """Height of the whole display area."""

    @abstractmethod
    def window_area(self, window: DisplayWindow) -> Area:
        """Current geometry of a live window."""

    @abstractmethod
    def list_windows(self) -> List[DisplayWindow]:
        """Live windows in depth-first traversal order."""

    @abstractmethod
    def split_window(
        self, window: Optional[DisplayWindow], size: SplitSize, side: Side
    ) -> DisplayWindow:
        """
        Split a window and return the new one.

        Args:
            window: Window to split, or None to split the root of the tree
            size: Positive int keeps that many cells in the split window,
                negative int gives the new window exactly -size cells,
                a float in (0, 1) is the new window's share, None halves
            side: Side of the split window where the new window goes

        Returns:
            The newly created window
        """

    @abstractmethod
    def destroy_window(self, window: DisplayWindow):
        """Destroy a window, ignoring any delete-handler parameter."""

    @abstractmethod
    def destroy_all_except(self, window: DisplayWindow):
        """Destroy every window but one, which then fills the display."""

    @abstractmethod
    def select_window(self, window: DisplayWindow):
        """Make a window the selected one."""

    @abstractmethod
    def selected_window(self) -> DisplayWindow:
        """The currently selected window."""
