"""
Arranger

Runs arrangement passes: snapshot every pane, collapse the display to one
window, let the active layout rebuild it and reselect by position.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Sequence, TYPE_CHECKING

from loguru import logger

from .errors import (
    InconsistentTraversalError,
    LayoutContractError,
    ReentrantArrangeError,
    SubstrateError,
)
from .layouts.layout_base import Layout, LayoutContext, LayoutPolicy
from .layouts.layout_stack import StackLayout
from .pane import Pane, capture, restore

if TYPE_CHECKING:
    from .display import Display, DisplayWindow


class Arranger:
    """Owns the active layout and policy and performs arrangement passes.

    Windows do not survive a pass; the selection is carried over by its
    position in traversal order.
    """

    def __init__(self, bus, display: "Display", layout: Layout, policy: LayoutPolicy):
        """Initialize arranger.

        Args:
            bus: Event bus instance (Pypubsub)
            display: Display substrate to arrange
            layout: Initially active layout
            policy: Initial tiling policy
        """
        self.bus = bus
        self.display = display
        self.layout = layout
        self.policy = policy

        # Installed as the delete-window parameter of restored windows
        self.delete_handler: Optional[Callable[["DisplayWindow"], None]] = None

        self._arranging = False

    @property
    def is_arranging(self) -> bool:
        return self._arranging

    def panes(self) -> List[Pane]:
        """Snapshot all live windows in traversal order."""
        return [capture(window) for window in self.display.list_windows()]

    def selected_index(self, windows: Optional[Sequence["DisplayWindow"]] = None) -> int:
        """Traversal position of the selected window.

        Raises:
            InconsistentTraversalError: If the display does not list its own
                selected window
        """
        if windows is None:
            windows = self.display.list_windows()
        selected = self.display.selected_window()
        for i, window in enumerate(windows):
            if window is selected:
                return i
        raise InconsistentTraversalError(
            f"Selected window {selected!r} missing from traversal of {len(windows)} windows"
        )

    def master_leading(self) -> bool:
        """Whether the active layout puts its master panes first in traversal order."""
        return self.layout.master_leading(LayoutContext(self.display, self.policy, self.restore))

    def restore(self, pane: Pane, window: "DisplayWindow"):
        """Apply a pane to a window, installing the delete handler."""
        restore(pane, window, self.delete_handler)

    def arrange(self, panes: Optional[Sequence[Pane]] = None, select: Optional[int] = None):
        """
        Run one arrangement pass.

        If the layout fails after the display was collapsed, the panes are
        stacked back onto the display before the error propagates.

        Args:
            panes: Panes to lay out; captured from the display when omitted
            select: Traversal index to select afterwards; defaults to the
                index of the currently selected window
        """
        from . import topics

        if self._arranging:
            raise ReentrantArrangeError("arrange() called during an arrangement pass")

        self._arranging = True
        try:
            windows = self.display.list_windows()
            index = self.selected_index(windows) if select is None else select
            panes = list(panes) if panes is not None else [capture(w) for w in windows]

            self.display.destroy_all_except(self.display.selected_window())
            ctx = LayoutContext(self.display, self.policy, self.restore)
            try:
                self.layout.arrange(panes, ctx)
                windows = self.display.list_windows()
                if panes and len(windows) != len(panes):
                    raise LayoutContractError(
                        f"{self.layout.name} built {len(windows)} windows for {len(panes)} panes"
                    )
            except Exception as e:
                logger.warning(f"[arrange] {self.layout.name} failed: {e}")
                self._recover(panes, ctx, index)
                raise

            index = max(0, min(index, len(windows) - 1))
            self.display.select_window(windows[index])
        finally:
            self._arranging = False

        logger.debug(
            f"[arrange] layout={self.layout.name}, panes={len(panes)}, selected={index}"
        )
        self.bus.sendMessage(
            topics.ARRANGED,
            layout_name=self.layout.name,
            pane_count=len(panes),
            selected_index=index,
        )

    def _recover(self, panes: List[Pane], ctx: LayoutContext, index: int):
        """Put the panes of a failed pass back as a plain stack."""
        self.display.destroy_all_except(self.display.selected_window())
        try:
            StackLayout().arrange(panes, ctx)
        except SubstrateError as e:
            logger.error(f"[arrange] cannot stack {len(panes)} panes: {e}")
            return
        windows = self.display.list_windows()
        self.display.select_window(windows[max(0, min(index, len(windows) - 1))])
