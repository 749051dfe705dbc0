"""
Window Controller

Handles structural edits: swapping, cloning, closing and zooming panes.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from loguru import logger

from .pane import capture
from .protocol import Side

if TYPE_CHECKING:
    from .arranger import Arranger
    from .display import DisplayWindow


class WindowController:
    """Handles window structure commands.

    This component subscribes to window command events and to WINDOW_OPENED,
    and installs its close() as the delete handler of every arranged window
    so host-level close requests end in a re-arrangement.

    Responsibilities:
    - CMD_ARRANGE: Re-arrange all windows
    - CMD_SWAP_NEXT/PREV: Exchange panes with a neighbour
    - CMD_ZOOM: Promote to master or demote the master
    - CMD_CLONE_WINDOW: Duplicate the selected pane
    - CMD_CLOSE_WINDOW: Close a window and re-arrange
    - WINDOW_OPENED: Fold a host-created window into the arrangement
    """

    def __init__(self, bus, arranger: "Arranger"):
        """Initialize window controller.

        Args:
            bus: Event bus instance (Pypubsub)
            arranger: Arranger running the passes
        """
        self.bus = bus
        self.arranger = arranger
        self.arranger.delete_handler = self.close
        self.subscribe()

    def subscribe(self):
        """Subscribe to window command events."""
        from . import topics

        self.bus.subscribe(self._on_window_opened, topics.WINDOW_OPENED)
        self.bus.subscribe(self._on_arrange, topics.CMD_ARRANGE)
        self.bus.subscribe(self._on_swap_next, topics.CMD_SWAP_NEXT)
        self.bus.subscribe(self._on_swap_prev, topics.CMD_SWAP_PREV)
        self.bus.subscribe(self._on_zoom, topics.CMD_ZOOM)
        self.bus.subscribe(self._on_clone_window, topics.CMD_CLONE_WINDOW)
        self.bus.subscribe(self._on_close_window, topics.CMD_CLOSE_WINDOW)

    def unsubscribe(self):
        from . import topics

        self.bus.unsubscribe(self._on_window_opened, topics.WINDOW_OPENED)
        self.bus.unsubscribe(self._on_arrange, topics.CMD_ARRANGE)
        self.bus.unsubscribe(self._on_swap_next, topics.CMD_SWAP_NEXT)
        self.bus.unsubscribe(self._on_swap_prev, topics.CMD_SWAP_PREV)
        self.bus.unsubscribe(self._on_zoom, topics.CMD_ZOOM)
        self.bus.unsubscribe(self._on_clone_window, topics.CMD_CLONE_WINDOW)
        self.bus.unsubscribe(self._on_close_window, topics.CMD_CLOSE_WINDOW)

    @property
    def display(self):
        return self.arranger.display

    def arrange(self):
        self.arranger.arrange()

    def swap_next(self):
        """Swap selected window with next."""
        self._swap(1)

    def swap_previous(self):
        """Swap selected window with previous."""
        self._swap(-1)

    def _swap(self, step: int):
        """Exchange panes with a neighbour in place; the selection follows the pane."""
        windows = self.display.list_windows()
        if len(windows) < 2:
            return
        idx = self.arranger.selected_index(windows)
        selected = windows[idx]
        other = windows[(idx + step) % len(windows)]

        selected_pane, other_pane = capture(selected), capture(other)
        self.arranger.restore(other_pane, selected)
        self.arranger.restore(selected_pane, other)
        self.display.select_window(other)

    def clone(self):
        """Split the selected window, show its pane in both halves, re-arrange."""
        window = self.display.selected_window()
        pane = capture(window)
        new = self.display.split_window(window, None, Side.BELOW)
        self.arranger.restore(pane, new)
        self.arranger.arrange()

    def close(self, window: Optional["DisplayWindow"] = None):
        """Destroy a window and re-arrange the rest.

        Bypasses the window's delete-window parameter. The sole remaining
        window is kept and simply re-arranged.

        Args:
            window: Window to close, defaults to the selected one
        """
        window = window or self.display.selected_window()
        if len(self.display.list_windows()) > 1:
            self.display.destroy_window(window)
        else:
            logger.debug("[close] keeping the sole window")
        self.arranger.arrange()

    def zoom(self):
        """Promote the selected pane to master; demote it if it already is.

        The master position is the front of the traversal order, or the back
        when the active layout puts its master area on the right or below.
        """
        windows = self.display.list_windows()
        if len(windows) < 2:
            return
        leading = self.arranger.master_leading()
        selected = self.display.selected_window()
        if selected is windows[0 if leading else -1]:
            self._swap(1 if leading else -1)
            return

        pane = capture(selected)
        self.display.destroy_window(selected)
        panes = self.arranger.panes()
        if leading:
            self.arranger.arrange([pane] + panes, select=0)
        else:
            self.arranger.arrange(panes + [pane], select=len(panes))

    def window_opened(self, window: "DisplayWindow"):
        """Fold a window the host opened into the arrangement."""
        logger.debug(f"[open] {window!r}")
        self.arranger.arrange()

    # Event handlers
    def _on_window_opened(self, window):
        """Handle WINDOW_OPENED event."""
        self.window_opened(window)

    def _on_arrange(self):
        """Handle CMD_ARRANGE command."""
        self.arrange()

    def _on_swap_next(self):
        """Handle CMD_SWAP_NEXT command."""
        self.swap_next()

    def _on_swap_prev(self):
        """Handle CMD_SWAP_PREV command."""
        self.swap_previous()

    def _on_zoom(self):
        """Handle CMD_ZOOM command."""
        self.zoom()

    def _on_clone_window(self):
        """Handle CMD_CLONE_WINDOW command."""
        self.clone()

    def _on_close_window(self, window=None):
        """Handle CMD_CLOSE_WINDOW command."""
        self.close(window)
