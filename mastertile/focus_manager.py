"""
Focus Manager

Moves the selection through the windows in traversal order.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from .arranger import Arranger


class FocusManager:
    """Manages window selection.

    This component subscribes to focus command events and publishes
    FOCUS_CHANGED. Selection changes never re-arrange.

    Responsibilities:
    - CMD_SELECT_NEXT: Select next window
    - CMD_SELECT_PREV: Select previous window
    """

    def __init__(self, bus, arranger: "Arranger"):
        """Initialize focus manager.

        Args:
            bus: Event bus instance (Pypubsub)
            arranger: Arranger whose display is navigated
        """
        self.bus = bus
        self.arranger = arranger
        self.subscribe()

    def subscribe(self):
        """Subscribe to events FocusManager cares about."""
        from . import topics

        self.bus.subscribe(self._on_select_next, topics.CMD_SELECT_NEXT)
        self.bus.subscribe(self._on_select_prev, topics.CMD_SELECT_PREV)

    def unsubscribe(self):
        from . import topics

        self.bus.unsubscribe(self._on_select_next, topics.CMD_SELECT_NEXT)
        self.bus.unsubscribe(self._on_select_prev, topics.CMD_SELECT_PREV)

    def select_next(self):
        """Select the next window, wrapping around."""
        self._cycle(1)

    def select_previous(self):
        """Select the previous window, wrapping around."""
        self._cycle(-1)

    def _cycle(self, step: int):
        from . import topics

        display = self.arranger.display
        windows = display.list_windows()
        idx = self.arranger.selected_index(windows)
        window = windows[(idx + step) % len(windows)]
        display.select_window(window)
        logger.debug(f"[focus] selected window {(idx + step) % len(windows)}")
        self.bus.sendMessage(topics.FOCUS_CHANGED, window=window)

    # Command event handlers
    def _on_select_next(self):
        """Handle CMD_SELECT_NEXT command."""
        self.select_next()

    def _on_select_prev(self):
        """Handle CMD_SELECT_PREV command."""
        self.select_previous()
