"""
Tiler

Wires the tiling components to a display and runs them as a mode that can
be enabled and disabled.
"""

from __future__ import annotations
import os
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from loguru import logger
from pubsub import pub
from pubsub.core import Publisher

from . import topics
from .arranger import Arranger
from .binding_manager import BindingManager
from .display import Display
from .focus_manager import FocusManager
from .layouts import (
    Layout,
    LayoutManager,
    LayoutPolicy,
    StackLayout,
    TallLayout,
    WideLayout,
)
from .pane import DELETE_WINDOW
from .window_controller import WindowController


@dataclass
class TilerConfig:
    """Tiler configuration."""

    # Policy at mode activation
    master_count: int = 1
    master_fraction: float = 0.55
    narrow_threshold: int = 132

    # Prefix for the default key bindings
    prefix: str = "M-"

    # Layouts (default to all built-in layouts, the first one is active)
    layouts: Optional[List[Layout]] = None

    # Custom keybindings: list of (key, event_topic, event_data) tuples
    # Example: [("M-g", topics.CMD_CYCLE_LAYOUT, {})]
    custom_keybindings: Optional[List[Tuple[str, str, dict]]] = None

    # Log every published event
    debug: bool = field(default_factory=lambda: bool(os.getenv("TILER_DEBUG")))

    def __post_init__(self):
        """Validate values that cannot be clamped."""
        if not isinstance(self.prefix, str):
            raise ValueError(f"Invalid key prefix: {self.prefix!r}")
        if self.narrow_threshold <= 0:
            raise ValueError(
                f"Invalid narrow_threshold: {self.narrow_threshold}. Must be positive"
            )
        if self.layouts is not None and not self.layouts:
            raise ValueError("layouts must not be empty")

    def policy(self) -> LayoutPolicy:
        """Initial tiling policy."""
        return LayoutPolicy(
            master_count=self.master_count,
            master_fraction=self.master_fraction,
            narrow_threshold=self.narrow_threshold,
        )

    def get_layouts(self) -> List[Layout]:
        """Get configured layouts or default layouts."""
        if self.layouts is not None:
            return self.layouts
        return [TallLayout(), WideLayout(), StackLayout()]


class Tiler:
    """
    Dynamic tiling for a display.

    Constructing a Tiler enables it: components subscribe to their command
    topics, windows the display opens are folded into the arrangement, and
    the display is arranged once.

    Each Tiler publishes on its own bus unless one is passed in, so tilers
    on different displays never see each other's commands.
    """

    def __init__(
        self,
        display: Display,
        config: Optional[TilerConfig] = None,
        bus: Optional[Publisher] = None,
    ):
        """Initialize the tiler.

        Architecture:
        1. Create the arranger owning layout and policy
        2. Create components - they self-subscribe to events
        3. Bridge display callbacks into the bus
        4. Arrange
        """
        self.config = config or TilerConfig()
        self.display = display
        self.bus = bus if bus is not None else Publisher()

        layouts = self.config.get_layouts()
        self.arranger = Arranger(
            bus=self.bus,
            display=display,
            layout=layouts[0],
            policy=self.config.policy(),
        )
        self.layout_manager = LayoutManager(bus=self.bus, arranger=self.arranger, layouts=layouts)
        self.focus_manager = FocusManager(bus=self.bus, arranger=self.arranger)
        self.window_controller = WindowController(bus=self.bus, arranger=self.arranger)
        self.binding_manager: Optional[BindingManager] = None

        self.enabled = False
        self._attach()

    @property
    def components(self):
        return (self.layout_manager, self.focus_manager, self.window_controller)

    def debug_event_logger(self, topic=pub.AUTO_TOPIC, **kwargs):
        """Log all events published on the event bus."""
        data_str = ", ".join(f"{k}={v}" for k, v in kwargs.items() if k != "topic")
        logger.debug(f"[event] {topic.getName()} | {data_str}")

    def enable(self):
        """Activate tiling and arrange the display."""
        if self.enabled:
            return

        for component in self.components:
            component.subscribe()
        self._attach()

    def _attach(self):
        """Hook into the display and arrange; components are already subscribed."""
        if self.config.debug:
            logger.enable("mastertile")
            self.bus.subscribe(self.debug_event_logger, pub.ALL_TOPICS)
        self.arranger.delete_handler = self.window_controller.close
        if hasattr(self.display, "on_window_opened"):
            self.display.on_window_opened = self.window_opened

        self.enabled = True
        logger.debug(f"[mode] enabled with layout {self.arranger.layout.name}")
        self.arranger.arrange()

    def disable(self):
        """Deactivate tiling; windows stay where they are."""
        if not self.enabled:
            return

        for component in self.components:
            component.unsubscribe()
        if getattr(self.display, "on_window_opened", None) == self.window_opened:
            self.display.on_window_opened = None

        # Host close requests go back to plain window deletion
        handler = self.arranger.delete_handler
        for window in self.display.list_windows():
            if window.parameters.get(DELETE_WINDOW) == handler:
                del window.parameters[DELETE_WINDOW]
        self.arranger.delete_handler = None

        self.enabled = False
        logger.debug("[mode] disabled")
        if self.config.debug:
            self.bus.unsubscribe(self.debug_event_logger, pub.ALL_TOPICS)
            logger.disable("mastertile")

    def window_opened(self, window):
        """Registration point for windows the host opened outside a pass."""
        self.bus.sendMessage(topics.WINDOW_OPENED, window=window)

    def setup_bindings(self, bind_fn: Callable[[str, Callable[[], None]], None]):
        """Bind default and custom keys through the host's bind function."""
        self.binding_manager = BindingManager(bus=self.bus, bind_fn=bind_fn)
        self.binding_manager.setup_default_bindings(self.config.prefix)
        if self.config.custom_keybindings:
            self.binding_manager.setup_custom_bindings(self.config.custom_keybindings)
        return self.binding_manager


def main(argv: Optional[List[str]] = None):
    """Main entry point: tile N panes on an in-memory display and print them."""
    from .memory import MemoryDisplay
    from .errors import SubstrateError

    argv = sys.argv[1:] if argv is None else argv
    count = int(argv[0]) if argv else 3

    display = MemoryDisplay(160, 48, content="pane-1")
    tiler = Tiler(display)
    for i in range(2, count + 1):
        try:
            display.open(f"pane-{i}")
        except SubstrateError as e:
            print(f"Display full after {i - 1} panes: {e}")
            break

    print(f"Layout: {tiler.arranger.layout.name}")
    for line in display.describe():
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
