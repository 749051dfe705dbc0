"""
mastertile - dynamic master/stack tiling

A dwm-style tiling engine that arranges content panes into a split tree of
windows and keeps each pane's view and the selection across rearrangements.

This package provides:
- Pane snapshots that survive a full rebuild of the window tree
- Layout algorithms (stack, mastered combinator, tall, wide)
- An arranger running snapshot, teardown, layout, restore and reselect passes
- Commands for master count, master fraction, selection, swap, zoom, clone, close
- An in-memory display substrate

Example usage:
    from mastertile import MemoryDisplay, Tiler, TilerConfig

    display = MemoryDisplay(160, 48, content="notes.txt")
    tiler = Tiler(display, TilerConfig(master_fraction=0.6))
    display.open("todo.txt")
    tiler.window_controller.zoom()

Or run the demo:
    python -m mastertile 4
"""

__version__ = "0.1.0"
__author__ = "pinpox"

from loguru import logger

logger.disable("mastertile")

from .protocol import Side, Area

from .errors import (
    TilerError,
    SubstrateError,
    InconsistentTraversalError,
    ReentrantArrangeError,
    LayoutContractError,
)

from .display import Display, DisplayWindow

from .pane import Pane, ViewState, capture, restore, DELETE_WINDOW

from .memory import MemoryDisplay, MemoryWindow

from .layouts import (
    Layout,
    LayoutContext,
    LayoutPolicy,
    LayoutManager,
    StackLayout,
    MasteredLayout,
    TallLayout,
    WideLayout,
)

from .arranger import Arranger
from .focus_manager import FocusManager
from .window_controller import WindowController
from .binding_manager import BindingManager, KeyBinding, DEFAULT_BINDINGS

from .tiler import Tiler, TilerConfig

from . import topics

__all__ = [
    # Version
    "__version__",
    # Geometry
    "Side",
    "Area",
    # Errors
    "TilerError",
    "SubstrateError",
    "InconsistentTraversalError",
    "ReentrantArrangeError",
    "LayoutContractError",
    # Display
    "Display",
    "DisplayWindow",
    "MemoryDisplay",
    "MemoryWindow",
    # Panes
    "Pane",
    "ViewState",
    "capture",
    "restore",
    "DELETE_WINDOW",
    # Layouts
    "Layout",
    "LayoutContext",
    "LayoutPolicy",
    "LayoutManager",
    "StackLayout",
    "MasteredLayout",
    "TallLayout",
    "WideLayout",
    # Components
    "Arranger",
    "FocusManager",
    "WindowController",
    "BindingManager",
    "KeyBinding",
    "DEFAULT_BINDINGS",
    # Tiler
    "Tiler",
    "TilerConfig",
    # Event topics
    "topics",
]
