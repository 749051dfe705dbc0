"""
Binding Manager

Binds host keys to command events.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from . import topics


@dataclass
class KeyBinding:
    """Represents a keyboard binding."""

    key: str  # Full key description including the prefix, e.g. 'M-S-j'
    event_topic: str  # Event topic to publish (e.g., 'cmd.zoom')
    event_data: dict  # Additional event parameters


DEFAULT_BINDINGS: List[Tuple[str, str]] = [
    ("r", topics.CMD_ARRANGE),
    ("j", topics.CMD_SELECT_NEXT),
    ("k", topics.CMD_SELECT_PREV),
    ("S-j", topics.CMD_SWAP_NEXT),
    ("S-k", topics.CMD_SWAP_PREV),
    ("h", topics.CMD_DEC_FRACTION),
    ("l", topics.CMD_INC_FRACTION),
    ("d", topics.CMD_DEC_MASTER),
    ("i", topics.CMD_INC_MASTER),
    ("S-c", topics.CMD_CLOSE_WINDOW),
    ("<return>", topics.CMD_ZOOM),
    ("S-<return>", topics.CMD_CLONE_WINDOW),
    ("SPC", topics.CMD_CYCLE_LAYOUT),
    ("S-SPC", topics.CMD_CYCLE_LAYOUT_REVERSE),
]
"""dwm-style keys, relative to the configured prefix."""


class BindingManager:
    """Manages key bindings.

    The host supplies a bind function taking a key description and a
    zero-argument callback; each callback publishes a command event.
    """

    def __init__(self, bus, bind_fn: Callable[[str, Callable[[], None]], None]):
        """Initialize binding manager.

        Args:
            bus: Event bus instance (Pypubsub)
            bind_fn: Host function registering a callback for a key
        """
        self.bus = bus
        self._bind = bind_fn
        self.key_bindings: Dict[str, KeyBinding] = {}

    def bind_key(self, key: str, event_topic: str, **event_data):
        """Create a key binding that publishes a command event.

        Args:
            key: Full key description
            event_topic: The command event topic to publish (e.g., 'cmd.zoom')
            **event_data: Optional data to pass with the event
        """

        def publish_command():
            self.bus.sendMessage(event_topic, **event_data)

        self._bind(key, publish_command)
        self.key_bindings[key] = KeyBinding(key, event_topic, event_data)

    def setup_default_bindings(self, prefix: str):
        """Bind the default keys under prefix (e.g. 'M-')."""
        for key, event_topic in DEFAULT_BINDINGS:
            self.bind_key(prefix + key, event_topic)

    def setup_custom_bindings(self, custom_bindings: list):
        """Set up user-defined custom keybindings.

        Args:
            custom_bindings: List of (key, event_topic, event_data) tuples
        """
        if not custom_bindings:
            return

        for key, event_topic, event_data in custom_bindings:
            self.bind_key(key, event_topic, **event_data)
