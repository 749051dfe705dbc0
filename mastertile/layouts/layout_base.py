"""
Window Layout Base Classes

Provides the Layout interface, the tiling policy and the layout manager.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ..arranger import Arranger
    from ..display import Display, DisplayWindow
    from ..pane import Pane


MIN_MASTER_FRACTION = 0.05
MAX_MASTER_FRACTION = 0.95
FRACTION_STEP = 0.05


@dataclass(frozen=True)
class LayoutPolicy:
    """Tiling parameters shared by all layouts.

    Out-of-range values are clamped, never rejected.
    """

    master_count: int = 1
    master_fraction: float = 0.55
    narrow_threshold: int = 132

    def __post_init__(self):
        object.__setattr__(self, "master_count", max(0, int(self.master_count)))
        fraction = min(max(self.master_fraction, MIN_MASTER_FRACTION), MAX_MASTER_FRACTION)
        object.__setattr__(self, "master_fraction", round(fraction, 6))


@dataclass
class LayoutContext:
    """What a layout needs while it builds windows."""

    display: "Display"
    policy: LayoutPolicy
    restore: Callable[["Pane", "DisplayWindow"], None]


class Layout(ABC):
    """Abstract base class for window layouts.

    A layout turns an ordered pane list into windows on the display, starting
    from a display holding a single selected window. It must create exactly
    one window per pane, do nothing for an empty list, and depend only on the
    pane count and the policy. Which window ends up selected does not matter.
    """

    @abstractmethod
    def arrange(self, panes: List["Pane"], ctx: LayoutContext):
        """
        Build windows for panes.

        Args:
            panes: Panes in traversal order
            ctx: Display, policy and restore function for this pass
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Layout name for display."""
        pass

    def master_leading(self, ctx: LayoutContext) -> bool:
        """Whether the master panes are the first in traversal order (else the last)."""
        return True

    def __call__(self, panes: List["Pane"], ctx: LayoutContext):
        self.arrange(panes, ctx)


class LayoutManager:
    """
    Manages the available layouts and the tiling policy.

    This component subscribes to layout command events and publishes
    LAYOUT_CHANGED and POLICY_CHANGED events. Every change re-arranges.

    Responsibilities:
    - CMD_INC_MASTER / CMD_DEC_MASTER: Change the number of master panes
    - CMD_INC_FRACTION / CMD_DEC_FRACTION: Change the master area share
    - CMD_CYCLE_LAYOUT / CMD_CYCLE_LAYOUT_REVERSE: Cycle through layouts
    """

    def __init__(self, bus, arranger: "Arranger", layouts: Optional[List[Layout]] = None):
        self.bus = bus
        self.arranger = arranger
        self.layouts: List[Layout] = list(layouts) if layouts else [arranger.layout]
        if arranger.layout not in self.layouts:
            self.layouts.insert(0, arranger.layout)

        self.subscribe()

    def subscribe(self):
        """Subscribe to events LayoutManager cares about."""
        from .. import topics

        self.bus.subscribe(self._on_inc_master, topics.CMD_INC_MASTER)
        self.bus.subscribe(self._on_dec_master, topics.CMD_DEC_MASTER)
        self.bus.subscribe(self._on_inc_fraction, topics.CMD_INC_FRACTION)
        self.bus.subscribe(self._on_dec_fraction, topics.CMD_DEC_FRACTION)
        self.bus.subscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self.bus.subscribe(self._on_cycle_layout_reverse, topics.CMD_CYCLE_LAYOUT_REVERSE)

    def unsubscribe(self):
        """Drop all subscriptions made by subscribe()."""
        from .. import topics

        self.bus.unsubscribe(self._on_inc_master, topics.CMD_INC_MASTER)
        self.bus.unsubscribe(self._on_dec_master, topics.CMD_DEC_MASTER)
        self.bus.unsubscribe(self._on_inc_fraction, topics.CMD_INC_FRACTION)
        self.bus.unsubscribe(self._on_dec_fraction, topics.CMD_DEC_FRACTION)
        self.bus.unsubscribe(self._on_cycle_layout, topics.CMD_CYCLE_LAYOUT)
        self.bus.unsubscribe(self._on_cycle_layout_reverse, topics.CMD_CYCLE_LAYOUT_REVERSE)

    @property
    def policy(self) -> LayoutPolicy:
        return self.arranger.policy

    def inc_master(self, delta: int = 1):
        """Add delta panes to the master area (never below zero)."""
        self._set_policy(master_count=self.policy.master_count + delta)

    def dec_master(self, delta: int = 1):
        self.inc_master(-delta)

    def inc_fraction(self, delta: float = FRACTION_STEP):
        """Grow the master area by delta of the frame."""
        self._set_policy(master_fraction=self.policy.master_fraction + delta)

    def dec_fraction(self, delta: float = FRACTION_STEP):
        self.inc_fraction(-delta)

    def set_master_count(self, count: int):
        self._set_policy(master_count=count)

    def set_master_fraction(self, fraction: float):
        self._set_policy(master_fraction=fraction)

    def _set_policy(self, **changes):
        from .. import topics

        policy = replace(self.policy, **changes)
        self.arranger.policy = policy
        logger.debug(
            f"[policy] master_count={policy.master_count}, "
            f"master_fraction={policy.master_fraction}"
        )
        self.bus.sendMessage(
            topics.POLICY_CHANGED,
            master_count=policy.master_count,
            master_fraction=policy.master_fraction,
        )
        self.arranger.arrange()

    def add_layout(self, layout: Layout):
        """Make a layout available to cycle_layout and set_layout."""
        if layout not in self.layouts:
            self.layouts.append(layout)

    def set_layout(self, name: str):
        """Switch to the layout with the given name.

        Raises:
            KeyError: If no available layout has that name
        """
        for layout in self.layouts:
            if layout.name == name:
                self._activate(layout)
                return
        raise KeyError(f"Unknown layout: {name}")

    def cycle_layout(self, direction: int = 1):
        """Cycle through available layouts."""
        current_idx = 0
        for i, layout in enumerate(self.layouts):
            if layout.name == self.arranger.layout.name:
                current_idx = i
                break

        new_idx = (current_idx + direction) % len(self.layouts)
        self._activate(self.layouts[new_idx])

    def _activate(self, layout: Layout):
        from .. import topics

        self.arranger.layout = layout
        logger.debug(f"[layout] switched to {layout.name}")
        self.bus.sendMessage(topics.LAYOUT_CHANGED, layout_name=layout.name)
        self.arranger.arrange()

    # Command event handlers
    def _on_inc_master(self):
        """Handle CMD_INC_MASTER command."""
        self.inc_master()

    def _on_dec_master(self):
        """Handle CMD_DEC_MASTER command."""
        self.dec_master()

    def _on_inc_fraction(self):
        """Handle CMD_INC_FRACTION command."""
        self.inc_fraction()

    def _on_dec_fraction(self):
        """Handle CMD_DEC_FRACTION command."""
        self.dec_fraction()

    def _on_cycle_layout(self):
        """Handle CMD_CYCLE_LAYOUT command."""
        self.cycle_layout(direction=1)

    def _on_cycle_layout_reverse(self):
        """Handle CMD_CYCLE_LAYOUT_REVERSE command."""
        self.cycle_layout(direction=-1)
