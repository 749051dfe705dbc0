"""
Pane Snapshots

A pane is a point-in-time copy of what a window shows and how it is
scrolled, so that the same view can be rebuilt in a brand new window.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .display import DisplayWindow


DELETE_WINDOW = "delete-window"
"""Window parameter holding the handler for host-level close requests."""


@dataclass(frozen=True)
class ViewState:
    """Visual and navigational state of a window."""

    start: int = 0
    hscroll: int = 0
    vscroll: float = 0.0
    point: int = 0
    history: Tuple[Any, ...] = ()


@dataclass(frozen=True)
class Pane:
    """Content reference plus the view state that goes with it."""

    content: Any
    view: ViewState = field(default_factory=ViewState)
    parameters: Dict[Any, Any] = field(default_factory=dict)


def capture(window: "DisplayWindow") -> Pane:
    """Snapshot a live window into a pane without touching the window."""
    return Pane(
        content=window.content,
        view=ViewState(
            start=window.start,
            hscroll=window.hscroll,
            vscroll=window.vscroll,
            point=window.point,
            history=tuple(window.history),
        ),
        parameters=dict(window.parameters),
    )


def restore(
    pane: Pane,
    window: "DisplayWindow",
    delete_handler: Optional[Callable[["DisplayWindow"], None]] = None,
):
    """
    Write a pane back onto a window.

    Content goes first since hosts may reset scroll state when the shown
    content changes. Parameters are replaced wholesale.

    Args:
        pane: Snapshot to apply
        window: Live window receiving the snapshot
        delete_handler: Installed under DELETE_WINDOW unless the pane
            already carries one
    """
    window.content = pane.content
    window.start = pane.view.start
    window.hscroll = pane.view.hscroll
    window.vscroll = pane.view.vscroll
    window.point = pane.view.point
    window.history = list(pane.view.history)

    window.parameters.clear()
    window.parameters.update(pane.parameters)
    if delete_handler is not None:
        window.parameters.setdefault(DELETE_WINDOW, delete_handler)
