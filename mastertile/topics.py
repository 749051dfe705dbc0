"""
Event Topics for mastertile

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Window lifecycle events
WINDOW_OPENED = "window.opened"
"""Published by the host after it opened a window outside an arrangement pass.
Params: window"""

# Focus state notifications
FOCUS_CHANGED = "focus.changed"
"""Published when the selection moves without a rearrangement. Params: window"""

# Layout notifications
ARRANGED = "layout.arranged"
"""Published after every arrangement pass.
Params: layout_name, pane_count, selected_index"""

LAYOUT_CHANGED = "layout.changed"
"""Published when the active layout is changed (e.g., tall → wide). Params: layout_name"""

POLICY_CHANGED = "layout.policy_changed"
"""Published when master count or fraction changes.
Params: master_count, master_fraction"""

# Command events (imperative - tell components to do something)
# These are triggered by key bindings or by the host directly

CMD_ARRANGE = "cmd.arrange"
"""Command: Re-arrange all windows with the active layout."""

# Focus commands
CMD_SELECT_NEXT = "cmd.select_next"
"""Command: Select next window."""

CMD_SELECT_PREV = "cmd.select_prev"
"""Command: Select previous window."""

# Window swap commands
CMD_SWAP_NEXT = "cmd.swap_next"
"""Command: Swap selected window with next."""

CMD_SWAP_PREV = "cmd.swap_prev"
"""Command: Swap selected window with previous."""

CMD_ZOOM = "cmd.zoom"
"""Command: Promote selected window to master, or demote the master."""

CMD_CLONE_WINDOW = "cmd.clone_window"
"""Command: Show the selected pane in one more window."""

CMD_CLOSE_WINDOW = "cmd.close_window"
"""Command: Close a window and re-arrange. Optional param: window"""

# Policy commands
CMD_INC_MASTER = "cmd.inc_master"
"""Command: One more pane in the master area."""

CMD_DEC_MASTER = "cmd.dec_master"
"""Command: One less pane in the master area."""

CMD_INC_FRACTION = "cmd.inc_fraction"
"""Command: Grow the master area."""

CMD_DEC_FRACTION = "cmd.dec_fraction"
"""Command: Shrink the master area."""

# Layout commands
CMD_CYCLE_LAYOUT = "cmd.cycle_layout"
"""Command: Cycle to next layout."""

CMD_CYCLE_LAYOUT_REVERSE = "cmd.cycle_layout_reverse"
"""Command: Cycle to previous layout."""
