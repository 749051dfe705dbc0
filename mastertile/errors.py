"""
Tiling Errors

Exceptions raised when a collaborator breaks its contract.
"""


class TilerError(Exception):
    """Base class for mastertile errors."""


class SubstrateError(TilerError):
    """The display substrate rejected a primitive operation."""


class InconsistentTraversalError(TilerError):
    """The selected window is missing from the reported traversal order."""


class ReentrantArrangeError(TilerError):
    """An arrangement pass was started from inside another one."""


class LayoutContractError(TilerError):
    """A layout produced a different number of windows than it was given panes."""
