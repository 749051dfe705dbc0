"""
Layout System

Provides layout algorithms, the tiling policy and layout management.
"""

from .layout_base import (
    Layout,
    LayoutContext,
    LayoutPolicy,
    LayoutManager,
)
from .layout_stack import StackLayout
from .layout_mastered import MasteredLayout
from .layout_tall import TallLayout, WideLayout, tall_side

__all__ = [
    # Base classes
    "Layout",
    "LayoutContext",
    "LayoutPolicy",
    "LayoutManager",
    # Layout implementations
    "StackLayout",
    "MasteredLayout",
    "TallLayout",
    "WideLayout",
    "tall_side",
]
