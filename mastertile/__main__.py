"""
Main entry point for running mastertile as a module.

Usage:
    python -m mastertile [pane-count]
"""

from .tiler import main

if __name__ == "__main__":
    import sys

    sys.exit(main())
