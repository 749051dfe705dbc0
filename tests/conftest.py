"""
Shared pytest fixtures for mastertile tests.
"""

import pytest
from pubsub import pub

from mastertile import MemoryDisplay, Tiler, TilerConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: tests running against the in-memory display")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop every pubsub listener so components from one test never see another's events."""
    pub.unsubAll()
    yield
    pub.unsubAll()


@pytest.fixture
def wide_display():
    """150x50 display, wider than the default narrow threshold."""
    return MemoryDisplay(150, 50, content="A")


@pytest.fixture
def narrow_display():
    """100x50 display, narrower than the default narrow threshold."""
    return MemoryDisplay(100, 50, content="A")


@pytest.fixture
def make_tiler():
    """Factory fixture: enable a tiler on a display and open extra panes."""

    def factory(display, contents=(), **config):
        tiler = Tiler(display, TilerConfig(debug=False, **config))
        for content in contents:
            display.open(content)
        return tiler

    return factory


@pytest.fixture
def contents():
    """Contents of a display's windows in traversal order."""

    def read(display):
        return [window.content for window in display.list_windows()]

    return read


@pytest.fixture
def selected_content():
    """Content of a display's selected window."""

    def read(display):
        return display.selected_window().content

    return read
