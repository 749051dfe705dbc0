"""
Unit tests for layout algorithms.
"""

import math

import pytest
from pubsub import pub

from mastertile import Arranger, MemoryDisplay, Pane, Side
from mastertile.layouts import (
    LayoutContext,
    LayoutPolicy,
    MasteredLayout,
    StackLayout,
    TallLayout,
    WideLayout,
    tall_side,
)
from mastertile.memory import MIN_WINDOW_SIZE
from mastertile.protocol import Area


def panes_for(names):
    return [Pane(content=name) for name in names]


def arranged(display, layout, names, **policy):
    """Arrange named panes on a display and return its windows."""
    arranger = Arranger(pub, display, layout, LayoutPolicy(**policy))
    arranger.arrange(panes_for(names))
    return display.list_windows()


@pytest.mark.unit
class TestStackLayout:
    """Test stack layout calculations."""

    def test_empty_pane_list_is_noop(self):
        display = MemoryDisplay(100, 40, content="untouched")
        ctx = LayoutContext(display, LayoutPolicy(), lambda pane, window: None)

        StackLayout().arrange([], ctx)

        assert len(display.list_windows()) == 1
        assert display.selected_window().content == "untouched"

    def test_single_pane_does_not_split(self):
        windows = arranged(MemoryDisplay(100, 40), StackLayout(), ["A"])

        assert len(windows) == 1
        assert windows[0].content == "A"
        assert windows[0].area == Area(0, 0, 100, 40)

    def test_panes_stacked_evenly(self):
        windows = arranged(MemoryDisplay(100, 40), StackLayout(), ["A", "B", "C", "D"])

        assert [w.content for w in windows] == ["A", "B", "C", "D"]
        assert [w.area.height for w in windows] == [10, 10, 10, 10]
        assert [w.area.y for w in windows] == [0, 10, 20, 30]
        assert all(w.area.width == 100 for w in windows)

    def test_uneven_height_goes_to_last_window(self):
        windows = arranged(MemoryDisplay(100, 50), StackLayout(), ["A", "B", "C"])

        assert [w.area.height for w in windows] == [17, 17, 16]

    @pytest.mark.parametrize("count", range(2, 25))
    def test_fills_display_up_to_capacity(self, count):
        windows = arranged(MemoryDisplay(150, 48), StackLayout(), [str(i) for i in range(count)])
        heights = [w.area.height for w in windows]

        assert len(windows) == count
        assert sum(heights) == 48
        assert min(heights) >= MIN_WINDOW_SIZE
        assert max(heights) - min(heights) <= 1
        assert heights == sorted(heights, reverse=True)


@pytest.mark.unit
class TestMasteredLayout:
    """Test the master-stack combinator."""

    def test_master_left_stack_right(self):
        windows = arranged(MemoryDisplay(150, 50), MasteredLayout(Side.LEFT), ["A", "B", "C"])
        master_width = math.ceil(0.55 * 150)

        assert [w.content for w in windows] == ["A", "B", "C"]
        assert windows[0].area == Area(0, 0, master_width, 50)
        assert windows[1].area == Area(master_width, 0, 150 - master_width, 25)
        assert windows[2].area == Area(master_width, 25, 150 - master_width, 25)

    def test_master_right_takes_last_panes(self):
        windows = arranged(MemoryDisplay(150, 50), MasteredLayout(Side.RIGHT), ["A", "B"])
        master_width = math.ceil(0.55 * 150)

        assert [w.content for w in windows] == ["A", "B"]
        assert windows[0].area == Area(0, 0, 150 - master_width, 50)
        assert windows[1].area == Area(150 - master_width, 0, master_width, 50)

    @pytest.mark.parametrize("side", list(Side))
    def test_repeated_passes_keep_order(self, side):
        display = MemoryDisplay(150, 50)
        arranger = Arranger(pub, display, MasteredLayout(side), LayoutPolicy(master_count=2))
        names = ["A", "B", "C", "D"]

        arranger.arrange(panes_for(names))
        for _ in range(3):
            arranger.arrange()
            assert [w.content for w in display.list_windows()] == names

    @pytest.mark.parametrize("n", range(1, 6))
    @pytest.mark.parametrize("master_count", range(0, 4))
    def test_master_area_holds_first_panes(self, n, master_count):
        names = [f"p{i}" for i in range(n)]
        windows = arranged(
            MemoryDisplay(150, 50), TallLayout(), names, master_count=master_count
        )
        master_n = min(master_count, n)

        assert [w.content for w in windows] == names
        if 0 < master_n < n:
            master = [w for w in windows if w.area.x == 0]
            stack = [w for w in windows if w.area.x > 0]
            assert [w.content for w in master] == names[:master_n]
            assert [w.content for w in stack] == names[master_n:]
        else:
            # Only one area: it fills the display
            assert all(w.area.width == 150 for w in windows)

    def test_zero_master_count_is_plain_stack(self):
        windows = arranged(
            MemoryDisplay(150, 50), TallLayout(), ["A", "B"], master_count=0
        )
        assert [w.area for w in windows] == [Area(0, 0, 150, 25), Area(0, 25, 150, 25)]

    def test_master_fraction_sets_master_size(self):
        windows = arranged(
            MemoryDisplay(150, 50), TallLayout(), ["A", "B"], master_fraction=0.3
        )
        assert windows[0].area.width == 45

    def test_multiple_master_panes_stack_in_master_area(self):
        windows = arranged(
            MemoryDisplay(150, 50), TallLayout(), ["A", "B", "C"], master_count=2
        )
        master_width = math.ceil(0.55 * 150)

        assert windows[0].area == Area(0, 0, master_width, 25)
        assert windows[1].area == Area(0, 25, master_width, 25)
        assert windows[2].area == Area(master_width, 0, 150 - master_width, 50)

    def test_name(self):
        assert MasteredLayout(Side.LEFT).name == "mastered-left-stack"
        assert MasteredLayout(tall_side).name == "mastered-auto-stack"
        assert MasteredLayout(Side.ABOVE, name="top").name == "top"


@pytest.mark.unit
class TestTallLayout:
    """Test orientation selection."""

    @pytest.mark.parametrize("count", range(1, 26))
    def test_one_window_per_pane(self, count):
        # 160x48 holds up to 24 stack rows of MIN_WINDOW_SIZE next to the master
        windows = arranged(MemoryDisplay(160, 48), TallLayout(), [str(i) for i in range(count)])

        assert len(windows) == count
        assert all(w.area.height >= MIN_WINDOW_SIZE for w in windows)

    @pytest.mark.parametrize("count", [4, 8, 10, 11])
    def test_one_window_per_pane_on_narrow_frame(self, count):
        windows = arranged(MemoryDisplay(100, 48), TallLayout(), [str(i) for i in range(count)])

        assert len(windows) == count
        assert all(w.area.height >= MIN_WINDOW_SIZE for w in windows)

    def test_narrow_frame_puts_master_above(self):
        windows = arranged(MemoryDisplay(100, 50), TallLayout(), ["A", "B", "C"])
        master, b, c = windows

        assert master.area == Area(0, 0, 100, math.ceil(0.55 * 50))
        assert b.area.y >= master.area.y + master.area.height
        assert c.area.y >= b.area.y + b.area.height
        assert all(w.area.width == 100 for w in windows)

    def test_wide_frame_puts_master_left(self):
        windows = arranged(MemoryDisplay(150, 50), TallLayout(), ["A", "B", "C"])
        master, b, c = windows

        assert master.area.x == 0 and master.area.height == 50
        assert b.area.x >= master.area.width
        assert c.area.x >= master.area.width

    def test_threshold_comes_from_policy(self):
        windows = arranged(
            MemoryDisplay(150, 50), TallLayout(), ["A", "B"], narrow_threshold=200
        )
        assert windows[0].area.width == 150

    def test_wide_layout_always_above(self):
        windows = arranged(MemoryDisplay(150, 50), WideLayout(), ["A", "B"])
        assert windows[0].area == Area(0, 0, 150, math.ceil(0.55 * 50))
        assert WideLayout().name == "wide"
        assert TallLayout().name == "tall"


@pytest.mark.unit
class TestLayoutPolicy:
    """Test policy clamping."""

    def test_defaults(self):
        policy = LayoutPolicy()
        assert policy.master_count == 1
        assert policy.master_fraction == 0.55
        assert policy.narrow_threshold == 132

    def test_values_are_clamped(self):
        assert LayoutPolicy(master_count=-3).master_count == 0
        assert LayoutPolicy(master_fraction=1.5).master_fraction == 0.95
        assert LayoutPolicy(master_fraction=0.0).master_fraction == 0.05
