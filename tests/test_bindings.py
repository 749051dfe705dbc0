"""
Unit tests for key bindings.
"""

import pytest
from pubsub import pub

from mastertile import BindingManager, DEFAULT_BINDINGS, topics


@pytest.fixture
def host_keymap():
    """Stand-in for the host's key binding table."""
    return {}


@pytest.mark.unit
class TestBindingManager:
    """Test binding keys to command events."""

    def test_default_bindings_use_prefix(self, host_keymap):
        manager = BindingManager(pub, host_keymap.__setitem__)

        manager.setup_default_bindings("s-")

        assert len(host_keymap) == len(DEFAULT_BINDINGS)
        assert all(key.startswith("s-") for key in host_keymap)
        assert manager.key_bindings["s-<return>"].event_topic == topics.CMD_ZOOM
        assert manager.key_bindings["s-S-j"].event_topic == topics.CMD_SWAP_NEXT

    def test_pressed_key_publishes_command(self, host_keymap):
        manager = BindingManager(pub, host_keymap.__setitem__)
        manager.setup_default_bindings("M-")
        received = []

        def on_arrange():
            received.append("arrange")

        pub.subscribe(on_arrange, topics.CMD_ARRANGE)
        host_keymap["M-r"]()

        assert received == ["arrange"]

    def test_custom_bindings_carry_data(self, host_keymap):
        manager = BindingManager(pub, host_keymap.__setitem__)
        received = []

        def on_close(window=None):
            received.append(window)

        pub.subscribe(on_close, topics.CMD_CLOSE_WINDOW)
        manager.setup_custom_bindings([("C-x 0", topics.CMD_CLOSE_WINDOW, {"window": "w1"})])
        host_keymap["C-x 0"]()

        assert received == ["w1"]
        assert manager.key_bindings["C-x 0"].event_data == {"window": "w1"}

    def test_no_custom_bindings(self, host_keymap):
        manager = BindingManager(pub, host_keymap.__setitem__)
        manager.setup_custom_bindings(None)
        assert host_keymap == {}


@pytest.mark.unit
class TestTilerBindings:
    """Test bindings wired through a tiler."""

    def test_keys_drive_the_tiler(self, make_tiler, wide_display, host_keymap, contents):
        tiler = make_tiler(wide_display, ["B", "C"])
        tiler.setup_bindings(host_keymap.__setitem__)

        host_keymap["M-<return>"]()
        assert contents(wide_display) == ["C", "A", "B"]

        host_keymap["M-i"]()
        assert tiler.arranger.policy.master_count == 2

        host_keymap["M-j"]()
        assert wide_display.selected_window().content == "A"

    def test_custom_bindings_from_config(self, make_tiler, wide_display, host_keymap):
        tiler = make_tiler(
            wide_display,
            ["B"],
            prefix="C-c ",
            custom_keybindings=[("<f5>", topics.CMD_CYCLE_LAYOUT, {})],
        )
        tiler.setup_bindings(host_keymap.__setitem__)

        assert "C-c r" in host_keymap
        host_keymap["<f5>"]()
        assert tiler.arranger.layout.name == "wide"
