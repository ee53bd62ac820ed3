"""Tests for keyboard binding tables."""

from __future__ import annotations

from textual.binding import Binding

from flowtop.keyboard import DETAIL_SCREEN_BINDINGS, RESOURCES_SCREEN_BINDINGS
from flowtop.keyboard.app import APP_BINDINGS
from flowtop.screens.detail import ResourceDetailScreen
from flowtop.screens.resources import ResourcesScreen


def _keys_to_actions(bindings: list) -> dict[str, str]:
    mapping: dict[str, str] = {}
    for binding in bindings:
        if isinstance(binding, Binding):
            mapping[binding.key] = binding.action
        else:
            mapping[binding[0]] = binding[1]
    return mapping


class TestBindings:
    """Tests for binding tables and their screen actions."""

    def test_app_bindings(self) -> None:
        """Help, refresh and quit are available everywhere."""
        mapping = _keys_to_actions(APP_BINDINGS)
        assert mapping["?"] == "show_help"
        assert mapping["r"] == "refresh"
        assert mapping["q"] == "quit"
        assert mapping["ctrl+c"] == "quit"

    def test_quit_key_does_not_override_modals(self) -> None:
        """q is not a priority binding so the detail modal can close on it."""
        quit_binding = next(b for b in APP_BINDINGS if b.key == "q")
        assert quit_binding.priority is False

    def test_resources_bindings_have_actions(self) -> None:
        """Every resources-screen binding resolves to a screen action."""
        for action in _keys_to_actions(RESOURCES_SCREEN_BINDINGS).values():
            assert callable(getattr(ResourcesScreen, f"action_{action}", None)), action

    def test_view_keys(self) -> None:
        """Number keys select the views directly."""
        mapping = _keys_to_actions(RESOURCES_SCREEN_BINDINGS)
        assert mapping["1"] == "view_all"
        assert mapping["2"] == "view_jobs"
        assert mapping["3"] == "view_workflows"
        assert mapping["4"] == "view_events"
        assert mapping["tab"] == "next_view"
        assert mapping["J"] == "toggle_timezone"

    def test_detail_bindings_close(self) -> None:
        """Escape, enter and q all close the detail view."""
        mapping = _keys_to_actions(DETAIL_SCREEN_BINDINGS)
        assert mapping == {"escape": "close", "enter": "close", "q": "close"}
        assert callable(ResourceDetailScreen.action_close)
