"""Screens for the flowtop TUI."""

from flowtop.screens.detail import ResourceDetailScreen
from flowtop.screens.resources import ResourcesScreen

__all__ = ["ResourceDetailScreen", "ResourcesScreen"]
