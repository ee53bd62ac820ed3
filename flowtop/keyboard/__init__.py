"""Keyboard bindings module.

Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (*_SCREEN_BINDINGS)
"""

from flowtop.keyboard.app import APP_BINDINGS
from flowtop.keyboard.navigation import (
    DETAIL_SCREEN_BINDINGS,
    RESOURCES_SCREEN_BINDINGS,
)

__all__ = [
    "APP_BINDINGS",
    # Screen-specific bindings
    "DETAIL_SCREEN_BINDINGS",
    "RESOURCES_SCREEN_BINDINGS",
]
