"""Resources screen module."""

from flowtop.screens.resources.presenter import (
    ClusterInfoLoaded,
    ResourcesLoaded,
    ResourcesLoadFailed,
    ResourcesPresenter,
)
from flowtop.screens.resources.resources_screen import ResourcesScreen

__all__ = [
    "ClusterInfoLoaded",
    "ResourcesLoadFailed",
    "ResourcesLoaded",
    "ResourcesPresenter",
    "ResourcesScreen",
]
