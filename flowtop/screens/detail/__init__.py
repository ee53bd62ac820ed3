"""Detail screen module."""

from flowtop.screens.detail.detail_screen import ResourceDetailScreen
from flowtop.screens.detail.presenter import DetailSection, ResourceDetailPresenter

__all__ = ["DetailSection", "ResourceDetailPresenter", "ResourceDetailScreen"]
