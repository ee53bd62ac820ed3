"""Modal detail view of one resource snapshot."""

from __future__ import annotations

from datetime import tzinfo

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from flowtop.keyboard import DETAIL_SCREEN_BINDINGS
from flowtop.models.core.resource_info import AsyncResourceInfo
from flowtop.screens.detail.presenter import ResourceDetailPresenter


class ResourceDetailScreen(ModalScreen[None]):
    """Shows a value snapshot; later refreshes never change what is displayed."""

    BINDINGS = DETAIL_SCREEN_BINDINGS

    def __init__(self, record: AsyncResourceInfo, display_tz: tzinfo) -> None:
        super().__init__(classes="detail-modal-screen")
        self._presenter = ResourceDetailPresenter(record, display_tz)

    @property
    def record(self) -> AsyncResourceInfo:
        return self._presenter.record

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="detail-shell"):
            yield Static(self._presenter.title, id="detail-title", markup=False)
            yield Static(self._presenter.render(), id="detail-body")
            yield Static("Press ESC or Enter to close", id="detail-footer")

    def action_close(self) -> None:
        self.dismiss(None)
