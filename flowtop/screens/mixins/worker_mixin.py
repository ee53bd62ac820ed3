"""WorkerMixin - Worker lifecycle management for async data loading.

Screens mixing this in get:
- Background worker management using Textual Workers
- Loading state tracking through the ``is_loading`` reactive
- Loading duration tracking
- Error state surfacing through the ``error`` reactive

Uses Textual's built-in ``self.workers`` (WorkerManager) for lifecycle
management.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


# ============================================================================
# Base Message Classes for Worker Communication
# ============================================================================


class DataLoaded(Message):
    """Base message indicating successful data load.

    Attributes:
        data: The loaded data payload
        duration_ms: Time taken to load data in milliseconds
    """

    def __init__(self, data: Any, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.data = data
        self.duration_ms = duration_ms


class DataLoadFailed(Message):
    """Base message indicating failed data load.

    Attributes:
        error: Error message describing the failure
    """

    def __init__(self, error: str) -> None:
        super().__init__()
        self.error = error


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_mount(self) -> None:
                self.start_worker(self._load_worker, name="my-worker")
        ```
    """

    is_loading = reactive(False)
    error = reactive[str | None](None)
    loading_duration_ms = reactive(0.0, init=False)

    def __init__(self) -> None:
        super().__init__()
        self._load_start_time: float | None = None
        self._active_worker_name: str | None = None

    def watch_error(self, error: str | None) -> None:
        """Watch for error state changes."""
        if error:
            self.show_error_state(error)

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        exclusive: bool = True,
        thread: bool = False,
        name: str | None = None,
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start a worker for background data loading.

        Args:
            worker_func: Async function to run in worker
            exclusive: If True, cancel previous workers in the same group
            thread: If False, run in async event loop (preferred for I/O operations)
            name: Optional worker name for debugging
            exit_on_error: If False, errors don't crash the app

        Returns:
            The Worker instance
        """
        self._load_start_time = time.monotonic()
        self._active_worker_name = name
        self.is_loading = True

        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            exclusive=exclusive,
            thread=thread,
            name=name,
            group=name or "default",
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self) -> None:
        """Cancel all running workers using Textual's built-in WorkerManager."""
        with suppress(NoActiveAppError):
            self.workers.cancel_all()  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Track loading duration and surface worker errors."""
        duration_ms = 0.0
        if self._load_start_time is not None and event.state in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            duration_ms = (time.monotonic() - self._load_start_time) * 1000
            self.loading_duration_ms = duration_ms
            self._load_start_time = None

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{event.worker.name}' was cancelled ({duration_ms:.2f}ms)")
            self.is_loading = False
        elif event.state == WorkerState.ERROR:
            logger.error(f"Worker '{event.worker.name}' error: {event.worker.error} ({duration_ms:.2f}ms)")
            self.is_loading = False
            self.error = str(event.worker.error)
        elif event.state == WorkerState.SUCCESS:
            logger.debug(f"Worker '{event.worker.name}' completed successfully ({duration_ms:.2f}ms)")
            self.is_loading = False

    def show_error_state(self, message: str) -> None:
        """Show an error state. Screens override this with their own UI."""
        logger.warning("Screen error: %s", message)


__all__ = [
    "DataLoadFailed",
    "DataLoaded",
    "WorkerMixin",
]
