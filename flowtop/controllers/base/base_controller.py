"""Base controller with async worker-friendly patterns for flowtop.

Controllers wrap blocking kubectl calls so screens can await them from
Textual workers without stalling the event loop.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class AsyncControllerMixin:
    """Mixin tracking the timing of the current background load."""

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    def _mark_load_started(self) -> None:
        self._load_start_time = time.monotonic()

    def _elapsed_ms(self) -> float:
        """Milliseconds since the last ``_mark_load_started`` call."""
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000.0


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses implement connection checks and a full fetch of their
    data source.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
