"""Screen mixins."""

from flowtop.screens.mixins.worker_mixin import DataLoaded, DataLoadFailed, WorkerMixin

__all__ = ["DataLoadFailed", "DataLoaded", "WorkerMixin"]
