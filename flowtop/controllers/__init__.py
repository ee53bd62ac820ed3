"""Controllers module for flowtop.

This module provides domain-driven controllers for fetching async workload
resources from a Kubernetes cluster.
"""

from __future__ import annotations

# Base classes
from flowtop.controllers.base import (
    AsyncControllerMixin,
    BaseController,
)

# Resources domain
from flowtop.controllers.resources.controller import (
    ClusterInfo,
    ResourceBatch,
    ResourceController,
    ResourceFetchError,
)

__all__ = [
    # Base
    "AsyncControllerMixin",
    "BaseController",
    # Resources domain
    "ClusterInfo",
    "ResourceBatch",
    "ResourceController",
    "ResourceFetchError",
]
