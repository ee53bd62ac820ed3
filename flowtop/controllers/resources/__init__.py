"""Resources domain: async workload listing and normalization."""

from flowtop.controllers.resources.controller import (
    ClusterInfo,
    ResourceBatch,
    ResourceController,
    ResourceFetchError,
)
from flowtop.controllers.resources.fetchers import FamilyListing, ResourceFetcher
from flowtop.controllers.resources.parsers import ResourceParser

__all__ = [
    "ClusterInfo",
    "FamilyListing",
    "ResourceBatch",
    "ResourceController",
    "ResourceFetchError",
    "ResourceFetcher",
    "ResourceParser",
]
