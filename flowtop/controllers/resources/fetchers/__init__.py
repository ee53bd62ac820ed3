"""Fetchers for the resources controller."""

from flowtop.controllers.resources.fetchers.resource_fetcher import (
    FamilyListing,
    ResourceFetcher,
)

__all__ = ["FamilyListing", "ResourceFetcher"]
