"""Core resource models."""

from flowtop.models.core.resource_info import AsyncResourceInfo, DAGNodeInfo

__all__ = ["AsyncResourceInfo", "DAGNodeInfo"]
