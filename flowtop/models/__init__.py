"""Data models for the flowtop TUI."""

from flowtop.models.core import AsyncResourceInfo, DAGNodeInfo

__all__ = ["AsyncResourceInfo", "DAGNodeInfo"]
