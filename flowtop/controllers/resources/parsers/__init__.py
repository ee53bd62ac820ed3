"""Parsers for the resources controller."""

from flowtop.controllers.resources.parsers.resource_parser import ResourceParser

__all__ = ["ResourceParser"]
