"""Base controller classes."""

from flowtop.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
)

__all__ = ["AsyncControllerMixin", "BaseController"]
