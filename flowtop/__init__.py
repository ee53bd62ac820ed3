"""flowtop - terminal dashboard for Kubernetes async workloads."""

from flowtop.constants.values import APP_VERSION

__version__ = APP_VERSION

__all__ = ["__version__"]
