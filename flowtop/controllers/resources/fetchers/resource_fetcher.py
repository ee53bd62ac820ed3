"""Resource fetcher for resources controller - lists raw items via kubectl."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

from flowtop.constants.enums import ResourceKind
from flowtop.constants.timeouts import CLUSTER_REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FamilyListing:
    """Raw items of one resource family, or an explicit unavailable signal."""

    kind: ResourceKind
    items: list[dict[str, Any]] = field(default_factory=list)
    available: bool = True

    @classmethod
    def unavailable(cls, kind: ResourceKind) -> FamilyListing:
        return cls(kind=kind, items=[], available=False)


class ResourceFetcher:
    """Fetches raw async-resource lists from the Kubernetes cluster."""

    # Fully qualified resource names so kubectl never resolves a short name
    # to an unrelated CRD.
    RESOURCE_NAMES: dict[ResourceKind, str] = {
        ResourceKind.JOB: "jobs.batch",
        ResourceKind.CRON_JOB: "cronjobs.batch",
        ResourceKind.WORKFLOW: "workflows.argoproj.io",
        ResourceKind.CRON_WORKFLOW: "cronworkflows.argoproj.io",
        ResourceKind.SENSOR: "sensors.argoproj.io",
        ResourceKind.EVENT_SOURCE: "eventsources.argoproj.io",
    }
    OPTIONAL_KINDS = frozenset(
        {
            ResourceKind.WORKFLOW,
            ResourceKind.CRON_WORKFLOW,
            ResourceKind.SENSOR,
            ResourceKind.EVENT_SOURCE,
        }
    )
    _UNAVAILABLE_ERROR_TOKENS = (
        "the server doesn't have a resource type",
        "the server could not find the requested resource",
        "no matches for kind",
        "couldn't find resource for",
    )

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    @classmethod
    def _is_unavailable_error(cls, error: Exception) -> bool:
        """Return True when error says the resource type is not served."""
        message = str(error).lower()
        return any(token in message for token in cls._UNAVAILABLE_ERROR_TOKENS)

    def build_list_args(
        self,
        kind: ResourceKind,
        *,
        namespace: str = "",
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> tuple[str, ...]:
        """Build ``kubectl get`` arguments for one family and scope."""
        args: list[str] = ["get", self.RESOURCE_NAMES[kind]]
        if namespace:
            args.extend(["-n", namespace])
        else:
            args.append("--all-namespaces")
        args.extend(["-o", "json", f"--request-timeout={request_timeout}"])
        return tuple(args)

    async def fetch_family(
        self,
        kind: ResourceKind,
        *,
        namespace: str = "",
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
    ) -> FamilyListing:
        """List one resource family.

        Returns an unavailable listing when the cluster does not know the
        resource type. Any other kubectl failure propagates.
        """
        args = self.build_list_args(
            kind, namespace=namespace, request_timeout=request_timeout
        )
        try:
            output = await self._run_kubectl(args)
        except Exception as exc:
            if self._is_unavailable_error(exc):
                logger.debug("Resource family %s is not served by the cluster", kind.value)
                return FamilyListing.unavailable(kind)
            raise

        if not output:
            return FamilyListing(kind=kind)

        try:
            data = json.loads(output)
        except json.JSONDecodeError:
            logger.exception("Error parsing %s list JSON", kind.value)
            return FamilyListing(kind=kind)

        items = data.get("items", []) if isinstance(data, dict) else []
        if not isinstance(items, list):
            items = []
        return FamilyListing(kind=kind, items=items)
