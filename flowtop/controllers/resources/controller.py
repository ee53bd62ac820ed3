"""Resources controller for async workload data operations.

Lists every tracked resource family through kubectl, normalizes the raw
items and reports per-family problems as nonfatal warnings so one broken
family never blanks the whole dashboard.
"""

from __future__ import annotations

import asyncio
import json
import logging
import subprocess
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from flowtop.constants.enums import ResourceKind
from flowtop.constants.timeouts import (
    CLUSTER_CHECK_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
)
from flowtop.controllers.base import BaseController
from flowtop.controllers.resources.fetchers import FamilyListing, ResourceFetcher
from flowtop.controllers.resources.parsers import ResourceParser
from flowtop.models.core.resource_info import AsyncResourceInfo

logger = logging.getLogger(__name__)


class ResourceFetchError(Exception):
    """Raised when no resource family could be listed."""


@dataclass(frozen=True)
class ResourceBatch:
    """One complete poll of the cluster."""

    records: tuple[AsyncResourceInfo, ...]
    warnings: dict[str, str] = field(default_factory=dict)
    fetched_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class ClusterInfo:
    """Names shown on the info line."""

    context: str = ""
    cluster: str = ""


class ResourceController(BaseController):
    """Async resource data operations backed by kubectl."""

    FAMILY_ORDER: tuple[ResourceKind, ...] = (
        ResourceKind.JOB,
        ResourceKind.CRON_JOB,
        ResourceKind.WORKFLOW,
        ResourceKind.CRON_WORKFLOW,
        ResourceKind.SENSOR,
        ResourceKind.EVENT_SOURCE,
    )

    def __init__(
        self,
        namespace: str = "",
        context: str | None = None,
        request_timeout: str = CLUSTER_REQUEST_TIMEOUT,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the resources controller.

        Args:
            namespace: Namespace scope; empty means all namespaces.
            context: Optional Kubernetes context name.
            request_timeout: Per-request timeout passed to kubectl.
            clock: Source of the batch timestamp, for tests.
        """
        super().__init__()
        self.namespace = namespace
        self.context = context
        self.request_timeout = request_timeout
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._nonfatal_warnings: dict[str, str] = {}

        self._fetcher = ResourceFetcher(self._run_kubectl)
        self._parser = ResourceParser()

    def _build_kubectl_cmd(self, args: tuple[str, ...]) -> list[str]:
        cmd = ["kubectl"]
        if self.context:
            cmd.extend(["--context", self.context])
        cmd.extend(args)
        return cmd

    async def _run_kubectl(
        self,
        args: tuple[str, ...],
        timeout: float = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command as a child process.

        The process is killed when the call times out or the awaiting task is
        cancelled, so an abandoned fetch leaves no kubectl running behind it.
        """
        cmd = self._build_kubectl_cmd(args)
        process = await asyncio.create_subprocess_exec(
            *cmd,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout_b, stderr_b = await asyncio.wait_for(
                process.communicate(), timeout=timeout
            )
        except asyncio.TimeoutError:
            await self._kill_process(process)
            raise subprocess.TimeoutExpired(cmd, timeout) from None
        except asyncio.CancelledError:
            await self._kill_process(process)
            raise

        stdout = stdout_b.decode("utf-8", errors="replace") if stdout_b else ""
        if process.returncode != 0:
            stderr = stderr_b.decode("utf-8", errors="replace").strip() if stderr_b else ""
            raise RuntimeError(stderr or "kubectl command failed")
        return stdout

    @staticmethod
    async def _kill_process(process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        with suppress(ProcessLookupError):
            process.kill()
        await process.wait()

    @staticmethod
    def _summarize_connection_error(error: BaseException) -> str:
        """Extract a concise, user-facing connection error from kubectl output."""
        if isinstance(error, subprocess.TimeoutExpired):
            return "kubectl timed out"
        raw_message = str(error).strip()
        lines = [line.strip() for line in raw_message.splitlines() if line.strip()]
        if not lines:
            return "Cluster request failed"

        preferred_tokens = (
            "unable to connect to the server",
            "you must be logged in",
            "context deadline exceeded",
            "timed out",
            "certificate",
            "no such host",
            "forbidden",
            "unauthorized",
        )

        selected_line = lines[-1]
        for line in reversed(lines):
            lower_line = line.lower()
            if line.startswith("error:") or any(
                token in lower_line for token in preferred_tokens
            ):
                selected_line = line
                break

        cleaned = selected_line.removeprefix("error:").strip()
        if len(cleaned) > 160:
            return f"{cleaned[:157].rstrip()}..."
        return cleaned or "Cluster request failed"

    def get_last_nonfatal_warnings(self) -> dict[str, str]:
        """Return per-family warnings from the last fetch."""
        return dict(self._nonfatal_warnings)

    def _record_nonfatal_warning(self, key: str, error: Exception | str) -> None:
        """Store a warning that should not fail the whole fetch."""
        if isinstance(error, Exception):
            message = self._summarize_connection_error(error)
        else:
            message = str(error).strip() or "Unknown warning"
        self._nonfatal_warnings[str(key)] = message

    async def check_connection(self) -> bool:
        """Check that the API server answers within the check timeout."""
        args = ("version", "-o", "json", f"--request-timeout={self.request_timeout}")
        try:
            await asyncio.wait_for(self._run_kubectl(args), timeout=CLUSTER_CHECK_TIMEOUT)
        except (asyncio.TimeoutError, subprocess.TimeoutExpired, RuntimeError, OSError) as exc:
            logger.warning(
                "Cluster connection check failed: %s",
                self._summarize_connection_error(exc),
            )
            return False
        return True

    async def resolve_cluster_info(self) -> ClusterInfo:
        """Resolve context and cluster names of the active kubeconfig entry."""
        try:
            output = await self._run_kubectl(("config", "view", "--minify", "-o", "json"))
            data = json.loads(output or "{}")
        except (RuntimeError, OSError, subprocess.TimeoutExpired, json.JSONDecodeError):
            logger.debug("Could not read kubeconfig", exc_info=True)
            return ClusterInfo(context=self.context or "")

        if not isinstance(data, dict):
            return ClusterInfo(context=self.context or "")
        context_name = str(data.get("current-context") or self.context or "")
        cluster_name = ""
        for entry in data.get("contexts") or []:
            if not isinstance(entry, dict):
                continue
            if entry.get("name") == context_name or not cluster_name:
                details = entry.get("context")
                if isinstance(details, dict):
                    cluster_name = str(details.get("cluster") or "")
        return ClusterInfo(context=context_name, cluster=cluster_name)

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data as a dictionary."""
        batch = await self.fetch_all_resources()
        return {
            "resources": list(batch.records),
            "warnings": dict(batch.warnings),
            "fetched_at": batch.fetched_at,
        }

    async def fetch_all_resources(self) -> ResourceBatch:
        """Fetch and normalize every resource family.

        Families the cluster does not serve contribute no records and no
        warning. Other per-family failures become nonfatal warnings.

        Raises:
            ResourceFetchError: When every family failed.
        """
        self._mark_load_started()
        self._nonfatal_warnings = {}

        results = await asyncio.gather(
            *(
                self._fetcher.fetch_family(
                    kind,
                    namespace=self.namespace,
                    request_timeout=self.request_timeout,
                )
                for kind in self.FAMILY_ORDER
            ),
            return_exceptions=True,
        )

        records: list[AsyncResourceInfo] = []
        failures: list[tuple[ResourceKind, BaseException]] = []
        for kind, result in zip(self.FAMILY_ORDER, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                failures.append((kind, result))
                continue
            listing: FamilyListing = result
            if listing.available:
                records.extend(self._parser.parse_items(kind, listing.items))

        if failures and len(failures) == len(self.FAMILY_ORDER):
            first_error = failures[0][1]
            logger.error(
                "All resource families failed: %s",
                self._summarize_connection_error(first_error),
            )
            raise ResourceFetchError(
                self._summarize_connection_error(first_error)
            ) from first_error

        for kind, error in failures:
            logger.warning("Failed to list %s: %s", kind.value, error)
            self._record_nonfatal_warning(kind.value, error)

        logger.debug(
            "Fetched %d resources in %.0fms", len(records), self._elapsed_ms()
        )
        return ResourceBatch(
            records=tuple(records),
            warnings=self.get_last_nonfatal_warnings(),
            fetched_at=self._clock(),
        )
