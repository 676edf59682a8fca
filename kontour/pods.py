"""Listing and filtering pods."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Protocol

logger = logging.getLogger(__name__)

ALL = "All"

Resource = dict[str, Any]


class ResourceClient(Protocol):
    """A cluster client able to list resources of a given kind."""

    def list(
        self,
        kind: str,
        namespace: Optional[str] = None,
        field_selector: Optional[str] = None,
    ) -> list[Resource]:
        """Return the resources of ``kind``, cluster-wide when namespace is None."""
        ...


def namespace_scope(namespace: str) -> Optional[str]:
    """Map the selector value "All" to a cluster-wide (None) scope."""
    return None if namespace == ALL else namespace


def name_contains(resource: Resource, query: str) -> bool:
    """Whether the resource's name contains the query, case-insensitively."""
    name = (resource.get("metadata") or {}).get("name")
    return name is not None and query.lower() in name.lower()


def status_field_selector(status: str) -> Optional[str]:
    """The field selector restricting pods to a phase, or None for "All"."""
    if status == ALL:
        return None
    return f"status.phase={status}"


def filter_pods(pods: Iterable[Resource], query: str) -> list[Resource]:
    """Keep the pods whose name contains the query; an empty query keeps all."""
    if not query:
        return list(pods)
    return [pod for pod in pods if name_contains(pod, query)]


def fetch_pods(
    client: ResourceClient, namespace: str, status: str, query: str
) -> list[Resource]:
    """List pods in a namespace (or all) with the given phase, filtered by name."""
    logger.info("Fetching pods with status: %s in namespace: %s", status, namespace)
    items = client.list(
        "Pod",
        namespace=namespace_scope(namespace),
        field_selector=status_field_selector(status),
    )
    return filter_pods(items, query)


@dataclass
class PodFetcher:
    """Holds the current pod list and refreshes it from a client."""

    client: ResourceClient
    pods: list[Resource] = field(default_factory=list)

    def fetch(self, namespace: str, status: str, query: str) -> None:
        """Refresh the pod list; on failure the error is logged and the list kept."""
        try:
            self.pods = fetch_pods(self.client, namespace, status, query)
        except Exception as exc:  # noqa: BLE001 - any client failure is reported
            logger.error("Error fetching pods: %r", exc)