"""Listing and filtering stateful sets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from kontour.pods import ALL, Resource, ResourceClient, name_contains, namespace_scope

logger = logging.getLogger(__name__)

STATEFULSET_STATUSES = (
    "All",
    "Available",
    "Progressing",
    "Rolling Update",
    "Degraded",
    "Scaled Down",
)


@dataclass(frozen=True)
class ReplicaCounts:
    """Replica counts of a stateful set; missing values count as zero."""

    ready: int = 0
    desired: int = 0
    current: int = 0
    updated: int = 0

    @classmethod
    def from_statefulset(cls, statefulset: Resource) -> "ReplicaCounts":
        """Read the counts from a stateful set's spec and status."""
        status = statefulset.get("status") or {}
        spec = statefulset.get("spec") or {}
        return cls(
            ready=status.get("readyReplicas") or 0,
            desired=spec.get("replicas") or 0,
            current=status.get("currentReplicas") or 0,
            updated=status.get("updatedReplicas") or 0,
        )


def matches_status(statefulset: Resource, status: str) -> bool:
    """Whether the stateful set is in the named state; unknown names never match."""
    counts = ReplicaCounts.from_statefulset(statefulset)
    desired = counts.desired
    if status == "Available":
        return (
            counts.ready == desired
            and counts.current == desired
            and counts.updated == desired
        )
    if status == "Progressing":
        return counts.updated < desired
    if status == "Rolling Update":
        return counts.updated < desired and counts.ready < desired
    if status == "Degraded":
        return counts.ready < desired
    if status == "Scaled Down":
        return desired == 0
    return False


def filter_statefulsets(
    statefulsets: Iterable[Resource], status: str, query: str
) -> list[Resource]:
    """Keep stateful sets whose name contains the query and that are in the status.

    An empty query keeps every name; the status "All" keeps every state.
    """
    result = list(statefulsets)
    if query:
        result = [sts for sts in result if name_contains(sts, query)]
    if status != ALL:
        result = [sts for sts in result if matches_status(sts, status)]
    return result


def fetch_statefulsets(
    client: ResourceClient, namespace: str, status: str, query: str
) -> list[Resource]:
    """List stateful sets in a namespace (or all), filtered by status and name."""
    logger.info("Starting statefulset fetch...")
    items = client.list("StatefulSet", namespace=namespace_scope(namespace))
    return filter_statefulsets(items, status, query)


@dataclass
class StatefulSetFetcher:
    """Holds the current stateful set list and refreshes it from a client."""

    client: ResourceClient
    statefulsets: list[Resource] = field(default_factory=list)

    def fetch(self, namespace: str, status: str, query: str) -> None:
        """Refresh the list; on failure the error is logged and the list kept."""
        try:
            self.statefulsets = fetch_statefulsets(
                self.client, namespace, status, query
            )
        except Exception as exc:  # noqa: BLE001 - any client failure is reported
            logger.error("Failed to fetch statefulsets: %r", exc)