"""Listing and filtering persistent volume claims."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from kontour.pods import Resource, ResourceClient, name_contains, namespace_scope

logger = logging.getLogger(__name__)


def pvc_matches(pvc: Resource, query: str) -> bool:
    """Whether the claim's name or storage class contains the query."""
    if name_contains(pvc, query):
        return True
    storage_class = (pvc.get("spec") or {}).get("storageClassName")
    return storage_class is not None and query.lower() in storage_class.lower()


def filter_pvcs(pvcs: Iterable[Resource], query: str) -> list[Resource]:
    """Keep the claims matching the query; an empty query keeps all."""
    if not query:
        return list(pvcs)
    return [pvc for pvc in pvcs if pvc_matches(pvc, query)]


def fetch_pvcs(client: ResourceClient, namespace: str, query: str) -> list[Resource]:
    """List claims in a namespace (or all), filtered by the query."""
    logger.info("Starting PVCs fetch...")
    items = client.list("PersistentVolumeClaim", namespace=namespace_scope(namespace))
    return filter_pvcs(items, query)


@dataclass
class PvcFetcher:
    """Holds the current claim list and refreshes it from a client."""

    client: ResourceClient
    pvcs: list[Resource] = field(default_factory=list)

    def fetch(self, namespace: str, query: str) -> None:
        """Refresh the claim list; on failure the error is logged and the list kept."""
        try:
            self.pvcs = fetch_pvcs(self.client, namespace, query)
        except Exception as exc:  # noqa: BLE001 - any client failure is reported
            logger.error("Failed to fetch PVCs: %r", exc)