"""Listing and filtering services."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from kontour.pods import ALL, Resource, ResourceClient, name_contains, namespace_scope

logger = logging.getLogger(__name__)

SERVICE_TYPES = ("All", "ClusterIP", "NodePort", "LoadBalancer", "ExternalName")


def _has_type(service: Resource, service_type: str) -> bool:
    return (service.get("spec") or {}).get("type") == service_type


def filter_services(
    services: Iterable[Resource], service_type: str, query: str
) -> list[Resource]:
    """Keep services whose name contains the query and whose type matches.

    An empty query keeps every name; the type "All" keeps every type.
    """
    result = list(services)
    if query:
        result = [svc for svc in result if name_contains(svc, query)]
    if service_type != ALL:
        result = [svc for svc in result if _has_type(svc, service_type)]
    return result


def fetch_services(
    client: ResourceClient, namespace: str, service_type: str, query: str
) -> list[Resource]:
    """List services in a namespace (or all), filtered by type and name."""
    logger.info("Starting services fetch...")
    items = client.list("Service", namespace=namespace_scope(namespace))
    return filter_services(items, service_type, query)


@dataclass
class ServiceFetcher:
    """Holds the current service list and refreshes it from a client."""

    client: ResourceClient
    services: list[Resource] = field(default_factory=list)

    def fetch(self, namespace: str, service_type: str, query: str) -> None:
        """Refresh the service list; on failure the error is logged and the list kept."""
        try:
            self.services = fetch_services(self.client, namespace, service_type, query)
        except Exception as exc:  # noqa: BLE001 - any client failure is reported
            logger.error("Failed to fetch services: %r", exc)