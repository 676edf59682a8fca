"""Listing and filtering secrets."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from kontour.pods import Resource, ResourceClient, name_contains, namespace_scope

logger = logging.getLogger(__name__)


def _contains(value: Optional[str], needle: str) -> bool:
    return value is not None and needle in value.lower()


def secret_matches(secret: Resource, query: str) -> bool:
    """Whether the secret's name, namespace, type or a data key contains the query."""
    needle = query.lower()
    metadata = secret.get("metadata") or {}
    data = secret.get("data") or {}
    return (
        name_contains(secret, query)
        or _contains(metadata.get("namespace"), needle)
        or _contains(secret.get("type"), needle)
        or any(needle in key.lower() for key in data)
    )


def filter_secrets(secrets: Iterable[Resource], query: str) -> list[Resource]:
    """Keep the secrets matching the query; an empty query keeps all."""
    if not query:
        return list(secrets)
    return [s for s in secrets if secret_matches(s, query)]


def secret_key(secret: Resource) -> str:
    """A display key of the form "<namespace>-<name>", missing parts empty."""
    metadata = secret.get("metadata") or {}
    return f"{metadata.get('namespace') or ''}-{metadata.get('name') or ''}"


def fetch_secrets(
    client: ResourceClient, namespace: str, query: str
) -> list[Resource]:
    """List secrets in a namespace (or all), filtered by the query."""
    logger.info("Starting secrets fetch...")
    items = client.list("Secret", namespace=namespace_scope(namespace))
    return filter_secrets(items, query)


@dataclass
class SecretFetcher:
    """Holds the current secret list and refreshes it from a client."""

    client: ResourceClient
    secrets: list[Resource] = field(default_factory=list)

    def fetch(self, namespace: str, query: str) -> None:
        """Refresh the secret list; on failure the error is logged and the list kept."""
        try:
            self.secrets = fetch_secrets(self.client, namespace, query)
        except Exception as exc:  # noqa: BLE001 - any client failure is reported
            logger.error("Failed to fetch secrets: %r", exc)