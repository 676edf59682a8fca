"""Filtering and fetching of Kubernetes pods, services, stateful sets, secrets and volume claims."""

__version__ = "0.1.0"