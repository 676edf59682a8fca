# kontour

Listing and filtering helpers for Kubernetes resources: pods, services,
stateful sets, secrets and persistent volume claims.

Resources are plain dictionaries shaped like the Kubernetes API's JSON
(`metadata`, `spec`, `status`, `data`, `type`). Each module filters such
dictionaries by a free-text query and, where it applies, by a status or type.
Each module can also fetch them through a client object that you supply.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests:

```
pip install ".[test]"
pytest
```

## Filtering

Filtering needs no cluster:

```python
from kontour.pods import filter_pods
from kontour.services import filter_services
from kontour.statefulsets import filter_statefulsets

pods = [{"metadata": {"name": "web-1"}}, {"metadata": {"name": "db-0"}}]
filter_pods(pods, "WEB")  # [{"metadata": {"name": "web-1"}}]

services = [
    {"metadata": {"name": "api"}, "spec": {"type": "NodePort"}},
    {"metadata": {"name": "api-internal"}, "spec": {"type": "ClusterIP"}},
]
filter_services(services, "NodePort", "api")  # only the first service

statefulsets = [
    {"metadata": {"name": "db"}, "spec": {"replicas": 3}, "status": {"readyReplicas": 1}},
]
filter_statefulsets(statefulsets, "Degraded", "")  # the "db" stateful set
```

Queries are matched case-insensitively as substrings, and an empty query
matches everything. Wherever a namespace, status or type is taken, the value
`"All"` means no restriction.

- `kontour.pods`: `filter_pods` matches on the pod name.
  `status_field_selector` turns a status into the `status.phase=<status>`
  field selector, or `None` for `"All"`. `name_contains` and
  `namespace_scope` are the shared helpers used by the other modules.
- `kontour.pvcs`: `pvc_matches` checks the name or `spec.storageClassName`;
  `filter_pvcs` applies it to a list.
- `kontour.secrets`: `secret_matches` checks the name, the namespace, the
  `type` or any key of `data`; `filter_secrets` applies it to a list.
  `secret_key` gives the `<namespace>-<name>` key of a secret, with missing
  parts left empty.
- `kontour.services`: `filter_services` matches on the name, then on
  `spec.type` when a type other than `"All"` is given. `SERVICE_TYPES` lists
  the selectable values (`All`, `ClusterIP`, `NodePort`, `LoadBalancer`,
  `ExternalName`).
- `kontour.statefulsets`: `ReplicaCounts.from_statefulset` reads the ready,
  desired, current and updated replica counts, with missing values as zero.
  `matches_status` accepts `Available`, `Progressing`, `Rolling Update`,
  `Degraded` and `Scaled Down`; any other name never matches.
  `filter_statefulsets` filters by name and status. `STATEFULSET_STATUSES`
  lists the selectable values.

## Fetching

The fetch functions take any object that follows the
`kontour.pods.ResourceClient` protocol: a method
`list(kind, namespace=None, field_selector=None)` that returns a list of
resource dictionaries, cluster-wide when `namespace` is `None`.

```python
from kontour.pods import fetch_pods

class StaticClient:
    def __init__(self, items):
        self.items = items

    def list(self, kind, namespace=None, field_selector=None):
        return self.items

fetch_pods(StaticClient(pods), "All", "Running", "web")
```

- `fetch_pods(client, namespace, status, query)` lists kind `"Pod"` and
  passes the status as a `status.phase` field selector.
- `fetch_pvcs(client, namespace, query)` lists `"PersistentVolumeClaim"`.
- `fetch_secrets(client, namespace, query)` lists `"Secret"`.
- `fetch_services(client, namespace, service_type, query)` lists `"Service"`.
- `fetch_statefulsets(client, namespace, status, query)` lists
  `"StatefulSet"`.

Each returns the filtered list and lets any error from the client propagate.

The fetcher dataclasses (`PodFetcher`, `PvcFetcher`, `SecretFetcher`,
`ServiceFetcher`, `StatefulSetFetcher`) keep a client together with the most
recently fetched list (`pods`, `pvcs`, `secrets`, `services`,
`statefulsets`). Their `fetch` method refreshes that list. If the client
raises, the error is logged and the previous list is kept.

## What this package does not do

It has no Kubernetes client of its own. It does not read kubeconfig files or
talk to an API server, so you supply the client. It has no user interface and
no command-line program. It does not create, edit or delete resources.