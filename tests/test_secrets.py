import pytest

from kontour.secrets import (
    SecretFetcher,
    fetch_secrets,
    filter_secrets,
    secret_key,
    secret_matches,
)


def make_secret(name=None, namespace=None, type_=None, keys=()):
    meta = {}
    if name is not None:
        meta["name"] = name
    if namespace is not None:
        meta["namespace"] = namespace
    item = {"metadata": meta}
    if type_ is not None:
        item["type"] = type_
    if keys:
        item["data"] = {k: "dmFsdWU=" for k in keys}
    return item


class FakeClient:
    def __init__(self, items=None, error=None):
        self.items = items or []
        self.error = error
        self.calls = []

    def list(self, kind, namespace=None, field_selector=None):
        self.calls.append((kind, namespace, field_selector))
        if self.error:
            raise self.error
        return list(self.items)


@pytest.mark.parametrize(
    "item, query",
    [
        (make_secret(name="DB-creds"), "db"),
        (make_secret(namespace="Kube-System"), "kube"),
        (make_secret(type_="kubernetes.io/tls"), "TLS"),
        (make_secret(keys=["API_TOKEN"]), "token"),
    ],
)
def test_matches_each_field(item, query):
    assert secret_matches(item, query) is True


def test_no_match():
    item = make_secret("a", "b", "Opaque", ["c"])
    assert secret_matches(item, "zzz") is False


def test_filter_empty_query():
    items = [make_secret(), make_secret("x")]
    assert filter_secrets(items, "") == items


def test_filter_selects():
    items = [make_secret("one", keys=["password"]), make_secret("two")]
    assert filter_secrets(items, "password") == [items[0]]


def test_secret_key():
    assert secret_key(make_secret("creds", "prod")) == "prod-creds"
    assert secret_key(make_secret()) == "-"


def test_fetch_scopes_and_filters():
    client = FakeClient([make_secret("a"), make_secret("b")])
    assert fetch_secrets(client, "ops", "b") == [make_secret("b")]
    assert client.calls == [("Secret", "ops", None)]


def test_fetch_error_raises():
    with pytest.raises(RuntimeError):
        fetch_secrets(FakeClient(error=RuntimeError("down")), "All", "")


def test_fetcher_keeps_previous_on_error():
    fetcher = SecretFetcher(FakeClient([make_secret("a")]))
    fetcher.fetch("All", "")
    assert fetcher.client.calls == [("Secret", None, None)]
    assert fetcher.secrets == [make_secret("a")]
    fetcher.client = FakeClient(error=RuntimeError("down"))
    fetcher.fetch("All", "")
    assert fetcher.secrets == [make_secret("a")]