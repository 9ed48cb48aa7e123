"""Tests for ResourceStore and the typed lookup helper."""

from __future__ import annotations

import threading

from kubemeta.cache.store import ResourceStore, lookup, namespaced_key
from kubemeta.models.resources import Node, Pod


def _pod(name: str, namespace: str = "default") -> Pod:
    return Pod(raw={"metadata": {"name": name, "namespace": namespace}})


class TestResourceStore:
    def test_get_by_key(self) -> None:
        store = ResourceStore()
        pod = _pod("web")
        store.add(pod)
        assert store.get_by_key("web") == (pod, True)
        assert store.get_by_key("missing") == (None, False)

    def test_update_replaces(self) -> None:
        store = ResourceStore()
        store.add(_pod("web"))
        newer = Pod(raw={"metadata": {"name": "web", "namespace": "default", "uid": "2"}})
        store.update(newer)
        obj, _ = store.get_by_key("web")
        assert obj is newer
        assert len(store) == 1

    def test_delete(self) -> None:
        store = ResourceStore()
        pod = _pod("web")
        store.add(pod)
        store.delete(pod)
        store.delete(pod)
        assert len(store) == 0

    def test_replace(self) -> None:
        store = ResourceStore()
        store.add(_pod("old"))
        store.replace([_pod("b"), _pod("a")])
        assert store.list_keys() == ["a", "b"]

    def test_namespaced_key(self) -> None:
        store = ResourceStore(key_func=namespaced_key)
        store.add(_pod("web", "prod"))
        store.add(Node(raw={"metadata": {"name": "n1"}}))
        assert store.list_keys() == ["n1", "prod/web"]

    def test_concurrent_writers(self) -> None:
        store = ResourceStore()

        def _fill(offset: int) -> None:
            for i in range(200):
                store.add(_pod(f"pod-{offset}-{i}"))

        threads = [threading.Thread(target=_fill, args=(n,)) for n in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(store) == 800


class TestLookup:
    def test_unset_store(self) -> None:
        assert lookup(None, "web", Pod) is None

    def test_empty_key(self) -> None:
        store = ResourceStore()
        store.add(_pod(""))
        assert lookup(store, "", Pod) is None

    def test_type_mismatch(self) -> None:
        store = ResourceStore()
        store.add(Node(raw={"metadata": {"name": "web"}}))
        assert lookup(store, "web", Pod) is None

    def test_hit(self) -> None:
        store = ResourceStore()
        pod = _pod("web")
        store.add(pod)
        assert lookup(store, "web", Pod) is pod
