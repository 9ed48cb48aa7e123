"""Name-indexed, in-memory store of Kubernetes resources.

The store is filled by whatever keeps the local view of the cluster in sync
(a watch loop, a list call, a fixture file) and read by metadata generators.
Generators depend only on the ``Store`` protocol, so any object exposing
``get_by_key`` works in its place.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from typing import Any, Protocol, TypeVar

from kubemeta.models.resources import Resource

_T = TypeVar("_T", bound=Resource)


class Store(Protocol):
    """Read side of a local cache of one resource kind."""

    def get_by_key(self, key: str) -> tuple[Any, bool]:
        """Return ``(obj, True)`` if ``key`` is cached, else ``(None, False)``."""
        ...


def name_key(obj: Resource) -> str:
    return obj.name


def namespaced_key(obj: Resource) -> str:
    """Return ``namespace/name``, or just the name for cluster-scoped objects."""
    return f"{obj.namespace}/{obj.name}" if obj.namespace else obj.name


def lookup(store: Store | None, key: str, expected: type[_T]) -> _T | None:
    """Fetch ``key`` from ``store`` and check its type.

    An unset store, a missing key, or an object of another kind all yield
    None: objects not synced yet are an expected condition.
    """
    if store is None or not key:
        return None
    obj, found = store.get_by_key(key)
    if not found or not isinstance(obj, expected):
        return None
    return obj


class ResourceStore:
    """Thread-safe dictionary of resources keyed by ``key_func(obj)``."""

    def __init__(self, key_func: Callable[[Resource], str] = name_key) -> None:
        self._key_func = key_func
        self._items: dict[str, Resource] = {}
        self._lock = threading.RLock()

    def add(self, obj: Resource) -> None:
        key = self._key_func(obj)
        with self._lock:
            self._items[key] = obj

    update = add

    def delete(self, obj: Resource) -> None:
        key = self._key_func(obj)
        with self._lock:
            self._items.pop(key, None)

    def replace(self, objects: Iterable[Resource]) -> None:
        """Swap the whole content for ``objects`` (a fresh list response)."""
        items = {self._key_func(obj): obj for obj in objects}
        with self._lock:
            self._items = items

    def get_by_key(self, key: str) -> tuple[Resource | None, bool]:
        with self._lock:
            obj = self._items.get(key)
        return obj, obj is not None

    def list_keys(self) -> list[str]:
        with self._lock:
            return sorted(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
