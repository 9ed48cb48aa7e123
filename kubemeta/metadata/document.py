"""Metadata documents addressed by dotted field paths."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any


class MetadataDocument(dict[str, Any]):
    """A nested ``dict`` with dotted-path accessors.

    ``doc.put("node.name", "n1")`` creates intermediate maps as needed, and
    ``doc.get_value("node.name")`` walks them back. Lookups return None
    instead of raising so callers can chain optional owner hops with plain
    presence checks.
    """

    def get_value(self, key: str) -> Any | None:
        current: Any = self
        for part in key.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return None
            current = current[part]
        return current

    def has_key(self, key: str) -> bool:
        current: Any = self
        for part in key.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return False
            current = current[part]
        return True

    def put(self, key: str, value: Any) -> None:
        """Set ``key``, replacing any non-map value found along the path."""
        *parents, leaf = key.split(".")
        current: dict[str, Any] = self
        for part in parents:
            child = current.get(part)
            if not isinstance(child, dict):
                child = MetadataDocument()
                current[part] = child
            current = child
        current[leaf] = value

    def safe_put(self, key: str, value: Any) -> None:
        """Set ``key`` without discarding existing data.

        A leaf already sitting where a map is needed moves to ``<path>.value``;
        a map sitting where the leaf goes keeps its content and receives the
        leaf as ``value``. This keeps label sets such as ``app=x`` and
        ``app.kubernetes.io/name=y`` both visible when dedotting is off.
        """
        *parents, leaf = key.split(".")
        current: dict[str, Any] = self
        for part in parents:
            child = current.get(part)
            if child is None:
                child = MetadataDocument()
                current[part] = child
            elif not isinstance(child, dict):
                child = MetadataDocument(value=child)
                current[part] = child
            current = child
        existing = current.get(leaf)
        if isinstance(existing, dict) and not isinstance(value, Mapping):
            existing["value"] = value
        else:
            current[leaf] = value

    def delete(self, key: str) -> bool:
        *parents, leaf = key.split(".")
        current: Any = self
        for part in parents:
            if not isinstance(current, dict) or part not in current:
                return False
            current = current[part]
        if not isinstance(current, dict) or leaf not in current:
            return False
        del current[leaf]
        return True

    def deep_update(self, other: Mapping[str, Any] | None) -> None:
        """Merge ``other`` into this document.

        Maps merge recursively; any other value in ``other`` overwrites. Values
        are copied so the two documents never share nested state.
        """
        if not other:
            return
        _deep_update(self, other)

    def clone(self) -> MetadataDocument:
        return copy.deepcopy(self)


def _deep_update(target: dict[str, Any], source: Mapping[str, Any]) -> None:
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping):
            if isinstance(existing, dict):
                _deep_update(existing, value)
            else:
                child = MetadataDocument()
                _deep_update(child, value)
                target[key] = child
        else:
            target[key] = copy.deepcopy(value)
