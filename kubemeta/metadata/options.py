"""Field options applied to a native document after it is built."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kubemeta.metadata.document import MetadataDocument

FieldOption = Callable[[MetadataDocument], None]


def with_fields(key: str, value: Any) -> FieldOption:
    """Add ``key`` with ``value`` to the generated document."""

    def _apply(meta: MetadataDocument) -> None:
        meta.safe_put(key, value)

    return _apply


def with_metadata(kind: str) -> FieldOption:
    """Nest labels and annotations under ``<kind>``.

    Used when a peer generator's output is spliced into another resource's
    document, e.g. a Node's labels end up at ``node.labels`` in a Pod's
    document instead of colliding with the Pod's own ``labels``.
    """

    def _apply(meta: MetadataDocument) -> None:
        for section in ("labels", "annotations"):
            value = meta.pop(section, None)
            if value is not None:
                meta.safe_put(f"{kind}.{section}", value)

    return _apply
