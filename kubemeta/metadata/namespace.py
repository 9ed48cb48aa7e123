"""Namespace metadata generator."""

from __future__ import annotations

from typing import Any

from kubemeta.cache.store import Store, lookup
from kubemeta.metadata.base import ResourceMetadataGenerator, merged_document
from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.options import FieldOption
from kubemeta.models.config import ClusterConfig, MetadataConfig
from kubemeta.models.resources import Namespace


class NamespaceMetadataGenerator:
    """Generates the fields other kinds inherit from their Namespace.

    The native document uses the flat ``namespace_*`` form so it can be
    deep-merged straight into a namespaced resource's document::

        {"namespace": "prod", "namespace_uid": "...",
         "namespace_labels": {...}, "namespace_annotations": {...}}
    """

    def __init__(
        self,
        store: Store | None = None,
        config: MetadataConfig | None = None,
        cluster: ClusterConfig | None = None,
    ) -> None:
        self.store = store
        self.resource = ResourceMetadataGenerator(config, cluster)

    def generate(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        return merged_document(self.generate_k8s(obj, *opts), self.generate_ecs(obj))

    def generate_ecs(self, obj: Any) -> MetadataDocument:
        return self.resource.generate_ecs(obj)

    def generate_k8s(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        if not isinstance(obj, Namespace):
            return None

        base = self.resource.generate_k8s("namespace", obj, *opts)
        assert base is not None

        meta = MetadataDocument(namespace=obj.name, namespace_uid=obj.uid)
        for section in ("labels", "annotations"):
            if section in base:
                meta[f"namespace_{section}"] = base[section]
        return meta

    def generate_from_name(self, name: str, *opts: FieldOption) -> MetadataDocument | None:
        ns = lookup(self.store, name, Namespace)
        if ns is None:
            return None
        return self.generate_k8s(ns, *opts)
