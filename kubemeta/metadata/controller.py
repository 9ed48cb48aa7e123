"""Metadata generator for workload controllers.

ReplicaSet, Job, Deployment, CronJob, StatefulSet and DaemonSet documents
differ only in their kind key, so one generator class serves all of them.
A ReplicaSet's controller owner reference yields ``deployment.name`` and a
Job's yields ``cronjob.name``; the Pod generator reads those to resolve the
top of each owner chain.
"""

from __future__ import annotations

from typing import Any

from kubemeta.cache.store import Store, lookup
from kubemeta.metadata.base import MetaGen, NamespaceAwareResourceMetadataGenerator, merged_document
from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.options import FieldOption
from kubemeta.models.config import ClusterConfig, MetadataConfig
from kubemeta.models.resources import RESOURCE_TYPES, Resource


class ControllerMetadataGenerator:
    """Generates native metadata for one controller kind."""

    def __init__(
        self,
        kind: str,
        store: Store | None = None,
        config: MetadataConfig | None = None,
        cluster: ClusterConfig | None = None,
        namespace: MetaGen | None = None,
    ) -> None:
        if kind not in RESOURCE_TYPES:
            raise ValueError(f"Unsupported controller kind: {kind}")
        self.kind = kind
        self.resource_type: type[Resource] = RESOURCE_TYPES[kind]
        self.store = store
        self.resource = NamespaceAwareResourceMetadataGenerator(config, cluster, namespace)

    def generate(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        return merged_document(self.generate_k8s(obj, *opts), self.generate_ecs(obj))

    def generate_ecs(self, obj: Any) -> MetadataDocument:
        return self.resource.generate_ecs(obj)

    def generate_k8s(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        if not isinstance(obj, self.resource_type):
            return None
        return self.resource.generate_k8s(self.kind, obj, *opts)

    def generate_from_name(self, name: str, *opts: FieldOption) -> MetadataDocument | None:
        obj = lookup(self.store, name, self.resource_type)
        if obj is None:
            return None
        return self.generate_k8s(obj, *opts)

    def __repr__(self) -> str:
        return f"ControllerMetadataGenerator(kind={self.kind!r})"
