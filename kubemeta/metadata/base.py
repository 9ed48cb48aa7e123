"""Generator contract and the projector shared by every resource kind.

Every kind-specific generator (Pod, Node, Namespace, controllers) satisfies
``MetaGen``. Generators hold references to one another through this protocol
only, so the owner chain is assembled by composition at construction time.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.options import FieldOption
from kubemeta.models.config import ClusterConfig, MetadataConfig
from kubemeta.models.resources import Resource

# Controller kinds whose name is copied from a controller owner reference.
CONTROLLER_KINDS = frozenset({"Deployment", "ReplicaSet", "StatefulSet", "DaemonSet", "Job", "CronJob"})


@runtime_checkable
class MetaGen(Protocol):
    """Interface implemented by all metadata generators."""

    def generate(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        """Return ``{"kubernetes": <native>}`` merged with the ECS fields."""
        ...

    def generate_ecs(self, obj: Any) -> MetadataDocument:
        """Return the ECS ``orchestrator.*`` fields for ``obj``."""
        ...

    def generate_k8s(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        """Return the native document, or None if ``obj`` is the wrong kind."""
        ...

    def generate_from_name(self, name: str, *opts: FieldOption) -> MetadataDocument | None:
        """Look ``name`` up in the generator's store and return its native document."""
        ...


def generate_map(source: dict[str, str], dedot: bool) -> MetadataDocument:
    """Convert a label or annotation map into document form.

    With ``dedot`` the keys keep a flat shape (``.`` replaced by ``_``);
    without it dotted keys become nested paths.
    """
    result = MetadataDocument()
    for key in sorted(source):
        if dedot:
            result[key.replace(".", "_")] = source[key]
        else:
            result.safe_put(key, source[key])
    return result


def generate_map_subset(source: dict[str, str], keys: tuple[str, ...], dedot: bool) -> MetadataDocument:
    return generate_map({key: source[key] for key in keys if key in source}, dedot)


def merged_document(native: MetadataDocument | None, ecs: MetadataDocument) -> MetadataDocument | None:
    """Wrap ``native`` under ``kubernetes`` and deep-merge ``ecs`` on top."""
    if native is None:
        return None
    meta = MetadataDocument(kubernetes=native)
    meta.deep_update(ecs)
    return meta


class ResourceMetadataGenerator:
    """Projects any ``Resource`` into native and ECS documents.

    Kind-specific generators wrap this class and add the fields only they
    know about.
    """

    def __init__(self, config: MetadataConfig | None = None, cluster: ClusterConfig | None = None) -> None:
        self.config = config or MetadataConfig()
        self.cluster = cluster or ClusterConfig()

    def generate_k8s(self, kind: str, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        if not isinstance(obj, Resource):
            return None

        raw_labels = {k: v for k, v in obj.labels.items() if k not in self.config.exclude_labels}
        if self.config.include_labels:
            labels = generate_map_subset(raw_labels, self.config.include_labels, self.config.labels_dedot)
        else:
            labels = generate_map(raw_labels, self.config.labels_dedot)

        annotations = generate_map_subset(
            obj.annotations, self.config.include_annotations, self.config.annotations_dedot
        )

        meta = MetadataDocument()
        meta[kind.lower()] = MetadataDocument(name=obj.name, uid=obj.uid)
        if obj.namespace:
            meta["namespace"] = obj.namespace

        for ref in obj.owner_references:
            if ref.controller and ref.kind in CONTROLLER_KINDS and ref.name:
                meta.put(f"{ref.kind.lower()}.name", ref.name)

        if labels:
            meta["labels"] = labels
        if annotations:
            meta["annotations"] = annotations

        for option in opts:
            option(meta)
        return meta

    def generate_ecs(self, obj: Any) -> MetadataDocument:
        ecs = MetadataDocument()
        if self.cluster.url:
            ecs.put("orchestrator.cluster.url", self.cluster.url)
        if self.cluster.name:
            ecs.put("orchestrator.cluster.name", self.cluster.name)
        if not isinstance(obj, Resource):
            return ecs

        ecs.put("orchestrator.type", "kubernetes")
        ecs.put("orchestrator.resource.type", obj.kind.lower())
        if obj.name:
            ecs.put("orchestrator.resource.name", obj.name)
        if obj.uid:
            ecs.put("orchestrator.resource.id", obj.uid)
        if obj.namespace:
            ecs.put("orchestrator.namespace", obj.namespace)
        return ecs


class NamespaceAwareResourceMetadataGenerator(ResourceMetadataGenerator):
    """Projector that also merges the owning Namespace's metadata."""

    def __init__(
        self,
        config: MetadataConfig | None = None,
        cluster: ClusterConfig | None = None,
        namespace: MetaGen | None = None,
    ) -> None:
        super().__init__(config, cluster)
        self.namespace = namespace

    def generate_k8s(self, kind: str, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        meta = super().generate_k8s(kind, obj, *opts)
        if meta is None or self.namespace is None or not obj.namespace:
            return meta

        ns_meta = self.namespace.generate_from_name(obj.namespace)
        if ns_meta is not None:
            meta.deep_update(ns_meta)
        return meta
