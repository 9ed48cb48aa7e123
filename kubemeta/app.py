"""Generator wiring.

Builds the generator graph in dependency order:
    Namespace -> Node -> ReplicaSet, Job -> Pod

Every edge points from a resource to its owner, so the graph is acyclic by
construction and ``generate_from_name`` calls cannot recurse without bound.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from kubemeta.cache.store import ResourceStore, Store
from kubemeta.metadata.controller import ControllerMetadataGenerator
from kubemeta.metadata.namespace import NamespaceMetadataGenerator
from kubemeta.metadata.node import NodeMetadataGenerator
from kubemeta.metadata.pod import PodMetadataGenerator
from kubemeta.models.config import KubeMetaConfig
from kubemeta.models.resources import Resource, resource_from_dict
from kubemeta.observability.logging import get_logger

_log = get_logger("app")


def build_pod_generator(config: KubeMetaConfig, stores: Mapping[str, Store]) -> PodMetadataGenerator:
    """Create a Pod generator and the peers its owner hops need.

    ``stores`` maps a kind (``"Pod"``, ``"Node"``, ...) to its store. A peer
    generator is built only when its hop is enabled; a kind with no store
    still gets a generator, whose lookups all miss.
    """
    add_meta = config.add_resource_metadata

    namespace = None
    if add_meta.namespace.enabled:
        namespace = NamespaceMetadataGenerator(
            stores.get("Namespace"), add_meta.namespace.metadata, config.cluster
        )

    node = None
    if add_meta.node.enabled:
        node = NodeMetadataGenerator(stores.get("Node"), add_meta.node.metadata, config.cluster)

    replicaset = None
    if add_meta.deployment:
        replicaset = ControllerMetadataGenerator(
            "ReplicaSet", stores.get("ReplicaSet"), config.metadata, config.cluster, namespace
        )

    job = None
    if add_meta.cronjob:
        job = ControllerMetadataGenerator("Job", stores.get("Job"), config.metadata, config.cluster, namespace)

    _log.debug(
        "pod generator built",
        node=node is not None,
        namespace=namespace is not None,
        deployment=replicaset is not None,
        cronjob=job is not None,
    )
    return PodMetadataGenerator(
        store=stores.get("Pod"),
        node=node,
        namespace=namespace,
        replicaset=replicaset,
        job=job,
        config=config.metadata,
        cluster=config.cluster,
        add_resource_metadata=add_meta,
    )


@dataclass
class ClusterStores:
    """Name-indexed stores split by namespace.

    Owner hops look owners up by bare name, so every namespace gets its own
    set of namespaced stores. Nodes and Namespaces are cluster-scoped and
    shared by all of them.
    """

    cluster: dict[str, ResourceStore] = field(default_factory=dict)
    namespaced: dict[str, dict[str, ResourceStore]] = field(default_factory=dict)

    def add(self, obj: Resource) -> bool:
        """Store ``obj``; return False if it replaced an object with the same key."""
        if obj.namespaced:
            stores = self.namespaced.setdefault(obj.namespace, {})
        else:
            stores = self.cluster
        store = stores.setdefault(obj.kind, ResourceStore())
        _, found = store.get_by_key(obj.name)
        store.add(obj)
        return not found

    def namespaces(self) -> list[str]:
        return sorted(self.namespaced)

    def for_namespace(self, namespace: str) -> dict[str, Store]:
        """Return the kind -> store map a generator for ``namespace`` reads."""
        stores: dict[str, Store] = dict(self.cluster)
        stores.update(self.namespaced.get(namespace, {}))
        return stores


def load_stores(manifests: Iterable[dict[str, Any]]) -> ClusterStores:
    """Fill per-namespace, name-indexed stores from raw manifests.

    Manifests of kinds kubemeta has no typed view for are skipped. A
    manifest repeating an already loaded ``(kind, namespace, name)`` replaces
    the earlier one and is logged as a warning.
    """
    stores = ClusterStores()
    skipped = 0
    for manifest in manifests:
        obj = resource_from_dict(manifest)
        if obj is None:
            skipped += 1
            continue
        if not stores.add(obj):
            _log.warning("duplicate resource replaced", kind=obj.kind, namespace=obj.namespace, name=obj.name)

    _log.info(
        "stores loaded",
        namespaces=stores.namespaces(),
        cluster_kinds={kind: len(store) for kind, store in sorted(stores.cluster.items())},
        skipped=skipped,
    )
    return stores
