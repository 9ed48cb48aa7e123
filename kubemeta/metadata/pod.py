"""Pod metadata generator.

Pods do not describe their logical owners. A Deployment owns a Pod only
through a ReplicaSet, a CronJob only through a Job, so the Pod generator
walks those chains with the peer generators it was built with:

    Pod --replicaset.name--> ReplicaSet generator --deployment.name-->
    Pod --job.name---------> Job generator --------cronjob.name------>
    Pod --spec.nodeName----> Node generator -------node.*------------>

Each hop is optional. A hop whose intermediate name is missing, or whose
owner is not cached yet, leaves its field out of the document; it never
fails the document as a whole.
"""

from __future__ import annotations

from typing import Any

from kubemeta.cache.store import Store, lookup
from kubemeta.metadata.base import MetaGen, NamespaceAwareResourceMetadataGenerator, merged_document
from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.options import FieldOption, with_metadata
from kubemeta.models.config import AddResourceMetadataConfig, ClusterConfig, MetadataConfig
from kubemeta.models.resources import Pod
from kubemeta.observability.logging import get_logger
from kubemeta.observability.metrics import owner_lookups_total

_logger = get_logger("metadata.pod")


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


class PodMetadataGenerator:
    """Generates Pod metadata, resolving Deployment, CronJob and Node owners.

    Args:
        store: Pods keyed by name, used by ``generate_from_name``.
        node: Node generator; without it only ``node.name`` is written.
        namespace: Namespace generator merged into the native document.
        replicaset: ReplicaSet generator for the Deployment hop.
        job: Job generator for the CronJob hop.
        add_resource_metadata: Which optional hops are attempted.
    """

    def __init__(
        self,
        store: Store | None = None,
        node: MetaGen | None = None,
        namespace: MetaGen | None = None,
        replicaset: MetaGen | None = None,
        job: MetaGen | None = None,
        config: MetadataConfig | None = None,
        cluster: ClusterConfig | None = None,
        add_resource_metadata: AddResourceMetadataConfig | None = None,
    ) -> None:
        self.store = store
        self.node = node
        self.replicaset = replicaset
        self.job = job
        self.add_resource_metadata = add_resource_metadata or AddResourceMetadataConfig()
        self.resource = NamespaceAwareResourceMetadataGenerator(config, cluster, namespace)

    def generate(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        """Return the Pod's full metadata in the following form::

            {
                "kubernetes": {...},
                "orchestrator": {...},
            }

        Fields under ``kubernetes`` come from ``generate_k8s``; the ECS
        fields from ``generate_ecs`` are merged on top and win on collision.
        """
        return merged_document(self.generate_k8s(obj, *opts), self.generate_ecs(obj))

    def generate_ecs(self, obj: Any) -> MetadataDocument:
        return self.resource.generate_ecs(obj)

    def generate_k8s(self, obj: Any, *opts: FieldOption) -> MetadataDocument | None:
        if not isinstance(obj, Pod):
            return None

        out = self.resource.generate_k8s("pod", obj, *opts)
        assert out is not None

        # Deployment -> ReplicaSet -> Pod
        if self.add_resource_metadata.deployment and self.replicaset is not None:
            self._resolve_owner(out, "deployment", self.replicaset, via="replicaset")

        # CronJob -> Job -> Pod
        if self.add_resource_metadata.cronjob and self.job is not None:
            self._resolve_owner(out, "cronjob", self.job, via="job")

        node_name = obj.node_name
        if node_name:
            node_meta = None
            if self.node is not None:
                node_meta = self.node.generate_from_name(node_name, with_metadata("node"))
            if node_meta is not None and isinstance(node_meta.get("node"), dict):
                out["node"] = node_meta["node"]
            else:
                out.put("node.name", node_name)

        if obj.pod_ip:
            out.put("pod.ip", obj.pod_ip)

        return out

    def generate_from_name(self, name: str, *opts: FieldOption) -> MetadataDocument | None:
        pod = lookup(self.store, name, Pod)
        if pod is None:
            return None
        return self.generate_k8s(pod, *opts)

    def _resolve_owner(self, out: MetadataDocument, owner: str, generator: MetaGen, via: str) -> None:
        """Copy ``<owner>.name`` from the ``via`` controller's document into ``out``."""
        via_name = _non_empty_str(out.get_value(f"{via}.name"))
        if via_name is None:
            return

        via_meta = generator.generate_from_name(via_name)
        owner_name = None
        if via_meta is not None:
            owner_name = _non_empty_str(MetadataDocument(via_meta).get_value(f"{owner}.name"))
        if owner_name is None:
            owner_lookups_total.labels(hop=owner, result="miss").inc()
            _logger.debug("owner_unresolved", owner=owner, via=via, via_name=via_name, cached=via_meta is not None)
            return

        owner_lookups_total.labels(hop=owner, result="hit").inc()
        out.put(f"{owner}.name", owner_name)
