"""Node metadata generator."""

from __future__ import annotations

from typing import Any

from kubemeta.cache.store import Store, lookup
from kubemeta.metadata.base import ResourceMetadataGenerator, merged_document
from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.options import FieldOption
from kubemeta.models.config import ClusterConfig, MetadataConfig
from kubemeta.models.resources import Node


class NodeMetadataGenerator:
    """Generates ``node.*`` metadata for cluster nodes."""

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
        if not isinstance(obj, Node):
            return None

        meta = self.resource.generate_k8s("node", obj, *opts)
        assert meta is not None
        if obj.hostname:
            meta.put("node.hostname", obj.hostname)
        return meta

    def generate_from_name(self, name: str, *opts: FieldOption) -> MetadataDocument | None:
        node = lookup(self.store, name, Node)
        if node is None:
            return None
        return self.generate_k8s(node, *opts)
