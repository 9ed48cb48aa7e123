"""Metadata generators for Kubernetes resources.

Exposes:
    MetaGen                       -- contract every generator satisfies.
    MetadataDocument              -- nested dict with dotted-path helpers.
    ResourceMetadataGenerator     -- projector shared by every kind.
    PodMetadataGenerator          -- Pod generator with owner-chain resolution.
    ControllerMetadataGenerator   -- ReplicaSet, Job, Deployment, CronJob, ...
    NodeMetadataGenerator
    NamespaceMetadataGenerator
"""

from kubemeta.metadata.base import (
    MetaGen,
    NamespaceAwareResourceMetadataGenerator,
    ResourceMetadataGenerator,
)
from kubemeta.metadata.controller import ControllerMetadataGenerator
from kubemeta.metadata.document import MetadataDocument
from kubemeta.metadata.namespace import NamespaceMetadataGenerator
from kubemeta.metadata.node import NodeMetadataGenerator
from kubemeta.metadata.options import FieldOption, with_fields, with_metadata
from kubemeta.metadata.pod import PodMetadataGenerator

__all__ = [
    "ControllerMetadataGenerator",
    "FieldOption",
    "MetaGen",
    "MetadataDocument",
    "NamespaceAwareResourceMetadataGenerator",
    "NamespaceMetadataGenerator",
    "NodeMetadataGenerator",
    "PodMetadataGenerator",
    "ResourceMetadataGenerator",
    "with_fields",
    "with_metadata",
]
