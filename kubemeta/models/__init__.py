"""Core data structures for kubemeta."""

from kubemeta.models.config import (
    AddResourceMetadataConfig,
    ClusterConfig,
    KubeMetaConfig,
    LogConfig,
    MetadataConfig,
    OwnerMetadataConfig,
)
from kubemeta.models.resources import (
    CronJob,
    DaemonSet,
    Deployment,
    Job,
    Namespace,
    Node,
    OwnerReference,
    Pod,
    ReplicaSet,
    Resource,
    StatefulSet,
    resource_from_dict,
)

__all__ = [
    "AddResourceMetadataConfig",
    "ClusterConfig",
    "CronJob",
    "DaemonSet",
    "Deployment",
    "Job",
    "KubeMetaConfig",
    "LogConfig",
    "MetadataConfig",
    "Namespace",
    "Node",
    "OwnerMetadataConfig",
    "OwnerReference",
    "Pod",
    "ReplicaSet",
    "Resource",
    "StatefulSet",
    "resource_from_dict",
]
