"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MetadataConfig:
    """Label and annotation selection applied by every resource generator."""

    include_labels: tuple[str, ...] = ()
    exclude_labels: tuple[str, ...] = ()
    include_annotations: tuple[str, ...] = ()
    labels_dedot: bool = True
    annotations_dedot: bool = True


@dataclass(frozen=True)
class OwnerMetadataConfig:
    """Settings for an optional owner generator (Node or Namespace)."""

    enabled: bool = True
    metadata: MetadataConfig = field(default_factory=MetadataConfig)


@dataclass(frozen=True)
class AddResourceMetadataConfig:
    """Which owner-chain hops a Pod generator attempts.

    ``deployment`` and ``cronjob`` each cost an extra store lookup per Pod
    and are off by default.
    """

    node: OwnerMetadataConfig = field(default_factory=OwnerMetadataConfig)
    namespace: OwnerMetadataConfig = field(default_factory=OwnerMetadataConfig)
    deployment: bool = False
    cronjob: bool = False


@dataclass(frozen=True)
class ClusterConfig:
    """Cluster identity projected into ``orchestrator.cluster.*``."""

    name: str = ""
    url: str = ""


@dataclass(frozen=True)
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass(frozen=True)
class KubeMetaConfig:
    """Top-level kubemeta configuration."""

    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    add_resource_metadata: AddResourceMetadataConfig = field(default_factory=AddResourceMetadataConfig)
    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    log: LogConfig = field(default_factory=LogConfig)
