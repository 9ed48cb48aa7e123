"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubemeta.models.config import (
    AddResourceMetadataConfig,
    ClusterConfig,
    KubeMetaConfig,
    LogConfig,
    MetadataConfig,
    OwnerMetadataConfig,
)

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBEMETA_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower()).strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for KUBEMETA_{key}: {val!r}")


def _env_list(key: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in _env(key).split(",") if item.strip())


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"json", "console"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def _metadata_config(prefix: str = "") -> MetadataConfig:
    return MetadataConfig(
        include_labels=_env_list(f"{prefix}INCLUDE_LABELS"),
        exclude_labels=_env_list(f"{prefix}EXCLUDE_LABELS"),
        include_annotations=_env_list(f"{prefix}INCLUDE_ANNOTATIONS"),
        labels_dedot=_env_bool("LABELS_DEDOT", True),
        annotations_dedot=_env_bool("ANNOTATIONS_DEDOT", True),
    )


def load_config() -> KubeMetaConfig:
    """Load configuration from KUBEMETA_* environment variables.

    Node and Namespace label selection is read from ``KUBEMETA_NODE_*`` and
    ``KUBEMETA_NAMESPACE_*`` (e.g. ``KUBEMETA_NODE_INCLUDE_LABELS``).
    """
    return KubeMetaConfig(
        metadata=_metadata_config(),
        add_resource_metadata=AddResourceMetadataConfig(
            node=OwnerMetadataConfig(
                enabled=_env_bool("ADD_NODE", True),
                metadata=_metadata_config("NODE_"),
            ),
            namespace=OwnerMetadataConfig(
                enabled=_env_bool("ADD_NAMESPACE", True),
                metadata=_metadata_config("NAMESPACE_"),
            ),
            deployment=_env_bool("ADD_DEPLOYMENT", False),
            cronjob=_env_bool("ADD_CRONJOB", False),
        ),
        cluster=ClusterConfig(
            name=_env("CLUSTER_NAME", ""),
            url=_env("CLUSTER_URL", ""),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
