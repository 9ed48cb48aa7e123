"""Shared fixtures for kubemeta integration tests.

Provides a small, realistic cluster snapshot (a Deployment-managed Pod, a
CronJob-managed Pod, a bare Pod, their controllers, a Node and a Namespace)
as raw manifests, the way ``kubectl get -o json`` returns them.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from kubemeta.app import ClusterStores, load_stores
from kubemeta.cache.store import Store
from kubemeta.models.config import AddResourceMetadataConfig, KubeMetaConfig


def _owner(kind: str, name: str) -> list[dict[str, Any]]:
    return [{"apiVersion": "apps/v1", "kind": kind, "name": name, "uid": f"{name}-uid", "controller": True}]


def make_pod_manifest(
    name: str,
    owner_kind: str | None = None,
    owner_name: str = "",
    node_name: str = "worker-1",
    pod_ip: str = "10.244.1.17",
    namespace: str = "shop",
) -> dict[str, Any]:
    metadata: dict[str, Any] = {
        "name": name,
        "namespace": namespace,
        "uid": f"{name}-uid",
        "labels": {"app.kubernetes.io/name": name.split("-")[0], "pod-template-hash": "7b4f8c6d"},
    }
    if owner_kind:
        metadata["ownerReferences"] = _owner(owner_kind, owner_name)
    return {
        "apiVersion": "v1",
        "kind": "Pod",
        "metadata": metadata,
        "spec": {"nodeName": node_name} if node_name else {},
        "status": {"podIP": pod_ip} if pod_ip else {"phase": "Pending"},
    }


@pytest.fixture
def manifests() -> list[dict[str, Any]]:
    return [
        {
            "apiVersion": "v1",
            "kind": "Namespace",
            "metadata": {"name": "shop", "uid": "shop-uid", "labels": {"team": "checkout"}},
        },
        {
            "apiVersion": "v1",
            "kind": "Node",
            "metadata": {
                "name": "worker-1",
                "uid": "worker-1-uid",
                "labels": {"topology.kubernetes.io/zone": "eu-west-1a"},
            },
            "status": {
                "addresses": [
                    {"type": "InternalIP", "address": "192.168.0.11"},
                    {"type": "Hostname", "address": "worker-1.internal"},
                ]
            },
        },
        {
            "apiVersion": "apps/v1",
            "kind": "Deployment",
            "metadata": {"name": "cart", "namespace": "shop", "uid": "cart-uid"},
        },
        {
            "apiVersion": "apps/v1",
            "kind": "ReplicaSet",
            "metadata": {
                "name": "cart-7b4f8c6d",
                "namespace": "shop",
                "uid": "cart-7b4f8c6d-uid",
                "ownerReferences": _owner("Deployment", "cart"),
            },
        },
        {
            "apiVersion": "batch/v1",
            "kind": "Job",
            "metadata": {
                "name": "report-28000000",
                "namespace": "shop",
                "uid": "report-28000000-uid",
                "ownerReferences": _owner("CronJob", "report"),
            },
        },
        {
            "apiVersion": "v1",
            "kind": "ConfigMap",
            "metadata": {"name": "cart-config", "namespace": "shop"},
        },
        make_pod_manifest("cart-7b4f8c6d-x2kj", "ReplicaSet", "cart-7b4f8c6d"),
        make_pod_manifest("report-28000000-abcde", "Job", "report-28000000", pod_ip=""),
        make_pod_manifest("debug", node_name="worker-9"),
        make_pod_manifest("orphan-5d9c-qq7z", "ReplicaSet", "orphan-5d9c"),
    ]


@pytest.fixture
def cluster_stores(manifests: list[dict[str, Any]]) -> ClusterStores:
    return load_stores(manifests)


@pytest.fixture
def stores(cluster_stores: ClusterStores) -> dict[str, Store]:
    return cluster_stores.for_namespace("shop")


@pytest.fixture
def all_hops_config() -> KubeMetaConfig:
    return KubeMetaConfig(add_resource_metadata=AddResourceMetadataConfig(deployment=True, cronjob=True))


@pytest.fixture
def pod_manifest() -> Callable[..., dict[str, Any]]:
    return make_pod_manifest
