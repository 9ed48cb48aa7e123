"""Tests for typed resource views."""

from __future__ import annotations

from kubemeta.models.resources import (
    Job,
    Namespace,
    Node,
    OwnerReference,
    Pod,
    resource_from_dict,
)


def test_resource_from_dict_dispatches_on_kind() -> None:
    assert isinstance(resource_from_dict({"kind": "Pod", "metadata": {"name": "web"}}), Pod)
    assert isinstance(resource_from_dict({"kind": "Job"}), Job)
    assert resource_from_dict({"kind": "ConfigMap"}) is None
    assert resource_from_dict({}) is None


def test_kind_override_for_list_items() -> None:
    assert isinstance(resource_from_dict({"metadata": {"name": "n1"}}, kind="Node"), Node)


def test_missing_fields_default_to_empty() -> None:
    pod = Pod(raw={})
    assert pod.name == ""
    assert pod.namespace == ""
    assert pod.labels == {}
    assert pod.owner_references == []
    assert pod.node_name == ""
    assert pod.pod_ip == ""


def test_pod_fields() -> None:
    pod = Pod(
        raw={
            "metadata": {
                "name": "web",
                "namespace": "default",
                "uid": "u1",
                "ownerReferences": [{"kind": "ReplicaSet", "name": "web-rs", "uid": "rs", "controller": True}],
            },
            "spec": {"nodeName": "n1"},
            "status": {"podIP": "10.0.0.5"},
        }
    )
    assert pod.key == ("Pod", "default", "web")
    assert pod.node_name == "n1"
    assert pod.pod_ip == "10.0.0.5"
    assert pod.owner_references == [OwnerReference(kind="ReplicaSet", name="web-rs", uid="rs", controller=True)]


def test_cluster_scoped_kinds_ignore_namespace() -> None:
    assert Node(raw={"metadata": {"name": "n1", "namespace": "x"}}).namespace == ""
    assert Namespace(raw={"metadata": {"name": "prod"}}).namespace == ""


def test_node_hostname() -> None:
    node = Node(
        raw={
            "metadata": {"name": "n1"},
            "status": {
                "addresses": [
                    {"type": "InternalIP", "address": "10.0.0.1"},
                    {"type": "Hostname", "address": "n1.internal"},
                ]
            },
        }
    )
    assert node.hostname == "n1.internal"
    assert Node(raw={"metadata": {"name": "n2"}}).hostname == ""


def test_labels_are_copies() -> None:
    raw = {"metadata": {"labels": {"app": "web"}}}
    pod = Pod(raw=raw)
    pod.labels["app"] = "changed"
    assert raw["metadata"]["labels"] == {"app": "web"}
