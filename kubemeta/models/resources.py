"""Typed, read-only views over Kubernetes API objects.

A ``Resource`` wraps the raw manifest dict as returned by the API server (or
a watch event) and exposes the handful of fields metadata generators read.
The wrapped dict is never mutated.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class OwnerReference:
    """An entry of ``metadata.ownerReferences``."""

    kind: str
    name: str
    uid: str = ""
    controller: bool = False

    @classmethod
    def from_dict(cls, ref: dict[str, Any]) -> OwnerReference:
        return cls(
            kind=str(ref.get("kind") or ""),
            name=str(ref.get("name") or ""),
            uid=str(ref.get("uid") or ""),
            controller=bool(ref.get("controller", False)),
        )


@dataclass(frozen=True, eq=False)
class Resource:
    """Base class for every supported Kubernetes kind."""

    kind: ClassVar[str] = ""
    namespaced: ClassVar[bool] = True

    raw: dict[str, Any] = field(default_factory=dict)

    @property
    def _metadata(self) -> dict[str, Any]:
        return self.raw.get("metadata") or {}

    @property
    def name(self) -> str:
        return str(self._metadata.get("name") or "")

    @property
    def namespace(self) -> str:
        if not self.namespaced:
            return ""
        return str(self._metadata.get("namespace") or "")

    @property
    def uid(self) -> str:
        return str(self._metadata.get("uid") or "")

    @property
    def labels(self) -> dict[str, str]:
        return dict(self._metadata.get("labels") or {})

    @property
    def annotations(self) -> dict[str, str]:
        return dict(self._metadata.get("annotations") or {})

    @property
    def owner_references(self) -> list[OwnerReference]:
        return [OwnerReference.from_dict(ref) for ref in self._metadata.get("ownerReferences") or []]

    @property
    def key(self) -> tuple[str, str, str]:
        """Return the unique ``(kind, namespace, name)`` identity."""
        return (self.kind, self.namespace, self.name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(namespace={self.namespace!r}, name={self.name!r})"


class Pod(Resource):
    kind = "Pod"

    @property
    def node_name(self) -> str:
        return str((self.raw.get("spec") or {}).get("nodeName") or "")

    @property
    def pod_ip(self) -> str:
        return str((self.raw.get("status") or {}).get("podIP") or "")


class ReplicaSet(Resource):
    kind = "ReplicaSet"


class Deployment(Resource):
    kind = "Deployment"


class StatefulSet(Resource):
    kind = "StatefulSet"


class DaemonSet(Resource):
    kind = "DaemonSet"


class Job(Resource):
    kind = "Job"


class CronJob(Resource):
    kind = "CronJob"


class Node(Resource):
    kind = "Node"
    namespaced = False

    @property
    def hostname(self) -> str:
        """Return the ``Hostname`` status address, or "" if not reported."""
        for address in (self.raw.get("status") or {}).get("addresses") or []:
            if address.get("type") == "Hostname" and address.get("address"):
                return str(address["address"])
        return ""


class Namespace(Resource):
    kind = "Namespace"
    namespaced = False


RESOURCE_TYPES: dict[str, type[Resource]] = {
    cls.kind: cls
    for cls in (Pod, ReplicaSet, Deployment, StatefulSet, DaemonSet, Job, CronJob, Node, Namespace)
}


def resource_from_dict(obj: dict[str, Any], kind: str | None = None) -> Resource | None:
    """Wrap a raw manifest in its typed view.

    ``kind`` overrides ``obj["kind"]``, which list responses leave empty on
    their items. Returns None for kinds with no typed view.
    """
    cls = RESOURCE_TYPES.get(kind or str(obj.get("kind") or ""))
    if cls is None:
        return None
    return cls(raw=obj)
