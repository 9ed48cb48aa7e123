"""``kubemeta`` click commands."""

from __future__ import annotations

import json
from typing import IO, Any

import click

from kubemeta import __version__
from kubemeta.app import build_pod_generator, load_stores
from kubemeta.cache.store import lookup
from kubemeta.config import load_config
from kubemeta.models.resources import Pod
from kubemeta.observability.logging import get_logger, setup_logging


def _read_manifests(source: IO[str]) -> list[dict[str, Any]]:
    """Accept a ``kind: List`` object, a bare JSON array, or a single object."""
    try:
        data = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="FILE") from exc

    if isinstance(data, list):
        items = data
    elif isinstance(data, dict) and isinstance(data.get("items"), list):
        items = data["items"]
    elif isinstance(data, dict):
        items = [data]
    else:
        raise click.BadParameter("expected a JSON object or array", param_hint="FILE")
    return [item for item in items if isinstance(item, dict)]


@click.group()
@click.version_option(__version__, prog_name="kubemeta")
def cli() -> None:
    """Kubernetes resource metadata enrichment."""


@cli.command()
@click.argument("source", metavar="FILE", type=click.File("r"))
@click.option("--pod", "pod_name", default=None, help="Only enrich Pods with this name.")
@click.option("-n", "--namespace", default=None, help="Only enrich Pods in this namespace.")
@click.option("--k8s-only", is_flag=True, help="Print the native document without ECS fields.")
def enrich(source: IO[str], pod_name: str | None, namespace: str | None, k8s_only: bool) -> None:
    """Print enriched metadata for every Pod in FILE, one JSON line each.

    FILE holds Kubernetes manifests as JSON (``kubectl get ... -o json``).
    Owners such as ReplicaSets, Jobs, Nodes and Namespaces are resolved from
    the other objects in the same file, within the Pod's own namespace.
    Pods are printed ordered by namespace, then name.
    """
    try:
        config = load_config()
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc
    setup_logging(config.log.level, json_output=config.log.format == "json")
    log = get_logger("cli")

    stores = load_stores(_read_manifests(source))
    namespaces = stores.namespaces() if namespace is None else [namespace]

    count = 0
    for ns in namespaces:
        ns_stores = stores.for_namespace(ns)
        pod_store = stores.namespaced.get(ns, {}).get("Pod")
        if pod_store is None:
            continue
        keys = pod_store.list_keys() if pod_name is None else [pod_name]
        pods = [pod for pod in (lookup(pod_store, key, Pod) for key in keys) if pod is not None]
        if not pods:
            continue

        generator = build_pod_generator(config, ns_stores)
        for pod in pods:
            meta = generator.generate_k8s(pod) if k8s_only else generator.generate(pod)
            click.echo(json.dumps(meta, sort_keys=True))
        count += len(pods)

    if pod_name is not None and count == 0:
        log.warning("pod not found", pod=pod_name, namespace=namespace)
        raise SystemExit(1)
    log.info("enrichment finished", pods=count)
