"""Prometheus metrics exposed by kubemeta."""

from __future__ import annotations

from prometheus_client import Counter

owner_lookups_total = Counter(
    "kubemeta_owner_lookups_total",
    "Owner-chain hops attempted while enriching resource metadata",
    ["hop", "result"],
)
