"""kubemeta: Kubernetes resource metadata enrichment."""

__version__ = "0.1.0"
