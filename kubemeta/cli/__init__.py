"""kubemeta command-line interface.

Exposes:
    cli -- Click group entry point (registered as ``kubemeta`` script).
"""

from kubemeta.cli.main import cli

__all__ = ["cli"]
