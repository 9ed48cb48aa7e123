"""Entry point for `python -m kubemeta`.

Usage:
    python -m kubemeta enrich pods.json
"""

from __future__ import annotations

from kubemeta.cli import cli

cli()
