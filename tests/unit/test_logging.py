"""Tests for the structlog processor chain."""

from __future__ import annotations

import json
from typing import Any

import structlog

from kubemeta.observability.logging import build_processors


def _render(json_output: bool) -> str:
    event: Any = {"event": "stores loaded", "skipped": 1}
    for processor in build_processors(json_output):
        event = processor(None, "info", event)
    assert isinstance(event, str)
    return event


def test_json_renderer_by_default() -> None:
    assert isinstance(build_processors()[-1], structlog.processors.JSONRenderer)

    line = json.loads(_render(json_output=True))
    assert line["event"] == "stores loaded"
    assert line["level"] == "info"
    assert "ts" in line


def test_console_renderer() -> None:
    assert isinstance(build_processors(json_output=False)[-1], structlog.dev.ConsoleRenderer)

    line = _render(json_output=False)
    assert "stores loaded" in line
    assert "skipped=1" in line
    assert not line.startswith("{")
