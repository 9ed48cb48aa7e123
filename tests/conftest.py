"""Shared fixtures for kubemeta tests."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

import pytest
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def captured_logs(monkeypatch: pytest.MonkeyPatch) -> Iterator[list[dict[str, Any]]]:
    """Route every structlog event into a list instead of stderr.

    The CLI's own ``setup_logging`` is disabled so it cannot replace the
    capturing configuration mid-test.
    """
    monkeypatch.setattr("kubemeta.cli.main.setup_logging", lambda *args, **kwargs: None)
    with capture_logs() as logs:
        yield logs
