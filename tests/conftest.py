"""Shared pytest fixtures.

- log_capture: records every loguru message emitted during a test
- runner: a Typer CLI test runner
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from loguru import logger
from typer.testing import CliRunner


@pytest.fixture
def log_capture() -> Iterator[list[dict]]:
    """Capture loguru records as dicts with level, message and extra."""
    captured_logs: list[dict] = []

    def sink(message) -> None:
        record = message.record
        captured_logs.append({
            "level": record["level"].name,
            "message": record["message"],
            "extra": dict(record["extra"]),
        })

    handler_id = logger.add(sink, level="DEBUG", format="{message}")
    yield captured_logs
    logger.remove(handler_id)


@pytest.fixture
def runner() -> CliRunner:
    """Fixture providing a Typer CLI test runner."""
    return CliRunner()
