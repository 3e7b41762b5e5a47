# tests/conftest.py
from __future__ import annotations

from datetime import datetime, timezone

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("TERMLINE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("TERMLINE_WIDTH", raising=False)


def _utc(hour: int, minute: int = 0, second: int = 0, day: int = 10) -> datetime:
    return datetime(2025, 6, day, hour, minute, second, tzinfo=timezone.utc)


@pytest.fixture
def at():
    """
    2025-06-10 的 UTC 时间工厂：
        at(8, 30) -> 2025-06-10T08:30:00Z
    """
    return _utc


@pytest.fixture
def scenario_payload() -> str:
    return """
    {
      "start": "2025-06-10T08:00:00Z",
      "end": "2025-06-10T10:00:00Z",
      "options": {"width": 20, "tick_every": "1h", "time_format": "15:04"},
      "events": [{"label": "A", "at": "2025-06-10T08:30:00Z", "depth": 0}]
    }
    """


@pytest.fixture
def scenario_output() -> str:
    return (
        "08:00   09:00   10:00\n"
        "|---------|---------|\n"
        "\n"
        "     ^ A (08:30)\n"
    )
