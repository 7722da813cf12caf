from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest

from loader import WeeklySchedule, load


def encode(payload: Any) -> bytes:
    return json.dumps(payload).encode("utf-8")


@pytest.fixture
def make_schedule() -> Callable[[dict[str, Any]], WeeklySchedule]:
    def _make(days: dict[str, Any]) -> WeeklySchedule:
        return load(encode({"schedule": days}), "test.cccsched")

    return _make


@pytest.fixture
def write_schedule(tmp_path: Path) -> Callable[..., Path]:
    def _write(payload: Any, name: str = "fall.cccsched") -> Path:
        path = tmp_path / name
        path.write_bytes(encode(payload))
        return path

    return _write


@pytest.fixture
def teaching_monday() -> dict[str, Any]:
    return {
        "schedule": {
            "monday": [
                {
                    "type": "teaching",
                    "startTime": "09:00",
                    "endTime": "10:30",
                    "className": "CS101",
                }
            ]
        }
    }
