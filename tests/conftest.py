import json
import os
from datetime import date

import pytest

from typestats.domain.stats.models import SessionRecord


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Points HOME at a temp dir and drops TYPESTATS_* variables so user config never leaks in."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("TYPESTATS_"):
            monkeypatch.delenv(key)
    return home


@pytest.fixture
def make_record():
    def _make(day: str, speed: float, errors: int = 0, lesson_type: str = "auto") -> SessionRecord:
        return SessionRecord(
            timestamp=date.fromisoformat(day),
            speed=speed,
            errors=errors,
            lesson_type=lesson_type,
        )

    return _make


@pytest.fixture
def three_sessions(make_record):
    """Two January sessions and one February session."""
    return [
        make_record("2021-01-05", 300, 2),
        make_record("2021-01-20", 350, 3),
        make_record("2021-02-01", 400, 1),
    ]


@pytest.fixture
def history_file(tmp_path):
    """Writes export entries as a JSON array and returns the path."""

    def _write(entries, name: str = "history.json"):
        path = tmp_path / name
        path.write_text(json.dumps(entries), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_entries():
    return [
        {"timeStamp": "2021-01-05T10:00:00.000Z", "speed": 300, "errors": 2, "lessonType": "auto"},
        {"timeStamp": "2021-01-20T11:30:00.000Z", "speed": 350, "errors": 3, "lessonType": "auto"},
        {"timeStamp": "2021-02-01T09:15:00.000Z", "speed": 400, "errors": 1, "lessonType": "auto"},
    ]
