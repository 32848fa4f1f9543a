"""
JSON History Repository — Infrastructure adapter for keybr.com profile exports.

Implements SessionSource by reading the exported JSON file.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from typestats.domain.errors import (
    InputFileNotFoundError,
    InvalidJsonInputError,
    MalformedRecordError,
)
from typestats.domain.stats.models import SessionRecord
from typestats.domain.stats.ports import SessionSource

logger = logging.getLogger(__name__)


class SessionEntry(BaseModel):
    """Wire shape of one exported practice session."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    time_stamp: date = Field(alias="timeStamp")
    speed: float = Field(ge=0, allow_inf_nan=False)
    errors: int = Field(ge=0)
    lesson_type: str = Field(alias="lessonType")

    @field_validator("time_stamp", mode="before")
    @classmethod
    def parse_day(cls, v: Any) -> date:
        # Only the leading YYYY-MM-DD matters; the time of day is dropped.
        if not isinstance(v, str):
            raise ValueError("timeStamp must be a string")
        return date.fromisoformat(v[:10])

    def to_record(self) -> SessionRecord:
        return SessionRecord(
            timestamp=self.time_stamp,
            speed=self.speed,
            errors=self.errors,
            lesson_type=self.lesson_type,
        )


def decode_entries(text: str) -> list[Any]:
    """
    Decode an export into raw entries.

    Accepts a JSON array, a single object, or a stream of concatenated
    (e.g. newline-delimited) objects.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return _decode_stream(text)

    if isinstance(data, list):
        return data
    return [data]


def _decode_stream(text: str) -> list[Any]:
    decoder = json.JSONDecoder()
    entries: list[Any] = []
    pos = 0
    end = len(text)

    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return entries
        try:
            obj, pos = decoder.raw_decode(text, pos)
        except json.JSONDecodeError as e:
            raise InvalidJsonInputError(f"Invalid JSON at line {e.lineno}: {e.msg}") from e
        entries.append(obj)


def parse_sessions(entries: list[Any]) -> list[SessionRecord]:
    records: list[SessionRecord] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise MalformedRecordError(i, f"expected an object, got {type(entry).__name__}")
        try:
            records.append(SessionEntry.model_validate(entry).to_record())
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first["loc"]) or "entry"
            raise MalformedRecordError(i, f"{field}: {first['msg']}") from e
    return records


class JsonHistoryRepository(SessionSource):
    """
    Loads practice sessions from a JSON export on disk.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load_sessions(self) -> list[SessionRecord]:
        if not self.path.is_file():
            raise InputFileNotFoundError(f"File does not exist: {self.path}")

        try:
            text = self.path.read_text(encoding="utf-8-sig")
        except UnicodeDecodeError as e:
            raise InvalidJsonInputError(f"Invalid JSON: {self.path} is not UTF-8 text") from e
        except OSError as e:
            raise InputFileNotFoundError(f"Cannot read {self.path}: {e.strerror or e}") from e

        records = parse_sessions(decode_entries(text))
        logger.info("Loaded %d sessions from %s", len(records), self.path)
        return records
