from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest

from typestats.domain.errors import (
    InputFileNotFoundError,
    InvalidJsonInputError,
    MalformedRecordError,
)
from typestats.infrastructure.adapters.json_history import (
    JsonHistoryRepository,
    decode_entries,
    parse_sessions,
)


def test_load_sessions_from_array(history_file, sample_entries):
    repo = JsonHistoryRepository(history_file(sample_entries))

    records = repo.load_sessions()

    assert len(records) == 3
    first = records[0]
    assert first.timestamp == date(2021, 1, 5)
    assert first.speed == 300.0
    assert first.errors == 2
    assert first.lesson_type == "auto"


def test_load_sessions_keeps_file_order(history_file, sample_entries):
    records = JsonHistoryRepository(history_file(list(reversed(sample_entries)))).load_sessions()

    assert [r.speed for r in records] == [400, 350, 300]


def test_missing_file(tmp_path):
    with pytest.raises(InputFileNotFoundError):
        JsonHistoryRepository(tmp_path / "nope.json").load_sessions()


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(InputFileNotFoundError):
        JsonHistoryRepository(tmp_path).load_sessions()


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{not json", encoding="utf-8")

    with pytest.raises(InvalidJsonInputError, match="Invalid JSON"):
        JsonHistoryRepository(path).load_sessions()


@pytest.mark.parametrize(
    "text,count",
    [
        ('[{"a": 1}, {"a": 2}]', 2),
        ('{"a": 1}', 1),
        ('{"a": 1}\n{"a": 2}\n{"a": 3}\n', 3),
        ('{"a": 1}{"a": 2}', 2),
        ("[]", 0),
        ("", 0),
        ("   \n", 0),
    ],
    ids=["array", "single_object", "ndjson", "concatenated", "empty_array", "empty", "blank"],
)
def test_decode_entries(text, count):
    assert len(decode_entries(text)) == count


def test_extra_fields_are_ignored():
    records = parse_sessions(
        [
            {
                "timeStamp": "2020-12-31T23:59:59Z",
                "speed": 512.3,
                "errors": 0,
                "lessonType": "custom",
                "length": 120,
                "time": 14000,
            }
        ]
    )

    assert records[0].timestamp == date(2020, 12, 31)
    assert records[0].speed == 512.3


@pytest.mark.parametrize(
    "entry,field",
    [
        ({"speed": 300, "errors": 1, "lessonType": "auto"}, "timeStamp"),
        ({"timeStamp": "2021-01-01", "errors": 1, "lessonType": "auto"}, "speed"),
        ({"timeStamp": "2021-01-01", "speed": 300, "lessonType": "auto"}, "errors"),
        ({"timeStamp": "2021-01-01", "speed": 300, "errors": 1}, "lessonType"),
        ({"timeStamp": "yesterday", "speed": 300, "errors": 1, "lessonType": "auto"}, "timeStamp"),
        ({"timeStamp": 20210101, "speed": 300, "errors": 1, "lessonType": "auto"}, "timeStamp"),
        ({"timeStamp": "2021-01-01", "speed": -5, "errors": 1, "lessonType": "auto"}, "speed"),
        ({"timeStamp": "2021-01-01", "speed": 300, "errors": -1, "lessonType": "auto"}, "errors"),
    ],
    ids=[
        "missing_timestamp",
        "missing_speed",
        "missing_errors",
        "missing_lesson_type",
        "bad_date",
        "timestamp_not_string",
        "negative_speed",
        "negative_errors",
    ],
)
def test_malformed_entries(entry, field):
    good = {"timeStamp": "2021-01-01", "speed": 1, "errors": 0, "lessonType": "auto"}

    with pytest.raises(MalformedRecordError, match=field) as exc_info:
        parse_sessions([good, entry])

    assert exc_info.value.index == 1


def test_non_object_entry():
    with pytest.raises(MalformedRecordError, match="expected an object"):
        parse_sessions([42])


def test_malformed_is_invalid_json_input():
    assert issubclass(MalformedRecordError, InvalidJsonInputError)


def test_non_utf8_file_is_invalid_json(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(
        b'[{"timeStamp": "2021-01-01", "speed": 300, "errors": 0, "lessonType": "\xff"}]'
    )

    with pytest.raises(InvalidJsonInputError, match="not UTF-8"):
        JsonHistoryRepository(path).load_sessions()


def test_unreadable_file(history_file, sample_entries):
    path = history_file(sample_entries)

    with patch.object(Path, "read_text", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(InputFileNotFoundError, match="Permission denied"):
            JsonHistoryRepository(path).load_sessions()


@pytest.mark.parametrize("speed", ["1e400", "-1e400", "Infinity", "NaN"])
def test_non_finite_speed_is_malformed(tmp_path, speed):
    path = tmp_path / "history.json"
    path.write_text(
        '[{"timeStamp": "2021-01-01", "speed": %s, "errors": 0, "lessonType": "auto"}]' % speed,
        encoding="utf-8",
    )

    with pytest.raises(MalformedRecordError, match="speed"):
        JsonHistoryRepository(path).load_sessions()
