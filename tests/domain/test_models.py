import dataclasses
from datetime import date

import pytest

from typestats.domain.stats.models import RunningTotals, SessionRecord


def test_session_record_is_immutable(make_record):
    record = make_record("2021-03-15", 300)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.speed = 10


def test_running_totals_add_returns_new_value():
    start = RunningTotals()
    record = SessionRecord(timestamp=date(2021, 1, 1), speed=250.5, errors=4, lesson_type="x")

    after = start.add(record).add(record)

    assert start == RunningTotals(0, 0.0, 0)
    assert after.count == 2
    assert after.sum_speed == 501.0
    assert after.sum_errors == 8
