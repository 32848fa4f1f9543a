"""
Period bucketer: groups session records into calendar periods.

Pure computation, single pass, no I/O.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date

from typestats.domain.stats.models import RunningTotals, SessionRecord

logger = logging.getLogger(__name__)


@dataclass
class BucketedSessions:
    """
    Result of one scan over the input.

    Attributes:
        buckets: Period label -> matching records, in first-seen label order.
        totals: Accumulated over every record that passed the date filter,
            whatever its lesson type.
    """

    buckets: dict[str, list[SessionRecord]] = field(default_factory=dict)
    totals: RunningTotals = field(default_factory=RunningTotals)


def period_label(day: date, granularity: str) -> str:
    """
    Label of the period containing `day`.

    Weeks use the ISO week number, zero-padded to three digits, after the
    calendar year (so 2021-01-01 falls in "2021/053").
    """
    if granularity == "year":
        return day.strftime("%Y")
    if granularity == "month":
        return day.strftime("%Y/%m")
    if granularity == "week":
        return f"{day.year:04d}/{day.isocalendar()[1]:03d}"
    if granularity == "day":
        return day.strftime("%Y/%m/%d")
    raise ValueError(f"Unknown period granularity: {granularity!r}")


def bucket_sessions(
    records: Iterable[SessionRecord],
    granularity: str,
    lesson_type: str,
    date_after: date | None = None,
) -> BucketedSessions:
    """
    Group records by period, keeping input order.

    Args:
        records: Sessions in input order (not re-sorted).
        granularity: One of "day", "week", "month", "year".
        lesson_type: Only records whose tag equals this string are bucketed.
            "auto" is compared literally like any other tag.
        date_after: Records dated strictly before this day are dropped
            from both the buckets and the totals.

    Returns:
        BucketedSessions with the ordered buckets and running totals.
    """
    buckets: dict[str, list[SessionRecord]] = {}
    totals = RunningTotals()
    skipped = 0

    for record in records:
        if date_after is not None and record.timestamp < date_after:
            skipped += 1
            continue

        label = period_label(record.timestamp, granularity)
        totals = totals.add(record)

        if record.lesson_type == lesson_type:
            buckets.setdefault(label, []).append(record)

    logger.debug(
        "Bucketed %d records into %d %s periods (%d before date filter)",
        totals.count,
        len(buckets),
        granularity,
        skipped,
    )
    return BucketedSessions(buckets=buckets, totals=totals)
