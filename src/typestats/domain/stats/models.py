"""
Domain models for typing-practice statistics.

These are pure data structures with no I/O or external dependencies.
"""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class SessionRecord:
    """
    A single practice session from the history export.

    Attributes:
        timestamp: Calendar day of the session (time of day is dropped).
        speed: Typing speed in characters per minute.
        errors: Number of mistakes made during the session.
        lesson_type: Lesson category tag (e.g. "auto", "custom").
    """

    timestamp: date
    speed: float
    errors: int
    lesson_type: str


@dataclass(frozen=True)
class RunningTotals:
    """
    Accumulator for the grand totals, folded over the scan.

    `add` never mutates; it returns the next accumulator value.
    """

    count: int = 0
    sum_speed: float = 0.0
    sum_errors: int = 0

    def add(self, record: SessionRecord) -> "RunningTotals":
        return RunningTotals(
            count=self.count + 1,
            sum_speed=self.sum_speed + record.speed,
            sum_errors=self.sum_errors + record.errors,
        )


@dataclass(frozen=True)
class PeriodStatistics:
    """
    Descriptive statistics for one period bucket.

    Every value except the counters is rounded half-up to two decimals.
    """

    date: str
    sample_count: int
    sum_cpm: float
    average_cpm: float
    average_wpm: float
    median_wpm: float
    mode_wpm: float
    average_errors: float


@dataclass(frozen=True)
class GrandTotals:
    total_samples: int
    overall_average_wpm: float
    overall_average_errors: float


@dataclass(frozen=True)
class PeriodReport:
    """
    Everything the presenters need: per-period rows plus the grand totals.

    Periods keep the order in which their labels were first seen.
    """

    totals: GrandTotals
    periods: list[PeriodStatistics] = field(default_factory=list)
