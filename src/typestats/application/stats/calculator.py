"""
Statistics calculator for a single period's samples.

This is a pure computation module with no I/O.
"""

from collections import Counter
from collections.abc import Sequence

from typestats.application.utils.rounding import round_half_up
from typestats.domain.constants import CHARS_PER_WORD
from typestats.domain.errors import EmptySampleError
from typestats.domain.stats.models import PeriodStatistics, SessionRecord


class StatisticsCalculator:
    """
    Computes PeriodStatistics from one bucket of SessionRecords.

    Stateless and side-effect free.
    """

    def compute(self, samples: Sequence[SessionRecord], label: str) -> PeriodStatistics:
        """
        Compute count, averages, median and mode for one period.

        Raises:
            EmptySampleError: If `samples` is empty.
        """
        if not samples:
            raise EmptySampleError(f"Period {label} has no samples")

        count = len(samples)
        sum_cpm = sum(s.speed for s in samples)
        sum_errors = sum(s.errors for s in samples)

        average_cpm = round_half_up(sum_cpm / count)
        return PeriodStatistics(
            date=label,
            sample_count=count,
            sum_cpm=sum_cpm,
            average_cpm=average_cpm,
            # Derived from the already rounded cpm average
            average_wpm=round_half_up(average_cpm / CHARS_PER_WORD),
            median_wpm=self._compute_median_wpm(samples),
            mode_wpm=self._compute_mode_wpm(samples),
            average_errors=round_half_up(sum_errors / count),
        )

    def _compute_median_wpm(self, samples: Sequence[SessionRecord]) -> float:
        """
        Speed at index n // 2 of the speed-sorted samples.

        For even counts this is the upper of the two middle values, not their mean.
        """
        ordered = sorted(samples, key=lambda s: s.speed)
        return round_half_up(ordered[len(ordered) // 2].speed / CHARS_PER_WORD)

    def _compute_mode_wpm(self, samples: Sequence[SessionRecord]) -> float:
        """
        Most frequent speed. On a tie the speed seen first in `samples` wins.
        """
        # Counter keeps first-occurrence order and max() returns the first maximum.
        counts = Counter(s.speed for s in samples)
        mode = max(counts, key=counts.__getitem__)
        return round_half_up(mode / CHARS_PER_WORD)
