"""
Period Report Service — Application layer orchestrator.

Coordinates bucketing the sessions and computing per-period statistics
and grand totals.
"""

import logging
from collections.abc import Iterable
from datetime import date

from typestats.application.utils.rounding import round_half_up
from typestats.domain.constants import CHARS_PER_WORD
from typestats.domain.errors import NoDataError
from typestats.domain.stats.models import (
    GrandTotals,
    PeriodReport,
    PeriodStatistics,
    SessionRecord,
)
from typestats.domain.stats.ports import SessionSource

from .bucketer import BucketedSessions, bucket_sessions
from .calculator import StatisticsCalculator

logger = logging.getLogger(__name__)


class PeriodReportService:
    """
    Application service that turns raw sessions into a PeriodReport.
    """

    def __init__(self, calculator: StatisticsCalculator | None = None):
        """
        Args:
            calculator: Optional custom calculator; uses default if not provided.
        """
        self._calc = calculator or StatisticsCalculator()

    def build(
        self,
        records: Iterable[SessionRecord],
        granularity: str,
        lesson_type: str,
        date_after: date | None = None,
    ) -> PeriodReport:
        """
        Bucket the records and assemble the report in one go.

        Raises:
            NoDataError: No record survived the date filter.
        """
        bucketed = bucket_sessions(records, granularity, lesson_type, date_after)
        return self.assemble(bucketed)

    def build_from_source(
        self,
        source: SessionSource,
        granularity: str,
        lesson_type: str,
        date_after: date | None = None,
    ) -> PeriodReport:
        return self.build(source.load_sessions(), granularity, lesson_type, date_after)

    def assemble(self, bucketed: BucketedSessions) -> PeriodReport:
        """
        Compute statistics for each bucket, in insertion order, plus grand totals.

        Buckets are not sorted: naturally chronological input yields
        chronological periods.

        Raises:
            NoDataError: The running totals hold zero samples.
        """
        totals = self._compute_grand_totals(bucketed)
        periods: list[PeriodStatistics] = [
            self._calc.compute(samples, label) for label, samples in bucketed.buckets.items()
        ]

        logger.info(
            "Report: %d periods, %d samples overall", len(periods), totals.total_samples
        )
        return PeriodReport(totals=totals, periods=periods)

    def _compute_grand_totals(self, bucketed: BucketedSessions) -> GrandTotals:
        running = bucketed.totals
        if running.count == 0:
            raise NoDataError("No practice sessions to analyse")

        return GrandTotals(
            total_samples=running.count,
            overall_average_wpm=round_half_up(
                running.sum_speed / running.count / CHARS_PER_WORD
            ),
            overall_average_errors=round_half_up(running.sum_errors / running.count),
        )
