# Application Stats Package
from .bucketer import BucketedSessions, bucket_sessions, period_label
from .calculator import StatisticsCalculator
from .service import PeriodReportService

__all__ = [
    "BucketedSessions",
    "bucket_sessions",
    "period_label",
    "StatisticsCalculator",
    "PeriodReportService",
]
