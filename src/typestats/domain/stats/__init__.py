# Domain Stats Package
from .models import GrandTotals, PeriodReport, PeriodStatistics, RunningTotals, SessionRecord
from .ports import SessionSource, TerminalWidthProvider

__all__ = [
    "SessionRecord",
    "RunningTotals",
    "PeriodStatistics",
    "GrandTotals",
    "PeriodReport",
    "SessionSource",
    "TerminalWidthProvider",
]
