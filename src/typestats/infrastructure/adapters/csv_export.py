"""
CSV exporter: one line with the integer WPM of every period.
"""

import logging
from collections.abc import Sequence
from pathlib import Path

from typestats.application.utils.rounding import round_to_int
from typestats.domain.constants import CHARS_PER_WORD
from typestats.domain.errors import CsvWriteError
from typestats.domain.stats.models import PeriodStatistics

logger = logging.getLogger(__name__)


def format_csv_line(periods: Sequence[PeriodStatistics]) -> str:
    """
    Every field is followed by a comma, including the last: "65,80,\\n".
    """
    fields = "".join(f"{round_to_int(p.average_cpm / CHARS_PER_WORD)}," for p in periods)
    return fields + "\n"


class CsvExporter:
    """
    Writes the CSV export, replacing any previous file at `path`.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def export(self, periods: Sequence[PeriodStatistics]) -> Path:
        try:
            self.path.unlink(missing_ok=True)
        except OSError as e:
            raise CsvWriteError(f"Cannot remove existing {self.path}: {e}") from e

        try:
            self.path.write_text(format_csv_line(periods), encoding="utf-8")
        except OSError as e:
            raise CsvWriteError(f"Cannot write {self.path}: {e}") from e

        logger.info("Wrote %d periods to %s", len(periods), self.path)
        return self.path
