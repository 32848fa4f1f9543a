"""
Adapter Factory
Centralizes the logic for selecting infrastructure adapters from config.
"""

from pathlib import Path

from typestats.application.config import AppConfig
from typestats.domain.stats.ports import SessionSource, TerminalWidthProvider
from typestats.infrastructure.adapters.csv_export import CsvExporter
from typestats.infrastructure.adapters.json_history import JsonHistoryRepository
from typestats.infrastructure.adapters.terminal import FixedWidthProvider, TputWidthProvider


def get_session_source(path: Path) -> SessionSource:
    return JsonHistoryRepository(path)


def get_width_provider(config: AppConfig) -> TerminalWidthProvider:
    """
    Returns a fixed-width provider when the width is configured, else probes `tput`.
    """
    if config.terminal_width is not None:
        return FixedWidthProvider(config.terminal_width)
    return TputWidthProvider()


def get_csv_exporter(config: AppConfig) -> CsvExporter:
    return CsvExporter(config.csv_path)
