# Infrastructure Adapters Package
from .csv_export import CsvExporter
from .json_history import JsonHistoryRepository
from .terminal import FixedWidthProvider, TputWidthProvider

__all__ = ["JsonHistoryRepository", "CsvExporter", "TputWidthProvider", "FixedWidthProvider"]
