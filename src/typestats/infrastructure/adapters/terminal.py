"""
Terminal width providers.

The graph presenter only needs a number; these adapters supply it.
"""

import logging
import subprocess

from typestats.domain.errors import TerminalWidthError
from typestats.domain.stats.ports import TerminalWidthProvider

logger = logging.getLogger(__name__)


class TputWidthProvider(TerminalWidthProvider):
    """
    Asks the terminal database via `tput cols`.
    """

    def __init__(self, command: list[str] | None = None):
        self.command = command or ["tput", "cols"]

    def get_width(self) -> int:
        try:
            result = subprocess.run(
                self.command, capture_output=True, text=True, check=True
            )
        except (OSError, subprocess.CalledProcessError) as e:
            raise TerminalWidthError(f"Could not query terminal width: {e}") from e

        output = result.stdout.strip()
        try:
            width = int(output)
        except ValueError as e:
            raise TerminalWidthError(f"Unexpected `tput cols` output: {output!r}") from e

        logger.debug("Terminal width: %d", width)
        return width


class FixedWidthProvider(TerminalWidthProvider):
    def __init__(self, width: int):
        self.width = width

    def get_width(self) -> int:
        return self.width
