"""
Ports (interfaces) for the statistics core.

These define the contract that infrastructure adapters must implement.
Application services depend on these abstractions, not concrete implementations.
"""

from abc import ABC, abstractmethod

from .models import SessionRecord


class SessionSource(ABC):
    """
    Port for loading practice sessions.

    Implementations:
        - JsonHistoryRepository: Reads a keybr.com profile export.
    """

    @abstractmethod
    def load_sessions(self) -> list[SessionRecord]:
        """
        Load every session record, in the order the source stores them.

        Raises:
            InputFileNotFoundError: The backing file does not exist.
            InvalidJsonInputError: The content cannot be decoded into records.
        """
        pass


class TerminalWidthProvider(ABC):
    """
    Port for asking how many columns the output terminal has.

    Implementations:
        - TputWidthProvider: Shells out to `tput cols`.
        - FixedWidthProvider: Returns a configured width.
    """

    @abstractmethod
    def get_width(self) -> int:
        """
        Returns:
            Number of character columns available.

        Raises:
            TerminalWidthError: The width could not be determined.
        """
        pass
