"""Errors raised by the typestats core.

The core never exits the process; the CLI maps these to messages and exit codes.
"""


class TypestatsError(Exception):
    """Base class for every error the tool reports to the user."""


class MissingInputFileError(TypestatsError):
    pass


class InputFileNotFoundError(TypestatsError):
    pass


class InvalidJsonInputError(TypestatsError):
    pass


class MalformedRecordError(InvalidJsonInputError):
    """An entry parsed as JSON but lacks a required field or has a bad value."""

    def __init__(self, index: int, detail: str):
        self.index = index
        self.detail = detail
        super().__init__(f"Entry #{index} is malformed: {detail}")


class EmptySampleError(TypestatsError):
    pass


class NoDataError(TypestatsError):
    pass


class CsvWriteError(TypestatsError):
    pass


class TerminalWidthError(TypestatsError):
    pass
