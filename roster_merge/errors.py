"""
Errors raised by the consolidation pipeline.

Only whole-operation failures are raised; cell and row level anomalies
are resolved inside the detector.
"""


class RosterMergeError(Exception):
    """Base class for every error surfaced to the CLI or HTTP caller."""


class InputMissingError(RosterMergeError):
    """No input was supplied or the input path does not exist."""


class NoTablesFoundError(RosterMergeError):
    """The workbook was read but no sheet contained a recognisable header row."""

    def __init__(self, message: str = "No tables found by header names"):
        super().__init__(message)


class WorkbookReadError(RosterMergeError):
    """The input payload could not be opened as a workbook."""


class SerializationError(RosterMergeError):
    """The combined workbook could not be encoded."""
