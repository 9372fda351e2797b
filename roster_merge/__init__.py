"""
roster_merge consolidates repeated personnel roster tables, spread over the
sheets of a workbook, into one table with a unified column layout:

- header-row detection by French/Arabic phrase matching
- grouping of header columns into registration / name / dayCount / status
- data-row extraction up to the first blank row
- padding of every table to the widest column count per group
"""
from roster_merge.errors import (
    InputMissingError,
    NoTablesFoundError,
    RosterMergeError,
    SerializationError,
    WorkbookReadError,
)
from roster_merge.pipeline import (
    ConsolidationResult,
    consolidate,
    consolidate_file,
    detect_tables,
    extract_tables_from_workbook,
)

__all__ = [
    "RosterMergeError",
    "InputMissingError",
    "NoTablesFoundError",
    "WorkbookReadError",
    "SerializationError",
    "ConsolidationResult",
    "consolidate",
    "consolidate_file",
    "detect_tables",
    "extract_tables_from_workbook",
]
