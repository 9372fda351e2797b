"""
Roster table subpackage.

Public API:
  - CellAccessor       (cell value / text normalisation)
  - HeaderClassifier   (header text -> field groups)
  - TableDetector      (per-sheet table detection)
  - TableMerger        (cross-table column reconciliation)
  - WorkbookAdapter    (workbook bytes <-> sheet grids)
  - FieldGroup, DEFAULT_HEADER_PHRASES, load_header_phrases
"""

from roster_merge.tables.cells import CellAccessor
from roster_merge.tables.classifier import HeaderClassifier
from roster_merge.tables.config import (
    DEFAULT_HEADER_PHRASES,
    FIELD_ORDER,
    FieldGroup,
    load_header_phrases,
)
from roster_merge.tables.detector import TableDetector
from roster_merge.tables.merger import TableMerger
from roster_merge.tables.models import Cell, CellRange, SheetGrid, TableExtraction, UnifiedGrid
from roster_merge.tables.workbook import WorkbookAdapter

__all__ = [
    "CellAccessor",
    "HeaderClassifier",
    "TableDetector",
    "TableMerger",
    "WorkbookAdapter",
    "FieldGroup",
    "FIELD_ORDER",
    "DEFAULT_HEADER_PHRASES",
    "load_header_phrases",
    "Cell",
    "CellRange",
    "SheetGrid",
    "TableExtraction",
    "UnifiedGrid",
]
