"""
TableDetector: find every roster table on a sheet.

A header row is any row with at least one cell naming a field group. Each
header row anchors its own table; data rows are read directly below it
until the first row whose group columns are all empty. Scanning resumes on
the row after the header, so rows already consumed as data are still
examined for further headers, and stacked header rows each produce their
own (possibly empty) table.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from roster_merge.logger import get_logger
from roster_merge.tables.cells import CellAccessor
from roster_merge.tables.classifier import HeaderClassifier
from roster_merge.tables.config import FIELD_ORDER, FieldGroup
from roster_merge.tables.models import CellRange, SheetGrid, TableExtraction

logger = get_logger(__name__)


class TableDetector:
    """Stateless per-sheet detector; one instance can scan any number of sheets."""

    def __init__(self, classifier: Optional[HeaderClassifier] = None):
        self._classifier = classifier or HeaderClassifier()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def detect(self, sheet: SheetGrid) -> List[TableExtraction]:
        """Return the tables found on *sheet*; a sheet that cannot be scanned yields ``[]``."""
        if sheet.bounds is None:
            logger.debug("Sheet %r has no used range, skipping", sheet.name)
            return []
        try:
            tables = self._scan(sheet, sheet.bounds)
        except Exception as exc:
            logger.warning("Failed to scan sheet %r: %s", sheet.name, exc, exc_info=True)
            return []
        logger.info(
            "Sheet %r: %d table(s), %d data row(s)",
            sheet.name, len(tables), sum(len(t.rows) for t in tables),
        )
        return tables

    def is_header_row(self, sheet: SheetGrid, row: int, bounds: CellRange) -> bool:
        return any(
            self._classifier.is_header_text(CellAccessor.as_trimmed_string(sheet.get(row, col)))
            for col in bounds.cols()
        )

    def assign_columns(self, sheet: SheetGrid, row: int, bounds: CellRange) -> Dict[FieldGroup, List[int]]:
        """Map each field group to the header columns (left to right) that name it."""
        columns: Dict[FieldGroup, List[int]] = {group: [] for group in FIELD_ORDER}
        for col in bounds.cols():
            text = CellAccessor.as_trimmed_string(sheet.get(row, col))
            for group in self._classifier.classify(text):
                columns[group].append(col)
        return columns

    def read_data_rows(
        self,
        sheet: SheetGrid,
        header_row: int,
        columns: Dict[FieldGroup, List[int]],
        last_row: int,
    ) -> List[List[Any]]:
        """Read rows below *header_row* until one whose group cells are all empty."""
        rows: List[List[Any]] = []
        for row in range(header_row + 1, last_row + 1):
            values, all_empty = self._read_row(sheet, row, columns)
            if all_empty:
                logger.debug("Sheet %r: table at row %d ends at blank row %d", sheet.name, header_row, row)
                break
            rows.append(values)
        return rows

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _scan(self, sheet: SheetGrid, bounds: CellRange) -> List[TableExtraction]:
        tables: List[TableExtraction] = []
        for row in bounds.rows():
            if not self.is_header_row(sheet, row, bounds):
                continue
            columns = self.assign_columns(sheet, row, bounds)
            if not any(columns.values()):
                continue
            data_rows = self.read_data_rows(sheet, row, columns, bounds.max_row)
            table = TableExtraction(
                sheet_name=sheet.name,
                header_row=row,
                columns=columns,
                rows=data_rows,
            )
            logger.debug(
                "Sheet %r: header row %d, counts=%s, rows=%d",
                sheet.name, row, {g.value: n for g, n in table.counts.items()}, len(data_rows),
            )
            tables.append(table)
        return tables

    @staticmethod
    def _read_row(
        sheet: SheetGrid,
        row: int,
        columns: Dict[FieldGroup, List[int]],
    ) -> Tuple[List[Any], bool]:
        values: List[Any] = []
        all_empty = True
        for group in FIELD_ORDER:
            for col in columns.get(group, []):
                cell = sheet.get(row, col)
                if not CellAccessor.is_empty(cell):
                    all_empty = False
                values.append(CellAccessor.normalize(cell))
        return values, all_empty
