"""
WorkbookAdapter: workbook payloads in, sheet grids out (and back).

Encapsulates:
- openpyxl loading of xlsx/xlsm payloads (cached formula values)
- xlrd loading of legacy xls payloads
- writing the combined grid as a single-sheet xlsx through pandas
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pandas as pd
from openpyxl import load_workbook

from roster_merge.errors import InputMissingError, SerializationError, WorkbookReadError
from roster_merge.logger import get_logger
from roster_merge.tables.config import OUTPUT_SHEET_NAME
from roster_merge.tables.models import Address, CellRange, SheetGrid, UnifiedGrid

logger = get_logger(__name__)

WorkbookSource = Union[str, Path, bytes, bytearray]

OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


class WorkbookAdapter:
    """Read workbooks into :class:`SheetGrid` objects and write a :class:`UnifiedGrid`."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def load(self, source: WorkbookSource) -> List[SheetGrid]:
        """Return one grid per worksheet, in workbook order."""
        data = self.read_bytes(source)
        if data.startswith(OLE2_SIGNATURE):
            grids = self._load_xls(data)
            backend = "xlrd"
        else:
            grids = self._load_xlsx(data)
            backend = "openpyxl"
        logger.info("Loaded %d sheet(s) via %s", len(grids), backend)
        return grids

    def dump(self, grid: UnifiedGrid, sheet_name: str = OUTPUT_SHEET_NAME) -> bytes:
        """Encode *grid* as an xlsx workbook holding a single sheet."""
        buffer = BytesIO()
        try:
            df = grid.to_dataframe()
            with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
                df.to_excel(writer, sheet_name=sheet_name, index=False)
                _keep_text_literal(writer.sheets[sheet_name])
        except Exception as exc:
            raise SerializationError(f"Failed to write combined workbook: {exc}") from exc
        return buffer.getvalue()

    @staticmethod
    def read_bytes(source: WorkbookSource) -> bytes:
        if source is None:
            raise InputMissingError("No input workbook supplied")
        if isinstance(source, (bytes, bytearray)):
            if not source:
                raise InputMissingError("Input workbook is empty")
            return bytes(source)
        path = Path(source).expanduser()
        if not path.is_file():
            raise InputMissingError(f"Input file not found: {source}")
        return path.read_bytes()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _load_xlsx(data: bytes) -> List[SheetGrid]:
        try:
            wb = load_workbook(BytesIO(data), read_only=False, data_only=True)
        except Exception as exc:
            raise WorkbookReadError(f"Unable to open workbook: {exc}") from exc
        try:
            grids: List[SheetGrid] = []
            for ws in wb.worksheets:
                # iter_rows() materialises cells, so read the used range first
                used = CellRange(ws.min_row, ws.min_column, ws.max_row, ws.max_column)
                cells: Dict[Address, Any] = {}
                for row in ws.iter_rows(
                    min_row=used.min_row, max_row=used.max_row,
                    min_col=used.min_col, max_col=used.max_col,
                ):
                    for cell in row:
                        if cell.value is None:
                            continue
                        cells[(cell.row, cell.column)] = cell.value
                bounds: Optional[CellRange] = used if cells else None
                grids.append(SheetGrid(name=ws.title, cells=cells, bounds=bounds))
            return grids
        finally:
            try:
                wb.close()
            except Exception:
                pass

    @staticmethod
    def _load_xls(data: bytes) -> List[SheetGrid]:
        import xlrd

        try:
            book = xlrd.open_workbook(file_contents=data)
        except Exception as exc:
            raise WorkbookReadError(f"Unable to open xls workbook: {exc}") from exc
        grids: List[SheetGrid] = []
        for sh in book.sheets():
            cells: Dict[Address, Any] = {}
            for r in range(sh.nrows):
                for c in range(sh.ncols):
                    value = _xls_cell_value(sh.cell(r, c), book.datemode)
                    if value is None:
                        continue
                    cells[(r + 1, c + 1)] = value
            bounds = CellRange(1, 1, sh.nrows, sh.ncols) if cells else None
            grids.append(SheetGrid(name=sh.name, cells=cells, bounds=bounds))
        return grids


def _xls_cell_value(cell: Any, datemode: int) -> Any:
    import xlrd

    ctype = cell.ctype
    if ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK, xlrd.XL_CELL_ERROR):
        return None
    if ctype == xlrd.XL_CELL_DATE:
        try:
            return xlrd.xldate.xldate_as_datetime(cell.value, datemode)
        except Exception:
            return cell.value
    if ctype == xlrd.XL_CELL_BOOLEAN:
        return bool(cell.value)
    return cell.value


def _keep_text_literal(ws: Any) -> None:
    """Store strings that start with "=" as text, not as formulas."""
    for row in ws.iter_rows(min_row=2):
        for cell in row:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"
