"""
Consolidation pipeline
======================

workbook -> per-sheet table detection -> merge -> single-sheet workbook.

Every call builds its own adapter, detector and merger, so calls share no
state and may run concurrently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from roster_merge.errors import InputMissingError
from roster_merge.logger import get_logger
from roster_merge.tables.classifier import HeaderClassifier
from roster_merge.tables.config import OUTPUT_SHEET_NAME, PhraseTable
from roster_merge.tables.detector import TableDetector
from roster_merge.tables.merger import TableMerger
from roster_merge.tables.models import TableExtraction, UnifiedGrid
from roster_merge.tables.workbook import WorkbookAdapter, WorkbookSource

logger = get_logger(__name__)


@dataclass
class ConsolidationResult:
    grid: UnifiedGrid
    content: bytes
    table_count: int
    sheets: List[str] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return self.grid.row_count


def detect_tables(
    source: WorkbookSource,
    phrases: Optional[PhraseTable] = None,
) -> List[TableExtraction]:
    """Load *source* and return the tables of every sheet, in sheet order."""
    adapter = WorkbookAdapter()
    detector = TableDetector(HeaderClassifier(phrases))
    extractions: List[TableExtraction] = []
    for sheet in adapter.load(source):
        extractions.extend(detector.detect(sheet))
    return extractions


def consolidate(
    source: WorkbookSource,
    phrases: Optional[PhraseTable] = None,
    sheet_name: str = OUTPUT_SHEET_NAME,
) -> ConsolidationResult:
    """
    Run the whole pipeline on a workbook path or payload.

    Raises:
        InputMissingError: no payload / missing path
        WorkbookReadError: payload is not a workbook
        NoTablesFoundError: no header row on any sheet
        SerializationError: output could not be encoded
    """
    extractions = detect_tables(source, phrases)
    grid = TableMerger().merge(extractions)
    content = WorkbookAdapter().dump(grid, sheet_name=sheet_name)

    sheets: List[str] = []
    for extraction in extractions:
        if extraction.sheet_name not in sheets:
            sheets.append(extraction.sheet_name)
    logger.info(
        "Consolidated %d table(s) from %d sheet(s) into %d row(s)",
        len(extractions), len(sheets), grid.row_count,
    )
    return ConsolidationResult(grid=grid, content=content, table_count=len(extractions), sheets=sheets)


def extract_tables_from_workbook(data: bytes, phrases: Optional[PhraseTable] = None) -> bytes:
    """Bytes in, combined workbook bytes out."""
    return consolidate(data, phrases=phrases).content


def consolidate_file(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    phrases: Optional[PhraseTable] = None,
    sheet_name: str = OUTPUT_SHEET_NAME,
) -> ConsolidationResult:
    path = Path(input_path).expanduser()
    if not path.is_file():
        raise InputMissingError(f"Input file not found: {input_path}")
    result = consolidate(path, phrases=phrases, sheet_name=sheet_name)
    out = Path(output_path).expanduser()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_bytes(result.content)
    logger.info("Wrote %s (%d bytes)", out, len(result.content))
    return result
