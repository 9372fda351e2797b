"""
Data structures shared by the detector, the merger and the workbook adapter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

import pandas as pd

from roster_merge.tables.config import FIELD_ORDER, FieldGroup

Address = Tuple[int, int]


@dataclass(frozen=True)
class Cell:
    """Structured cell: raw value plus an optional display string."""

    value: Any = None
    display: Optional[str] = None


@dataclass(frozen=True)
class CellRange:
    """Inclusive, 1-based rectangular bound of a sheet's used cells."""

    min_row: int
    min_col: int
    max_row: int
    max_col: int

    def rows(self) -> range:
        return range(self.min_row, self.max_row + 1)

    def cols(self) -> range:
        return range(self.min_col, self.max_col + 1)


@dataclass
class SheetGrid:
    """
    Sparse, read-only view of one worksheet.

    ``cells`` maps ``(row, col)`` to either a raw value or a :class:`Cell`.
    ``bounds`` is ``None`` for an empty sheet.
    """

    name: str
    cells: Dict[Address, Any] = field(default_factory=dict)
    bounds: Optional[CellRange] = None

    def get(self, row: int, col: int) -> Any:
        return self.cells.get((row, col))

    @classmethod
    def from_rows(
        cls,
        name: str,
        rows: List[List[Any]],
        first_row: int = 1,
        first_col: int = 1,
    ) -> "SheetGrid":
        """Build a grid from a dense list of rows; ``None`` cells are left out."""
        cells: Dict[Address, Any] = {}
        for r_off, row in enumerate(rows):
            for c_off, value in enumerate(row or []):
                if value is None:
                    continue
                cells[(first_row + r_off, first_col + c_off)] = value
        if not rows or not any(rows):
            return cls(name=name, cells=cells, bounds=None)
        width = max(len(row or []) for row in rows)
        bounds = CellRange(first_row, first_col, first_row + len(rows) - 1, first_col + width - 1)
        return cls(name=name, cells=cells, bounds=bounds)


@dataclass
class TableExtraction:
    """One detected table: header position, group columns and flat data rows."""

    sheet_name: str
    header_row: int
    columns: Dict[FieldGroup, List[int]]
    rows: List[List[Any]] = field(default_factory=list)

    @property
    def counts(self) -> Dict[FieldGroup, int]:
        return {group: len(self.columns.get(group, [])) for group in FIELD_ORDER}

    @property
    def width(self) -> int:
        return sum(self.counts.values())

    def split_row(self, row: List[Any]) -> Iterator[Tuple[FieldGroup, List[Any]]]:
        """Re-slice a flat data row into its per-group parts."""
        idx = 0
        for group in FIELD_ORDER:
            size = len(self.columns.get(group, []))
            yield group, list(row[idx:idx + size])
            idx += size


@dataclass
class UnifiedGrid:
    """Merged output: synthesized header plus padded rows."""

    header: List[str]
    maxima: Mapping[FieldGroup, int]
    rows: List[List[Any]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def as_rows(self) -> List[List[Any]]:
        return [list(self.header)] + [list(r) for r in self.rows]

    def to_dataframe(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.header, dtype=object)
