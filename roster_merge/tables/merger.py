"""
TableMerger: combine table extractions into one padded grid.

Tables found on different sheets (or on the same sheet) may assign a
different number of columns to each field group. The merged layout gives
every group the widest count seen anywhere, and right-pads each table's
group slice with ``None`` up to that count.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Sequence

from roster_merge.errors import NoTablesFoundError
from roster_merge.logger import get_logger
from roster_merge.tables.config import FIELD_ORDER, FieldGroup, header_label
from roster_merge.tables.models import TableExtraction, UnifiedGrid

logger = get_logger(__name__)


class TableMerger:

    def merge(self, extractions: Sequence[TableExtraction]) -> UnifiedGrid:
        if not extractions:
            raise NoTablesFoundError()

        maxima = self.max_counts(extractions)
        header = self.build_header(maxima)
        rows: List[List[Any]] = []
        for extraction in extractions:
            for row in extraction.rows:
                rows.append(self.pad_row(extraction, row, maxima))

        logger.info(
            "Merged %d table(s) into %d row(s) x %d column(s)",
            len(extractions), len(rows), len(header),
        )
        return UnifiedGrid(header=header, maxima=maxima, rows=rows)

    @staticmethod
    def max_counts(extractions: Iterable[TableExtraction]) -> Dict[FieldGroup, int]:
        maxima = {group: 0 for group in FIELD_ORDER}
        for extraction in extractions:
            for group, count in extraction.counts.items():
                if count > maxima[group]:
                    maxima[group] = count
        return maxima

    @staticmethod
    def build_header(maxima: Dict[FieldGroup, int]) -> List[str]:
        return [
            header_label(group, i)
            for group in FIELD_ORDER
            for i in range(1, maxima.get(group, 0) + 1)
        ]

    @staticmethod
    def pad_row(extraction: TableExtraction, row: List[Any], maxima: Dict[FieldGroup, int]) -> List[Any]:
        out: List[Any] = []
        for group, part in extraction.split_row(row):
            size = maxima.get(group, 0)
            out.extend(part)
            out.extend([None] * (size - len(part)))
        return out
