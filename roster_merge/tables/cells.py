"""
CellAccessor: value and text views of a single grid cell.

A grid cell is either a raw value or a structured object exposing ``.value``
(our :class:`~roster_merge.tables.models.Cell`, or an openpyxl cell). The
shape is resolved once here; the rest of the pipeline only sees raw values.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

import pandas as pd

from roster_merge.tables.models import Cell

# Raw values that may carry an unrelated .value attribute (pd.Timestamp)
_PLAIN_TYPES = (str, bytes, bool, int, float, date, timedelta)


class CellAccessor:
    """Stateless helper; every input degrades to ``None`` / ``""`` instead of raising."""

    @staticmethod
    def _is_null(value: Any) -> bool:
        if value is None:
            return True
        try:
            return bool(pd.isna(value))
        except (TypeError, ValueError):
            # array-likes and objects pandas cannot judge
            return False

    @staticmethod
    def normalize(cell: Any) -> Any:
        """Return the raw value behind *cell*, or ``None`` when absent."""
        if isinstance(cell, Cell):
            value = cell.value
        elif not isinstance(cell, _PLAIN_TYPES) and hasattr(cell, "value"):
            value = getattr(cell, "value", None)
        else:
            value = cell
        if CellAccessor._is_null(value):
            return None
        return value

    @staticmethod
    def as_trimmed_string(cell: Any) -> str:
        """Convert *cell* to a stripped string; ``""`` for empty cells."""
        value = CellAccessor.normalize(cell)
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        try:
            return str(value).strip()
        except Exception:
            return ""

    @staticmethod
    def is_empty(cell: Any) -> bool:
        return CellAccessor.as_trimmed_string(cell) == ""
