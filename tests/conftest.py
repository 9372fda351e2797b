"""
Pytest configuration and shared fixtures.
"""
import os
import sys
from io import BytesIO

import pytest
from openpyxl import Workbook

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from roster_merge.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Every test re-reads settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def make_workbook():
    """
    Build an xlsx payload from ``{sheet_name: [row, ...]}``.

    Rows are appended from A1; use ``None`` for blank cells.
    """
    def _make(sheets):
        wb = Workbook()
        wb.remove(wb.active)
        for name, rows in sheets.items():
            ws = wb.create_sheet(name)
            for row in rows:
                ws.append(list(row))
        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    return _make


@pytest.fixture
def two_sheet_rosters():
    """Sheet A: registration(1) + name(2); sheet B: name(1) + status(3)."""
    return {
        "Janvier": [
            ["N° Immatriculation", "Nom", "Prénom"],
            [1001, "Benali", "Ahmed"],
            [1002, "Haddad", "Sara"],
        ],
        "Fevrier": [
            ["Nom et Prénom", "Situation", "Situation familiale", "Situation 2"],
            ["Karim Ziani", "Actif", "Marié", "RAS"],
        ],
    }
