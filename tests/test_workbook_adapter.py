from datetime import datetime
from io import BytesIO

import pytest
from openpyxl import Workbook, load_workbook

from roster_merge.errors import InputMissingError, WorkbookReadError
from roster_merge.tables import workbook as wb_mod
from roster_merge.tables.config import FieldGroup
from roster_merge.tables.models import CellRange, UnifiedGrid
from roster_merge.tables.workbook import WorkbookAdapter


def test_load_xlsx_bytes_keeps_sheet_order_and_values(make_workbook):
    data = make_workbook({
        "B": [["Nom"], ["Benali"]],
        "A": [["Situation"], ["Actif"]],
    })

    grids = WorkbookAdapter().load(data)

    assert [g.name for g in grids] == ["B", "A"]
    assert grids[0].get(1, 1) == "Nom"
    assert grids[0].get(2, 1) == "Benali"
    assert grids[0].bounds == CellRange(1, 1, 2, 1)


def test_load_path_and_offset_range(tmp_path):
    wb = Workbook()
    ws = wb.active
    ws.title = "Offset"
    ws["C3"] = "Nom"
    ws["D5"] = 12
    path = tmp_path / "offset.xlsx"
    wb.save(path)

    grids = WorkbookAdapter().load(str(path))

    assert grids[0].bounds == CellRange(3, 3, 5, 4)
    assert grids[0].get(5, 4) == 12
    assert grids[0].get(1, 1) is None


def test_empty_sheet_has_no_bounds(make_workbook):
    grids = WorkbookAdapter().load(make_workbook({"Vide": []}))
    assert grids[0].bounds is None
    assert grids[0].cells == {}


def test_load_missing_inputs():
    adapter = WorkbookAdapter()
    with pytest.raises(InputMissingError):
        adapter.load(None)
    with pytest.raises(InputMissingError):
        adapter.load(b"")
    with pytest.raises(InputMissingError):
        adapter.load("/no/such/roster.xlsx")


def test_load_garbage_bytes_raises_read_error():
    with pytest.raises(WorkbookReadError):
        WorkbookAdapter().load(b"this is not a workbook")


def test_dump_writes_single_combined_sheet():
    grid = UnifiedGrid(
        header=["registration_1", "name_1", "name_2"],
        maxima={FieldGroup.REGISTRATION: 1, FieldGroup.NAME: 2},
        rows=[[1001, "Benali", None], [None, "Ziani", "Karim"]],
    )

    content = WorkbookAdapter().dump(grid)

    wb = load_workbook(BytesIO(content))
    assert wb.sheetnames == ["Combined"]
    rows = list(wb["Combined"].iter_rows(values_only=True))
    assert rows == [
        ("registration_1", "name_1", "name_2"),
        (1001, "Benali", None),
        (None, "Ziani", "Karim"),
    ]


def test_dump_custom_sheet_name():
    grid = UnifiedGrid(header=["status_1"], maxima={FieldGroup.STATUS: 1}, rows=[])
    wb = load_workbook(BytesIO(WorkbookAdapter().dump(grid, sheet_name="Fusion")))
    assert wb.sheetnames == ["Fusion"]
    assert list(wb["Fusion"].iter_rows(values_only=True)) == [("status_1",)]


def test_dump_keeps_equals_prefixed_text_as_text():
    grid = UnifiedGrid(
        header=["name_1", "status_1"],
        maxima={FieldGroup.NAME: 1, FieldGroup.STATUS: 1},
        rows=[["=Benali", "=SUM(A1:A3)"], ["Ziani", "Actif"]],
    )

    ws = load_workbook(BytesIO(WorkbookAdapter().dump(grid)))["Combined"]

    assert ws["A2"].value == "=Benali"
    assert ws["A2"].data_type == "s"
    assert ws["B2"].value == "=SUM(A1:A3)"
    assert ws["B2"].data_type == "s"
    assert ws["A3"].value == "Ziani"

    # reading back through the adapter sees the literal text, not an empty formula result
    sheet = WorkbookAdapter().load(WorkbookAdapter().dump(grid))[0]
    assert sheet.get(2, 1) == "=Benali"


class DummyXlsCell:
    def __init__(self, ctype, value):
        self.ctype = ctype
        self.value = value


class DummyXlsSheet:
    name = "Feuil1"
    nrows = 3
    ncols = 2

    def cell(self, r, c):
        import xlrd

        grid = [
            [DummyXlsCell(xlrd.XL_CELL_TEXT, "Nom"), DummyXlsCell(xlrd.XL_CELL_TEXT, "Date")],
            [DummyXlsCell(xlrd.XL_CELL_TEXT, "Benali"), DummyXlsCell(xlrd.XL_CELL_DATE, 45292.0)],
            [DummyXlsCell(xlrd.XL_CELL_EMPTY, ""), DummyXlsCell(xlrd.XL_CELL_ERROR, 42)],
        ]
        return grid[r][c]


class DummyXlsBook:
    datemode = 0

    def sheets(self):
        return [DummyXlsSheet()]


def test_xls_payload_uses_xlrd(monkeypatch):
    import xlrd

    called = {"xlrd": False}

    def fake_open_workbook(file_contents=None, **kwargs):
        called["xlrd"] = True
        return DummyXlsBook()

    def fake_load_workbook(*args, **kwargs):
        raise AssertionError("openpyxl should not be called for .xls")

    monkeypatch.setattr(xlrd, "open_workbook", fake_open_workbook)
    monkeypatch.setattr(wb_mod, "load_workbook", fake_load_workbook)

    grids = WorkbookAdapter().load(wb_mod.OLE2_SIGNATURE + b"\x00" * 64)

    assert called["xlrd"] is True
    sheet = grids[0]
    assert sheet.name == "Feuil1"
    assert sheet.bounds == CellRange(1, 1, 3, 2)
    assert sheet.get(2, 1) == "Benali"
    assert sheet.get(2, 2) == datetime(2024, 1, 1)
    assert sheet.get(3, 1) is None
    assert sheet.get(3, 2) is None
