"""Tests for Excel/CSV stock table import."""

from io import BytesIO

import pytest
from openpyxl import Workbook

from domain.records import StockRecord
from extraction.importer import import_stock_records, is_placeholder, placeholder_record
from input_readers.excel import read_excel

TABLE = [
    ["Item", "Lot", "Qty", "Box", "ERP"],
    ["CMC-0603", "L2407", "18,000", "2", "E-1"],
    ["CMC-1206", "L2408", "-", "1500", "E-2"],
    ["CMC-2010", "L2409", 500, "1+200", None],
]

EXPECTED = [
    StockRecord("CMC-0603", "L2407", 18000, "E-1"),
    StockRecord("CMC-0603", "L2407", 18000, "E-1"),
    StockRecord("CMC-1206", "L2408", 1500, "E-2"),
    StockRecord("CMC-2010", "L2409", 500),
    StockRecord("CMC-2010", "L2409", 200),
]


def _xlsx_bytes(rows, extra_blank_row=False):
    wb = Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    if extra_blank_row:
        ws.append([None] * len(rows[0]))
        ws.append(["CMC-9999", "L1", 1, None, None])
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def _csv_bytes(rows):
    def cell(value):
        if value is None:
            return ""
        text = str(value)
        if "," in text or '"' in text:
            return '"' + text.replace('"', '""') + '"'
        return text

    return "\r\n".join(",".join(cell(v) for v in row) for row in rows).encode("utf-8")


def test_import_excel():
    records = import_stock_records("stock.xlsx", _xlsx_bytes(TABLE))
    assert records == EXPECTED
    assert [r.erp for r in records] == ["E-1", "E-1", "E-2", "", ""]


def test_import_csv_matches_excel():
    assert import_stock_records("stock.csv", _csv_bytes(TABLE)) == EXPECTED


def test_extension_is_case_insensitive():
    assert import_stock_records("STOCK.CSV", _csv_bytes(TABLE)) == EXPECTED


def test_excel_reader_skips_empty_rows():
    rows = read_excel(_xlsx_bytes(TABLE, extra_blank_row=True))
    assert len(rows) == 4
    assert rows[-1]["Item"] == "CMC-9999"


def test_excel_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_excel(tmp_path / "missing.xlsx")


def test_excel_reader_reads_path(tmp_path):
    path = tmp_path / "stock.xlsx"
    path.write_bytes(_xlsx_bytes(TABLE))
    assert len(read_excel(path)) == 3


def test_corrupt_workbook_raises_value_error():
    with pytest.raises(ValueError):
        import_stock_records("stock.xlsx", b"not a workbook")


def test_unsupported_extension():
    with pytest.raises(ValueError, match="Unsupported file type"):
        import_stock_records("stock.pdf", b"")


def test_empty_import_yields_placeholder():
    records = import_stock_records("empty.csv", b"Item,Lot,Qty,Box\r\n")
    assert records == [placeholder_record()]
    assert is_placeholder(records[0])
    assert records[0].quantity == 1
