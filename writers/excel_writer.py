"""
Excel output for scan reports and imported sticker lists (openpyxl).

Both exports share write_rows_to_xlsx(); passing output_path=None returns the
workbook bytes (for a Streamlit download button) instead of writing a file.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from config import REPORT_SEQUENCE_HEADER, REPORT_SHEET_NAME, TOTALS_SHEET_NAME
from domain.records import GroupedTotal, ScanObservation, StockRecord

SCAN_HEADERS = [REPORT_SEQUENCE_HEADER, "model_name", "lot", "quantity"]
TOTALS_HEADERS = ["model_name", "lot", "total_quantity", "files"]
RECORD_HEADERS = [REPORT_SEQUENCE_HEADER, "model_name", "lot", "erp", "quantity"]


def _fill_sheet(ws: Worksheet, headers: Sequence[str], rows: Iterable[Dict[str, Any]]) -> None:
    ws.append(list(headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    widths = [len(str(h)) for h in headers]
    for row in rows:
        values = [row.get(h) for h in headers]
        ws.append(values)
        for idx, value in enumerate(values):
            if value is not None:
                widths[idx] = max(widths[idx], len(str(value)))

    for idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = min(width + 2, 60)


def _save(wb: Workbook, output_path: Path | None) -> Path | bytes:
    if output_path is None:
        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
    return output_path


def write_rows_to_xlsx(
    output_path: Path | None,
    sheet_name: str,
    headers: Sequence[str],
    rows: Iterable[Dict[str, Any]],
    extra_sheets: Dict[str, tuple[Sequence[str], Iterable[Dict[str, Any]]]] | None = None,
) -> Path | bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    _fill_sheet(ws, headers, rows)

    for name, (extra_headers, extra_rows) in (extra_sheets or {}).items():
        _fill_sheet(wb.create_sheet(name), extra_headers, extra_rows)

    return _save(wb, output_path)


def _scan_rows(observations: Sequence[ScanObservation]) -> List[Dict[str, Any]]:
    return [
        {
            REPORT_SEQUENCE_HEADER: idx,
            "model_name": obs.record.model_name,
            "lot": obs.record.lot,
            "quantity": obs.record.quantity,
        }
        for idx, obs in enumerate(observations, start=1)
    ]


def _total_rows(totals: Sequence[GroupedTotal]) -> List[Dict[str, Any]]:
    return [
        {
            "model_name": t.model_name,
            "lot": t.lot,
            "total_quantity": t.total_quantity,
            "files": ", ".join(t.files),
        }
        for t in totals
    ]


def write_scan_report(
    observations: Sequence[ScanObservation],
    output_path: Path | None = None,
    totals: Sequence[GroupedTotal] | None = None,
) -> Path | bytes:
    """Scanned list (sequence, model_name, lot, quantity), plus a totals sheet when given."""
    extra = {TOTALS_SHEET_NAME: (TOTALS_HEADERS, _total_rows(totals))} if totals is not None else None
    return write_rows_to_xlsx(output_path, REPORT_SHEET_NAME, SCAN_HEADERS, _scan_rows(observations), extra)


def write_stock_records(records: Sequence[StockRecord], output_path: Path | None = None) -> Path | bytes:
    """Expanded import result, one row per sticker."""
    rows = [
        {
            REPORT_SEQUENCE_HEADER: idx,
            "model_name": r.model_name,
            "lot": r.lot,
            "erp": r.erp,
            "quantity": r.quantity,
        }
        for idx, r in enumerate(records, start=1)
    ]
    return write_rows_to_xlsx(output_path, "Records", RECORD_HEADERS, rows)
