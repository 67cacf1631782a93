"""
Stock table import: uploaded Excel/CSV bytes -> list of StockRecord.

read (Excel or CSV) -> adapt_rows -> expand_rows -> placeholder if empty
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from config import CSV_EXTENSIONS, EXCEL_EXTENSIONS
from domain.records import StockRecord
from input_readers import decode_csv_bytes, read_csv_text, read_excel
from utils.logger import get_logger

from .box_expansion import expand_rows
from .to_canonical import adapt_rows

logger = get_logger("importer")


def placeholder_record() -> StockRecord:
    """The single empty row shown when an import produced nothing usable."""
    return StockRecord(model_name="", lot="", quantity=1, erp="")


def is_placeholder(record: StockRecord) -> bool:
    return not (record.model_name or record.lot or record.erp)


def import_stock_records(filename: str, content: bytes) -> List[StockRecord]:
    """
    Import an uploaded stock table and expand its box column.

    Raises:
        ValueError: If the extension is not supported or the workbook can't be read
    """
    suffix = Path(filename).suffix.lower()

    if suffix in EXCEL_EXTENSIONS:
        raw_rows = read_excel(content)
    elif suffix in CSV_EXTENSIONS:
        raw_rows = read_csv_text(decode_csv_bytes(content))
    else:
        supported = ", ".join(EXCEL_EXTENSIONS + CSV_EXTENSIONS)
        raise ValueError(f"Unsupported file type '{suffix or filename}'. Use one of: {supported}")

    records = expand_rows(adapt_rows(raw_rows))

    logger.info("stock table imported", file=filename, rows=len(raw_rows), records=len(records))

    if not records:
        logger.warning("import produced no records", file=filename)
        return [placeholder_record()]
    return records
