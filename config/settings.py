"""
Central configuration for imports, scanning and print/export layout.

This module defines:
- Header aliases recognised on the first row of an imported sheet or CSV.
- Encodings tried (in order) when decoding uploaded CSV bytes.
- Supported upload extensions for stock tables and scan images.
- Sticker sheet geometry (A4, 3 x 8 stickers) and report/archive naming.
- Logging overrides read from the environment (via dotenv).

All values are constants and should be imported where needed.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Header aliases, tried in order. Exact match first, then case-insensitive.
ITEM_HEADERS = ("Item",)
LOT_HEADERS = ("Lot",)
QTY_HEADERS = ("Qty",)
BOX_HEADERS = ("Box", "box", "BOX")
ERP_HEADERS = ("ERP",)

QUANTITY_SENTINEL_TEXT = "-"
QUANTITY_PARSE_FALLBACK = 1

CSV_ENCODINGS = ("utf-8-sig", "cp874", "latin-1")

EXCEL_EXTENSIONS = (".xlsx", ".xlsm")
CSV_EXTENSIONS = (".csv",)
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp")

STICKER_COLUMNS = 3
STICKER_ROWS = 8
STICKERS_PER_PAGE = STICKER_COLUMNS * STICKER_ROWS
QUANTITY_LABEL = "จำนวน"

ARCHIVE_IMAGE_SUFFIX = ".png"
ARCHIVE_NAME_PATTERN = r"[^A-Za-z0-9_-]"

REPORT_SHEET_NAME = "Scanned"
TOTALS_SHEET_NAME = "Totals"
REPORT_SEQUENCE_HEADER = "ลำดับ"
REPORT_FILE_NAME = "scanned_qrcodes.xlsx"
STICKER_LIST_FILE_NAME = "stock_records.xlsx"

LOG_LEVEL = os.getenv("STOCK_QR_LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("STOCK_QR_LOG_FILE", "")
