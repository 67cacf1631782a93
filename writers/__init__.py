from .archive import archive_filename, build_qr_archive
from .excel_writer import write_rows_to_xlsx, write_scan_report, write_stock_records
from .sticker_layout import StickerPage, StickerSlot, paginate

__all__ = [
    "StickerPage",
    "StickerSlot",
    "archive_filename",
    "build_qr_archive",
    "paginate",
    "write_rows_to_xlsx",
    "write_scan_report",
    "write_stock_records",
]
