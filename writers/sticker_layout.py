"""
Sticker sheet layout for printing.

Records are laid out on A4 sticker paper, 3 columns x 8 rows = 24 stickers
per page. Every page is padded to a full grid with blank slots. A sticker
shows its running number, the QR payload and four label lines (model, lot,
ERP, quantity). Drawing the QR and the page itself is left to the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from config import QUANTITY_LABEL, STICKER_COLUMNS, STICKERS_PER_PAGE
from domain.records import StockRecord
from extraction.importer import is_placeholder
from qr.codec import encode


@dataclass(frozen=True)
class StickerSlot:
    index: Optional[int] = None
    record: Optional[StockRecord] = None
    payload: Optional[str] = None
    lines: tuple[str, ...] = ()

    @property
    def is_blank(self) -> bool:
        return self.record is None


@dataclass
class StickerPage:
    number: int
    first_index: int
    last_index: int
    slots: List[StickerSlot] = field(default_factory=list)

    def grid(self, columns: int = STICKER_COLUMNS) -> List[List[StickerSlot]]:
        return [self.slots[i:i + columns] for i in range(0, len(self.slots), columns)]


def label_lines(record: StockRecord) -> tuple[str, ...]:
    return (record.model_name, record.lot, record.erp, f"{QUANTITY_LABEL}: {record.quantity}")


def _slot(index: int, record: StockRecord) -> StickerSlot:
    if is_placeholder(record):
        return StickerSlot()
    return StickerSlot(index=index, record=record, payload=encode(record), lines=label_lines(record))


def paginate(records: Sequence[StockRecord], per_page: int = STICKERS_PER_PAGE) -> List[StickerPage]:
    """
    Split records into printable pages.

    The running number is the record's position in the full list, so a blank
    record in the middle keeps its number but prints as an empty sticker.
    When no record carries any data a single blank page is returned.
    """
    if not any(not is_placeholder(r) for r in records):
        return [StickerPage(number=1, first_index=0, last_index=0, slots=[StickerSlot()] * per_page)]

    pages: List[StickerPage] = []
    for start in range(0, len(records), per_page):
        chunk = records[start:start + per_page]
        slots = [_slot(start + offset + 1, r) for offset, r in enumerate(chunk)]
        slots.extend([StickerSlot()] * (per_page - len(slots)))
        pages.append(
            StickerPage(
                number=len(pages) + 1,
                first_index=start + 1,
                last_index=min(start + per_page, len(records)),
                slots=slots,
            )
        )
    return pages
