"""
Raw table rows into the CanonicalRow format.

Both readers (Excel via openpyxl, CSV via the quoted tokenizer) return raw
rows keyed by whatever headers the warehouse sheet used. This module maps
them onto CanonicalRow using the configured header aliases:

- Item -> model_name
- Lot  -> lot
- Qty  -> quantity (tagged; blank/"-"/0 -> UNSET)
- Box / box / BOX -> box (raw cell, expanded later)
- ERP  -> erp

A row is never rejected: missing columns degrade to defaults.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

from config import BOX_HEADERS, ERP_HEADERS, ITEM_HEADERS, LOT_HEADERS, QTY_HEADERS
from domain.canonical import CanonicalRow, RawRow
from fields.normalization import is_blank, to_quantity, to_text


def _lookup(raw: RawRow, aliases: Sequence[str]) -> Any:
    """First non-blank cell under any alias; exact header match wins over case-insensitive."""
    for alias in aliases:
        if alias in raw and not is_blank(raw[alias]):
            return raw[alias]

    folded = {}
    for header, value in raw.items():
        folded.setdefault(str(header).strip().lower(), []).append(value)

    for alias in aliases:
        for value in folded.get(alias.lower(), []):
            if not is_blank(value):
                return value

    return None


def adapt_row(raw: RawRow, source_row: int | None = None) -> CanonicalRow:
    """Convert one raw row into a CanonicalRow."""
    box = _lookup(raw, BOX_HEADERS)
    if isinstance(box, str):
        box = box.strip()

    return CanonicalRow(
        model_name=to_text(_lookup(raw, ITEM_HEADERS)),
        lot=to_text(_lookup(raw, LOT_HEADERS)),
        quantity=to_quantity(_lookup(raw, QTY_HEADERS)),
        box=None if is_blank(box) else box,
        erp=to_text(_lookup(raw, ERP_HEADERS)),
        source_row=source_row,
    )


def adapt_rows(rows: Iterable[RawRow]) -> List[CanonicalRow]:
    """Adapt rows in order; source_row counts data rows from 1."""
    return [adapt_row(raw, idx) for idx, raw in enumerate(rows, start=1)]
