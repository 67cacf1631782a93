"""
Box column expansion.

One spreadsheet row describes a stack of identical boxes; every box needs its
own QR sticker. The Box cell uses a handful of warehouse conventions, checked
in this order (first match wins):

1. Box empty                            -> 1 record, Qty as-is (UNSET -> 0)
2. Qty UNSET and Box a positive integer -> 1 record, quantity = Box
3. Box "<count>+<remainder>"            -> <count> records at Qty, then
                                           1 record at <remainder>
4. Box a positive integer N             -> N records at Qty
5. Anything else ("0", "abc", "N/A")    -> 1 record, Box ignored

Integers are read as a leading integer prefix, so "12 boxes" counts as 12.
Because rule 2 runs first, a "10+2000" box on a row without Qty yields a
single record of 10.
"""

from __future__ import annotations

from typing import Iterable, List

from domain.canonical import CanonicalRow
from domain.quantity import UNSET, is_unset, resolve
from domain.records import StockRecord
from fields.normalization import parse_leading_int, to_text


def _record(row: CanonicalRow, quantity: int) -> StockRecord:
    return StockRecord(
        model_name=row.get("model_name", ""),
        lot=row.get("lot", ""),
        quantity=quantity,
        erp=row.get("erp", ""),
    )


def _split_count_plus_remainder(box_text: str) -> tuple[int, int] | None:
    """
    Parse "10+2000" into (10, 2000); None unless exactly one '+' with integers
    on both sides. A negative count means no full boxes ("-3+5" -> (0, 5)).
    """
    if "+" not in box_text:
        return None

    parts = box_text.split("+")
    if len(parts) != 2:
        return None

    count = parse_leading_int(parts[0].strip())
    remainder = parse_leading_int(parts[1].strip())
    if count is None or remainder is None or remainder < 0:
        return None
    return max(count, 0), remainder


def expand(row: CanonicalRow) -> List[StockRecord]:
    """Expand one canonical row into one or more stock records."""
    quantity = row.get("quantity", UNSET)
    base_quantity = resolve(quantity)
    box_text = to_text(row.get("box"))

    # 1. no box value
    if not box_text:
        return [_record(row, base_quantity)]

    box_int = parse_leading_int(box_text)

    # 2. Qty left blank: the box cell carries the real quantity
    if is_unset(quantity) and box_int is not None and box_int > 0:
        return [_record(row, box_int)]

    # 3. full boxes plus one partial box
    split = _split_count_plus_remainder(box_text)
    if split is not None:
        count, remainder = split
        records = [_record(row, base_quantity) for _ in range(count)]
        records.append(_record(row, remainder))
        return records

    # 4. plain box count
    if box_int is not None and box_int > 0:
        return [_record(row, base_quantity) for _ in range(box_int)]

    # 5. unrecognised box text
    return [_record(row, base_quantity)]


def expand_rows(rows: Iterable[CanonicalRow]) -> List[StockRecord]:
    records: List[StockRecord] = []
    for row in rows:
        records.extend(expand(row))
    return records
