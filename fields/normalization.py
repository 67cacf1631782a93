"""
Cell value normalization for imported stock tables.

Spreadsheet and CSV cells arrive as ints, floats (openpyxl), NaN (pandas),
or free text such as "18,000", "-" or "12 boxes". The helpers here turn them
into plain integers/strings without ever raising:

- parse_quantity(): Qty cell -> int, 0 meaning "derive from box"
- to_quantity():    same, lifted into the tagged Quantity value
- parse_leading_int(): integer prefix of a Box cell ("12 boxes" -> 12)
- to_text():        Item/Lot/ERP cell -> trimmed string
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional

import pandas as pd

from config import QUANTITY_PARSE_FALLBACK, QUANTITY_SENTINEL_TEXT
from domain.quantity import UNSET, Known, Quantity

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _is_missing(value: Any) -> bool:
    """True for None and pandas/numpy missing markers (NaN, NA, NaT)."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def _to_number(value: Any) -> Optional[float]:
    """Convert int/float (or numeric-like strings with thousands commas) to float."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)

    s = str(value).strip().replace(",", "")
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        return None


def parse_quantity(raw: Any) -> int:
    """
    Parse a Qty cell into a non-negative integer.

    Missing, blank and "-" cells return 0 (the caller derives the count from
    the box column). Anything that is not a finite, non-negative number
    returns 1. Fractions are rounded up.
    """
    if _is_missing(raw):
        return 0
    if isinstance(raw, str) and raw.strip() in ("", QUANTITY_SENTINEL_TEXT):
        return 0

    v = _to_number(raw)
    if v is None or not math.isfinite(v) or v < 0:
        return QUANTITY_PARSE_FALLBACK
    return int(math.ceil(v))


def to_quantity(raw: Any) -> Quantity:
    n = parse_quantity(raw)
    return UNSET if n == 0 else Known(n)


def parse_leading_int(value: Any) -> Optional[int]:
    """Integer prefix of a cell: 7 -> 7, "12 boxes" -> 12, 3.9 -> 3, "abc" -> None."""
    if _is_missing(value) or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        return int(value)

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def to_text(value: Any) -> str:
    if _is_missing(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def is_blank(value: Any) -> bool:
    return to_text(value) == ""
