"""
QR payload codec.

Stickers carry a compact JSON object:

    {"model_name":"CMC-0603","lot":"L2407","quantity":500}

Older stickers were printed as `model|lot|quantity`; those are still accepted
when decoding but never produced.
"""

from __future__ import annotations

import json
import math
from typing import Any, Mapping, Optional

from domain.records import StockRecord

LEGACY_SEPARATOR = "|"


def encode(record: StockRecord) -> str:
    """Serialize a record into its QR payload text."""
    payload = {
        "model_name": record.model_name,
        "lot": record.lot,
        "quantity": int(record.quantity),
    }
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def _coerce_quantity(value: Any) -> Optional[int]:
    """Quantity from a payload field; None unless it is a non-negative whole number."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            value = float(s)
        except ValueError:
            return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer() or value < 0:
            return None
        return int(value)
    return None


def _coerce_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and math.isfinite(value):
        return str(int(value)) if value.is_integer() else str(value)
    return None


def _from_mapping(payload: Mapping[str, Any]) -> Optional[StockRecord]:
    model_name = _coerce_text(payload.get("model_name"))
    lot = _coerce_text(payload.get("lot"))
    quantity = _coerce_quantity(payload.get("quantity"))
    if model_name is None or lot is None or quantity is None:
        return None
    return StockRecord(model_name=model_name, lot=lot, quantity=quantity)


def _from_legacy(text: str) -> Optional[StockRecord]:
    parts = text.split(LEGACY_SEPARATOR)
    if len(parts) != 3:
        return None
    quantity = _coerce_quantity(parts[2])
    if quantity is None:
        return None
    return StockRecord(model_name=parts[0], lot=parts[1], quantity=quantity)


def decode(text: Optional[str]) -> Optional[StockRecord]:
    """
    Parse scanned QR text back into a record.

    Text that parses as JSON is judged as JSON only; the legacy pipe format is
    tried only when the text is not JSON at all. Returns None for anything
    unrecognised.
    """
    if not text:
        return None

    try:
        payload = json.loads(text)
    except ValueError:
        return _from_legacy(text)

    if not isinstance(payload, dict):
        return None
    return _from_mapping(payload)
