"""
CanonicalRow schema definition.

This TypedDict represents one imported stock row after header aliasing and
cell normalization, before the box column has been expanded. Excel and CSV
readers both map their raw rows into this structure.

`quantity` is a tagged value (see domain.quantity): UNSET when the Qty cell
was missing, blank, "-" or zero. `box` keeps the raw cell so the expansion
rules can inspect its exact text.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TypedDict, Union

from .quantity import Quantity

RawRow = Dict[str, Any]

BoxValue = Union[str, int, float, None]


class CanonicalRow(TypedDict, total=False):
    model_name: str
    lot: str
    quantity: Quantity
    box: BoxValue
    erp: str

    source_row: Optional[int]
