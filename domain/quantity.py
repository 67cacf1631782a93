"""
Tagged quantity value.

A quantity read from a spreadsheet cell is either a known non-negative count or
UNSET, meaning the Qty cell was blank/dashed and the real count has to be
derived from the box column.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Known:
    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"Known quantity must be non-negative, got: {self.value}")


class _Unset:
    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()

Quantity = Union[Known, _Unset]


def is_unset(quantity: Quantity) -> bool:
    return quantity is UNSET


def resolve(quantity: Quantity) -> int:
    """Concrete count for a finished record (UNSET resolves to 0)."""
    return 0 if quantity is UNSET else quantity.value
