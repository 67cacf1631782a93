"""Finished stock records and the scan-side observation/total types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class StockRecord:
    """
    One physical unit (box, reel, bag) as printed on a QR sticker.

    Identity is structural over (model_name, lot, quantity). `erp` is only
    printed on the sticker label and is not part of the QR payload, so it is
    left out of equality.
    """

    model_name: str
    lot: str
    quantity: int
    erp: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"quantity must be an integer, got: {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError(f"quantity must be non-negative, got: {self.quantity}")


@dataclass(frozen=True)
class ScanObservation:
    record: StockRecord
    source_file: str


@dataclass
class GroupedTotal:
    model_name: str
    lot: str
    total_quantity: int
    files: List[str] = field(default_factory=list)


@dataclass
class ScanBatchResult:
    observations: List[ScanObservation] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
