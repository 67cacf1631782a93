from .canonical import BoxValue, CanonicalRow, RawRow
from .quantity import UNSET, Known, Quantity, is_unset, resolve
from .records import GroupedTotal, ScanBatchResult, ScanObservation, StockRecord

__all__ = [
    "BoxValue",
    "CanonicalRow",
    "GroupedTotal",
    "Known",
    "Quantity",
    "RawRow",
    "ScanBatchResult",
    "ScanObservation",
    "StockRecord",
    "UNSET",
    "is_unset",
    "resolve",
]
