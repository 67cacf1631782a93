from .aggregator import ScanSession, group_totals, ingest
from .codec import decode, encode
from .scanner import decode_qr_image, scan_images

__all__ = [
    "ScanSession",
    "decode",
    "decode_qr_image",
    "encode",
    "group_totals",
    "ingest",
    "scan_images",
]
