"""
ZIP archive of QR sticker images, one file per record.

Rendering a payload into image bytes is not done here; callers pass a
`render(payload) -> bytes` function (QR library, web service, ...).
"""

from __future__ import annotations

import re
import zipfile
from io import BytesIO
from typing import Callable, Sequence

from config import ARCHIVE_IMAGE_SUFFIX, ARCHIVE_NAME_PATTERN
from domain.records import StockRecord
from qr.codec import encode
from utils.logger import get_logger

logger = get_logger("archive")

QRRenderer = Callable[[str], bytes]

_UNSAFE = re.compile(ARCHIVE_NAME_PATTERN)


def archive_filename(index: int, record: StockRecord) -> str:
    """'<index>_<model>_<lot>.png' with anything outside [A-Za-z0-9_-] replaced by '_'."""
    stem = _UNSAFE.sub("_", f"{index}_{record.model_name}_{record.lot}")
    return f"{stem}{ARCHIVE_IMAGE_SUFFIX}"


def build_qr_archive(records: Sequence[StockRecord], render: QRRenderer) -> bytes:
    buffer = BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for index, record in enumerate(records, start=1):
            zf.writestr(archive_filename(index, record), render(encode(record)))

    logger.info("qr archive built", images=len(records), size=buffer.tell())
    return buffer.getvalue()
