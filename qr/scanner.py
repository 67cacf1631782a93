"""
Batch scanning of photographed QR stickers.

Files are processed strictly one after another (load -> pixel decode ->
payload decode) so only one bitmap is held at a time and error messages come
out in upload order. A file that fails is reported as "<file>: <reason>" and
the batch moves on; nothing is retried.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional, Tuple

import numpy as np

from domain.records import ScanBatchResult, ScanObservation
from input_readers.image import ImageSource, load_pixels
from utils.logger import get_logger

from .codec import decode

logger = get_logger("scanner")

PixelDecoder = Callable[[np.ndarray], Optional[str]]
PixelLoader = Callable[[ImageSource], np.ndarray]

CANNOT_READ_IMAGE = "cannot read image"
NO_QR_FOUND = "no QR code found in image"
UNSUPPORTED_PAYLOAD = "unsupported QR payload"


def decode_qr_image(pixels: np.ndarray) -> Optional[str]:
    """Find and decode a single QR code in an RGB pixel array (OpenCV)."""
    import cv2

    bgr = cv2.cvtColor(pixels, cv2.COLOR_RGB2BGR)
    detector = cv2.QRCodeDetector()

    text, _points, _ = detector.detectAndDecode(bgr)
    if text:
        return text

    # Glare on glossy labels: a grayscale pass often succeeds where color fails
    gray = cv2.cvtColor(bgr, cv2.COLOR_BGR2GRAY)
    text, _points, _ = detector.detectAndDecode(gray)
    return text or None


def scan_images(
    files: Iterable[Tuple[str, ImageSource]],
    decoder: PixelDecoder = decode_qr_image,
    loader: PixelLoader = load_pixels,
) -> ScanBatchResult:
    """Decode every (file_name, image) pair into observations plus per-file errors."""
    result = ScanBatchResult()

    for file_name, source in files:
        try:
            pixels = loader(source)
        except (FileNotFoundError, ValueError) as e:
            logger.warning("image unreadable", file=file_name, error=str(e))
            result.errors.append(f"{file_name}: {CANNOT_READ_IMAGE}")
            continue

        try:
            text = decoder(pixels)
        except Exception as e:
            logger.warning("qr decoder failed", file=file_name, error=str(e), exc_info=True)
            result.errors.append(f"{file_name}: {CANNOT_READ_IMAGE} ({e})")
            continue
        finally:
            del pixels

        if not text:
            logger.warning("no qr code in image", file=file_name)
            result.errors.append(f"{file_name}: {NO_QR_FOUND}")
            continue

        record = decode(text)
        if record is None:
            logger.warning("unsupported qr payload", file=file_name, payload=text[:200])
            result.errors.append(f"{file_name}: {UNSUPPORTED_PAYLOAD}")
            continue

        logger.debug("qr decoded", file=file_name, model_name=record.model_name, lot=record.lot)
        result.observations.append(ScanObservation(record=record, source_file=file_name))

    logger.info(
        "scan batch finished",
        decoded=len(result.observations),
        failed=len(result.errors),
    )
    return result
