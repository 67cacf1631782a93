"""Tests for batch image scanning and the OpenCV pixel decoder."""

from io import BytesIO

import cv2
import numpy as np
from PIL import Image

from domain.records import ScanObservation, StockRecord
from input_readers.image import load_pixels
from qr.codec import decode, encode
from qr.scanner import decode_qr_image, scan_images


def _png(width, height=4):
    buffer = BytesIO()
    Image.new("RGB", (width, height), color=(255, 255, 255)).save(buffer, format="PNG")
    return buffer.getvalue()


def _decoder_by_width(texts):
    """Fake pixel decoder: the image width selects the QR text."""
    def decode(pixels):
        return texts.get(pixels.shape[1])
    return decode


def test_load_pixels_returns_rgb_array():
    pixels = load_pixels(_png(6, 3))
    assert pixels.shape == (3, 6, 3)
    assert pixels.dtype == np.uint8


def test_scan_batch_keeps_going_after_failures():
    decoder = _decoder_by_width(
        {
            10: '{"model_name":"A","lot":"L1","quantity":5}',
            11: "garbage",
            13: "B|L2|3",
        }
    )
    files = [
        ("a.png", _png(10)),
        ("broken.jpg", b"not an image"),
        ("junk.png", _png(11)),
        ("empty.png", _png(12)),
        ("b.png", _png(13)),
    ]

    result = scan_images(files, decoder=decoder)

    assert result.observations == [
        ScanObservation(StockRecord("A", "L1", 5), "a.png"),
        ScanObservation(StockRecord("B", "L2", 3), "b.png"),
    ]
    assert result.errors == [
        "broken.jpg: cannot read image",
        "junk.png: unsupported QR payload",
        "empty.png: no QR code found in image",
    ]


def test_decoder_exception_is_reported_per_file():
    def exploding(pixels):
        raise RuntimeError("decoder crashed")

    result = scan_images([("x.png", _png(5)), ("y.png", _png(5))], decoder=exploding)

    assert result.observations == []
    assert len(result.errors) == 2
    assert result.errors[0].startswith("x.png: cannot read image")


def test_scan_reads_paths(tmp_path):
    path = tmp_path / "sticker.png"
    path.write_bytes(_png(10))
    decoder = _decoder_by_width({10: "A|L1|1"})

    result = scan_images([("sticker.png", path), ("gone.png", tmp_path / "gone.png")], decoder=decoder)

    assert [o.source_file for o in result.observations] == ["sticker.png"]
    assert result.errors == ["gone.png: cannot read image"]


def test_oversized_image_is_reported_and_batch_continues(monkeypatch):
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)
    decoder = _decoder_by_width({5: "A|L1|1"})

    result = scan_images([("huge.png", _png(20, 20)), ("ok.png", _png(5, 5))], decoder=decoder)

    assert result.errors == ["huge.png: cannot read image"]
    assert [o.source_file for o in result.observations] == ["ok.png"]


def _qr_pixels(text, module_px=8, quiet_zone=4):
    modules = cv2.QRCodeEncoder.create().encode(text)
    modules = np.pad(modules, quiet_zone, mode="constant", constant_values=255)
    size = modules.shape[0] * module_px
    gray = cv2.resize(modules, (size, size), interpolation=cv2.INTER_NEAREST)
    return np.stack([gray, gray, gray], axis=-1).astype(np.uint8)


def test_opencv_decoder_reads_encoded_sticker():
    record = StockRecord("CMC-0603", "L2407", 500)
    assert decode(decode_qr_image(_qr_pixels(encode(record)))) == record


def test_opencv_decoder_returns_none_without_qr():
    assert decode_qr_image(np.full((200, 200, 3), 255, dtype=np.uint8)) is None
