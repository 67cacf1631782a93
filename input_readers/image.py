"""
IMAGE READER
------------
Load photographed QR stickers into RGB pixel arrays for the QR decoder.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

ImageSource = Union[Path, str, bytes]


def load_pixels(source: ImageSource) -> np.ndarray:
    """
    Decode an image into an (height, width, 3) uint8 RGB array.

    Phone photos are rotated according to their EXIF orientation first, so the
    decoder sees the sticker the way it was shot.

    Raises:
        FileNotFoundError: If a path is given and the file doesn't exist
        ValueError: If the content cannot be decoded as an image
    """
    if isinstance(source, (bytes, bytearray)):
        handle: Union[BytesIO, Path] = BytesIO(source)
    else:
        image_path = Path(source).expanduser().resolve()
        if not image_path.exists():
            raise FileNotFoundError(f"Image file not found: {image_path}")
        handle = image_path

    try:
        with Image.open(handle) as img:
            img = ImageOps.exif_transpose(img)
            return np.asarray(img.convert("RGB"), dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise ValueError(f"Cannot read image: {e}") from e
