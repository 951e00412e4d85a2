# renderer/export.py
import logging
import os

import numpy as np
from PIL import Image

from renderer.tone_mapping import process_image

logger = logging.getLogger(__name__)

# File extension -> Pillow format name
FORMATS = {
    ".png": "PNG",
    ".ppm": "PPM",
    ".tga": "TGA",
}


def save_image(linear_image: np.ndarray, path, tone_map: str = "none", gamma: float = 2.0) -> str:
    """
    Writes a linear (height, width, 3) image to path. The format follows the
    file extension; row 0 of the array is the top row of the file.
    Returns the path written.
    """
    path = os.fspath(path)
    ext = os.path.splitext(path)[1].lower()
    if ext not in FORMATS:
        raise ValueError(f"Unsupported image format {ext or path!r}, "
                         f"expected one of {sorted(FORMATS)}")
    if linear_image.ndim != 3 or linear_image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (height, width, 3), got {linear_image.shape}")

    pixels = process_image(linear_image, tone_map=tone_map, gamma=gamma)
    Image.fromarray(pixels).save(path, format=FORMATS[ext])
    logger.info("Wrote %dx%d image to %s", pixels.shape[1], pixels.shape[0], path)
    return path


def load_image(path) -> np.ndarray:
    """Reads an 8-bit RGB image back as a uint8 array of shape (height, width, 3)."""
    with Image.open(path) as img:
        return np.asarray(img.convert("RGB"))
