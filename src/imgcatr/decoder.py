from pathlib import Path
from typing import Protocol

import numpy as np
from PIL import Image

from imgcatr.errors import FormatGuessError, ImageOpenError
from imgcatr.palettes import BMP_MAGIC, GIF_MAGIC, ICO_MAGIC, JPEG_MAGIC, PNG_MAGIC, PPM_MAGICS

# Extension -> Pillow format name
EXTENSION_FORMATS = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".jpe": "JPEG",
    ".jif": "JPEG",
    ".jfif": "JPEG",
    ".jfi": "JPEG",
    ".gif": "GIF",
    ".webp": "WEBP",
    ".ppm": "PPM",
    ".pgm": "PPM",
    ".pbm": "PPM",
    ".tiff": "TIFF",
    ".tif": "TIFF",
    ".tga": "TGA",
    ".bmp": "BMP",
    ".dib": "DIB",
    ".ico": "ICO",
}

MAGIC_FORMATS = [
    (PNG_MAGIC, "PNG"),
    (JPEG_MAGIC, "JPEG"),
    (GIF_MAGIC, "GIF"),
    (BMP_MAGIC, "BMP"),
    (ICO_MAGIC, "ICO"),
] + [(magic, "PPM") for magic in PPM_MAGICS]


class ImageDecoder(Protocol):
    def decode(self, path: str | Path) -> np.ndarray:
        """Decode an image file to a read-only (height, width, 4) uint8 RGBA array."""
        ...


def guess_format(path: str | Path) -> str:
    """Guess the Pillow format of a file from its extension, falling back to its magic bytes."""
    path = Path(path)
    fmt = EXTENSION_FORMATS.get(path.suffix.lower())
    if fmt is not None:
        return fmt

    try:
        with path.open("rb") as f:
            head = f.read(32)
    except OSError as e:
        raise ImageOpenError(str(path), e.strerror) from e

    for magic, fmt in MAGIC_FORMATS:
        if head.startswith(magic):
            return fmt
    raise FormatGuessError(str(path))


def to_pixels(image: Image.Image) -> np.ndarray:
    """Freeze a Pillow image into the RGBA array the pipeline works on."""
    pixels = np.array(image.convert("RGBA"), dtype=np.uint8)
    pixels.flags.writeable = False
    return pixels


def load_image(path: str | Path, fmt: str) -> np.ndarray:
    """Decode the first frame of an image file as the given format."""
    path = Path(path)
    try:
        with Image.open(path, formats=[fmt]) as image:
            image.seek(0)
            return to_pixels(image)
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        raise ImageOpenError(str(path), str(e) or type(e).__name__) from e


class PillowDecoder:
    """Decodes image files with Pillow."""

    def decode(self, path: str | Path) -> np.ndarray:
        return load_image(path, guess_format(path))
