from collections.abc import Iterator

import numpy as np
from PIL import Image

from asciiimg.colorizer import Pixel

Row = list[Pixel]

# Integer modes that hold 16-bit samples (Pillow opens 16-bit greyscale PNGs as these)
WIDE_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


def to_rgb(image: Image.Image) -> Image.Image:
    """Return an 8-bit RGB view of ``image``, rescaling 16-bit samples rather than clamping them."""
    if image.mode == "RGB":
        return image
    if image.mode in WIDE_MODES:
        wide = np.clip(np.asarray(image).astype(np.int64), 0, 0xFFFF)
        image = Image.fromarray(np.ascontiguousarray(wide >> 8, dtype=np.uint8))
    return image.convert("RGB")


def _rgb_rows(image: Image.Image) -> np.ndarray:
    return np.asarray(to_rgb(image))


def iter_rows(image: Image.Image) -> Iterator[Row]:
    """Yield the image's rows top to bottom, each as a list of (r, g, b) tuples."""
    if image.width == 0 or image.height == 0:
        for _ in range(image.height):
            yield []
        return
    for row in _rgb_rows(image):
        yield [tuple(pixel) for pixel in row.tolist()]


def iter_row_pairs(image: Image.Image) -> Iterator[tuple[Row, Row]]:
    """Yield consecutive (top, bottom) row pairs.

    On an odd height the last row has no partner and is paired with itself.
    """
    rows = iter_rows(image)
    for top in rows:
        bottom = next(rows, top)
        yield top, bottom
