from typing import Protocol

import numpy as np
from PIL import Image

from asciiimg.lines import to_rgb

# Modes numpy can round-trip through Image.fromarray without losing channels
_ARRAY_MODES = {"L", "RGB", "RGBA"}


class Preprocessor(Protocol):
    def process(self, image: Image.Image) -> Image.Image:
        """Return the image to be handed to a generator."""
        ...


def _nearest_indices(src: int, dst: int) -> np.ndarray:
    return (np.arange(dst, dtype=np.int64) * src) // dst


def resize_nearest(image: Image.Image, dimensions: tuple[int, int]) -> Image.Image:
    """Resample to exactly ``dimensions`` picking source pixel floor(x * src / dst)."""
    width, height = dimensions
    if width == 0 or height == 0 or image.width == 0 or image.height == 0:
        return Image.new(image.mode, (width, height))
    if image.mode not in _ARRAY_MODES:
        image = to_rgb(image)

    arr = np.asarray(image)
    ys = _nearest_indices(image.height, height)
    xs = _nearest_indices(image.width, width)
    return Image.fromarray(np.ascontiguousarray(arr[ys[:, None], xs[None, :]]))


class ResizePreprocessor:
    """Fit the image to a character grid with nearest-neighbor sampling.

    Nearest-neighbor keeps hard edges intact at the low resolution of a
    text grid where averaging filters would wash out detail.
    """

    def __init__(self, dimensions: tuple[int, int]):
        self.dimensions = dimensions

    def process(self, image: Image.Image) -> Image.Image:
        if image.size == tuple(self.dimensions):
            return image.copy()
        return resize_nearest(image, self.dimensions)


class NullPreprocessor:
    """Pixel-for-pixel conversion, whatever the requested size."""

    def __init__(self, dimensions: tuple[int, int] | None = None):
        self.dimensions = dimensions

    def process(self, image: Image.Image) -> Image.Image:
        return image.copy()


PREPROCESSORS = {
    "basic": ResizePreprocessor,
    "null": NullPreprocessor,
}
