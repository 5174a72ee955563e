import numpy as np
import pytest
from PIL import Image


def image_from_rows(rows):
    """Build an RGB image from a list of rows of (r, g, b) tuples."""
    return Image.fromarray(np.array(rows, dtype=np.uint8))


@pytest.fixture
def make_image():
    return image_from_rows


@pytest.fixture
def png_path(tmp_path):
    """Write an image to a temporary PNG and return the path."""

    def _save(image, name="input.png"):
        path = tmp_path / name
        image.save(path)
        return path

    return _save
