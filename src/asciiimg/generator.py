from typing import Protocol

from PIL import Image

from asciiimg.charsets import Charset
from asciiimg.colorizer import RESET, Colorizer, Pixel
from asciiimg.lines import iter_row_pairs, iter_rows

MAX_CHANNEL_VALUE = 255

# U+2580 UPPER HALF BLOCK: foreground paints the top half, background the bottom
HALF_BLOCK = "▀"


class Generator(Protocol):
    def generate(self, image: Image.Image, charset: Charset, colorizer: Colorizer) -> list[str]:
        """Convert an image to a list of printable lines, top to bottom."""
        ...


def luminance(pixel: Pixel, max_value: int = MAX_CHANNEL_VALUE) -> float:
    """Unweighted mean of the three channels, normalized to [0, 1]."""
    r, g, b = pixel
    return (float(r) + float(g) + float(b)) / max_value / 3.0


class CharsetGenerator:
    """One character per pixel, picked from the charset by brightness."""

    def generate(self, image: Image.Image, charset: Charset, colorizer: Colorizer) -> list[str]:
        result = []
        for row in iter_rows(image):
            parts = []
            for pixel in row:
                parts.append(colorizer.fg(pixel))
                parts.append(charset.map(luminance(pixel)))
            result.append("".join(parts))
        return result


class HalfBlockGenerator:
    """Two pixels per character cell using the upper half block glyph.

    The top pixel of each pair sets the foreground, the bottom pixel the
    background. The glyph is fixed, so ``charset`` is ignored; it is only
    taken so every generator shares one call signature.
    """

    def generate(self, image: Image.Image, charset: Charset, colorizer: Colorizer) -> list[str]:
        result = []
        for top, bottom in iter_row_pairs(image):
            if not top:
                result.append("")
                continue
            parts = []
            for upper, lower in zip(top, bottom):
                parts.append(colorizer.fg(upper))
                parts.append(colorizer.bg(lower))
                parts.append(HALF_BLOCK)
            # Colour state must not leak into the next line
            parts.append(RESET)
            result.append("".join(parts))
        return result


GENERATORS = {
    "charset": CharsetGenerator,
    "half-block": HalfBlockGenerator,
}
