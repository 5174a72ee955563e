import math
from typing import Protocol

from asciiimg.errors import CharsetError

DEFAULT_CHARSET = " ;#"

# Classic ten-step ramp, darkest to brightest
ASCII_RAMP = " .:-=+*#%@"

# Shade blocks: U+2591-U+2593 plus the full block
BLOCKS = " ░▒▓█"

CHARSETS = {
    "default": DEFAULT_CHARSET,
    "ascii": ASCII_RAMP,
    "blocks": BLOCKS,
}


class Charset(Protocol):
    def map(self, luminance: float) -> str:
        """Return the character representing a brightness in [0, 1]."""
        ...


class LinearCharset:
    """Characters spread uniformly across the luminance range.

    The bucket index is ``luminance * (len - 1)`` rounded half away from zero,
    so ``map(0.0)`` is the first character and ``map(1.0)`` the last.
    """

    def __init__(self, chars: str):
        if not chars:
            raise CharsetError("Charset must contain at least one character")
        self.chars = chars

    def map(self, luminance: float) -> str:
        if math.isnan(luminance):
            luminance = 0.0
        luminance = min(max(luminance, 0.0), 1.0)
        index = math.floor(luminance * (len(self.chars) - 1) + 0.5)
        return self.chars[index]

    def __repr__(self) -> str:
        return f"LinearCharset({self.chars!r})"
