from typing import Protocol

Pixel = tuple[int, int, int]

RESET = "\033[0m"

# Indexed palette layout: 16 system colours, the 6x6x6 cube, then a 24-step grey ramp
CUBE_BASE = 16
GREY_BASE = 232
GREY_STEPS = 24
# Greys brighter than this go straight to the top of the ramp
GREY_WHITE_THRESHOLD = 253


class Colorizer(Protocol):
    def fg(self, pixel: Pixel) -> str:
        """Escape sequence setting the foreground colour for the next character."""
        ...

    def bg(self, pixel: Pixel) -> str:
        """Escape sequence setting the background colour for the next character."""
        ...


def fg_rgb(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def bg_rgb(r: int, g: int, b: int) -> str:
    return f"\033[48;2;{r};{g};{b}m"


def _cube_level(channel: int) -> int:
    """Scale a 0-255 channel onto the six cube levels (0-5)."""
    return int(channel * 5.0 / 255.0)


def rgb_to_256(r: int, g: int, b: int) -> int:
    """Quantize an RGB colour to an index of the 256-colour palette.

    Pure greys use the grey ramp (232-255), everything else the colour
    cube (16-231).
    """
    if r == g == b:
        if r > GREY_WHITE_THRESHOLD:
            return GREY_BASE + GREY_STEPS - 1
        return GREY_BASE + int(r * float(GREY_STEPS) / 255.0)
    return CUBE_BASE + 36 * _cube_level(r) + 6 * _cube_level(g) + _cube_level(b)


def fg_256(r: int, g: int, b: int) -> str:
    return f"\033[38;5;{rgb_to_256(r, g, b)}m"


def bg_256(r: int, g: int, b: int) -> str:
    return f"\033[48;5;{rgb_to_256(r, g, b)}m"


class NullColorizer:
    """Monochrome output: no escape sequences at all."""

    def fg(self, pixel: Pixel) -> str:
        return ""

    def bg(self, pixel: Pixel) -> str:
        return ""


class AnsiRgbColorizer:
    """24-bit truecolor escapes carrying the pixel's channels verbatim."""

    def fg(self, pixel: Pixel) -> str:
        return fg_rgb(*pixel)

    def bg(self, pixel: Pixel) -> str:
        return bg_rgb(*pixel)


class Ansi256Colorizer:
    """Indexed escapes for terminals limited to the 256-colour palette."""

    def fg(self, pixel: Pixel) -> str:
        return fg_256(*pixel)

    def bg(self, pixel: Pixel) -> str:
        return bg_256(*pixel)


COLORIZERS = {
    "null": NullColorizer,
    "ansi-rgb": AnsiRgbColorizer,
    "ansi-256": Ansi256Colorizer,
}
