import os
import sys
from typing import TextIO

DEFAULT_SIZE = (80, 24)


def get_terminal_size(stream: TextIO | None = None) -> tuple[int, int]:
    """Return (columns, rows) of the terminal behind ``stream``.

    Falls back to 80x24 when output is redirected or the size can't be read.
    """
    stream = sys.stdout if stream is None else stream
    if not stream.isatty():
        return DEFAULT_SIZE
    try:
        size = os.get_terminal_size(stream.fileno())
    except (OSError, ValueError):
        return DEFAULT_SIZE
    return (size.columns or DEFAULT_SIZE[0], size.lines or DEFAULT_SIZE[1])
