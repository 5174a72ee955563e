import argparse
import logging
import sys
from pathlib import Path

from asciiimg.charsets import CHARSETS
from asciiimg.colorizer import COLORIZERS
from asciiimg.config import CHARACTER_ASPECT_RATIO, RenderConfig
from asciiimg.converter import render
from asciiimg.errors import AsciiError
from asciiimg.generator import GENERATORS
from asciiimg.preprocess import PREPROCESSORS
from asciiimg.terminal import get_terminal_size

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Send the whole package's log records to stderr."""
    package_logger = logging.getLogger(__package__)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    package_logger.handlers[:] = [handler]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiimg", description="Render an image as text for the terminal")
    parser.add_argument("image", help="Path to input image")
    parser.add_argument(
        "-g", "--generator", default="charset", choices=sorted(GENERATORS), help="Rendering algorithm (default: charset)"
    )
    parser.add_argument(
        "-c", "--colorizer", default="null", choices=sorted(COLORIZERS), help="Colour encoding (default: null)"
    )
    parser.add_argument(
        "-p",
        "--preprocessor",
        default="basic",
        choices=sorted(PREPROCESSORS),
        help="basic resizes to the target grid, null keeps every pixel (default: basic)",
    )
    ramp = parser.add_mutually_exclusive_group()
    ramp.add_argument("--charset", default=None, help="Characters from darkest to brightest")
    ramp.add_argument(
        "--charset-name",
        default="default",
        choices=sorted(CHARSETS),
        help=f"Built-in character ramp (default: default, {CHARSETS['default']!r})",
    )
    parser.add_argument("--width", type=int, default=None, help="Output width in columns")
    parser.add_argument("--height", type=int, default=None, help="Output height in rows")
    parser.add_argument(
        "--aspect-ratio",
        type=float,
        default=CHARACTER_ASPECT_RATIO,
        help=f"Height/width ratio of a character cell (default: {CHARACTER_ASPECT_RATIO})",
    )
    parser.add_argument(
        "--fit", action="store_true", default=False, help="Use the terminal width when --width is not given"
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    image_path = Path(args.image)
    if not image_path.exists():
        print(f"File not found: {image_path}", file=sys.stderr)
        return 1

    width = args.width
    if width is None and args.fit:
        width = get_terminal_size()[0]
        logger.debug("Fitting to terminal width %d", width)

    try:
        config = RenderConfig(
            generator=args.generator,
            colorizer=args.colorizer,
            preprocessor=args.preprocessor,
            charset=args.charset if args.charset is not None else CHARSETS[args.charset_name],
            width=width,
            height=args.height,
            aspect_ratio=args.aspect_ratio,
        )
        lines = render(image_path, config)
    except AsciiError as exc:
        print(exc, file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
