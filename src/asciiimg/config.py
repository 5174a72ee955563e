import math
from dataclasses import dataclass

from asciiimg.charsets import DEFAULT_CHARSET, LinearCharset
from asciiimg.colorizer import COLORIZERS, Colorizer
from asciiimg.errors import ConfigError
from asciiimg.generator import GENERATORS, Generator
from asciiimg.preprocess import PREPROCESSORS, Preprocessor

# Terminal cells are roughly twice as tall as they are wide; 2.0-2.2 depending on the font
CHARACTER_ASPECT_RATIO = 2.0


def _lookup(registry: dict, name: str, kind: str):
    try:
        return registry[name]
    except KeyError:
        raise ConfigError(f"Unknown {kind}: {name!r} (choose from {', '.join(sorted(registry))})") from None


@dataclass
class RenderConfig:
    generator: str = "charset"
    colorizer: str = "null"
    preprocessor: str = "basic"
    charset: str = DEFAULT_CHARSET
    width: int | None = None
    height: int | None = None
    aspect_ratio: float = CHARACTER_ASPECT_RATIO

    def __post_init__(self):
        _lookup(GENERATORS, self.generator, "generator")
        _lookup(COLORIZERS, self.colorizer, "colorizer")
        _lookup(PREPROCESSORS, self.preprocessor, "preprocessor")
        for name in ("width", "height"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")
        if not (math.isfinite(self.aspect_ratio) and self.aspect_ratio > 0):
            raise ConfigError(f"aspect_ratio must be a positive finite number, got {self.aspect_ratio}")

    def target_dimensions(self, source_size: tuple[int, int]) -> tuple[int, int]:
        """Output grid size in cells, filling in whichever side is missing."""
        if self.width is not None and self.height is not None:
            return (self.width, self.height)
        src_w, src_h = source_size
        if src_w == 0 or src_h == 0:
            # Nothing to scale from; an empty source renders as an empty grid
            return (
                self.width if self.width is not None else src_w,
                self.height if self.height is not None else src_h,
            )
        # Cells are aspect_ratio times taller than wide, so rows shrink by that factor
        if self.width is not None:
            return (self.width, max(1, round(self.width * src_h / src_w / self.aspect_ratio)))
        if self.height is not None:
            return (max(1, round(self.height * self.aspect_ratio * src_w / src_h)), self.height)
        return (src_w, max(1, round(src_h / self.aspect_ratio)))

    def build_charset(self) -> LinearCharset:
        return LinearCharset(self.charset)

    def build_colorizer(self) -> Colorizer:
        return _lookup(COLORIZERS, self.colorizer, "colorizer")()

    def build_preprocessor(self, source_size: tuple[int, int]) -> Preprocessor:
        return _lookup(PREPROCESSORS, self.preprocessor, "preprocessor")(self.target_dimensions(source_size))

    def build_generator(self) -> Generator:
        return _lookup(GENERATORS, self.generator, "generator")()
