import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciiimg.config import RenderConfig
from asciiimg.errors import ImageLoadError

logger = logging.getLogger(__name__)


def load_image(image: Image.Image | str | Path) -> Image.Image:
    """Return a Pillow image, opening ``image`` from disk if it is a path."""
    if isinstance(image, Image.Image):
        return image
    try:
        opened = Image.open(image)
        opened.load()
    except FileNotFoundError as exc:
        raise ImageLoadError(f"File not found: {image}") from exc
    except PermissionError as exc:
        raise ImageLoadError(f"Cannot read image {image}: permission denied") from exc
    except Image.DecompressionBombError as exc:
        raise ImageLoadError(f"Image {image} is too large: {exc}") from exc
    except (UnidentifiedImageError, OSError) as exc:
        raise ImageLoadError(f"Cannot decode image {image}: {exc}") from exc
    return opened


def render(image: Image.Image | str | Path, config: RenderConfig | None = None) -> list[str]:
    """Preprocess and convert an image, returning one string per terminal row."""
    if config is None:
        config = RenderConfig()
    image = load_image(image)

    charset = config.build_charset()
    colorizer = config.build_colorizer()
    preprocessor = config.build_preprocessor(image.size)
    generator = config.build_generator()
    logger.debug(
        "Rendering %dx%d image with %s/%s/%s",
        image.width,
        image.height,
        type(preprocessor).__name__,
        type(generator).__name__,
        type(colorizer).__name__,
    )

    processed = preprocessor.process(image)
    logger.debug("Preprocessed to %dx%d", processed.width, processed.height)
    return generator.generate(processed, charset, colorizer)


def image_to_ascii(image: Image.Image | str | Path, config: RenderConfig | None = None) -> str:
    return "\n".join(render(image, config))
