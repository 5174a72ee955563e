class AsciiError(Exception):
    """Base class for errors raised while rendering an image as text."""


class ImageLoadError(AsciiError):
    """The input could not be opened or decoded as an image."""


class ConfigError(AsciiError, ValueError):
    """Invalid rendering configuration."""


class CharsetError(ConfigError):
    """A charset that cannot map brightness to characters."""
