"""Generate placeholder images with embedded EXIF/GPS metadata for use as test fixtures."""

from image_fixture_generator.config import ImageGenConfig, load_config, resolve_config
from image_fixture_generator.generator import FormatResult, generate_images
from image_fixture_generator.reader import read_fixture_metadata, read_image_size

__version__ = "1.0.0"

__all__ = [
    "FormatResult",
    "ImageGenConfig",
    "generate_images",
    "load_config",
    "read_fixture_metadata",
    "read_image_size",
    "resolve_config",
]
