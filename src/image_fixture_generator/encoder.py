import io
from typing import NamedTuple

from PIL import Image

# Light gray fill, 3 channels
CANVAS_MODE = "RGB"
CANVAS_COLOR = (200, 200, 200)


class TargetFormat(NamedTuple):
    ext: str
    encoder_format: str


TARGET_FORMATS = (
    TargetFormat("jpg", "JPEG"),
    TargetFormat("tiff", "TIFF"),
    TargetFormat("webp", "WEBP"),
    TargetFormat("png", "PNG"),
    TargetFormat("gif", "GIF"),
)

SUPPORTED_ENCODER_FORMATS = frozenset(t.encoder_format for t in TARGET_FORMATS)


class UnsupportedFormatError(ValueError):
    """Raised when asked to encode into a format outside TARGET_FORMATS."""

    def __init__(self, encoder_format: str):
        super().__init__(f"Unsupported format: {encoder_format}")
        self.encoder_format = encoder_format


class PillowEncoder:
    """Rasterizes a uniform canvas and encodes it with Pillow's default settings."""

    def __init__(self, color=CANVAS_COLOR):
        self.color = color

    def encode(self, width: int, height: int, encoder_format: str) -> bytes:
        """
        Encodes a `width` x `height` canvas into `encoder_format`.

        Raises:
            UnsupportedFormatError: if the format identifier is not one of TARGET_FORMATS.
            OSError / ValueError: if Pillow cannot encode the canvas.
        """
        if encoder_format not in SUPPORTED_ENCODER_FORMATS:
            raise UnsupportedFormatError(encoder_format)

        img = Image.new(CANVAS_MODE, (int(width), int(height)), self.color)
        buffer = io.BytesIO()
        try:
            img.save(buffer, format=encoder_format)
        finally:
            img.close()
        return buffer.getvalue()
