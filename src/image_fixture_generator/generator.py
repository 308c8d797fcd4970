import sys
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from image_fixture_generator.config import ImageGenConfig
from image_fixture_generator.encoder import TARGET_FORMATS, PillowEncoder, TargetFormat
from image_fixture_generator.metadata import ExifToolWriter, build_metadata
from image_fixture_generator.utils import fixture_path


@dataclass
class FormatResult:
    ext: str
    path: Path
    image_written: bool = False
    metadata_written: bool = False
    error: str | None = None


def prepare_output_dir(out_dir: str | Path) -> Path:
    """Creates the output directory (and parents) if needed. OSError propagates."""
    path = Path(out_dir)
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        print(f"Created output directory: {path}")
    return path


def generate_format(config: ImageGenConfig, target: TargetFormat, tags: dict, encoder, writer) -> FormatResult:
    """
    Writes one fixture image and embeds `tags` into it.

    Failures are reported and recorded on the returned result; nothing is raised.
    An image whose metadata could not be written is kept as is.
    """
    out_path = fixture_path(config.out_dir, config.filename, target.ext)
    result = FormatResult(ext=target.ext, path=out_path)

    try:
        data = encoder.encode(config.width, config.height, target.encoder_format)
        out_path.write_bytes(data)
    except Exception as e:
        # Encoder errors vary by format (struct.error, OverflowError, ...); only this file fails
        result.error = str(e)
        tqdm.write(f"✗ Failed to generate {out_path}: {e}", file=sys.stderr)
        return result

    result.image_written = True
    tqdm.write(f"✓ Generated image: {out_path}")

    try:
        writer.write(out_path, tags)
    except Exception as e:
        # Any writer failure only affects this file's metadata
        result.error = str(e)
        tqdm.write(f"⚠ EXIF not written to {out_path}: {e}", file=sys.stderr)
        return result

    result.metadata_written = True
    tqdm.write(f"✓ EXIF/GPS metadata written to: {out_path}")
    return result


def generate_images(
    config: ImageGenConfig,
    encoder=None,
    writer=None,
    targets=TARGET_FORMATS,
) -> list[FormatResult]:
    """
    Generates every target format for `config`, one after the other.

    Args:
        config: The resolved configuration.
        encoder: Object with `encode(width, height, encoder_format) -> bytes`.
            Defaults to PillowEncoder.
        writer: Object with `write(path, tags)` and `close()`. Defaults to ExifToolWriter.
        targets: The formats to produce.

    Returns:
        One FormatResult per target, in order.

    Raises:
        OSError: if the output directory cannot be created.
        Exception: whatever the writer raises when it cannot be started.
    """
    encoder = encoder or PillowEncoder()
    writer = writer or ExifToolWriter()

    try:
        prepare_output_dir(config.out_dir)
        tags = build_metadata(config.width, config.height)

        start = getattr(writer, "start", None)
        if start is not None:
            start()

        print(f"Generating {len(targets)} images...")
        results = [
            generate_format(config, target, tags, encoder, writer)
            for target in tqdm(targets, desc="Generating images")
        ]
    finally:
        writer.close()

    print("✓ Image generation complete!")
    return results
