import warnings
from pathlib import Path

from PIL import Image

from image_fixture_generator.utils import get_exiftool_path

# Suppress specific warnings from Pillow about potentially corrupt EXIF data
warnings.filterwarnings("ignore", "(Possibly )?corrupt EXIF data", UserWarning)

# Tags checked when inspecting a generated fixture
VERIFY_TAGS = [
    "Make",
    "Model",
    "Software",
    "ImageDescription",
    "DateTimeOriginal",
    "PixelXDimension",
    "PixelYDimension",
    "GPSLatitude",
    "GPSLatitudeRef",
    "GPSLongitude",
    "GPSLongitudeRef",
    "GPSAltitude",
]

# Formats exifread can parse when ExifTool is not available
EXIFREAD_EXTENSIONS = {".jpg", ".jpeg", ".tif", ".tiff"}

# exifread names for the tags above
EXIFREAD_TAG_NAMES = {
    "Make": "Image Make",
    "Model": "Image Model",
    "Software": "Image Software",
    "ImageDescription": "Image ImageDescription",
    "DateTimeOriginal": "EXIF DateTimeOriginal",
    "PixelXDimension": "EXIF ExifImageWidth",
    "PixelYDimension": "EXIF ExifImageLength",
    "GPSLatitude": "GPS GPSLatitude",
    "GPSLatitudeRef": "GPS GPSLatitudeRef",
    "GPSLongitude": "GPS GPSLongitude",
    "GPSLongitudeRef": "GPS GPSLongitudeRef",
    "GPSAltitude": "GPS GPSAltitude",
}


def _strip_group(key: str) -> str:
    # "EXIF:Make" -> "Make"
    return key.split(":", 1)[-1]


def _read_with_exiftool(image_path: Path, tags: list[str]) -> dict | None:
    import exiftool

    exiftool_path = get_exiftool_path()
    kwargs = {"executable": exiftool_path} if exiftool_path else {}

    with exiftool.ExifToolHelper(**kwargs) as et:
        metadata = et.get_tags(str(image_path), tags=tags)

    if not metadata:
        return None

    result = {}
    for key, value in metadata[0].items():
        name = _strip_group(key)
        # Skips SourceFile and any ExifTool:Error/Warning entries
        if name not in tags:
            continue
        # Composite tags are derived; keep the value stored in the file
        if name in result and key.startswith("Composite:"):
            continue
        result[name] = value
    return result or None


def _ratio_to_float(val) -> float | None:
    if hasattr(val, "num"):  # It's a Ratio object
        if val.den == 0:
            return None
        return float(val.num) / float(val.den)
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def _read_with_exifread(image_path: Path, tags: list[str]) -> dict | None:
    import exifread

    with open(image_path, "rb") as f:
        raw_tags = exifread.process_file(f, details=False)

    if not raw_tags:
        return None

    result = {}
    for name in tags:
        tag = raw_tags.get(EXIFREAD_TAG_NAMES.get(name, name))
        if tag is None:
            continue
        values = tag.values
        if name in ("GPSLatitude", "GPSLongitude"):
            # Degrees, minutes, seconds -> decimal degrees
            parts = [_ratio_to_float(v) for v in values]
            if len(parts) == 3 and None not in parts:
                result[name] = parts[0] + parts[1] / 60 + parts[2] / 3600
        elif isinstance(values, str):
            result[name] = values.strip()
        elif values:
            value = _ratio_to_float(values[0])
            result[name] = int(value) if value is not None and value.is_integer() else value
    return result or None


def read_fixture_metadata(image_path: Path, tags: list[str] | None = None, debug: bool = False) -> dict | None:
    """
    Reads embedded metadata back out of a generated fixture.

    Tries ExifTool first, then falls back to `exifread` for JPEG/TIFF files.

    Args:
        image_path: Path object for the image file.
        tags: Tag names to fetch. Defaults to VERIFY_TAGS.
        debug: If True, prints why a reader failed.

    Returns:
        A dictionary keyed by bare tag name (no group prefix), or None if
        nothing could be read.
    """
    image_path = Path(image_path)
    tags = tags or VERIFY_TAGS

    if not image_path.is_file():
        return None

    try:
        data = _read_with_exiftool(image_path, tags)
        if data:
            return data
    except ImportError:
        if debug:
            print("PyExifTool not installed or found.")
    except Exception as e:
        if debug:
            print(f"exiftool failed on {image_path.name}: {e}")

    if image_path.suffix.lower() in EXIFREAD_EXTENSIONS:
        try:
            return _read_with_exifread(image_path, tags)
        except ImportError:
            if debug:
                print("`exifread` library not found.")
        except Exception as e:
            if debug:
                print(f"exifread failed on {image_path.name}: {e}")

    return None


def read_image_size(image_path: Path) -> tuple[int, int] | None:
    """Returns the decoded (width, height) of an image, or None if it cannot be decoded."""
    try:
        with Image.open(image_path) as img:
            img.load()
            return img.size
    except (OSError, ValueError):
        return None
