import json
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FILENAME = "example"
DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 300
DEFAULT_OUT_DIR = "./output"

# Largest side the GIF and TIFF encoders can store (16-bit dimensions)
MAX_DIMENSION = 65535


@dataclass(frozen=True)
class ImageGenConfig:
    filename: str = DEFAULT_FILENAME
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    out_dir: str = DEFAULT_OUT_DIR


def _valid_text(value, default: str) -> str:
    if isinstance(value, str) and value:
        return value
    return default


def _valid_size(value, default: int) -> int:
    # bool is a subclass of int, but `true` is not a pixel count
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    if value <= 0 or value > MAX_DIMENSION:
        return default
    return int(value)


def resolve_config(data) -> ImageGenConfig:
    """
    Merges a parsed JSON object over the defaults.

    Every recognized field is checked on its own: a missing or invalid value
    falls back to that field's default without affecting the others.
    Unrecognized keys are ignored.

    Args:
        data: The parsed JSON value. Anything other than a dict yields the defaults.

    Returns:
        A fully populated ImageGenConfig.
    """
    if not isinstance(data, dict):
        return ImageGenConfig()

    return ImageGenConfig(
        filename=_valid_text(data.get("filename"), DEFAULT_FILENAME),
        width=_valid_size(data.get("width"), DEFAULT_WIDTH),
        height=_valid_size(data.get("height"), DEFAULT_HEIGHT),
        out_dir=_valid_text(data.get("outDir"), DEFAULT_OUT_DIR),
    )


def as_json_fields(config: ImageGenConfig) -> dict:
    """Returns the configuration keyed the way the JSON file spells it."""
    return {
        "filename": config.filename,
        "width": config.width,
        "height": config.height,
        "outDir": config.out_dir,
    }


def load_config(config_path: str | None = None) -> ImageGenConfig:
    """
    Reads the optional JSON configuration file and resolves it against the defaults.

    Never raises: an unreadable or malformed file is reported and the defaults are used.
    """
    data = {}

    if config_path and Path(config_path).is_file():
        try:
            raw = Path(config_path).read_text(encoding="utf-8")
            data = json.loads(raw)
            print(f"Loaded configuration from: {config_path}")
        except (OSError, ValueError) as e:
            print(f"Failed to parse config JSON, using defaults. {e}", file=sys.stderr)
            data = {}
    else:
        print("No configuration file provided or file not found, using defaults.")

    config = resolve_config(data)
    print(f"Configuration: {as_json_fields(config)}")
    return config
