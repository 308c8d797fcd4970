import shutil
import sys
from pathlib import Path

# Copy of exiftool shipped next to the package, used when none is installed
BUNDLED_BIN_DIR = Path(__file__).parent / "bin"


def get_exiftool_path(bin_dir: Path = BUNDLED_BIN_DIR) -> str | None:
    """
    Returns the exiftool executable to launch for writing fixtures.

    An install on PATH wins; otherwise `bin_dir` is searched for `exiftool`
    (or `exiftool.exe` on Windows). None means no executable was found.
    """
    if shutil.which("exiftool"):
        return "exiftool"

    names = ["exiftool.exe", "exiftool"] if sys.platform == "win32" else ["exiftool"]
    for name in names:
        candidate = bin_dir / name
        if candidate.is_file():
            return str(candidate)
    return None


def fixture_path(out_dir: str | Path, filename: str, ext: str) -> Path:
    """Builds the output path `<out_dir>/<filename>.<ext>`."""
    return Path(out_dir) / f"{filename}.{ext}"
