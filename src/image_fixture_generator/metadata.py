import logging
from pathlib import Path

import exiftool

from image_fixture_generator.utils import get_exiftool_path

logger = logging.getLogger(__name__)

FIXTURE_TIMESTAMP = "2025:07:25 12:00:00"

# GPS fix for Tokyo, Japan. ExifTool takes decimal degrees and converts them itself.
GPS_TAGS = {
    "GPSLatitudeRef": "N",
    "GPSLatitude": 35.6895,
    "GPSLongitudeRef": "E",
    "GPSLongitude": 139.6917,
    "GPSAltitudeRef": "0",
    "GPSAltitude": 44,
    "GPSTimeStamp": "12:00:00",
    "GPSSatellites": "U",
    "GPSStatus": "A",
    "GPSMeasureMode": "2",
    "GPSDOP": 1,
    "GPSSpeedRef": "K",
    "GPSSpeed": 0,
    "GPSTrackRef": "T",
    "GPSTrack": 0,
    "GPSImgDirectionRef": "T",
    "GPSImgDirection": 0,
    "GPSMapDatum": "WGS-84",
    "GPSDateStamp": "2025:07:25",
    "GPSDifferential": "0",
}

EXIF_TAGS = {
    "AllDates": FIXTURE_TIMESTAMP,
    "DateTimeOriginal": FIXTURE_TIMESTAMP,
    "DateTimeDigitized": FIXTURE_TIMESTAMP,
    "ImageDescription": "Test image for EXIF/GPS extraction",
    "Make": "TestCamera",
    "Model": "TestModel 1.0",
    "Software": "ImageInfoTest",
    "Copyright": "(C) 2025 Example",
    "UserComment": "Test comment for EXIF extraction",
    "FlashpixVersion": "0100",
    "ColorSpace": "sRGB",
}

# Replace the file instead of leaving a `<name>_original` backup next to it
OVERWRITE_PARAMS = ["-overwrite_original"]


def build_metadata(width: int, height: int) -> dict:
    """Returns the tag dictionary written into every fixture."""
    return {
        **EXIF_TAGS,
        "PixelXDimension": width,
        "PixelYDimension": height,
        **GPS_TAGS,
    }


class ExifToolWriter:
    """
    Writes tag dictionaries into files through a single long-running ExifTool process.

    The process is started by `start()` (or on entering the context manager) and
    must be released with `close()`.
    """

    def __init__(self, executable: str | None = None):
        self.executable = executable or get_exiftool_path()
        self._helper = None

    @property
    def running(self) -> bool:
        return self._helper is not None and self._helper.running

    def start(self):
        """
        Launches ExifTool.

        Raises:
            FileNotFoundError / ExifToolException: if the executable cannot be started.
        """
        if self.running:
            return
        # Configure ExifToolHelper with the custom path if found
        kwargs = {"executable": self.executable} if self.executable else {}
        # No "-n": values are given in their human readable form ("sRGB", decimal degrees)
        helper = exiftool.ExifToolHelper(common_args=[], **kwargs)
        helper.run()
        self._helper = helper
        logger.debug("Started exiftool (%s)", self.executable or "default executable")

    def write(self, path: str | Path, tags: dict):
        """Writes `tags` into the file at `path`, overwriting it in place."""
        if not self.running:
            self.start()
        self._helper.set_tags([str(path)], tags, params=OVERWRITE_PARAMS)

    def close(self):
        if self._helper is None:
            return
        if self._helper.running:
            self._helper.terminate()
            logger.debug("Terminated exiftool")
        self._helper = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
