import argparse
import sys

from image_fixture_generator.config import load_config
from image_fixture_generator.generator import generate_images


def main(argv=None):
    """Main function to orchestrate the script execution."""
    parser = argparse.ArgumentParser(
        description="Generate placeholder images (JPEG, TIFF, WEBP, PNG, GIF) with embedded EXIF/GPS metadata."
    )
    parser.add_argument(
        "config",
        nargs="?",
        default=None,
        help="Optional JSON file with filename, width, height and outDir.",
    )
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        generate_images(config)
    except Exception as e:
        print(f"Error generating images: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
