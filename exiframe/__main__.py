#!/usr/bin/env python3
"""ExiFrame - framed photos with their camera settings.

This is the main CLI entry point for ExiFrame. It reads a photo, prints the
camera settings that would be overlaid on it, and optionally writes the
framed image.

Usage:
    python -m exiframe photo.jpg
    python -m exiframe photo.jpg --35mm --output framed.png
    python -m exiframe photo.heic --json
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ._version import __version__
from .config import ConfigManager
from .config.manager import ConfigError
from .exceptions import RenderError
from .render import EXPORT_FORMATS
from .session import FrameSession


def setup_logging(
    verbose: bool = False,
    config: Optional[ConfigManager] = None
) -> None:
    """Configure logging for the application.

    Args:
        verbose: If True, enable DEBUG level logging
        config: Configuration holding the optional log file settings
    """
    level = logging.DEBUG if verbose else logging.WARNING

    # Console handler with simpler format
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter('%(levelname)s - %(name)s - %(message)s')
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(console_handler)

    # Also log to file if configured
    log_file = config.get("logging.file") if config else None
    if not log_file:
        return

    try:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setLevel(
            getattr(logging, str(config.get("logging.level", "INFO")).upper(), logging.INFO)
        )
        file_handler.setFormatter(logging.Formatter(
            config.get(
                "logging.format",
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            )
        ))
        root_logger.addHandler(file_handler)
    except OSError as e:
        # Console logging still works without the file
        logging.getLogger(__name__).warning(f"Could not open log file {log_file}: {e}")


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="exiframe",
        description="ExiFrame - print a photo's camera settings and frame it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the overlay text for a photo
  python -m exiframe photo.jpg

  # Use the 35mm-equivalent focal length and save the framed image
  python -m exiframe photo.jpg --35mm --output framed.png

  # Print the extracted record as JSON
  python -m exiframe photo.jpg --json
"""
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ExiFrame {__version__}"
    )
    parser.add_argument(
        "photo",
        metavar="PHOTO",
        help="Path to the photo (JPEG, PNG, TIFF, HEIC with pillow-heif, ...)"
    )
    parser.add_argument(
        "--35mm",
        dest="focal_length_35mm",
        action="store_true",
        default=None,
        help="Show the 35mm-equivalent focal length"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Write the framed image to PATH"
    )
    parser.add_argument(
        "--format",
        dest="image_format",
        choices=EXPORT_FORMATS,
        type=str.upper,
        help="Framed image format (default: from config, PNG)"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the extracted record and overlay text as JSON"
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to config file (default: ~/.exiframe/config.yaml)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose debug logging"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress all output except errors"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ExiFrame CLI.

    Args:
        argv: Argument list (defaults to sys.argv)

    Returns:
        Exit code (0 success, 1 unexpected error, 2 config error, 3 bad input)
    """
    args = parse_arguments(argv)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager.load(config_path=args.config)
    except ConfigError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Configuration error: {e}")
        print(f"✗ Configuration Error: {e}", file=sys.stderr)
        return 2

    if args.quiet:
        logging.basicConfig(level=logging.ERROR)
    else:
        setup_logging(args.verbose, config)

    photo_path = Path(args.photo).expanduser()
    try:
        image_data = photo_path.read_bytes()
    except OSError as e:
        logger.error(f"Could not read {photo_path}: {e}")
        print(f"✗ Could not read photo: {photo_path}", file=sys.stderr)
        return 3

    try:
        with FrameSession.from_config(config) as session:
            if args.focal_length_35mm is not None:
                session.show_focal_length_in_35mm_film = args.focal_length_35mm

            exif = session.select(image_data).result()
            if exif is None:
                logger.warning(f"No metadata record for {photo_path}; showing defaults")

            overlay = session.overlay()

            if args.json:
                print(json.dumps({
                    "photo": str(photo_path),
                    "exif": exif.to_dict() if exif else None,
                    "overlay": overlay.to_dict(),
                }, indent=2, ensure_ascii=False))
            elif not args.quiet:
                for line in overlay.lines:
                    print(line)

            if args.output:
                image_format = args.image_format or config.get("frame.output_format", "PNG")
                output_path = Path(args.output).expanduser()
                output_path.write_bytes(
                    session.renderer.export(session.render(), image_format)
                )
                if not args.quiet and not args.json:
                    print(f"✓ Framed image saved to: {output_path}")

        return 0

    except RenderError as e:
        logger.error(f"Render error: {e}")
        print(f"✗ Render Error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        if not args.quiet:
            print(f"✗ Unexpected Error: {e}", file=sys.stderr)
            if not args.verbose:
                print("Run with --verbose for detailed error information", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
