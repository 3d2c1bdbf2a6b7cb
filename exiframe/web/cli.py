#!/usr/bin/env python3
"""CLI entry point for the ExiFrame web API server."""

import argparse
import logging
import sys
from typing import List, Optional

from .app import create_app
from ..config import ConfigManager


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the web server.

    Args:
        verbose: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Reduce noise from werkzeug in non-debug mode
    if not verbose:
        logging.getLogger('werkzeug').setLevel(logging.WARNING)


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description="ExiFrame Web API - frame photos over HTTP",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start web server with host/port from config (default 127.0.0.1:5050)
  exiframe-web

  # Start on custom port
  exiframe-web --port 8080

  # Frame a photo
  curl -F photo=@photo.jpg -F focal_length_35mm=true \\
       http://localhost:5050/api/frame -o framed.png
"""
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Port to run the server on (default: web.port, 5050)"
    )
    parser.add_argument(
        "--host",
        help="Host to bind to (default: web.host, 127.0.0.1)"
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to ExiFrame config file (default: ~/.exiframe/config.yaml)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode with auto-reload"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the ExiFrame web server.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_arguments(argv)

    setup_logging(args.verbose or args.debug)
    logger = logging.getLogger(__name__)

    try:
        config = ConfigManager.load(config_path=args.config)
        app = create_app(debug=args.debug, config=config)

        host = args.host or config.get("web.host", "127.0.0.1")
        port = args.port or config.get("web.port", 5050)

        print()
        print("=" * 60)
        print("  ExiFrame Web API")
        print("=" * 60)
        print(f"  Server running at: http://{host}:{port}")
        print(f"    - POST http://{host}:{port}/api/exif")
        print(f"    - POST http://{host}:{port}/api/frame")
        print("  Press Ctrl+C to stop the server")
        print("=" * 60)
        print()

        app.run(
            host=host,
            port=port,
            debug=args.debug,
            threaded=True,
            use_reloader=args.debug
        )

        return 0

    except KeyboardInterrupt:
        print()
        print("Server stopped.")
        return 0

    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=args.verbose)
        print(f"\nError: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
