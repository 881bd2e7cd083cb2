# =============================================================================
# epubgrid Command Line
# =============================================================================
# Renders a single chapter file to standard output. Useful for previewing
# how a chapter will look in the terminal reader, and for debugging markup.
#
# The command:
#   - Loads configuration (XDG location or --config)
#   - Collects image resources from a directory (--resources)
#   - Renders the chapter and prints the grid, plain or styled (--color)
# =============================================================================

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from epubgrid import __app_name__, __version__
from epubgrid.config import Config, ConfigError, setup_logging
from epubgrid.core import items_from_directory
from epubgrid.rendering import parse_text
from epubgrid.rendering.display import to_rich_text

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog=__app_name__,
        description="Render an e-book chapter as a terminal character grid",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "file",
        type=Path,
        help="Chapter markup file (XHTML/HTML)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (default: XDG config location)",
    )

    parser.add_argument(
        "--width",
        type=int,
        help="Grid width in columns (overrides config)",
    )

    parser.add_argument(
        "--resources",
        type=Path,
        help="Directory that image sources are resolved against",
    )

    parser.add_argument(
        "--color",
        action="store_true",
        help="Print with bold and color styles",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode (verbose logging)",
    )

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for epubgrid.

    Returns:
        Exit code: 0 on success, 1 if the markup could not be fully
        rendered, 2 on a configuration error.
    """
    args = parse_args(argv)

    try:
        config = Config.load(args.config)
        if args.width is not None:
            config.rendering.width = args.width
            config.rendering.image_width = min(config.rendering.image_width, args.width)
            config.validate()
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        return 2

    setup_logging(config.logging, debug=args.debug)

    items = items_from_directory(args.resources) if args.resources else []
    logger.debug(f"Loaded {len(items)} resources")

    try:
        with open(args.file, "rb") as f:
            result = parse_text(f, items, config.rendering)
    except OSError as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    if args.color:
        console = Console(highlight=False, soft_wrap=True)
        console.print(to_rich_text(result.document))
    else:
        print(result.document.to_text())

    if not result.success:
        print(f"Rendering stopped early: {result.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
