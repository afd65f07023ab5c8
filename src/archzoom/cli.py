"""Command-line interface for archzoom."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from archzoom.errors import ArchzoomError
from archzoom.pipeline import run

logger = logging.getLogger("archzoom")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="archzoom",
        description="Package/class architecture report from imported class descriptors.",
    )
    parser.add_argument(
        "classes",
        type=Path,
        help="JSON dump of the imported class descriptors",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Output directory (default: ./archzoom-report)",
    )
    parser.add_argument(
        "--include-only",
        nargs="+",
        default=None,
        metavar="PREFIX",
        help="Only show classes and packages at or below these dotted names",
    )
    parser.add_argument(
        "--ignore-super-constructor",
        action="store_true",
        default=None,
        help="Leave out calls to super constructors",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="Directory holding .archzoom.toml or pyproject.toml",
    )
    parser.add_argument(
        "--open",
        action="store_true",
        dest="open_browser",
        help="Open the generated report in a browser",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("archzoom").setLevel(logging.DEBUG)

    try:
        run(
            args.classes,
            output_dir=args.output,
            include_only=args.include_only,
            ignore_super_constructor=args.ignore_super_constructor,
            config_dir=args.config_dir,
            open_browser=args.open_browser,
        )
    except ArchzoomError as e:
        logger.error("%s", e)
        sys.exit(1)
