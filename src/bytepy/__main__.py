"""
Entry point for bytepy.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core.editor import HexEditor
from .core.syntax import DumpHighlighter
from .ui.shell import CommandShell

LOGS_FORMAT = ("%(asctime)s %(name)s %(levelname)s: %(message)s", "%Y-%m-%d %H:%M:%S")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog="bytepy",
        description="bytepy - A terminal based hex editor"
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=str,
        help="File to open at startup"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Do not highlight hex dumps"
    )
    parser.add_argument(
        "--allow-extend",
        action="store_true",
        help="Let edits write past the end of the file"
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Write a debug log to this file"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log at DEBUG level instead of INFO"
    )
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> logging.Logger:
    """Configure the package logger. Nothing is logged unless a file is given."""

    logger = logging.getLogger("bytepy")
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter(*LOGS_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    return logger


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)

    try:
        logger = setup_logging(args.log_file, args.verbose)
    except OSError as e:
        print(f"Error opening log file {args.log_file}: {e}", file=sys.stderr)
        return 1

    logger.info("Starting bytepy")

    highlighter = DumpHighlighter(enabled=not args.no_color and sys.stdout.isatty())

    with HexEditor(allow_extend=args.allow_extend) as editor:
        shell = CommandShell(editor, highlighter)
        shell.run(args.file)

    logger.info("Exiting bytepy")
    return 0


if __name__ == "__main__":
    sys.exit(main())
