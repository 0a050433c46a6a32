"""Command-line front door for lscol.

Parses CLI options, resolves the target directory, and reads its names.
Then renders them as colorized columns on standard output.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from functools import partial
from pathlib import Path
from typing import TextIO

from . import config
from .classify import classify_entry
from .listing import DirectoryUnavailableError, read_directory_names
from .render import render_columns
from .terminal import terminal_width
from .ui_theme import available_theme_names, resolve_theme

LOGGER_NAME = "lscol"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def setup_logger(verbose: bool) -> logging.Logger:
    """Route ``lscol`` log records to stderr; DEBUG when ``verbose``."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lscol",
        description="List directory entries in colorized columns sized to the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to list. Defaults to current directory.")
    parser.add_argument("--no-color", action="store_true", default=None, help="Disable color escape sequences.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column budget for the layout (default: terminal width).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr.")
    return parser


def render_listing(
    directory: Path,
    width: int,
    *,
    theme_name: str | None = None,
    no_color: bool = False,
) -> str:
    """Read, sort, classify, and lay out ``directory`` for ``width`` columns.

    Raises ``DirectoryUnavailableError`` when ``directory`` cannot be read.
    """
    listing = read_directory_names(directory).sorted()
    return render_columns(
        listing.names,
        listing.maxlen,
        width,
        classify=partial(classify_entry, directory=directory),
        theme=resolve_theme(theme_name, no_color=no_color),
    )


def write_listing(text: str, stream: TextIO | None = None) -> None:
    """Write rendered text, passing undecodable name bytes through unchanged."""
    if not text:
        return
    if stream is None:
        stream = sys.stdout
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(text)
        stream.flush()
        return
    stream.flush()
    buffer.write(os.fsencode(text))
    buffer.flush()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and print the listing for one directory.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. An unreadable directory exits with status 1.
    """
    args = build_parser().parse_args()
    logger = setup_logger(args.verbose)

    settings = config.load_config()
    no_color = args.no_color if args.no_color is not None else config.load_no_color(settings)
    theme_name = args.theme if args.theme is not None else config.load_theme_name(settings)

    if default_path is None:
        default_path = Path(".")
    path = Path(args.path) if args.path is not None else default_path
    width = args.width if args.width is not None else terminal_width()
    logger.debug("listing %s at width %d (theme=%s, no_color=%s)", path, width, theme_name, no_color)

    try:
        text = render_listing(path, width, theme_name=theme_name, no_color=no_color)
    except DirectoryUnavailableError as exc:
        raise SystemExit(f"lscol: {exc}") from exc
    write_listing(text)


if __name__ == "__main__":
    main()
