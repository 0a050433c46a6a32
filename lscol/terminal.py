"""Terminal geometry probe for the column renderer.

The width is read once per run from the output stream's file descriptor and
passed to rendering as a plain integer.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

DEFAULT_TERMINAL_WIDTH = 80

logger = logging.getLogger(__name__)


def terminal_width(stream: TextIO | None = None) -> int:
    """Return display columns of ``stream`` (stdout by default).

    Falls back to ``DEFAULT_TERMINAL_WIDTH`` when the stream is not a
    terminal, exposes no file descriptor, or reports a non-positive width.
    ``COLUMNS`` and other environment hints are ignored.
    """
    if stream is None:
        stream = sys.stdout
    try:
        fd = stream.fileno()
        if not os.isatty(fd):
            logger.debug("output is not a terminal; using width %d", DEFAULT_TERMINAL_WIDTH)
            return DEFAULT_TERMINAL_WIDTH
        columns = os.get_terminal_size(fd).columns
    except (AttributeError, ValueError, OSError) as exc:
        logger.debug("terminal size query failed (%s); using width %d", exc, DEFAULT_TERMINAL_WIDTH)
        return DEFAULT_TERMINAL_WIDTH
    if columns <= 0:
        logger.debug("terminal reported width %d; using width %d", columns, DEFAULT_TERMINAL_WIDTH)
        return DEFAULT_TERMINAL_WIDTH
    return columns
