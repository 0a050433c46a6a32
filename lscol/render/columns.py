"""Down-then-across column layout for sorted listing names.

Column ``c`` of the grid holds the sorted slice ``[c * rows, (c + 1) * rows)``,
so reading columns top to bottom, left to right restores the sorted order.
The final column may be shorter than the others.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from ..classify import ColorCategory
from ..ui_theme import DEFAULT_THEME, ListingTheme

COLUMN_SPACING = 2


@dataclass(frozen=True)
class GridShape:
    """Column count, row count, and cell width for one render."""

    columns: int
    rows: int
    column_width: int


def compute_grid(count: int, maxlen: int, terminal_width: int, spacing: int = COLUMN_SPACING) -> GridShape:
    """Size a grid for ``count`` names no longer than ``maxlen``.

    There is always at least one column, even when a single name is wider
    than the terminal.
    """
    column_width = maxlen + spacing
    columns = max(1, terminal_width // column_width)
    rows = -(-count // columns) if count > 0 else 0
    return GridShape(columns=columns, rows=rows, column_width=column_width)


def grid_rows(count: int, shape: GridShape) -> Iterator[list[int]]:
    """Yield, row by row, the name indices placed in that row."""
    for row in range(shape.rows):
        indices: list[int] = []
        for col in range(shape.columns):
            idx = col * shape.rows + row
            if idx >= count:
                continue
            indices.append(idx)
        yield indices


def format_cell(name: str, category: ColorCategory, theme: ListingTheme, width: int | None) -> str:
    """Pad ``name`` to ``width`` (``None`` for no padding) inside its color wrap."""
    text = name.ljust(width) if width is not None else name
    start = theme.start_for(category)
    if not start:
        return text
    return f"{start}{text}{theme.reset}"


def render_columns(
    names: Sequence[str],
    maxlen: int,
    terminal_width: int,
    *,
    classify: Callable[[str], ColorCategory] | None = None,
    theme: ListingTheme = DEFAULT_THEME,
    spacing: int = COLUMN_SPACING,
) -> str:
    """Render sorted ``names`` as colorized columns fitting ``terminal_width``.

    ``classify`` maps a name to its category at render time; without it every
    name is ``DEFAULT``. The last cell of each row is left unpadded so rows
    carry no trailing whitespace. No names render as the empty string.
    """
    count = len(names)
    if count == 0:
        return ""

    shape = compute_grid(count, maxlen, terminal_width, spacing)
    out: list[str] = []
    for indices in grid_rows(count, shape):
        last = len(indices) - 1
        for position, idx in enumerate(indices):
            name = names[idx]
            category = classify(name) if classify is not None else ColorCategory.DEFAULT
            width = None if position == last else shape.column_width
            out.append(format_cell(name, category, theme, width))
        out.append("\n")
    return "".join(out)


__all__ = [
    "COLUMN_SPACING",
    "GridShape",
    "compute_grid",
    "format_cell",
    "grid_rows",
    "render_columns",
]
