"""Rendering helpers for listing output."""

from .columns import COLUMN_SPACING, GridShape, compute_grid, format_cell, grid_rows, render_columns

__all__ = [
    "COLUMN_SPACING",
    "GridShape",
    "compute_grid",
    "format_cell",
    "grid_rows",
    "render_columns",
]
