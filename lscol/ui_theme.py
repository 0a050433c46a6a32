"""Listing color palettes and selection helpers.

A theme maps each file-type category to an SGR start sequence. The plain theme
carries empty sequences and is used when color is disabled.
"""

from __future__ import annotations

from dataclasses import dataclass

from .classify import ColorCategory


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the column renderer."""

    name: str
    directory: str
    symlink: str
    special_device: str
    executable: str
    archive: str
    default: str
    reset: str

    def start_for(self, category: ColorCategory) -> str:
        """Return the start sequence for ``category`` (empty for no color)."""
        return getattr(self, category.value)


DEFAULT_THEME = ListingTheme(
    name="default",
    directory="\033[1;34m",
    symlink="\033[1;35m",
    special_device="\033[7m",
    executable="\033[1;32m",
    archive="\033[1;31m",
    default="",
    reset="\033[0m",
)

VIVID_THEME = ListingTheme(
    name="vivid",
    directory="\033[1;38;5;33m",
    symlink="\033[1;38;5;201m",
    special_device="\033[7m",
    executable="\033[1;38;5;46m",
    archive="\033[1;38;5;196m",
    default="",
    reset="\033[0m",
)

PLAIN_THEME = ListingTheme(
    name="plain",
    directory="",
    symlink="",
    special_device="",
    executable="",
    archive="",
    default="",
    reset="",
)

_THEMES: dict[str, ListingTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    VIVID_THEME.name: VIVID_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> ListingTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "ListingTheme",
    "DEFAULT_THEME",
    "VIVID_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
