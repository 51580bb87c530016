"""
Color palettes for the commit activity card.
"""

from dataclasses import dataclass
from enum import Enum


class UnknownThemeError(ValueError):
    """Raised when a theme name has no palette."""

    pass


class Theme(str, Enum):
    """Supported card themes."""

    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class Palette:
    """Fill colors for each intensity level plus card chrome."""

    none: str
    less: str
    medium: str
    height: str
    more: str
    bg: str
    border: str


PALETTES: dict[Theme, Palette] = {
    Theme.LIGHT: Palette(
        none="#ebedf0",
        less="#9be9a8",
        medium="#40c463",
        height="#30a14e",
        more="#216e39",
        bg="#ffffff",
        border="#d0d7de",
    ),
    Theme.DARK: Palette(
        none="#161b22",
        less="#0e4429",
        medium="#006d32",
        height="#26a641",
        more="#39d353",
        bg="#0d1117",
        border="#30363d",
    ),
}


def parse_theme(theme: Theme | str) -> Theme:
    """
    Convert a theme name into a Theme.

    Args:
        theme: Theme member or its name ("dark" or "light")

    Returns:
        The matching Theme

    Raises:
        UnknownThemeError: If the name is not a known theme
    """
    if isinstance(theme, Theme):
        return theme
    try:
        return Theme(theme)
    except ValueError:
        valid = ", ".join(t.value for t in Theme)
        raise UnknownThemeError(
            f"Unknown theme '{theme}'. Expected one of: {valid}"
        ) from None


def get_palette(theme: Theme | str) -> Palette:
    """Look up the palette for a theme, rejecting unknown names."""
    return PALETTES[parse_theme(theme)]
