"""
Map daily commit counts to intensity levels and palette colors.
"""

from enum import Enum

from src.themes import Palette


class IntensityLevel(str, Enum):
    """Discrete heat-map intensity buckets, named after their palette slots."""

    NONE = "none"
    LESS = "less"
    MEDIUM = "medium"
    HEIGHT = "height"
    MORE = "more"


def calculate_level(count: int) -> IntensityLevel:
    """
    Calculate intensity level for heatmap coloring.

    Args:
        count: Number of commits for the day

    Returns:
        Level bucket:
            none: 0 commits (or fewer)
            less: 1-3 commits
            medium: 4-6 commits
            height: 7-10 commits
            more: 11+ commits
    """
    if count <= 0:
        return IntensityLevel.NONE
    elif count <= 3:
        return IntensityLevel.LESS
    elif count <= 6:
        return IntensityLevel.MEDIUM
    elif count <= 10:
        return IntensityLevel.HEIGHT
    else:
        return IntensityLevel.MORE


def resolve_color(count: int, palette: Palette) -> str:
    """Return the palette color for a day's commit count."""
    return getattr(palette, calculate_level(count).value)
