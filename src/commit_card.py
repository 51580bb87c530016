"""
Commit activity card: the full window -> grid -> color -> SVG pipeline.
"""

import threading
from collections.abc import Mapping
from datetime import date

from src.data_completer import complete_data
from src.grid_mapper import DayRecord, map_grid
from src.renderer import render_svg
from src.themes import Palette, Theme, get_palette, parse_theme
from src.window_builder import ANCHOR_HOUR, Window, build_window


def layout_records(
    data: Mapping,
    palette: Palette,
    today: date | None = None,
    anchor_hour: int = ANCHOR_HOUR,
) -> tuple[Window, list[DayRecord]]:
    """Build the window and its colored day records, oldest first."""
    window = build_window(today, anchor_hour)
    completed = complete_data(data, window)
    return window, map_grid(completed, palette)


def build_records(
    data: Mapping,
    theme: Theme | str = Theme.LIGHT,
    today: date | None = None,
    anchor_hour: int = ANCHOR_HOUR,
) -> tuple[Window, list[DayRecord]]:
    """
    Run the pipeline up to the grid-positioned, colored day records.

    Args:
        data: Sparse activity map (date key -> commit count)
        theme: Theme used to color the days
        today: Override for today's date (for testing)
        anchor_hour: Hour of day (0-23) day keys are anchored to

    Returns:
        Tuple of the window and its day records, oldest first

    Raises:
        UnknownThemeError: If theme is not a known theme
    """
    return layout_records(data, get_palette(theme), today, anchor_hour)


def render_card(
    data: Mapping,
    theme: Theme | str = Theme.LIGHT,
    today: date | None = None,
    anchor_hour: int = ANCHOR_HOUR,
) -> str:
    """Render the commit activity card for a sparse activity map as SVG."""
    palette = get_palette(theme)
    _, records = layout_records(data, palette, today, anchor_hour)
    return render_svg(records, palette)


class CommitCard:
    """
    A commit activity card bound to one activity map.

    The theme is the only mutable state. Each render snapshots it first, so
    set_theme() running alongside render() affects only later renders.
    """

    def __init__(
        self,
        data: Mapping,
        theme: Theme | str = Theme.LIGHT,
        anchor_hour: int = ANCHOR_HOUR,
    ):
        """
        Initialize the card.

        Args:
            data: Sparse activity map (date key -> commit count)
            theme: Initial theme, "light" by default
            anchor_hour: Hour of day (0-23) day keys are anchored to

        Raises:
            UnknownThemeError: If theme is not a known theme
        """
        self._lock = threading.Lock()
        self._theme = parse_theme(theme)
        self.data = dict(data)
        self.anchor_hour = anchor_hour

    @property
    def theme(self) -> Theme:
        with self._lock:
            return self._theme

    def set_theme(self, theme: Theme | str) -> None:
        """Change the theme used by subsequent renders."""
        parsed = parse_theme(theme)
        with self._lock:
            self._theme = parsed

    def records(self, today: date | None = None) -> list[DayRecord]:
        """Return the colored day records, oldest first."""
        _, records = build_records(self.data, self.theme, today, self.anchor_hour)
        return records

    def render(self, today: date | None = None) -> str:
        """Render the card as an SVG string."""
        return render_card(self.data, self.theme, today, self.anchor_hour)
