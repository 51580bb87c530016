"""
Serialize day records into a self-contained SVG commit card.
"""

from collections.abc import Sequence

from src.grid_mapper import DayRecord
from src.themes import Palette

CARD_WIDTH = 640
CARD_HEIGHT = 100
CELL_SIZE = 10
CELL_RADIUS = 2
UNIT = 12
OFFSET_X = 8
OFFSET_Y = 8


def tooltip(record: DayRecord) -> str:
    return f"{record.commits} commits on {record.date}"


def render_day(record: DayRecord) -> str:
    """Render one day as a rounded square with a hover tooltip."""
    x = record.x * UNIT + OFFSET_X
    y = record.y * UNIT + OFFSET_Y
    return (
        f'<rect x="{x}" y="{y}" width="{CELL_SIZE}" height="{CELL_SIZE}" '
        f'fill="{record.color}" rx="{CELL_RADIUS}" ry="{CELL_RADIUS}" '
        f'data-commits="{record.commits}">'
        f"<title>{tooltip(record)}</title>"
        "</rect>"
    )


def render_days(records: Sequence[DayRecord]) -> str:
    """
    Render all days, newest first.

    Args:
        records: Day records in ascending chronological order

    Returns:
        Concatenated <rect> elements in reverse chronological order
    """
    return "".join(render_day(record) for record in reversed(records))


def render_svg(records: Sequence[DayRecord], palette: Palette) -> str:
    """
    Wrap the rendered days in the fixed-size card canvas.

    Args:
        records: Day records in ascending chronological order
        palette: Palette supplying background and border colors

    Returns:
        SVG markup string
    """
    style = (
        f"border:1px solid {palette.border};"
        f"background:{palette.bg};"
        "border-radius:4px"
    )
    return (
        f'<svg version="1.1" baseProfile="full" '
        f'width="{CARD_WIDTH}" height="{CARD_HEIGHT}" '
        f'xmlns="http://www.w3.org/2000/svg" style="{style}">'
        f"<g>{render_days(records)}</g>"
        "</svg>"
    )
