"""
Lay out a dense activity map as a week-column / weekday-row grid.

Each column is one calendar week with Sunday on the top row. The first
column may be partial when the oldest day is not a Sunday.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from src.color_bucketer import resolve_color
from src.themes import Palette
from src.window_builder import stamp_to_date, sunday_weekday

SATURDAY = 6


@dataclass(frozen=True)
class DayRecord:
    """One rendered day of the commit card."""

    date: str
    commits: int
    color: str
    month: int
    weekday: int
    iso_week: int
    x: int
    y: int

    def to_dict(self) -> dict:
        return asdict(self)


def map_grid(completed: Mapping[int, int], palette: Palette) -> list[DayRecord]:
    """
    Convert a dense activity map into grid-positioned day records.

    Args:
        completed: Dense activity map from complete_data()
        palette: Palette used to color each day

    Returns:
        List of DayRecord in ascending chronological order. x starts at 0
        and moves to the next column after every Saturday; y is the weekday.
    """
    records = []
    x = 0

    for stamp in sorted(completed):
        day = stamp_to_date(stamp)
        weekday = sunday_weekday(day)
        commits = completed[stamp]

        records.append(
            DayRecord(
                date=day.isoformat(),
                commits=commits,
                color=resolve_color(commits, palette),
                month=day.month,
                weekday=weekday,
                iso_week=day.isocalendar()[1],
                x=x,
                y=weekday,
            )
        )

        if weekday == SATURDAY:
            x += 1

    return records
