"""
Build the trailing date window covered by the commit card.

The window always starts on a Sunday and ends today: 51 full weeks plus
the partial current week, giving 52 week columns.
"""

from dataclasses import dataclass
from datetime import date, datetime, timezone

SECONDS_PER_DAY = 86400
FULL_WEEKS = 51
ANCHOR_HOUR = 16


@dataclass(frozen=True)
class Window:
    """Day count and the end-of-window anchor timestamp."""

    days: int
    anchor_stamp: int


def sunday_weekday(day: date) -> int:
    """Return the weekday index with Sunday as 0 and Saturday as 6."""
    return (day.weekday() + 1) % 7


def date_key(day: date, anchor_hour: int = ANCHOR_HOUR) -> int:
    """
    Return the activity map key for a calendar day.

    Keys are the Unix timestamp of the day at a fixed UTC hour, so that
    stepping back in whole days of 86400 seconds always lands on the
    previous calendar day.

    Args:
        day: Calendar day
        anchor_hour: Hour of day (0-23) the key is anchored to

    Returns:
        Timestamp in seconds
    """
    if not 0 <= anchor_hour <= 23:
        raise ValueError(f"anchor_hour must be between 0 and 23, got {anchor_hour}")

    anchored = datetime(day.year, day.month, day.day, anchor_hour, tzinfo=timezone.utc)
    return int(anchored.timestamp())


def utc_today() -> date:
    """Return the current calendar day in UTC, the clock day keys are built on."""
    return datetime.now(timezone.utc).date()


def stamp_to_date(stamp: int) -> date:
    """Inverse of date_key: the calendar day an anchored timestamp falls on."""
    return datetime.fromtimestamp(stamp, tz=timezone.utc).date()


def build_window(
    today: date | None = None, anchor_hour: int = ANCHOR_HOUR
) -> Window:
    """
    Compute the window ending today.

    Args:
        today: Override for today's date, the current UTC date by default
        anchor_hour: Hour of day (0-23) day keys are anchored to

    Returns:
        Window with days = 51*7 + weekday + 1 (Sunday = 0)
    """
    if today is None:
        today = utc_today()

    days = FULL_WEEKS * 7 + sunday_weekday(today) + 1
    return Window(days=days, anchor_stamp=date_key(today, anchor_hour))
