"""
Fill gaps in a sparse activity map so every day of the window is present.
"""

from collections.abc import Mapping

from src.window_builder import SECONDS_PER_DAY, Window


def normalize_keys(raw: Mapping) -> dict[int, int]:
    """
    Convert activity map keys to integer timestamps.

    Keys may be ints or strings holding a decimal timestamp. Malformed keys
    are a caller error and the int() failure propagates.
    """
    return {int(key): count for key, count in raw.items()}


def complete_data(raw: Mapping, window: Window) -> dict[int, int]:
    """
    Build a dense activity map covering the whole window.

    Args:
        raw: Sparse activity map (date key -> commit count)
        window: Window from build_window()

    Returns:
        Dict with exactly window.days entries, newest first. Days absent
        from raw default to 0; raw entries outside the window are dropped.
    """
    assert window.days > 0, f"window must cover at least one day, got {window.days}"

    activity = normalize_keys(raw)
    completed: dict[int, int] = {}

    for index in range(window.days):
        key = window.anchor_stamp - SECONDS_PER_DAY * index
        completed[key] = activity.get(key, 0)

    return completed
