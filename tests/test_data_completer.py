"""
Tests for the data completer module.
"""

from datetime import date, timedelta

import pytest

from src.data_completer import complete_data, normalize_keys
from src.window_builder import SECONDS_PER_DAY, Window, build_window, date_key

TODAY = date(2024, 1, 10)


class TestNormalizeKeys:
    """Tests for key normalization."""

    def test_string_keys_become_ints(self):
        assert normalize_keys({"1704902400": 5}) == {1704902400: 5}

    def test_int_keys_are_kept(self):
        assert normalize_keys({1704902400: 5}) == {1704902400: 5}

    def test_malformed_key_propagates(self):
        with pytest.raises(ValueError):
            normalize_keys({"2024-01-10": 5})


class TestCompleteData:
    """Tests for the complete_data function."""

    def test_empty_input_fills_every_day_with_zero(self):
        window = build_window(TODAY)
        result = complete_data({}, window)

        assert len(result) == window.days
        assert set(result.values()) == {0}

    def test_keys_are_consecutive_days_ending_today(self):
        window = build_window(TODAY)
        result = complete_data({}, window)

        keys = sorted(result)
        assert keys[-1] == date_key(TODAY)
        for older, newer in zip(keys, keys[1:]):
            assert newer - older == SECONDS_PER_DAY

    def test_existing_counts_are_kept(self):
        window = build_window(TODAY)
        yesterday = TODAY - timedelta(days=1)
        raw = {date_key(TODAY): 5, date_key(yesterday): 2}

        result = complete_data(raw, window)

        assert result[date_key(TODAY)] == 5
        assert result[date_key(yesterday)] == 2
        assert sum(result.values()) == 7

    def test_string_keys_are_matched(self):
        window = build_window(TODAY)
        result = complete_data({str(date_key(TODAY)): 4}, window)

        assert result[date_key(TODAY)] == 4

    def test_days_outside_window_are_dropped(self):
        window = build_window(TODAY)
        raw = {
            date_key(TODAY + timedelta(days=1)): 9,
            date_key(TODAY - timedelta(days=window.days)): 9,
        }

        result = complete_data(raw, window)

        assert len(result) == window.days
        assert sum(result.values()) == 0

    def test_keys_off_the_anchor_hour_are_ignored(self):
        window = build_window(TODAY)
        raw = {date_key(TODAY, anchor_hour=3): 5}

        result = complete_data(raw, window)

        assert sum(result.values()) == 0

    def test_single_day_window(self):
        window = Window(days=1, anchor_stamp=date_key(TODAY))
        assert complete_data({date_key(TODAY): 1}, window) == {date_key(TODAY): 1}

    def test_empty_window_is_a_programming_error(self):
        window = Window(days=0, anchor_stamp=date_key(TODAY))
        with pytest.raises(AssertionError):
            complete_data({}, window)
