"""
Tests for the grid mapper module.
"""

from datetime import date, timedelta

from src.data_completer import complete_data
from src.grid_mapper import DayRecord, map_grid
from src.themes import PALETTES, Theme
from src.window_builder import build_window, date_key

TODAY = date(2024, 1, 10)
LIGHT = PALETTES[Theme.LIGHT]


def _records(raw=None, today=TODAY, palette=LIGHT):
    completed = complete_data(raw or {}, build_window(today))
    return map_grid(completed, palette)


class TestMapGrid:
    """Tests for the map_grid function."""

    def test_one_record_per_day(self):
        records = _records()
        assert len(records) == 361
        assert len({r.date for r in records}) == 361

    def test_records_are_oldest_first(self):
        records = _records()

        assert records[0].date == "2023-01-15"
        assert records[-1].date == "2024-01-10"
        dates = [r.date for r in records]
        assert dates == sorted(dates)

    def test_first_record_is_first_column_sunday(self):
        first = _records()[0]

        assert first.x == 0
        assert first.y == 0
        assert first.weekday == 0

    def test_row_matches_weekday(self):
        for record in _records():
            assert record.y == record.weekday
            expected = (date.fromisoformat(record.date).weekday() + 1) % 7
            assert record.weekday == expected

    def test_column_advances_only_after_saturday(self):
        records = _records()

        for previous, current in zip(records, records[1:]):
            if previous.weekday == 6:
                assert current.x == previous.x + 1
            else:
                assert current.x == previous.x

    def test_today_is_in_last_column(self):
        last = _records()[-1]

        assert last.x == 51
        assert last.y == 3

    def test_columns_hold_at_most_seven_days(self):
        records = _records()
        per_column = {}
        for record in records:
            per_column.setdefault(record.x, []).append(record.y)

        assert len(per_column) == 52
        for rows in per_column.values():
            assert rows == sorted(rows)
            assert len(rows) <= 7

    def test_partial_first_column(self):
        """A hand-built map starting midweek yields a short first column."""
        start = date(2024, 1, 3)  # Wednesday
        completed = {date_key(start + timedelta(days=i)): 0 for i in range(7)}

        records = map_grid(completed, LIGHT)

        assert [r.x for r in records] == [0, 0, 0, 0, 1, 1, 1]
        assert [r.y for r in records] == [3, 4, 5, 6, 0, 1, 2]

    def test_calendar_fields(self):
        last = _records()[-1]

        assert last.month == 1
        assert last.iso_week == 2
        assert last.date == "2024-01-10"

    def test_commits_and_colors(self):
        records = _records({date_key(TODAY): 5})
        today = records[-1]

        assert today.commits == 5
        assert today.color == LIGHT.medium
        for record in records[:-1]:
            assert record.commits == 0
            assert record.color == LIGHT.none

    def test_sorts_unordered_input(self):
        completed = {
            date_key(date(2024, 1, 9)): 1,
            date_key(date(2024, 1, 7)): 2,
            date_key(date(2024, 1, 8)): 3,
        }

        records = map_grid(completed, LIGHT)

        assert [r.commits for r in records] == [2, 3, 1]

    def test_to_dict(self):
        record = DayRecord(
            date="2024-01-10", commits=1, color="#fff", month=1,
            weekday=3, iso_week=2, x=0, y=3,
        )

        assert record.to_dict() == {
            "date": "2024-01-10",
            "commits": 1,
            "color": "#fff",
            "month": 1,
            "weekday": 3,
            "iso_week": 2,
            "x": 0,
            "y": 3,
        }
