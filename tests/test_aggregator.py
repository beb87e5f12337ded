"""
Tests for statistics aggregation.
"""

import datetime

import pytest

from growthlog.domain.models import Category, TimeEntry, ViewType
from growthlog.services.aggregator import (
    aggregate, category_counts, daily_totals, productivity_score, round1, round_half_away,
    top_activities,
)
from growthlog.services.range_filter import window_for

JAN_1 = datetime.date(2024, 1, 1)
DAY = window_for(ViewType.DAY, JAN_1)


class TestRounding:

    @pytest.mark.parametrize("value, expected", [
        (0.25, 0.3), (0.35, 0.4), (2.45, 2.5), (1.5, 1.5), (1.04, 1.0), (-0.25, -0.3),
    ])
    def test_round1_half_away_from_zero(self, value, expected):
        assert round1(value) == expected

    @pytest.mark.parametrize("value, expected", [(0.5, 1), (2.5, 3), (-2.5, -3), (49.4, 49)])
    def test_integer_rounding(self, value, expected):
        assert round_half_away(value) == expected


class TestAggregate:

    def test_single_growth_entry_scenario(self, make_entry):
        entry = make_entry("a", JAN_1, "08:00", "09:30", Category.GROWTH, "Write report")
        stats = aggregate([entry], DAY)

        assert stats.total_minutes == 90
        assert stats.growth.hours == 1.5
        assert stats.growth.count == 1
        assert stats.total_hours == 1.5
        assert stats.total_possible_hours == 24
        assert stats.undocumented_hours == 22.5
        assert stats.avg_daily_hours == 1.5
        # 1.5 growth hours over 1.5 tracked hours
        assert stats.productivity_score == 100

    def test_empty_window(self):
        stats = aggregate([], window_for(ViewType.WEEK, JAN_1))
        assert stats.total_hours == 0
        assert stats.undocumented_hours == 168
        assert stats.productivity_score == 0
        assert stats.entry_count == 0

    def test_category_breakdown(self, make_entry):
        entries = [
            make_entry("g", JAN_1, "08:00", "10:00", Category.GROWTH),
            make_entry("m", JAN_1, "10:00", "11:00", Category.MAINTENANCE),
            make_entry("m2", JAN_1, "11:00", "11:20", Category.MAINTENANCE),
            make_entry("s", JAN_1, "12:00", "12:30", Category.SHRINK),
        ]
        stats = aggregate(entries, DAY)

        assert (stats.growth.minutes, stats.growth.hours, stats.growth.count) == (120, 2.0, 1)
        assert (stats.maintenance.minutes, stats.maintenance.hours, stats.maintenance.count) == (80, 1.3, 2)
        assert (stats.shrink.minutes, stats.shrink.hours, stats.shrink.count) == (30, 0.5, 1)
        assert stats.total_minutes == 230
        assert stats.total_hours == 3.8
        assert stats.for_category(Category.SHRINK) == stats.shrink
        # (2.0 + 0.5 * 1.3) / 3.8 = 69.7%
        assert stats.productivity_score == 70

    def test_rounding_happens_after_summing(self, make_entry):
        # Three 4 minute blocks: per-entry rounding would give 0.1 * 3 = 0.3
        entries = [make_entry(f"e{i}", JAN_1, "08:00", "08:04") for i in range(3)]
        assert aggregate(entries, DAY).total_hours == 0.2

    def test_undocumented_never_negative(self, make_entry):
        # Overlapping blocks summing to 30 hours in one day
        entries = [make_entry(f"e{i}", JAN_1, "00:00", "15:00") for i in range(2)]
        stats = aggregate(entries, DAY)
        assert stats.total_hours == 30.0
        assert stats.undocumented_hours == 0

    def test_all_shrink_scores_zero(self, make_entry):
        entries = [make_entry("s", JAN_1, "08:00", "12:00", Category.SHRINK)]
        assert aggregate(entries, DAY).productivity_score == 0

    def test_short_tracking_is_normalized_by_one_hour(self, make_entry):
        entries = [make_entry("g", JAN_1, "08:00", "08:30", Category.GROWTH)]
        # 0.5 / max(1, 0.5) = 50%
        assert aggregate(entries, DAY).productivity_score == 50

    def test_month_capacity_and_daily_average(self, make_entry):
        feb = window_for(ViewType.MONTH, datetime.date(2024, 2, 10))
        entries = [make_entry("g", datetime.date(2024, 2, 1), "00:00", "23:00")]
        stats = aggregate(entries, feb)
        assert stats.total_possible_hours == 24 * 29
        assert stats.undocumented_hours == 24 * 29 - 23
        assert stats.avg_daily_hours == 0.8  # 23 / 28 days from Feb 1 to Feb 29

    def test_week_average_divides_by_window_length(self, make_entry):
        week = window_for(ViewType.WEEK, JAN_1)
        entries = [make_entry(str(i), day, "08:00", "11:00") for i, day in enumerate(week.dates)]
        stats = aggregate(entries, week)
        assert stats.total_hours == 21.0
        # Sunday to Saturday is 6 days apart
        assert stats.avg_daily_hours == 3.5

    def test_constructed_entries_carry_derived_duration(self):
        entry = TimeEntry(id="a", date=JAN_1, start_time="08:00", end_time="09:30", duration=5)
        stats = aggregate([entry], DAY)
        assert entry.duration == 90
        assert stats.total_hours == 1.5
        assert stats.undocumented_hours == 22.5

    def test_custom_window_capacity(self, make_entry):
        window = window_for(ViewType.CUSTOM, JAN_1, JAN_1, datetime.date(2024, 1, 3))
        assert aggregate([], window).total_possible_hours == 72


@pytest.mark.parametrize("growth, maintenance, total, expected", [
    (0, 0, 0, 0),
    (2, 2, 4, 75),
    (0, 4, 4, 50),
    (0, 0, 8, 0),
])
def test_productivity_score(growth, maintenance, total, expected):
    assert productivity_score(growth, maintenance, total) == expected


def test_category_counts(make_entry):
    entries = [
        make_entry("a", JAN_1, "08:00", "09:00", Category.GROWTH),
        make_entry("b", JAN_1, "09:00", "10:00", Category.GROWTH),
        make_entry("c", JAN_1, "10:00", "11:00", Category.SHRINK),
    ]
    assert category_counts(entries) == {Category.GROWTH: 2, Category.MAINTENANCE: 0, Category.SHRINK: 1}


class TestDailyTotals:

    def test_one_row_per_date(self, make_entry):
        window = window_for(ViewType.WEEK, datetime.date(2024, 1, 10))
        entries = [
            make_entry("a", datetime.date(2024, 1, 8), "08:00", "09:30", Category.GROWTH),
            make_entry("b", datetime.date(2024, 1, 8), "10:00", "10:30", Category.SHRINK),
            make_entry("c", datetime.date(2024, 1, 20), "10:00", "11:00", Category.SHRINK),
        ]
        rows = daily_totals(entries, window)

        assert [r.date for r in rows] == window.dates
        monday = rows[1]
        assert (monday.growth, monday.maintenance, monday.shrink, monday.total) == (1.5, 0.0, 0.5, 2.0)
        assert sum(r.total for r in rows) == 2.0


class TestTopActivities:

    def test_groups_case_insensitively_and_ranks_by_time(self, make_entry):
        entries = [
            make_entry("a", JAN_1, "08:00", "09:00", Category.GROWTH, "Reading"),
            make_entry("b", JAN_1, "09:00", "09:30", Category.MAINTENANCE, " reading "),
            make_entry("c", JAN_1, "10:00", "12:00", Category.GROWTH, "Coding"),
            make_entry("d", JAN_1, "13:00", "13:10", Category.SHRINK, "YouTube"),
        ]
        ranked = top_activities(entries)

        assert [s.activity for s in ranked] == ["Coding", "Reading", "YouTube"]
        reading = ranked[1]
        assert reading.category is Category.GROWTH  # first seen wins
        assert (reading.total_minutes, reading.count, reading.hours, reading.avg_minutes) == (90, 2, 1.5, 45)

    def test_limit(self, make_entry):
        entries = [make_entry(str(i), JAN_1, "08:00", f"08:{i + 10:02d}", activity=f"Task {i}") for i in range(15)]
        ranked = top_activities(entries, limit=10)
        assert len(ranked) == 10
        assert ranked[0].activity == "Task 14"

    def test_empty(self):
        assert top_activities([]) == []
