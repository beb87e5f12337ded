"""
Tests for the export data triple.
"""

import datetime
import json

from growthlog.domain.models import Category, ViewType
from growthlog.services.export_service import build_export, export_filename, write_export
from growthlog.services.range_filter import window_for

JAN = window_for(ViewType.MONTH, datetime.date(2024, 1, 15))


def test_entries_sorted_newest_date_first(make_entry):
    entries = [
        make_entry("a", datetime.date(2024, 1, 2), "14:00", "15:00"),
        make_entry("b", datetime.date(2024, 1, 5), "09:00", "10:00"),
        make_entry("c", datetime.date(2024, 1, 2), "08:00", "09:00"),
        make_entry("x", datetime.date(2024, 2, 1), "08:00", "09:00"),
    ]
    data = build_export(entries, JAN)
    assert [e.id for e in data.entries] == ["b", "c", "a"]
    assert data.analytics.entry_count == 3
    assert data.analytics.total_possible_hours == 24 * 31
    assert data.date_range == JAN


def test_export_is_deterministic(make_entry):
    entries = [make_entry(str(i), datetime.date(2024, 1, 1 + i), "08:00", "09:00") for i in range(5)]
    first = build_export(entries, JAN).model_dump_json()
    second = build_export(list(reversed(entries)), JAN).model_dump_json()
    assert first == second


def test_filename():
    assert export_filename(JAN) == "time-tracking-report-2024-01-01-to-2024-01-31.json"


def test_write_export_uses_camel_case(make_entry, tmp_path):
    entries = [make_entry("a", datetime.date(2024, 1, 3), "08:00", "09:30", Category.GROWTH, "Write report")]
    path = write_export(build_export(entries, JAN), tmp_path / "reports")

    assert path.exists()
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["dateRange"] == {"start": "2024-01-01", "end": "2024-01-31", "view": "month"}
    assert payload["entries"][0]["startTime"] == "08:00"
    assert payload["entries"][0]["category"] == "growth"
    assert payload["analytics"]["growth"] == {"minutes": 90, "hours": 1.5, "count": 1}
    assert payload["analytics"]["productivityScore"] == 100
