#!/usr/bin/env python

"""
growthlog - Main Entry Point

Builds an entry store for this session, optionally filled with demo data,
and prints the statistics of the configured calendar view and dashboard
range. When GROWTHLOG_DATABASE_URL is set the entries are appended to that
database before exit. A presentation layer connects to the same services' signals.

Usage:
    python main.py

Requirements:
    - Python 3.10+
    - See pyproject.toml for dependencies
"""

import asyncio
import datetime
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from growthlog.infra.config import get_settings
from growthlog.infra.records import save_snapshot
from growthlog.services import CalendarViewService, DashboardService, EntryStore
from growthlog.services.demo_data import generate_demo_entries


def print_summary(title: str, window, analytics) -> None:
    print(f"{title}: {window.start} - {window.end}")
    print(f"  Total:        {analytics.total_hours}h / {analytics.total_possible_hours}h "
          f"({analytics.undocumented_hours}h undocumented)")
    print(f"  Growth:       {analytics.growth.hours}h ({analytics.growth.count})")
    print(f"  Maintenance:  {analytics.maintenance.hours}h ({analytics.maintenance.count})")
    print(f"  Shrink:       {analytics.shrink.hours}h ({analytics.shrink.count})")
    print(f"  Daily avg:    {analytics.avg_daily_hours}h")
    print(f"  Productivity: {analytics.productivity_score}%")


def main():
    """Main entry point"""
    settings = get_settings()
    prefs = settings.preferences
    logging.basicConfig(
        level=prefs.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    store = EntryStore()
    if prefs.seed_demo_data:
        store.load(generate_demo_entries(datetime.date.today(), days=prefs.demo_days))

    calendar_view = CalendarViewService(store, view=prefs.default_view)
    dashboard = DashboardService(store, preset=prefs.dashboard_range, preferences=prefs)

    print_summary(f"Calendar ({calendar_view.view.value})", calendar_view.window, calendar_view.analytics())
    print()
    print_summary(f"Dashboard ({dashboard.preset.value})", dashboard.window, dashboard.analytics())
    for insight in dashboard.insights():
        print(f"  [{insight.kind}] {insight.text}")
    for entry in dashboard.reclassification_candidates():
        print(f"  Consider moving to shrink: {entry.activity} ({entry.date})")

    if settings.database_url:
        asyncio.run(save_snapshot(settings.database_url, store.all()))

    calendar_view.close()
    dashboard.close()

    store.reset()
    return 0


if __name__ == "__main__":
    sys.exit(main())
