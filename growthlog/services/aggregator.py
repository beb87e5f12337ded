"""
Aggregator - Reduces entries into category totals and derived scores.

Rounding happens once, after summing minutes, never per entry.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Sequence

from growthlog.domain.models import (
    ActivityStats, Analytics, Category, CategoryStats, DailyTotals, DateWindow, TimeEntry,
)

# Weight of each category in the productivity score
CATEGORY_WEIGHTS = {
    Category.GROWTH: 1.0,
    Category.MAINTENANCE: 0.5,
    Category.SHRINK: 0.0,
}


def round_half_away(value: float, places: int = 0) -> float:
    """Round half away from zero (2.25 -> 2.3, -2.25 -> -2.3), unlike round()"""
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round1(value: float) -> float:
    return round_half_away(value, 1)


def minutes_to_hours(minutes: int) -> float:
    return round1(minutes / 60)


def category_minutes(entries: Iterable[TimeEntry]) -> Dict[Category, int]:
    totals = {category: 0 for category in Category}
    for entry in entries:
        totals[entry.category] += entry.duration
    return totals


def category_counts(entries: Iterable[TimeEntry]) -> Dict[Category, int]:
    """Number of entries per category (calendar cell badges)"""
    counts = {category: 0 for category in Category}
    for entry in entries:
        counts[entry.category] += 1
    return counts


def productivity_score(growth_hours: float, maintenance_hours: float, total_hours: float) -> int:
    """
    Weighted share of tracked time spent on growth (full) and maintenance (half).

    Normalized by tracked time, not capacity. The denominator is floored at
    one hour, so nothing tracked scores 0.
    """
    weighted = (growth_hours * CATEGORY_WEIGHTS[Category.GROWTH]
                + maintenance_hours * CATEGORY_WEIGHTS[Category.MAINTENANCE])
    return int(round_half_away(weighted / max(1, total_hours) * 100))


def aggregate(entries: Sequence[TimeEntry], window: DateWindow) -> Analytics:
    """
    Compute statistics for the entries of a window.

    Args:
        entries: Entries to aggregate (normally already filtered to the window)
        window: The window; supplies capacity and the daily average divisor

    Returns:
        Analytics with totals, per category breakdown and derived scores
    """
    minutes = category_minutes(entries)
    counts = category_counts(entries)

    total_minutes = sum(minutes.values())
    total_hours = minutes_to_hours(total_minutes)

    stats = {
        category: CategoryStats(
            minutes=minutes[category],
            hours=minutes_to_hours(minutes[category]),
            count=counts[category],
        )
        for category in Category
    }

    capacity = window.capacity_hours

    return Analytics(
        total_minutes=total_minutes,
        total_hours=total_hours,
        total_possible_hours=capacity,
        undocumented_hours=round1(max(0.0, capacity - total_hours)),
        avg_daily_hours=round1(total_hours / max(1, window.length_days)),
        productivity_score=productivity_score(
            stats[Category.GROWTH].hours, stats[Category.MAINTENANCE].hours, total_hours
        ),
        entry_count=len(entries),
        growth=stats[Category.GROWTH],
        maintenance=stats[Category.MAINTENANCE],
        shrink=stats[Category.SHRINK],
    )


def daily_totals(entries: Iterable[TimeEntry], window: DateWindow) -> List[DailyTotals]:
    """One row per date of the window with hours per category"""
    by_day = {day: {category: 0 for category in Category} for day in window.dates}
    for entry in entries:
        if entry.date in by_day:
            by_day[entry.date][entry.category] += entry.duration

    rows = []
    for day, minutes in by_day.items():
        rows.append(DailyTotals(
            date=day,
            growth=minutes_to_hours(minutes[Category.GROWTH]),
            maintenance=minutes_to_hours(minutes[Category.MAINTENANCE]),
            shrink=minutes_to_hours(minutes[Category.SHRINK]),
            total=minutes_to_hours(sum(minutes.values())),
        ))
    return rows


def top_activities(entries: Iterable[TimeEntry], limit: int = 10) -> List[ActivityStats]:
    """
    Most time-consuming activities.

    Labels are grouped case-insensitively with surrounding whitespace
    ignored; the first label and category seen for a group are reported.
    """
    groups: Dict[str, ActivityStats] = {}
    for entry in entries:
        key = entry.activity.lower().strip()
        stats = groups.get(key)
        if stats is None:
            stats = groups[key] = ActivityStats(activity=entry.activity, category=entry.category)
        stats.total_minutes += entry.duration
        stats.count += 1

    ranked = sorted(groups.values(), key=lambda s: s.total_minutes, reverse=True)[:limit]
    for stats in ranked:
        stats.hours = minutes_to_hours(stats.total_minutes)
        stats.avg_minutes = int(round_half_away(stats.total_minutes / stats.count))
    return ranked
