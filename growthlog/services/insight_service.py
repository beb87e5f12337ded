"""
Insight Service - Rule-based summary of a window's statistics and
reclassification suggestions for likely time-wasting entries.
"""

import logging
from typing import Iterable, List, Optional, Sequence

from growthlog.domain.models import Analytics, Category, Insight, TimeEntry

logger = logging.getLogger(__name__)

DEFAULT_SHRINK_KEYWORDS = ("twitter", "social media", "browsing")

EXCELLENT_SCORE = 80
GOOD_SCORE = 60
UNDER_TRACKING_HOURS = 6
OVER_TRACKING_HOURS = 12


def generate_insights(analytics: Analytics, limit: int = 3) -> List[Insight]:
    """
    Short textual observations about a window, most important first.

    Args:
        analytics: Statistics of the window
        limit: Maximum number of insights returned

    Returns:
        Insights in rule order, truncated to limit
    """
    insights = []
    score = analytics.productivity_score

    if score >= EXCELLENT_SCORE:
        insights.append(Insight(
            kind="positive",
            text=f"Excellent productivity score of {score}%! You're maintaining a great balance "
                 f"of growth and maintenance activities.",
        ))
    elif score >= GOOD_SCORE:
        insights.append(Insight(
            kind="neutral",
            text=f"Good productivity score of {score}%. Consider increasing growth activities "
                 f"to boost your score.",
        ))
    else:
        insights.append(Insight(
            kind="warning",
            text=f"Productivity score of {score}% suggests room for improvement. "
                 f"Focus on reducing shrink activities.",
        ))

    if analytics.shrink.hours > analytics.growth.hours:
        insights.append(Insight(
            kind="warning",
            text=f"You spent more time on shrink activities ({analytics.shrink.hours}h) than growth "
                 f"activities ({analytics.growth.hours}h). Consider reallocating this time.",
        ))

    avg = analytics.avg_daily_hours
    if avg < UNDER_TRACKING_HOURS:
        insights.append(Insight(
            kind="neutral",
            text=f"Your daily average of {avg}h suggests you might be under-tracking. "
                 f"Consider logging more activities.",
        ))
    elif avg > OVER_TRACKING_HOURS:
        insights.append(Insight(
            kind="warning",
            text=f"High daily average of {avg}h. Make sure to include breaks and rest time "
                 f"in your schedule.",
        ))

    if analytics.growth.hours > analytics.maintenance.hours + analytics.shrink.hours:
        insights.append(Insight(
            kind="positive",
            text=f"Great focus on growth activities! {analytics.growth.hours}h spent on personal "
                 f"and professional development.",
        ))

    return insights[:limit]


def find_reclassification_candidates(entries: Iterable[TimeEntry],
                                     keywords: Optional[Sequence[str]] = None) -> List[TimeEntry]:
    """Entries whose activity mentions a shrink keyword but are not shrink yet"""
    keywords = [k.lower() for k in (keywords if keywords is not None else DEFAULT_SHRINK_KEYWORDS)]
    candidates = []
    for entry in entries:
        if entry.category is Category.SHRINK:
            continue
        label = entry.activity.lower()
        if any(k in label for k in keywords):
            candidates.append(entry)
    return candidates


def apply_reclassification(store, entries: Iterable[TimeEntry],
                           keywords: Optional[Sequence[str]] = None) -> List[TimeEntry]:
    """
    Move every candidate among the entries to the shrink category.

    Args:
        store: EntryStore holding the entries
        entries: Entries to inspect (e.g. the day currently shown)
        keywords: Activity substrings that mark a candidate

    Returns:
        The updated entries
    """
    updated = []
    for entry in find_reclassification_candidates(entries, keywords):
        result = store.update(entry.id, {"category": Category.SHRINK})
        if result is not None:
            updated.append(result)
    logger.info(f"Reclassified {len(updated)} entries as shrink")
    return updated
