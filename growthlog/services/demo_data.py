"""
Demo data generator.

Produces a plausible history so views and the dashboard have something to
show: a fixed morning for today plus 2-5 random blocks on each past day.
"""

import datetime
import random
from typing import List, Optional

from growthlog.domain.duration import format_minutes
from growthlog.domain.models import Category, TimeEntry

TODAY_BLOCKS = [
    ("08:00", "08:30", "Morning routine and planning", Category.MAINTENANCE),
    ("08:30", "10:00", "Deep work - Feature development", Category.GROWTH),
    ("10:00", "10:15", "Coffee break", Category.MAINTENANCE),
    ("10:15", "12:00", "Client meeting and requirements review", Category.GROWTH),
]

# (activity, category, minutes)
ACTIVITY_CATALOGUE = [
    ("Morning standup and code review", Category.GROWTH, 90),
    ("Feature development", Category.GROWTH, 120),
    ("Bug fixes and testing", Category.GROWTH, 90),
    ("Documentation writing", Category.GROWTH, 60),
    ("Learning new technology", Category.GROWTH, 90),
    ("Code refactoring", Category.GROWTH, 75),
    ("API development", Category.GROWTH, 105),
    ("Database optimization", Category.GROWTH, 120),
    ("Email and admin tasks", Category.MAINTENANCE, 30),
    ("Team meetings", Category.MAINTENANCE, 60),
    ("Sprint planning", Category.MAINTENANCE, 90),
    ("Coffee break", Category.MAINTENANCE, 15),
    ("Lunch break", Category.MAINTENANCE, 45),
    ("Social media scrolling", Category.SHRINK, 30),
    ("YouTube videos", Category.SHRINK, 45),
    ("Mindless web browsing", Category.SHRINK, 30),
    ("Unnecessary meetings", Category.SHRINK, 60),
]

DAY_START_MINUTES = 8 * 60
BREAK_MINUTES = 15


def generate_demo_entries(today: datetime.date, days: int = 14,
                          rng: Optional[random.Random] = None) -> List[TimeEntry]:
    """
    Build demo entries for today and the given number of past days.

    Args:
        today: The most recent date to fill
        days: How many days before today get random entries
        rng: Random source; pass a seeded one for reproducible data

    Returns:
        Entries with stable ids ("today-1", "<date>-0", ...)
    """
    rng = rng or random.Random()
    entries = []

    for index, (start, end, activity, category) in enumerate(TODAY_BLOCKS, start=1):
        entries.append(TimeEntry(
            id=f"today-{index}", date=today, start_time=start, end_time=end,
            activity=activity, category=category,
        ))

    for offset in range(1, days + 1):
        day = today - datetime.timedelta(days=offset)
        cursor = DAY_START_MINUTES
        for j in range(rng.randint(2, 5)):
            activity, category, minutes = rng.choice(ACTIVITY_CATALOGUE)
            start = cursor + rng.randrange(60)
            end = start + minutes
            # Long days would spill past midnight, which a block cannot represent
            if end >= 24 * 60:
                break
            entries.append(TimeEntry(
                id=f"{day.isoformat()}-{j}", date=day,
                start_time=format_minutes(start), end_time=format_minutes(end),
                activity=activity, category=category,
            ))
            cursor = end + BREAK_MINUTES

    return entries
