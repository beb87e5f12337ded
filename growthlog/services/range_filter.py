"""
Range Filter - Date window arithmetic and entry filtering.

All functions are pure: they take the entries and the window explicitly
and never cache, so callers decide when to recompute.
"""

import calendar
import datetime
from typing import Iterable, List, Optional

from growthlog.domain.errors import InvalidWindowError
from growthlog.domain.models import DateWindow, RangePreset, TimeEntry, ViewType

PRESET_DAYS = {
    RangePreset.LAST_7_DAYS: 7,
    RangePreset.LAST_14_DAYS: 14,
    RangePreset.LAST_30_DAYS: 30,
}

# A custom dashboard range missing either date behaves like the widest preset
CUSTOM_FALLBACK_DAYS = 30


def week_start(anchor: datetime.date) -> datetime.date:
    """Sunday on or before the anchor"""
    # date.weekday(): Monday=0 .. Sunday=6, shifted so Sunday=0
    return anchor - datetime.timedelta(days=(anchor.weekday() + 1) % 7)


def month_bounds(anchor: datetime.date):
    """First and last day of the anchor's month"""
    _, last_day = calendar.monthrange(anchor.year, anchor.month)
    return anchor.replace(day=1), anchor.replace(day=last_day)


def window_for(view: ViewType, anchor: datetime.date,
               start: Optional[datetime.date] = None,
               end: Optional[datetime.date] = None) -> DateWindow:
    """
    Compute the window of a view around an anchor date.

    Args:
        view: Window granularity
        anchor: Date the window must contain (ignored for custom windows)
        start: First date of a custom window
        end: Last date of a custom window

    Returns:
        The inclusive DateWindow
    """
    view = ViewType(view)

    if view is ViewType.DAY:
        return DateWindow(start=anchor, end=anchor, view=view)

    if view is ViewType.WEEK:
        first = week_start(anchor)
        return DateWindow(start=first, end=first + datetime.timedelta(days=6), view=view)

    if view is ViewType.MONTH:
        first, last = month_bounds(anchor)
        return DateWindow(start=first, end=last, view=view)

    if start is None or end is None:
        raise InvalidWindowError("A custom window needs both a start and an end date")
    if end < start:
        start, end = end, start
    return DateWindow(start=start, end=end, view=view)


def filter_entries(entries: Iterable[TimeEntry], window: DateWindow) -> List[TimeEntry]:
    """Entries whose date lies inside the window (both ends inclusive)"""
    return [e for e in entries if window.start <= e.date <= window.end]


def shift_anchor(view: ViewType, anchor: datetime.date, step: int = 1) -> datetime.date:
    """
    Move the anchor by whole views: days, weeks or months.

    Month steps keep the day of month where possible and clamp it to the
    length of the target month (Jan 31 + 1 month = Feb 28/29).
    """
    view = ViewType(view)

    if view is ViewType.DAY:
        return anchor + datetime.timedelta(days=step)
    if view is ViewType.WEEK:
        return anchor + datetime.timedelta(days=7 * step)
    if view is ViewType.MONTH:
        month_index = anchor.year * 12 + (anchor.month - 1) + step
        year, month = divmod(month_index, 12)
        month += 1
        _, last_day = calendar.monthrange(year, month)
        return datetime.date(year, month, min(anchor.day, last_day))

    raise InvalidWindowError("Custom windows cannot be navigated")


def can_navigate_next(view: ViewType, anchor: datetime.date, today: datetime.date) -> bool:
    """Whether stepping forward keeps the view anchor on or before today"""
    return shift_anchor(view, anchor, 1) <= today


def dashboard_window(preset: RangePreset, today: datetime.date,
                     custom_start: Optional[datetime.date] = None,
                     custom_end: Optional[datetime.date] = None) -> DateWindow:
    """
    Window for a dashboard range preset, ending today.

    A custom preset uses the supplied dates when both are present and falls
    back to the last 30 days otherwise.
    """
    preset = RangePreset(preset)

    if preset is RangePreset.CUSTOM:
        if custom_start is not None and custom_end is not None:
            return window_for(ViewType.CUSTOM, today, custom_start, custom_end)
        days = CUSTOM_FALLBACK_DAYS
    else:
        days = PRESET_DAYS[preset]

    return DateWindow(start=today - datetime.timedelta(days=days - 1), end=today, view=ViewType.CUSTOM)
