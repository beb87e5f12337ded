"""Domain layer - Pure business entities and logic"""

from .models import (
    Category, ViewType, RangePreset, TimeEntry, TimeEntryDraft, TimeEntryPatch,
    DateWindow, CategoryStats, Analytics, DailyTotals, ActivityStats, Insight,
    ExportData, UserPreferences,
)
from .duration import compute_duration, parse_time, format_minutes
from .errors import GrowthlogError, InvalidWindowError, DuplicateEntryError

__all__ = [
    "Category", "ViewType", "RangePreset", "TimeEntry", "TimeEntryDraft", "TimeEntryPatch",
    "DateWindow", "CategoryStats", "Analytics", "DailyTotals", "ActivityStats", "Insight",
    "ExportData", "UserPreferences",
    "compute_duration", "parse_time", "format_minutes",
    "GrowthlogError", "InvalidWindowError", "DuplicateEntryError",
]
