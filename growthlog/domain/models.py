"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Entries arrive from UI forms, YAML files and persisted records alike. Pydantic
validates the closed category enum and calendar dates at the boundary and
gives us camelCase serialization for the export contract for free.
"""

import datetime
from enum import Enum
from typing import Optional, List

from pydantic import BaseModel, Field, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

from growthlog.domain.duration import compute_duration


class Category(str, Enum):
    """How an activity contributes to the user's goals"""
    GROWTH = "growth"            # builds toward a goal
    MAINTENANCE = "maintenance"  # necessary upkeep
    SHRINK = "shrink"            # low value / time wasting


class ViewType(str, Enum):
    """Granularity of a calendar window"""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    CUSTOM = "custom"


class RangePreset(str, Enum):
    """Dashboard range selector"""
    LAST_7_DAYS = "7d"
    LAST_14_DAYS = "14d"
    LAST_30_DAYS = "30d"
    CUSTOM = "custom"


class _CamelModel(BaseModel):
    """Accepts both snake_case and camelCase keys, dumps camelCase with by_alias"""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimeEntryDraft(_CamelModel):
    """
    Caller-supplied shape of a new entry.

    Id and duration are owned by the store; any such keys in the input are ignored.
    """
    date: datetime.date
    start_time: str = ""
    end_time: str = ""
    activity: str = ""
    category: Category = Category.MAINTENANCE


class TimeEntryPatch(_CamelModel):
    """Partial update. Only fields that were explicitly set are applied."""
    date: Optional[datetime.date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    activity: Optional[str] = None
    category: Optional[Category] = None

    def changes(self) -> dict:
        """Fields the caller actually set, minus explicit nulls"""
        return {k: v for k, v in self.model_dump(exclude_unset=True).items() if v is not None}


class TimeEntry(_CamelModel):
    """
    One logged block of activity on a single calendar day.

    Times are wall-clock HH:MM strings. Duration is derived from them and is
    never negative; blocks crossing midnight are not representable.
    """
    id: str
    date: datetime.date
    start_time: str = ""
    end_time: str = ""
    activity: str = ""
    category: Category = Category.MAINTENANCE
    duration: int = Field(default=0, ge=0, description="Minutes, derived from start/end")

    @model_validator(mode="after")
    def _derive_duration(self) -> "TimeEntry":
        # Any supplied duration is discarded
        self.duration = compute_duration(self.start_time, self.end_time)
        return self


class DateWindow(_CamelModel):
    """Inclusive range of calendar dates"""
    start: datetime.date
    end: datetime.date
    view: ViewType = ViewType.CUSTOM

    @model_validator(mode="after")
    def _check_order(self) -> "DateWindow":
        if self.end < self.start:
            raise ValueError(f"window end {self.end} precedes start {self.start}")
        return self

    @property
    def days(self) -> int:
        """Number of calendar dates in the window"""
        return (self.end - self.start).days + 1

    @property
    def length_days(self) -> int:
        """Distance from start to end in days (0 for a single day)"""
        return (self.end - self.start).days

    @property
    def dates(self) -> List[datetime.date]:
        return [self.start + datetime.timedelta(days=i) for i in range(self.days)]

    @property
    def capacity_hours(self) -> int:
        """Hours available in the window (24 per day)"""
        return 24 * self.days

    def contains(self, day: datetime.date) -> bool:
        return self.start <= day <= self.end


class CategoryStats(_CamelModel):
    minutes: int = 0
    hours: float = 0.0
    count: int = 0


class Analytics(_CamelModel):
    """Aggregated statistics for a list of entries over a window"""
    total_minutes: int = 0
    total_hours: float = 0.0
    total_possible_hours: int = 0
    undocumented_hours: float = 0.0
    avg_daily_hours: float = 0.0
    productivity_score: int = 0
    entry_count: int = 0

    growth: CategoryStats = Field(default_factory=CategoryStats)
    maintenance: CategoryStats = Field(default_factory=CategoryStats)
    shrink: CategoryStats = Field(default_factory=CategoryStats)

    def for_category(self, category: Category) -> CategoryStats:
        return getattr(self, category.value)


class DailyTotals(_CamelModel):
    """Hours per category for one date (trend chart row)"""
    date: datetime.date
    growth: float = 0.0
    maintenance: float = 0.0
    shrink: float = 0.0
    total: float = 0.0


class ActivityStats(_CamelModel):
    """Time spent on one activity label, grouped case-insensitively"""
    activity: str
    category: Category
    total_minutes: int = 0
    count: int = 0
    hours: float = 0.0
    avg_minutes: int = 0


class Insight(_CamelModel):
    kind: str = Field(..., description="'positive', 'neutral' or 'warning'")
    text: str


class ExportData(_CamelModel):
    """
    The {entries, analytics, dateRange} triple handed to the export collaborator.

    Deterministic for a given store state and window.
    """
    entries: List[TimeEntry] = Field(default_factory=list)
    analytics: Analytics
    date_range: DateWindow


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    This allows users to customize behavior without touching code.
    """
    model_config = ConfigDict(from_attributes=True)

    # Views
    default_view: ViewType = Field(default=ViewType.WEEK, description="Calendar view on startup")
    dashboard_range: RangePreset = Field(default=RangePreset.LAST_7_DAYS, description="Dashboard range on startup")

    # Insights
    shrink_keywords: List[str] = Field(
        default_factory=lambda: ["twitter", "social media", "browsing"],
        description="Activity substrings that suggest reclassifying an entry as shrink"
    )
    max_insights: int = Field(default=3, ge=0, description="Number of summary insights to show")
    top_activities_limit: int = Field(default=10, ge=1, description="Length of the most common activities list")

    # Demo data
    seed_demo_data: bool = Field(default=False, description="Fill the store with generated entries on startup")
    demo_days: int = Field(default=14, ge=0, description="Past days covered by generated demo entries")

    # Export
    export_directory: Optional[str] = Field(default=None, description="Where exported reports are written")

    log_level: str = Field(default="INFO", description="Root logging level")
