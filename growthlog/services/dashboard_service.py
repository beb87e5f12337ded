"""
Dashboard Service - Statistics, trends and export over a preset range.
"""

import datetime
import logging
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from growthlog.domain.models import (
    ActivityStats, Analytics, DailyTotals, DateWindow, ExportData, Insight, RangePreset,
    TimeEntry, UserPreferences,
)
from growthlog.services.aggregator import aggregate, daily_totals, top_activities
from growthlog.services.entry_store import EntryStore
from growthlog.services.export_service import build_export, write_export
from growthlog.services.insight_service import (
    apply_reclassification, find_reclassification_candidates, generate_insights,
)
from growthlog.services.range_filter import dashboard_window

logger = logging.getLogger(__name__)


class DashboardService(QObject):
    """
    Everything the dashboard shows for the selected range.

    Results are recomputed on every call; `refreshed` fires whenever the
    store or the range changes, until close() is called.
    """

    # Signals
    refreshed = Signal(object)  # Analytics

    def __init__(self, store: EntryStore, preset: RangePreset = RangePreset.LAST_7_DAYS,
                 preferences: Optional[UserPreferences] = None,
                 today: Optional[Callable[[], datetime.date]] = None):
        super().__init__()
        self.store = store
        self.preferences = preferences or UserPreferences()
        self._today = today or datetime.date.today
        self.preset = RangePreset(preset)
        self.custom_start: Optional[datetime.date] = None
        self.custom_end: Optional[datetime.date] = None

        self.store.changed.connect(self.refresh)

    def close(self) -> None:
        """Stop following the store"""
        self.store.changed.disconnect(self.refresh)

    @property
    def window(self) -> DateWindow:
        return dashboard_window(self.preset, self._today(), self.custom_start, self.custom_end)

    def set_preset(self, preset: RangePreset) -> None:
        self.preset = RangePreset(preset)
        self.refresh()

    def set_custom_range(self, start: Optional[datetime.date], end: Optional[datetime.date]) -> None:
        """Switch to a custom range; incomplete ranges fall back to 30 days"""
        self.preset = RangePreset.CUSTOM
        self.custom_start = start
        self.custom_end = end
        self.refresh()

    def refresh(self) -> Analytics:
        analytics = self.analytics()
        self.refreshed.emit(analytics)
        return analytics

    def _entries(self, window: DateWindow):
        return self.store.query_by_range(window.start, window.end)

    def analytics(self) -> Analytics:
        window = self.window
        return aggregate(self._entries(window), window)

    def trends(self) -> List[DailyTotals]:
        window = self.window
        return daily_totals(self._entries(window), window)

    def top_activities(self) -> List[ActivityStats]:
        return top_activities(self._entries(self.window), self.preferences.top_activities_limit)

    def insights(self) -> List[Insight]:
        return generate_insights(self.analytics(), self.preferences.max_insights)

    def reclassification_candidates(self) -> List[TimeEntry]:
        """Entries in range whose activity matches a configured shrink keyword"""
        return find_reclassification_candidates(
            self._entries(self.window), self.preferences.shrink_keywords
        )

    def apply_reclassification(self) -> List[TimeEntry]:
        """Move every candidate in range to shrink"""
        return apply_reclassification(
            self.store, self._entries(self.window), self.preferences.shrink_keywords
        )

    def export_data(self) -> ExportData:
        window = self.window
        return build_export(self._entries(window), window)

    def export(self, directory: Optional[Path] = None) -> Path:
        """Write the export triple; defaults to the configured export directory"""
        if directory is None and self.preferences.export_directory:
            directory = Path(self.preferences.export_directory)
        return write_export(self.export_data(), directory)
