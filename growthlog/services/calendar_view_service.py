"""
Calendar View Service - Day/week/month view state over the entry store.

Architecture Decision: Observer Pattern (Qt Signals)
The service listens to the store's `changed` signal, recomputes the visible
subset and its statistics, and emits `refreshed`. It keeps no cached
results; every read recomputes from the store.
"""

import datetime
import logging
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, Signal

from growthlog.domain.models import Analytics, DateWindow, TimeEntry, ViewType
from growthlog.services.aggregator import aggregate
from growthlog.services.entry_store import EntryStore
from growthlog.services.range_filter import can_navigate_next, shift_anchor, window_for

logger = logging.getLogger(__name__)


class CalendarViewService(QObject):
    """
    Tracks which window the user is looking at and what it contains.

    Navigation never moves the anchor past today, but entries already dated
    in the future stay visible when a window covers them.
    """

    # Signals
    refreshed = Signal(object)      # Analytics of the current window
    window_changed = Signal(object)  # DateWindow

    def __init__(self, store: EntryStore, view: ViewType = ViewType.WEEK,
                 anchor: Optional[datetime.date] = None,
                 today: Optional[Callable[[], datetime.date]] = None):
        super().__init__()
        if ViewType(view) is ViewType.CUSTOM:
            raise ValueError("The calendar view supports day, week and month only")

        self.store = store
        self._today = today or datetime.date.today
        self.view = ViewType(view)
        self.anchor = anchor or self._today()

        self.store.changed.connect(self.refresh)

    def close(self) -> None:
        """Stop following the store"""
        self.store.changed.disconnect(self.refresh)

    @property
    def window(self) -> DateWindow:
        return window_for(self.view, self.anchor)

    def entries(self) -> List[TimeEntry]:
        """Entries of the current window, by date then start time"""
        window = self.window
        entries = self.store.query_by_range(window.start, window.end)
        return sorted(entries, key=lambda e: (e.date, e.start_time))

    def analytics(self) -> Analytics:
        window = self.window
        return aggregate(self.store.query_by_range(window.start, window.end), window)

    def refresh(self) -> Analytics:
        """Recompute statistics and notify listeners"""
        analytics = self.analytics()
        self.refreshed.emit(analytics)
        return analytics

    def set_view(self, view: ViewType) -> None:
        view = ViewType(view)
        if view is ViewType.CUSTOM:
            raise ValueError("The calendar view supports day, week and month only")
        self.view = view
        self._window_moved()

    def set_anchor(self, anchor: datetime.date) -> None:
        self.anchor = anchor
        self._window_moved()

    def can_navigate_next(self) -> bool:
        return can_navigate_next(self.view, self.anchor, self._today())

    def navigate(self, step: int) -> bool:
        """
        Move by whole views (negative steps go back in time).

        Returns:
            False if the move would put the anchor in the future
        """
        target = shift_anchor(self.view, self.anchor, step)
        if step > 0 and target > self._today():
            logger.debug(f"Navigation to {target} refused, it is in the future")
            return False
        self.anchor = target
        self._window_moved()
        return True

    def _window_moved(self) -> None:
        self.window_changed.emit(self.window)
        self.refresh()
