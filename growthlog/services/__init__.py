"""Services layer - Business logic"""

from .entry_store import EntryStore
from .calendar_view_service import CalendarViewService
from .dashboard_service import DashboardService

__all__ = ["EntryStore", "CalendarViewService", "DashboardService"]
