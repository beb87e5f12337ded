"""Infrastructure layer - Configuration and persistence schema"""

from .config import Settings, get_settings, reload_settings
from .db import Base, UserModel, EntryModel, create_schema
from .records import entry_to_record, record_to_entry, save_snapshot

__all__ = [
    "Settings", "get_settings", "reload_settings",
    "Base", "UserModel", "EntryModel", "create_schema",
    "entry_to_record", "record_to_entry", "save_snapshot",
]
