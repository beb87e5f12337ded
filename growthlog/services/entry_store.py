"""
Entry Store - Single source of truth for the session's time entries.

Architecture Decision: Observer Pattern (Qt Signals)
The store emits signals after every mutation so dependent views can
recompute their filtered subsets and statistics. It knows nothing about
who is listening.
"""

import datetime
import logging
import threading
import uuid
from typing import Dict, Iterable, List, Mapping, Optional, Union

from pydantic import BaseModel

from growthlog.domain.errors import DuplicateEntryError
from growthlog.domain.models import TimeEntry, TimeEntryDraft, TimeEntryPatch

# Imported after the domain models: PySide6's import hook otherwise trips
# over pydantic's lazily loaded submodules.
from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)

DraftLike = Union[TimeEntryDraft, Mapping]
PatchLike = Union[TimeEntryPatch, Mapping]


def _as_date(value) -> datetime.date:
    if isinstance(value, str):
        return datetime.date.fromisoformat(value)
    return value


def _as_mapping(value) -> Mapping:
    if isinstance(value, BaseModel):
        return value.model_dump()
    return value


class EntryStore(QObject):
    """
    In-memory collection of TimeEntry objects.

    All mutations are serialized behind one lock. Queries take the same lock
    and return copies, so no caller ever sees a half-applied mutation or can
    modify an entry behind the store's back.
    """

    # Signals
    entry_added = Signal(object)    # TimeEntry
    entry_updated = Signal(object)  # TimeEntry
    entry_deleted = Signal(str)     # entry id
    entries_reset = Signal()
    changed = Signal()              # any mutation

    def __init__(self, entries: Optional[Iterable[Union[TimeEntry, Mapping]]] = None):
        super().__init__()
        self._lock = threading.RLock()
        self._entries: Dict[str, TimeEntry] = {}
        if entries:
            self.load(entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _new_id(self) -> str:
        entry_id = uuid.uuid4().hex
        while entry_id in self._entries:
            entry_id = uuid.uuid4().hex
        return entry_id

    # --- Mutations ---

    def add(self, draft: DraftLike) -> TimeEntry:
        """
        Create a new entry.

        Args:
            draft: The entry's fields without id or duration

        Returns:
            A copy of the stored entry, with id and duration assigned
        """
        if not isinstance(draft, TimeEntryDraft):
            draft = TimeEntryDraft.model_validate(_as_mapping(draft))

        with self._lock:
            entry = TimeEntry(id=self._new_id(), **draft.model_dump())
            self._entries[entry.id] = entry

        logger.debug(f"Entry added: {entry.id} ({entry.date}, {entry.duration} min)")
        self.entry_added.emit(entry.model_copy())
        self.changed.emit()
        return entry.model_copy()

    def update(self, entry_id: str, patch: PatchLike) -> Optional[TimeEntry]:
        """
        Merge fields into an existing entry.

        The merged entry is validated again, which derives its duration
        from the resulting times.

        Returns:
            A copy of the updated entry, or None if no entry has this id
        """
        if not isinstance(patch, TimeEntryPatch):
            patch = TimeEntryPatch.model_validate(_as_mapping(patch))
        changes = patch.changes()

        with self._lock:
            current = self._entries.get(entry_id)
            if current is None:
                logger.debug(f"Update ignored, entry not found: {entry_id}")
                return None

            updated = TimeEntry.model_validate({**current.model_dump(), **changes})
            self._entries[entry_id] = updated

        self.entry_updated.emit(updated.model_copy())
        self.changed.emit()
        return updated.model_copy()

    def delete(self, entry_id: str) -> bool:
        """
        Permanently remove an entry.

        Returns:
            True if an entry was removed, False if the id was unknown
        """
        with self._lock:
            removed = self._entries.pop(entry_id, None)

        if removed is None:
            logger.debug(f"Delete ignored, entry not found: {entry_id}")
            return False

        self.entry_deleted.emit(entry_id)
        self.changed.emit()
        return True

    def load(self, entries: Iterable[Union[TimeEntry, Mapping]]) -> int:
        """
        Bulk insert entries that already carry an id (demo data, mapped records).

        Entries are validated again, so durations always follow the times.
        The whole batch is rejected if any id is already taken.

        Returns:
            Number of entries loaded
        """
        batch: Dict[str, TimeEntry] = {}
        for item in entries:
            entry = TimeEntry.model_validate(_as_mapping(item))
            if entry.id in batch:
                raise DuplicateEntryError(entry.id)
            batch[entry.id] = entry

        with self._lock:
            for entry_id in batch:
                if entry_id in self._entries:
                    raise DuplicateEntryError(entry_id)
            self._entries.update(batch)

        if batch:
            logger.info(f"Loaded {len(batch)} entries")
            self.changed.emit()
        return len(batch)

    def reset(self) -> None:
        """Drop every entry (explicit teardown)"""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()

        logger.info(f"Store reset, {count} entries removed")
        self.entries_reset.emit()
        self.changed.emit()

    # --- Queries ---

    def get(self, entry_id: str) -> Optional[TimeEntry]:
        with self._lock:
            entry = self._entries.get(entry_id)
            return entry.model_copy() if entry else None

    def all(self) -> List[TimeEntry]:
        """Snapshot of every entry, in insertion order"""
        with self._lock:
            return [e.model_copy() for e in self._entries.values()]

    def query_by_date(self, day) -> List[TimeEntry]:
        """All entries logged on exactly this date (date or ISO string)"""
        day = _as_date(day)
        with self._lock:
            return [e.model_copy() for e in self._entries.values() if e.date == day]

    def query_by_range(self, start, end) -> List[TimeEntry]:
        """All entries whose date lies in [start, end], both inclusive"""
        start, end = _as_date(start), _as_date(end)
        with self._lock:
            return [e.model_copy() for e in self._entries.values() if start <= e.date <= end]
