"""
Mapping between in-memory entries and persisted records.

The record keeps full timestamps while the entry keeps a date plus HH:MM
strings. Unparseable times are stored as midnight, which maps back to a
zero-duration entry, matching how the store treats them.
"""

import datetime
import logging
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from growthlog.domain.duration import format_minutes, parse_time
from growthlog.domain.models import TimeEntry
from growthlog.infra.db import EntryModel, UserModel, create_schema

logger = logging.getLogger(__name__)


def _timestamp(day: datetime.date, value: str) -> datetime.datetime:
    minutes = parse_time(value) or 0
    return datetime.datetime.combine(day, datetime.time(*divmod(minutes, 60)))


def entry_to_record(entry: TimeEntry, user_id: int, notes: str = "",
                    description: str = "") -> EntryModel:
    """
    Build an EntryModel for an entry owned by user_id.

    Numeric entry ids become the record's primary key; any other id is left
    for the database to assign.
    """
    record = EntryModel(
        title=entry.activity,
        description=description,
        category=entry.category,
        time_start=_timestamp(entry.date, entry.start_time),
        time_end=_timestamp(entry.date, entry.end_time),
        duration=entry.duration,
        notes=notes,
        user_id=user_id,
    )
    if entry.id.isdigit():
        record.id = int(entry.id)
    return record


def record_to_entry(record: EntryModel, entry_id: Optional[str] = None) -> TimeEntry:
    """Rebuild an entry from a record; duration is derived again from the times"""
    start_time = format_minutes(record.time_start.hour * 60 + record.time_start.minute)
    end_time = format_minutes(record.time_end.hour * 60 + record.time_end.minute)
    return TimeEntry(
        id=entry_id or str(record.id),
        date=record.time_start.date(),
        start_time=start_time,
        end_time=end_time,
        activity=record.title,
        category=record.category,
    )


async def save_snapshot(db_url: str, entries: Iterable[TimeEntry],
                        user_name: str = "growthlog", user_email: str = "growthlog@localhost") -> int:
    """
    Append entries to the database at db_url, creating the schema if needed.

    Entries are owned by the user with user_email, who is created on first
    use. Records with numeric ids are merged into existing rows; all others
    are inserted as new rows.

    Returns:
        Number of entries written
    """
    entries = list(entries)
    engine = await create_schema(db_url)
    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_maker() as session:
            result = await session.execute(select(UserModel).where(UserModel.email == user_email))
            user = result.scalar_one_or_none()
            if user is None:
                user = UserModel(name=user_name, email=user_email)
                session.add(user)
                await session.flush()

            for entry in entries:
                await session.merge(entry_to_record(entry, user_id=user.id))
            await session.commit()
    finally:
        await engine.dispose()

    logger.info(f"Saved {len(entries)} entries to {db_url}")
    return len(entries)
