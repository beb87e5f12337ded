"""
Pytest configuration and fixtures.
"""

import datetime
import sys
from pathlib import Path
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

# Add project root
sys.path.insert(0, str(Path(__file__).parent.parent))

from growthlog.domain.models import Category, TimeEntry
from growthlog.infra.db import Base
from growthlog.services.entry_store import EntryStore


@pytest_asyncio.fixture
async def db_engine():
    """Create an in-memory SQLite database for testing"""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Create a new session for a test"""
    async_session = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
def store():
    """An empty store, reset after the test"""
    store = EntryStore()
    yield store
    store.reset()


def make_entry(entry_id: str, day: datetime.date, start: str, end: str,
               category: Category = Category.GROWTH, activity: str = "Work") -> TimeEntry:
    """Entry with an explicit id, for bulk loading"""
    return TimeEntry(id=entry_id, date=day, start_time=start, end_time=end,
                     activity=activity, category=category)


@pytest.fixture(name="make_entry")
def make_entry_fixture():
    return make_entry
