import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from event_registration.config.database import create_engine
from event_registration.models.base import BaseModel
from event_registration.registrations.repository import orm_models  # noqa: F401


@pytest_asyncio.fixture
async def async_session(tmp_path):
    """A session on a throwaway SQLite database with the schema created."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'registrations.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    session = AsyncSession(engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()
        await engine.dispose()
