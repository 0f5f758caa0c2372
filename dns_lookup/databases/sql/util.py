from sqlalchemy import URL
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel, create_engine

from common.read_config import get_database_options

dbopts = get_database_options()
SYNC_DB_URL = URL.create(**dbopts.sync)
ASYNC_DB_URL = URL.create(**dbopts.a_sync)

engine = create_engine(SYNC_DB_URL)
async_engine = create_async_engine(ASYNC_DB_URL)
AsyncSessionLocal = async_sessionmaker(
    autocommit=False, autoflush=False, bind=async_engine, expire_on_commit=False
)


def create_db_and_tables():
    SQLModel.metadata.create_all(engine)


async def get_async_session():
    async with AsyncSessionLocal() as ses:
        yield ses
