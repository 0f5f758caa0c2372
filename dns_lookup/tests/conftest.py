import pytest

from sqlalchemy import URL
from sqlalchemy.ext.asyncio import (
    create_async_engine,
    async_sessionmaker,
)
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel, create_engine

from main import app
from tests.db_settings import get_databases
from domain.models.cache import cache
from databases.sql.util import get_async_session
from app.dns_lookup.resolver import get_dns_resolver
from tests.fakes import EXAMPLE_RECORDS, FakeResolver


@pytest.fixture
def session_factory(tmp_path):
    databases = get_databases(f"{tmp_path}/test_dns_cache.sqlite")
    engine = create_engine(URL.create(**databases["sync"]))
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    engine.dispose()

    async_engine = create_async_engine(
        URL.create(**databases["a_sync"]), poolclass=NullPool
    )
    return async_sessionmaker(
        autocommit=False, autoflush=False, bind=async_engine, expire_on_commit=False
    )

@pytest.fixture
def override_db(session_factory):
    async def get_db_for_testing():
        async with session_factory() as ses:
            yield ses

    # route the app to the throwaway database
    app.dependency_overrides[get_async_session] = get_db_for_testing
    yield session_factory
    app.dependency_overrides.pop(get_async_session, None)

@pytest.fixture
async def test_db(session_factory):
    async with session_factory() as ses:
        yield ses

@pytest.fixture
def fake_resolver():
    resolver = FakeResolver(results={"example.com": EXAMPLE_RECORDS})
    app.dependency_overrides[get_dns_resolver] = lambda: resolver
    yield resolver
    app.dependency_overrides.pop(get_dns_resolver, None)
