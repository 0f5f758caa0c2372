from datetime import datetime

import pytest

from domain.models.cache import cache, command, errors
from databases.sql.cache.repository import DNSCacheRepository

STORED_AT = datetime(2024, 3, 10, 12, 30, 0)


def create_entry(domain: str = "example.com") -> cache.DNSCache:
    return cache.DNSCache(domain=domain, data="[]", last_updated=STORED_AT)


class TestDNSCacheRepository:

    async def test_naive_timestamp_is_stored_and_read_back(
        self, test_db, session_factory
    ):
        repo = DNSCacheRepository(ses=test_db)
        await repo.ensure_schema()
        await repo.save(data=create_entry())

        async with session_factory() as other:
            rows = await DNSCacheRepository(ses=other).get(
                command=command.DNSCacheGetCommand(domain="example.com")
            )

        assert len(rows) == 1
        assert rows[0].last_updated == STORED_AT
        assert rows[0].last_updated.tzinfo is None

    async def test_duplicate_domain_is_rejected(self, test_db, session_factory):
        repo = DNSCacheRepository(ses=test_db)
        await repo.ensure_schema()
        await repo.save(data=create_entry())

        async with session_factory() as other:
            with pytest.raises(errors.DuplicateCacheEntryError):
                await DNSCacheRepository(ses=other).save(data=create_entry())

    async def test_delete_removes_only_that_domain(self, test_db):
        repo = DNSCacheRepository(ses=test_db)
        await repo.ensure_schema()
        await repo.save(data=create_entry("example.com"))
        await repo.save(data=create_entry("example.org"))

        await repo.delete(command=command.DNSCacheDeleteCommand(domain="example.com"))

        rows = await repo.get(command=command.DNSCacheGetCommand())
        assert [row.domain for row in rows] == ["example.org"]
