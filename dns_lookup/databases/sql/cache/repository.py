from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete
from sqlalchemy.exc import IntegrityError

from domain.models.cache import cache, command, errors, repository


class DNSCacheRepository(repository.IDNSCacheRepository):
    session: AsyncSession

    def __init__(self, ses: AsyncSession):
        self.session = ses

    async def ensure_schema(self):
        conn = await self.session.connection()
        await conn.run_sync(
            lambda sync_conn: cache.DNSCache.__table__.create(
                sync_conn, checkfirst=True
            )
        )
        await self.session.commit()

    async def save(self, data: cache.DNSCache):
        ses = self.session
        ses.add(data)
        try:
            await ses.commit()
        except IntegrityError as e:
            await ses.rollback()
            raise errors.DuplicateCacheEntryError(data.domain) from e
        await ses.refresh(data)

    async def get(self, command: command.DNSCacheGetCommand) -> list[cache.DNSCache]:
        stmt = select(cache.DNSCache)
        if command.domain:
            stmt = stmt.where(cache.DNSCache.domain == command.domain)
        stmt = stmt.order_by(cache.DNSCache.domain)
        res = await self.session.execute(stmt)
        return res.scalars().all()

    async def delete(self, command: command.DNSCacheDeleteCommand):
        stmt = delete(cache.DNSCache).where(cache.DNSCache.domain == command.domain)
        await self.session.execute(stmt)
        await self.session.commit()
