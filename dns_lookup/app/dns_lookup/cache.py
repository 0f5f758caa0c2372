from datetime import datetime, tzinfo
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
import structlog

from common import read_config
from common.converter import DatetimeConverter
from domain.models.cache import (
    cache as c_cache,
    command as c_cmd,
    errors as c_errors,
    repository as i_cacherepo,
)
from domain.models.dns.resolver import DomainRecord, IDomainResolver
from domain.schemas.lookup import ErrorResponse, LookupResponse, LookupResult
from . import freshness
from .enums import CacheState
from .resolver import serialize_records


class DNSCacheClient:
    dnscache_repository: i_cacherepo.IDNSCacheRepository
    resolver: IDomainResolver
    cache_options: read_config.CacheOptions
    tz: tzinfo

    def __init__(
        self,
        dnscache_repository: i_cacherepo.IDNSCacheRepository,
        resolver: IDomainResolver,
        cache_options: read_config.CacheOptions | None = None,
        tz: tzinfo | None = None,
        clock: Callable[[tzinfo], datetime] | None = None,
    ):
        self.dnscache_repository = dnscache_repository
        self.resolver = resolver
        self.cache_options = cache_options or read_config.get_cache_options()
        self.tz = tz or read_config.get_timezone()
        self.clock = clock or datetime.now
        self.log = structlog.get_logger(__name__)

    async def execute(self, domain: str, force_update: bool = False) -> LookupResponse:
        log = self.log.bind(domain=domain)
        try:
            await self.dnscache_repository.ensure_schema()
            return await self._resolve_with_cache(domain, force_update, log)
        except (SQLAlchemyError, c_errors.CacheStoreError) as e:
            log.error(
                "DNS cache store failed", error_type=type(e).__name__, error=str(e)
            )
            return ErrorResponse.store_unavailable()

    async def _resolve_with_cache(
        self, domain: str, force_update: bool, log
    ) -> LookupResponse:
        # miss -> populate -> read, stale -> evict -> populate -> read
        for _ in range(self.cache_options.max_passes):
            entry = await self._get_cache(domain)
            if entry is None:
                log.info("DNS cache miss", state=CacheState.MISS.value)
                records = await self.resolver.lookup(domain)
                if not records:
                    log.warning("DNS lookup found no records")
                    return ErrorResponse.dns_not_found(domain)
                await self._set_cache(domain, records, log)
                continue

            now = self.clock(self.tz)
            last_updated = DatetimeConverter.from_storage(entry.last_updated, tz=self.tz)
            result = freshness.evaluate(
                last_updated=last_updated,
                now=now,
                force_update=force_update,
                options=self.cache_options,
            )
            if result.is_stale:
                log.info(
                    "DNS cache stale",
                    state=CacheState.STALE.value,
                    force_update=force_update,
                    last_updated=str(last_updated),
                )
                await self.dnscache_repository.delete(
                    command=c_cmd.DNSCacheDeleteCommand(domain=domain)
                )
                force_update = False
                continue

            log.info("DNS cache hit", state=CacheState.FRESH.value)
            return LookupResult(
                domain=entry.domain,
                data=entry.data,
                last_updated=DatetimeConverter.to_display(entry.last_updated, tz=self.tz),
                minutes_till_manual_update=result.minutes_till_manual_update,
                hours_till_auto_update=result.hours_till_auto_update,
            )
        raise c_errors.CacheIntegrityError(
            f"cache did not settle after {self.cache_options.max_passes} passes, {domain}"
        )

    async def _get_cache(self, domain: str) -> c_cache.DNSCache | None:
        results = await self.dnscache_repository.get(
            command=c_cmd.DNSCacheGetCommand(domain=domain)
        )
        if not results:
            return None
        if len(results) > 1:
            raise c_errors.CacheIntegrityError(
                f"found {len(results)} cache entries, {domain}"
            )
        return results[0]

    async def _set_cache(self, domain: str, records: list[DomainRecord], log):
        entry = c_cache.DNSCache(
            domain=domain,
            data=serialize_records(records),
            last_updated=DatetimeConverter.to_storage(self.clock(self.tz)),
        )
        try:
            await self.dnscache_repository.save(data=entry)
        except c_errors.DuplicateCacheEntryError:
            log.info("DNS cache already populated by another request")
