import uuid

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
import structlog


from databases.sql.util import get_async_session
from databases.sql.cache import repository as sql_cache_repo
from domain.schemas.lookup import ErrorResponse, LookupRequest, to_json
from app.dns_lookup.cache import DNSCacheClient
from app.dns_lookup.resolver import DNSResolver, get_dns_resolver

router = APIRouter(prefix="/api", tags=["api"])


@router.get(
    "/lookup/",
    response_class=PlainTextResponse,
    description="Returns the cached DNS records of a domain and its www subdomain.",
)
async def api_get_dns_lookup(
    request: Request,
    lookupreq: LookupRequest = Depends(),
    db: AsyncSession = Depends(get_async_session),
    resolver: DNSResolver = Depends(get_dns_resolver),
):
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        router_path=request.url.path,
        request_id=str(uuid.uuid4()),
    )
    log = structlog.get_logger(__name__)
    log.info("API Lookup called", lookupreq=lookupreq.model_dump())
    if not lookupreq.domain:
        log.warning("Domain parameter is required.")
        return PlainTextResponse(to_json(ErrorResponse.missing_domain_parameter()))

    client = DNSCacheClient(
        dnscache_repository=sql_cache_repo.DNSCacheRepository(ses=db),
        resolver=resolver,
    )
    response = await client.execute(
        domain=lookupreq.domain, force_update=lookupreq.force_update
    )
    return PlainTextResponse(to_json(response))
