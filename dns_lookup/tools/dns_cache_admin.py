import argparse
import asyncio
from datetime import datetime, timezone

from common import read_config
from common.converter import DatetimeConverter
from common.logger import setup_logging
from databases.sql import util as db_util
from databases.sql.create_table import create_table
from databases.sql.cache import repository as sql_cache_repo
from domain.models.cache import command as c_cmd
from domain.schemas.lookup import to_json
from app.dns_lookup.cache import DNSCacheClient
from app.dns_lookup.freshness import ElapsedTime
from app.dns_lookup.resolver import DNSResolver


def set_argparse(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description="inspect and maintain the DNS cache")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("list", help="list cached domains")
    show = subparsers.add_parser("show", help="print the cached row of a domain")
    show.add_argument("domain", type=str)
    delete = subparsers.add_parser("delete", help="evict a domain from the cache")
    delete.add_argument("domain", type=str)
    lookup = subparsers.add_parser("lookup", help="lookup a domain through the cache")
    lookup.add_argument("domain", type=str)
    lookup.add_argument("--update", action="store_true")
    return parser.parse_args(argv)


async def list_cache(repo: sql_cache_repo.DNSCacheRepository) -> list[str]:
    tz = read_config.get_timezone()
    now = datetime.now(timezone.utc)
    lines = []
    for entry in await repo.get(command=c_cmd.DNSCacheGetCommand()):
        age = ElapsedTime.between(DatetimeConverter.from_storage(entry.last_updated), now)
        lines.append(
            f"{entry.domain}\t{DatetimeConverter.to_display(entry.last_updated, tz=tz)}"
            f"\t{age.days}d {age.hours}h {age.minutes}m"
        )
    return lines


async def show_cache(repo: sql_cache_repo.DNSCacheRepository, domain: str) -> list[str]:
    results = await repo.get(command=c_cmd.DNSCacheGetCommand(domain=domain))
    if not results:
        return [f"not cached : {domain}"]
    entry = results[0]
    tz = read_config.get_timezone()
    return [
        f"domain:{entry.domain}, last_updated:"
        f"{DatetimeConverter.to_display(entry.last_updated, tz=tz)}",
        entry.data,
    ]


async def delete_cache(repo: sql_cache_repo.DNSCacheRepository, domain: str) -> list[str]:
    await repo.delete(command=c_cmd.DNSCacheDeleteCommand(domain=domain))
    return [f"deleted : {domain}"]


async def lookup_cache(
    repo: sql_cache_repo.DNSCacheRepository, domain: str, update: bool
) -> list[str]:
    client = DNSCacheClient(dnscache_repository=repo, resolver=DNSResolver())
    response = await client.execute(domain=domain, force_update=update)
    return [to_json(response)]


async def run(argp) -> list[str]:
    async for db in db_util.get_async_session():
        repo = sql_cache_repo.DNSCacheRepository(ses=db)
        await repo.ensure_schema()
        match argp.command:
            case "list":
                return await list_cache(repo)
            case "show":
                return await show_cache(repo, argp.domain)
            case "delete":
                return await delete_cache(repo, argp.domain)
            case "lookup":
                return await lookup_cache(repo, argp.domain, argp.update)
    return []


async def main():
    argp = set_argparse()
    setup_logging()
    create_table()
    for line in await run(argp):
        print(line)


if __name__ == "__main__":
    asyncio.run(main())
