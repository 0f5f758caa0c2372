import json

import dns.asyncresolver
import dns.exception
import dns.rdatatype
import dns.resolver
import dns.rrset
import structlog

from common import read_config
from domain.models.dns.resolver import DomainRecord, IDomainResolver
from .enums import RecordType, APEX_RECORD_TYPES, WWW_RECORD_TYPES


def _name_to_text(name) -> str:
    return name.to_text(omit_final_dot=True)


def rdata_to_record(rrset: dns.rrset.RRset, rdata) -> DomainRecord:
    rtype = RecordType(dns.rdatatype.to_text(rdata.rdtype))
    record: DomainRecord = {
        "host": _name_to_text(rrset.name),
        "class": "IN",
        "ttl": int(rrset.ttl),
        "type": rtype.value,
    }
    match rtype:
        case RecordType.A:
            record["ip"] = rdata.address
        case RecordType.AAAA:
            record["ipv6"] = rdata.address
        case RecordType.NS | RecordType.CNAME:
            record["target"] = _name_to_text(rdata.target)
        case RecordType.MX:
            record["pri"] = int(rdata.preference)
            record["target"] = _name_to_text(rdata.exchange)
        case RecordType.TXT:
            record["txt"] = b"".join(rdata.strings).decode(
                "utf-8", errors="backslashreplace"
            )
        case RecordType.SOA:
            record["mname"] = _name_to_text(rdata.mname)
            record["rname"] = _name_to_text(rdata.rname)
            record["serial"] = int(rdata.serial)
            record["refresh"] = int(rdata.refresh)
            record["retry"] = int(rdata.retry)
            record["expire"] = int(rdata.expire)
            record["minimum-ttl"] = int(rdata.minimum)
    return record


def serialize_record(record: DomainRecord) -> str:
    return json.dumps(record, separators=(",", ":"))


def serialize_records(records: list[DomainRecord]) -> str:
    return json.dumps(records, separators=(",", ":"))


def sort_records(records: list[DomainRecord]) -> list[DomainRecord]:
    return sorted(records, key=serialize_record)


def create_async_resolver() -> dns.asyncresolver.Resolver:
    dnsopts = read_config.get_dns_options()
    if dnsopts.nameservers:
        resolver = dns.asyncresolver.Resolver(configure=False)
        resolver.nameservers = dnsopts.nameservers
    else:
        resolver = dns.asyncresolver.Resolver()
    resolver.lifetime = dnsopts.lifetime
    return resolver


class DNSResolver(IDomainResolver):
    resolver: dns.asyncresolver.Resolver

    def __init__(self, resolver: dns.asyncresolver.Resolver | None = None):
        if resolver is None:
            resolver = create_async_resolver()
        self.resolver = resolver
        self.logger = structlog.get_logger(self.__class__.__name__)

    async def lookup(self, domain: str) -> list[DomainRecord] | None:
        """Resolve the apex and www records of a domain.

        Returns None when the apex produced no records. Failed queries and
        empty answers are not told apart here, they are only logged.
        """
        apex_records = await self._query_all(domain, APEX_RECORD_TYPES)
        if not apex_records:
            self.logger.info("No DNS records found", domain=domain)
            return None
        www_records = await self._query_all(f"www.{domain}", WWW_RECORD_TYPES)
        return sort_records(apex_records + www_records)

    async def _query_all(
        self, name: str, rtypes: tuple[RecordType, ...]
    ) -> list[DomainRecord]:
        records = []
        for rtype in rtypes:
            records.extend(await self._query(name, rtype))
        return records

    async def _query(self, name: str, rtype: RecordType) -> list[DomainRecord]:
        try:
            answer = await self.resolver.resolve(name, rtype.value)
        except (dns.resolver.NXDOMAIN, dns.resolver.NoAnswer):
            return []
        except dns.exception.DNSException as e:
            self.logger.warning(
                "DNS query failed",
                name=name,
                rtype=rtype.value,
                error_type=type(e).__name__,
                error=str(e),
            )
            return []
        if answer.rrset is None:
            return []
        return [rdata_to_record(answer.rrset, rdata) for rdata in answer.rrset]


async def get_dns_resolver():
    return DNSResolver()
