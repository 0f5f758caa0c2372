from enum import Enum


class RecordType(Enum):
    SOA = "SOA"
    NS = "NS"
    A = "A"
    AAAA = "AAAA"
    CNAME = "CNAME"
    MX = "MX"
    TXT = "TXT"


APEX_RECORD_TYPES = (
    RecordType.SOA,
    RecordType.NS,
    RecordType.A,
    RecordType.AAAA,
    RecordType.CNAME,
    RecordType.MX,
    RecordType.TXT,
)
WWW_RECORD_TYPES = (
    RecordType.A,
    RecordType.AAAA,
    RecordType.CNAME,
)


class CacheState(Enum):
    MISS = "miss"
    STALE = "stale"
    FRESH = "fresh"
