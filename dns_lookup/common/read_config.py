from zoneinfo import ZoneInfo

from pydantic import BaseModel

import settings


class DatabaseOptions(BaseModel):
    sync: dict
    a_sync: dict


class CacheOptions(BaseModel):
    manual_update_minutes: int = 5
    auto_update_days: int = 1
    auto_update_hours: int = 24
    max_passes: int = 4


class DNSOptions(BaseModel):
    lifetime: float = 5.0
    nameservers: list[str] = []


class LogOptions(BaseModel):
    level: str = "INFO"
    json_format: bool = True


def get_database_options() -> DatabaseOptions:
    return DatabaseOptions(**settings.DATABASES)


def get_cache_options() -> CacheOptions:
    return CacheOptions(**settings.CACHE_OPTIONS)


def get_dns_options() -> DNSOptions:
    return DNSOptions(**settings.DNS_OPTIONS)


def get_log_options() -> LogOptions:
    return LogOptions(**settings.LOG_OPTIONS)


def get_timezone() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)
