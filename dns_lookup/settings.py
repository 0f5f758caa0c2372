from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DATABASES = {
    "sync": {
        "drivername": "sqlite",
        "database": f"{BASE_DIR}/db/dns_cache.sqlite",
    },
    "a_sync": {
        "drivername": "sqlite+aiosqlite",
        "database": f"{BASE_DIR}/db/dns_cache.sqlite",
    },
}
TIMEZONE = "Europe/London"
LOG_OPTIONS = {
    "level": "INFO",
    "json_format": True,
}
CACHE_OPTIONS = {
    "manual_update_minutes": 5,
    "auto_update_days": 1,
    "auto_update_hours": 24,
    "max_passes": 4,
}
DNS_OPTIONS = {
    "lifetime": 5.0,
    "nameservers": [],
}
