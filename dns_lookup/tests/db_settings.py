def get_databases(database: str) -> dict:
    return {
        "sync": {
            "drivername": "sqlite",
            "database": database,
        },
        "a_sync": {
            "drivername": "sqlite+aiosqlite",
            "database": database,
        },
    }
