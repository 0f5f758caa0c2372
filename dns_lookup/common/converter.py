from datetime import datetime, timezone, tzinfo

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"


class DatetimeConverter:
    """SQLite keeps naive timestamps, so rows are stored as naive UTC."""

    @classmethod
    def to_storage(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(microsecond=0)
        return value.astimezone(timezone.utc).replace(tzinfo=None, microsecond=0)

    @classmethod
    def from_storage(cls, value: datetime, tz: tzinfo | None = None) -> datetime:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        if tz is None:
            return value
        return value.astimezone(tz)

    @classmethod
    def to_display(cls, value: datetime, tz: tzinfo | None = None) -> str:
        return cls.from_storage(value, tz=tz).strftime(DISPLAY_FORMAT)
