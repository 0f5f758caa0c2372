from datetime import datetime, timezone

from pydantic import BaseModel

from common.read_config import CacheOptions


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class ElapsedTime(BaseModel):
    days: int = 0
    hours: int = 0
    minutes: int = 0

    @classmethod
    def between(cls, start: datetime, end: datetime) -> "ElapsedTime":
        # real elapsed time, DST shifts included
        delta = abs(_as_utc(end) - _as_utc(start))
        return cls(
            days=delta.days,
            hours=delta.seconds // 3600,
            minutes=(delta.seconds % 3600) // 60,
        )


class Freshness(BaseModel):
    is_stale: bool = False
    minutes_till_manual_update: int | None = None
    hours_till_auto_update: int | None = None


def diff_in_minutes(elapsed: ElapsedTime) -> int:
    # hours are added as-is, not converted to minutes
    minutes = 0
    if elapsed.days > 0:
        minutes += elapsed.days * 24 * 60
    if elapsed.hours > 0:
        minutes += elapsed.hours
    if elapsed.minutes > 0:
        minutes += elapsed.minutes
    return minutes


def evaluate(
    last_updated: datetime,
    now: datetime,
    force_update: bool,
    options: CacheOptions | None = None,
) -> Freshness:
    """Decide whether a cached entry must be refreshed.

    A manual update only looks at the minutes component of the elapsed time,
    the automatic refresh at the whole days.
    """
    if options is None:
        options = CacheOptions()
    elapsed = ElapsedTime.between(last_updated, now)
    if elapsed.days >= options.auto_update_days or (
        force_update and elapsed.minutes >= options.manual_update_minutes
    ):
        return Freshness(is_stale=True)

    freshness = Freshness()
    minutes_since_update = diff_in_minutes(elapsed)
    if minutes_since_update <= options.manual_update_minutes:
        freshness.minutes_till_manual_update = (
            options.manual_update_minutes + 1 - minutes_since_update
        )
    if elapsed.hours < options.auto_update_hours:
        freshness.hours_till_auto_update = options.auto_update_hours - elapsed.hours
    return freshness
