from __future__ import annotations
from datetime import date, datetime, time, tzinfo

from liftlog.settings import get_settings

# Last representable millisecond of a day. Queries compare with a strict `<`,
# so a row stamped exactly at this instant falls outside its own day.
END_OF_DAY = time(23, 59, 59, 999_000)

def local_day(value: date | datetime, tz: tzinfo | None = None) -> tuple[date, tzinfo]:
    """
    Calendar day of `value` as seen by the caller.

    Aware datetimes keep their own zone. Naive datetimes and bare dates are
    read in `tz`, falling back to the configured TIMEZONE.
    """
    zone = tz or get_settings().tz
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.date(), value.tzinfo
        return value.date(), zone
    return value, zone

def day_bounds(value: date | datetime, tz: tzinfo | None = None) -> tuple[datetime, datetime]:
    """Return (start_of_day, end_of_day) for the caller's local calendar day."""
    day, zone = local_day(value, tz)
    start = datetime.combine(day, time.min, tzinfo=zone)
    end = datetime.combine(day, END_OF_DAY, tzinfo=zone)
    return start, end

def as_local(value: datetime, tz: tzinfo | None = None) -> datetime:
    """Attach `tz` (else TIMEZONE) to a naive datetime so it is stored as the same local instant reads use."""
    if value.tzinfo is not None:
        return value
    return value.replace(tzinfo=tz or get_settings().tz)
