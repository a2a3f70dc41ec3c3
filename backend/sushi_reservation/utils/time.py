import calendar
from datetime import date, datetime, time, tzinfo
from typing import Union
from zoneinfo import ZoneInfo

JST = ZoneInfo("Asia/Tokyo")

DateTimeLike = Union[datetime, date, str, int, float, None]


def localize(dt: datetime, tz: tzinfo = JST) -> datetime:
    """Attach `tz` to naive datetimes, convert aware ones into `tz`."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def parse_datetime_like(value: DateTimeLike, tz: tzinfo = JST) -> datetime | None:
    """
    Coerce a datetime-ish value into an aware datetime in `tz`.

    Numbers are POSIX timestamps in seconds, not JavaScript milliseconds; a
    millisecond value lands far outside the representable range and is
    rejected. A plain date means midnight. Naive values are read in `tz`.
    Returns None for anything that cannot be read as an instant.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, datetime):
            return localize(value, tz)
        if isinstance(value, date):
            return datetime.combine(value, time.min, tzinfo=tz)
        if isinstance(value, (int, float)):
            return datetime.fromtimestamp(value, tz)
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            return localize(datetime.fromisoformat(text), tz)
    except (ValueError, OverflowError, OSError):
        return None
    return None


def add_months(dt: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's length."""
    month_index = dt.month - 1 + months
    year = dt.year + month_index // 12
    month = month_index % 12 + 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)
