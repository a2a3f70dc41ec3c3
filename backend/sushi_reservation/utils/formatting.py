from datetime import tzinfo

from ..domain.catalog import get_course, get_seat
from .time import JST, DateTimeLike, parse_datetime_like

_WEEKDAYS_JA = "月火水木金土日"


def format_price(amount: int) -> str:
    """Whole-yen amount with thousands separators, e.g. 16500 -> '¥16,500'."""
    return f"¥{amount:,}"


def format_datetime(value: DateTimeLike, tz: tzinfo = JST) -> str:
    """Render an instant the way the reservation pages show it; '' when unreadable."""
    dt = parse_datetime_like(value, tz)
    if dt is None:
        return ""
    return f"{dt.year}年{dt.month}月{dt.day}日({_WEEKDAYS_JA[dt.weekday()]}) {dt:%H:%M}"


def seat_type_name(key: str) -> str:
    seat = get_seat(key)
    return seat.name if seat is not None else key


def course_type_name(key: str) -> str:
    course = get_course(key)
    return course.name if course is not None else key
