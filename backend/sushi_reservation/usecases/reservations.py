from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Optional

from ..config import Settings
from ..domain.catalog import get_course, get_seat
from ..domain.errors import UnknownCourseTypeError, UnknownSeatTypeError
from ..domain.services import calculate_total_price, validate_party_size, validate_reservation_datetime
from ..models import PriceBreakdown, ValidationResult


@dataclass(frozen=True)
class ReservationCheck:
    datetime_result: Optional[ValidationResult]
    party_size_result: Optional[ValidationResult]
    price: Optional[PriceBreakdown]

    @property
    def is_valid(self) -> bool:
        results = (self.datetime_result, self.party_size_result)
        return all(result is not None and result.is_valid for result in results)


@dataclass(frozen=True)
class TimeSlot:
    starts_at: datetime
    result: ValidationResult


def ensure_known_keys(course_type: str | None, seat_type: str | None) -> None:
    """Strict catalog policy: reject keys the catalog does not know."""
    if course_type is not None and get_course(course_type) is None:
        raise UnknownCourseTypeError(course_type)
    if seat_type is not None and get_seat(seat_type) is None:
        raise UnknownSeatTypeError(seat_type)


def check_reservation(
    settings: Settings,
    *,
    now: datetime,
    reserved_at: object = None,
    party_size: int | None = None,
    course_type: str | None = None,
    seat_type: str | None = None,
) -> ReservationCheck:
    """
    Run every guard that has input to work on, the way the reservation form does
    on each change. The price is only quoted once a course and party size exist.
    """
    if settings.strict_catalog_keys:
        ensure_known_keys(course_type, seat_type)

    datetime_result = None
    if reserved_at is not None:
        datetime_result = validate_reservation_datetime(
            reserved_at,
            now=now,
            hours=settings.business_hours(),
            tz=settings.tzinfo(),
            advance_months=settings.max_advance_months,
        )

    party_size_result = None
    price = None
    if party_size is not None:
        party_size_result = validate_party_size(party_size, course_type, seat_type)
        if course_type is not None:
            price = calculate_total_price(course_type, seat_type, party_size)

    return ReservationCheck(
        datetime_result=datetime_result,
        party_size_result=party_size_result,
        price=price,
    )


def quote_price(
    settings: Settings,
    *,
    course_type: str | None,
    seat_type: str | None,
    party_size: int,
) -> PriceBreakdown:
    if settings.strict_catalog_keys:
        ensure_known_keys(course_type, seat_type)
    return calculate_total_price(course_type, seat_type, party_size)


def list_time_slots(
    settings: Settings,
    *,
    day: date,
    now: datetime,
    interval_minutes: int = 30,
) -> list[TimeSlot]:
    """Candidate start times from opening until last order, each with its verdict."""
    if interval_minutes < 1:
        raise ValueError("interval_minutes must be >= 1")
    hours = settings.business_hours()
    tz = settings.tzinfo()
    cursor = datetime.combine(day, time(hour=hours.start), tzinfo=tz)
    last_order = datetime.combine(day, time(hour=hours.last_order), tzinfo=tz)

    slots: list[TimeSlot] = []
    while cursor < last_order:
        result = validate_reservation_datetime(
            cursor,
            now=now,
            hours=hours,
            tz=tz,
            advance_months=settings.max_advance_months,
        )
        slots.append(TimeSlot(starts_at=cursor, result=result))
        cursor += timedelta(minutes=interval_minutes)
    return slots
