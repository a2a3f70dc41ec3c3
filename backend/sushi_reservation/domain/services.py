from datetime import datetime, tzinfo
from typing import TypeGuard

from ..models import BusinessHours, CourseType, PriceBreakdown, SeatType, ValidationResult
from ..utils.time import JST, DateTimeLike, add_months, localize, parse_datetime_like
from .catalog import (
    BUSINESS_HOURS,
    MAX_ADVANCE_MONTHS,
    MAX_PARTY_SIZE,
    MIN_PARTY_SIZE,
    get_course,
    get_seat,
)


def validate_reservation_datetime(
    candidate: DateTimeLike,
    *,
    now: datetime,
    hours: BusinessHours = BUSINESS_HOURS,
    tz: tzinfo = JST,
    advance_months: int = MAX_ADVANCE_MONTHS,
) -> ValidationResult:
    """
    Pure validation of a requested reservation instant against `now`.
    Checks run in order and the first failure is returned. Never raises.
    """
    reserved_at = parse_datetime_like(candidate, tz)
    if reserved_at is None:
        return ValidationResult.fail("invalid date/time")

    now_local = localize(now, tz)
    if reserved_at < now_local:
        return ValidationResult.fail("past date/time not allowed")
    if reserved_at > add_months(now_local, advance_months):
        return ValidationResult.fail("only reservations within the next three months are accepted")

    hour = reserved_at.hour
    if hour < hours.start or hour >= hours.end:
        return ValidationResult.fail(f"must be within business hours {hours.start}:00–{hours.end}:00")
    if hour >= hours.last_order:
        return ValidationResult.fail(f"must be before last order at {hours.last_order}:00")

    return ValidationResult.ok("valid reservation date/time")


def validate_party_size(
    size: object,
    course_type: CourseType | str | None = None,
    seat_type: SeatType | str | None = None,
) -> ValidationResult:
    """
    Pure validation of a party size, narrowed by course and seat when known.
    Unknown course or seat keys add no constraint.
    """
    if not _is_headcount(size):
        return ValidationResult.fail("invalid party size")
    if size < MIN_PARTY_SIZE:
        return ValidationResult.fail(f"must reserve for at least {MIN_PARTY_SIZE} person")
    if size > MAX_PARTY_SIZE:
        return ValidationResult.fail(f"must reserve for at most {MAX_PARTY_SIZE} people")

    course = get_course(course_type)
    if course is not None and size < course.min_party_size:
        return ValidationResult.fail(f"{course.name} requires at least {course.min_party_size} people")

    seat = get_seat(seat_type)
    if seat is not None:
        if size > seat.max_party_size:
            return ValidationResult.fail(f"{seat.name} allows at most {seat.max_party_size} people")
        if size < seat.min_party_size:
            return ValidationResult.fail(f"{seat.name} requires at least {seat.min_party_size} people")

    return ValidationResult.ok("valid party size")


def calculate_total_price(
    course_type: CourseType | str | None,
    seat_type: SeatType | str | None,
    party_size: object,
) -> PriceBreakdown:
    """Unknown course or seat keys, and a non-integer party size, contribute zero."""
    if not _is_headcount(party_size):
        return PriceBreakdown(base_price=0, seat_price=0, total=0)
    course = get_course(course_type)
    seat = get_seat(seat_type)
    base_price = course.price_per_person * party_size if course is not None else 0
    seat_price = seat.surcharge_per_person * party_size if seat is not None else 0
    return PriceBreakdown(base_price=base_price, seat_price=seat_price, total=base_price + seat_price)


def _is_headcount(value: object) -> TypeGuard[int]:
    # bool is an int subclass but never a guest count
    return isinstance(value, int) and not isinstance(value, bool)
