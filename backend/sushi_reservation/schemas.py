from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_serializer

from .models import CourseSpec, CourseType, PriceBreakdown, SeatSpec, SeatType, ValidationResult
from .usecases.reservations import ReservationCheck, TimeSlot
from .utils.formatting import format_datetime, format_price


class ValidationResultRead(BaseModel):
    is_valid: bool
    message: str

    @classmethod
    def from_domain(cls, result: ValidationResult) -> "ValidationResultRead":
        return cls(is_valid=result.is_valid, message=result.message)


class PriceBreakdownRead(BaseModel):
    base_price: int
    seat_price: int
    total: int
    formatted_total: str

    @classmethod
    def from_domain(cls, price: PriceBreakdown) -> "PriceBreakdownRead":
        return cls(
            base_price=price.base_price,
            seat_price=price.seat_price,
            total=price.total,
            formatted_total=format_price(price.total),
        )


class ReservationCheckRequest(BaseModel):
    reserved_at: Optional[str] = Field(default=None, description="ISO 8601 date/time")
    party_size: Optional[int] = None
    course_type: Optional[str] = None
    seat_type: Optional[str] = None


class ReservationCheckRead(BaseModel):
    is_valid: bool
    reserved_at: Optional[ValidationResultRead] = None
    party_size: Optional[ValidationResultRead] = None
    price: Optional[PriceBreakdownRead] = None

    @classmethod
    def from_domain(cls, check: ReservationCheck) -> "ReservationCheckRead":
        return cls(
            is_valid=check.is_valid,
            reserved_at=ValidationResultRead.from_domain(check.datetime_result) if check.datetime_result else None,
            party_size=(
                ValidationResultRead.from_domain(check.party_size_result) if check.party_size_result else None
            ),
            price=PriceBreakdownRead.from_domain(check.price) if check.price else None,
        )


class TimeSlotRead(BaseModel):
    starts_at: datetime
    label: str
    available: bool
    message: str

    @field_serializer("starts_at")
    def _ser_datetime(self, dt: datetime) -> str:
        return dt.isoformat()

    @classmethod
    def from_domain(cls, slot: TimeSlot) -> "TimeSlotRead":
        return cls(
            starts_at=slot.starts_at,
            label=format_datetime(slot.starts_at, slot.starts_at.tzinfo),
            available=slot.result.is_valid,
            message=slot.result.message,
        )


class SeatTypeRead(BaseModel):
    key: SeatType
    name: str
    surcharge_per_person: int
    min_party_size: int
    max_party_size: int

    @classmethod
    def from_domain(cls, *, key: SeatType, seat: SeatSpec) -> "SeatTypeRead":
        return cls(
            key=key,
            name=seat.name,
            surcharge_per_person=seat.surcharge_per_person,
            min_party_size=seat.min_party_size,
            max_party_size=seat.max_party_size,
        )


class CourseTypeRead(BaseModel):
    key: CourseType
    name: str
    description: str
    price_per_person: int
    min_party_size: int
    formatted_price: str

    @classmethod
    def from_domain(cls, *, key: CourseType, course: CourseSpec) -> "CourseTypeRead":
        return cls(
            key=key,
            name=course.name,
            description=course.description,
            price_per_person=course.price_per_person,
            min_party_size=course.min_party_size,
            formatted_price=format_price(course.price_per_person),
        )
