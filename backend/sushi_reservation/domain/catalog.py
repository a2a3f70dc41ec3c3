from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..models import BusinessHours, CourseSpec, CourseType, SeatSpec, SeatType

BUSINESS_HOURS = BusinessHours(start=11, end=22, last_order=21)

MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 8
MAX_ADVANCE_MONTHS = 3

SEAT_TYPES: Mapping[SeatType, SeatSpec] = MappingProxyType(
    {
        SeatType.COUNTER: SeatSpec(name="Counter seat", surcharge_per_person=0, max_party_size=6),
        SeatType.TABLE: SeatSpec(name="Table seat", surcharge_per_person=500, max_party_size=8),
        SeatType.PRIVATE: SeatSpec(
            name="Private room",
            surcharge_per_person=1000,
            max_party_size=8,
            min_party_size=2,
        ),
    }
)

COURSE_TYPES: Mapping[CourseType, CourseSpec] = MappingProxyType(
    {
        CourseType.TAKUMI: CourseSpec(
            name="Takumi course",
            description="Chef's selection built around premium toppings",
            price_per_person=8000,
            min_party_size=2,
        ),
        CourseType.MIYABI: CourseSpec(
            name="Miyabi course",
            description="Well-balanced signature course",
            price_per_person=5000,
            min_party_size=1,
        ),
    }
)


def get_seat(key: SeatType | str | None) -> SeatSpec | None:
    """Resolve a seat key. Unknown keys resolve to None instead of raising."""
    if key is None:
        return None
    try:
        return SEAT_TYPES[SeatType(key)]
    except ValueError:
        return None


def get_course(key: CourseType | str | None) -> CourseSpec | None:
    """Resolve a course key. Unknown keys resolve to None instead of raising."""
    if key is None:
        return None
    try:
        return COURSE_TYPES[CourseType(key)]
    except ValueError:
        return None
