from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SeatType(StrEnum):
    COUNTER = "counter"
    TABLE = "table"
    PRIVATE = "private"


class CourseType(StrEnum):
    TAKUMI = "takumi"
    MIYABI = "miyabi"


@dataclass(frozen=True)
class BusinessHours:
    start: int
    end: int
    last_order: int

    def __post_init__(self) -> None:
        if not self.start < self.last_order < self.end:
            raise ValueError("business hours must satisfy start < last_order < end")


@dataclass(frozen=True)
class SeatSpec:
    name: str
    surcharge_per_person: int
    max_party_size: int
    min_party_size: int = 1


@dataclass(frozen=True)
class CourseSpec:
    name: str
    description: str
    price_per_person: int
    min_party_size: int


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "ValidationResult":
        return cls(is_valid=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "ValidationResult":
        return cls(is_valid=False, message=message)


@dataclass(frozen=True)
class PriceBreakdown:
    base_price: int
    seat_price: int
    total: int
