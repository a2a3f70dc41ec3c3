from datetime import date, datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..config import Settings
from ..deps import get_app_settings, get_now
from ..domain.errors import UnknownCatalogKeyError
from ..schemas import PriceBreakdownRead, ReservationCheckRead, ReservationCheckRequest, TimeSlotRead
from ..usecases import reservations as reservation_usecase
from ..utils.audit_log import emit_audit_log
from ..utils.formatting import course_type_name, seat_type_name

router = APIRouter(prefix="", tags=["reservations"])


@router.post("/reservations/check", response_model=ReservationCheckRead)
async def check_reservation(
    payload: ReservationCheckRequest,
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
) -> ReservationCheckRead:
    try:
        check = reservation_usecase.check_reservation(
            settings,
            now=now,
            reserved_at=payload.reserved_at,
            party_size=payload.party_size,
            course_type=payload.course_type,
            seat_type=payload.seat_type,
        )
    except UnknownCatalogKeyError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    failed = [r.message for r in (check.datetime_result, check.party_size_result) if r and not r.is_valid]
    emit_audit_log(
        action="reservation.checked" if check.is_valid else "reservation.rejected",
        reserved_at=payload.reserved_at,
        party_size=payload.party_size,
        course_type=payload.course_type,
        seat_type=payload.seat_type,
        is_valid=check.is_valid,
        total=check.price.total if check.price else None,
        message="; ".join(failed) or None,
        extra=_display_names(payload.course_type, payload.seat_type),
    )
    return ReservationCheckRead.from_domain(check)


@router.get("/prices/quote", response_model=PriceBreakdownRead)
async def quote_price(
    party_size: int = Query(..., ge=1),
    course_type: Optional[str] = Query(default=None),
    seat_type: Optional[str] = Query(default=None),
    settings: Settings = Depends(get_app_settings),
) -> PriceBreakdownRead:
    try:
        price = reservation_usecase.quote_price(
            settings,
            course_type=course_type,
            seat_type=seat_type,
            party_size=party_size,
        )
    except UnknownCatalogKeyError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))

    emit_audit_log(
        action="price.quoted",
        party_size=party_size,
        course_type=course_type,
        seat_type=seat_type,
        total=price.total,
        extra=_display_names(course_type, seat_type),
    )
    return PriceBreakdownRead.from_domain(price)


@router.get("/reservations/time-slots", response_model=List[TimeSlotRead])
async def list_time_slots(
    day: date = Query(..., alias="date", description="Local calendar date (YYYY-MM-DD)"),
    settings: Settings = Depends(get_app_settings),
    now: datetime = Depends(get_now),
) -> list[TimeSlotRead]:
    slots = reservation_usecase.list_time_slots(settings, day=day, now=now)
    return [TimeSlotRead.from_domain(slot) for slot in slots]


def _display_names(course_type: str | None, seat_type: str | None) -> dict[str, str]:
    names: dict[str, str] = {}
    if course_type is not None:
        names["course_name"] = course_type_name(course_type)
    if seat_type is not None:
        names["seat_name"] = seat_type_name(seat_type)
    return names
