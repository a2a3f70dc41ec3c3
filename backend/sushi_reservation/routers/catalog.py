from typing import List

from fastapi import APIRouter

from ..schemas import CourseTypeRead, SeatTypeRead
from ..usecases import catalog as catalog_usecase

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/seats", response_model=List[SeatTypeRead])
async def list_seats() -> list[SeatTypeRead]:
    return [
        SeatTypeRead.from_domain(key=entry["key"], seat=entry["seat"])
        for entry in catalog_usecase.list_seat_types()
    ]


@router.get("/courses", response_model=List[CourseTypeRead])
async def list_courses() -> list[CourseTypeRead]:
    return [
        CourseTypeRead.from_domain(key=entry["key"], course=entry["course"])
        for entry in catalog_usecase.list_course_types()
    ]
