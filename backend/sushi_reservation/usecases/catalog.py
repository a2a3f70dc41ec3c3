from typing import Any, Dict, List

from ..domain.catalog import COURSE_TYPES, SEAT_TYPES


def list_seat_types() -> List[Dict[str, Any]]:
    return [{"key": key, "seat": seat} for key, seat in SEAT_TYPES.items()]


def list_course_types() -> List[Dict[str, Any]]:
    return [{"key": key, "course": course} for key, course in COURSE_TYPES.items()]
