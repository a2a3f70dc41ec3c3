from datetime import datetime
from typing import Any, Iterator

import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from sushi_reservation.config import Settings
from sushi_reservation.deps import get_app_settings, get_now
from sushi_reservation.main import app
from sushi_reservation.routers import reservations as router
from sushi_reservation.schemas import ReservationCheckRequest
from sushi_reservation.utils.time import JST

NOW = datetime(2026, 1, 10, 12, 0, tzinfo=JST)


@pytest.fixture
def audit_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, Any]]:
    calls: list[dict[str, Any]] = []

    def fake_emit(**kwargs: Any) -> None:
        calls.append(kwargs)

    monkeypatch.setattr(router, "emit_audit_log", fake_emit)
    return calls


@pytest.fixture
def client(audit_calls: list[dict[str, Any]]) -> Iterator[TestClient]:
    app.dependency_overrides[get_now] = lambda: NOW
    app.dependency_overrides[get_app_settings] = lambda: Settings()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json() == {"status": "ok"}


def test_check_valid_reservation(client: TestClient, audit_calls: list[dict[str, Any]]) -> None:
    res = client.post(
        "/reservations/check",
        json={
            "reserved_at": "2026-01-11T13:00:00+09:00",
            "party_size": 3,
            "course_type": "miyabi",
            "seat_type": "table",
        },
    )
    assert res.status_code == 200
    body = res.json()
    assert body["is_valid"] is True
    assert body["reserved_at"] == {"is_valid": True, "message": "valid reservation date/time"}
    assert body["party_size"] == {"is_valid": True, "message": "valid party size"}
    assert body["price"] == {"base_price": 15000, "seat_price": 1500, "total": 16500, "formatted_total": "¥16,500"}
    assert audit_calls[0]["action"] == "reservation.checked"
    assert audit_calls[0]["total"] == 16500
    assert audit_calls[0]["extra"] == {"course_name": "Miyabi course", "seat_name": "Table seat"}


def test_check_rejection_is_a_normal_response(client: TestClient, audit_calls: list[dict[str, Any]]) -> None:
    res = client.post("/reservations/check", json={"reserved_at": "garbage", "party_size": 9})
    assert res.status_code == 200
    body = res.json()
    assert body["is_valid"] is False
    assert body["reserved_at"]["message"] == "invalid date/time"
    assert body["party_size"]["message"] == "must reserve for at most 8 people"
    assert body["price"] is None
    assert audit_calls[0]["action"] == "reservation.rejected"
    assert audit_calls[0]["message"] == "invalid date/time; must reserve for at most 8 people"
    assert audit_calls[0]["extra"] == {}


def test_check_strict_catalog_returns_422(client: TestClient) -> None:
    app.dependency_overrides[get_app_settings] = lambda: Settings(strict_catalog_keys=True)
    res = client.post("/reservations/check", json={"party_size": 2, "seat_type": "terrace"})
    assert res.status_code == 422
    assert res.json()["detail"] == "unknown seat type: terrace"


def test_quote_price(client: TestClient, audit_calls: list[dict[str, Any]]) -> None:
    res = client.get("/prices/quote", params={"course_type": "takumi", "seat_type": "counter", "party_size": 2})
    assert res.status_code == 200
    assert res.json() == {"base_price": 16000, "seat_price": 0, "total": 16000, "formatted_total": "¥16,000"}
    assert audit_calls == [
        {
            "action": "price.quoted",
            "party_size": 2,
            "course_type": "takumi",
            "seat_type": "counter",
            "total": 16000,
            "extra": {"course_name": "Takumi course", "seat_name": "Counter seat"},
        }
    ]


def test_quote_price_unknown_keys_are_free(client: TestClient) -> None:
    res = client.get("/prices/quote", params={"course_type": "unknown", "seat_type": "unknown", "party_size": 5})
    assert res.status_code == 200
    assert res.json()["total"] == 0


def test_quote_price_requires_positive_party_size(client: TestClient) -> None:
    res = client.get("/prices/quote", params={"course_type": "miyabi", "party_size": 0})
    assert res.status_code == 422


def test_time_slots(client: TestClient) -> None:
    res = client.get("/reservations/time-slots", params={"date": "2026-01-10"})
    assert res.status_code == 200
    slots = res.json()
    assert len(slots) == 20
    assert slots[0]["starts_at"] == "2026-01-10T11:00:00+09:00"
    assert slots[0]["available"] is False
    assert slots[0]["message"] == "past date/time not allowed"
    assert slots[2]["label"] == "2026年1月10日(土) 12:00"
    assert slots[2]["available"] is True


def test_catalog_lists(client: TestClient) -> None:
    seats = client.get("/catalog/seats").json()
    courses = client.get("/catalog/courses").json()
    assert [seat["key"] for seat in seats] == ["counter", "table", "private"]
    assert seats[2]["min_party_size"] == 2
    assert courses[0]["key"] == "takumi"
    assert courses[0]["formatted_price"] == "¥8,000"


@pytest.mark.asyncio
async def test_router_maps_unknown_course_to_http_error(audit_calls: list[dict[str, Any]]) -> None:
    payload = ReservationCheckRequest(party_size=2, course_type="omakase")
    with pytest.raises(HTTPException) as excinfo:
        await router.check_reservation(payload=payload, settings=Settings(strict_catalog_keys=True), now=NOW)
    assert excinfo.value.status_code == 422
    assert audit_calls == []
