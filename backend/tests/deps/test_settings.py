from datetime import datetime
from typing import Iterator
from zoneinfo import ZoneInfo

import pytest
from sushi_reservation.config import Settings, get_settings
from sushi_reservation.deps import get_now
from sushi_reservation.models import BusinessHours


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults_match_restaurant_hours() -> None:
    settings = get_settings()
    assert settings.business_hours() == BusinessHours(start=11, end=22, last_order=21)
    assert settings.tzinfo() == ZoneInfo("Asia/Tokyo")
    assert settings.max_advance_months == 3
    assert settings.strict_catalog_keys is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMEZONE", "UTC")
    monkeypatch.setenv("BUSINESS_HOURS_START", "17")
    monkeypatch.setenv("BUSINESS_HOURS_END", "23")
    monkeypatch.setenv("LAST_ORDER_HOUR", "22")
    monkeypatch.setenv("MAX_ADVANCE_MONTHS", "1")
    monkeypatch.setenv("STRICT_CATALOG_KEYS", "1")
    settings = get_settings()
    assert settings.business_hours() == BusinessHours(start=17, end=23, last_order=22)
    assert settings.timezone == "UTC"
    assert settings.max_advance_months == 1
    assert settings.strict_catalog_keys is True


def test_invalid_business_window_fails_when_used() -> None:
    settings = Settings(business_start=11, business_end=22, last_order=23)
    with pytest.raises(ValueError):
        settings.business_hours()


def test_get_now_is_aware_in_business_timezone() -> None:
    now = get_now(Settings(timezone="Asia/Tokyo"))
    assert isinstance(now, datetime)
    assert now.tzinfo == ZoneInfo("Asia/Tokyo")
